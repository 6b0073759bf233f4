"""Color value type and RGB/hex helpers."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import Tuple

# RGB color is (0..255, 0..255, 0..255)
ColorRGB = Tuple[int, int, int]


def _to8(v: float) -> int:
    return max(0, min(255, int(round(float(v) * 255.0))))


@dataclass(frozen=True)
class ColorSample:
    """A wheel color in HSB form.

    hue: 0..1 (exclusive of 1)
    saturation: 0..1
    brightness: always 1.0 for wheel samples
    alpha: 0.0 (transparent) or 1.0
    """

    hue: float
    saturation: float
    brightness: float = 1.0
    alpha: float = 1.0

    @property
    def rgb(self) -> Tuple[float, float, float]:
        """RGB floats in 0..1."""
        return colorsys.hsv_to_rgb(self.hue, self.saturation, self.brightness)

    @property
    def rgb8(self) -> ColorRGB:
        r, g, b = self.rgb
        return (_to8(r), _to8(g), _to8(b))

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.rgb8)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, *, alpha: float = 1.0) -> "ColorSample":
        h, s, v = colorsys.rgb_to_hsv(int(r) / 255.0, int(g) / 255.0, int(b) / 255.0)
        return cls(hue=h, saturation=s, brightness=v, alpha=alpha)


def rgb_to_hex(rgb: ColorRGB) -> str:
    """Convert RGB tuple to hex string."""
    r, g, b = (int(rgb[0]) & 0xFF, int(rgb[1]) & 0xFF, int(rgb[2]) & 0xFF)
    return f"#{r:02x}{g:02x}{b:02x}"
