"""Color wheel image generation.

This module is UI-free so it can be tested and used independently of any
widget toolkit. Images are plain RGBA8 buffers; Pillow is used only to hand
them to callers as images or PNG bytes.
"""

from __future__ import annotations

import colorsys
import io
import logging
import math
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image

from .errors import InvalidGeometryError

logger = logging.getLogger(__name__)

RGBA8 = Tuple[int, int, int, int]


@dataclass(frozen=True)
class WheelImage:
    """Immutable RGBA8 raster, row-major, 4 bytes per pixel."""

    width: int
    height: int
    rgba: bytes

    def __post_init__(self) -> None:
        require_pixel_dim("width", self.width)
        require_pixel_dim("height", self.height)
        expected = self.width * self.height * 4
        if len(self.rgba) != expected:
            raise ValueError(f"RGBA buffer has {len(self.rgba)} bytes, expected {expected}")

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> RGBA8:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        i = (y * self.width + x) * 4
        d = self.rgba
        return (d[i], d[i + 1], d[i + 2], d[i + 3])

    def to_pil(self) -> Image.Image:
        """Return a new Pillow image (mode RGBA) with a copy of the pixels."""
        return Image.frombytes("RGBA", self.size, self.rgba)

    def to_png_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.to_pil().save(buf, format="PNG")
        return buf.getvalue()

    def save_png(self, path: str | Path) -> None:
        write_bytes_atomic(Path(path), self.to_png_bytes())

    @classmethod
    def from_pil(cls, img: Image.Image) -> "WheelImage":
        rgba = img.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, rgba=rgba.tobytes())


def require_pixel_dim(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGeometryError(f"{name} must be an int, got {value!r}")
    if value <= 0:
        raise InvalidGeometryError(f"{name} must be positive, got {value!r}")
    return value


def build_wheel_rgba_bytes(*, width: int, height: int) -> bytes:
    """Build the raw RGBA8 wheel buffer for a *width* x *height* raster."""

    half_w = width / 2.0
    half_h = height / 2.0
    max_radius = min(width, height) / 2.0
    two_pi = 2.0 * math.pi

    data = bytearray(width * height * 4)
    idx = 0
    for y in range(height):
        dy = y - half_h
        for x in range(width):
            dx = x - half_w
            dist = math.hypot(dx, dy)

            if dist > max_radius:
                # bytearray is zero-filled: already transparent black.
                idx += 4
                continue

            angle = math.atan2(dy, dx)
            if angle < 0:
                angle += two_pi
            hue = (angle / two_pi) % 1.0
            sat = min(dist / max_radius, 1.0)
            r, g, b = colorsys.hsv_to_rgb(hue, sat, 1.0)

            data[idx] = int(round(r * 255))
            data[idx + 1] = int(round(g * 255))
            data[idx + 2] = int(round(b * 255))
            data[idx + 3] = 255
            idx += 4

    return bytes(data)


def generate_wheel_image(pixel_width: int, pixel_height: int) -> WheelImage:
    """Generate a hue/saturation wheel at full brightness.

    Hue follows the angle around the center (0 = red, to the right),
    saturation the distance from the center normalised by the inscribed
    circle's radius. Pixels outside that circle are fully transparent.
    """

    width = require_pixel_dim("pixel_width", pixel_width)
    height = require_pixel_dim("pixel_height", pixel_height)

    img = WheelImage(width=width, height=height, rgba=build_wheel_rgba_bytes(width=width, height=height))
    logger.debug("Generated color wheel image %dx%d", width, height)
    return img


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Atomic write: unique temp file in the target dir, then replace."""

    tmp_fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(tmp_fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    finally:
        try:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
        except OSError as exc:
            logger.debug("Failed to remove temp file %s: %s", tmp_path, exc)
