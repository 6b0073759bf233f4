"""View geometry for the color wheel.

Radius and center are derived on access from the bounds size, so a geometry
snapshot can never carry a stale radius.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidGeometryError

Point = Tuple[float, float]


def require_positive(name: str, value: float) -> float:
    """Return *value* as float, or raise InvalidGeometryError."""

    if isinstance(value, bool):
        raise InvalidGeometryError(f"{name} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidGeometryError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v) or v <= 0:
        raise InvalidGeometryError(f"{name} must be positive and finite, got {value!r}")
    return v


def _require_non_negative(name: str, value: float) -> float:
    if isinstance(value, bool):
        raise InvalidGeometryError(f"{name} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidGeometryError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v) or v < 0:
        raise InvalidGeometryError(f"{name} must be non-negative and finite, got {value!r}")
    return v


@dataclass(frozen=True)
class WheelGeometry:
    width: float
    height: float
    border_width: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", require_positive("width", self.width))
        object.__setattr__(self, "height", require_positive("height", self.height))
        object.__setattr__(self, "border_width", _require_non_negative("border_width", self.border_width))

    @property
    def bounds_size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2.0

    @property
    def center(self) -> Point:
        return (self.width / 2.0, self.height / 2.0)

    @property
    def usable_radius(self) -> float:
        """Radius of the disc left visible inside the border band."""
        return max(0.0, self.radius - self.border_width)

    def contains(self, point: Point) -> bool:
        """Closed bounds rectangle test (edges count as inside)."""
        x, y = point
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height

    def distance_from_center(self, point: Point) -> float:
        cx, cy = self.center
        return math.hypot(point[0] - cx, point[1] - cy)
