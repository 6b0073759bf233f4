"""Point <-> color mapping against a wheel geometry.

A point is outside the wheel when it lies outside the bounds rectangle,
inside the border band, or beyond the inscribed circle. All distance
comparisons are strict (`>`), matching the image generator, so a point
exactly on the circle still yields a color.
"""

from __future__ import annotations

import math
from typing import Optional

from .color import ColorSample
from .geometry import Point, WheelGeometry
from .wheel_image import WheelImage

_TWO_PI = 2.0 * math.pi


def hue_saturation_at(point: Point, geometry: WheelGeometry) -> tuple[float, float]:
    """Hue (0..1) and saturation (0..1) for *point*, without any clipping."""

    cx, cy = geometry.center
    dx = point[0] - cx
    dy = point[1] - cy
    distance = math.hypot(dx, dy)

    angle = math.atan2(dy, dx)
    if angle < 0:
        angle += _TWO_PI
    hue = (angle / _TWO_PI) % 1.0
    saturation = min(distance / geometry.radius, 1.0)
    return hue, saturation


def is_on_wheel(point: Point, geometry: WheelGeometry) -> bool:
    if not geometry.contains(point):
        return False

    distance = geometry.distance_from_center(point)
    if geometry.border_width > 0 and distance > geometry.radius - geometry.border_width:
        return False
    return distance <= geometry.radius


def sample_point(point: Point, geometry: WheelGeometry) -> Optional[ColorSample]:
    """Return the wheel color at *point*, or None if it is off the wheel."""

    if not is_on_wheel(point, geometry):
        return None
    hue, saturation = hue_saturation_at(point, geometry)
    return ColorSample(hue=hue, saturation=saturation)


def sample_image(point: Point, geometry: WheelGeometry, image: WheelImage) -> Optional[ColorSample]:
    """Return the rendered pixel color under *point*.

    Applies the same clipping as sample_point, then reads the pixel the
    point maps to in *image* (which may be at a different pixel scale).
    """

    if not is_on_wheel(point, geometry):
        return None

    px = min(int(point[0] * image.width / geometry.width), image.width - 1)
    py = min(int(point[1] * image.height / geometry.height), image.height - 1)
    r, g, b, a = image.pixel(px, py)
    if a == 0:
        return None
    return ColorSample.from_rgb8(r, g, b)


def point_for_color(color: ColorSample, geometry: WheelGeometry) -> Point:
    """Calculate the view point where *color* sits on the wheel.

    The distance is clamped to the usable radius so the point is always
    sampleable, even with a border.
    """

    angle = float(color.hue) * _TWO_PI
    distance = max(0.0, float(color.saturation)) * geometry.radius
    distance = min(distance, geometry.usable_radius)

    cx, cy = geometry.center
    return (cx + distance * math.cos(angle), cy + distance * math.sin(angle))
