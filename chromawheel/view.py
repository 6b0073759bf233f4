"""Toolkit-free host for the color wheel.

The host (a tkinter canvas, a Qt widget, an image pipeline) owns layout and
calls update_geometry() whenever the wheel's size or border changes. Each
call builds a new geometry snapshot and fully regenerates the wheel image;
the previous image is dropped, never patched.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .core.color import ColorSample
from .core.config import Config
from .core.geometry import Point, WheelGeometry, require_positive
from .core.sampler import point_for_color, sample_image, sample_point
from .core.wheel_cache import load_or_generate
from .core.wheel_image import WheelImage, generate_wheel_image

logger = logging.getLogger(__name__)


class ColorWheelView:
    """A circular hue/saturation picker surface."""

    def __init__(
        self,
        width: float,
        height: float,
        *,
        border_width: Optional[float] = None,
        pixel_scale: Optional[float] = None,
        config: Optional[Config] = None,
    ):
        """
        Args:
            width, height: logical bounds size (points)
            border_width: border band in points; defaults to the configured value
            pixel_scale: device pixels per point; defaults to the configured value
            config: settings source; a fresh Config is loaded when omitted
        """
        self._config = config if config is not None else Config()
        if border_width is None:
            border_width = self._config.border_width
        if pixel_scale is None:
            pixel_scale = self._config.pixel_scale

        self._pixel_scale = require_positive("pixel_scale", pixel_scale)
        self._geometry = WheelGeometry(width=width, height=height, border_width=border_width)
        self._image = self._render(self._geometry, self._pixel_scale)

    @property
    def geometry(self) -> WheelGeometry:
        return self._geometry

    @property
    def bounds_size(self) -> Tuple[float, float]:
        return self._geometry.bounds_size

    @property
    def radius(self) -> float:
        return self._geometry.radius

    @property
    def center(self) -> Point:
        return self._geometry.center

    @property
    def border_width(self) -> float:
        return self._geometry.border_width

    @property
    def pixel_scale(self) -> float:
        return self._pixel_scale

    @property
    def image(self) -> WheelImage:
        return self._image

    @property
    def image_size(self) -> Tuple[int, int]:
        """Device-pixel size the wheel is rendered at for the current geometry."""
        return _pixel_size(self._geometry, self._pixel_scale)

    def update_geometry(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        *,
        border_width: Optional[float] = None,
    ) -> WheelImage:
        """Apply a new size and/or border and regenerate the wheel image.

        Omitted values keep their current setting. Invalid values, or a
        failed render, raise and leave the view unchanged.
        """

        g = self._geometry
        geometry = WheelGeometry(
            width=g.width if width is None else width,
            height=g.height if height is None else height,
            border_width=g.border_width if border_width is None else border_width,
        )
        image = self._render(geometry, self._pixel_scale)
        self._geometry, self._image = geometry, image
        return image

    def set_pixel_scale(self, scale: float) -> WheelImage:
        pixel_scale = require_positive("pixel_scale", scale)
        image = self._render(self._geometry, pixel_scale)
        self._pixel_scale, self._image = pixel_scale, image
        return image

    def pixel_color(self, point: Point, *, from_image: bool = False) -> Optional[ColorSample]:
        """Color under *point* (view coordinates), or None when off the wheel."""

        if from_image:
            return sample_image(point, self._geometry, self._image)
        return sample_point(point, self._geometry)

    def point_for_color(self, color: ColorSample) -> Point:
        return point_for_color(color, self._geometry)

    def _render(self, geometry: WheelGeometry, pixel_scale: float) -> WheelImage:
        pw, ph = _pixel_size(geometry, pixel_scale)
        logger.debug(
            "Rendering wheel for %gx%g @%gx (radius=%g)",
            geometry.width,
            geometry.height,
            pixel_scale,
            geometry.radius,
        )
        if self._config.disk_cache:
            return load_or_generate(pw, ph)
        return generate_wheel_image(pw, ph)


def _pixel_size(geometry: WheelGeometry, pixel_scale: float) -> Tuple[int, int]:
    w, h = geometry.bounds_size
    return (max(1, int(round(w * pixel_scale))), max(1, int(round(h * pixel_scale))))
