"""Circular hue/saturation color wheel: image generation and point sampling."""

from __future__ import annotations

from .core.color import ColorSample, rgb_to_hex
from .core.errors import ChromaWheelError, InvalidGeometryError
from .core.geometry import WheelGeometry
from .core.sampler import point_for_color, sample_image, sample_point
from .core.wheel_image import WheelImage, generate_wheel_image
from .logging_config import configure_logging
from .view import ColorWheelView

__all__ = [
    "ChromaWheelError",
    "ColorSample",
    "ColorWheelView",
    "InvalidGeometryError",
    "WheelGeometry",
    "WheelImage",
    "configure_logging",
    "generate_wheel_image",
    "point_for_color",
    "rgb_to_hex",
    "sample_image",
    "sample_point",
]
