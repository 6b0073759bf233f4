"""Default configuration values."""

from __future__ import annotations

DEFAULTS: dict = {
    # Device pixels per logical point used when rendering the wheel.
    "pixel_scale": 2.0,
    # Border band (logical points) inside the wheel edge that never samples a color.
    "border_width": 0.0,
    # Keep generated wheels as PNGs under the cache dir.
    "disk_cache": False,
}

PIXEL_SCALE_MIN = 0.5
PIXEL_SCALE_MAX = 8.0
