"""chromawheel Config implementation."""

from __future__ import annotations

import logging
import math
import os

from ._props import bool_prop, float_prop
from .defaults import DEFAULTS as _DEFAULTS
from .defaults import PIXEL_SCALE_MAX, PIXEL_SCALE_MIN
from .file_storage import load_config_settings, save_config_settings_atomic
from .paths import config_dir, config_file_path

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager for chromawheel."""

    DEFAULTS = _DEFAULTS

    def __init__(self):
        # Resolved at runtime so test harnesses can set env vars in conftest.
        self.CONFIG_DIR = config_dir()
        self.CONFIG_FILE = config_file_path()
        loaded = self._load()
        self._settings = loaded if loaded is not None else dict(self.DEFAULTS)

    def _load(self, *, retries: int = 3, retry_delay: float = 0.02):
        """Load settings from file.

        Returns None if loading fails after retries.
        """

        return load_config_settings(
            config_file=self.CONFIG_FILE,
            defaults=self.DEFAULTS,
            retries=retries,
            retry_delay=retry_delay,
            logger=logger,
        )

    def reload(self):
        loaded = self._load()
        # If the file was transiently unreadable, keep the previous in-memory settings.
        if loaded is not None:
            self._settings = loaded

    def _save(self):
        save_config_settings_atomic(
            config_dir=self.CONFIG_DIR,
            config_file=self.CONFIG_FILE,
            settings=self._settings,
            logger=logger,
        )

    _stored_pixel_scale = float_prop(
        "pixel_scale",
        default=float(_DEFAULTS["pixel_scale"]),
        min_v=PIXEL_SCALE_MIN,
        max_v=PIXEL_SCALE_MAX,
    )
    border_width = float_prop("border_width", default=float(_DEFAULTS["border_width"]), min_v=0.0)
    disk_cache = bool_prop("disk_cache", default=bool(_DEFAULTS["disk_cache"]))

    @property
    def pixel_scale(self) -> float:
        """Pixel scale, honoring CHROMAWHEEL_PIXEL_SCALE when it is a valid number."""

        env = os.environ.get("CHROMAWHEEL_PIXEL_SCALE")
        if env:
            try:
                v = float(env)
            except ValueError:
                v = 0.0
            if math.isfinite(v) and v > 0:
                return v
            logger.warning("Ignoring invalid CHROMAWHEEL_PIXEL_SCALE=%r", env)
        return self._stored_pixel_scale

    @pixel_scale.setter
    def pixel_scale(self, value: float) -> None:
        self._stored_pixel_scale = value
