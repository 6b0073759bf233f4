"""chromawheel configuration.

Groups the config manager and related path/storage helpers.
"""

from __future__ import annotations

from .config import Config
from .file_storage import coerce_wheel_settings, load_config_settings, save_config_settings_atomic
from .paths import cache_dir, config_dir, config_file_path


__all__ = [
    "Config",
    "cache_dir",
    "coerce_wheel_settings",
    "config_dir",
    "config_file_path",
    "load_config_settings",
    "save_config_settings_atomic",
]
