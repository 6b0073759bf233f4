"""Read/write the JSON settings file.

Loading validates the wheel keys: a value of the wrong type, or outside
the range the wheel can render with, is dropped so the default applies.
Unknown keys are kept as-is.
"""

from __future__ import annotations

import json
import math
import os
import tempfile
import time
from pathlib import Path
from typing import Any

# key -> whether zero is an accepted value
_NUMBER_KEYS: dict[str, bool] = {
    "pixel_scale": False,
    "border_width": True,
}
_BOOL_KEYS = ("disk_cache",)


def _valid_number(value: Any, *, allow_zero: bool) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value):
        return False
    return value >= 0 if allow_zero else value > 0


def coerce_wheel_settings(loaded: dict[str, Any], *, logger) -> dict[str, Any]:
    """Return *loaded* without wheel keys that hold unusable values."""

    out = dict(loaded)
    for key, allow_zero in _NUMBER_KEYS.items():
        if key in out and not _valid_number(out[key], allow_zero=allow_zero):
            logger.warning("Ignoring invalid %s=%r in config", key, out.pop(key))
    for key in _BOOL_KEYS:
        if key in out and not isinstance(out[key], bool):
            logger.warning("Ignoring invalid %s=%r in config", key, out.pop(key))
    return out


def load_config_settings(
    *,
    config_file: Path,
    defaults: dict[str, Any],
    retries: int = 3,
    retry_delay: float = 0.02,
    logger,
) -> dict[str, Any] | None:
    """Load config JSON, retrying while a writer may be mid-replace.

    Returns `{**defaults, **validated}` when successful, a copy of
    `defaults` when the file does not exist, and None when every attempt
    failed.
    """

    if not config_file.exists():
        return dict(defaults)

    last_error: Exception | None = None
    for attempt in range(max(1, retries)):
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            last_error = e
            logger.debug("Config decode failed (attempt %d): %s", attempt + 1, e)
            time.sleep(retry_delay)
            continue
        except OSError as e:
            last_error = e
            break

        if not isinstance(loaded, dict):
            logger.warning("Config root is %s, not an object; using defaults", type(loaded).__name__)
            loaded = {}
        return {**defaults, **coerce_wheel_settings(loaded, logger=logger)}

    logger.warning("Failed to load config: %s", last_error)
    return None


def save_config_settings_atomic(*, config_dir: Path, config_file: Path, settings: dict[str, Any], logger) -> None:
    """Write settings to a unique temp file in *config_dir*, then replace."""

    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(prefix="config.", suffix=".tmp", dir=str(config_dir))
    except OSError as e:
        logger.warning("Failed to save config: %s", e)
        return

    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2, sort_keys=True)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, config_file)
    except (OSError, TypeError, ValueError) as e:
        logger.warning("Failed to save config: %s", e)
    finally:
        if os.path.exists(tmp_path):
            try:
                os.unlink(tmp_path)
            except OSError as exc:
                logger.debug("Failed to remove temp config file %s: %s", tmp_path, exc)
