"""On-disk PNG cache for generated wheel images.

A wheel is a pure function of its pixel size, so images are keyed by size
only. Cache problems are logged and never stop a wheel from being generated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .config.paths import cache_dir
from .wheel_image import WheelImage, generate_wheel_image, require_pixel_dim

logger = logging.getLogger(__name__)


def wheel_cache_path(pixel_width: int, pixel_height: int, *, root: Optional[Path] = None) -> Path:
    base = root if root is not None else cache_dir()
    return base / f"wheel_{int(pixel_width)}x{int(pixel_height)}.png"


def _read_cached(path: Path, size: tuple[int, int]) -> Optional[WheelImage]:
    if not path.exists():
        return None
    try:
        with Image.open(path) as img:
            img.load()
            if img.size != size or img.mode != "RGBA":
                logger.debug("Ignoring cached wheel %s (size=%s mode=%s)", path, img.size, img.mode)
                return None
            return WheelImage.from_pil(img)
    except (OSError, UnidentifiedImageError) as exc:
        logger.warning("Failed to read cached wheel %s: %s", path, exc)
        return None


def load_or_generate(pixel_width: int, pixel_height: int, *, root: Optional[Path] = None) -> WheelImage:
    """Return the wheel for the given size, from cache when possible."""

    width = require_pixel_dim("pixel_width", pixel_width)
    height = require_pixel_dim("pixel_height", pixel_height)

    path = wheel_cache_path(width, height, root=root)
    cached = _read_cached(path, (width, height))
    if cached is not None:
        logger.debug("Loaded cached wheel %s", path)
        return cached

    image = generate_wheel_image(width, height)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save_png(path)
    except OSError as exc:
        logger.warning("Failed to write cached wheel %s: %s", path, exc)
    return image
