"""Config and cache path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def config_dir() -> Path:
    """Return the directory used for chromawheel configuration.

    Priority:
    - CHROMAWHEEL_CONFIG_DIR
    - XDG_CONFIG_HOME/chromawheel
    - ~/.config/chromawheel
    """

    p = os.environ.get("CHROMAWHEEL_CONFIG_DIR")
    if p:
        return Path(p)

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "chromawheel"

    return Path.home() / ".config" / "chromawheel"


def config_file_path() -> Path:
    """Return the config.json path.

    Priority:
    - CHROMAWHEEL_CONFIG_PATH (explicit file override)
    - config_dir()/config.json
    """

    p = os.environ.get("CHROMAWHEEL_CONFIG_PATH")
    if p:
        return Path(p)
    return config_dir() / "config.json"


def cache_dir() -> Path:
    """Return the directory used for cached wheel images.

    Priority:
    - CHROMAWHEEL_CACHE_DIR
    - XDG_CACHE_HOME/chromawheel
    - ~/.cache/chromawheel
    """

    p = os.environ.get("CHROMAWHEEL_CACHE_DIR")
    if p:
        return Path(p)

    xdg = os.environ.get("XDG_CACHE_HOME")
    cache_root = Path(xdg) if xdg else (Path.home() / ".cache")
    return cache_root / "chromawheel"
