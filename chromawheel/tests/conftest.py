from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest


# Safety default: during pytest, avoid touching the user's real config/cache.
os.environ.setdefault("CHROMAWHEEL_CONFIG_DIR", tempfile.mkdtemp(prefix="chromawheel-test-config-"))
os.environ.setdefault("CHROMAWHEEL_CACHE_DIR", tempfile.mkdtemp(prefix="chromawheel-test-cache-"))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path: Path):
    """Give every test its own config/cache dirs and a clean override env."""

    monkeypatch.setenv("CHROMAWHEEL_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("CHROMAWHEEL_CACHE_DIR", str(tmp_path / "cache"))
    for name in ("CHROMAWHEEL_CONFIG_PATH", "CHROMAWHEEL_PIXEL_SCALE", "CHROMAWHEEL_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "config"


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    return tmp_path / "cache"
