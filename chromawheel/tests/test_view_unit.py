from __future__ import annotations

import pytest

from chromawheel.core.color import ColorSample
from chromawheel.core.config import Config
from chromawheel.core.errors import InvalidGeometryError
from chromawheel.view import ColorWheelView


def test_radius_is_half_of_width_when_width_is_smaller() -> None:
    view = ColorWheelView(200, 400, pixel_scale=0.25)
    assert view.radius == 100


def test_radius_is_half_of_height_when_height_is_smaller() -> None:
    view = ColorWheelView(400, 200, pixel_scale=0.25)
    assert view.radius == 100


def test_radius_is_recomputed_on_geometry_update() -> None:
    view = ColorWheelView(40, 40, pixel_scale=1)
    view.update_geometry(10, 30)
    assert view.radius == 5
    assert view.center == (5.0, 15.0)
    assert view.bounds_size == (10.0, 30.0)


def test_image_is_rendered_at_pixel_scale() -> None:
    view = ColorWheelView(20, 40, pixel_scale=2)
    assert view.image_size == (40, 80)
    assert view.image.size == (40, 80)


def test_image_is_regenerated_on_every_geometry_change() -> None:
    view = ColorWheelView(30, 30, pixel_scale=2)
    first = view.image

    second = view.update_geometry(20, 40)

    assert second is view.image
    assert second is not first
    assert second != first
    assert second.size == (40, 80)
    assert first.size == (60, 60)


def test_invalid_update_leaves_view_unchanged() -> None:
    view = ColorWheelView(30, 30, pixel_scale=1)
    image = view.image

    with pytest.raises(InvalidGeometryError):
        view.update_geometry(0, 30)
    with pytest.raises(InvalidGeometryError):
        view.update_geometry(border_width=-1)

    assert view.bounds_size == (30.0, 30.0)
    assert view.image is image


def test_border_update_keeps_size() -> None:
    view = ColorWheelView(100, 100, pixel_scale=0.5)
    view.update_geometry(border_width=10)
    assert view.border_width == 10
    assert view.bounds_size == (100.0, 100.0)
    assert view.pixel_color((95, 50)) is None
    assert view.pixel_color((85, 50)) is not None


def test_pixel_color_matches_wheel_layout() -> None:
    view = ColorWheelView(300, 300, pixel_scale=0.5)
    assert view.pixel_color((-100, -100)) is None
    assert view.pixel_color((0, 0)) is None
    assert view.pixel_color((275, 150)).rgb[0] == pytest.approx(1.0, abs=0.001)
    assert view.pixel_color((150, 150)).rgb8 == (255, 255, 255)


def test_pixel_color_from_image_reads_rendered_pixel() -> None:
    view = ColorWheelView(60, 60, pixel_scale=2)
    c = view.pixel_color((30, 30), from_image=True)
    assert c is not None
    assert c.rgb8 == (255, 255, 255)
    assert view.pixel_color((0, 0), from_image=True) is None


def test_point_for_color_round_trips() -> None:
    view = ColorWheelView(100, 100, pixel_scale=0.5, border_width=5)
    point = view.point_for_color(ColorSample(hue=0.25, saturation=0.5))
    assert point == pytest.approx((50.0, 75.0))
    c = view.pixel_color(point)
    assert c.hue == pytest.approx(0.25)
    assert c.saturation == pytest.approx(0.5)


def test_set_pixel_scale_regenerates() -> None:
    view = ColorWheelView(20, 10, pixel_scale=1)
    img = view.set_pixel_scale(3)
    assert view.pixel_scale == 3
    assert img.size == (60, 30)

    with pytest.raises(InvalidGeometryError):
        view.set_pixel_scale(0)
    assert view.pixel_scale == 3


def test_image_size_never_drops_below_one_pixel() -> None:
    view = ColorWheelView(0.1, 0.1, pixel_scale=1)
    assert view.image.size == (1, 1)


def test_defaults_come_from_config() -> None:
    cfg = Config()
    cfg.pixel_scale = 3
    cfg.border_width = 2

    view = ColorWheelView(10, 10, config=cfg)

    assert view.pixel_scale == 3
    assert view.border_width == 2
    assert view.image.size == (30, 30)


def test_disk_cache_is_used_when_enabled(cache_root) -> None:
    cfg = Config()
    cfg.disk_cache = True

    view = ColorWheelView(12, 8, pixel_scale=1, config=cfg)

    assert (cache_root / "wheel_12x8.png").exists()
    assert view.image.size == (12, 8)


def test_disk_cache_is_off_by_default(cache_root) -> None:
    ColorWheelView(12, 8, pixel_scale=1)
    assert not cache_root.exists()


def test_failed_render_leaves_view_unchanged(monkeypatch) -> None:
    import chromawheel.view as view_module

    view = ColorWheelView(30, 20, pixel_scale=1)
    image = view.image

    def _oom(*_a, **_k):
        raise MemoryError

    monkeypatch.setattr(view_module, "generate_wheel_image", _oom)

    with pytest.raises(MemoryError):
        view.update_geometry(4000, 4000)
    with pytest.raises(MemoryError):
        view.set_pixel_scale(4)

    assert view.bounds_size == (30.0, 20.0)
    assert view.pixel_scale == 1
    assert view.image is image
    assert view.image_size == image.size
