import pytest

from core.dot_config import DEFAULT_NORMAL_RADIUS, DotConfig
from core.dots import DotType


def test_create_keeps_ordered_radii():
    cfg = DotConfig.create(
        selected_radius=5.0, normal_radius=4.0, medium_radius=2.5, small_radius=1.5, dot_spacing=6.0
    )
    assert cfg.selected_radius == 5.0
    assert cfg.normal_radius == 4.0
    assert cfg.medium_radius == 2.5
    assert cfg.small_radius == 1.5
    assert cfg.spacing == 10.0


def test_create_derives_defaults_for_out_of_order_radii():
    cfg = DotConfig.create(selected_radius=2.0, normal_radius=8.0, medium_radius=9.0, small_radius=5.0)
    assert cfg.medium_radius == 2.0  # normal / 4
    assert cfg.small_radius == 1.0  # normal / 8
    assert cfg.selected_radius == 8.0
    assert cfg.selected_radius >= cfg.normal_radius > cfg.medium_radius > cfg.small_radius >= 0


def test_create_small_checked_against_repaired_medium():
    # small is valid against the raw medium but not against the repaired one
    cfg = DotConfig.create(normal_radius=8.0, medium_radius=10.0, small_radius=3.0)
    assert cfg.medium_radius == 2.0
    assert cfg.small_radius == 1.0


def test_create_without_normal_radius_uses_default():
    cfg = DotConfig.create()
    assert cfg.normal_radius == DEFAULT_NORMAL_RADIUS
    assert cfg.normal_radius > cfg.medium_radius > cfg.small_radius


def test_create_rejects_invalid_values():
    with pytest.raises(ValueError):
        DotConfig.create(normal_radius=4.0, dot_spacing=-1.0)
    with pytest.raises(ValueError):
        DotConfig.create(normal_radius=4.0, min_visible_dot_count=0)


def test_structural_constants():
    cfg = DotConfig()
    assert cfg.max_visible_dot_count == 9
    assert cfg.small_dot_run_length == 2
    assert cfg.normal_run_length == 5


def test_radius_for_type():
    cfg = DotConfig.create(selected_radius=5.0, normal_radius=4.0, medium_radius=2.5, small_radius=1.5)
    assert cfg.radius_for_type(DotType.SELECTED) == 5.0
    assert cfg.radius_for_type(DotType.NORMAL) == 4.0
    assert cfg.radius_for_type(DotType.MEDIUM) == 2.5
    assert cfg.radius_for_type(DotType.SMALL) == 1.5
    assert cfg.radius_for_type(DotType.NONE) == 0.0


def test_config_is_immutable():
    cfg = DotConfig()
    with pytest.raises(AttributeError):
        cfg.normal_radius = 10.0  # type: ignore[misc]
