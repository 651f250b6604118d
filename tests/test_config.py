from pathlib import Path

from config import IndicatorConfig


def test_indicator_config_defaults_when_missing(tmp_path: Path):
    ini_path = tmp_path / "missing.ini"
    cfg = IndicatorConfig.load(ini_path)
    assert cfg.ini_path == ini_path
    assert cfg.normal_radius == 4.0
    assert cfg.dot_color == "#9e9e9e"
    assert cfg.effective_selected_dot_color == "#2f80ed"
    assert cfg.animation_duration_ms == 200


def test_indicator_config_parse(tmp_path: Path):
    ini_path = tmp_path / "config.ini"
    ini_path.write_text(
        """
[dots]
selected_radius = 6
normal_radius = 5
medium_radius = 3
small_radius = 2
spacing = 10
min_visible_dot_count = 3

[colors]
dot = #112233
selected_dot = #445566

[animation]
duration_ms = 120
""".strip()
    )

    cfg = IndicatorConfig.load(ini_path)
    assert cfg.selected_radius == 6.0
    assert cfg.normal_radius == 5.0
    assert cfg.dot_spacing == 10.0
    assert cfg.min_visible_dot_count == 3
    assert cfg.dot_color == "#112233"
    assert cfg.selected_dot_color == "#445566"
    assert cfg.animation_duration_ms == 120

    dots = cfg.dot_config()
    assert dots.spacing == 15.0
    assert dots.min_visible_dot_count == 3


def test_indicator_config_invalid_values_fall_back(tmp_path: Path):
    ini_path = tmp_path / "config.ini"
    ini_path.write_text(
        """
[dots]
normal_radius = big
min_visible_dot_count = 2.5

[colors]
dot = blue

[animation]
duration_ms = -40
""".strip()
    )

    cfg = IndicatorConfig.load(ini_path)
    assert cfg.normal_radius == 4.0
    assert cfg.min_visible_dot_count == 2
    assert cfg.dot_color == "#9e9e9e"
    assert cfg.animation_duration_ms == 0


def test_indicator_config_empty_selected_color_follows_dot_color(tmp_path: Path):
    ini_path = tmp_path / "config.ini"
    ini_path.write_text("[colors]\ndot = #123456\nselected_dot =\n")
    cfg = IndicatorConfig.load(ini_path)
    assert cfg.selected_dot_color is None
    assert cfg.effective_selected_dot_color == "#123456"


def test_indicator_config_dot_config_clamps_invalid_geometry():
    cfg = IndicatorConfig(dot_spacing=-3.0, min_visible_dot_count=0, margin=-1.0)
    dots = cfg.dot_config()
    assert dots.dot_spacing == 0.0
    assert dots.min_visible_dot_count == 1
    assert dots.margin == 0.0


def test_indicator_config_save(tmp_path: Path):
    ini_path = tmp_path / "config.ini"
    cfg = IndicatorConfig.load(ini_path)
    cfg.dot_spacing = 12.0
    cfg.selected_dot_color = None
    cfg.animation_duration_ms = 90
    cfg.save()

    written = ini_path.read_text()
    assert "spacing = 12.000" in written
    assert "duration_ms = 90" in written

    reloaded = IndicatorConfig.load(ini_path)
    assert reloaded.dot_spacing == 12.0
    assert reloaded.selected_dot_color is None
    assert reloaded.animation_duration_ms == 90
