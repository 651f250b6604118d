from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from core.dot_config import DotConfig

LOG = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _get_float(section, key: str, fallback: float) -> float:
    try:
        return section.getfloat(key, fallback=fallback)
    except ValueError:
        LOG.warning("Invalid value for %s: %r; using %s", key, section.get(key), fallback)
        return fallback


def _get_int(section, key: str, fallback: int) -> int:
    try:
        return section.getint(key, fallback=fallback)
    except ValueError:
        LOG.warning("Invalid value for %s: %r; using %s", key, section.get(key), fallback)
        return fallback


def _get_color(section, key: str, fallback: str | None) -> str | None:
    raw = section.get(key, fallback="").strip()
    if not raw:
        return fallback
    if not _HEX_COLOR.match(raw):
        LOG.warning("Invalid color for %s: %r; using %s", key, raw, fallback)
        return fallback
    return raw


@dataclass
class IndicatorConfig:
    selected_radius: float = 4.0
    normal_radius: float = 4.0
    medium_radius: float = 2.5
    small_radius: float = 1.5
    dot_spacing: float = 6.0
    min_visible_dot_count: int = 2
    margin: float = 8.0
    dot_color: str = "#9e9e9e"
    # None follows dot_color
    selected_dot_color: str | None = "#2f80ed"
    animation_duration_ms: int = 200
    ini_path: Path | None = None

    @classmethod
    def load(cls, ini_path: str | Path | None = None) -> "IndicatorConfig":
        cfg = cls()
        path = Path(ini_path or "config.ini")
        if path.exists():
            import configparser

            parser = configparser.ConfigParser()
            parser.read(path)
            dots = parser["dots"] if "dots" in parser else None
            if dots:
                cfg.selected_radius = _get_float(dots, "selected_radius", cfg.selected_radius)
                cfg.normal_radius = _get_float(dots, "normal_radius", cfg.normal_radius)
                cfg.medium_radius = _get_float(dots, "medium_radius", cfg.medium_radius)
                cfg.small_radius = _get_float(dots, "small_radius", cfg.small_radius)
                cfg.dot_spacing = _get_float(dots, "spacing", cfg.dot_spacing)
                cfg.margin = _get_float(dots, "margin", cfg.margin)
                cfg.min_visible_dot_count = _get_int(
                    dots, "min_visible_dot_count", cfg.min_visible_dot_count
                )

            colors = parser["colors"] if "colors" in parser else None
            if colors:
                cfg.dot_color = _get_color(colors, "dot", cfg.dot_color) or cfg.dot_color
                if "selected_dot" in colors and not colors.get("selected_dot").strip():
                    cfg.selected_dot_color = None
                else:
                    cfg.selected_dot_color = _get_color(
                        colors, "selected_dot", cfg.selected_dot_color
                    )

            animation = parser["animation"] if "animation" in parser else None
            if animation:
                duration = _get_int(animation, "duration_ms", cfg.animation_duration_ms)
                if duration < 0:
                    LOG.warning("Negative animation duration %d; using 0", duration)
                    duration = 0
                cfg.animation_duration_ms = duration
        cfg.ini_path = path
        return cfg

    @property
    def effective_selected_dot_color(self) -> str:
        return self.selected_dot_color or self.dot_color

    def dot_config(self) -> DotConfig:
        spacing = self.dot_spacing
        if spacing < 0:
            LOG.warning("Negative dot spacing %s; using 0", spacing)
            spacing = 0.0
        min_visible = self.min_visible_dot_count
        if min_visible < 1:
            LOG.warning("min_visible_dot_count %d below 1; using 1", min_visible)
            min_visible = 1
        return DotConfig.create(
            selected_radius=self.selected_radius,
            normal_radius=self.normal_radius,
            medium_radius=self.medium_radius,
            small_radius=self.small_radius,
            dot_spacing=spacing,
            min_visible_dot_count=min_visible,
            margin=max(0.0, self.margin),
        )

    def save(self) -> None:
        if self.ini_path is None:
            return
        import configparser

        parser = configparser.ConfigParser()
        parser["dots"] = {
            "selected_radius": f"{self.selected_radius:.3f}",
            "normal_radius": f"{self.normal_radius:.3f}",
            "medium_radius": f"{self.medium_radius:.3f}",
            "small_radius": f"{self.small_radius:.3f}",
            "spacing": f"{self.dot_spacing:.3f}",
            "margin": f"{self.margin:.3f}",
            "min_visible_dot_count": str(self.min_visible_dot_count),
        }
        parser["colors"] = {
            "dot": self.dot_color,
            "selected_dot": self.selected_dot_color or "",
        }
        parser["animation"] = {
            "duration_ms": str(self.animation_duration_ms),
        }
        with self.ini_path.open("w") as fh:
            parser.write(fh)
