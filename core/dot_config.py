"""Immutable geometry configuration for the scrolling pager indicator."""
from __future__ import annotations

from dataclasses import dataclass

from .dots import (
    MAX_NUMBER_OF_DOTS,
    NUMBER_OF_NORMAL_AND_SELECTED_SIZE_DOTS,
    NUMBER_OF_SMALL_SIZE_DOTS,
    DotType,
)

__all__ = ["DotConfig", "DEFAULT_NORMAL_RADIUS", "default_radius_for_type"]

DEFAULT_NORMAL_RADIUS = 3.0


def default_radius_for_type(dot_type: DotType, normal_radius: float) -> float:
    """Fallback radius for ``dot_type`` derived from the normal radius."""
    if dot_type is DotType.SELECTED:
        return normal_radius
    if dot_type is DotType.NORMAL:
        return normal_radius
    if dot_type is DotType.MEDIUM:
        return normal_radius / 4.0
    if dot_type is DotType.SMALL:
        return normal_radius / 8.0
    return 0.0


@dataclass(frozen=True)
class DotConfig:
    """Radii, spacing and visibility limits of the dot row.

    Parameters
    ----------
    selected_radius / normal_radius / medium_radius / small_radius:
        Radius per dot type. Must satisfy
        ``selected >= normal > medium > small >= 0``; use :meth:`create` to
        repair values that do not.
    dot_spacing:
        Gap attribute between dots. Centres are ``dot_spacing + normal_radius``
        apart (see :attr:`spacing`).
    min_visible_dot_count:
        Item counts below this value leave the indicator empty.
    margin:
        Horizontal padding on each side of the row when measuring.
    """

    selected_radius: float = DEFAULT_NORMAL_RADIUS
    normal_radius: float = DEFAULT_NORMAL_RADIUS
    medium_radius: float = DEFAULT_NORMAL_RADIUS / 4.0
    small_radius: float = DEFAULT_NORMAL_RADIUS / 8.0
    dot_spacing: float = 8.0
    min_visible_dot_count: int = 2
    margin: float = 8.0

    @classmethod
    def create(
        cls,
        *,
        selected_radius: float = 0.0,
        normal_radius: float = 0.0,
        medium_radius: float = 0.0,
        small_radius: float = 0.0,
        dot_spacing: float = 0.0,
        min_visible_dot_count: int = 2,
        margin: float = 8.0,
    ) -> "DotConfig":
        """Build a config, deriving defaults for radii that break the ordering."""
        if dot_spacing < 0:
            raise ValueError("dot_spacing must be non-negative")
        if min_visible_dot_count < 1:
            raise ValueError("min_visible_dot_count must be at least 1")
        if margin < 0:
            raise ValueError("margin must be non-negative")

        normal = float(normal_radius)
        if normal <= 0:
            normal = DEFAULT_NORMAL_RADIUS
        medium = float(medium_radius)
        if medium >= normal or medium <= 0:
            medium = default_radius_for_type(DotType.MEDIUM, normal)
        small = float(small_radius)
        if small >= medium or small < 0:
            small = default_radius_for_type(DotType.SMALL, normal)
        selected = float(selected_radius)
        if selected < normal:
            selected = default_radius_for_type(DotType.SELECTED, normal)

        return cls(
            selected_radius=selected,
            normal_radius=normal,
            medium_radius=medium,
            small_radius=small,
            dot_spacing=float(dot_spacing),
            min_visible_dot_count=int(min_visible_dot_count),
            margin=float(margin),
        )

    @property
    def spacing(self) -> float:
        """Distance between two neighbouring dot centres."""
        return self.dot_spacing + self.normal_radius

    @property
    def max_visible_dot_count(self) -> int:
        return MAX_NUMBER_OF_DOTS

    @property
    def small_dot_run_length(self) -> int:
        return NUMBER_OF_SMALL_SIZE_DOTS

    @property
    def normal_run_length(self) -> int:
        return NUMBER_OF_NORMAL_AND_SELECTED_SIZE_DOTS

    def radius_for_type(self, dot_type: DotType) -> float:
        if dot_type is DotType.SELECTED:
            return self.selected_radius
        if dot_type is DotType.NORMAL:
            return self.normal_radius
        if dot_type is DotType.MEDIUM:
            return self.medium_radius
        if dot_type is DotType.SMALL:
            return self.small_radius
        return 0.0
