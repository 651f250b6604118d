"""Dot primitives shared by the indicator state machine and its renderers."""
from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "DotType",
    "DotSlot",
    "SlotTarget",
    "MAX_NUMBER_OF_DOTS",
    "NUMBER_OF_NORMAL_AND_SELECTED_SIZE_DOTS",
    "NUMBER_OF_SMALL_SIZE_DOTS",
]

# Selected dot plus the run of full-size dots that follows it.
NUMBER_OF_NORMAL_AND_SELECTED_SIZE_DOTS = 5
# Medium + small dots shown past the full-size run.
NUMBER_OF_SMALL_SIZE_DOTS = 2
MAX_NUMBER_OF_DOTS = 9


class DotType(enum.Enum):
    """Visual class of a slot, from largest to invisible."""

    SELECTED = "selected"
    NORMAL = "normal"
    MEDIUM = "medium"
    SMALL = "small"
    NONE = "none"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def visible(self) -> bool:
        return self is not DotType.NONE


_SYMBOLS = {
    DotType.SELECTED: "SEL",
    DotType.NORMAL: "N",
    DotType.MEDIUM: "M",
    DotType.SMALL: "S",
    DotType.NONE: "NO",
}


@dataclass
class DotSlot:
    """One dot of the window.

    ``center_x`` and ``radius`` hold the *target* values; interpolating
    towards them is left to the animation driver. ``slot_id`` is stable for
    the lifetime of the window, including when the slot is recycled from one
    end to the other.
    """

    slot_id: int
    center_x: float
    center_y: float
    radius: float
    type: DotType

    @property
    def is_selected(self) -> bool:
        return self.type is DotType.SELECTED

    def target(
        self, *, animate: bool = False, start_center_x: float | None = None
    ) -> "SlotTarget":
        return SlotTarget(
            slot_id=self.slot_id,
            center_x=self.center_x,
            center_y=self.center_y,
            radius=self.radius,
            is_selected=self.is_selected,
            animate=animate,
            start_center_x=start_center_x,
        )


@dataclass(frozen=True)
class SlotTarget:
    """Where a slot should end up.

    ``animate`` asks the animation driver to interpolate from the displayed
    values; otherwise the slot jumps. ``start_center_x`` is set for a slot
    recycled to the other end of the window: the driver snaps it there
    before moving it.
    """

    slot_id: int
    center_x: float
    center_y: float
    radius: float
    is_selected: bool
    animate: bool = False
    start_center_x: float | None = None
