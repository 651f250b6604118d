"""Dot window state and its initial layout."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from .dot_config import DotConfig
from .dots import DotSlot, DotType, SlotTarget

__all__ = ["IndicatorState", "initialize_window", "measure"]

LOG = logging.getLogger(__name__)


@dataclass
class IndicatorState:
    """Ordered slots tracked for one item count.

    ``slots`` never grows past ``max_visible_dot_count + 1`` entries; paging
    rotates slots between the two ends instead of allocating new ones.
    """

    item_count: int
    slots: list[DotSlot] = field(default_factory=list)
    page_index: int = 0
    selected_slot_index: int = 0
    width: float = 0.0
    height: float = 0.0

    def __len__(self) -> int:
        return len(self.slots)

    @property
    def types(self) -> tuple[DotType, ...]:
        return tuple(slot.type for slot in self.slots)

    @property
    def selected_slot(self) -> DotSlot:
        return self.slots[self.selected_slot_index]

    def describe(self) -> str:
        """Compact ``SEL N N M S NO`` rendering of the slot types."""
        return " ".join(slot.type.symbol for slot in self.slots)

    def targets(self) -> tuple[SlotTarget, ...]:
        return tuple(slot.target() for slot in self.slots)

    def as_array(self) -> np.ndarray:
        """Return ``(n, 4)`` rows of ``(center_x, center_y, radius, is_selected)``."""
        out = np.zeros((len(self.slots), 4), dtype=np.float64)
        for row, slot in enumerate(self.slots):
            out[row] = (slot.center_x, slot.center_y, slot.radius, float(slot.is_selected))
        return out

    def rotate_head_to_tail(self, spacing: float) -> DotSlot:
        """Move the first slot behind the last one, one ``spacing`` further right."""
        slot = self.slots.pop(0)
        slot.center_x = self.slots[-1].center_x + spacing
        self.slots.append(slot)
        return slot

    def rotate_tail_to_head(self, spacing: float) -> DotSlot:
        """Move the last slot in front of the first one, one ``spacing`` further left."""
        slot = self.slots.pop()
        slot.center_x = self.slots[0].center_x - spacing
        self.slots.insert(0, slot)
        return slot

    def check_invariants(self) -> None:
        if not self.slots:
            return
        assert 0 <= self.selected_slot_index < len(self.slots), "selected slot out of window"
        selected = [i for i, slot in enumerate(self.slots) if slot.type is DotType.SELECTED]
        assert selected == [self.selected_slot_index], f"selection mismatch: {self.describe()}"


def _window_size(item_count: int, config: DotConfig) -> int:
    size = min(item_count, config.max_visible_dot_count)
    if item_count > config.max_visible_dot_count:
        # trailing placeholder for recycling
        size += 1
    return size


def _row_extent(item_count: int, config: DotConfig) -> tuple[int, float]:
    """Return ``(leading, span)`` covering every position a visible dot takes.

    ``leading`` counts the dots that scroll in left of slot 0 once paging
    starts; ``span`` runs from the leftmost of those to the rightmost dot of
    the initial layout.
    """
    if item_count <= config.normal_run_length:
        return 0, max(0, item_count - 1) * config.spacing
    leading = min(config.small_dot_run_length, item_count - config.normal_run_length)
    initial_visible = min(item_count, config.normal_run_length + config.small_dot_run_length)
    return leading, (initial_visible - 1 + leading) * config.spacing


def measure(item_count: int, config: DotConfig) -> tuple[float, float]:
    """Preferred ``(width, height)`` of a row showing ``item_count`` pages."""
    height = config.selected_radius * 2.0 + 4.0
    if item_count <= 0:
        return 2.0 * config.margin, height
    _, span = _row_extent(item_count, config)
    width = span + 2.0 * config.selected_radius + 2.0 * config.margin
    return width, height


def _initial_type(index: int, config: DotConfig) -> DotType:
    run = config.normal_run_length
    if index == 0:
        return DotType.SELECTED
    if index < run:
        return DotType.NORMAL
    if index == run:
        return DotType.MEDIUM
    if index == run + 1:
        return DotType.SMALL
    return DotType.NONE


def initialize_window(item_count: int, config: DotConfig) -> IndicatorState | None:
    """Lay out the slots for ``item_count`` pages with page 0 selected.

    Returns ``None`` when ``item_count`` is below the configured minimum.
    Small counts get one full-size dot per page (``SEL N N N N``); larger
    counts start as ``SEL N N N N M S`` followed by invisible placeholders.
    """
    if item_count < config.min_visible_dot_count:
        LOG.debug(
            "Item count %d below minimum %d; window not built",
            item_count,
            config.min_visible_dot_count,
        )
        return None

    width, height = measure(item_count, config)
    spacing = config.spacing
    leading, span = _row_extent(item_count, config)
    center_x = (width - span) / 2.0 + leading * spacing
    center_y = height / 2.0

    slots: list[DotSlot] = []
    for index in range(_window_size(item_count, config)):
        dot_type = _initial_type(index, config)
        slots.append(
            DotSlot(
                slot_id=index,
                center_x=center_x,
                center_y=center_y,
                radius=config.radius_for_type(dot_type),
                type=dot_type,
            )
        )
        center_x += spacing

    state = IndicatorState(
        item_count=item_count,
        slots=slots,
        width=width,
        height=height,
    )
    state.check_invariants()
    LOG.debug("Window built for %d items: %s", item_count, state.describe())
    return state
