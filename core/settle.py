"""Page-settle handling for the dot window."""
from __future__ import annotations

import logging

from .dot_config import DotConfig
from .dots import DotSlot, DotType, SlotTarget
from .transitions import Direction, ScanContext, next_type
from .window import IndicatorState

__all__ = ["SettleController", "check_page_bounds"]

LOG = logging.getLogger(__name__)


def check_page_bounds(page: int, item_count: int) -> None:
    """Raise ``IndexError`` unless ``page`` is in ``[0, item_count)``.

    Page 0 is always accepted so an empty pager can report its position.
    """
    if page < 0 or (page != 0 and page >= item_count):
        raise IndexError(f"page must be in [0, item_count); got {page} for {item_count} items")


class SettleController:
    """Move the selection of an :class:`IndicatorState` to a settled page."""

    def __init__(self, config: DotConfig):
        self.config = config

    def settle(self, state: IndicatorState, page: int) -> tuple[SlotTarget, ...]:
        """Update ``state`` in place for ``page`` and return the new slot targets.

        A jump of several pages is applied one page at a time, so the window
        ends up where paging through every page in between would leave it.
        Returns an empty tuple when ``page`` is already the current page.
        """
        check_page_bounds(page, state.item_count)
        if page == state.page_index:
            return ()

        step = 1 if page > state.page_index else -1
        moved: set[int] = set()
        starts: dict[int, float] = {}
        while state.page_index != page:
            recycled, step_moved = self._step(state, state.page_index + step)
            moved |= step_moved
            starts.update(recycled)

        return tuple(
            slot.target(
                animate=slot.slot_id in moved,
                start_center_x=starts.get(slot.slot_id),
            )
            for slot in state.slots
        )

    def _step(self, state: IndicatorState, page: int) -> tuple[dict[int, float], set[int]]:
        """Settle on a page next to the current one.

        Returns the rotated-in position of a recycled slot keyed by slot id,
        and the ids of the slots moved by a transition pass.
        """
        direction = Direction.between(state.page_index, page)
        state.page_index = page
        step = 1 if direction is Direction.FORWARD else -1
        new_index = state.selected_slot_index + step

        recycled: dict[int, float] = {}
        slot = self._recycle(state, direction)
        if slot is not None:
            new_index -= step
            recycled[slot.slot_id] = slot.center_x

        slots = state.slots
        translate = 0 <= new_index < len(slots) and slots[new_index].type is DotType.MEDIUM
        if direction is Direction.FORWARD:
            translate = translate and new_index >= self.config.normal_run_length

        state.selected_slot_index = new_index
        if translate:
            moved = self._transition_pass(state, direction)
        else:
            moved = self._reselect(state)

        state.check_invariants()
        LOG.debug(
            "Settled page %d (%s, %s): %s",
            page,
            direction.name.lower(),
            "slide" if translate else "reselect",
            state.describe(),
        )
        return recycled, moved

    def _recycle(self, state: IndicatorState, direction: Direction) -> DotSlot | None:
        """Rotate the placeholder at the trailing edge of the motion to the other end."""
        slots = state.slots
        if len(slots) < 2:
            return None
        run = self.config.small_dot_run_length
        spacing = self.config.spacing
        if direction is Direction.FORWARD:
            if (
                slots[0].type is DotType.NONE
                and slots[1].type is DotType.SMALL
                and state.item_count - run > state.page_index
            ):
                state.selected_slot_index -= 1
                slot = state.rotate_head_to_tail(spacing)
                LOG.debug("Recycled slot %d from head to tail", slot.slot_id)
                return slot
        else:
            if (
                slots[-1].type is DotType.NONE
                and slots[-2].type is DotType.SMALL
                and state.page_index >= state.selected_slot_index
            ):
                state.selected_slot_index += 1
                slot = state.rotate_tail_to_head(spacing)
                LOG.debug("Recycled slot %d from tail to head", slot.slot_id)
                return slot
        return None

    def _reselect(self, state: IndicatorState) -> set[int]:
        selected = state.selected_slot_index
        for index, slot in enumerate(state.slots):
            if index == selected:
                slot.type = DotType.SELECTED
                slot.radius = self.config.selected_radius
            elif slot.type is DotType.SELECTED:
                slot.type = DotType.NORMAL
                slot.radius = self.config.normal_radius
        return set()

    def _transition_pass(self, state: IndicatorState, direction: Direction) -> set[int]:
        slots = state.slots
        count = len(slots)
        if direction is Direction.FORWARD:
            order = range(count)
            shift = -self.config.spacing
        else:
            order = range(count - 1, -1, -1)
            shift = self.config.spacing
        pages_ahead = state.page_index < state.item_count - self.config.small_dot_run_length

        new_types: dict[int, DotType] = {}
        first_normal = True
        for index in order:
            slot = slots[index]
            neighbor_index = index - 1 if direction is Direction.FORWARD else index + 1
            neighbor = new_types.get(neighbor_index)
            context = ScanContext(
                is_new_selection=index == state.selected_slot_index,
                first_normal=first_normal,
                pages_ahead=pages_ahead,
            )
            if slot.type is DotType.NORMAL:
                first_normal = False
            new_types[index] = next_type(direction, slot.type, neighbor, context)

        for index, slot in enumerate(slots):
            slot.type = new_types[index]
            slot.radius = self.config.radius_for_type(slot.type)
            slot.center_x += shift
        return {slot.slot_id for slot in slots}
