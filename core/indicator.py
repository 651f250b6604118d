"""Front end of the scrolling pager indicator state machine.

``ScrollingIndicator`` owns the dot window for the current item count and
turns page-settle events into slot targets. Renderers and animation drivers
subscribe with :meth:`ScrollingIndicator.add_listener`; nothing here knows
how targets are drawn or interpolated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from .dot_config import DotConfig
from .dots import SlotTarget
from .pager import PagerAttacher
from .settle import SettleController, check_page_bounds
from .window import IndicatorState, initialize_window

__all__ = ["ScrollingIndicator", "WindowUpdate"]

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowUpdate:
    """Targets emitted after a window rebuild or a settle event."""

    targets: tuple[SlotTarget, ...]
    rebuilt: bool = False
    width: float = 0.0
    height: float = 0.0


Listener = Callable[[WindowUpdate], None]


class ScrollingIndicator:
    def __init__(self, config: DotConfig | None = None):
        self._config = config or DotConfig()
        self._controller = SettleController(self._config)
        self._state: IndicatorState | None = None
        self._item_count = 0
        self._dot_count_initialized = False
        self._listeners: list[Listener] = []
        self._attacher: PagerAttacher[Any] | None = None
        self._attach_callback: Callable[[], None] | None = None

    # ----- configuration -----

    @property
    def config(self) -> DotConfig:
        return self._config

    def configure(self, config: DotConfig) -> None:
        """Swap the geometry; an existing window is rebuilt for the new values.

        When the new minimum visible count is above the item count the
        window is dropped and listeners receive an empty rebuild.
        """
        if config == self._config:
            return
        self._config = config
        self._controller.config = config
        if self._state is None:
            return
        page = self.page_index
        if not self._init_dots(self._item_count, force=True):
            LOG.debug("Item count %d below new minimum; window dropped", self._item_count)
            self._state = None
            self._dot_count_initialized = False
            self._emit((), rebuilt=True)
            return
        self.jump_to_page(page)

    # ----- state -----

    @property
    def state(self) -> IndicatorState | None:
        return self._state

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def page_index(self) -> int:
        return self._state.page_index if self._state is not None else 0

    def targets(self) -> tuple[SlotTarget, ...]:
        if self._state is None:
            return ()
        return self._state.targets()

    # ----- listeners -----

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, targets: tuple[SlotTarget, ...], *, rebuilt: bool = False) -> None:
        state = self._state
        update = WindowUpdate(
            targets=targets,
            rebuilt=rebuilt,
            width=state.width if state is not None else 0.0,
            height=state.height if state is not None else 0.0,
        )
        for listener in list(self._listeners):
            listener(update)

    # ----- item count and paging -----

    def set_item_count(self, count: int) -> None:
        """Rebuild the window for ``count`` pages unless it is already built for it."""
        self._init_dots(count)

    set_dot_count = set_item_count

    def _init_dots(self, count: int, *, force: bool = False) -> bool:
        """Build the window for ``count``; return False when ``count`` is too small."""
        if count == self._item_count and self._dot_count_initialized and not force:
            return True
        state = initialize_window(count, self._config)
        if state is None:
            return False
        self._state = state
        self._item_count = count
        self._dot_count_initialized = True
        self._emit(state.targets(), rebuilt=True)
        return True

    def on_page_settled(self, page: int) -> None:
        """Move the selection to ``page`` and emit one update.

        Pages between the current one and ``page`` are passed through in
        order, so a jump leaves the same window as paging there. Raises
        ``IndexError`` when ``page`` is outside ``[0, item_count)`` (page 0 is
        always allowed). Does nothing before a window exists or when ``page``
        is already current.
        """
        check_page_bounds(page, self._item_count)
        if self._state is None:
            return
        targets = self._controller.settle(self._state, page)
        if targets:
            self._emit(targets)

    def jump_to_page(self, page: int) -> None:
        """Settle every page between the current one and ``page``, emitting an update per page."""
        check_page_bounds(page, self._item_count)
        state = self._state
        if state is None:
            return
        step = 1 if page > state.page_index else -1
        while state.page_index != page:
            self.on_page_settled(state.page_index + step)

    # ----- pager attachment -----

    def attach_to_pager(self, pager: Any, attacher: PagerAttacher[Any]) -> None:
        self.detach_from_pager()
        attacher.attach_to_pager(self, pager)
        self._attacher = attacher

        def attach_again() -> None:
            # detach_from_pager clears the initialized flag, forcing a rebuild
            self.attach_to_pager(pager, attacher)

        self._attach_callback = attach_again

    def detach_from_pager(self) -> None:
        if self._attacher is not None:
            self._attacher.detach_from_pager()
            self._attacher = None
            self._attach_callback = None
        self._dot_count_initialized = False

    def reattach(self) -> None:
        """Detach and attach again, rebuilding the window from the pager's count."""
        if self._attach_callback is None:
            return
        LOG.debug("Reattaching indicator to pager")
        self._attach_callback()
