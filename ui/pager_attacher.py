from __future__ import annotations

import logging
from typing import Callable

from PySide6 import QtCore, QtWidgets

from core.indicator import ScrollingIndicator
from core.pager import PagerAttacher

LOG = logging.getLogger(__name__)


class _ChildWatcher(QtCore.QObject):
    """Report page widgets added to a stack.

    The stack's page count is only updated after the ChildAdded event, so
    the callback runs from the event loop.
    """

    def __init__(self, callback: Callable[[], None], parent: QtCore.QObject | None = None) -> None:
        super().__init__(parent)
        self._callback = callback

    def eventFilter(self, watched: QtCore.QObject, event: QtCore.QEvent) -> bool:  # noqa: N802
        if event.type() == QtCore.QEvent.Type.ChildAdded:
            QtCore.QTimer.singleShot(0, self._callback)
        return False


class StackedWidgetAttacher(PagerAttacher[QtWidgets.QStackedWidget]):
    """Drive an indicator from a :class:`QtWidgets.QStackedWidget`."""

    def __init__(self) -> None:
        self._stack: QtWidgets.QStackedWidget | None = None
        self._indicator: ScrollingIndicator | None = None
        self._watcher: _ChildWatcher | None = None

    def attach_to_pager(
        self, indicator: ScrollingIndicator, pager: QtWidgets.QStackedWidget
    ) -> None:
        if pager is None:
            raise ValueError("attach_to_pager requires a QStackedWidget")
        self._stack = pager
        self._indicator = indicator

        indicator.set_item_count(pager.count())
        current = pager.currentIndex()
        if current >= 0:
            indicator.jump_to_page(current)

        pager.currentChanged.connect(self._on_current_changed)
        pager.widgetRemoved.connect(self._on_widget_removed)
        self._watcher = _ChildWatcher(self._sync_count, parent=pager)
        pager.installEventFilter(self._watcher)

    def detach_from_pager(self) -> None:
        stack = self._stack
        if stack is None:
            return
        try:
            stack.currentChanged.disconnect(self._on_current_changed)
            stack.widgetRemoved.disconnect(self._on_widget_removed)
        except (RuntimeError, TypeError):
            LOG.debug("Stack signals already disconnected", exc_info=True)
        if self._watcher is not None:
            stack.removeEventFilter(self._watcher)
            self._watcher.deleteLater()
            self._watcher = None
        self._stack = None
        self._indicator = None

    def _on_current_changed(self, index: int) -> None:
        indicator = self._indicator
        if indicator is None or index < 0:
            return
        if index >= indicator.item_count:
            # Page count grew; the deferred count sync catches up.
            return
        indicator.jump_to_page(index)

    def _on_widget_removed(self, index: int) -> None:
        self._sync_count()

    def _sync_count(self) -> None:
        if self._stack is None or self._indicator is None:
            return
        if self._stack.count() != self._indicator.item_count:
            self._indicator.reattach()
