from __future__ import annotations

import logging
import math
from typing import Any

from PySide6 import QtCore, QtGui, QtWidgets

from config import IndicatorConfig
from core.dot_config import DotConfig
from core.indicator import ScrollingIndicator, WindowUpdate
from core.pager import PagerAttacher
from ui.animation import SlotAnimator

LOG = logging.getLogger(__name__)


class ScrollingPagerIndicator(QtWidgets.QWidget):
    """Row of page dots that slides as the attached pager changes page.

    The widget renders the targets produced by :class:`ScrollingIndicator`;
    slot motion between targets is delegated to :class:`SlotAnimator`.
    """

    def __init__(
        self,
        config: IndicatorConfig | None = None,
        *,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        config = config or IndicatorConfig()
        self._dot_color = QtGui.QColor(config.dot_color)
        self._selected_dot_color = QtGui.QColor(config.effective_selected_dot_color)
        self._preferred_size = QtCore.QSize(0, 0)

        self._animator = SlotAnimator(config.animation_duration_ms, parent=self)
        self._animator.changed.connect(self.update)

        self._indicator = ScrollingIndicator(config.dot_config())
        self._indicator.add_listener(self._on_window_update)

        self.setSizePolicy(QtWidgets.QSizePolicy.Fixed, QtWidgets.QSizePolicy.Fixed)

    # ----- state machine passthrough -----

    @property
    def indicator(self) -> ScrollingIndicator:
        return self._indicator

    @property
    def animator(self) -> SlotAnimator:
        return self._animator

    def configure(self, config: IndicatorConfig) -> None:
        self._dot_color = QtGui.QColor(config.dot_color)
        self._selected_dot_color = QtGui.QColor(config.effective_selected_dot_color)
        self._animator.set_duration(config.animation_duration_ms)
        self._indicator.configure(config.dot_config())
        self.update()

    def set_dot_count(self, count: int) -> None:
        self._indicator.set_item_count(count)

    def on_page_settled(self, page: int) -> None:
        self._indicator.on_page_settled(page)

    def jump_to_page(self, page: int) -> None:
        self._indicator.jump_to_page(page)

    def attach_to_pager(self, pager: Any, attacher: PagerAttacher[Any] | None = None) -> None:
        if attacher is None:
            from ui.pager_attacher import StackedWidgetAttacher

            attacher = StackedWidgetAttacher()
        self._indicator.attach_to_pager(pager, attacher)

    def detach_from_pager(self) -> None:
        self._indicator.detach_from_pager()

    def reattach(self) -> None:
        self._indicator.reattach()
        self.update()

    # ----- colors -----

    def dot_color(self) -> QtGui.QColor:
        return QtGui.QColor(self._dot_color)

    def set_dot_color(self, color: QtGui.QColor | str) -> None:
        self._dot_color = QtGui.QColor(color)
        self.update()

    def selected_dot_color(self) -> QtGui.QColor:
        return QtGui.QColor(self._selected_dot_color)

    def set_selected_dot_color(self, color: QtGui.QColor | str) -> None:
        self._selected_dot_color = QtGui.QColor(color)
        self.update()

    # ----- rendering -----

    def dot_config(self) -> DotConfig:
        return self._indicator.config

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(self._preferred_size)

    def minimumSizeHint(self) -> QtCore.QSize:
        return self.sizeHint()

    def displayed_dots(self) -> list[tuple[float, float, float, bool]]:
        """Current ``(center_x, center_y, radius, is_selected)`` of every slot."""
        state = self._indicator.state
        if state is None:
            return []
        dots = []
        for slot in state.slots:
            x, radius = self._animator.displayed(slot.slot_id, (slot.center_x, slot.radius))
            dots.append((x, slot.center_y, radius, slot.is_selected))
        return dots

    def _on_window_update(self, update: WindowUpdate) -> None:
        if update.rebuilt:
            self._animator.clear()
            size = QtCore.QSize(int(math.ceil(update.width)), int(math.ceil(update.height)))
            if size != self._preferred_size:
                self._preferred_size = size
                LOG.debug("Indicator preferred size %dx%d", size.width(), size.height())
                self.updateGeometry()
        for target in update.targets:
            if target.start_center_x is not None:
                _, radius = self._animator.displayed(target.slot_id, (0.0, 0.0))
                self._animator.jump(target.slot_id, target.start_center_x, radius)
            if target.animate:
                self._animator.animate(target.slot_id, target.center_x, target.radius)
            else:
                self._animator.jump(target.slot_id, target.center_x, target.radius)
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: N802 - Qt override
        dots = self.displayed_dots()
        if not dots:
            return
        state = self._indicator.state
        # Centre the measured row inside whatever space the layout gave us.
        dx = (self.width() - state.width) / 2.0 if state is not None else 0.0
        dy = (self.height() - state.height) / 2.0 if state is not None else 0.0

        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        try:
            for x, y, radius, selected in dots:
                if radius <= 0:
                    continue
                painter.setBrush(self._selected_dot_color if selected else self._dot_color)
                painter.drawEllipse(QtCore.QPointF(x + dx, y + dy), radius, radius)
        finally:
            painter.end()
