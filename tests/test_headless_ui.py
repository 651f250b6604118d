"""Headless smoke tests for the PySide6 indicator widget."""

from __future__ import annotations

import os

import numpy as np
import pytest

try:  # pragma: no cover - environment-dependent import guard
    from PySide6 import QtGui, QtWidgets
except ImportError as exc:  # pragma: no cover - skip when Qt dependencies missing
    pytest.skip(f"PySide6 import failed: {exc}", allow_module_level=True)

from config import IndicatorConfig
from ui.animation import SlotAnimator
from ui.indicator_widget import ScrollingPagerIndicator
from ui.pager_attacher import StackedWidgetAttacher


# Ensure the tests run with Qt's offscreen platform.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qt_app():
    """Provide a global QApplication for headless UI tests."""

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
    app.quit()


def _make_stack(pages: int) -> QtWidgets.QStackedWidget:
    stack = QtWidgets.QStackedWidget()
    for idx in range(pages):
        stack.addWidget(QtWidgets.QLabel(f"Page {idx + 1}"))
    return stack


def test_widget_size_hint_follows_measure(qt_app):
    widget = ScrollingPagerIndicator(IndicatorConfig())
    assert widget.sizeHint().width() == 0
    widget.set_dot_count(20)
    assert widget.sizeHint().width() == 104
    assert widget.sizeHint().height() == 12
    assert widget.minimumSizeHint() == widget.sizeHint()
    widget.deleteLater()


def test_widget_animates_towards_targets(qt_app):
    widget = ScrollingPagerIndicator(IndicatorConfig(animation_duration_ms=500))
    widget.set_dot_count(20)
    for page in range(1, 5):
        widget.on_page_settled(page)
    assert not widget.animator.any_running()

    widget.on_page_settled(5)
    assert widget.animator.any_running()

    widget.animator.finish_all()
    assert not widget.animator.any_running()
    expected = widget.indicator.state.as_array()
    shown = np.array([[x, y, r, float(sel)] for x, y, r, sel in widget.displayed_dots()])
    np.testing.assert_allclose(shown, expected)
    widget.deleteLater()


def test_widget_without_animation_jumps(qt_app):
    widget = ScrollingPagerIndicator(IndicatorConfig(animation_duration_ms=0))
    widget.set_dot_count(20)
    widget.jump_to_page(9)
    assert not widget.animator.any_running()
    xs = [x for x, _, _, _ in widget.displayed_dots()]
    assert xs == [slot.center_x for slot in widget.indicator.state.slots]
    widget.deleteLater()


def test_widget_paints_selected_dot(qt_app):
    widget = ScrollingPagerIndicator(IndicatorConfig())
    widget.set_dot_count(20)
    widget.resize(widget.sizeHint())
    image = widget.grab().toImage()
    assert image.pixelColor(32, 6) == QtGui.QColor("#2f80ed")
    assert image.pixelColor(42, 6) == QtGui.QColor("#9e9e9e")

    widget.set_selected_dot_color("#ff0000")
    image = widget.grab().toImage()
    assert image.pixelColor(32, 6) == QtGui.QColor("#ff0000")
    widget.deleteLater()


def test_widget_configure_rebuilds(qt_app):
    widget = ScrollingPagerIndicator(IndicatorConfig(animation_duration_ms=0))
    widget.set_dot_count(20)
    widget.jump_to_page(3)
    widget.configure(IndicatorConfig(dot_spacing=16.0, animation_duration_ms=0))
    assert widget.indicator.page_index == 3
    assert widget.sizeHint().width() == 184
    assert widget.animator.duration_ms == 0
    widget.deleteLater()


def test_slot_animator_last_target_wins(qt_app):
    animator = SlotAnimator(1000)
    animator.jump(0, 10.0, 4.0)
    animator.animate(0, 20.0, 4.0)
    animator.animate(0, 30.0, 2.0)
    assert animator.is_running(0)
    animator.finish_all()
    assert animator.displayed(0, (0.0, 0.0)) == (30.0, 2.0)
    animator.clear()
    assert animator.displayed(0, (-1.0, -1.0)) == (-1.0, -1.0)


def test_stacked_widget_attacher(qt_app):
    stack = _make_stack(12)
    widget = ScrollingPagerIndicator(IndicatorConfig(animation_duration_ms=0))
    widget.attach_to_pager(stack)
    indicator = widget.indicator
    assert indicator.item_count == 12
    assert indicator.page_index == 0

    stack.setCurrentIndex(6)
    assert indicator.page_index == 6
    stack.setCurrentIndex(2)
    assert indicator.page_index == 2

    stack.removeWidget(stack.widget(11))
    assert indicator.item_count == 11
    assert indicator.page_index == 2

    stack.addWidget(QtWidgets.QLabel("Extra"))
    stack.addWidget(QtWidgets.QLabel("Extra 2"))
    qt_app.processEvents()
    assert indicator.item_count == 13
    stack.setCurrentIndex(12)
    assert indicator.page_index == 12

    widget.detach_from_pager()
    stack.setCurrentIndex(0)
    assert indicator.page_index == 12

    widget.deleteLater()
    stack.deleteLater()


def test_stacked_widget_attacher_starts_on_current_page(qt_app):
    stack = _make_stack(20)
    stack.setCurrentIndex(8)
    widget = ScrollingPagerIndicator(IndicatorConfig(animation_duration_ms=0))
    widget.attach_to_pager(stack, StackedWidgetAttacher())
    assert widget.indicator.page_index == 8
    assert widget.indicator.state.describe() == "NO S M N N N N SEL M S"
    widget.deleteLater()
    stack.deleteLater()


def test_stacked_widget_attacher_rejects_missing_pager(qt_app):
    widget = ScrollingPagerIndicator(IndicatorConfig())
    with pytest.raises(ValueError):
        widget.attach_to_pager(None)
    widget.deleteLater()


def test_stacked_widget_removing_current_page_rebuilds_once(qt_app):
    stack = _make_stack(12)
    widget = ScrollingPagerIndicator(IndicatorConfig(animation_duration_ms=0))
    widget.attach_to_pager(stack)
    stack.setCurrentIndex(11)

    rebuilds = []
    widget.indicator.add_listener(lambda update: rebuilds.append(update) if update.rebuilt else None)
    stack.removeWidget(stack.widget(11))

    assert len(rebuilds) == 1
    assert widget.indicator.item_count == 11
    assert widget.indicator.page_index == stack.currentIndex() == 10

    widget.deleteLater()
    stack.deleteLater()
