# app.py
import logging
import sys

from PySide6 import QtCore, QtWidgets

from config import IndicatorConfig
from ui.indicator_widget import ScrollingPagerIndicator
from ui.pager_attacher import StackedWidgetAttacher


class DemoWindow(QtWidgets.QMainWindow):
    """Stack of numbered pages with a scrolling dot indicator underneath."""

    def __init__(self, pages: int, *, config: IndicatorConfig, start_page: int = 0):
        super().__init__()
        self.setWindowTitle("Scrolling pager indicator")

        self.stack = QtWidgets.QStackedWidget()
        for idx in range(pages):
            self.stack.addWidget(self._make_page(idx))
        if pages:
            self.stack.setCurrentIndex(max(0, min(start_page, pages - 1)))

        self.indicator = ScrollingPagerIndicator(config)
        self.indicator.attach_to_pager(self.stack, StackedWidgetAttacher())

        prev_btn = QtWidgets.QPushButton("◀")
        next_btn = QtWidgets.QPushButton("▶")
        add_btn = QtWidgets.QPushButton("Add page")
        remove_btn = QtWidgets.QPushButton("Remove page")
        prev_btn.clicked.connect(self.previous_page)
        next_btn.clicked.connect(self.next_page)
        add_btn.clicked.connect(self.add_page)
        remove_btn.clicked.connect(self.remove_page)

        nav = QtWidgets.QHBoxLayout()
        nav.addWidget(prev_btn)
        nav.addStretch(1)
        nav.addWidget(self.indicator)
        nav.addStretch(1)
        nav.addWidget(next_btn)

        edit = QtWidgets.QHBoxLayout()
        edit.addStretch(1)
        edit.addWidget(add_btn)
        edit.addWidget(remove_btn)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.addWidget(self.stack, 1)
        layout.addLayout(nav)
        layout.addLayout(edit)
        self.setCentralWidget(central)

    def _make_page(self, idx: int) -> QtWidgets.QWidget:
        label = QtWidgets.QLabel(f"Page {idx + 1}")
        label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        font = label.font()
        font.setPointSize(28)
        label.setFont(font)
        return label

    def next_page(self):
        idx = self.stack.currentIndex()
        if idx + 1 < self.stack.count():
            self.stack.setCurrentIndex(idx + 1)

    def previous_page(self):
        idx = self.stack.currentIndex()
        if idx > 0:
            self.stack.setCurrentIndex(idx - 1)

    def add_page(self):
        self.stack.addWidget(self._make_page(self.stack.count()))

    def remove_page(self):
        widget = self.stack.widget(self.stack.count() - 1)
        if widget is not None:
            self.stack.removeWidget(widget)
            widget.deleteLater()

    def keyPressEvent(self, event):
        if event.key() == QtCore.Qt.Key.Key_Right:
            self.next_page()
        elif event.key() == QtCore.Qt.Key.Key_Left:
            self.previous_page()
        else:
            super().keyPressEvent(event)


def main(
    pages: int = 20,
    *,
    config_path: str | None = None,
    start_page: int = 0,
    duration_ms: int | None = None,
):
    cfg = IndicatorConfig.load(config_path)
    if duration_ms is not None and duration_ms >= 0:
        cfg.animation_duration_ms = duration_ms
    app = QtWidgets.QApplication(sys.argv)

    w = DemoWindow(pages, config=cfg, start_page=start_page)
    w.resize(480, 320)
    w.show()
    app.exec()

if __name__ == "__main__":
    import argparse
    p = argparse.ArgumentParser()
    p.add_argument("--pages", type=int, default=20)
    p.add_argument("--start-page", type=int, default=0)
    p.add_argument("--config")
    p.add_argument("--duration-ms", type=int)
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    main(
        args.pages,
        config_path=args.config,
        start_page=args.start_page,
        duration_ms=args.duration_ms,
    )
