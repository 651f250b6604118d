#!/usr/bin/env python3
"""Trace how the dot window evolves over a sequence of settled pages.

Prints one line per settle event with the slot types (``SEL N M S NO``) and
the selected slot. With ``--plot`` the slot targets are drawn with
pyqtgraph: x is the dot centre, y the step number, symbol size the radius.
"""

from __future__ import annotations

import argparse
import sys

import numpy as np

from core.dot_config import DotConfig
from core.indicator import ScrollingIndicator


def _parse_pages(raw: str, item_count: int) -> list[int]:
    if raw == "sweep":
        forward = list(range(1, item_count))
        return forward + list(range(item_count - 2, -1, -1))
    pages = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part[1:]:
            start_s, end_s = part.split("-", 1)
            start, end = int(start_s), int(end_s)
            step = 1 if end >= start else -1
            pages.extend(range(start, end + step, step))
        else:
            pages.append(int(part))
    return pages


def trace(item_count: int, pages: list[int], config: DotConfig) -> list[tuple[int, str, np.ndarray]]:
    indicator = ScrollingIndicator(config)
    indicator.set_item_count(item_count)
    state = indicator.state
    if state is None:
        raise SystemExit(f"{item_count} items is below the minimum of {config.min_visible_dot_count}")
    rows = [(0, state.describe(), state.as_array())]
    for page in pages:
        indicator.jump_to_page(page)
        rows.append((page, state.describe(), state.as_array()))
    return rows


def _plot(rows: list[tuple[int, str, np.ndarray]]) -> None:
    import pyqtgraph as pg
    from PySide6 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    win = pg.PlotWidget(title="Dot window trace")
    win.invertY(True)
    win.setLabel("bottom", "center x")
    win.setLabel("left", "step")
    for step, (_, _, arr) in enumerate(rows):
        visible = arr[arr[:, 2] > 0]
        if visible.size == 0:
            continue
        brushes = [pg.mkBrush("#2f80ed") if sel else pg.mkBrush("#9e9e9e") for sel in visible[:, 3]]
        scatter = pg.ScatterPlotItem(
            x=visible[:, 0],
            y=np.full(visible.shape[0], float(step)),
            size=visible[:, 2] * 4.0,
            brush=brushes,
            pen=None,
        )
        win.addItem(scatter)
    win.resize(800, 600)
    win.show()
    app.exec()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("item_count", type=int)
    p.add_argument(
        "--pages",
        default="sweep",
        help="comma separated pages or ranges (e.g. 1-8,3), or 'sweep' (default)",
    )
    p.add_argument("--min-visible", type=int, default=2)
    p.add_argument("--plot", action="store_true")
    args = p.parse_args(argv)

    config = DotConfig.create(normal_radius=4.0, dot_spacing=6.0, min_visible_dot_count=args.min_visible)
    rows = trace(args.item_count, _parse_pages(args.pages, args.item_count), config)
    for step, (page, described, arr) in enumerate(rows):
        selected = int(np.flatnonzero(arr[:, 3])[0]) if arr.size else -1
        print(f"{step:3d}  page {page:3d}  sel {selected:2d}  {described}")
    if args.plot:
        _plot(rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
