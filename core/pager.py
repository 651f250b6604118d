"""Page sources that drive a :class:`~core.indicator.ScrollingIndicator`."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from .indicator import ScrollingIndicator

__all__ = ["PagerAttacher", "PageModel", "PageModelAttacher"]

T = TypeVar("T")


class PagerAttacher(abc.ABC, Generic[T]):
    """Binds an indicator to a concrete pager.

    ``attach_to_pager`` must push the item count with
    :meth:`ScrollingIndicator.set_item_count`, then the current page with
    :meth:`ScrollingIndicator.jump_to_page`, and arrange for
    :meth:`ScrollingIndicator.reattach` to run whenever the pager's item
    count changes. ``detach_from_pager`` removes every callback it added.
    """

    @abc.abstractmethod
    def attach_to_pager(self, indicator: "ScrollingIndicator", pager: T) -> None:
        ...

    @abc.abstractmethod
    def detach_from_pager(self) -> None:
        ...


class PageModel:
    """Minimal pager: an item count, a current page and change observers."""

    def __init__(self, count: int = 0, current: int = 0):
        if count < 0:
            raise ValueError("count must be non-negative")
        self._count = int(count)
        self._current = 0
        self._page_observers: list[Callable[[int], None]] = []
        self._count_observers: list[Callable[[int], None]] = []
        if count:
            self._current = self._clamp(current)

    @property
    def count(self) -> int:
        return self._count

    @property
    def current(self) -> int:
        return self._current

    def _clamp(self, page: int) -> int:
        return max(0, min(int(page), max(0, self._count - 1)))

    def set_current(self, page: int) -> None:
        page = self._clamp(page)
        if page == self._current:
            return
        self._current = page
        for observer in list(self._page_observers):
            observer(page)

    def next(self) -> None:
        self.set_current(self._current + 1)

    def previous(self) -> None:
        self.set_current(self._current - 1)

    def set_count(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        if count == self._count:
            return
        self._count = int(count)
        self._current = self._clamp(self._current)
        for observer in list(self._count_observers):
            observer(count)

    def add_page_observer(self, observer: Callable[[int], None]) -> None:
        self._page_observers.append(observer)

    def remove_page_observer(self, observer: Callable[[int], None]) -> None:
        if observer in self._page_observers:
            self._page_observers.remove(observer)

    def add_count_observer(self, observer: Callable[[int], None]) -> None:
        self._count_observers.append(observer)

    def remove_count_observer(self, observer: Callable[[int], None]) -> None:
        if observer in self._count_observers:
            self._count_observers.remove(observer)


class PageModelAttacher(PagerAttacher[PageModel]):
    """Attacher for :class:`PageModel`."""

    def __init__(self) -> None:
        self._model: PageModel | None = None
        self._on_page: Callable[[int], None] | None = None
        self._on_count: Callable[[int], None] | None = None

    def attach_to_pager(self, indicator: "ScrollingIndicator", pager: PageModel) -> None:
        self._model = pager
        indicator.set_item_count(pager.count)
        indicator.jump_to_page(pager.current)

        def on_page(page: int) -> None:
            indicator.jump_to_page(page)

        def on_count(count: int) -> None:
            indicator.reattach()

        self._on_page = on_page
        self._on_count = on_count
        pager.add_page_observer(on_page)
        pager.add_count_observer(on_count)

    def detach_from_pager(self) -> None:
        if self._model is None:
            return
        if self._on_page is not None:
            self._model.remove_page_observer(self._on_page)
        if self._on_count is not None:
            self._model.remove_count_observer(self._on_count)
        self._model = None
        self._on_page = None
        self._on_count = None
