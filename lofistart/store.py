from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from .log import get_logger
from .model import Bookmark, Dashboard, WidgetLayout

log = get_logger(__name__)

Listener = Callable[[Dashboard, Dashboard], None]


class ConfigStore:
    """Holds the current dashboard value and hands out read/update access.

    Every write swaps in a new ``Dashboard``. Listeners get ``(old, new)`` and
    are only called when the value actually changed, which is what a debounced
    persistence layer needs to decide whether to save.
    """

    def __init__(self, dashboard: Dashboard) -> None:
        self._value = dashboard
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def read(self) -> Dashboard:
        return self._value

    def update(self, fn: Callable[[Dashboard], Dashboard]) -> bool:
        old = self._value
        new = fn(old)
        if new == old:
            return False
        self._value = new
        log.debug("Dashboard changed; notifying %d listener(s).", len(self._listeners))
        for listener in list(self._listeners):
            listener(old, new)
        return True

    def read_layout(self) -> WidgetLayout:
        return self._value.layout

    def write_layout(self, layout: WidgetLayout) -> bool:
        return self.update(lambda d: d.evolve(layout=layout))

    def read_bookmarks(self) -> Tuple[Bookmark, ...]:
        return self._value.bookmarks

    def write_bookmarks(self, bookmarks: Sequence[Bookmark]) -> bool:
        return self.update(lambda d: d.evolve(bookmarks=tuple(bookmarks)))

    def read_category_order(self) -> Tuple[str, ...]:
        return self._value.category_order

    def write_category_order(self, order: Sequence[str]) -> bool:
        return self.update(lambda d: d.evolve(category_order=tuple(order)))
