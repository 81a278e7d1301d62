from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

DEFAULT_CATEGORY = "General"
PRIVATE_CATEGORY = "Private"
FAVORITES_GROUP = "favorites"

BOOKMARK_SIZES = ("icon", "small", "medium", "large")


class ItemKind(str, Enum):
    """Tag carried by a drag payload; controllers only accept their own."""

    WIDGET = "WIDGET"
    BOOKMARK = "BOOKMARK"
    CATEGORY = "CATEGORY"


class WidgetKind(str, Enum):
    WEATHER = "weather"
    POMODORO = "pomodoro"
    TODO = "todo"
    NOTES = "notes"
    CRYPTO = "crypto"
    BREATHING = "breathing"


class Zone(str, Enum):
    HEADER = "header"
    SIDEBAR = "sidebar"
    TOP_LEFT = "topLeft"
    TOP_RIGHT = "topRight"

    @classmethod
    def parse(cls, value: "str | Zone") -> "Zone":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown placement zone: {value!r}") from None


_ZONE_FIELDS = {
    Zone.HEADER: "header",
    Zone.SIDEBAR: "sidebar",
    Zone.TOP_LEFT: "top_left",
    Zone.TOP_RIGHT: "top_right",
}


@dataclass(frozen=True)
class Bookmark:
    id: str
    title: str
    url: str
    is_favorite: bool = False
    category: Optional[str] = None

    @property
    def category_label(self) -> str:
        return self.category or DEFAULT_CATEGORY


@dataclass(frozen=True)
class WidgetLayout:
    header: Tuple[str, ...] = ()
    sidebar: Tuple[str, ...] = ()
    top_left: Tuple[str, ...] = ()
    top_right: Tuple[str, ...] = ()

    def zone(self, name: "str | Zone") -> Tuple[str, ...]:
        return getattr(self, _ZONE_FIELDS[Zone.parse(name)])

    def with_zone(self, name: "str | Zone", items) -> "WidgetLayout":
        return replace(self, **{_ZONE_FIELDS[Zone.parse(name)]: tuple(items)})

    def zone_of(self, widget_id: str) -> Optional[Zone]:
        for z in Zone:
            if widget_id in self.zone(z):
                return z
        return None

    def as_dict(self) -> Dict[str, list]:
        return {z.value: list(self.zone(z)) for z in Zone}


@dataclass(frozen=True)
class Dashboard:
    """The slice of the start-page configuration the engine reads and updates.

    Keys the engine does not understand (theme, clock, search engine, ...) are
    kept in ``extra`` so a document survives a load/save cycle unchanged.
    """

    bookmarks: Tuple[Bookmark, ...] = ()
    layout: WidgetLayout = field(default_factory=WidgetLayout)
    category_order: Tuple[str, ...] = ()
    collapsed_categories: Tuple[str, ...] = ()
    category_bookmark_sizes: Dict[str, str] = field(default_factory=dict)
    global_bookmark_size: str = "medium"
    widgets: Dict[str, bool] = field(default_factory=dict)
    lock_layout: bool = False
    zen_mode: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    def widget_enabled(self, widget_id: str) -> bool:
        return bool(self.widgets.get(widget_id, False))

    def evolve(self, **changes) -> "Dashboard":
        return replace(self, **changes)
