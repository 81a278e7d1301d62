from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .defaults import default_dashboard
from .log import get_logger
from .model import Bookmark, Dashboard, WidgetKind, WidgetLayout

log = get_logger(__name__)


class ConfigFormatError(ValueError):
    """The dashboard document could not be read or does not look like one."""


class BookmarkDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    url: str = ""
    is_favorite: Optional[bool] = Field(None, alias="isFavorite")
    category: Optional[str] = None


class LayoutDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    header: List[str] = Field(default_factory=list)
    sidebar: List[str] = Field(default_factory=list)
    top_left: List[str] = Field(default_factory=list, alias="topLeft")
    top_right: List[str] = Field(default_factory=list, alias="topRight")


class WidgetDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    enabled: bool = False


class DashboardDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    bookmarks: List[BookmarkDocument]
    layout: LayoutDocument = Field(default_factory=LayoutDocument)
    category_order: List[str] = Field(default_factory=list, alias="categoryOrder")
    collapsed_categories: List[str] = Field(default_factory=list, alias="collapsedCategories")
    category_bookmark_sizes: Dict[str, str] = Field(default_factory=dict, alias="categoryBookmarkSizes")
    global_bookmark_size: str = Field("medium", alias="globalBookmarkSize")
    lock_layout: bool = Field(False, alias="lockLayout")
    zen_mode: bool = Field(False, alias="zenMode")


_DOCUMENT_KEYS = {f.alias or name for name, f in DashboardDocument.model_fields.items()}
_WIDGET_KEYS = tuple(k.value for k in WidgetKind)


def parse_dashboard(data: Any) -> Dashboard:
    """Build a ``Dashboard`` from a decoded JSON document.

    Imported documents are shallow-merged over the default configuration, so a
    partial export still yields a complete dashboard. Keys the engine does not
    model (theme, clock, per-widget settings) end up in ``Dashboard.extra``.
    """
    if not isinstance(data, dict) or "bookmarks" not in data:
        raise ConfigFormatError("not a dashboard document (missing 'bookmarks')")

    merged = dump_dashboard(default_dashboard())
    merged.update(data)
    data = merged

    try:
        doc = DashboardDocument.model_validate(data)
        widget_docs = {
            k: WidgetDocument.model_validate(data[k])
            for k in _WIDGET_KEYS
            if isinstance(data.get(k), dict)
        }
    except ValidationError as e:
        raise ConfigFormatError(f"invalid dashboard document: {e}") from e

    bookmarks = tuple(
        Bookmark(
            id=b.id,
            title=b.title,
            url=b.url,
            is_favorite=bool(b.is_favorite),
            category=b.category,
        )
        for b in doc.bookmarks
    )
    layout = WidgetLayout(
        header=tuple(doc.layout.header),
        sidebar=tuple(doc.layout.sidebar),
        top_left=tuple(doc.layout.top_left),
        top_right=tuple(doc.layout.top_right),
    )
    extra: Dict[str, Any] = {}
    for k, v in data.items():
        if k in _DOCUMENT_KEYS:
            continue
        if k in widget_docs:
            # The enabled flag lives in Dashboard.widgets; keep only the rest.
            v = {wk: wv for wk, wv in v.items() if wk != "enabled"}
            if not v:
                continue
        extra[k] = v

    return Dashboard(
        bookmarks=bookmarks,
        layout=layout,
        category_order=tuple(doc.category_order),
        collapsed_categories=tuple(doc.collapsed_categories),
        category_bookmark_sizes=dict(doc.category_bookmark_sizes),
        global_bookmark_size=doc.global_bookmark_size,
        widgets={k: w.enabled for k, w in widget_docs.items()},
        lock_layout=doc.lock_layout,
        zen_mode=doc.zen_mode,
        extra=extra,
    )


def dump_dashboard(dashboard: Dashboard) -> Dict[str, Any]:
    out: Dict[str, Any] = json.loads(json.dumps(dashboard.extra))
    for key, enabled in dashboard.widgets.items():
        obj = out.get(key) if isinstance(out.get(key), dict) else {}
        obj["enabled"] = enabled
        out[key] = obj

    bookmarks = []
    for b in dashboard.bookmarks:
        row: Dict[str, Any] = {"id": b.id, "title": b.title, "url": b.url, "isFavorite": b.is_favorite}
        if b.category is not None:
            row["category"] = b.category
        bookmarks.append(row)

    out.update(
        {
            "bookmarks": bookmarks,
            "layout": dashboard.layout.as_dict(),
            "categoryOrder": list(dashboard.category_order),
            "collapsedCategories": list(dashboard.collapsed_categories),
            "categoryBookmarkSizes": dict(dashboard.category_bookmark_sizes),
            "globalBookmarkSize": dashboard.global_bookmark_size,
            "lockLayout": dashboard.lock_layout,
            "zenMode": dashboard.zen_mode,
        }
    )
    return out


def load_dashboard(path: Path) -> Dashboard:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigFormatError(f"{path}: not UTF-8 text ({e})") from e
    except OSError as e:
        raise ConfigFormatError(f"{path}: cannot read ({e})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigFormatError(f"{path}: not valid JSON ({e})") from e
    dashboard = parse_dashboard(data)
    log.debug("Loaded dashboard from %s: %d bookmarks.", path, len(dashboard.bookmarks))
    return dashboard


def save_dashboard(path: Path, dashboard: Dashboard, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(dump_dashboard(dashboard), ensure_ascii=False, indent=indent)
    path.write_text(text + "\n", encoding="utf-8")
    log.info("Wrote dashboard: %s", path)
