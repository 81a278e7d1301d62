from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .categories import sorted_categories
from .groups import category_groups, favorites, partition, require_group
from .log import get_logger
from .model import DEFAULT_CATEGORY, FAVORITES_GROUP, Bookmark, ItemKind

log = get_logger(__name__)


def move_bookmark(
    bookmarks: Sequence[Bookmark],
    source_group: str,
    source_id: str,
    target_group: str,
    target_id: str,
    kind: "ItemKind | str" = ItemKind.BOOKMARK,
) -> Tuple[Bookmark, ...]:
    """Move ``source_id`` onto ``target_id`` inside ``target_group``.

    The group is isolated from the flat list, reordered on its own and appended
    after every other bookmark. As a side effect each reorder leaves the group's
    bookmarks contiguous at the end of the list.

    Only same-group moves are supported: foreign payloads, self drops, group
    mismatches and ids outside the group leave the list unchanged.
    """
    current = tuple(bookmarks)
    if kind != ItemKind.BOOKMARK:
        log.debug("Rejecting %s payload dropped on bookmark %s.", kind, target_id)
        return current
    if not source_id or source_id == target_id:
        return current
    if source_group and source_group != target_group:
        log.debug("Cross-group bookmark drop %s -> %s ignored.", source_group, target_group)
        return current

    require_group(current, target_group)
    members, others = partition(current, target_group)

    old_idx = _index_of(members, source_id)
    new_idx = _index_of(members, target_id)
    if old_idx < 0 or new_idx < 0:
        return current

    moved = members.pop(old_idx)
    members.insert(new_idx, moved)
    return tuple(others) + tuple(members)


def _index_of(items: Sequence[Bookmark], bookmark_id: str) -> int:
    for i, b in enumerate(items):
        if b.id == bookmark_id:
            return i
    return -1


def normalize_bookmark_url(url: str) -> str:
    url = url.strip()
    if not url.startswith("http"):
        url = f"https://{url}"
    return url


def add_bookmark(
    bookmarks: Sequence[Bookmark],
    title: str,
    url: str,
    *,
    category: str = "",
    is_favorite: bool = False,
    bookmark_id: Optional[str] = None,
) -> Tuple[Bookmark, ...]:
    if not title or not url:
        raise ValueError("bookmark needs both a title and a URL")
    b = Bookmark(
        id=bookmark_id or uuid.uuid4().hex,
        title=title,
        url=normalize_bookmark_url(url),
        is_favorite=is_favorite,
        category=category.strip() or DEFAULT_CATEGORY,
    )
    return tuple(bookmarks) + (b,)


def remove_bookmark(bookmarks: Sequence[Bookmark], bookmark_id: str) -> Tuple[Bookmark, ...]:
    return tuple(b for b in bookmarks if b.id != bookmark_id)


def toggle_favorite(bookmarks: Sequence[Bookmark], bookmark_id: str) -> Tuple[Bookmark, ...]:
    return tuple(replace(b, is_favorite=not b.is_favorite) if b.id == bookmark_id else b for b in bookmarks)


@dataclass(frozen=True)
class GroupView:
    name: str
    bookmarks: Tuple[Bookmark, ...]


def group_view(bookmarks: Sequence[Bookmark], category_order: Sequence[str]) -> List[GroupView]:
    """Groups in render order: favorites (when any) then the sorted categories."""
    out: List[GroupView] = []
    favs = favorites(bookmarks)
    if favs:
        out.append(GroupView(name=FAVORITES_GROUP, bookmarks=tuple(favs)))
    cats = category_groups(bookmarks)
    for label in sorted_categories(cats, category_order):
        out.append(GroupView(name=label, bookmarks=tuple(cats[label])))
    return out
