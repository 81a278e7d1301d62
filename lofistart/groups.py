from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .model import FAVORITES_GROUP, PRIVATE_CATEGORY, Bookmark


class UnknownGroupError(AssertionError):
    """A reorder was requested for a group no bookmark can be derived into."""


def is_favorite_member(b: Bookmark) -> bool:
    return b.is_favorite and b.category != PRIVATE_CATEGORY


def group_of(b: Bookmark) -> Optional[str]:
    """Group a bookmark is rendered (and dragged) in.

    Favorites win over the category. A favorite inside the Private category
    belongs to no group at all.
    """
    if is_favorite_member(b):
        return FAVORITES_GROUP
    if b.is_favorite:
        return None
    return b.category_label


def in_group(b: Bookmark, group: str) -> bool:
    if group == FAVORITES_GROUP:
        return is_favorite_member(b)
    return not b.is_favorite and b.category_label == group


def partition(bookmarks: Iterable[Bookmark], group: str) -> Tuple[List[Bookmark], List[Bookmark]]:
    """Split into (members of ``group``, everything else), both order-preserving."""
    members: List[Bookmark] = []
    others: List[Bookmark] = []
    for b in bookmarks:
        (members if in_group(b, group) else others).append(b)
    return members, others


def known_groups(bookmarks: Iterable[Bookmark]) -> Set[str]:
    out: Set[str] = set()
    for b in bookmarks:
        g = group_of(b)
        if g is not None:
            out.add(g)
    return out


def require_group(bookmarks: Sequence[Bookmark], group: str) -> None:
    if group not in known_groups(bookmarks):
        raise UnknownGroupError(f"no bookmark belongs to group {group!r}")


def category_groups(bookmarks: Iterable[Bookmark]) -> Dict[str, List[Bookmark]]:
    # Keyed in first-seen order; favorites are not part of any category group.
    cats: Dict[str, List[Bookmark]] = {}
    for b in bookmarks:
        if b.is_favorite:
            continue
        cats.setdefault(b.category_label, []).append(b)
    return cats


def favorites(bookmarks: Iterable[Bookmark]) -> List[Bookmark]:
    return [b for b in bookmarks if is_favorite_member(b)]


def derived_labels(bookmarks: Iterable[Bookmark]) -> List[str]:
    return list(category_groups(bookmarks))
