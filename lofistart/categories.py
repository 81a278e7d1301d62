from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .model import BOOKMARK_SIZES


def move_category(
    explicit_order: Sequence[str],
    derived_labels: Sequence[str],
    source_label: str,
    target_label: str,
) -> Tuple[str, ...]:
    """Reorder ``source_label`` onto ``target_label``.

    The working list is the explicit order, or the rendered label order when no
    explicit order exists yet. Labels not seen before are appended first, so a
    freshly created category can always be moved.
    """
    if source_label == target_label:
        return tuple(explicit_order)

    order: List[str] = list(explicit_order) if explicit_order else list(derived_labels)
    if source_label not in order:
        order.append(source_label)
    if target_label not in order:
        order.append(target_label)

    old_idx = order.index(source_label)
    new_idx = order.index(target_label)
    del order[old_idx]
    order.insert(new_idx, source_label)
    return tuple(order)


def _label_key(label: str) -> Tuple[str, str]:
    return (label.casefold(), label)


def compare_categories(order: Sequence[str]) -> Callable[[str, str], int]:
    index: Dict[str, int] = {}
    for i, label in enumerate(order):
        index.setdefault(label, i)

    def cmp(a: str, b: str) -> int:
        ia = index.get(a)
        ib = index.get(b)
        if ia is not None and ib is not None:
            return (ia > ib) - (ia < ib)
        if ia is not None:
            return -1
        if ib is not None:
            return 1
        ka, kb = _label_key(a), _label_key(b)
        return (ka > kb) - (ka < kb)

    return cmp


def sorted_categories(labels: Iterable[str], order: Sequence[str]) -> List[str]:
    return sorted(labels, key=cmp_to_key(compare_categories(order)))


def toggle_collapsed(collapsed: Sequence[str], label: str) -> Tuple[str, ...]:
    if label in collapsed:
        return tuple(c for c in collapsed if c != label)
    return tuple(collapsed) + (label,)


def set_category_size(sizes: Mapping[str, str], label: str, size: Optional[str]) -> Dict[str, str]:
    """Override (or with ``size=None`` clear) the bookmark size of one category."""
    out = dict(sizes)
    if size is None:
        out.pop(label, None)
        return out
    if size not in BOOKMARK_SIZES:
        raise ValueError(f"unknown bookmark size: {size!r}")
    out[label] = size
    return out


def category_size(sizes: Mapping[str, str], label: str, global_size: str) -> str:
    return sizes.get(label) or global_size
