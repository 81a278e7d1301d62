import itertools
from functools import cmp_to_key

import pytest

from lofistart.categories import (
    category_size,
    compare_categories,
    move_category,
    set_category_size,
    sorted_categories,
    toggle_collapsed,
)


def test_unseen_label_is_appended_then_moved():
    assert move_category(["Work"], ["Social", "Work"], "Social", "Work") == ("Social", "Work")


def test_unseen_target_is_appended_too():
    out = move_category(["Work"], [], "Work", "Brand New")
    assert out == ("Brand New", "Work")


def test_empty_explicit_order_falls_back_to_rendered_labels():
    out = move_category([], ["AI Tools", "Dev", "Media"], "Media", "AI Tools")
    assert out == ("Media", "AI Tools", "Dev")


def test_moving_down_inserts_at_target_former_index():
    out = move_category(["A", "B", "C", "D"], [], "A", "C")
    assert out == ("B", "C", "A", "D")


def test_self_drop_returns_order_unchanged():
    assert move_category(["A", "B"], [], "B", "B") == ("A", "B")


def test_inputs_are_not_mutated():
    order = ["A", "B"]
    derived = ["A", "B", "C"]
    move_category(order, derived, "C", "A")
    assert order == ["A", "B"]
    assert derived == ["A", "B", "C"]


def test_sort_listed_first_then_by_label():
    labels = ["media", "Dev", "Work", "AI Tools", "social"]
    assert sorted_categories(labels, ["Work", "AI Tools"]) == ["Work", "AI Tools", "Dev", "media", "social"]


def test_sort_without_explicit_order_is_case_insensitive():
    assert sorted_categories(["beta", "Alpha", "alpha", "Beta"], []) == ["Alpha", "alpha", "Beta", "beta"]


@pytest.mark.parametrize(
    "order",
    [[], ["c"], ["b", "a"], ["z", "a", "z"], ["E", "d", "c", "b", "a"]],
)
def test_comparator_is_a_consistent_total_order(order):
    labels = ["a", "B", "c", "d", "E", "z"]
    cmp = compare_categories(order)
    for x, y in itertools.product(labels, repeat=2):
        assert cmp(x, y) == -cmp(y, x)
        assert (cmp(x, y) == 0) == (x == y)
    for x, y, z in itertools.permutations(labels, 3):
        if cmp(x, y) < 0 and cmp(y, z) < 0:
            assert cmp(x, z) < 0
    expected = sorted(labels, key=cmp_to_key(cmp))
    for perm in itertools.islice(itertools.permutations(labels), 50):
        assert sorted_categories(perm, order) == expected


def test_toggle_collapsed_adds_and_removes():
    assert toggle_collapsed((), "Dev") == ("Dev",)
    assert toggle_collapsed(("Dev", "Media"), "Dev") == ("Media",)


def test_category_size_override_and_clear():
    sizes = set_category_size({}, "Dev", "large")
    assert category_size(sizes, "Dev", "medium") == "large"
    assert category_size(sizes, "Media", "medium") == "medium"
    assert set_category_size(sizes, "Dev", None) == {}
    assert sizes == {"Dev": "large"}
    with pytest.raises(ValueError):
        set_category_size({}, "Dev", "huge")
