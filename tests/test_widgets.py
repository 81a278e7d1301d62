import pytest

from lofistart.model import Dashboard, WidgetLayout, Zone
from lofistart.widgets import (
    dismiss_widget,
    has_sidebar_widgets,
    move_widget,
    place_widget,
    remove_widget,
    set_widget_enabled,
    visible_widgets,
)


def test_same_zone_drop_swaps_positions():
    layout = WidgetLayout(sidebar=("weather", "todo", "notes"))
    out = move_widget(layout, "sidebar", "weather", "sidebar", "notes")
    assert out.sidebar == ("notes", "todo", "weather")


def test_cross_zone_drop_swaps_and_keeps_lengths():
    layout = WidgetLayout(header=("clock",), sidebar=("todo",))
    out = move_widget(layout, "header", "clock", "sidebar", "todo")
    assert out.header == ("todo",)
    assert out.sidebar == ("clock",)


def test_cross_zone_swap_inside_longer_zones():
    layout = WidgetLayout(sidebar=("weather", "todo", "notes"), top_right=("crypto", "pomodoro"))
    out = move_widget(layout, Zone.SIDEBAR, "todo", Zone.TOP_RIGHT, "pomodoro")
    assert out.sidebar == ("weather", "pomodoro", "notes")
    assert out.top_right == ("crypto", "todo")
    assert len(out.sidebar) + len(out.top_right) == 5


def test_append_to_empty_zone_moves_widget():
    layout = WidgetLayout(sidebar=("crypto", "notes"))
    out = move_widget(layout, "sidebar", "crypto", "topLeft", None)
    assert out.sidebar == ("notes",)
    assert out.top_left == ("crypto",)


def test_append_to_own_zone_moves_to_back():
    layout = WidgetLayout(sidebar=("weather", "todo", "notes"))
    out = move_widget(layout, "sidebar", "weather", "sidebar", None)
    assert out.sidebar == ("todo", "notes", "weather")
    assert out.sidebar.count("weather") == 1


def test_self_drop_is_noop():
    layout = WidgetLayout(sidebar=("weather", "todo"))
    assert move_widget(layout, "sidebar", "todo", "sidebar", "todo") is layout


def test_stale_source_is_noop():
    layout = WidgetLayout(sidebar=("weather", "todo"))
    assert move_widget(layout, "header", "todo", "sidebar", "weather") is layout


def test_target_missing_from_target_zone_is_noop():
    layout = WidgetLayout(header=("clock",), sidebar=("weather", "todo"))
    assert move_widget(layout, "sidebar", "weather", "header", "todo") is layout
    assert move_widget(layout, "sidebar", "weather", "sidebar", "clock") is layout


def test_input_layout_is_not_mutated():
    layout = WidgetLayout(sidebar=("weather", "todo", "notes"))
    move_widget(layout, "sidebar", "weather", "topRight", None)
    assert layout.sidebar == ("weather", "todo", "notes")
    assert layout.top_right == ()


def test_unknown_zone_is_a_programming_error():
    layout = WidgetLayout(sidebar=("weather",))
    with pytest.raises(ValueError, match="unknown placement zone"):
        move_widget(layout, "footer", "weather", "sidebar", None)


def test_remove_widget_clears_every_zone():
    layout = WidgetLayout(header=("todo",), sidebar=("weather", "notes"))
    out = remove_widget(layout, "weather")
    assert out.sidebar == ("notes",)
    assert out.header == ("todo",)


def test_place_widget_appends_to_sidebar_only_when_unplaced():
    layout = WidgetLayout(header=("todo",), sidebar=("weather",))
    assert place_widget(layout, "todo") is layout
    assert place_widget(layout, "crypto").sidebar == ("weather", "crypto")


def test_set_widget_enabled_places_and_keeps_slot():
    d = Dashboard(layout=WidgetLayout(sidebar=("weather",)), widgets={"weather": True})
    on = set_widget_enabled(d, "crypto", True)
    assert on.widgets["crypto"] is True
    assert on.layout.sidebar == ("weather", "crypto")

    off = set_widget_enabled(on, "weather", False)
    assert off.widgets["weather"] is False
    assert off.layout == on.layout
    assert d.widgets == {"weather": True}


def test_switching_a_widget_off_and_on_restores_its_zone():
    d = Dashboard(layout=WidgetLayout(header=("weather",), sidebar=("todo",)), widgets={"weather": True})
    back = set_widget_enabled(set_widget_enabled(d, "weather", False), "weather", True)
    assert back.layout == d.layout
    assert back.widgets["weather"] is True


def test_dismiss_widget_disables_and_removes():
    d = Dashboard(layout=WidgetLayout(header=("weather",), sidebar=("todo",)), widgets={"weather": True})
    out = dismiss_widget(d, "weather")
    assert out.widgets["weather"] is False
    assert out.layout.zone_of("weather") is None
    assert out.layout.sidebar == ("todo",)
    # Re-enabling a dismissed widget puts it back at the end of the sidebar.
    assert set_widget_enabled(out, "weather", True).layout.sidebar == ("todo", "weather")
    with pytest.raises(ValueError):
        dismiss_widget(d, "clock")


def test_set_widget_enabled_rejects_fixed_widgets():
    with pytest.raises(ValueError):
        set_widget_enabled(Dashboard(), "clock", True)


def test_visible_widgets_filters_disabled_and_unknown():
    layout = WidgetLayout(sidebar=("weather", "todo", "clock"))
    enabled = {"weather": True, "todo": False, "clock": True}
    assert visible_widgets(layout, enabled, "sidebar") == ["weather"]
    assert has_sidebar_widgets(layout, enabled) is True
    assert has_sidebar_widgets(layout, {}) is False


def _all_drops(layout):
    for src in Zone:
        for wid in layout.zone(src):
            for dst in Zone:
                for target in list(layout.zone(dst)) + [None]:
                    yield src, wid, dst, target


def test_every_drop_keeps_each_widget_exactly_once():
    layout = WidgetLayout(header=("clock",), sidebar=("weather", "todo", "notes"), top_right=("crypto",))
    placed = sorted(w for z in Zone for w in layout.zone(z))
    for src, wid, dst, target in _all_drops(layout):
        out = move_widget(layout, src, wid, dst, target)
        assert sorted(w for z in Zone for w in out.zone(z)) == placed
        if target is not None:
            assert len(out.zone(src)) == len(layout.zone(src))
            assert len(out.zone(dst)) == len(layout.zone(dst))
        elif src is not dst:
            assert out.zone(src).count(wid) == 0
            assert out.zone(dst)[-1] == wid
            assert len(out.zone(dst)) == len(layout.zone(dst)) + 1
