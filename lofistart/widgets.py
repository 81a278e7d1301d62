from __future__ import annotations

from typing import List, Mapping, Optional

from .log import get_logger
from .model import Dashboard, WidgetKind, WidgetLayout, Zone

log = get_logger(__name__)

# Widgets that live in the placement zones; clock, search and quote are fixed.
PLACEABLE_WIDGETS = tuple(k.value for k in WidgetKind)


def move_widget(
    layout: WidgetLayout,
    source_zone: "str | Zone",
    source_id: str,
    target_zone: "str | Zone",
    target_id: Optional[str],
) -> WidgetLayout:
    """Apply a widget drop to the placement zones.

    Dropping onto another widget swaps the two slots (inside one zone or across
    zones, lengths preserved). Dropping onto a zone's append area (``target_id``
    is None) moves the widget to the end of that zone. Stale or self drops
    return ``layout`` unchanged.
    """
    src_zone = Zone.parse(source_zone)
    dst_zone = Zone.parse(target_zone)

    src: List[str] = list(layout.zone(src_zone))
    if source_id not in src:
        log.debug("Widget %s not in %s; ignoring drop.", source_id, src_zone.value)
        return layout
    if source_id == target_id:
        return layout
    src_idx = src.index(source_id)

    if target_id is not None:
        if src_zone is dst_zone:
            if target_id not in src:
                return layout
            dst_idx = src.index(target_id)
            src[src_idx], src[dst_idx] = target_id, source_id
            return layout.with_zone(src_zone, src)

        dst: List[str] = list(layout.zone(dst_zone))
        if target_id not in dst:
            return layout
        dst_idx = dst.index(target_id)
        src[src_idx] = target_id
        dst[dst_idx] = source_id
        return layout.with_zone(src_zone, src).with_zone(dst_zone, dst)

    del src[src_idx]
    if src_zone is dst_zone:
        src.append(source_id)
        return layout.with_zone(src_zone, src)
    dst = list(layout.zone(dst_zone))
    dst.append(source_id)
    return layout.with_zone(src_zone, src).with_zone(dst_zone, dst)


def remove_widget(layout: WidgetLayout, widget_id: str) -> WidgetLayout:
    out = layout
    for z in Zone:
        items = layout.zone(z)
        if widget_id in items:
            out = out.with_zone(z, [w for w in items if w != widget_id])
    return out


def place_widget(layout: WidgetLayout, widget_id: str) -> WidgetLayout:
    if layout.zone_of(widget_id) is not None:
        return layout
    return layout.with_zone(Zone.SIDEBAR, layout.sidebar + (widget_id,))


def set_widget_enabled(dashboard: Dashboard, widget_id: str, enabled: bool) -> Dashboard:
    """Flip a widget's enabled flag.

    A disabled widget keeps its slot, so switching it back on shows it where it
    was. Enabling a widget that is not placed anywhere appends it to the
    sidebar.
    """
    if widget_id not in PLACEABLE_WIDGETS:
        raise ValueError(f"unknown widget: {widget_id!r}")
    widgets = dict(dashboard.widgets)
    widgets[widget_id] = enabled
    layout = place_widget(dashboard.layout, widget_id) if enabled else dashboard.layout
    return dashboard.evolve(widgets=widgets, layout=layout)


def dismiss_widget(dashboard: Dashboard, widget_id: str) -> Dashboard:
    """Close a widget from its own card: disable it and drop it from every zone."""
    if widget_id not in PLACEABLE_WIDGETS:
        raise ValueError(f"unknown widget: {widget_id!r}")
    widgets = dict(dashboard.widgets)
    widgets[widget_id] = False
    return dashboard.evolve(widgets=widgets, layout=remove_widget(dashboard.layout, widget_id))


def visible_widgets(layout: WidgetLayout, enabled: Mapping[str, bool], zone: "str | Zone") -> List[str]:
    return [w for w in layout.zone(zone) if w in PLACEABLE_WIDGETS and enabled.get(w, False)]


def has_sidebar_widgets(layout: WidgetLayout, enabled: Mapping[str, bool]) -> bool:
    return bool(visible_widgets(layout, enabled, Zone.SIDEBAR))
