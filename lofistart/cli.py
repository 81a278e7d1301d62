from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from . import __version__
from .bookmarks import group_view
from .codec import ConfigFormatError, load_dashboard, save_dashboard
from .config import Settings, load_settings
from .defaults import default_dashboard
from .gestures import GestureRouter
from .groups import group_of, known_groups
from .log import LogConfig, get_logger, setup_logging
from .model import Dashboard, ItemKind, Zone
from .store import ConfigStore
from .widgets import PLACEABLE_WIDGETS, dismiss_widget, set_widget_enabled, visible_widgets

log = get_logger(__name__)

ZONE_CHOICES = [z.value for z in Zone]


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="lofistart",
        description="Inspect and rearrange a start-page dashboard document (widgets, bookmarks, categories).",
    )
    p.add_argument("-V", "--version", action="version", version=f"lofistart {__version__}")
    p.add_argument("--config", default=None, help="YAML settings file (optional). Env vars set the defaults.")
    p.add_argument("--file", default=None, help="Dashboard JSON document (default: settings.dashboard_file).")
    p.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING/ERROR (overrides env/config).")
    p.add_argument("--no-color", action="store_true", help="Disable colored logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    init = sub.add_parser("init", help="Write the default dashboard document.")
    init.add_argument("--force", action="store_true", help="Overwrite an existing document.")

    sub.add_parser("show", help="Print the widget zones and bookmark groups in render order.")

    mw = sub.add_parser("move-widget", help="Drop a widget onto another widget (swap) or onto a zone (append).")
    mw.add_argument("--id", required=True, help="Widget being dragged.")
    mw.add_argument("--from-zone", required=True, choices=ZONE_CHOICES)
    mw.add_argument("--to-zone", required=True, choices=ZONE_CHOICES)
    mw.add_argument("--onto", default=None, help="Target widget; omit to append to --to-zone.")
    mw.add_argument("--dry-run", action="store_true")

    mb = sub.add_parser("move-bookmark", help="Drop a bookmark onto another bookmark of the same group.")
    mb.add_argument("--id", required=True, help="Bookmark being dragged.")
    mb.add_argument("--onto", required=True, help="Target bookmark.")
    mb.add_argument("--group", default=None, help="Source group (default: the bookmark's own group).")
    mb.add_argument("--to-group", default=None, help="Target group (default: the target bookmark's group).")
    mb.add_argument("--dry-run", action="store_true")

    mc = sub.add_parser("move-category", help="Drop a category header onto another category.")
    mc.add_argument("--label", required=True)
    mc.add_argument("--onto", required=True)
    mc.add_argument("--dry-run", action="store_true")

    tw = sub.add_parser("toggle-widget", help="Enable or disable a widget; a disabled widget keeps its slot.")
    tw.add_argument("--id", required=True, choices=list(PLACEABLE_WIDGETS))
    state = tw.add_mutually_exclusive_group(required=True)
    state.add_argument("--on", dest="enabled", action="store_true")
    state.add_argument("--off", dest="enabled", action="store_false")
    tw.add_argument("--dry-run", action="store_true")

    rw = sub.add_parser("remove-widget", help="Close a widget: disable it and take it off the layout.")
    rw.add_argument("--id", required=True, choices=list(PLACEABLE_WIDGETS))
    rw.add_argument("--dry-run", action="store_true")

    args = p.parse_args(argv)
    try:
        cfg = load_settings(args.config)
    except (OSError, ValueError) as e:
        p.error(f"cannot read settings: {e}")
    if args.log_level:
        cfg.log_level = args.log_level
    if args.no_color:
        cfg.no_color = True
    setup_logging(LogConfig(level=cfg.log_level, no_color=cfg.no_color))

    path = Path(args.file or cfg.dashboard_file)
    if args.cmd == "init":
        return _cmd_init(path, cfg, force=args.force)

    if not path.exists():
        log.error("Dashboard document not found: %s (run `lofistart init`).", path)
        return 2
    try:
        dashboard = load_dashboard(path)
    except ConfigFormatError as e:
        log.error("%s", e)
        return 2

    if args.cmd == "show":
        _print_dashboard(dashboard)
        return 0

    store = ConfigStore(dashboard)
    router = GestureRouter(store, private_unlocked=cfg.private_unlocked)

    if args.cmd == "move-widget":
        rc = _drag(router, ItemKind.WIDGET, args.id, args.from_zone, args.onto, args.to_zone)
    elif args.cmd == "move-bookmark":
        rc = _cmd_move_bookmark(router, args)
    elif args.cmd == "move-category":
        rc = _drag(router, ItemKind.CATEGORY, args.label, "", args.onto, "")
    elif args.cmd == "toggle-widget":
        store.update(lambda d: set_widget_enabled(d, args.id, args.enabled))
        rc = 0
    elif args.cmd == "remove-widget":
        store.update(lambda d: dismiss_widget(d, args.id))
        rc = 0
    else:
        return 2

    if rc != 0:
        return rc
    return _finish(path, dashboard, store.read(), cfg, dry_run=args.dry_run)


def _cmd_init(path: Path, cfg: Settings, *, force: bool) -> int:
    if path.exists() and not force:
        log.error("Refusing to overwrite %s (use --force).", path)
        return 2
    save_dashboard(path, default_dashboard(), indent=cfg.json_indent)
    return 0


def _cmd_move_bookmark(router: GestureRouter, args) -> int:
    bookmarks = {b.id: b for b in router.store.read_bookmarks()}
    source = bookmarks.get(args.id)
    target = bookmarks.get(args.onto)
    if source is None or target is None:
        log.error("Unknown bookmark id: %s", args.id if source is None else args.onto)
        return 2
    source_group = args.group or group_of(source) or ""
    target_group = args.to_group or group_of(target)
    if target_group is None:
        log.error("Bookmark %s is not shown in any group.", target.id)
        return 2
    if target_group not in known_groups(bookmarks.values()):
        log.error("Unknown bookmark group: %s", target_group)
        return 2
    return _drag(router, ItemKind.BOOKMARK, source.id, source_group, target.id, target_group)


def _drag(
    router: GestureRouter,
    kind: ItemKind,
    item_id: str,
    group_id: str,
    target_id: Optional[str],
    target_group: str,
) -> int:
    if not router.on_drag_start(kind, item_id, group_id):
        log.warning("Drag of %s %s refused (layout locked or private vault closed).", kind.value.lower(), item_id)
        return 1
    router.on_drop(kind, target_id, target_group)
    return 0


def _finish(path: Path, before: Dashboard, after: Dashboard, cfg: Settings, *, dry_run: bool) -> int:
    if after == before:
        log.warning("No change: the drop was ignored.")
        return 0
    if dry_run:
        log.info("Dry run: not writing %s", path)
        _print_dashboard(after)
        return 0
    save_dashboard(path, after, indent=cfg.json_indent)
    return 0


def _print_dashboard(d: Dashboard) -> None:
    flags = []
    if d.lock_layout:
        flags.append("locked")
    if d.zen_mode:
        flags.append("zen")
    print(f"layout{' (' + ', '.join(flags) + ')' if flags else ''}:")
    for z in Zone:
        shown = set(visible_widgets(d.layout, d.widgets, z))
        items = [w if w in shown else f"({w})" for w in d.layout.zone(z)]
        print(f"  {z.value:<9} {' '.join(items) or '-'}")
    print("bookmarks:")
    for g in group_view(d.bookmarks, d.category_order):
        collapsed = " [collapsed]" if g.name in d.collapsed_categories else ""
        print(f"  {g.name}{collapsed}:")
        for b in g.bookmarks:
            print(f"    {b.id:<8} {b.title}  <{b.url}>")
