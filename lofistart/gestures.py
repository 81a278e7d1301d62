from __future__ import annotations

from typing import Optional

from .bookmarks import move_bookmark
from .categories import move_category, sorted_categories
from .groups import derived_labels
from .log import get_logger
from .model import PRIVATE_CATEGORY, Dashboard, ItemKind
from .session import DragPayload, DragSession
from .store import ConfigStore
from .widgets import move_widget

log = get_logger(__name__)


class GestureRouter:
    """Routes start/over/drop gestures to the controller owning the payload.

    The router owns the lock checks and the session bookkeeping; controllers
    only ever see a consistent (source, target) pair. A drop always clears the
    session, whether or not anything moved.
    """

    def __init__(
        self,
        store: ConfigStore,
        session: Optional[DragSession] = None,
        *,
        private_unlocked: bool = False,
    ) -> None:
        self.store = store
        self.session = session if session is not None else DragSession()
        self.private_unlocked = private_unlocked

    def is_locked(self, kind: "ItemKind | str") -> bool:
        d = self.store.read()
        if kind == ItemKind.WIDGET:
            return d.lock_layout or d.zen_mode
        return d.lock_layout

    def _private_blocked(self, kind: "ItemKind | str", group_id: Optional[str]) -> bool:
        return kind == ItemKind.BOOKMARK and group_id == PRIVATE_CATEGORY and not self.private_unlocked

    def on_drag_start(self, kind: "ItemKind | str", item_id: str, group_id: str = "") -> bool:
        kind = ItemKind(kind)
        if self.is_locked(kind):
            log.debug("Layout locked; refusing to drag %s %s.", kind.value, item_id)
            return False
        if self._private_blocked(kind, group_id):
            log.debug("Private vault locked; refusing to drag bookmark %s.", item_id)
            return False
        return self.session.start(DragPayload(kind=kind, item_id=item_id, group_id=group_id))

    def on_drag_over(self) -> bool:
        return self.session.is_dragging

    def on_drag_end(self) -> None:
        self.session.cancel()

    def on_drop(self, kind: "ItemKind | str", target_id: Optional[str], target_group: str = "") -> bool:
        payload = self.session.drop()
        if payload is None:
            log.debug("Drop on %s without an active drag; ignored.", target_id)
            return False
        if kind != payload.kind:
            log.debug("Dropped %s payload on a %s target; ignored.", payload.kind.value, kind)
            return False
        if self.is_locked(payload.kind):
            return False
        if self._private_blocked(payload.kind, target_group):
            return False

        if payload.kind is ItemKind.WIDGET:
            return self._drop_widget(payload, target_id, target_group)
        if payload.kind is ItemKind.BOOKMARK:
            return self._drop_bookmark(payload, target_id, target_group)
        return self._drop_category(payload, target_id)

    def _drop_widget(self, payload: DragPayload, target_id: Optional[str], target_zone: str) -> bool:
        layout = self.store.read_layout()
        new_layout = move_widget(layout, payload.group_id, payload.item_id, target_zone, target_id)
        return self.store.write_layout(new_layout)

    def _drop_bookmark(self, payload: DragPayload, target_id: Optional[str], target_group: str) -> bool:
        if target_id is None:
            return False
        new_bookmarks = move_bookmark(
            self.store.read_bookmarks(),
            payload.group_id,
            payload.item_id,
            target_group,
            target_id,
            payload.kind,
        )
        return self.store.write_bookmarks(new_bookmarks)

    def _drop_category(self, payload: DragPayload, target_label: Optional[str]) -> bool:
        if target_label is None:
            return False
        d: Dashboard = self.store.read()
        rendered = sorted_categories(derived_labels(d.bookmarks), d.category_order)
        new_order = move_category(d.category_order, rendered, payload.item_id, target_label)
        return self.store.write_category_order(new_order)
