from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .log import get_logger
from .model import ItemKind

log = get_logger(__name__)


class DragState(str, Enum):
    IDLE = "idle"
    ARMED = "armed"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class DragPayload:
    kind: ItemKind
    item_id: str
    group_id: str = ""


class DragSession:
    """Single-slot record of the item currently being dragged.

    ``ARMED`` only means the view decided a drag may begin (long press held,
    grip hovered). Drops are accepted in ``DRAGGING`` only, and every drop or
    cancel returns the session to ``IDLE``.
    """

    def __init__(self) -> None:
        self._state = DragState.IDLE
        self._payload: Optional[DragPayload] = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def payload(self) -> Optional[DragPayload]:
        return self._payload

    @property
    def is_dragging(self) -> bool:
        return self._state is DragState.DRAGGING

    def arm(self) -> None:
        if self._state is DragState.IDLE:
            self._state = DragState.ARMED

    def disarm(self) -> None:
        if self._state is DragState.ARMED:
            self._state = DragState.IDLE

    def start(self, payload: DragPayload) -> bool:
        if self._state is DragState.DRAGGING:
            log.debug("Ignoring drag start of %s: %s already in flight.", payload.item_id, self._payload)
            return False
        self._state = DragState.DRAGGING
        self._payload = payload
        return True

    def drop(self) -> Optional[DragPayload]:
        payload = self._payload if self._state is DragState.DRAGGING else None
        self._reset()
        return payload

    def cancel(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._state = DragState.IDLE
        self._payload = None
