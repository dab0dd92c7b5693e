"""Per-element drag state machine."""

from __future__ import annotations

import logging
from enum import StrEnum

from snapgrid.api.input_events import PointerEvent
from snapgrid.core.models import GridElement, Offset
from snapgrid.core.offset_codec import decode_offset, encode_offset

logger = logging.getLogger(__name__)


class DragState(StrEnum):
    """Drag controller state."""

    IDLE = "IDLE"
    DRAGGING = "DRAGGING"


class DragController:
    """Turn pointer down/move/up into committed offsets for one element.

    Every move while dragging writes the element's ``transform`` directly;
    there is no preview state and no cancel.
    """

    def __init__(self, element: GridElement) -> None:
        self._element = element
        self._state = DragState.IDLE
        self._anchor_x = 0.0
        self._anchor_y = 0.0
        self._baseline = Offset(0, 0)
        self._current = Offset(0, 0)

    @property
    def element(self) -> GridElement:
        return self._element

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def baseline(self) -> Offset:
        """Offset committed at the end of the last drag."""
        return self._baseline

    def rebind(self, element: GridElement) -> None:
        """Point the controller at a new element object with the same identity."""
        self._element = element

    def pointer_down(self, event: PointerEvent) -> bool:
        """Start dragging when the event targets exactly the owned element."""
        if event.target is not self._element:
            return False
        committed = decode_offset(self._element.transform)
        self._baseline = committed if committed is not None else Offset(0, 0)
        self._current = self._baseline
        self._anchor_x = event.x
        self._anchor_y = event.y
        self._state = DragState.DRAGGING
        logger.debug(
            "drag_start element=%s x=%s y=%s",
            self._element.element_id,
            self._baseline.x,
            self._baseline.y,
        )
        return True

    def pointer_move(self, event: PointerEvent) -> Offset | None:
        """Commit ``baseline + (pointer - anchor)`` while dragging."""
        if self._state is not DragState.DRAGGING:
            return None
        self._current = Offset(
            self._baseline.x + (event.x - self._anchor_x),
            self._baseline.y + (event.y - self._anchor_y),
        )
        self._element.transform = encode_offset(self._current.x, self._current.y)
        return self._current

    def pointer_up(self, event: PointerEvent) -> Offset | None:
        """End the drag from anywhere; the last offset becomes the baseline."""
        if self._state is not DragState.DRAGGING:
            return None
        self._state = DragState.IDLE
        self._baseline = self._current
        logger.debug(
            "drag_end element=%s x=%s y=%s",
            self._element.element_id,
            self._baseline.x,
            self._baseline.y,
        )
        return self._baseline
