"""Public input event types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

POINTER_EVENT_TYPES: tuple[str, ...] = ("pointer_down", "pointer_move", "pointer_up")


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Pointer event in surface coordinates.

    ``target`` is the object the pointer is over, as reported by the surface
    collaborator. It is compared by identity, never by equality.
    """

    event_type: str
    x: float
    y: float
    button: int = 0
    target: object | None = None


def pointer_event_from_mapping(raw: Mapping[str, object]) -> PointerEvent:
    """Normalize a rendercanvas-style event dict into a ``PointerEvent``."""
    event_type = str(raw.get("event_type", ""))
    if event_type not in POINTER_EVENT_TYPES:
        raise ValueError(f"not a pointer event: {event_type!r}")
    return PointerEvent(
        event_type=event_type,
        x=float(raw.get("x", 0.0)),  # type: ignore[arg-type]
        y=float(raw.get("y", 0.0)),  # type: ignore[arg-type]
        button=int(raw.get("button", 0)),  # type: ignore[call-overload]
        target=raw.get("target"),
    )


__all__ = ["POINTER_EVENT_TYPES", "PointerEvent", "pointer_event_from_mapping"]
