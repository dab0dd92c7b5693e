"""Public event bus API contracts and layout notifications."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


@dataclass(frozen=True, slots=True)
class RedrawEvent:
    """Region the renderer should highlight or has placed.

    ``row`` and ``col`` carry the span of the region in cells, ``width`` and
    ``height`` its pixel size and ``left``/``top`` its pixel offset on the
    surface. ``element_id`` is only set during a placement pass.
    """

    width: float
    height: float
    row: int
    col: int
    left: float
    top: float
    element_id: str | None = None


@dataclass(frozen=True, slots=True)
class PlacementFailedEvent:
    """An element could not be placed because the grid is exhausted."""

    element_id: str
    rows: int
    cols: int


class EventBus(Protocol):
    """Public in-process pub/sub contract."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event and return invocation count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from snapgrid.runtime.events import RuntimeEventBus

    return RuntimeEventBus()


__all__ = ["EventBus", "PlacementFailedEvent", "RedrawEvent", "Subscription", "create_event_bus"]
