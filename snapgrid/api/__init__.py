"""Public snapgrid API contracts."""

from snapgrid.api.events import (
    EventBus,
    PlacementFailedEvent,
    RedrawEvent,
    Subscription,
    create_event_bus,
)
from snapgrid.api.input_events import PointerEvent, pointer_event_from_mapping
from snapgrid.api.logging import JsonFormatter, LoggingConfig, get_logger

__all__ = [
    "EventBus",
    "JsonFormatter",
    "LoggingConfig",
    "PlacementFailedEvent",
    "PointerEvent",
    "RedrawEvent",
    "Subscription",
    "create_event_bus",
    "get_logger",
    "pointer_event_from_mapping",
]
