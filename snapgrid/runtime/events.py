"""Lightweight event bus used to deliver layout notifications."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from snapgrid.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]


class RuntimeEventBus:
    """Simple in-process pub/sub for one widget instance."""

    def __init__(self) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[type[object], EventHandler]] = {}
        self._published_by_topic: dict[str, int] = {}

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for an event type."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (event_type, handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    def publish(self, event: object) -> int:
        """Publish one event and return number of invoked handlers."""
        topic = type(event).__name__
        self._published_by_topic[topic] = self._published_by_topic.get(topic, 0) + 1
        invoked = 0
        for subscribed_type, handler in tuple(self._subscriptions.values()):
            if isinstance(event, subscribed_type):
                handler(event)
                invoked += 1
        return invoked

    def publish_counts(self) -> dict[str, int]:
        """Return a copy of per-topic publish counts."""
        return dict(self._published_by_topic)


EventBus = RuntimeEventBus
