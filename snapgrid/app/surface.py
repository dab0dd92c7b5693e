"""Scoped event-listener installation on rendering surfaces."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from snapgrid.core.geometry import Rect

logger = logging.getLogger(__name__)

SurfaceHandler = Callable[[Mapping[str, Any]], None]


class EventSurface(Protocol):
    """Event registration surface, shaped like a rendercanvas canvas."""

    def add_event_handler(self, handler: SurfaceHandler, *event_types: str) -> None: ...

    def remove_event_handler(self, handler: SurfaceHandler, *event_types: str) -> None: ...


class BoundedElement(Protocol):
    """Anything that can report its bounding box in page coordinates."""

    def bounding_rect(self) -> Rect: ...


class SurfaceBinding:
    """Handlers installed on one surface for the lifetime of the binding.

    ``acquire`` is a no-op while the binding is active, so handlers never
    accumulate on a surface; ``release`` removes exactly what was installed.
    """

    def __init__(self, surface: EventSurface, handler: SurfaceHandler, event_types: tuple[str, ...]) -> None:
        if not hasattr(surface, "add_event_handler") or not hasattr(surface, "remove_event_handler"):
            raise RuntimeError("Surface does not support event handlers.")
        self._surface = surface
        self._handler = handler
        self._event_types = event_types
        self._active = False

    @property
    def surface(self) -> EventSurface:
        return self._surface

    @property
    def active(self) -> bool:
        return self._active

    def acquire(self) -> SurfaceBinding:
        if self._active:
            return self
        self._surface.add_event_handler(self._handler, *self._event_types)
        self._active = True
        logger.debug("surface_bound types=%s", ",".join(self._event_types))
        return self

    def release(self) -> None:
        if not self._active:
            return
        self._active = False
        self._surface.remove_event_handler(self._handler, *self._event_types)
        logger.debug("surface_released types=%s", ",".join(self._event_types))

    def __enter__(self) -> SurfaceBinding:
        return self.acquire()

    def __exit__(self, *exc_info: object) -> None:
        self.release()
