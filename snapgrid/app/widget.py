"""Grid widget: render passes, drag routing and hit-test routing."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from snapgrid.api.events import EventBus, PlacementFailedEvent, RedrawEvent, create_event_bus
from snapgrid.api.input_events import POINTER_EVENT_TYPES, PointerEvent, pointer_event_from_mapping
from snapgrid.app.context import ElementRecord, LayoutContext
from snapgrid.app.surface import BoundedElement, EventSurface, SurfaceBinding
from snapgrid.core.cells import block_cells
from snapgrid.core.drag import DragController
from snapgrid.core.errors import InvalidArgument, NoSpaceAvailable
from snapgrid.core.geometry import Rect
from snapgrid.core.grid import GridConfig, GridSpec, resolve_grid
from snapgrid.core.hit_test import HitResult, hit_pointer, hit_tracked
from snapgrid.core.models import GridElement, Offset, Placement, PlacementSource, Span
from snapgrid.core.offset_codec import decode_offset, encode_offset
from snapgrid.core.placement import place_span
from snapgrid.runtime.debug_config import DebugConfig, load_debug_config
from snapgrid.runtime.errors import RECOVERABLE_COLLABORATOR_ERRORS, log_recoverable

logger = logging.getLogger(__name__)

_SURFACE_EVENT_TYPES: tuple[str, ...] = (*POINTER_EVENT_TYPES, "resize")


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Outcome of one render pass."""

    grid: GridSpec
    placements: tuple[Placement, ...]
    unplaced: tuple[str, ...]

    def by_id(self) -> dict[str, Placement]:
        return {placement.element_id: placement for placement in self.placements}


class SnapGridWidget:
    """Lay out child elements on a snapping grid for one surface."""

    def __init__(
        self,
        config: GridConfig | None = None,
        *,
        event_bus: EventBus | None = None,
        debug: DebugConfig | None = None,
    ) -> None:
        self._config = config if config is not None else GridConfig()
        self._bus = event_bus if event_bus is not None else create_event_bus()
        self._debug = debug if debug is not None else load_debug_config()
        self._context = LayoutContext()
        self._elements: list[GridElement] = []
        self._drags: dict[str, DragController] = {}
        self._active_drag: DragController | None = None
        self._surface: EventSurface | None = None
        self._bindings: list[SurfaceBinding] = []
        self._tracks_container = False

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def event_bus(self) -> EventBus:
        return self._bus

    @property
    def context(self) -> LayoutContext:
        return self._context

    @property
    def grid(self) -> GridSpec | None:
        return self._context.grid

    @property
    def elements(self) -> tuple[GridElement, ...]:
        return tuple(self._elements)

    def drag_controller(self, element_id: str) -> DragController | None:
        return self._drags.get(element_id)

    def placement_for(self, element_id: str) -> Placement | None:
        record = self._context.record_for(element_id)
        return record.placement if record is not None else None

    # Render pass

    def render(
        self,
        elements: Sequence[GridElement],
        *,
        width: float | None = None,
        height: float | None = None,
    ) -> LayoutResult:
        """Run one full placement pass over ``elements`` in order.

        Elements carrying a committed offset keep it and claim their footprint
        without a collision check. The rest are placed last-queued first.
        """
        grid = resolve_grid(self._config, width, height)
        _require_unique_ids(elements)
        self._context.reset_for_render_pass(grid)
        self._elements = list(elements)

        placements: list[Placement] = []
        pending: list[tuple[GridElement, Span]] = []
        for element in self._elements:
            span = self._span_for(grid, element)
            committed = decode_offset(element.transform)
            if committed is None:
                pending.append((element, span))
                self._context.remember(element.element_id, _record(grid, element, span))
            else:
                placements.append(self._claim_preset(grid, element, span, committed))
            self._sync_drag_controller(element)

        unplaced: list[str] = []
        if self._config.auto_place:
            while pending:
                element, span = pending.pop()
                placement = self._place_searched(grid, element, span)
                if placement is None:
                    unplaced.append(element.element_id)
                else:
                    placements.append(placement)
        else:
            unplaced.extend(element.element_id for element, _ in pending)

        live_ids = {element.element_id for element in self._elements}
        self._context.retain_only(live_ids)
        for stale in set(self._drags) - live_ids:
            del self._drags[stale]

        logger.info(
            "render_pass grid=%dx%d cell=%.1fx%.1f gap=%.1f elements=%d placed=%d unplaced=%d",
            grid.rows,
            grid.cols,
            grid.cell_width,
            grid.cell_height,
            grid.gap,
            len(self._elements),
            len(placements),
            len(unplaced),
        )
        return LayoutResult(grid=grid, placements=tuple(placements), unplaced=tuple(unplaced))

    def resize(self, width: float, height: float) -> LayoutResult:
        """Re-run the placement pass over the current elements at a new surface size."""
        return self.render(self._elements, width=width, height=height)

    def _claim_preset(self, grid: GridSpec, element: GridElement, span: Span, committed: Offset) -> Placement:
        top_left = grid.cell_for_offset(committed.x, committed.y)
        cells = block_cells(top_left, span)
        occupancy = self._context.occupancy
        if any(occupancy.is_occupied(cell) for cell in cells):
            logger.debug(
                "preset_overlap element=%s row=%d col=%d",
                element.element_id,
                top_left.row,
                top_left.col,
            )
        occupancy.claim(cells)
        placement = Placement(
            element_id=element.element_id,
            top_left=top_left,
            span=span,
            offset=Offset(committed.x, committed.y),
            source=PlacementSource.PRESET,
        )
        self._commit(grid, element, placement)
        return placement

    def _place_searched(self, grid: GridSpec, element: GridElement, span: Span) -> Placement | None:
        try:
            top_left, offset = place_span(self._context.occupancy, grid, span)
        except NoSpaceAvailable:
            logger.warning(
                "placement_failed element=%s rows=%d cols=%d",
                element.element_id,
                span.rows,
                span.cols,
            )
            self._bus.publish(PlacementFailedEvent(element.element_id, span.rows, span.cols))
            return None
        element.transform = encode_offset(offset.x, offset.y)
        placement = Placement(
            element_id=element.element_id,
            top_left=top_left,
            span=span,
            offset=offset,
            source=PlacementSource.SEARCH,
        )
        self._commit(grid, element, placement)
        return placement

    def _commit(self, grid: GridSpec, element: GridElement, placement: Placement) -> None:
        width, height = grid.aligned_size(placement.span)
        if self._config.auto_size:
            element.width = width
            element.height = height
        self._context.remember(
            element.element_id,
            _record(grid, element, placement.span, placement),
        )
        self._bus.publish(
            RedrawEvent(
                width=width,
                height=height,
                row=placement.span.rows,
                col=placement.span.cols,
                left=placement.offset.x,
                top=placement.offset.y,
                element_id=element.element_id,
            )
        )

    def _span_for(self, grid: GridSpec, element: GridElement) -> Span:
        record = self._context.record_for(element.element_id)
        if record is not None:
            cached = record.span_if_current((element.width, element.height), (grid.pitch_x, grid.pitch_y))
            if cached is not None:
                return cached
        return grid.span_for(element.width, element.height)

    def _sync_drag_controller(self, element: GridElement) -> None:
        if not self._config.movable:
            return
        controller = self._drags.get(element.element_id)
        if controller is None:
            self._drags[element.element_id] = DragController(element)
        elif controller.element is not element:
            controller.rebind(element)

    # Surface lifecycle

    def attach(self, surface: EventSurface, container: EventSurface | None = None) -> None:
        """Install listeners on ``surface`` (and ``container`` for element tracking).

        Any previous installation is released first.
        """
        self.detach()
        self._surface = surface
        bindings = [SurfaceBinding(surface, self.handle_surface_event, _SURFACE_EVENT_TYPES)]
        if container is not None and not self._config.pointer_mode:
            bindings.append(SurfaceBinding(container, self.handle_container_event, ("pointer_move",)))
            self._tracks_container = True
        for binding in bindings:
            binding.acquire()
        self._bindings = bindings

    def detach(self) -> None:
        """Release every installed listener."""
        for binding in self._bindings:
            binding.release()
        self._bindings = []
        self._surface = None
        self._tracks_container = False
        self._active_drag = None

    def __enter__(self) -> SnapGridWidget:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    # Event routing

    def handle_surface_event(self, raw: Mapping[str, Any]) -> None:
        """Entry point for events raised by the rendering surface."""
        if raw.get("event_type") == "resize":
            self.resize(float(raw["width"]), float(raw["height"]))
            return
        event = pointer_event_from_mapping(raw)
        self.handle_drag(event)
        if event.event_type == "pointer_move" and not self._tracks_container:
            self.hit_test(event)

    def handle_container_event(self, raw: Mapping[str, Any]) -> None:
        """Entry point for pointer moves over the container in element-tracking mode."""
        self.hit_test(pointer_event_from_mapping(raw))

    def handle_drag(self, event: PointerEvent) -> Offset | None:
        """Route one pointer event to the drag controllers."""
        if not self._config.movable:
            return None
        if event.event_type == "pointer_down":
            if self._active_drag is not None:
                # At most one controller is DRAGGING; end the stale drag first.
                self._active_drag.pointer_up(event)
                self._active_drag = None
            for controller in self._drags.values():
                if controller.pointer_down(event):
                    self._active_drag = controller
                    break
            return None
        if event.event_type == "pointer_move":
            if self._active_drag is None:
                return None
            offset = self._active_drag.pointer_move(event)
            if offset is not None and self._debug.trace_drag:
                logger.debug(
                    "drag_move element=%s x=%s y=%s",
                    self._active_drag.element.element_id,
                    offset.x,
                    offset.y,
                )
            return offset
        if event.event_type == "pointer_up":
            controller, self._active_drag = self._active_drag, None
            if controller is None:
                return None
            return controller.pointer_up(event)
        return None

    def hit_test(self, event: PointerEvent) -> HitResult | None:
        """Compute hovered or overlapped cells for a pointer move and publish redraws."""
        grid = self._context.grid
        if grid is None:
            return None
        if self._config.pointer_mode:
            result = hit_pointer(grid, event.x, event.y)
        else:
            result = self._hit_tracked(grid, event)
            if result is None:
                return None
        if self._debug.trace_hits:
            logger.debug("hit_test x=%s y=%s cells=%d", event.x, event.y, len(result.cells))
        for redraw in result.redraw_events(grid):
            self._bus.publish(redraw)
        return result

    def _hit_tracked(self, grid: GridSpec, event: PointerEvent) -> HitResult | None:
        tracked = self._config.tracked_element
        if tracked is None:
            tracked = event.target
        if tracked is None or (self._surface is not None and tracked is self._surface):
            return None
        if self._surface is None:
            return None
        tracked_rect = _bounding_rect(tracked)
        surface_rect = _bounding_rect(self._surface)
        if tracked_rect is None or surface_rect is None:
            return None
        return hit_tracked(grid, tracked_rect, surface_rect)


def _require_unique_ids(elements: Sequence[GridElement]) -> None:
    seen: set[str] = set()
    for element in elements:
        if element.element_id in seen:
            raise InvalidArgument(f"duplicate element id: {element.element_id!r}")
        seen.add(element.element_id)


def _record(grid: GridSpec, element: GridElement, span: Span, placement: Placement | None = None) -> ElementRecord:
    return ElementRecord(
        span=span,
        offset=placement.offset if placement is not None else None,
        placement=placement,
        size=(element.width, element.height),
        pitch=(grid.pitch_x, grid.pitch_y),
    )


def _bounding_rect(target: object) -> Rect | None:
    if not hasattr(target, "bounding_rect"):
        return None
    bounded: BoundedElement = target  # type: ignore[assignment]
    try:
        return bounded.bounding_rect()
    except RECOVERABLE_COLLABORATOR_ERRORS:
        log_recoverable(logger, "bounding_rect_failed")
        return None
