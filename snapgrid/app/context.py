"""Per-widget layout state."""

from __future__ import annotations

from dataclasses import dataclass

from snapgrid.core.grid import GridSpec
from snapgrid.core.models import Offset, Placement, Span
from snapgrid.core.occupancy import OccupancySet


@dataclass(frozen=True, slots=True)
class ElementRecord:
    """Span and offset remembered for one element id between passes.

    ``size`` and ``pitch`` are the inputs the span was derived from; the span
    is reused only while both are unchanged.
    """

    span: Span
    offset: Offset | None
    placement: Placement | None
    size: tuple[float, float] | None = None
    pitch: tuple[float, float] | None = None

    def span_if_current(self, size: tuple[float, float], pitch: tuple[float, float]) -> Span | None:
        if self.size == size and self.pitch == pitch:
            return self.span
        return None


class LayoutContext:
    """Occupancy and grid geometry owned by exactly one widget instance."""

    def __init__(self) -> None:
        self._grid: GridSpec | None = None
        self._occupancy = OccupancySet()
        self._records: dict[str, ElementRecord] = {}
        self._pass_count = 0

    @property
    def grid(self) -> GridSpec | None:
        return self._grid

    @property
    def occupancy(self) -> OccupancySet:
        return self._occupancy

    @property
    def pass_count(self) -> int:
        return self._pass_count

    def reset_for_render_pass(self, grid: GridSpec) -> None:
        """Swap in the pass geometry and drop every claim before children are scanned."""
        self._grid = grid
        self._occupancy.reset(grid.rows, grid.cols)
        self._pass_count += 1

    def remember(self, element_id: str, record: ElementRecord) -> None:
        self._records[element_id] = record

    def record_for(self, element_id: str) -> ElementRecord | None:
        return self._records.get(element_id)

    def retain_only(self, element_ids: set[str]) -> None:
        """Forget cached records of elements that left the layout."""
        for stale in set(self._records) - element_ids:
            del self._records[stale]
