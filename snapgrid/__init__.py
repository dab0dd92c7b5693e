"""Grid-snapping layout engine."""

from snapgrid.api.events import PlacementFailedEvent, RedrawEvent
from snapgrid.app.widget import LayoutResult, SnapGridWidget
from snapgrid.core.errors import InvalidArgument, NoSpaceAvailable, SnapGridError
from snapgrid.core.geometry import CellCoord, Rect
from snapgrid.core.grid import GridConfig, GridSpec, resolve_grid
from snapgrid.core.models import GridElement, Offset, Placement, PlacementSource, Span

__all__ = [
    "CellCoord",
    "GridConfig",
    "GridElement",
    "GridSpec",
    "InvalidArgument",
    "LayoutResult",
    "NoSpaceAvailable",
    "Offset",
    "Placement",
    "PlacementFailedEvent",
    "PlacementSource",
    "Rect",
    "RedrawEvent",
    "SnapGridError",
    "SnapGridWidget",
    "Span",
    "resolve_grid",
]
