"""Grid occupancy, placement search, hit testing and drag state."""

from snapgrid.core.cells import block_cells, cells_between, is_subset
from snapgrid.core.divider import divide_ceil
from snapgrid.core.drag import DragController, DragState
from snapgrid.core.errors import InvalidArgument, NoSpaceAvailable, SnapGridError
from snapgrid.core.geometry import CellCoord, Rect
from snapgrid.core.grid import GridConfig, GridSpec, resolve_grid
from snapgrid.core.hit_test import HitResult, SnapRegion, hit_pointer, hit_tracked, snap_region
from snapgrid.core.models import GridElement, Offset, Placement, PlacementSource, Span
from snapgrid.core.occupancy import OccupancySet
from snapgrid.core.offset_codec import decode_offset, encode_offset
from snapgrid.core.placement import find_free_block, place_span

__all__ = [
    "CellCoord",
    "DragController",
    "DragState",
    "GridConfig",
    "GridElement",
    "GridSpec",
    "HitResult",
    "InvalidArgument",
    "NoSpaceAvailable",
    "OccupancySet",
    "Offset",
    "Placement",
    "PlacementSource",
    "Rect",
    "SnapGridError",
    "SnapRegion",
    "Span",
    "block_cells",
    "cells_between",
    "decode_offset",
    "divide_ceil",
    "encode_offset",
    "find_free_block",
    "hit_pointer",
    "hit_tracked",
    "is_subset",
    "place_span",
    "resolve_grid",
    "snap_region",
]
