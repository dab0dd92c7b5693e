"""First-fit placement search over the occupancy set."""

from __future__ import annotations

import logging

from snapgrid.core.cells import block_cells
from snapgrid.core.errors import NoSpaceAvailable
from snapgrid.core.geometry import CellCoord
from snapgrid.core.grid import GridSpec
from snapgrid.core.models import Offset, Span
from snapgrid.core.occupancy import OccupancySet

logger = logging.getLogger(__name__)

_ORIGIN = CellCoord(0, 0)


def find_free_block(
    occupancy: OccupancySet,
    span: Span,
    start: CellCoord = _ORIGIN,
) -> CellCoord | None:
    """Return the first row-major top-left cell of a free ``span`` block.

    The frontier cursor ``(row, col)`` is advanced iteratively. A candidate is
    verified one row at a time; an occupied cell restarts the candidate on the
    same top row one column past the obstruction. ``start.col`` only applies
    to the starting row.
    """
    rows, cols = occupancy.rows, occupancy.cols
    if span.rows > rows or span.cols > cols:
        return None

    row, col = max(0, start.row), max(0, start.col)
    while row + span.rows <= rows:
        if col + span.cols > cols:
            row, col = row + 1, 0
            continue
        obstruction = _first_obstruction(occupancy, row, col, span)
        if obstruction is None:
            return CellCoord(row, col)
        col = obstruction + 1
    return None


def place_span(
    occupancy: OccupancySet,
    grid: GridSpec,
    span: Span,
    start: CellCoord = _ORIGIN,
) -> tuple[CellCoord, Offset]:
    """Claim the first free ``span`` block and return its top-left and pixel offset."""
    top_left = find_free_block(occupancy, span, start)
    if top_left is None:
        raise NoSpaceAvailable(span.rows, span.cols)
    occupancy.claim(block_cells(top_left, span))
    logger.debug(
        "placement_claimed row=%d col=%d rows=%d cols=%d",
        top_left.row,
        top_left.col,
        span.rows,
        span.cols,
    )
    return top_left, grid.offset_for(top_left)


def _first_obstruction(occupancy: OccupancySet, row: int, col: int, span: Span) -> int | None:
    # Column of the first claimed cell found inside the candidate block.
    for block_row in range(row, row + span.rows):
        for block_col in range(col, col + span.cols):
            if occupancy.is_occupied(CellCoord(block_row, block_col)):
                return block_col
    return None
