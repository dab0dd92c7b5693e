"""Cell block helpers."""

from __future__ import annotations

from collections.abc import Iterable

from snapgrid.core.geometry import CellCoord
from snapgrid.core.models import Span


def block_cells(top_left: CellCoord, span: Span) -> list[CellCoord]:
    """Return the row-major cells of the block starting at ``top_left``."""
    return [
        CellCoord(row, col)
        for row in range(top_left.row, top_left.row + span.rows)
        for col in range(top_left.col, top_left.col + span.cols)
    ]


def cells_between(start: CellCoord, end: CellCoord) -> list[CellCoord]:
    """Return every cell of the rectangle spanned by two corner cells, inclusive."""
    top, bottom = sorted((start.row, end.row))
    left, right = sorted((start.col, end.col))
    return block_cells(CellCoord(top, left), Span(bottom - top + 1, right - left + 1))


def is_subset(cells: Iterable[CellCoord], of: Iterable[CellCoord]) -> bool:
    """Return whether every cell in ``cells`` is also in ``of``."""
    return set(cells) <= set(of)
