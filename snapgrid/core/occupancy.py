"""Numpy-backed set of claimed grid cells."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from snapgrid.core.geometry import CellCoord
from snapgrid.core.models import Span


class OccupancySet:
    """Cells claimed by placed elements during one render pass.

    Cells are addressed by ``(row, col)`` into a boolean matrix, so distinct
    cells never share a key. There is no removal: a new pass calls ``reset``.
    """

    __slots__ = ("_cells",)

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        self._cells = np.zeros((rows, cols), dtype=np.bool_)

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def claimed_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def reset(self, rows: int, cols: int) -> None:
        """Drop every claim and resize to the given grid bounds."""
        self._cells = np.zeros((rows, cols), dtype=np.bool_)

    def in_bounds(self, cell: CellCoord) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def is_occupied(self, cell: CellCoord) -> bool:
        """Return whether a cell is claimed; cells off the grid never are."""
        if not self.in_bounds(cell):
            return False
        return bool(self._cells[cell.row, cell.col])

    def claim(self, cells: Iterable[CellCoord]) -> int:
        """Union cells into the set and return how many were newly claimed.

        Cells outside the grid are ignored.
        """
        added = 0
        for cell in cells:
            if not self.in_bounds(cell):
                continue
            if not self._cells[cell.row, cell.col]:
                self._cells[cell.row, cell.col] = True
                added += 1
        return added

    def contains_all(self, cells: Iterable[CellCoord]) -> bool:
        """Return whether every given cell is claimed."""
        return all(self.is_occupied(cell) for cell in cells)

    def is_block_free(self, top_left: CellCoord, span: Span) -> bool:
        """Return whether the block fits on the grid with no claimed cell."""
        bottom = top_left.row + span.rows
        right = top_left.col + span.cols
        if top_left.row < 0 or top_left.col < 0 or bottom > self.rows or right > self.cols:
            return False
        return not bool(self._cells[top_left.row : bottom, top_left.col : right].any())

    def claimed_cells(self) -> list[CellCoord]:
        """Return claimed cells in row-major order."""
        return [CellCoord(int(row), int(col)) for row, col in np.argwhere(self._cells)]
