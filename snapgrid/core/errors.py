"""Layout error kinds."""

from __future__ import annotations


class SnapGridError(Exception):
    """Base class for layout errors."""


class InvalidArgument(SnapGridError, ValueError):
    """A precondition was violated: bad pitch, bad grid config, bad element set."""


class NoSpaceAvailable(SnapGridError):
    """Placement search exhausted the grid without finding a free block."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"no free {rows}x{cols} block left on the grid")
        self.rows = rows
        self.cols = cols
