"""Core layout models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from snapgrid.core.geometry import CellCoord


class PlacementSource(StrEnum):
    """Where a placement's top-left cell came from."""

    PRESET = "PRESET"
    SEARCH = "SEARCH"


@dataclass(frozen=True, slots=True)
class Span:
    """Footprint of an element in cells."""

    rows: int
    cols: int

    @property
    def area(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True, slots=True)
class Offset:
    """Committed pixel translation of an element."""

    x: float
    y: float
    z: float = 0


@dataclass(slots=True)
class GridElement:
    """One placeable element supplied by the caller.

    ``transform`` is the element's committed translation string and the only
    record of its grid assignment between passes.
    """

    element_id: str
    width: float
    height: float
    transform: str = ""


@dataclass(frozen=True, slots=True)
class Placement:
    """Top-left cell and footprint assigned to one element."""

    element_id: str
    top_left: CellCoord
    span: Span
    offset: Offset
    source: PlacementSource
