"""Geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle, edges included."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def overlaps(self, other: Rect) -> bool:
        """Return whether ``other`` overlaps this rectangle.

        Touching on this rectangle's near edge counts as overlap, touching on
        its far edge does not.
        """
        return (
            self.right >= other.x
            and self.x < other.right
            and self.bottom >= other.y
            and self.y < other.bottom
        )

    def relative_to(self, origin: Rect) -> Rect:
        """Return this rectangle translated into ``origin``'s coordinate space."""
        return Rect(self.x - origin.x, self.y - origin.y, self.w, self.h)


@dataclass(frozen=True, slots=True, order=True)
class CellCoord:
    """Grid cell coordinate in row/column space."""

    row: int
    col: int
