"""Grid configuration and per-pass geometry resolution."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from snapgrid.core.divider import divide_ceil, floor_index
from snapgrid.core.errors import InvalidArgument
from snapgrid.core.geometry import CellCoord, Rect
from snapgrid.core.models import Offset, Span


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Recognized widget options.

    ``cell_pixel_width`` overrides the fitted cell width; ``aspect_ratio``
    derives cell height from cell width and is disabled at 0. ``cover``
    recomputes counts and sizes so cells exactly fill the surface.
    """

    width: float = 400.0
    height: float = 400.0
    rows: int = 4
    cols: int = 4
    cell_pixel_width: float | None = None
    aspect_ratio: float = 0.0
    gap: float = 0.0
    cover: bool = False
    pointer_mode: bool = True
    movable: bool = True
    auto_size: bool = False
    auto_place: bool = True
    tracked_element: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class GridSpec:
    """Resolved grid geometry, immutable for one render pass."""

    rows: int
    cols: int
    cell_width: float
    cell_height: float
    gap: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise InvalidArgument(f"grid needs at least one cell, got {self.rows}x{self.cols}")
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise InvalidArgument(
                f"cell size must be positive, got {self.cell_width}x{self.cell_height}"
            )
        if self.gap < 0:
            raise InvalidArgument(f"gap must be >= 0, got {self.gap}")

    @property
    def pitch_x(self) -> float:
        return self.cell_width + self.gap

    @property
    def pitch_y(self) -> float:
        return self.cell_height + self.gap

    def in_bounds(self, cell: CellCoord) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def cells(self) -> Iterator[CellCoord]:
        """Iterate every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield CellCoord(row, col)

    def offset_for(self, cell: CellCoord) -> Offset:
        """Return the pixel origin of a cell."""
        return Offset(self.gap + cell.col * self.pitch_x, self.gap + cell.row * self.pitch_y)

    def cell_rect(self, cell: CellCoord) -> Rect:
        """Return pixel rectangle for a grid cell."""
        origin = self.offset_for(cell)
        return Rect(origin.x, origin.y, self.cell_width, self.cell_height)

    def cell_for_offset(self, x: float, y: float) -> CellCoord:
        """Return the cell whose pitch step contains a pixel offset, clamped at 0."""
        return CellCoord(
            row=max(0, floor_index(y, self.pitch_y)),
            col=max(0, floor_index(x, self.pitch_x)),
        )

    def span_for(self, width: float, height: float) -> Span:
        """Return the minimal span a box of the given pixel size needs."""
        return Span(
            rows=divide_ceil(height, self.pitch_y),
            cols=divide_ceil(width, self.pitch_x),
        )

    def aligned_size(self, span: Span) -> tuple[float, float]:
        """Return the pixel size of a cell-aligned block."""
        return (
            span.cols * self.cell_width + (span.cols - 1) * self.gap,
            span.rows * self.cell_height + (span.rows - 1) * self.gap,
        )


def resolve_grid(config: GridConfig, width: float | None = None, height: float | None = None) -> GridSpec:
    """Resolve cell counts and sizes for one render pass."""
    surface_w = config.width if width is None else width
    surface_h = config.height if height is None else height
    gap = config.gap
    if gap < 0:
        raise InvalidArgument(f"gap must be >= 0, got {gap}")
    if config.rows < 1 or config.cols < 1:
        raise InvalidArgument(f"rows and cols must be >= 1, got {config.rows}x{config.cols}")

    if config.cell_pixel_width:
        cell_w = float(config.cell_pixel_width)
    else:
        cell_w = (surface_w - gap * (config.cols + 1)) / config.cols
    if config.aspect_ratio > 0:
        cell_h = cell_w * config.aspect_ratio
    else:
        cell_h = (surface_h - gap * (config.rows + 1)) / config.rows

    if not config.cover:
        return GridSpec(
            rows=config.rows,
            cols=config.cols,
            cell_width=cell_w,
            cell_height=cell_h,
            gap=gap,
            width=surface_w,
            height=surface_h,
        )

    if cell_w <= 0 or cell_h <= 0:
        raise InvalidArgument(f"cannot cover surface with {cell_w}x{cell_h} cells")
    cols = max(1, math.floor((surface_w - gap) / (cell_w + gap)))
    rows = max(1, math.floor((surface_h - gap) / (cell_h + gap)))
    return GridSpec(
        rows=rows,
        cols=cols,
        cell_width=(surface_w - gap * (cols + 1)) / cols,
        cell_height=(surface_h - gap * (rows + 1)) / rows,
        gap=gap,
        width=surface_w,
        height=surface_h,
    )
