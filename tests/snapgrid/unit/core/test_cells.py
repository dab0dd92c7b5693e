from snapgrid.core.cells import block_cells, cells_between, is_subset
from snapgrid.core.geometry import CellCoord
from snapgrid.core.models import Span


def test_block_cells_row_major() -> None:
    cells = block_cells(CellCoord(1, 2), Span(rows=2, cols=3))
    assert cells == [
        CellCoord(1, 2),
        CellCoord(1, 3),
        CellCoord(1, 4),
        CellCoord(2, 2),
        CellCoord(2, 3),
        CellCoord(2, 4),
    ]


def test_cells_between_accepts_corners_in_any_order() -> None:
    forward = cells_between(CellCoord(0, 0), CellCoord(1, 1))
    backward = cells_between(CellCoord(1, 1), CellCoord(0, 0))
    assert forward == backward == [CellCoord(0, 0), CellCoord(0, 1), CellCoord(1, 0), CellCoord(1, 1)]


def test_multi_digit_cells_stay_distinct() -> None:
    assert CellCoord(1, 23) != CellCoord(12, 3)
    assert len({CellCoord(1, 23), CellCoord(12, 3)}) == 2
    wide = cells_between(CellCoord(1, 20), CellCoord(1, 23))
    assert CellCoord(12, 3) not in wide
    assert len(wide) == 4


def test_is_subset() -> None:
    block = block_cells(CellCoord(0, 0), Span(2, 2))
    assert is_subset([CellCoord(0, 1), CellCoord(1, 1)], block)
    assert is_subset([], block)
    assert not is_subset([CellCoord(2, 0)], block)
