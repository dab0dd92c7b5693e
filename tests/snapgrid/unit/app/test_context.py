from snapgrid.app.context import ElementRecord, LayoutContext
from snapgrid.core.geometry import CellCoord
from snapgrid.core.models import Span
from tests.snapgrid.conftest import make_grid


def test_reset_for_render_pass_drops_claims_and_swaps_grid() -> None:
    context = LayoutContext()
    assert context.grid is None
    context.reset_for_render_pass(make_grid(rows=2, cols=2))
    context.occupancy.claim([CellCoord(0, 0)])
    bigger = make_grid(rows=5, cols=6)
    context.reset_for_render_pass(bigger)
    assert context.grid is bigger
    assert context.pass_count == 2
    assert context.occupancy.claimed_count == 0
    assert (context.occupancy.rows, context.occupancy.cols) == (5, 6)


def test_records_are_cached_by_id_and_pruned() -> None:
    context = LayoutContext()
    context.remember("a", ElementRecord(Span(1, 1), None, None))
    context.remember("b", ElementRecord(Span(2, 1), None, None))
    context.retain_only({"b"})
    assert context.record_for("a") is None
    record = context.record_for("b")
    assert record is not None
    assert record.span == Span(2, 1)


def test_record_span_is_current_only_for_same_size_and_pitch() -> None:
    record = ElementRecord(Span(1, 3), None, None, size=(45, 20), pitch=(20, 20))
    assert record.span_if_current((45, 20), (20, 20)) == Span(1, 3)
    assert record.span_if_current((46, 20), (20, 20)) is None
    assert record.span_if_current((45, 20), (40, 40)) is None
