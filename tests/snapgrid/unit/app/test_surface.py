import pytest

from snapgrid.app.surface import SurfaceBinding
from tests.snapgrid.conftest import FakeSurface


def _handler(event: dict) -> None:
    del event


def test_acquire_installs_once_and_release_removes() -> None:
    surface = FakeSurface()
    binding = SurfaceBinding(surface, _handler, ("pointer_move", "pointer_down"))
    binding.acquire()
    binding.acquire()
    assert binding.active
    assert surface.add_calls == 1
    assert surface.handler_count("pointer_move") == 1
    binding.release()
    binding.release()
    assert not binding.active
    assert surface.remove_calls == 1
    assert surface.handler_count("pointer_move") == 0


def test_binding_as_context_manager() -> None:
    surface = FakeSurface()
    with SurfaceBinding(surface, _handler, ("pointer_up",)) as binding:
        assert binding.active
        assert surface.handler_count("pointer_up") == 1
    assert surface.handler_count("pointer_up") == 0


def test_surface_without_handler_api_is_rejected() -> None:
    with pytest.raises(RuntimeError):
        SurfaceBinding(object(), _handler, ("pointer_move",))  # type: ignore[arg-type]
