"""Widget layer: render passes and surface wiring."""

from snapgrid.app.context import ElementRecord, LayoutContext
from snapgrid.app.surface import BoundedElement, EventSurface, SurfaceBinding
from snapgrid.app.widget import LayoutResult, SnapGridWidget

__all__ = [
    "BoundedElement",
    "ElementRecord",
    "EventSurface",
    "LayoutContext",
    "LayoutResult",
    "SnapGridWidget",
    "SurfaceBinding",
]
