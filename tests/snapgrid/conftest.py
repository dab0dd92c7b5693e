from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any

import pytest

from snapgrid.core.geometry import Rect
from snapgrid.core.grid import GridConfig, GridSpec
from snapgrid.core.models import GridElement
from snapgrid.runtime.debug_config import DebugConfig


class FakeSurface:
    def __init__(self, rect: Rect = Rect(0, 0, 80, 80)) -> None:
        self.rect = rect
        self.handlers: dict[str, list[Callable[[dict[str, Any]], None]]] = {}
        self.add_calls = 0
        self.remove_calls = 0

    def add_event_handler(self, handler: Callable[[dict[str, Any]], None], *event_types: str) -> None:
        self.add_calls += 1
        for event_type in event_types:
            self.handlers.setdefault(event_type, []).append(handler)

    def remove_event_handler(self, handler: Callable[[dict[str, Any]], None], *event_types: str) -> None:
        self.remove_calls += 1
        for event_type in event_types:
            self.handlers[event_type].remove(handler)

    def handler_count(self, event_type: str) -> int:
        return len(self.handlers.get(event_type, []))

    def bounding_rect(self) -> Rect:
        return self.rect

    def emit(self, event_type: str, **fields: Any) -> None:
        event = {"event_type": event_type, **fields}
        for handler in tuple(self.handlers.get(event_type, [])):
            handler(event)


class FakeTracked:
    def __init__(self, rect: Rect) -> None:
        self.rect = rect

    def bounding_rect(self) -> Rect:
        return self.rect


class BrokenTracked:
    def bounding_rect(self) -> Rect:
        raise RuntimeError("detached")


def make_grid(rows: int = 4, cols: int = 4, cell: float = 20.0, gap: float = 0.0) -> GridSpec:
    return GridSpec(
        rows=rows,
        cols=cols,
        cell_width=cell,
        cell_height=cell,
        gap=gap,
        width=gap + cols * (cell + gap),
        height=gap + rows * (cell + gap),
    )


def make_config(**overrides: Any) -> GridConfig:
    values: dict[str, Any] = {"width": 80.0, "height": 80.0, "rows": 4, "cols": 4, "gap": 0.0}
    values.update(overrides)
    return GridConfig(**values)


def make_elements(*sizes: tuple[float, float]) -> list[GridElement]:
    return [GridElement(f"e{index}", width, height) for index, (width, height) in enumerate(sizes)]


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def debug_config() -> DebugConfig:
    return DebugConfig(trace_hits=True, trace_drag=True, log_level="DEBUG")


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()
