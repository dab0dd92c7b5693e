"""Ceiling division of pixel lengths into cell counts."""

from __future__ import annotations

import math

from snapgrid.core.errors import InvalidArgument


def divide_ceil(length: float, pitch: float) -> int:
    """Return the smallest cell count ``n`` with ``n * pitch >= length``.

    Any non-positive length yields 1: an empty element still occupies a cell.
    """
    if pitch <= 0:
        raise InvalidArgument(f"pitch must be > 0, got {pitch!r}")
    if length <= 0:
        return 1
    quotient, remainder = divmod(length, pitch)
    count = int(quotient)
    return count if remainder == 0 else count + 1


def floor_index(position: float, pitch: float) -> int:
    """Return the index of the pitch step containing ``position``."""
    if pitch <= 0:
        raise InvalidArgument(f"pitch must be > 0, got {pitch!r}")
    return math.floor(position / pitch)
