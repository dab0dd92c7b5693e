"""Serialized ``translate3d`` offsets."""

from __future__ import annotations

import re

from snapgrid.core.models import Offset

_NUMBER = r"(-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)"
_TRANSLATE3D = re.compile(
    rf"translate3d\(\s*{_NUMBER}px\s*,\s*{_NUMBER}px\s*,\s*{_NUMBER}(?:px)?\s*\)"
)


def decode_offset(text: str | None) -> Offset | None:
    """Parse the first ``translate3d(...)`` in ``text``; ``None`` when absent."""
    if not text:
        return None
    match = _TRANSLATE3D.search(text)
    if match is None:
        return None
    x, y, z = (_parse_number(group) for group in match.groups())
    return Offset(x, y, z)


def encode_offset(x: float, y: float) -> str:
    """Serialize an offset with z pinned to 0."""
    return f"translate3d({_format_px(x)}px, {_format_px(y)}px, 0px)"


def _parse_number(raw: str) -> float:
    if raw.lstrip("-").isdigit():
        return int(raw)
    return float(raw)


def _format_px(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
