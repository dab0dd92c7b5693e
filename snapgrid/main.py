"""Command-line entry point: lay out elements from a JSON file."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from snapgrid.app.widget import LayoutResult, SnapGridWidget
from snapgrid.core.errors import InvalidArgument
from snapgrid.core.grid import GridConfig
from snapgrid.core.models import GridElement
from snapgrid.diagnostics.json_codec import dumps_text, loads
from snapgrid.infra.config import load_default_env_files, load_grid_config
from snapgrid.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapgrid",
        description="Snap elements onto a row/column grid and print their placements.",
    )
    parser.add_argument("layout", type=Path, help="JSON file with an 'elements' list.")
    parser.add_argument("--width", type=float)
    parser.add_argument("--height", type=float)
    parser.add_argument("--rows", type=int)
    parser.add_argument("--cols", type=int)
    parser.add_argument("--gap", type=float)
    parser.add_argument("--cell-width", dest="cell_pixel_width", type=float)
    parser.add_argument("--aspect-ratio", type=float)
    parser.add_argument("--cover", action="store_true", default=None)
    parser.add_argument("--auto-size", action="store_true", default=None)
    parser.add_argument("--no-auto-place", dest="auto_place", action="store_false", default=None)
    parser.add_argument("--pretty", action="store_true")
    return parser


def apply_overrides(config: GridConfig, args: argparse.Namespace) -> GridConfig:
    """Return ``config`` with every explicitly passed CLI option applied."""
    names = (
        "width",
        "height",
        "rows",
        "cols",
        "gap",
        "cell_pixel_width",
        "aspect_ratio",
        "cover",
        "auto_size",
        "auto_place",
    )
    overrides = {name: getattr(args, name) for name in names if getattr(args, name) is not None}
    return dataclasses.replace(config, **overrides)


def read_elements(path: Path) -> list[GridElement]:
    """Read elements from ``{"elements": [...]}`` or a bare list."""
    try:
        payload = loads(path.read_bytes())
    except ValueError as exc:
        raise InvalidArgument(f"{path}: not valid JSON: {exc}") from exc
    raw_elements = payload.get("elements", []) if isinstance(payload, dict) else payload
    if not isinstance(raw_elements, list):
        raise InvalidArgument(f"{path}: expected a list of elements")
    elements: list[GridElement] = []
    for index, raw in enumerate(raw_elements):
        try:
            elements.append(
                GridElement(
                    element_id=str(raw.get("id", index)),
                    width=float(raw["width"]),
                    height=float(raw["height"]),
                    transform=str(raw.get("transform", "")),
                )
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise InvalidArgument(f"{path}: element {index} is malformed") from exc
    return elements


def result_payload(result: LayoutResult, elements: Sequence[GridElement]) -> dict[str, object]:
    transforms = {element.element_id: element.transform for element in elements}
    return {
        "grid": dataclasses.asdict(result.grid),
        "placements": [
            {
                "id": placement.element_id,
                "row": placement.top_left.row,
                "col": placement.top_left.col,
                "rows": placement.span.rows,
                "cols": placement.span.cols,
                "left": placement.offset.x,
                "top": placement.offset.y,
                "source": placement.source.value,
                "transform": transforms[placement.element_id],
            }
            for placement in result.placements
        ],
        "unplaced": list(result.unplaced),
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Run one layout pass and print it as JSON."""
    load_default_env_files(override_existing=False)
    setup_logging()
    args = build_parser().parse_args(argv)
    config = apply_overrides(load_grid_config(), args)
    try:
        elements = read_elements(args.layout)
        result = SnapGridWidget(config).render(elements)
    except OSError as exc:
        logger.error("layout_read_failed path=%s error=%s", args.layout, exc)
        return 2
    except InvalidArgument as exc:
        logger.error("layout_invalid error=%s", exc)
        return 2
    sys.stdout.write(dumps_text(result_payload(result, elements), pretty=args.pretty) + "\n")
    return 1 if result.unplaced else 0


if __name__ == "__main__":
    raise SystemExit(main())
