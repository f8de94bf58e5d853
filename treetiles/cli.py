"""Command line interface: squarify weights or a JSON tree and print the tiles."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .branches import NodeRect, layout_tree
from .config import DEFAULT_BOUNDS, DEFAULT_PADDING, configure_logging
from .errors import TreemapError
from .model import Branch, LayoutItem
from .treemap import Rect, squarify

logger = logging.getLogger(__name__)


def parse_weight(text: str) -> LayoutItem:
    """Parse ``WEIGHT`` or ``LABEL=WEIGHT`` into an unplaced item."""
    label, sep, raw = text.rpartition("=")
    try:
        weight = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid weight {text!r}; expected WEIGHT or LABEL=WEIGHT") from None
    return LayoutItem(weight=weight, label=label if sep else "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treetiles",
        description="Squarify weighted items into a rectangle and print the resulting tiles.",
    )
    parser.add_argument(
        "weights",
        nargs="*",
        type=parse_weight,
        metavar="WEIGHT",
        help="item weights, optionally labelled as LABEL=WEIGHT",
    )
    parser.add_argument(
        "--tree",
        type=Path,
        metavar="FILE",
        help='JSON tree of {"name", "value", "children"} nodes to lay out recursively',
    )
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("X", "Y", "W", "H"),
        default=list(DEFAULT_BOUNDS),
        help="bounding rectangle (default: %(default)s)",
    )
    parser.add_argument("--padding", type=float, default=DEFAULT_PADDING, help="inset inside each branch (tree only)")
    parser.add_argument("--max-depth", type=int, default=None, help="stop recursing below this depth (tree only)")
    parser.add_argument("--json", action="store_true", help="print tiles as a JSON list")
    parser.add_argument("--show", action="store_true", help="open a preview window")
    parser.add_argument("--log-level", default=None, help="logging level (default: $TREETILES_LOG_LEVEL or WARNING)")
    return parser


def load_tree(path: Path) -> Branch:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    return Branch.from_dict(data)


def _node_path(layout: NodeRect, paths: Dict[int, str]) -> str:
    prefix = paths.get(id(layout.parent), "") if layout.parent is not None else ""
    path = f"{prefix}/{layout.node.name}" if prefix else layout.node.name
    paths[id(layout.node)] = path
    return path


def _tile(label: str, rect: Rect, depth: Optional[int] = None) -> Dict[str, object]:
    tile: Dict[str, object] = {
        "label": label,
        "x": rect.x,
        "y": rect.y,
        "width": rect.width,
        "height": rect.height,
    }
    if depth is not None:
        tile["depth"] = depth
    return tile


def _print_tiles(tiles: List[Dict[str, object]], as_json: bool) -> None:
    if as_json:
        print(json.dumps(tiles, indent=2))
        return
    for tile in tiles:
        print(
            f"{tile['label']}\t{tile['x']:.4f}\t{tile['y']:.4f}\t{tile['width']:.4f}\t{tile['height']:.4f}"
        )


def run(args: argparse.Namespace) -> List[Dict[str, object]]:
    """Lay out whatever ``args`` describe and return the tiles to print."""
    bounds = Rect(*args.bounds)
    if args.tree is not None:
        tree = load_tree(args.tree)
        layouts = layout_tree(tree, bounds, padding=args.padding, max_depth=args.max_depth)
        paths: Dict[int, str] = {}
        tiles = [_tile(_node_path(layout, paths), layout.rect, layout.depth) for layout in layouts]
        if args.show:
            from .preview import run_preview

            run_preview(tree, padding=args.padding, max_depth=args.max_depth)
        return tiles

    items: List[LayoutItem] = args.weights
    for index, item in enumerate(items):
        item.label = item.label or f"item{index}"
    squarify(items, bounds)
    if args.show:
        from .preview import run_preview

        root = Branch(name="items", children=[Branch(name=item.label, value=item.weight) for item in items])
        run_preview(root)
    return [_tile(item.label, item.rect) for item in items]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.tree is None and not args.weights:
        parser.error("give at least one WEIGHT or --tree FILE")
    if args.tree is not None and args.weights:
        parser.error("WEIGHT arguments and --tree are mutually exclusive")

    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        tiles = run(args)
    except (TreemapError, ValueError, OSError) as exc:
        logger.debug("Layout failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _print_tiles(tiles, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
