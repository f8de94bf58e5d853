"""treetiles: squarified treemap layout for weighted items."""

from .branches import NodeRect, layout_tree
from .errors import InvalidLayoutInputError, InvalidRowError, TreemapError
from .model import Branch, LayoutItem
from .treemap import Rect, SquarifyEngine, layout_row, squarify, worst_ratio

__all__ = [
    "Branch",
    "InvalidLayoutInputError",
    "InvalidRowError",
    "LayoutItem",
    "NodeRect",
    "Rect",
    "SquarifyEngine",
    "TreemapError",
    "layout_row",
    "layout_tree",
    "squarify",
    "worst_ratio",
]
