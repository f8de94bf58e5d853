"""Tree traversal that lays out every branch of a ``Branch`` tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidLayoutInputError
from .model import Branch
from .treemap import Rect, SquarifyEngine

logger = logging.getLogger(__name__)


@dataclass
class NodeRect:
    """Represents a Branch with its treemap layout rectangle.

    Attributes:
        node: The tree node
        rect: Layout rectangle for this node
        depth: Tree depth of this node
        parent: Parent Branch, if any
    """
    node: Branch
    rect: Rect
    depth: int
    parent: Optional[Branch]


def layout_tree(
    root: Branch,
    bounds: Rect,
    padding: float = 0.0,
    max_depth: Optional[int] = None,
    engine: Optional[SquarifyEngine] = None,
) -> List[NodeRect]:
    """Compute a nested squarified layout for a whole tree.

    The root takes ``bounds``; each branch's children are squarified into
    the branch's own rectangle inset by ``padding``. The engine only ever
    sees one sibling group at a time.

    Args:
        root: Root node to layout
        bounds: Available rectangle bounds
        padding: Inset applied inside every branch before laying out its children
        max_depth: Maximum depth to recurse (None for entire tree)
        engine: Engine to reuse; a new one is created if omitted

    Returns:
        List of NodeRect entries for the tree in pre-order
    """
    if padding < 0:
        raise InvalidLayoutInputError(f"padding must be >= 0, got {padding!r}")
    if max_depth is not None and max_depth < 0:
        raise InvalidLayoutInputError(f"max_depth must be >= 0, got {max_depth!r}")

    engine = engine or SquarifyEngine()
    root.x, root.y, root.width, root.height = bounds.x, bounds.y, bounds.width, bounds.height
    layouts: List[NodeRect] = []
    _layout_branch(root, 0, None, padding, max_depth, engine, layouts)
    logger.debug("Laid out tree %r: %d node(s)", root.name, len(layouts))
    return layouts


def _layout_branch(
    node: Branch,
    depth: int,
    parent: Optional[Branch],
    padding: float,
    max_depth: Optional[int],
    engine: SquarifyEngine,
    acc: List[NodeRect],
) -> None:
    acc.append(NodeRect(node=node, rect=node.rect, depth=depth, parent=parent))
    if not node.children or (max_depth is not None and depth >= max_depth):
        return

    engine.layout(node.children, node.rect.inset(padding))
    for child in node.children:
        _layout_branch(child, depth + 1, node, padding, max_depth, engine, acc)
