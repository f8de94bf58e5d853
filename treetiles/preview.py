"""Tkinter window that draws a laid-out tree."""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Dict, List, Optional

from .branches import NodeRect, layout_tree
from .colors import tile_colors
from .config import (
    CANVAS_BG_COLOR,
    MIN_LABEL_HEIGHT,
    MIN_LABEL_WIDTH,
    PREVIEW_WINDOW_SIZE,
    RECT_INSET_PADDING,
    TEXT_COLOR,
)
from .model import Branch
from .treemap import Rect

logger = logging.getLogger(__name__)


def format_weight(weight: float) -> str:
    """Format a weight compactly for tile labels."""
    if weight == int(weight):
        return str(int(weight))
    return f"{weight:.3g}"


class TreemapPreview:
    """Canvas that re-squarifies ``tree`` whenever the window is resized."""

    def __init__(self, root: tk.Tk, tree: Branch, padding: float = 0.0, max_depth: Optional[int] = None):
        self.root = root
        self.tree = tree
        self.padding = padding
        self.max_depth = max_depth
        self.current_layout: List[NodeRect] = []
        self.canvas_rects: Dict[int, Branch] = {}
        self.is_drawing = False

        self.root.title(f"treetiles - {tree.name or 'treemap'}")
        self.root.geometry(PREVIEW_WINDOW_SIZE)
        self.status_var = tk.StringVar(value="")
        self.canvas = tk.Canvas(self.root, background=CANVAS_BG_COLOR, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        tk.Label(self.root, textvariable=self.status_var, anchor="w").pack(fill=tk.X)

        self.canvas.bind("<Configure>", lambda _event: self.redraw())
        self.canvas.bind("<Motion>", self.on_canvas_motion)

    def redraw(self) -> None:
        """Redraw the treemap on the canvas."""
        if self.is_drawing:
            return
        self.is_drawing = True
        try:
            width = max(self.canvas.winfo_width(), 100)
            height = max(self.canvas.winfo_height(), 100)
            self.canvas.delete("all")
            self.canvas_rects.clear()
            self.current_layout = layout_tree(
                self.tree,
                Rect(0, 0, width, height),
                padding=self.padding,
                max_depth=self.max_depth,
            )
            for layout in self.current_layout:
                if layout.depth == 0:
                    continue
                rect = layout.rect.inset(RECT_INSET_PADDING)
                if rect.width <= 0 or rect.height <= 0:
                    continue
                fill, outline = tile_colors(layout.depth, bool(layout.node.children))
                item = self.canvas.create_rectangle(
                    rect.x, rect.y, rect.right, rect.bottom, fill=fill, outline=outline, width=1.2
                )
                self.canvas_rects[item] = layout.node
                if rect.width > MIN_LABEL_WIDTH and rect.height > MIN_LABEL_HEIGHT:
                    self.canvas.create_text(
                        rect.x + rect.width / 2,
                        rect.y + rect.height / 2,
                        text=f"{layout.node.name}\n{format_weight(layout.node.weight)}",
                        fill=TEXT_COLOR,
                        font=("Segoe UI", 9),
                        justify=tk.CENTER,
                    )
            logger.debug("Drew %d tile(s) at %dx%d", len(self.canvas_rects), width, height)
        finally:
            self.is_drawing = False

    def on_canvas_motion(self, event: tk.Event) -> None:
        """Show the name and weight of the tile under the pointer."""
        hits = self.canvas.find_overlapping(event.x, event.y, event.x, event.y)
        for item in reversed(hits):
            node = self.canvas_rects.get(item)
            if node is not None:
                self.status_var.set(f"{node.name}: {format_weight(node.weight)}")
                return
        self.status_var.set("")


def run_preview(tree: Branch, padding: float = 0.0, max_depth: Optional[int] = None) -> None:
    """Open a preview window for ``tree`` and block until it is closed."""
    root = tk.Tk()
    TreemapPreview(root, tree, padding=padding, max_depth=max_depth)
    root.mainloop()
