"""Color helpers for drawing treemap tiles."""

from __future__ import annotations

from typing import Final, Tuple

from .config import BRANCH_TILE_BASE, DEPTH_SHADE_FACTOR, LEAF_TILE_BASE, NORMAL_LIGHTEN_FACTOR

HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"


def _parse_hex(color: str) -> Tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6 or any(ch not in HEX_DIGITS for ch in value):
        raise ValueError(f"expected a #rrggbb color, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def lighten(color: str, factor: float = NORMAL_LIGHTEN_FACTOR) -> str:
    """Lighten a hex color by blending it with white.

    Args:
        color: Hex color string (e.g., "#FF0000")
        factor: Blend factor between 0 (original) and 1 (white)

    Returns:
        Lightened hex color string
    """
    r, g, b = _parse_hex(color)
    r = int(r + (255 - r) * factor)
    g = int(g + (255 - g) * factor)
    b = int(b + (255 - b) * factor)
    return f"#{r:02x}{g:02x}{b:02x}"


def darken(color: str, factor: float = 0.25) -> str:
    """Darken a hex color by blending it with black."""
    r, g, b = _parse_hex(color)
    r = int(r * (1 - factor))
    g = int(g * (1 - factor))
    b = int(b * (1 - factor))
    return f"#{r:02x}{g:02x}{b:02x}"


def tile_colors(depth: int, is_branch: bool) -> Tuple[str, str]:
    """Pick fill and outline colors for a tile.

    Deeper tiles get progressively less lightening so nesting stays visible.

    Returns:
        Tuple of (fill, outline) hex colors
    """
    base = BRANCH_TILE_BASE if is_branch else LEAF_TILE_BASE
    shade = min(max(depth - 1, 0), 3) * DEPTH_SHADE_FACTOR
    fill = lighten(base, max(0.05, NORMAL_LIGHTEN_FACTOR - shade))
    outline = darken(base, max(0.1, 0.4 - shade * 0.5))
    return fill, outline
