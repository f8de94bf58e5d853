"""Tests for tile color helpers."""

import pytest

from treetiles.colors import darken, lighten, tile_colors


def test_lighten_and_darken_blend_channels():
    assert lighten("#000000", 0.5) == "#7f7f7f"
    assert darken("#ffffff", 0.5) == "#7f7f7f"
    assert lighten("#123456", 0) == "#123456"


def test_invalid_color_is_rejected():
    with pytest.raises(ValueError):
        lighten("#12345")


def test_tile_colors_distinguish_branches_and_leaves():
    branch_fill, branch_outline = tile_colors(1, is_branch=True)
    leaf_fill, _ = tile_colors(1, is_branch=False)
    assert branch_fill != leaf_fill
    assert branch_fill.startswith("#") and len(branch_outline) == 7


def test_deeper_tiles_are_less_lightened():
    shallow, _ = tile_colors(1, is_branch=False)
    deep, _ = tile_colors(4, is_branch=False)
    assert shallow != deep
