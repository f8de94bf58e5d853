"""Tests for preview helpers that do not need a display."""

import inspect

import pytest

preview = pytest.importorskip("treetiles.preview")


def test_format_weight():
    assert preview.format_weight(3.0) == "3"
    assert preview.format_weight(0.125) == "0.125"


@pytest.mark.parametrize("func", ["run_preview", "TreemapPreview"])
def test_max_depth_is_typed(func):
    target = getattr(preview, func)
    params = inspect.signature(target).parameters
    assert params["max_depth"].annotation == "Optional[int]"
