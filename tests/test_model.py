"""Tests for the layout data structures."""

import pytest

from treetiles.errors import InvalidLayoutInputError
from treetiles.model import Branch, LayoutItem
from treetiles.treemap import Rect


def test_layout_item_rect_and_area():
    item = LayoutItem(weight=2, x=1, y=2, width=3, height=4)
    assert item.rect == Rect(1, 2, 3, 4)
    assert item.area == 12


def test_branch_weight_sums_children():
    tree = Branch(
        name="root",
        value=99,
        children=[Branch(name="a", value=2), Branch(name="b", children=[Branch(name="c", value=5)])],
    )
    assert tree.weight == 7
    assert tree.find("b").weight == 5
    assert [node.name for node in tree.iter_all()] == ["root", "a", "b", "c"]
    assert tree.find("missing") is None


def test_from_dict_builds_nested_tree():
    tree = Branch.from_dict(
        {
            "name": "root",
            "children": [
                {"name": "a", "value": 1.5},
                {"name": "b", "weight": 2, "children": []},
            ],
        }
    )
    assert tree.name == "root"
    assert [child.name for child in tree.children] == ["a", "b"]
    assert tree.find("b").value == 2
    assert tree.weight == pytest.approx(3.5)


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "node"],
        {"name": "x", "value": "lots"},
        {"name": "x", "children": {"name": "y"}},
    ],
)
def test_from_dict_rejects_malformed_nodes(data):
    with pytest.raises(InvalidLayoutInputError):
        Branch.from_dict(data)


def test_rect_inset_never_goes_negative():
    assert Rect(0, 0, 10, 4).inset(3) == Rect(3, 3, 4, 0)
