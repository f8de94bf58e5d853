"""Data structures that the treemap layout writes geometry into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional

from .errors import InvalidLayoutInputError
from .treemap import Rect


@dataclass
class LayoutItem:
    """A single weighted tile.

    Attributes:
        weight: Relative area this item should receive
        x: Left edge assigned by the layout
        y: Top edge assigned by the layout
        width: Width assigned by the layout
        height: Height assigned by the layout
        label: Optional display name
    """
    weight: float
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    label: str = ""

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(eq=False)
class Branch:
    """Node of a weighted tree, laid out one sibling group at a time.

    A leaf weighs its own ``value``; a branch with children weighs the sum
    of its children and ignores ``value``.
    """

    name: str
    value: float = 0.0
    children: List["Branch"] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def weight(self) -> float:
        if not self.children:
            return self.value
        return sum(child.weight for child in self.children)

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def iter_all(self) -> Iterable["Branch"]:
        """Yield this node and all of its descendants."""

        yield self
        for child in self.children:
            yield from child.iter_all()

    def find(self, name: str) -> Optional["Branch"]:
        """Find the first node named ``name`` in pre-order."""

        for node in self.iter_all():
            if node.name == name:
                return node
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Branch":
        """Build a tree from nested ``{"name", "value", "children"}`` mappings.

        ``weight`` is accepted as an alias of ``value``.

        Raises:
            InvalidLayoutInputError: if a node is not a mapping or carries a
                non-numeric value
        """
        if not isinstance(data, Mapping):
            raise InvalidLayoutInputError(f"tree node must be an object, got {type(data).__name__}")
        raw_value = data.get("value", data.get("weight", 0.0))
        try:
            value = float(raw_value)
        except (TypeError, ValueError) as exc:
            raise InvalidLayoutInputError(f"node {data.get('name', '?')!r} has non-numeric value {raw_value!r}") from exc
        children = data.get("children") or []
        if not isinstance(children, list):
            raise InvalidLayoutInputError(f"children of {data.get('name', '?')!r} must be a list")
        return cls(
            name=str(data.get("name", "")),
            value=value,
            children=[cls.from_dict(child) for child in children],
        )
