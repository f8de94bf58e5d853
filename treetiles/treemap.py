"""Squarified treemap layout routines."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, Protocol, Sequence, Tuple

from .errors import InvalidLayoutInputError, InvalidRowError

logger = logging.getLogger(__name__)


@dataclass
class Rect:
    """Rectangle bounds for treemap layout.

    Attributes:
        x: Left edge coordinate
        y: Top edge coordinate
        width: Rectangle width
        height: Rectangle height
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, padding: float) -> "Rect":
        """Create a new rectangle inset by padding on all sides.

        Args:
            padding: Amount to inset on each side

        Returns:
            New Rect with inset bounds
        """
        return Rect(
            self.x + padding,
            self.y + padding,
            max(0.0, self.width - 2 * padding),
            max(0.0, self.height - 2 * padding),
        )


class Placeable(Protocol):
    """Anything the engine can size: a weight plus writable geometry."""

    weight: float
    x: float
    y: float
    width: float
    height: float


Entry = Tuple[Placeable, float]


def worst_ratio(row: Sequence[Entry], shorter_edge: float, bounds: Rect, remaining_weight: float) -> float:
    """Measure how 'square' the row would be along ``shorter_edge``.

    Item areas are the items' share of ``remaining_weight`` applied to the
    area of ``bounds``. The result is the worst aspect ratio any member of
    the row would get, computed without building the rectangles.

    Args:
        row: ``(item, weight)`` pairs making up the row
        shorter_edge: Length of the edge the row is laid along
        bounds: Remaining rectangle
        remaining_weight: Weight of every item not yet laid out, row included

    Returns:
        Worst aspect ratio (>= 1), or infinity if any member has no area

    Raises:
        InvalidRowError: if the row is empty or ``shorter_edge`` is not positive
    """
    if not row:
        raise InvalidRowError("cannot measure an empty row")
    if not shorter_edge > 0:
        raise InvalidRowError(f"shorter edge must be positive, got {shorter_edge!r}")

    total_area = bounds.area
    if remaining_weight > 0:
        areas = [total_area * weight / remaining_weight for _, weight in row]
    else:
        areas = [0.0] * len(row)
    min_area = min(areas)
    max_area = max(areas)
    sum_area = sum(areas)
    if min_area <= 0 or sum_area <= 0:
        return math.inf

    # Plain products: huge edges overflow to inf and tiny ones underflow to 0.
    side_sq = shorter_edge * shorter_edge
    sum_sq = sum_area * sum_area
    divisor = side_sq * min_area
    if sum_sq <= 0 or divisor <= 0:
        return math.inf
    wide = side_sq * max_area / sum_sq
    tall = sum_sq / divisor
    if not (math.isfinite(wide) and math.isfinite(tall)):
        return math.inf
    return max(wide, tall)


def layout_row(
    row: Sequence[Entry],
    shorter_edge: float,
    bounds: Rect,
    remaining_weight: float,
    exhausted: bool = False,
) -> Tuple[Rect, float]:
    """Place a finished row as one strip of ``bounds``.

    The row spans the longer edge by a length proportional to its share of
    ``remaining_weight`` and is subdivided along ``shorter_edge``. When
    ``exhausted`` is set the row is the last one and takes the whole of
    ``bounds``.

    Returns:
        Tuple of (bounds left for the next row, remaining weight after this row)
    """
    horizontal = shorter_edge == bounds.width
    longer_edge = bounds.height if horizontal else bounds.width
    row_weight = sum(weight for _, weight in row)

    if exhausted:
        common = longer_edge
    elif remaining_weight > 0:
        common = longer_edge * row_weight / remaining_weight
    else:
        common = 0.0
    common = min(max(common, 0.0), longer_edge)

    position = 0.0
    for item, weight in row:
        ratio = weight / row_weight if row_weight > 0 else 1.0 / len(row)
        edge = max(0.0, shorter_edge * ratio)
        if horizontal:
            _place(item, bounds.x + position, bounds.y, edge, common)
        else:
            _place(item, bounds.x, bounds.y + position, common, edge)
        position += edge

    remaining_weight = max(remaining_weight - row_weight, 0.0)

    # Shrink from the side the strip was drawn on; ties shrink the height.
    if bounds.width > bounds.height:
        rest = Rect(bounds.x + common, bounds.y, max(bounds.width - common, 0.0), bounds.height)
    else:
        rest = Rect(bounds.x, bounds.y + common, bounds.width, max(bounds.height - common, 0.0))
    return rest, remaining_weight


def _place(item: Placeable, x: float, y: float, width: float, height: float) -> None:
    item.x = x
    item.y = y
    item.width = width
    item.height = height


def _check_bounds(bounds: Rect) -> None:
    for name in ("x", "y", "width", "height"):
        value = getattr(bounds, name)
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidLayoutInputError(f"bounds.{name} must be a finite number, got {value!r}")
    if bounds.width < 0 or bounds.height < 0:
        raise InvalidLayoutInputError(
            f"bounds must have non-negative size, got {bounds.width!r} x {bounds.height!r}"
        )


def _collect_entries(items: Iterable[Optional[Placeable]]) -> List[Entry]:
    """Validate weights and return ``(item, weight)`` pairs, heaviest first.

    ``None`` entries sort after every real item and are never placed.
    """
    entries: List[Entry] = []
    skipped = 0
    for index, item in enumerate(items):
        if item is None:
            skipped += 1
            continue
        raw = item.weight
        try:
            weight = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidLayoutInputError(f"item {index} has non-numeric weight {raw!r}") from exc
        if not math.isfinite(weight) or weight < 0:
            raise InvalidLayoutInputError(f"item {index} has invalid weight {raw!r}; weights must be finite and >= 0")
        entries.append((item, weight))

    if skipped:
        logger.debug("Skipping %d missing item(s)", skipped)
    entries.sort(key=lambda entry: entry[1], reverse=True)
    return entries


def _layout_equal_strips(row: Sequence[Entry], bounds: Rect) -> None:
    """Cut the longer edge of ``bounds`` into ``len(row)`` equal strips.

    Each strip spans the whole shorter edge. Square bounds are cut along
    the width.
    """
    count = len(row)
    if bounds.width >= bounds.height:
        step = bounds.width / count
        for index, (item, _) in enumerate(row):
            _place(item, bounds.x + index * step, bounds.y, step, bounds.height)
    else:
        step = bounds.height / count
        for index, (item, _) in enumerate(row):
            _place(item, bounds.x, bounds.y + index * step, bounds.width, step)


class SquarifyEngine:
    """Lays out sibling items with the squarified treemap heuristic.

    Items are batched greedily into rows: an item joins the current row as
    long as the row's worst aspect ratio does not get worse, otherwise the
    row is committed along the shorter edge of the remaining bounds and a
    new row starts.

    The engine keeps no state between or during calls; the remaining
    weight is threaded through ``worst_ratio`` and ``layout_row``. One
    instance may therefore serve concurrent calls, provided those calls
    do not share items.
    """

    def layout(self, items: Iterable[Optional[Placeable]], bounds: Rect) -> None:
        """Assign ``x``, ``y``, ``width`` and ``height`` to every item.

        Args:
            items: Items with non-negative weights; ``None`` entries are ignored
            bounds: Rectangle to tile; it is copied, never modified

        Raises:
            InvalidLayoutInputError: if bounds or weights are malformed. No
                item is touched in that case.
        """
        _check_bounds(bounds)
        entries = _collect_entries(items)
        if not entries:
            return

        remaining = sum(weight for _, weight in entries)
        if remaining <= 0:
            logger.debug("All %d weights are zero; splitting %s into equal strips", len(entries), bounds)
            _layout_equal_strips(entries, bounds)
            return

        queue: Deque[Entry] = deque(entries)
        rect = Rect(bounds.x, bounds.y, bounds.width, bounds.height)
        row: List[Entry] = []
        worst = math.inf
        rows = 0

        while queue:
            shorter = min(rect.width, rect.height)
            if shorter <= 0:
                # Nothing left to measure against; the rest share a zero-area strip.
                row.extend(queue)
                queue.clear()
                rect, remaining = layout_row(row, shorter, rect, remaining, exhausted=True)
                rows += 1
                break

            entry = queue.popleft()
            row.append(entry)
            ratio = worst_ratio(row, shorter, rect, remaining)
            # A lone item is always accepted so every commit places something.
            if len(row) == 1 or ratio <= worst:
                worst = ratio
                if queue:
                    continue
            else:
                row.pop()
                queue.appendleft(entry)

            row_weight = sum(weight for _, weight in row)
            rect, remaining = layout_row(row, shorter, rect, remaining, exhausted=not queue)
            rows += 1
            logger.debug(
                "Committed row %d: %d item(s), weight %.6g, worst ratio %.4g, remaining %s",
                rows,
                len(row),
                row_weight,
                worst,
                rect,
            )
            row = []
            worst = math.inf

        logger.debug("Laid out %d item(s) in %d row(s) within %s", len(entries), rows, bounds)


def squarify(items: Iterable[Optional[Placeable]], bounds: Rect) -> None:
    """Lay out ``items`` within ``bounds`` using a fresh engine."""
    SquarifyEngine().layout(items, bounds)
