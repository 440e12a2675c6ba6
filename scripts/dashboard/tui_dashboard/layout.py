"""Rectangles, size constraints and the split primitive used by the compositor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersection(self, other: "Rect") -> "Rect":
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Length:
    cells: int

    def size(self, available: int) -> int:
        return max(0, int(self.cells))


@dataclass(frozen=True)
class Percentage:
    percent: int

    def size(self, available: int) -> int:
        return max(0, available * int(self.percent) // 100)


Constraint = Union[Length, Percentage]


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Flex(Enum):
    START = "start"
    CENTER = "center"


def split(
    area: Rect,
    constraints: Sequence[Constraint],
    direction: Direction,
    margin: int = 0,
    flex: Flex = Flex.START,
) -> list[Rect]:
    """Partition ``area`` along one axis, one region per constraint.

    ``margin`` is removed from both ends of the split axis before sizing.
    Percentages are taken from the span left after the margin. Segments are
    packed in order; one that does not fit is clipped to what is left, so a
    region never leaves ``area`` and never has a negative size.
    """
    horizontal = direction is Direction.HORIZONTAL
    start = area.x if horizontal else area.y
    span = area.width if horizontal else area.height

    margin = max(0, margin)
    inner_start = start + min(margin, span)
    available = max(0, span - 2 * margin)

    sizes = [constraint.size(available) for constraint in constraints]
    offset = 0
    if flex is Flex.CENTER:
        offset = max(0, (available - sum(sizes)) // 2)

    regions: list[Rect] = []
    cursor = offset
    for size in sizes:
        begin = min(cursor, available)
        length = max(0, min(size, available - begin))
        if horizontal:
            regions.append(Rect(inner_start + begin, area.y, length, area.height))
        else:
            regions.append(Rect(area.x, inner_start + begin, area.width, length))
        cursor += size
    return regions


def vertical(area: Rect, constraints: Sequence[Constraint], margin: int = 0, flex: Flex = Flex.START) -> list[Rect]:
    return split_exact(area, constraints, Direction.VERTICAL, margin=margin, flex=flex)


def horizontal(area: Rect, constraints: Sequence[Constraint], margin: int = 0, flex: Flex = Flex.START) -> list[Rect]:
    return split_exact(area, constraints, Direction.HORIZONTAL, margin=margin, flex=flex)


def split_exact(
    area: Rect,
    constraints: Sequence[Constraint],
    direction: Direction,
    margin: int = 0,
    flex: Flex = Flex.START,
) -> list[Rect]:
    """``split`` for callers that unpack the result positionally."""
    regions = split(area, constraints, direction, margin=margin, flex=flex)
    assert len(regions) == len(constraints), (
        f"split returned {len(regions)} regions for {len(constraints)} constraints"
    )
    return regions


def select_layout_mode(width: int) -> str:
    if width < 100:
        return "narrow"
    if width < 160:
        return "medium"
    return "wide"
