"""Character cell buffer backed by rich segments."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from rich.cells import cell_len
from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.segment import Segment
from rich.style import Style

from tui_dashboard.layout import Rect


@dataclass
class Cell:
    symbol: str = " "
    style: Style = field(default_factory=Style)


class Buffer:
    """A mutable grid of styled cells covering ``area``.

    Coordinates are absolute: ``cell(area.x, area.y)`` is the top-left cell.
    Writes outside the buffer are dropped.
    """

    def __init__(self, area: Rect):
        self.area = area
        self.rows: list[list[Cell]] = []
        self.reset()

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        return cls(area)

    def reset(self) -> None:
        self.rows = [[Cell() for _ in range(self.area.width)] for _ in range(self.area.height)]

    def _contains(self, x: int, y: int) -> bool:
        return self.area.x <= x < self.area.right and self.area.y <= y < self.area.bottom

    def cell(self, x: int, y: int) -> Cell:
        if not self._contains(x, y):
            raise IndexError(f"cell ({x}, {y}) outside buffer {self.area}")
        return self.rows[y - self.area.y][x - self.area.x]

    def set_string(self, x: int, y: int, text: str, style: Style | None = None, limit: int | None = None) -> int:
        """Write ``text`` starting at (x, y); returns the next free column."""
        style = style or Style()
        end = self.area.right if limit is None else min(self.area.right, x + limit)
        for char in text:
            width = cell_len(char)
            if width == 0:
                continue
            if x + width > end:
                break
            if self._contains(x, y):
                self.rows[y - self.area.y][x - self.area.x] = Cell(char, style)
                for pad in range(1, width):
                    if self._contains(x + pad, y):
                        self.rows[y - self.area.y][x + pad - self.area.x] = Cell("", style)
            x += width
        return x

    def paint(self, renderable: RenderableType, area: Rect) -> None:
        """Render ``renderable`` at exactly ``area``'s size and copy it in."""
        target = area.intersection(self.area)
        if area.is_empty or target.is_empty:
            return
        console = Console(
            file=io.StringIO(),
            width=area.width,
            height=area.height,
            force_terminal=True,
            color_system="truecolor",
            legacy_windows=False,
        )
        options = console.options.update_dimensions(area.width, area.height)
        lines = console.render_lines(renderable, options, pad=True)
        for row, line in enumerate(lines[: area.height]):
            x = area.x
            for segment in line:
                if segment.control:
                    continue
                x = self.set_string(x, area.y + row, segment.text, segment.style, limit=area.right - x)
                if x >= area.right:
                    break

    def plain_lines(self) -> list[str]:
        return ["".join(cell.symbol for cell in row) for row in self.rows]

    def styles_at_row(self, y: int) -> list[Style]:
        return [cell.style for cell in self.rows[y - self.area.y]]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self.rows == other.rows

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for index, row in enumerate(self.rows):
            for cell in row:
                if cell.symbol:
                    yield Segment(cell.symbol, cell.style)
            if index < len(self.rows) - 1:
                yield Segment.line()
