"""Content measurement helpers shared by the panel renderers."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.cells import cell_len

from tui_dashboard.models import TableRow

# Columns added to the widest table row for the cell gap and border.
TABLE_WIDTH_PAD = 2


def text_width(text: str) -> int:
    return cell_len(text)


def char_count(text: str) -> int:
    return len(text)


def text_lines(text: str) -> list[str]:
    """Split on LF or CRLF only; a trailing newline does not add an empty line."""
    parts = text.split("\n")
    last = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if last:
        lines.append(last)
    return lines


def block_size(text: str) -> tuple[int, int]:
    """Bounding box of a multi-line block as (widest line, line count)."""
    lines = text_lines(text)
    if not lines:
        return 0, 0
    return max(text_width(line) for line in lines), len(lines)


def row_width(row: TableRow) -> int:
    return text_width(row.label) + text_width(row.value.upper())


def table_size(rows: Sequence[TableRow]) -> tuple[int, int]:
    width = 0
    for row in rows:
        width = max(width, row_width(row) + TABLE_WIDTH_PAD)
    return width, len(rows)


def resolve_selection(cursor: Optional[int], row_count: int) -> Optional[int]:
    if cursor is None:
        return None
    index = int(cursor)
    if index < 0 or index >= row_count:
        return None
    return index
