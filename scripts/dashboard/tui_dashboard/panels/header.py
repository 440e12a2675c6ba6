"""Header renderer: big title with a subtitle underneath."""

from __future__ import annotations

from functools import lru_cache

import pyfiglet

from tui_dashboard.buffer import Buffer
from tui_dashboard.formatting import char_count
from tui_dashboard.layout import Flex, Length, Percentage, Rect, horizontal, vertical
from tui_dashboard.models import Dashboard
from tui_dashboard.panels import SUBTITLE_STYLE, TITLE_STYLE, cropped

TITLE_FONT = "mini"
# Columns reserved per title character for the enlarged glyphs.
TITLE_CELLS_PER_CHAR = 4


@lru_cache(maxsize=256)
def glyph(char: str, font: str = TITLE_FONT) -> tuple[str, ...]:
    """Figlet rows for one character, fitted to exactly TITLE_CELLS_PER_CHAR columns."""
    rows = pyfiglet.Figlet(font=font).renderText(char).rstrip("\n").split("\n")
    width = max((len(row) for row in rows), default=0)
    fitted = []
    for row in rows:
        row = row.ljust(width)
        if width > TITLE_CELLS_PER_CHAR:
            start = (width - TITLE_CELLS_PER_CHAR) // 2
            row = row[start : start + TITLE_CELLS_PER_CHAR]
        else:
            left = (TITLE_CELLS_PER_CHAR - width) // 2
            row = (" " * left + row).ljust(TITLE_CELLS_PER_CHAR)
        fitted.append(row)
    return tuple(fitted)


def big_text(title: str, font: str = TITLE_FONT) -> list[str]:
    """Title rows, ``TITLE_CELLS_PER_CHAR`` columns per character, blank edge rows dropped."""
    if not title:
        return []
    glyphs = [glyph(char, font) for char in title]
    height = max(len(rows) for rows in glyphs)
    blank = " " * TITLE_CELLS_PER_CHAR
    lines = [
        "".join(rows[index] if index < len(rows) else blank for rows in glyphs)
        for index in range(height)
    ]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def title_width(title: str) -> int:
    return TITLE_CELLS_PER_CHAR * char_count(title)


def layout(content: Dashboard, area: Rect) -> tuple[Rect, Rect]:
    title_band, subtitle_band = vertical(area, [Percentage(10), Percentage(5)], margin=1)
    (title_area,) = horizontal(title_band, [Length(title_width(content.title))], flex=Flex.CENTER)
    (subtitle_area,) = horizontal(subtitle_band, [Length(char_count(content.subtitle))], flex=Flex.CENTER)
    return title_area, subtitle_area


def render(content: Dashboard, area: Rect, buf: Buffer) -> tuple[Rect, Rect]:
    title_area, subtitle_area = layout(content, area)
    buf.paint(cropped(big_text(content.title), TITLE_STYLE), title_area)
    buf.paint(cropped([content.subtitle], SUBTITLE_STYLE), subtitle_area)
    return title_area, subtitle_area
