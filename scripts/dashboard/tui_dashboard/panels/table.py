"""Key/value table renderer with a highlighted selection row."""

from __future__ import annotations

import logging
from typing import Optional

from rich.table import Table
from rich.text import Text

from tui_dashboard.buffer import Buffer
from tui_dashboard.formatting import resolve_selection, table_size
from tui_dashboard.layout import Length, Percentage, Rect, horizontal, vertical
from tui_dashboard.models import Dashboard
from tui_dashboard.panels import (
    SELECTED_ROW_STYLE,
    TABLE_STYLE,
    VALUE_STYLE,
    paint_bordered,
)

logger = logging.getLogger(__name__)

HIGHLIGHT_SYMBOL = " >> "
# Top and bottom border rows around the table body.
BORDER_ROWS = 2


def layout(content: Dashboard, area: Rect) -> Rect:
    _, column = horizontal(area, [Percentage(36), Percentage(57)], margin=3)
    _, rows = table_size(content.table)
    _, region = vertical(column, [Percentage(20), Length(rows + BORDER_ROWS)])
    return region


def build_table(content: Dashboard, selected: Optional[int]) -> Table:
    table = Table(
        box=None,
        show_header=False,
        show_edge=False,
        pad_edge=False,
        padding=(0, 1, 0, 0),
        expand=True,
        style=TABLE_STYLE,
    )
    if selected is not None:
        table.add_column("marker", width=len(HIGHLIGHT_SYMBOL), no_wrap=True)
    table.add_column("label", ratio=95, no_wrap=True, overflow="crop")
    table.add_column("value", ratio=5, no_wrap=True, overflow="crop")

    for index, row in enumerate(content.table):
        # Labels take the table colour; only the value column carries its own.
        is_selected = index == selected
        cells = [Text(row.label), Text(row.value.upper(), style=VALUE_STYLE)]
        if selected is not None:
            cells.insert(0, Text(HIGHLIGHT_SYMBOL if is_selected else ""))
        table.add_row(*cells, style=SELECTED_ROW_STYLE if is_selected else None)
    return table


def render(content: Dashboard, area: Rect, buf: Buffer, selected: Optional[int] = None) -> Rect:
    region = layout(content, area)
    highlighted = resolve_selection(selected, len(content.table))
    if selected is not None and highlighted is None:
        logger.debug("selection %s outside %d rows, nothing highlighted", selected, len(content.table))
    width, _ = table_size(content.table)
    logger.debug("table intrinsic width %d, region %s", width, region)
    paint_bordered(buf, build_table(content, highlighted), content.table_border, region, style=TABLE_STYLE)
    return region
