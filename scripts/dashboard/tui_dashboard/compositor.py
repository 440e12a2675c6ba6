"""Layout compositor: places the four dashboard regions into a cell buffer.

Each call is independent. The compositor keeps no state between frames,
never reads what is already in the buffer and never mutates the dashboard;
the selection cursor is owned by the caller and passed in per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console, ConsoleOptions, RenderResult

from tui_dashboard.buffer import Buffer
from tui_dashboard.layout import Rect
from tui_dashboard.models import Dashboard
from tui_dashboard.panels.avatar import render as render_avatar
from tui_dashboard.panels.footer import render as render_footer
from tui_dashboard.panels.header import render as render_header
from tui_dashboard.panels.table import render as render_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Regions:
    title: Rect
    subtitle: Rect
    table: Rect
    avatar: Rect
    footer: Rect

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title.to_dict(),
            "subtitle": self.subtitle.to_dict(),
            "table": self.table.to_dict(),
            "avatar": self.avatar.to_dict(),
            "footer": self.footer.to_dict(),
        }


def render(dashboard: Dashboard, area: Rect, buf: Buffer, selected: Optional[int] = None) -> Regions:
    title, subtitle = render_header(dashboard, area, buf)
    table = render_table(dashboard, area, buf, selected)
    avatar = render_avatar(dashboard, area, buf)
    footer = render_footer(dashboard, area, buf)
    regions = Regions(title=title, subtitle=subtitle, table=table, avatar=avatar, footer=footer)
    logger.debug("rendered %s into %s", regions, area)
    return regions


def render_frame(
    dashboard: Dashboard, width: int, height: int, selected: Optional[int] = None
) -> tuple[Buffer, Regions]:
    area = Rect(0, 0, max(0, width), max(0, height))
    buf = Buffer.empty(area)
    return buf, render(dashboard, area, buf, selected)


class DashboardView:
    """Rich renderable drawing one frame at the console's current size."""

    def __init__(self, dashboard: Dashboard, selected: Optional[int] = None, height: Optional[int] = None):
        self.dashboard = dashboard
        self.selected = selected
        self.height = height

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = self.height or options.height or console.size.height
        buf, _ = render_frame(self.dashboard, options.max_width, height, self.selected)
        yield buf
