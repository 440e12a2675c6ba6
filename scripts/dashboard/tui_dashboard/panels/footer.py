"""Footer renderer."""

from __future__ import annotations

from tui_dashboard.buffer import Buffer
from tui_dashboard.layout import Percentage, Rect, vertical
from tui_dashboard.models import Dashboard
from tui_dashboard.panels import FOOTER_STYLE, cropped


def layout(area: Rect) -> Rect:
    _, bottom = vertical(area, [Percentage(95), Percentage(5)], margin=1)
    return bottom


def render(content: Dashboard, area: Rect, buf: Buffer) -> Rect:
    bottom = layout(area)
    buf.paint(cropped(list(content.footer), FOOTER_STYLE, justify="center"), bottom)
    return bottom
