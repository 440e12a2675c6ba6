"""Avatar renderer: a text image anchored on the left."""

from __future__ import annotations

from tui_dashboard.buffer import Buffer
from tui_dashboard.formatting import block_size, text_lines
from tui_dashboard.layout import Length, Percentage, Rect, horizontal, vertical
from tui_dashboard.models import Dashboard
from tui_dashboard.panels import AVATAR_STYLE, cropped, paint_bordered


def layout(content: Dashboard, area: Rect) -> Rect:
    width, height = block_size(content.avatar)
    _, left = horizontal(area, [Percentage(8), Length(width)])
    _, region = vertical(left, [Percentage(20), Length(height)])
    return region


def render(content: Dashboard, area: Rect, buf: Buffer) -> Rect:
    region = layout(content, area)
    if region.is_empty:
        return region
    image = cropped(text_lines(content.avatar), AVATAR_STYLE)
    paint_bordered(buf, image, content.avatar_border, region)
    return region
