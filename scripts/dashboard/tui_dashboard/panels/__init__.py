"""Panel rendering helpers."""

from __future__ import annotations

from typing import Optional

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from tui_dashboard.buffer import Buffer
from tui_dashboard.layout import Rect
from tui_dashboard.models import DEFAULT_BORDER, Border

TITLE_STYLE = "bright_red"
SUBTITLE_STYLE = "bold blue"
VALUE_STYLE = "bold bright_red"
TABLE_STYLE = "cyan"
SELECTED_ROW_STYLE = "bold italic underline"
AVATAR_STYLE = "bright_blue"
FOOTER_STYLE = "bold italic bright_cyan"

# Left+right or top+bottom frame cells.
FRAME_CELLS = 2


def border_or_default(border: Optional[Border]) -> Border:
    return border if border is not None else DEFAULT_BORDER


def bordered(content: RenderableType, border: Optional[Border], style: str = "") -> Panel:
    frame = border_or_default(border)
    return Panel(
        content,
        box=frame.box,
        title=Text(frame.title) if frame.title is not None else None,
        title_align=frame.title_align,
        border_style=frame.style,
        style=style,
        padding=0,
        expand=True,
    )


def paint_bordered(
    buf: Buffer, content: RenderableType, border: Optional[Border], area: Rect, style: str = ""
) -> None:
    """Paint ``content`` framed by ``border``; areas too small for a frame stay blank."""
    if area.width < FRAME_CELLS or area.height < FRAME_CELLS:
        return
    if area.width == FRAME_CELLS or area.height == FRAME_CELLS:
        content = Text("")
    buf.paint(bordered(content, border, style=style), area)


def cropped(lines: list[str], style: str, justify: str = "left") -> Text:
    return Text("\n".join(lines), style=style, justify=justify, no_wrap=True, overflow="crop")
