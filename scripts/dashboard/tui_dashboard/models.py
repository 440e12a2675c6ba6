"""Dashboard content snapshot and its builder."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Union

from rich import box as rich_box
from rich.box import Box


@dataclass(frozen=True)
class TableRow:
    label: str
    value: str

    @classmethod
    def from_pair(cls, pair: Union["TableRow", tuple[str, str]]) -> "TableRow":
        if isinstance(pair, TableRow):
            return pair
        label, value = pair
        return cls(str(label), str(value))

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class Border:
    """Decorative frame drawn around the avatar or the table."""

    title: Optional[str] = None
    box: Box = rich_box.SQUARE
    style: str = ""
    title_align: str = "center"

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "box": box_name(self.box),
            "style": self.style,
            "title_align": self.title_align,
        }


DEFAULT_BORDER = Border()


def box_name(value: Box) -> str:
    for name in dir(rich_box):
        if getattr(rich_box, name) is value:
            return name
    return "custom"


@dataclass(frozen=True)
class Dashboard:
    title: str = ""
    subtitle: str = ""
    avatar: str = ""
    avatar_border: Optional[Border] = None
    table: tuple[TableRow, ...] = ()
    table_border: Optional[Border] = None
    footer: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "avatar": self.avatar,
            "avatar_border": self.avatar_border.to_dict() if self.avatar_border else None,
            "table": [row.to_dict() for row in self.table],
            "table_border": self.table_border.to_dict() if self.table_border else None,
            "footer": list(self.footer),
        }


@dataclass
class DashboardBuilder:
    """Accumulates dashboard options; ``build()`` freezes them."""

    _content: Dashboard = field(default_factory=Dashboard)

    def general_title(self, title: str) -> "DashboardBuilder":
        self._content = replace(self._content, title=str(title))
        return self

    def subtitle(self, subtitle: str) -> "DashboardBuilder":
        self._content = replace(self._content, subtitle=str(subtitle))
        return self

    def avatar(self, avatar: str) -> "DashboardBuilder":
        self._content = replace(self._content, avatar=str(avatar))
        return self

    def avatar_border(self, border: Optional[Border]) -> "DashboardBuilder":
        self._content = replace(self._content, avatar_border=border)
        return self

    def table(self, rows: Iterable[Union[TableRow, tuple[str, str]]]) -> "DashboardBuilder":
        self._content = replace(self._content, table=tuple(TableRow.from_pair(row) for row in rows))
        return self

    def table_border(self, border: Optional[Border]) -> "DashboardBuilder":
        self._content = replace(self._content, table_border=border)
        return self

    def footer(self, lines: Iterable[str]) -> "DashboardBuilder":
        self._content = replace(self._content, footer=tuple(str(line) for line in lines))
        return self

    def build(self) -> Dashboard:
        return self._content
