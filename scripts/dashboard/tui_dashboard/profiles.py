"""Profile resolution and user config merging for the dashboard."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Optional

from rich import box as rich_box
from rich.box import Box
from rich.errors import StyleSyntaxError
from rich.style import Style

from tui_dashboard.models import Border, Dashboard, DashboardBuilder, TableRow

logger = logging.getLogger(__name__)

DEMO_AVATAR = "\n".join(
    [
        "  .---.  ",
        " / o o \\ ",
        "|   ^   |",
        " \\ '-' / ",
        "  '---'  ",
    ]
)

BUILTIN_PROFILES: dict[str, dict] = {
    "demo": {
        "general_title": "Hello",
        "subtitle": "terminal dashboard",
        "avatar": DEMO_AVATAR,
        "table": [
            ["Open", "o"],
            ["Search", "s"],
            ["Settings", "c"],
            ["Quit", "q"],
        ],
        "footer": ["Made with rich"],
        "selected": 0,
        "refresh_seconds": 1,
    },
    "blank": {
        "general_title": "",
        "subtitle": "",
        "avatar": "",
        "table": [],
        "footer": [],
        "selected": None,
        "refresh_seconds": 1,
    },
}

TEXT_KEYS = ("general_title", "subtitle", "avatar")
BORDER_KEYS = ("avatar_border", "table_border")
TITLE_ALIGNS = ("left", "center", "right")


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError("config must be a JSON object")
    return config


def parse_rows(value: Any) -> list[TableRow]:
    if not isinstance(value, list):
        raise ValueError("table must be a list of rows")
    rows = []
    for item in value:
        if isinstance(item, dict) and "label" in item and "value" in item:
            rows.append(TableRow(str(item["label"]), str(item["value"])))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            rows.append(TableRow.from_pair((str(item[0]), str(item[1]))))
        else:
            raise ValueError(f"invalid table row: {item!r}")
    return rows


def parse_box(name: str) -> Box:
    value = getattr(rich_box, str(name).upper(), None)
    if not isinstance(value, Box):
        raise ValueError(f"unknown box style: {name}")
    return value


def parse_border(value: Any) -> Optional[Border]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"border must be an object: {value!r}")
    border = Border()
    title = value.get("title", border.title)
    if title is not None and not isinstance(title, str):
        raise ValueError(f"border title must be a string: {title!r}")
    style = value.get("style", border.style)
    if not isinstance(style, str):
        raise ValueError(f"border style must be a string: {style!r}")
    try:
        Style.parse(style)
    except StyleSyntaxError as exc:
        raise ValueError(f"invalid border style {style!r}: {exc}") from exc
    title_align = value.get("title_align", border.title_align)
    if title_align not in TITLE_ALIGNS:
        raise ValueError(f"title_align must be one of {'|'.join(TITLE_ALIGNS)}: {title_align!r}")
    return Border(
        title=title,
        box=parse_box(value["box"]) if "box" in value else border.box,
        style=style,
        title_align=title_align,
    )


def _as_int(key: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer: {value!r}") from exc


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    resolved = copy.deepcopy(BUILTIN_PROFILES[profile])
    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        resolved = copy.deepcopy(BUILTIN_PROFILES[selected_profile])
        profile = selected_profile

    for key in TEXT_KEYS:
        if key in user_config:
            resolved[key] = str(user_config[key])

    if "avatar_file" in user_config:
        avatar_path = Path(str(user_config["avatar_file"]))
        if not avatar_path.is_absolute() and config_path:
            avatar_path = Path(config_path).parent / avatar_path
        try:
            resolved["avatar"] = avatar_path.read_text()
        except OSError as exc:
            raise ValueError(f"cannot read avatar file {avatar_path}: {exc}") from exc

    if "table" in user_config:
        resolved["table"] = [[row.label, row.value] for row in parse_rows(user_config["table"])]

    if "footer" in user_config:
        footer = user_config["footer"]
        if isinstance(footer, str):
            footer = [footer]
        if not isinstance(footer, list):
            raise ValueError("footer must be a string or a list of strings")
        resolved["footer"] = [str(line) for line in footer]

    for key in BORDER_KEYS:
        if key in user_config:
            parse_border(user_config[key])
            resolved[key] = user_config[key]

    if "selected" in user_config:
        selected = user_config["selected"]
        resolved["selected"] = None if selected is None else _as_int("selected", selected)

    if "refresh_seconds" in user_config:
        value = _as_int("refresh_seconds", user_config["refresh_seconds"])
        resolved["refresh_seconds"] = max(1, value)

    resolved["name"] = profile
    logger.info("resolved profile %s", profile)
    return resolved


def build_dashboard(profile: dict) -> Dashboard:
    return (
        DashboardBuilder()
        .general_title(profile.get("general_title", ""))
        .subtitle(profile.get("subtitle", ""))
        .avatar(profile.get("avatar", ""))
        .avatar_border(parse_border(profile.get("avatar_border")))
        .table(parse_rows(profile.get("table", [])))
        .table_border(parse_border(profile.get("table_border")))
        .footer(profile.get("footer", []))
        .build()
    )
