"""Dashboard application entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import os
import time
from datetime import datetime, timezone
from typing import Optional

from rich.console import Console
from rich.live import Live

from tui_dashboard.compositor import DashboardView, render_frame
from tui_dashboard.layout import select_layout_mode
from tui_dashboard.log import configure_logging
from tui_dashboard.models import Dashboard
from tui_dashboard.profiles import build_dashboard, resolve_profile

logger = logging.getLogger(__name__)


def _json_output(profile: dict, dashboard: Dashboard, width: int, height: int, selected: Optional[int]) -> str:
    _, regions = render_frame(dashboard, width, height, selected)
    payload = {
        "profile": profile["name"],
        "rendered_at": datetime.now(timezone.utc).isoformat(),
        "viewport": {"width": width, "height": height},
        "layout_mode": select_layout_mode(width),
        "selected": selected,
        "regions": regions.to_dict(),
        "content": dashboard.to_dict(),
    }
    return json.dumps(payload, indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Single-screen terminal dashboard")
    parser.add_argument("-l", "--live", action="store_true", help="Redraw the dashboard until interrupted")
    parser.add_argument("--json", action="store_true", help="Emit computed regions as JSON")
    parser.add_argument("--profile", default=os.environ.get("DASHBOARD_PROFILE", "demo"), help="Profile name: demo|blank")
    parser.add_argument("--config", help="Optional JSON config file with content overrides")
    parser.add_argument("--select", type=int, help="Highlighted table row (zero-based)")
    parser.add_argument("--width", type=int, help="Viewport width override")
    parser.add_argument("--height", type=int, help="Viewport height override")
    parser.add_argument("--log-level", default=os.environ.get("DASHBOARD_LOG_LEVEL", "WARNING"), help="Logging level")
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
        profile = resolve_profile(args.profile, args.config)
        dashboard = build_dashboard(profile)
    except ValueError as exc:
        parser.error(str(exc))

    selected = args.select if args.select is not None else profile.get("selected")
    console = Console()
    width = args.width or console.size.width
    height = args.height or console.size.height
    logger.debug("viewport %dx%d, layout mode %s", width, height, select_layout_mode(width))

    if args.json:
        print(_json_output(profile, dashboard, width, height, selected))
        return 0

    def build_renderable():
        return DashboardView(dashboard, selected=selected, height=args.height)

    if args.live:
        refresh_seconds = max(1, int(profile.get("refresh_seconds", 1)))
        with Live(build_renderable(), console=console, refresh_per_second=2, screen=True) as live:
            try:
                while True:
                    time.sleep(refresh_seconds)
                    live.update(build_renderable())
            except KeyboardInterrupt:
                return 0

    console.print(build_renderable(), width=width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
