#!/usr/bin/env python3
"""Thin entrypoint for the terminal dashboard."""

from __future__ import annotations

from tui_dashboard.app import main


if __name__ == "__main__":
    raise SystemExit(main())
