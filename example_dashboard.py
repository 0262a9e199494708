#!/usr/bin/env python3
"""
📊 TUI Styles - Dashboard Example
=================================
Copyright (c) 2025 PNGN-Tec LLC
"""

import argparse
from typing import List, Tuple

from tui_border import BORDERS, draw_divider, get_border
from tui_color import adaptive
from tui_config import configure_logging
from tui_layout import Position, join_horizontal, join_vertical, place
from tui_style import Style
from tui_width import max_width

SERVICES: List[Tuple[str, str, str]] = [
    ("api", "healthy", "12ms"),
    ("worker", "degraded", "480ms"),
    ("cache", "healthy", "2ms"),
    ("数据库", "down", "-"),
]

STATUS_COLORS = {
    'healthy': 'green',
    'degraded': 'yellow',
    'down': 'bright-red',
}

TEXT = adaptive("#303030", "#E4E4E4")
ACCENT = adaptive("#5F00AF", "#AF87FF")


def build_status_panel(border: str, panel_width: int, dark: bool) -> str:
    name_style = Style().foreground(TEXT).width(12)
    rows = []
    for name, status, latency in SERVICES:
        status_style = Style().bold().foreground(STATUS_COLORS[status]).width(10)
        latency_style = Style().dim().width(7).align(Position.RIGHT)
        rows.append(join_horizontal(
            Position.TOP,
            name_style.render(name, dark=dark),
            status_style.render(status, dark=dark),
            latency_style.render(latency, dark=dark),
        ))

    panel = Style().padding(0, 1).width(panel_width).border(border).border_foreground(ACCENT)
    return panel.render("\n".join(rows), dark=dark)


def build_notes_panel(border: str, panel_width: int, height: int, dark: bool) -> str:
    notes = (
        "worker queue is backing up after the 14:00 deploy; "
        "cache hit rate back above 97%"
    )
    lines = [notes[i:i + 20] for i in range(0, len(notes), 20)]
    panel = (
        Style()
        .italic()
        .foreground(TEXT)
        .padding(0, 1)
        .width(panel_width)
        .height(height)
        .align(Position.LEFT, Position.CENTER)
        .border(border)
        .border_foreground(ACCENT)
    )
    return panel.render("\n".join(lines), dark=dark)


def main():
    parser = argparse.ArgumentParser(description='TUI Styles dashboard demo')
    parser.add_argument('--width', type=int, default=72)
    parser.add_argument('--light', action='store_true', help='render for a light background')
    parser.add_argument('--border', default='rounded', choices=sorted(BORDERS))
    args = parser.parse_args()

    configure_logging()
    dark = not args.light

    title = (
        Style()
        .bold()
        .foreground(ACCENT)
        .padding(0, 2)
        .render("Service Dashboard", dark=dark)
    )

    status = build_status_panel(args.border, 33, dark)
    notes = build_notes_panel(args.border, 24, len(SERVICES), dark)
    body = join_horizontal(Position.TOP, status, notes, separator="  ")

    divider = draw_divider(max_width(body) - 2, get_border(args.border).with_colors(ACCENT), dark)
    footer = Style().dim().render("q to quit · r to refresh", dark=dark)

    page = join_vertical(Position.CENTER, title, divider, body, footer)
    print(place(max(args.width, max_width(page)), 12, Position.CENTER, Position.TOP, page))


if __name__ == "__main__":
    main()
