#!/usr/bin/env python3
"""
🎨 TUI Styles - Border Renderer
===============================
Copyright (c) 2025 PNGN-Tec LLC

Border character sets are plain data: a ``Border`` holds the four corner
characters, the four edge characters, an optional divider, which sides are
drawn and optional border colors. Presets are module constants selected by
value or by name; there is no border class hierarchy.

Module Interface
================
- Border: frozen border specification
- NORMAL, ROUNDED, THICK, DOUBLE, BLOCK, OUTER_HALF_BLOCK,
  INNER_HALF_BLOCK, HIDDEN, ASCII: presets
- BORDERS / get_border(): lookup by name
- draw(): frame a rendered block
- draw_divider(): horizontal rule matching a framed block
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Union

from tui_ansi import background_code, foreground_code, reset
from tui_color import Color, as_color
from tui_width import max_width, split_lines, width

logger = logging.getLogger('tui.border')


@dataclass(frozen=True)
class Border:
    """Characters and options for drawing a box around a block."""
    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    divider: str = ""

    show_top: bool = True
    show_right: bool = True
    show_bottom: bool = True
    show_left: bool = True

    foreground: Optional[Color] = None
    background: Optional[Color] = None

    def with_sides(self, *sides: bool) -> "Border":
        """
        Copy with sides switched on or off.

        Accepts one flag (all sides) or four (top, right, bottom, left).
        """
        if len(sides) == 1:
            sides = sides * 4
        if len(sides) != 4:
            raise ValueError(f"with_sides() accepts 1 or 4 flags, got {len(sides)}")
        top, right, bottom, left = (bool(s) for s in sides)
        return replace(self, show_top=top, show_right=right, show_bottom=bottom, show_left=left)

    def with_colors(self, foreground: Union[str, Color, None] = None,
                    background: Union[str, Color, None] = None) -> "Border":
        """Copy with border colors; string specs are parsed."""
        return replace(
            self,
            foreground=None if foreground is None else as_color(foreground),
            background=None if background is None else as_color(background),
        )

    @property
    def visible(self) -> bool:
        return self.show_top or self.show_right or self.show_bottom or self.show_left


# ============================================================================
# PRESETS
# ============================================================================

NORMAL = Border("─", "─", "│", "│", "┌", "┐", "└", "┘", divider="─")
ROUNDED = Border("─", "─", "│", "│", "╭", "╮", "╰", "╯", divider="─")
THICK = Border("━", "━", "┃", "┃", "┏", "┓", "┗", "┛", divider="━")
DOUBLE = Border("═", "═", "║", "║", "╔", "╗", "╚", "╝", divider="═")
BLOCK = Border("█", "█", "█", "█", "█", "█", "█", "█")
OUTER_HALF_BLOCK = Border("▀", "▄", "▌", "▐", "▛", "▜", "▙", "▟")
INNER_HALF_BLOCK = Border("▄", "▀", "▐", "▌", "▗", "▖", "▝", "▘")
HIDDEN = Border(" ", " ", " ", " ", " ", " ", " ", " ", divider=" ")
ASCII = Border("-", "-", "|", "|", "+", "+", "+", "+", divider="-")

BORDERS: Dict[str, Border] = {
    'normal': NORMAL,
    'rounded': ROUNDED,
    'thick': THICK,
    'double': DOUBLE,
    'block': BLOCK,
    'outer-half-block': OUTER_HALF_BLOCK,
    'inner-half-block': INNER_HALF_BLOCK,
    'hidden': HIDDEN,
    'ascii': ASCII,
}


def get_border(name: str) -> Border:
    """
    Look up a preset by name (case-insensitive, ``_`` or ``-``).

    Raises:
        KeyError: for unknown names
    """
    key = name.lower().replace('_', '-')
    if key not in BORDERS:
        logger.debug(f"Rejected border name {name!r}")
        raise KeyError(f"unknown border {name!r}; choose from {', '.join(BORDERS)}")
    return BORDERS[key]


# ============================================================================
# DRAWING
# ============================================================================

def _paint(text: str, border: Border, dark: bool) -> str:
    """Wrap border characters in the border's own colors."""
    if not text or (border.foreground is None and border.background is None):
        return text
    codes = ""
    if border.foreground is not None:
        codes += foreground_code(border.foreground, dark)
    if border.background is not None:
        codes += background_code(border.background, dark)
    return codes + text + reset()


def _repeat(char: str, cells: int) -> str:
    """Repeat an edge character across ``cells`` columns."""
    if cells <= 0 or not char:
        return ""
    char_width = width(char)
    if char_width <= 0:
        return char * cells
    count, remainder = divmod(cells, char_width)
    return char * count + " " * remainder


def _edge_line(border: Border, inner: int, fill: str, left: str, right: str, dark: bool) -> str:
    parts = []
    if border.show_left:
        parts.append(left)
    parts.append(_repeat(fill, inner))
    if border.show_right:
        parts.append(right)
    return _paint("".join(parts), border, dark)


def draw(content: str, border: Border, dark: bool = True) -> str:
    """
    Frame ``content`` with ``border``.

    Each content line is right-padded to the widest line. Corners are drawn
    only where both adjacent sides are drawn; disabled sides are omitted
    entirely. Border characters carry their own color codes and reset, so
    they never inherit or disturb the content's styling.

    Args:
        content: Rendered block
        border: Border specification
        dark: Background flag for adaptive border colors

    Returns:
        The framed block
    """
    if not border.visible:
        return content

    lines = split_lines(content)
    inner = max_width(content)
    left = _paint(border.left, border, dark) if border.show_left else ""
    right = _paint(border.right, border, dark) if border.show_right else ""

    framed: List[str] = []
    if border.show_top:
        framed.append(_edge_line(border, inner, border.top, border.top_left, border.top_right, dark))
    for line in lines:
        framed.append(left + line + " " * (inner - width(line)) + right)
    if border.show_bottom:
        framed.append(_edge_line(border, inner, border.bottom, border.bottom_left,
                                 border.bottom_right, dark))

    return "\n".join(framed)


def draw_divider(inner_width: int, border: Border, dark: bool = True) -> str:
    """
    Horizontal rule as wide as a block framed by ``border``.

    Uses the divider character, falling back to the top edge character.
    """
    char = border.divider or border.top
    cells = max(0, inner_width)
    cells += int(border.show_left) * width(border.left) + int(border.show_right) * width(border.right)
    return _paint(_repeat(char, cells), border, dark)
