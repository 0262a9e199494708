#!/usr/bin/env python3
"""
🎨 TUI Styles - Layout Composer
===============================
Copyright (c) 2025 PNGN-Tec LLC

Composes already-rendered blocks. A block is just a string; its size is
its line count and the visible width of its widest line, as measured by
tui_width. Escape sequences inside blocks are passed through untouched.

Module Interface
================
- Position: START / CENTER / END (aliases TOP, LEFT, BOTTOM, RIGHT)
- join_horizontal(): blocks side by side, aligned vertically
- join_vertical(): blocks stacked, aligned horizontally
- place(), place_horizontal(), place_vertical(): a block on a fixed canvas
- align_line(), align_lines(): padding helpers shared with tui_style
"""

import logging
from enum import Enum
from typing import List

from tui_width import max_width, split_lines, truncate, width

logger = logging.getLogger('tui.layout')


class Position(Enum):
    """Alignment along one axis."""
    START = 0
    CENTER = 1
    END = 2

    # Axis-specific spellings
    TOP = 0
    LEFT = 0
    BOTTOM = 2
    RIGHT = 2


# ============================================================================
# PADDING HELPERS
# ============================================================================

def split_remainder(remainder: int, pos: Position):
    """
    Divide ``remainder`` blank cells (or lines) into (before, after).

    CENTER puts the odd one after.
    """
    if remainder <= 0:
        return 0, 0
    if pos is Position.END:
        return remainder, 0
    if pos is Position.CENTER:
        before = remainder // 2
        return before, remainder - before
    return 0, remainder


def align_line(line: str, target: int, pos: Position, fill: str = " ") -> str:
    """Pad ``line`` with ``fill`` cells up to ``target`` visible columns."""
    before, after = split_remainder(target - width(line), pos)
    return fill * before + line + fill * after


def align_lines(lines: List[str], height: int, pos: Position, blank: str) -> List[str]:
    """Pad a list of lines with ``blank`` lines up to ``height`` entries."""
    above, below = split_remainder(height - len(lines), pos)
    return [blank] * above + lines + [blank] * below


# ============================================================================
# JOINS
# ============================================================================

def join_horizontal(pos: Position, *blocks: str, separator: str = "") -> str:
    """
    Place blocks side by side.

    Shorter blocks get blank lines (as wide as the block itself) above,
    below or around them according to ``pos``; every line of a block is
    right-padded to the block's width so columns stay straight.

    Args:
        pos: Vertical alignment (TOP, CENTER or BOTTOM)
        *blocks: Rendered blocks, left to right
        separator: Inserted between blocks on every row

    Example:
        >>> join_horizontal(Position.TOP, "a\\nb", "c")
        'ac\\nb '
    """
    if not blocks:
        return ""

    columns = [split_lines(block) for block in blocks]
    widths = [max_width(block) for block in blocks]
    height = max(len(lines) for lines in columns)

    padded = []
    for lines, column_width in zip(columns, widths):
        lines = [align_line(line, column_width, Position.START) for line in lines]
        padded.append(align_lines(lines, height, pos, " " * column_width))

    rows = [separator.join(column[row] for column in padded) for row in range(height)]
    return "\n".join(rows)


def join_vertical(pos: Position, *blocks: str) -> str:
    """
    Stack blocks top to bottom.

    Every line of every block is padded to the widest line overall,
    according to ``pos`` (LEFT pads right, RIGHT pads left, CENTER splits
    with the odd cell on the right).
    """
    if not blocks:
        return ""

    target = max(max_width(block) for block in blocks)
    lines = []
    for block in blocks:
        lines.extend(align_line(line, target, pos) for line in split_lines(block))
    return "\n".join(lines)


# ============================================================================
# PLACEMENT
# ============================================================================

def place_horizontal(canvas_width: int, pos: Position, content: str) -> str:
    """Fit every line of ``content`` to exactly ``canvas_width`` columns."""
    if canvas_width <= 0:
        return ""
    lines = [truncate(line, canvas_width) for line in split_lines(content)]
    return "\n".join(align_line(line, canvas_width, pos) for line in lines)


def place_vertical(canvas_height: int, pos: Position, content: str) -> str:
    """Fit ``content`` to exactly ``canvas_height`` lines; extra lines are clipped."""
    if canvas_height <= 0:
        return ""
    lines = split_lines(content)[:canvas_height]
    blank = " " * max_width(content)
    return "\n".join(align_lines(lines, canvas_height, pos, blank))


def place(canvas_width: int, canvas_height: int,
          h_pos: Position, v_pos: Position, content: str) -> str:
    """
    Position ``content`` inside a blank canvas.

    Args:
        canvas_width: Canvas columns; content wider than this is cut
        canvas_height: Canvas lines; content taller than this is clipped
        h_pos: Horizontal position (LEFT, CENTER, RIGHT)
        v_pos: Vertical position (TOP, CENTER, BOTTOM)
        content: Rendered block

    Returns:
        ``canvas_height`` lines of exactly ``canvas_width`` columns, or ""
        when either dimension is not positive
    """
    if canvas_width <= 0 or canvas_height <= 0:
        logger.debug(f"Empty canvas {canvas_width}x{canvas_height}")
        return ""
    return place_horizontal(canvas_width, h_pos, place_vertical(canvas_height, v_pos, content))
