#!/usr/bin/env python3
"""
🎨 TUI Styles - Width Calculation Module
========================================
Copyright (c) 2025 PNGN-Tec LLC

Visual Width Calculation System
================================
Escape-aware text measurement for terminal rendering. Every other part of
the toolkit reasons about the *visible* width of a string (escape
sequences removed, wide glyphs counted twice), never its raw length.

Core Features
=============
- Unicode-aware width calculation (CJK, emoji, combining marks)
- Escape sequences treated as opaque zero-width units
- Control characters (tab included) contribute no width
- Width-bounded truncation that never splits a glyph

Technical Implementation
========================
- Uses the wcwidth library for per-codepoint widths
- Scanning is a two-case stream: ``EscapeUnit`` (cost 0) or ``RuneUnit``
  (cost 0, 1 or 2), produced by ``iter_units()``
- A static codepoint table covers ASCII and the common combining ranges;
  everything else goes through an ``lru_cache`` around wcwidth
- The module-level functions hold no locks and keep no mutable state

Module Interface
================
- strip_escapes(), width(), split_lines(), width_per_line(), max_width(),
  line_count(), truncate(): pure measurement functions
- iter_units(), rune_width(): lower-level scanning helpers

Example Usage
=============
```python
from tui_width import width, truncate

width("\\x1b[31mred\\x1b[0m")        # 3
width("你好")                       # 4
truncate("hello world", 8, "...")   # "hello..."
```
"""

import re
import logging
from functools import lru_cache
from typing import Dict, Iterator, List, NamedTuple, Union

from wcwidth import wcwidth

from tui_config import CSI

# Configure logging
logger = logging.getLogger('tui.width')

# Complete CSI sequence: ESC [ parameter bytes, intermediate bytes, final byte
ESCAPE_RE = re.compile(r'\x1b\[[0-?]*[ -/]*[@-~]')

RESET_SEQUENCE = CSI + "0m"


# ============================================================================
# SCANNING UNITS
# ============================================================================

class EscapeUnit(NamedTuple):
    """A complete escape sequence; occupies no cells."""
    text: str

    @property
    def width(self) -> int:
        return 0


class RuneUnit(NamedTuple):
    """A single displayable (or invisible) codepoint."""
    text: str
    width: int


Unit = Union[EscapeUnit, RuneUnit]


def _build_codepoint_table() -> Dict[int, int]:
    """
    Build width table for common codepoints.

    Returns:
        Dictionary mapping codepoint to width
    """
    table = {}

    # ASCII printable characters
    for code in range(32, 127):
        table[code] = 1

    # Common zero-width characters
    zero_width_ranges = [
        (0x0300, 0x036F),  # Combining diacritical marks
        (0x1AB0, 0x1AFF),  # Combining diacritical marks extended
        (0x1DC0, 0x1DFF),  # Combining diacritical marks supplement
        (0x20D0, 0x20FF),  # Combining diacritical marks for symbols
        (0xFE20, 0xFE2F),  # Combining half marks
    ]

    for start, end in zero_width_ranges:
        for code in range(start, end + 1):
            table[code] = 0

    # Control characters (tab included)
    for code in range(0, 32):
        table[code] = 0
    for code in range(0x7F, 0xA0):
        table[code] = 0

    return table


_CODEPOINT_WIDTHS = _build_codepoint_table()


@lru_cache(maxsize=4096)
def _wcwidth_clamped(char: str) -> int:
    w = wcwidth(char)
    # wcwidth reports -1 for non-printables
    return w if w > 0 else 0


def rune_width(char: str) -> int:
    """
    Display width of a single codepoint in terminal cells.

    Args:
        char: One character

    Returns:
        0 for control and zero-width characters, 1 for narrow, 2 for wide
    """
    cached = _CODEPOINT_WIDTHS.get(ord(char))
    if cached is not None:
        return cached
    return _wcwidth_clamped(char)


def iter_units(text: str) -> Iterator[Unit]:
    """
    Walk ``text`` as a stream of escape units and rune units.

    Incomplete escape sequences are not recognized; their bytes come out as
    ordinary runes (ESC itself has width 0).
    """
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos] == '\x1b':
            match = ESCAPE_RE.match(text, pos)
            if match:
                yield EscapeUnit(match.group())
                pos = match.end()
                continue
        char = text[pos]
        yield RuneUnit(char, rune_width(char))
        pos += 1


# ============================================================================
# MEASUREMENT
# ============================================================================

def strip_escapes(text: str) -> str:
    """Remove every complete escape sequence, leaving all other text untouched."""
    if '\x1b' not in text:
        return text
    return ESCAPE_RE.sub('', text)


def width(text: str) -> int:
    """
    Get visible width of text in terminal columns.

    Args:
        text: Text to measure, possibly containing escape sequences

    Returns:
        Visual width in columns (0 for empty/control-only text)

    Example:
        >>> width("Hello")
        5
        >>> width("你好")
        4
        >>> width("👋")
        2
    """
    if not text:
        return 0
    return sum(rune_width(char) for char in strip_escapes(text))


def split_lines(text: str) -> List[str]:
    """Split on newlines; N newlines always give N+1 lines."""
    return text.split('\n')


def line_count(text: str) -> int:
    """Number of lines in ``text``; an empty string is one line."""
    return text.count('\n') + 1


def width_per_line(text: str) -> List[int]:
    """Visible width of each line of ``text``."""
    return [width(line) for line in split_lines(text)]


def max_width(text: str) -> int:
    """Widest line of ``text`` (0 for an empty string)."""
    return max(width_per_line(text))


def _take(text: str, budget: int) -> List[str]:
    """Leading units of ``text`` fitting ``budget`` cells, escapes kept."""
    parts = []
    used = 0
    for unit in iter_units(text):
        if used + unit.width > budget:
            break
        parts.append(unit.text)
        used += unit.width
    return parts


def truncate(text: str, max_cells: int, tail: str = "") -> str:
    """
    Cut ``text`` so its visible width fits within ``max_cells``.

    Escape sequences before the cut are kept verbatim so their styling
    still applies to ``tail``; a reset is appended whenever the result
    carries escape sequences. A glyph is never split: a wide rune that
    would overflow the budget by one cell is dropped.

    Args:
        text: Text to truncate
        max_cells: Maximum visible width of the result
        tail: Marker appended after the cut (e.g. "...")

    Returns:
        ``text`` unchanged if it already fits, "" if ``max_cells <= 0``,
        otherwise the cut text followed by ``tail``

    Example:
        >>> truncate("hello world", 8, "...")
        'hello...'
        >>> truncate("hello", 2, "...")
        '..'
    """
    if max_cells <= 0:
        return ""
    if width(text) <= max_cells:
        return text

    tail_width = width(tail)
    if tail_width >= max_cells:
        # No room for any of the text; the tail itself is cut to fit
        logger.debug(f"Tail {tail!r} does not fit in {max_cells} cells")
        parts = _take(tail, max_cells)
    else:
        parts = _take(text, max_cells - tail_width)
        parts.append(tail)

    result = ''.join(parts)
    if '\x1b' in result:
        result += RESET_SEQUENCE
    return result

