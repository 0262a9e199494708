#!/usr/bin/env python3
"""
🎨 TUI Styles - ANSI Codegen
============================
Copyright (c) 2025 PNGN-Tec LLC

Maps colors and text attributes to SGR escape sequences.

Sequences produced are always ``ESC [ <params> m``:
- attributes: 1 bold, 2 dim, 3 italic, 4 underline, 5 blink, 7 reverse,
  8 hidden, 9 strikethrough (and their 2x "off" codes)
- named colors: 30-37 / 90-97 foreground, 40-47 / 100-107 background
- indexed colors: 38;5;N / 48;5;N
- hex colors: 38;2;R;G;B / 48;2;R;G;B
- reset: 0

Every function here is pure and total for valid inputs.
"""

from enum import Enum

from tui_config import CSI
from tui_color import Color, HexColor, IndexedColor, NamedColor, resolve


class Attribute(Enum):
    """Text attributes with their SGR on and off parameters."""
    BOLD = (1, 22)
    DIM = (2, 22)
    ITALIC = (3, 23)
    UNDERLINE = (4, 24)
    BLINK = (5, 25)
    REVERSE = (7, 27)
    HIDDEN = (8, 28)
    STRIKETHROUGH = (9, 29)

    @property
    def on(self) -> int:
        return self.value[0]

    @property
    def off(self) -> int:
        return self.value[1]


def sgr(*params: int) -> str:
    """Compose one SGR sequence from numeric parameters."""
    return CSI + ";".join(str(p) for p in params) + "m"


class ANSI:
    RESET = sgr(0)
    BOLD = sgr(Attribute.BOLD.on)
    DIM = sgr(Attribute.DIM.on)
    ITALIC = sgr(Attribute.ITALIC.on)
    UNDERLINE = sgr(Attribute.UNDERLINE.on)
    BLINK = sgr(Attribute.BLINK.on)
    REVERSE = sgr(Attribute.REVERSE.on)
    HIDDEN = sgr(Attribute.HIDDEN.on)
    STRIKE = sgr(Attribute.STRIKETHROUGH.on)


def reset() -> str:
    """Full attribute and color reset."""
    return ANSI.RESET


def attribute_code(attr: Attribute) -> str:
    return sgr(attr.on)


def reset_attribute(attr: Attribute) -> str:
    """
    Code that switches a single attribute off.

    Bold and dim share 22 ("normal intensity"), so turning either off
    clears both.
    """
    return sgr(attr.off)


def _color_params(color: Color, background: bool, dark: bool):
    color = resolve(color, dark)
    if isinstance(color, HexColor):
        return (48 if background else 38, 2, color.r, color.g, color.b)
    if isinstance(color, IndexedColor):
        return (48 if background else 38, 5, color.index)
    if isinstance(color, NamedColor):
        code = color.code
        if code < 8:
            return ((40 if background else 30) + code,)
        return ((100 if background else 90) + code - 8,)
    raise TypeError(f"not a color: {color!r}")


def foreground_code(color: Color, dark: bool = True) -> str:
    """
    Foreground sequence for ``color``.

    Args:
        color: Any color; adaptive colors are resolved with ``dark``
        dark: Whether the terminal background is dark
    """
    return sgr(*_color_params(color, False, dark))


def background_code(color: Color, dark: bool = True) -> str:
    """Background sequence for ``color``; mirror of ``foreground_code``."""
    return sgr(*_color_params(color, True, dark))
