#!/usr/bin/env python3
"""
🎨 TUI Styles - Color Model
===========================
Copyright (c) 2025 PNGN-Tec LLC

Color specifications for terminal styling. A color is exactly one of:

- ``HexColor``: 24-bit true color, parsed from ``#RRGGBB``
- ``NamedColor``: one of the 16 terminal colors (``red``, ``bright-blue``...)
- ``IndexedColor``: a 256-color palette entry, parsed from ``"0"``-``"255"``
- ``AdaptiveColor``: a light/dark pair resolved at render time

Invalid specifications fail in ``parse_color`` with ``InvalidColorError``;
a constructed color is always valid. Colors are frozen dataclasses and can
be shared freely between threads.
"""

import re
import logging
from dataclasses import dataclass
from typing import Union

from tui_config import ANSI_16_COLORS, ANSI_COLOR_ALIASES

logger = logging.getLogger('tui.color')

_HEX_RE = re.compile(r'#([0-9A-Fa-f]{6})')
_DECIMAL_RE = re.compile(r'[0-9]+')


class InvalidColorError(ValueError):
    """Raised when a color specification cannot be parsed."""

    def __init__(self, spec, reason: str = "must be #RRGGBB, a color name, or 0-255"):
        self.spec = spec
        super().__init__(f"invalid color {spec!r}: {reason}")


@dataclass(frozen=True)
class HexColor:
    """24-bit RGB color."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorError((self.r, self.g, self.b), "channels must be 0-255")

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class NamedColor:
    """One of the 16 canonical terminal colors."""
    name: str

    def __post_init__(self):
        if self.name not in ANSI_16_COLORS:
            raise InvalidColorError(self.name, "unknown color name")

    @property
    def code(self) -> int:
        """Palette slot 0-15."""
        return ANSI_16_COLORS[self.name]


@dataclass(frozen=True)
class IndexedColor:
    """Entry of the 256-color palette."""
    index: int

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int) or not 0 <= self.index <= 255:
            raise InvalidColorError(self.index, "palette index must be 0-255")


ConcreteColor = Union[HexColor, NamedColor, IndexedColor]


@dataclass(frozen=True)
class AdaptiveColor:
    """
    Pair of colors for light and dark terminal backgrounds.

    Members must be concrete colors; an adaptive color never nests another.
    """
    light: ConcreteColor
    dark: ConcreteColor

    def __post_init__(self):
        for member in (self.light, self.dark):
            if not isinstance(member, (HexColor, NamedColor, IndexedColor)):
                raise InvalidColorError(member, "adaptive members must be concrete colors")

    def resolve(self, dark: bool) -> ConcreteColor:
        return self.dark if dark else self.light


Color = Union[HexColor, NamedColor, IndexedColor, AdaptiveColor]

_COLOR_TYPES = (HexColor, NamedColor, IndexedColor, AdaptiveColor)


def parse_color(spec: str) -> Color:
    """
    Parse a color specification.

    Accepted forms:
        - ``#RRGGBB``: exactly six hex digits, any case
        - a color name: ``black`` ... ``white``, ``bright-black`` ...
          ``bright-white`` (``bright_red`` and ``gray``/``grey`` also work),
          case-insensitive
        - a decimal palette index ``0``-``255``

    Args:
        spec: Color specification

    Returns:
        The parsed color

    Raises:
        InvalidColorError: for anything else, including the empty string
    """
    if not isinstance(spec, str) or not spec:
        logger.debug(f"Rejected color spec {spec!r}")
        raise InvalidColorError(spec, "color cannot be empty")

    if spec.startswith('#'):
        match = _HEX_RE.fullmatch(spec)
        if not match:
            logger.debug(f"Rejected hex color {spec!r}")
            raise InvalidColorError(spec, "hex colors need exactly six hex digits")
        value = int(match.group(1), 16)
        return HexColor((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    if _DECIMAL_RE.fullmatch(spec):
        index = int(spec)
        if index > 255:
            logger.debug(f"Rejected palette index {spec!r}")
            raise InvalidColorError(spec, "palette index out of range (0-255)")
        return IndexedColor(index)

    name = spec.lower().replace('_', '-')
    name = ANSI_COLOR_ALIASES.get(name, name)
    if name in ANSI_16_COLORS:
        return NamedColor(name)

    logger.debug(f"Rejected color spec {spec!r}")
    raise InvalidColorError(spec)


def as_color(value: Union[str, Color]) -> Color:
    """Accept either a parsed color or a specification string."""
    if isinstance(value, _COLOR_TYPES):
        return value
    return parse_color(value)


def adaptive(light: Union[str, Color], dark: Union[str, Color]) -> AdaptiveColor:
    """
    Build an adaptive color from two specifications.

    Example:
        >>> adaptive("#333333", "#EEEEEE").resolve(dark=True).hex
        '#EEEEEE'
    """
    return AdaptiveColor(as_color(light), as_color(dark))


def resolve(color: Color, dark: bool) -> ConcreteColor:
    """Concrete color for the given background; non-adaptive colors pass through."""
    if isinstance(color, AdaptiveColor):
        return color.resolve(dark)
    return color
