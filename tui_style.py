#!/usr/bin/env python3
"""
🎨 TUI Styles - Style Engine
============================
Copyright (c) 2025 PNGN-Tec LLC

Immutable Style Builder
=======================
A ``Style`` is a frozen record of optional styling properties. Every
builder method returns a new ``Style``; the receiver is never modified,
so styles can be shared between threads and branched freely:

```python
from tui_style import Style
from tui_layout import Position

base = Style().bold().foreground("#FF5F87")
title = base.padding(0, 1).border("rounded")
muted = base.bold(False).dim()

print(title.render("Hello, World!"))
print(muted("quiet text", dark=False))
```

Render Pipeline
===============
1. Adaptive colors are resolved with the caller's ``dark`` flag
2. Input is split into lines; each line is styled on its own, with its
   own opening codes and reset, so nothing leaks across line breaks
3. With a max width or width set, lines are truncated to it minus the
   horizontal padding (tail from ``RenderConfig.truncation_tail``)
4. Lines are filled to the block width per horizontal alignment, then
   wrapped in left/right padding; fill cells get the background only
5. Vertical padding lines are added (background colored)
6. With a height set, the block is padded or clipped per vertical
   alignment; a max height only clips
7. The border is drawn around the block
8. Margins (uncolored) are added outside everything

Rendering never raises; degenerate sizes clamp to zero.
"""

import logging
from dataclasses import dataclass, replace
from typing import FrozenSet, NamedTuple, Optional, Union

from tui_ansi import Attribute, attribute_code, background_code, foreground_code, reset
from tui_border import Border, draw, get_border
from tui_color import Color, as_color
from tui_config import get_render_config
from tui_layout import Position, align_lines, split_remainder
from tui_width import max_width as block_width, split_lines, truncate, width as visible_width

logger = logging.getLogger('tui.style')

ColorLike = Union[str, Color, None]


class Spacing(NamedTuple):
    """Per-side cell counts, clockwise from the top."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def from_shorthand(cls, *values: int) -> "Spacing":
        """
        CSS-style shorthand.

        - 1 value: all sides
        - 2 values: vertical, horizontal
        - 3 values: top, horizontal, bottom
        - 4 values: top, right, bottom, left

        Negative values clamp to 0.
        """
        values = tuple(max(0, int(v)) for v in values)
        if len(values) == 1:
            return cls(*values * 4)
        if len(values) == 2:
            vertical, horizontal = values
            return cls(vertical, horizontal, vertical, horizontal)
        if len(values) == 3:
            top, horizontal, bottom = values
            return cls(top, horizontal, bottom, horizontal)
        if len(values) == 4:
            return cls(*values)
        raise ValueError(f"expected 1 to 4 spacing values, got {len(values)}")

    def with_side(self, side: str, value: int) -> "Spacing":
        return self._replace(**{side: max(0, int(value))})

    @property
    def horizontal(self) -> int:
        return self.left + self.right


def _optional_color(value: ColorLike) -> Optional[Color]:
    return None if value is None else as_color(value)


@dataclass(frozen=True)
class Style:
    """
    Immutable terminal style.

    Fields are read-only; use the builder methods to derive new styles.
    """
    attributes: FrozenSet[Attribute] = frozenset()
    foreground_color: Optional[Color] = None
    background_color: Optional[Color] = None
    padding_box: Spacing = Spacing()
    margin_box: Spacing = Spacing()
    fixed_width: Optional[int] = None
    fixed_height: Optional[int] = None
    width_limit: Optional[int] = None
    height_limit: Optional[int] = None
    horizontal_align: Position = Position.START
    vertical_align: Position = Position.START
    border_spec: Optional[Border] = None
    border_fg: Optional[Color] = None
    border_bg: Optional[Color] = None

    # ------------------------------------------------------------------
    # Text attributes
    # ------------------------------------------------------------------

    def _attribute(self, attr: Attribute, enabled: bool) -> "Style":
        if enabled:
            return replace(self, attributes=self.attributes | {attr})
        return replace(self, attributes=self.attributes - {attr})

    def bold(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.BOLD, enabled)

    def dim(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.DIM, enabled)

    faint = dim

    def italic(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.ITALIC, enabled)

    def underline(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.UNDERLINE, enabled)

    def blink(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.BLINK, enabled)

    def reverse(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.REVERSE, enabled)

    def hidden(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.HIDDEN, enabled)

    def strikethrough(self, enabled: bool = True) -> "Style":
        return self._attribute(Attribute.STRIKETHROUGH, enabled)

    def has(self, attr: Attribute) -> bool:
        return attr in self.attributes

    # ------------------------------------------------------------------
    # Colors
    # ------------------------------------------------------------------

    def foreground(self, color: ColorLike) -> "Style":
        """
        Set the text color.

        Args:
            color: A Color, a spec string for ``parse_color``, or None to clear

        Raises:
            InvalidColorError: if a spec string is invalid
        """
        return replace(self, foreground_color=_optional_color(color))

    def background(self, color: ColorLike) -> "Style":
        """Set the background color; see ``foreground``."""
        return replace(self, background_color=_optional_color(color))

    # ------------------------------------------------------------------
    # Spacing
    # ------------------------------------------------------------------

    def padding(self, *values: int) -> "Style":
        """Inner spacing, CSS shorthand (see ``Spacing.from_shorthand``)."""
        return replace(self, padding_box=Spacing.from_shorthand(*values))

    def padding_top(self, cells: int) -> "Style":
        return replace(self, padding_box=self.padding_box.with_side('top', cells))

    def padding_right(self, cells: int) -> "Style":
        return replace(self, padding_box=self.padding_box.with_side('right', cells))

    def padding_bottom(self, cells: int) -> "Style":
        return replace(self, padding_box=self.padding_box.with_side('bottom', cells))

    def padding_left(self, cells: int) -> "Style":
        return replace(self, padding_box=self.padding_box.with_side('left', cells))

    def margin(self, *values: int) -> "Style":
        """Outer spacing, CSS shorthand; margins are never colored."""
        return replace(self, margin_box=Spacing.from_shorthand(*values))

    def margin_top(self, cells: int) -> "Style":
        return replace(self, margin_box=self.margin_box.with_side('top', cells))

    def margin_right(self, cells: int) -> "Style":
        return replace(self, margin_box=self.margin_box.with_side('right', cells))

    def margin_bottom(self, cells: int) -> "Style":
        return replace(self, margin_box=self.margin_box.with_side('bottom', cells))

    def margin_left(self, cells: int) -> "Style":
        return replace(self, margin_box=self.margin_box.with_side('left', cells))

    # ------------------------------------------------------------------
    # Size and alignment
    # ------------------------------------------------------------------

    def width(self, cells: Optional[int]) -> "Style":
        """Fixed width including horizontal padding; None clears it."""
        return replace(self, fixed_width=None if cells is None else max(0, cells))

    def height(self, lines: Optional[int]) -> "Style":
        """Fixed height including vertical padding; None clears it."""
        return replace(self, fixed_height=None if lines is None else max(0, lines))

    def max_width(self, cells: Optional[int]) -> "Style":
        """
        Truncation limit including horizontal padding; None clears it.

        Unlike ``width`` this never pads: lines are only cut (with the
        configured tail) when they are too wide.
        """
        return replace(self, width_limit=None if cells is None else max(0, cells))

    def max_height(self, lines: Optional[int]) -> "Style":
        """Clip the block to at most ``lines`` lines; None clears it."""
        return replace(self, height_limit=None if lines is None else max(0, lines))

    def align(self, horizontal: Position, vertical: Optional[Position] = None) -> "Style":
        style = replace(self, horizontal_align=horizontal)
        if vertical is not None:
            style = replace(style, vertical_align=vertical)
        return style

    def align_horizontal(self, pos: Position) -> "Style":
        return replace(self, horizontal_align=pos)

    def align_vertical(self, pos: Position) -> "Style":
        return replace(self, vertical_align=pos)

    # ------------------------------------------------------------------
    # Border
    # ------------------------------------------------------------------

    def border(self, spec: Union[Border, str, None] = None, *sides: bool) -> "Style":
        """
        Draw a border around the block.

        Args:
            spec: A Border, a preset name, or None for the configured default
            *sides: Nothing (keep the border's own sides), one flag for all sides,
                or four flags (top, right, bottom, left)
        """
        if spec is None:
            spec = get_render_config().default_border
        if isinstance(spec, str):
            spec = get_border(spec)
        if sides:
            spec = spec.with_sides(*sides)
        return replace(self, border_spec=spec)

    def _border_side(self, **side) -> "Style":
        spec = self.border_spec
        if spec is None:
            spec = get_border(get_render_config().default_border).with_sides(False)
        return replace(self, border_spec=replace(spec, **side))

    def border_top(self, shown: bool = True) -> "Style":
        return self._border_side(show_top=shown)

    def border_right(self, shown: bool = True) -> "Style":
        return self._border_side(show_right=shown)

    def border_bottom(self, shown: bool = True) -> "Style":
        return self._border_side(show_bottom=shown)

    def border_left(self, shown: bool = True) -> "Style":
        return self._border_side(show_left=shown)

    def border_foreground(self, color: ColorLike) -> "Style":
        return replace(self, border_fg=_optional_color(color))

    def border_background(self, color: ColorLike) -> "Style":
        return replace(self, border_bg=_optional_color(color))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _open_codes(self, dark: bool) -> str:
        """Attributes in SGR order, then foreground, then background."""
        codes = [attribute_code(attr) for attr in Attribute if attr in self.attributes]
        if self.foreground_color is not None:
            codes.append(foreground_code(self.foreground_color, dark))
        if self.background_color is not None:
            codes.append(background_code(self.background_color, dark))
        return "".join(codes)

    def _blank(self, cells: int, dark: bool) -> str:
        """Padding cells, painted with the background color if one is set."""
        if cells <= 0:
            return ""
        if self.background_color is None:
            return " " * cells
        return background_code(self.background_color, dark) + " " * cells + reset()

    def _resolved_border(self) -> Optional[Border]:
        spec = self.border_spec
        if spec is None or not spec.visible:
            return None
        if self.border_fg is not None or self.border_bg is not None:
            spec = spec.with_colors(self.border_fg or spec.foreground,
                                    self.border_bg or spec.background)
        return spec

    def render(self, text: str, dark: bool = True) -> str:
        """
        Apply the style to ``text``.

        Args:
            text: Input, possibly multi-line and possibly already styled
            dark: Whether the terminal background is dark; selects the
                member of every adaptive color

        Returns:
            The styled block
        """
        pad = self.padding_box
        prefix = self._open_codes(dark)
        lines = split_lines(text)

        tail = get_render_config().truncation_tail
        if self.width_limit is not None:
            limit = max(0, self.width_limit - pad.horizontal)
            lines = [truncate(line, limit, tail) for line in lines]

        if self.fixed_width is not None:
            inner = max(0, self.fixed_width - pad.horizontal)
            lines = [truncate(line, inner, tail) for line in lines]
        else:
            inner = max(visible_width(line) for line in lines)

        left_pad = self._blank(pad.left, dark)
        right_pad = self._blank(pad.right, dark)
        block = []
        for line in lines:
            before, after = split_remainder(inner - visible_width(line), self.horizontal_align)
            if line and prefix:
                line = prefix + line + reset()
            # Fill cells are painted outside the content span, background only
            block.append(left_pad + self._blank(before, dark) + line
                         + self._blank(after, dark) + right_pad)

        full_width = inner + pad.horizontal
        blank_line = self._blank(full_width, dark)
        block = [blank_line] * pad.top + block + [blank_line] * pad.bottom

        if self.fixed_height is not None:
            block = align_lines(block[:self.fixed_height], self.fixed_height,
                                self.vertical_align, blank_line)
        if self.height_limit is not None:
            block = block[:self.height_limit]

        result = "\n".join(block)

        border = self._resolved_border()
        if border is not None:
            result = draw(result, border, dark)

        return self._apply_margin(result)

    __call__ = render

    def _apply_margin(self, block: str) -> str:
        margin = self.margin_box
        if margin == Spacing():
            return block
        outer = block_width(block)
        lines = [" " * margin.left + line + " " * (margin.right + outer - visible_width(line))
                 for line in split_lines(block)]
        blank = " " * (outer + margin.horizontal)
        return "\n".join([blank] * margin.top + lines + [blank] * margin.bottom)
