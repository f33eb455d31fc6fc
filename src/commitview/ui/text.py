# commitview/ui/text.py
"""text.py
=========

Styled terminal text for commitview panels.

Display strings produced by the data sources are either plain `str` or
`StyledText`: an immutable run of ``(text, TextStyle)`` segments. Nothing in
here touches the screen; `TextStyle.curses_attr` only translates a style into
the attribute bits a curses window expects when the view finally draws it.

Key Components:
---------------
- TextStyle: foreground/background colour plus bold/underline/reverse flags.
- StyledText: segments with display-width aware slicing and padding.
- render_display_strings: aligns a grid of columns into one line per row.
"""

from __future__ import annotations

import curses
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Sequence, Union

from commitview.utils.utils import get_char_width, get_string_width

logger = logging.getLogger("commitview")

COLOR_NAMES: dict[str, int] = {
    "default": -1,
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}

# Pair numbers below this are left to the embedding application.
FIRST_COLOR_PAIR = 100
_color_pairs: dict[tuple[int, int], int] = {}


def _color_pair_attr(fg: int, bg: int) -> int:
    key = (fg, bg)
    if key not in _color_pairs:
        pair_number = FIRST_COLOR_PAIR + len(_color_pairs)
        curses.init_pair(pair_number, fg, bg)
        _color_pairs[key] = pair_number
        logger.debug(f"Allocated colour pair {pair_number} for fg={fg} bg={bg}.")
    return curses.color_pair(_color_pairs[key])


def reset_color_pairs() -> None:
    """Forget allocated colour pairs; call after curses is (re)initialised."""
    _color_pairs.clear()


# ==================== TextStyle ====================
@dataclass(frozen=True)
class TextStyle:
    """How a run of text is drawn. Colours are names from `COLOR_NAMES`."""

    fg: Optional[str] = None
    bg: Optional[str] = None
    bold: bool = False
    underline: bool = False
    reverse: bool = False

    def set_bold(self) -> TextStyle:
        return replace(self, bold=True)

    def set_underline(self) -> TextStyle:
        return replace(self, underline=True)

    def set_reverse(self) -> TextStyle:
        return replace(self, reverse=True)

    def set_bg(self, bg: str) -> TextStyle:
        return replace(self, bg=bg)

    def sprint(self, text: str) -> StyledText:
        return StyledText([(text, self)])

    def curses_attr(self) -> int:
        """Translate the style into curses attribute bits.

        Colour pairs are allocated lazily; on terminals without colour support
        `curses.error` is swallowed and only the monochrome flags remain.
        """
        attr = curses.A_NORMAL
        if self.fg is not None or self.bg is not None:
            fg = COLOR_NAMES.get(self.fg or "default", -1)
            bg = COLOR_NAMES.get(self.bg or "default", -1)
            try:
                attr |= _color_pair_attr(fg, bg)
            except curses.error:
                logger.debug(f"Colour pair unavailable for {self}; using monochrome.")
        if self.bold:
            attr |= curses.A_BOLD
        if self.underline:
            attr |= curses.A_UNDERLINE
        if self.reverse:
            attr |= curses.A_REVERSE
        return attr


DEFAULT_STYLE = TextStyle()
FG_BLACK = TextStyle(fg="black")
FG_RED = TextStyle(fg="red")
FG_GREEN = TextStyle(fg="green")
FG_YELLOW = TextStyle(fg="yellow")
FG_BLUE = TextStyle(fg="blue")
FG_MAGENTA = TextStyle(fg="magenta")
FG_CYAN = TextStyle(fg="cyan")
FG_WHITE = TextStyle(fg="white")
FG_DEFAULT = TextStyle(fg="default")

Segment = tuple[str, TextStyle]


# ==================== StyledText ====================
class StyledText:
    """One line of output as styled segments; neighbours sharing a style merge."""

    __slots__ = ("segments",)

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        self.segments: tuple[Segment, ...] = tuple(
            _merge_adjacent((text, style) for text, style in segments if text)
        )

    @classmethod
    def of(cls, value: Union[str, StyledText]) -> StyledText:
        if isinstance(value, StyledText):
            return value
        return cls([(value, DEFAULT_STYLE)])

    @property
    def plain(self) -> str:
        return "".join(text for text, _ in self.segments)

    @property
    def width(self) -> int:
        return get_string_width(self.plain)

    def chars(self) -> Iterator[tuple[str, TextStyle]]:
        for text, style in self.segments:
            for ch in text:
                yield ch, style

    def ljust(self, width: int) -> StyledText:
        """Pad with unstyled spaces up to *width* display cells."""
        missing = width - self.width
        if missing <= 0:
            return self
        return self + " " * missing

    def slice_cells(self, start: int, width: int) -> StyledText:
        """Return the part occupying display cells ``[start, start + width)``.

        Wide glyphs that straddle either edge are dropped rather than split.
        """
        out: list[Segment] = []
        col = 0
        end = start + width
        for ch, style in self.chars():
            w = get_char_width(ch)
            if col >= start and col + w <= end:
                out.append((ch, style))
            col += w
            if col >= end:
                break
        return StyledText(out)

    def __add__(self, other: Union[str, StyledText]) -> StyledText:
        if isinstance(other, str):
            other = StyledText.of(other)
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText(self.segments + other.segments)

    def __radd__(self, other: str) -> StyledText:
        if not isinstance(other, str):
            return NotImplemented
        return StyledText.of(other) + self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self.segments == other.segments

    def __hash__(self) -> int:
        return hash(self.segments)

    def __len__(self) -> int:
        return len(self.plain)

    def __str__(self) -> str:
        return self.plain

    def __repr__(self) -> str:
        return f"StyledText({list(self.segments)!r})"


def _merge_adjacent(segments: Iterable[Segment]) -> list[Segment]:
    merged: list[Segment] = []
    for text, style in segments:
        if merged and merged[-1][1] == style:
            merged[-1] = (merged[-1][0] + text, style)
        else:
            merged.append((text, style))
    return merged


DisplayCell = Union[str, StyledText]


def render_display_strings(rows: Sequence[Sequence[DisplayCell]]) -> list[StyledText]:
    """Align a grid of display strings into one `StyledText` per row.

    Every column except the last is padded to the widest cell of that column
    (in display cells) and followed by a single space. Rows with fewer columns
    than the widest row simply stop early; empty rows render as empty lines.
    """
    max_columns = max((len(row) for row in rows), default=0)
    pad_widths = [0] * max(max_columns - 1, 0)
    for row in rows:
        for i, cell in enumerate(row[: len(pad_widths)]):
            pad_widths[i] = max(pad_widths[i], StyledText.of(cell).width)

    lines: list[StyledText] = []
    for row in rows:
        line = StyledText()
        for i, cell in enumerate(row):
            styled = StyledText.of(cell)
            if i < len(pad_widths) and i < len(row) - 1:
                line = line + styled.ljust(pad_widths[i]) + " "
            else:
                line = line + styled
        lines.append(line)
    return lines
