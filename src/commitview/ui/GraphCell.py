# commitview/ui/GraphCell.py
"""GraphCell.py
========================
Connector cells of the commit graph and the row renderer built on them.

A graph row is an ordered list of `Cell` objects, one per graph column. Each
cell records in which directions a branch line leaves it (up, down, left,
right), whether it is a plain connection, a commit or a merge, and the styles
of its two glyphs. Rendering a cell yields two characters: the node glyph and
the connector to its right.

Style precedence while a row is built left to right:
    - vertical lines (`set_up`/`set_down`) always own the primary style;
    - a horizontal pass-through (`set_left`) only styles a cell that has no
      vertical line;
    - the right connector keeps the first style it was given unless a caller
      explicitly overrides it (the line the row belongs to wins contention).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional

from commitview.ui.text import DEFAULT_STYLE, StyledText, TextStyle

COMMIT_SYMBOL = "⎔"
MERGE_SYMBOL = "⏣"


class GraphInvariantError(RuntimeError):
    """A direction vector outside the 16 boolean combinations reached the renderer."""


class CellType(IntEnum):
    CONNECTION = 0
    COMMIT = 1
    MERGE = 2


# (up, down, left, right) -> (node glyph, right glyph)
BOX_DRAWING_CHARS: dict[tuple[bool, bool, bool, bool], tuple[str, str]] = {
    (True, True, True, True): ("│", "─"),
    (True, True, True, False): ("│", " "),
    (True, True, False, True): ("│", "─"),
    (True, True, False, False): ("│", " "),
    (True, False, True, True): ("┴", "─"),
    (True, False, True, False): ("┘", " "),
    (True, False, False, True): ("└", "─"),
    (True, False, False, False): ("╵", " "),
    (False, True, True, True): ("┬", "─"),
    (False, True, True, False): ("┐", " "),
    (False, True, False, True): ("┌", "─"),
    (False, True, False, False): ("╷", " "),
    (False, False, True, True): ("─", "─"),
    (False, False, True, False): ("─", " "),
    (False, False, False, True): ("╶", "─"),
    (False, False, False, False): (" ", " "),
}


def get_box_drawing_chars(up: bool, down: bool, left: bool, right: bool) -> tuple[str, str]:
    key = (up, down, left, right)
    if not all(isinstance(flag, bool) for flag in key) or key not in BOX_DRAWING_CHARS:
        raise GraphInvariantError(f"should not be possible: {key!r}")
    return BOX_DRAWING_CHARS[key]


# ==================== Cell ====================
class Cell:
    __slots__ = ("up", "down", "left", "right", "cell_type", "style", "right_style")

    def __init__(
        self,
        style: TextStyle = DEFAULT_STYLE,
        cell_type: CellType = CellType.CONNECTION,
    ) -> None:
        self.up = False
        self.down = False
        self.left = False
        self.right = False
        self.cell_type = cell_type
        self.style = style
        self.right_style: Optional[TextStyle] = None

    @property
    def has_right_style(self) -> bool:
        return self.right_style is not None

    def render(self) -> StyledText:
        first, second = get_box_drawing_chars(self.up, self.down, self.left, self.right)
        if self.cell_type == CellType.COMMIT:
            first = COMMIT_SYMBOL
        elif self.cell_type == CellType.MERGE:
            first = MERGE_SYMBOL

        right_style = self.right_style if self.right_style is not None else self.style
        return StyledText([(first, self.style), (second, right_style)])

    def reset(self) -> None:
        """Clear the direction flags; type and styles are left as they are."""
        self.up = False
        self.down = False
        self.left = False
        self.right = False

    def set_up(self, style: TextStyle) -> Cell:
        self.up = True
        self.style = style
        return self

    def set_down(self, style: TextStyle) -> Cell:
        self.down = True
        self.style = style
        return self

    def set_left(self, style: TextStyle) -> Cell:
        self.left = True
        if not self.up and not self.down:
            # vertical trumps left
            self.style = style
        return self

    def set_right(self, style: TextStyle, override: bool = False) -> Cell:
        self.right = True
        if self.right_style is None or override:
            self.right_style = style
        return self

    def set_style(self, style: TextStyle) -> Cell:
        self.style = style
        return self

    def set_type(self, cell_type: CellType) -> Cell:
        self.cell_type = cell_type
        return self

    def __repr__(self) -> str:
        flags = "".join(
            name for name, on in zip("UDLR", (self.up, self.down, self.left, self.right)) if on
        )
        return f"Cell({self.cell_type.name}, {flags or '-'})"


def render_cells(cells: Iterable[Cell]) -> StyledText:
    """Concatenate the rendered glyph pairs of *cells*, left to right."""
    result = StyledText()
    for cell in cells:
        result = result + cell.render()
    return result


# ==================== CellArena ====================
class CellArena:
    """Reusable pool of cells for one render pass at a time.

    `row(width)` hands out the first *width* pooled cells, allocating more
    only when a wider row than ever before is requested. Handed-out cells are
    blank connections: flags cleared, default style, no right style, so a
    stale right style cannot win `set_right` contention in the next row.
    Cells from the previous call are invalidated by the next one.
    """

    def __init__(self) -> None:
        self._cells: list[Cell] = []

    def __len__(self) -> int:
        return len(self._cells)

    def row(self, width: int) -> list[Cell]:
        if width < 0:
            raise ValueError(f"row width must be non-negative, got {width}")
        while len(self._cells) < width:
            self._cells.append(Cell())
        cells = self._cells[:width]
        for cell in cells:
            cell.reset()
            cell.cell_type = CellType.CONNECTION
            cell.style = DEFAULT_STYLE
            cell.right_style = None
        return cells
