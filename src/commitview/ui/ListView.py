# commitview/ui/ListView.py
"""ListView.py
========================
The terminal view a list panel renders into.

`View` lists the capabilities the list navigation controller needs from a
view: viewport origin, inner size, a focus point, a footer, content updates
and the row under the last mouse click. `ListView` implements them on top of
a bordered curses window. Views hold already-rendered `StyledText` lines and
know nothing about items or selection state.
"""

from __future__ import annotations

import curses
from typing import Any, Protocol, Sequence

from wcwidth import wcswidth

from commitview.ui.text import StyledText
from commitview.utils.logging_config import KEY_LOGGER, logger
from commitview.utils.utils import get_string_width

CursesWindow = Any


class View(Protocol):
    name: str
    footer: str

    def origin(self) -> tuple[int, int]: ...

    def origin_x(self) -> int: ...

    def set_origin_x(self, x: int) -> None: ...

    def inner_height(self) -> int: ...

    def inner_width(self) -> int: ...

    def focus_point(self, cx: int, cy: int) -> None: ...

    def set_content(self, lines: Sequence[StyledText]) -> None: ...

    def overwrite_lines(self, y: int, lines: Sequence[StyledText]) -> None: ...

    def selected_line_idx(self) -> int: ...

    def draw(self, is_focused: bool = False) -> None: ...


# ==================== ListView Class ====================
class ListView:
    """A bordered curses window showing a scrollable list of styled lines.

    Attributes:
        name (str): Name the coordinator registers the view under.
        title (str): Text drawn centred in the top border.
        footer (str): Text drawn right-aligned in the bottom border.
        lines (list[StyledText]): The full content, one entry per row.
        ox, oy (int): Horizontal and vertical origin of the viewport.
        cx, cy (int): Cursor position relative to the viewport.
        highlight (bool): Whether the cursor row is drawn reversed when focused.
    """

    def __init__(
        self,
        name: str,
        height: int,
        width: int,
        start_y: int = 0,
        start_x: int = 0,
        title: str = "",
    ) -> None:
        self.name = name
        self.title = title or name
        self.height = height
        self.width = width
        self.start_y = start_y
        self.start_x = start_x
        self.win: CursesWindow = curses.newwin(height, width, start_y, start_x)
        self.lines: list[StyledText] = []
        self.ox = 0
        self.oy = 0
        self.cx = 0
        self.cy = 0
        self.footer = ""
        self.highlight = True
        self.visible = True
        self._init_colors()
        logger.debug(f"ListView '{name}' created ({width}x{height} at {start_x},{start_y}).")

    def _init_colors(self) -> None:
        try:
            curses.init_pair(91, curses.COLOR_GREEN, -1)
            curses.init_pair(92, curses.COLOR_CYAN, -1)
            self.attr_border = curses.color_pair(91)
            self.attr_title = curses.color_pair(92) | curses.A_BOLD
        except curses.error:
            self.attr_border = curses.A_NORMAL
            self.attr_title = curses.A_BOLD
        self.attr_selected = curses.A_REVERSE

    # --- geometry ---
    def inner_height(self) -> int:
        return max(self.height - 2, 0)

    def inner_width(self) -> int:
        return max(self.width - 2, 0)

    def resize(self, height: int, width: int, start_y: int = 0, start_x: int = 0) -> None:
        self.height, self.width = height, width
        self.start_y, self.start_x = start_y, start_x
        self.win = curses.newwin(height, width, start_y, start_x)
        logger.info(f"Resize event in view '{self.name}'. New dims: {width}x{height}")

    # --- origin ---
    def origin(self) -> tuple[int, int]:
        return self.ox, self.oy

    def origin_x(self) -> int:
        return self.ox

    def set_origin_x(self, x: int) -> None:
        if x < 0:
            raise ValueError(f"invalid origin x: {x}")
        self.ox = x

    def set_origin(self, x: int, y: int) -> None:
        if x < 0 or y < 0:
            raise ValueError(f"invalid origin: ({x}, {y})")
        self.ox, self.oy = x, y

    def focus_point(self, cx: int, cy: int) -> None:
        """Move the cursor to content row *cy*, scrolling it into view."""
        # row 0 stays valid before the first render
        if cy < 0 or cy >= max(len(self.lines), 1):
            return
        height = max(self.inner_height(), 1)
        if cy < self.oy:
            self.oy = cy
        elif cy >= self.oy + height:
            self.oy = cy - height + 1
        self.cx = max(cx - self.ox, 0)
        self.cy = cy - self.oy

    # --- content ---
    def set_content(self, lines: Sequence[StyledText]) -> None:
        self.lines = list(lines)

    def overwrite_lines(self, y: int, lines: Sequence[StyledText]) -> None:
        """Replace the rows starting at *y*, growing the content if needed."""
        for i, line in enumerate(lines):
            idx = y + i
            if idx < len(self.lines):
                self.lines[idx] = line
            else:
                self.lines.extend([StyledText()] * (idx - len(self.lines)))
                self.lines.append(line)

    # --- mouse ---
    def click(self, x: int, y: int) -> None:
        """Record a mouse click at window coordinates (border included).

        Clicks on the frame land on the nearest inner row or column.
        """
        self.cx = min(max(x - 1, 0), max(self.inner_width() - 1, 0))
        self.cy = min(max(y - 1, 0), max(self.inner_height() - 1, 0))
        KEY_LOGGER.debug(f"click view={self.name} x={x} y={y}")

    def selected_line_idx(self) -> int:
        return self.oy + self.cy

    # --- drawing ---
    def draw(self, is_focused: bool = False) -> None:
        """Stage one frame of the view; `curses.doupdate()` is left to the caller."""
        if not self.visible or self.height < 3 or self.width < 3:
            return
        try:
            self.win.erase()
            self._draw_frame(is_focused)
            inner_w = self.inner_width()
            for row in range(self.inner_height()):
                idx = self.oy + row
                if idx >= len(self.lines):
                    break
                line = self.lines[idx].slice_cells(self.ox, inner_w)
                selected = self.highlight and is_focused and row == self.cy
                if selected:
                    line = line.ljust(inner_w)
                self._draw_line(row + 1, line, selected)
            self.win.noutrefresh()
        except curses.error as e:
            logger.error(f"Curses error in ListView.draw ('{self.name}'): {e}", exc_info=True)

    def _draw_line(self, y: int, line: StyledText, selected: bool) -> None:
        x = 1
        for text, style in line.segments:
            attr = style.curses_attr()
            if selected:
                attr |= self.attr_selected
            self.win.addstr(y, x, text, attr)
            x += get_string_width(text)

    def _draw_frame(self, is_focused: bool) -> None:
        border_attr = self.attr_border | (curses.A_BOLD if is_focused else curses.A_NORMAL)
        self.win.attron(border_attr)
        self.win.border()
        self.win.attroff(border_attr)

        title = f" {self.title} "
        title_len = wcswidth(title)
        if 0 <= title_len < self.width - 2:
            self.win.addstr(0, max(1, (self.width - title_len) // 2), title, self.attr_title)

        if self.footer:
            footer = f" {self.footer} "
            footer_len = wcswidth(footer)
            if 0 <= footer_len < self.width - 2:
                self.win.addstr(self.height - 1, self.width - 1 - footer_len, footer, border_attr)
