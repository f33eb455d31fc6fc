# tests/stubs.py
"""Test stubs for commitview tests.

This module provides an in-memory view and a list data source so the list
navigation controller can be exercised without a terminal.
"""

from __future__ import annotations

from typing import Optional, Sequence

from commitview.core.ListItems import Commit, ListItem
from commitview.core.PanelState import ListPanelState
from commitview.ui.text import StyledText


class StubView:
    """Minimal view recording what the controller does to it."""

    def __init__(self, name: str, inner_height: int = 5, inner_width: int = 30) -> None:
        self.name = name
        self.footer = ""
        self.ox = 0
        self.oy = 0
        self._inner_height = inner_height
        self._inner_width = inner_width
        self.lines: list[StyledText] = []
        self.focus_points: list[tuple[int, int]] = []
        self.overwrites: list[tuple[int, list[StyledText]]] = []
        self.clicked_line: int = 0
        self.draw_calls: list[bool] = []

    def origin(self) -> tuple[int, int]:
        return self.ox, self.oy

    def origin_x(self) -> int:
        return self.ox

    def set_origin_x(self, x: int) -> None:
        if x < 0:
            raise ValueError(x)
        self.ox = x

    def inner_height(self) -> int:
        return self._inner_height

    def inner_width(self) -> int:
        return self._inner_width

    def focus_point(self, cx: int, cy: int) -> None:
        self.focus_points.append((cx, cy))

    def set_content(self, lines: Sequence[StyledText]) -> None:
        self.lines = list(lines)

    def overwrite_lines(self, y: int, lines: Sequence[StyledText]) -> None:
        self.overwrites.append((y, list(lines)))

    def selected_line_idx(self) -> int:
        return self.clicked_line

    def draw(self, is_focused: bool = False) -> None:
        self.draw_calls.append(is_focused)


class StubCommitList:
    """A commit list data source backing one panel."""

    def __init__(self, count: int, selected: int = 0) -> None:
        self.commits = [Commit(f"{i:040x}", f"commit {i}") for i in range(count)]
        self.state = ListPanelState(selected)
        self.display_requests: list[tuple[int, int]] = []

    def items_length(self) -> int:
        return len(self.commits)

    def selected_item(self) -> tuple[Optional[ListItem], bool]:
        idx = self.state.get_selected_line_idx()
        if 0 <= idx < len(self.commits):
            return self.commits[idx], True
        return None, False

    def display_strings(self, start: int, length: int) -> list[list[str]]:
        self.display_requests.append((start, length))
        return [[c.short_sha, c.name] for c in self.commits[start : start + length]]
