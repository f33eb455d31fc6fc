# commitview/core/PanelState.py
"""PanelState.py
========================
Selection state of a single list panel.
"""

from __future__ import annotations

from typing import Protocol


# Marker for "nothing selected"; only ever stored while the list is empty.
NO_SELECTION = -1


class IListPanelState(Protocol):
    def get_selected_line_idx(self) -> int: ...

    def set_selected_line_idx(self, idx: int) -> None: ...


class ListPanelState:
    """Holds the selected row index of one panel.

    While the owning list is non-empty the index stays within
    ``0 <= idx < items_length``; the list navigation controller is the only
    writer and keeps it there.
    """

    def __init__(self, selected_line_idx: int = 0) -> None:
        self.selected_line_idx: int = selected_line_idx

    def get_selected_line_idx(self) -> int:
        return self.selected_line_idx

    def set_selected_line_idx(self, idx: int) -> None:
        self.selected_line_idx = idx

    def __repr__(self) -> str:
        return f"ListPanelState(selected_line_idx={self.selected_line_idx})"
