"""Public facade for commitview.core: re-export the item and state types.

Keeps the CamelCase module names (ListItems.py, PanelState.py),
but provides flat imports for convenience and stability.
"""

from .ListItems import AnyListItem, Branch, Commit, File, ListItem, StashEntry  # noqa: F401
from .PanelState import NO_SELECTION, IListPanelState, ListPanelState  # noqa: F401


__all__ = [
    "AnyListItem",
    "Branch",
    "Commit",
    "File",
    "ListItem",
    "StashEntry",
    "NO_SELECTION",
    "IListPanelState",
    "ListPanelState",
]
