# commitview/ui/ListContext.py
"""ListContext.py
========================
The list navigation controller shared by every list-like panel.

A `ListContext` pairs one panel's `ListPanelState` with the data accessors of
its `ListContextConfig` and turns input events into selection changes: line
and page movement, jumps to top/bottom, horizontal scrolling, mouse clicks
and search jumps. After each change it refocuses the view on the selected
row, updates the "N of M" footer and fires the panel's focus callback.

Every handler runs to completion on the UI thread. The terminal view is
looked up by name on each call; when it is not mounted yet the handler does
nothing. While a popup owned by another panel has focus, navigation input is
ignored. Exceptions raised by the configured callbacks propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from commitview.core.ListItems import ListItem
from commitview.core.PanelState import IListPanelState
from commitview.ui.ListView import View
from commitview.ui.PanelManager import PanelManager, ViewNotFoundError
from commitview.ui.text import DisplayCell
from commitview.utils.logging_config import logger

DisplayStringsGetter = Callable[[int, int], Sequence[Sequence[DisplayCell]]]


def format_list_footer(selected_line_idx: int, length: int) -> str:
    return f"{selected_line_idx + 1} of {length}"


@dataclass
class ListContextConfig:
    """Everything a list panel plugs into its `ListContext`.

    Attributes:
        view_name: Required. Name of the view the panel renders into.
        get_items_length: Required. Number of items in the list.
        selected_item: Required. Returns ``(item, found)``; `found` is False
            when there is no selection.
        get_panel_state: Required. Returns the panel's selection state.
        get_display_strings: Optional. ``(start_idx, length)`` -> one row of
            column strings per item. Without it `on_render` does nothing.
        on_focus: Optional. Called after the selection has been focused.
        on_focus_lost: Optional. Replaces the default horizontal scroll reset.
        on_click_selected_item: Optional. Called when the already selected
            row of the already active panel is clicked again.
        render_selection: Optional. When True, focusing re-renders the visible
            rows, for content that depends on the selection.
    """

    view_name: str
    get_items_length: Callable[[], int]
    selected_item: Callable[[], tuple[Optional[ListItem], bool]]
    get_panel_state: Callable[[], IListPanelState]
    get_display_strings: Optional[DisplayStringsGetter] = None
    on_focus: Optional[Callable[[], None]] = None
    on_focus_lost: Optional[Callable[[], None]] = None
    on_click_selected_item: Optional[Callable[[], None]] = None
    render_selection: bool = False


# ==================== ListContext Class ====================
class ListContext:
    def __init__(self, config: ListContextConfig, gui: PanelManager) -> None:
        self.config = config
        self.gui = gui

    def __repr__(self) -> str:
        return f"ListContext({self.view_name!r})"

    @property
    def view_name(self) -> str:
        return self.config.view_name

    def get_panel_state(self) -> IListPanelState:
        return self.config.get_panel_state()

    def get_items_length(self) -> int:
        return self.config.get_items_length()

    def _get_view(self) -> Optional[View]:
        try:
            return self.gui.get_view(self.view_name)
        except ViewNotFoundError:
            logger.debug(f"View '{self.view_name}' is not available; skipping.")
            return None

    # --- selection ---
    def get_selected_item(self) -> tuple[Optional[ListItem], bool]:
        return self.config.selected_item()

    def get_selected_item_id(self) -> str:
        item, ok = self.get_selected_item()
        if not ok or item is None:
            return ""
        return item.id

    def copy_selected_item_id(self) -> bool:
        """Copy the selected item's id to the clipboard; False if nothing is selected."""
        item_id = self.get_selected_item_id()
        if not item_id:
            return False
        self.gui.copy_to_clipboard(item_id)
        logger.info(f"Copied '{item_id}' from '{self.view_name}'.")
        return True

    # --- rendering & focus ---
    def focus_line(self) -> None:
        view = self._get_view()
        if view is None:
            return

        selected_line_idx = self.get_panel_state().get_selected_line_idx()
        view.focus_point(view.origin_x(), selected_line_idx)
        if self.config.render_selection and self.config.get_display_strings is not None:
            _, origin_y = view.origin()
            display_strings = self.config.get_display_strings(origin_y, view.inner_height())
            self.gui.render_display_strings_at_pos(view, origin_y, display_strings)
        view.footer = format_list_footer(selected_line_idx, self.get_items_length())

    def on_render(self) -> None:
        """Render the whole list into the view and request a redraw.

        Focus handling assumes the content is already in the view; this is
        what puts it there.
        """
        view = self._get_view()
        if view is None or self.config.get_display_strings is None:
            return

        items_length = self.get_items_length()
        self.gui.refresh_selected_line(self.get_panel_state(), items_length)
        self.gui.render_display_strings(view, self.config.get_display_strings(0, items_length))
        self.gui.render()

    def handle_render(self) -> None:
        self.on_render()

    def handle_focus(self) -> None:
        if self.ignore_keybinding():
            return

        self.focus_line()

        if self.gui.modes.diffing.active():
            self.gui.render_diff()
            return

        if self.config.on_focus is not None:
            self.config.on_focus()

    def handle_focus_lost(self) -> None:
        if self.config.on_focus_lost is not None:
            self.config.on_focus_lost()
            return

        view = self._get_view()
        if view is None:
            return
        view.set_origin_x(0)

    def ignore_keybinding(self) -> bool:
        """True while another panel's popup holds focus."""
        return not self.gui.is_popup_panel(self.view_name) and self.gui.popup_panel_focused()

    # --- vertical movement ---
    def handle_line_change(self, change: int) -> None:
        if self.ignore_keybinding():
            return

        items_length = self.get_items_length()
        if items_length == 0:
            return

        panel_state = self.get_panel_state()
        self.gui.refresh_selected_line(panel_state, items_length)
        selected_line_idx = panel_state.get_selected_line_idx()
        if (change < 0 and selected_line_idx == 0) or (
            change > 0 and selected_line_idx == items_length - 1
        ):
            return

        self.gui.change_selected_line(panel_state, items_length, change)
        logger.debug(
            f"'{self.view_name}' selection {selected_line_idx} -> "
            f"{panel_state.get_selected_line_idx()} (change {change})."
        )
        self.handle_focus()

    def handle_prev_line(self) -> None:
        self.handle_line_change(-1)

    def handle_next_line(self) -> None:
        self.handle_line_change(1)

    def handle_next_page(self) -> None:
        view = self._get_view()
        if view is None:
            return
        self.handle_line_change(self.gui.page_delta(view))

    def handle_prev_page(self) -> None:
        view = self._get_view()
        if view is None:
            return
        self.handle_line_change(-self.gui.page_delta(view))

    def handle_goto_top(self) -> None:
        self.handle_line_change(-self.get_items_length())

    def handle_goto_bottom(self) -> None:
        self.handle_line_change(self.get_items_length())

    # --- horizontal movement ---
    def handle_scroll_left(self) -> None:
        self._scroll(self.gui.scroll_left)

    def handle_scroll_right(self) -> None:
        self._scroll(self.gui.scroll_right)

    def _scroll(self, scroll_func: Callable[[View], None]) -> None:
        if self.ignore_keybinding():
            return

        view = self._get_view()
        if view is None:
            return

        scroll_func(view)
        self.handle_focus()

    # --- mouse & search ---
    def handle_click(self) -> None:
        if self.ignore_keybinding():
            return

        view = self._get_view()
        if view is None:
            return

        panel_state = self.get_panel_state()
        prev_selected_line_idx = panel_state.get_selected_line_idx()
        new_selected_line_idx = view.selected_line_idx()
        was_active = self.gui.current_context() is self

        # the clicked panel takes focus even when the click misses every item
        self.gui.push_context(self)

        if new_selected_line_idx > self.get_items_length() - 1:
            return

        panel_state.set_selected_line_idx(new_selected_line_idx)

        if (
            prev_selected_line_idx == new_selected_line_idx
            and was_active
            and self.config.on_click_selected_item is not None
        ):
            self.config.on_click_selected_item()
            return
        self.handle_focus()

    def on_search_select(self, selected_line_idx: int) -> None:
        self.get_panel_state().set_selected_line_idx(selected_line_idx)
        self.handle_focus()
