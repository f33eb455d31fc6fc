# commitview/ui/PanelManager.py
"""PanelManager.py
========================
This module defines the PanelManager class, the top-level UI coordinator of
commitview. It owns the state that spans panels: the registry of terminal
views, the stack of focused contexts (the top one receives input), which
views are popups, the active modes (e.g. diffing) and the internal
clipboard. List panels query it instead of reaching for global state; in
particular, a background panel asks it whether a popup currently holds
focus before reacting to navigation input.
"""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence

import pyperclip

from commitview.core.PanelState import NO_SELECTION, IListPanelState
from commitview.ui.ListView import View
from commitview.ui.text import DisplayCell, render_display_strings, reset_color_pairs
from commitview.utils.logging_config import logger
from commitview.utils.utils import DEFAULT_CONFIG


class ViewNotFoundError(KeyError):
    """No view is registered under the requested name (e.g. not mounted yet)."""


class Context(Protocol):
    view_name: str

    def handle_focus(self) -> None: ...

    def handle_focus_lost(self) -> None: ...


@dataclass
class DiffingMode:
    ref: str = ""

    def active(self) -> bool:
        return self.ref != ""


@dataclass
class Modes:
    diffing: DiffingMode = field(default_factory=DiffingMode)


## ================= PanelManager Class ===============================
class PanelManager:
    """PanelManager Class
    ==========================
    Coordinates views, focus and modal exclusivity for all panels.

    Attributes:
        config (dict): Application configuration.
        views (dict[str, View]): Registered views by name.
        context_stack (list[Context]): Focus stack; the last entry is active.
        popup_view_names (set[str]): Views that capture input exclusively.
        horizontal_scroll_factor (int): Horizontal scroll step is the view's
            inner width divided by this factor.
        modes (Modes): Active modes; `modes.diffing` switches focus handling
            from a panel's own callback to the diff renderer.
        internal_clipboard (str): Fallback when the system clipboard fails.
        needs_redraw (bool): Set by `render()`; cleared by `draw()`.

    Methods:
        add_view(view) / remove_view(name) / get_view(name)
        push_context(context) / pop_context()
        current_context() / current_view_name()
        is_popup_panel(name) / popup_panel_focused()
        change_selected_line(...) / refresh_selected_line(...)
        page_delta(view) / scroll_left(view) / scroll_right(view)
        render_display_strings(view, rows) / render_display_strings_at_pos(view, y, rows)
        render_diff() / render() / draw()
        copy_to_clipboard(text)
    """

    def __init__(
        self,
        config: Optional[dict[str, Any]] = None,
        diff_renderer: Optional[Callable[[], None]] = None,
    ) -> None:
        self.config: dict[str, Any] = config or {}
        gui_config = self.config.get("gui", {})
        default_gui = DEFAULT_CONFIG["gui"]

        self.views: dict[str, View] = {}
        self.context_stack: list[Context] = []
        self.popup_view_names: set[str] = set(
            gui_config.get("popup_views", default_gui["popup_views"])
        )
        self.horizontal_scroll_factor: int = max(
            int(gui_config.get("horizontal_scroll_factor", default_gui["horizontal_scroll_factor"])),
            1,
        )
        self.use_system_clipboard: bool = bool(
            gui_config.get("use_system_clipboard", default_gui["use_system_clipboard"])
        )
        self.modes = Modes()
        self.diff_renderer = diff_renderer
        self.internal_clipboard = ""
        self.needs_redraw = False
        # colour pairs belong to the screen this manager draws on
        reset_color_pairs()
        logger.info(
            "PanelManager initialised with popup views: %s", sorted(self.popup_view_names)
        )

    # --- views ---
    def add_view(self, view: View) -> None:
        self.views[view.name] = view
        logger.debug(f"View '{view.name}' registered.")

    def remove_view(self, name: str) -> None:
        if self.views.pop(name, None) is not None:
            logger.debug(f"View '{name}' removed.")

    def get_view(self, name: str) -> View:
        try:
            return self.views[name]
        except KeyError:
            raise ViewNotFoundError(name) from None

    # --- focus stack ---
    def current_context(self) -> Optional[Context]:
        return self.context_stack[-1] if self.context_stack else None

    def current_view_name(self) -> Optional[str]:
        context = self.current_context()
        return context.view_name if context is not None else None

    def push_context(self, context: Context) -> None:
        """Make *context* the active one.

        Pushing the context that is already on top does nothing. Otherwise
        the previous top loses focus and the new one gains it.
        """
        previous = self.current_context()
        if previous is context:
            return
        if context in self.context_stack:
            self.context_stack.remove(context)
        if previous is not None:
            previous.handle_focus_lost()
        self.context_stack.append(context)
        logger.debug(f"Context '{context.view_name}' pushed (depth {len(self.context_stack)}).")
        context.handle_focus()

    def pop_context(self) -> None:
        """Return focus to the previous context; the last one is never popped."""
        if len(self.context_stack) <= 1:
            return
        popped = self.context_stack.pop()
        logger.debug(f"Context '{popped.view_name}' popped.")
        popped.handle_focus_lost()
        self.context_stack[-1].handle_focus()

    def is_popup_panel(self, view_name: Optional[str]) -> bool:
        return view_name in self.popup_view_names

    def popup_panel_focused(self) -> bool:
        return self.is_popup_panel(self.current_view_name())

    # --- selection helpers ---
    def change_selected_line(self, panel_state: IListPanelState, total: int, change: int) -> None:
        line = panel_state.get_selected_line_idx()
        if line == NO_SELECTION:
            return
        new_line = min(max(line + change, 0), total - 1)
        panel_state.set_selected_line_idx(new_line)

    def refresh_selected_line(self, panel_state: IListPanelState, total: int) -> None:
        line = panel_state.get_selected_line_idx()
        if line == NO_SELECTION and total > 0:
            panel_state.set_selected_line_idx(0)
        elif total - 1 < line:
            panel_state.set_selected_line_idx(total - 1)

    # --- viewport helpers ---
    def page_delta(self, view: View) -> int:
        return max(view.inner_height(), 1)

    def _horizontal_scroll_amount(self, view: View) -> int:
        return view.inner_width() // self.horizontal_scroll_factor

    def scroll_left(self, view: View) -> None:
        view.set_origin_x(max(view.origin_x() - self._horizontal_scroll_amount(view), 0))

    def scroll_right(self, view: View) -> None:
        view.set_origin_x(view.origin_x() + self._horizontal_scroll_amount(view))

    # --- rendering ---
    def render_display_strings(self, view: View, rows: Sequence[Sequence[DisplayCell]]) -> None:
        view.set_content(render_display_strings(rows))

    def render_display_strings_at_pos(
        self, view: View, y: int, rows: Sequence[Sequence[DisplayCell]]
    ) -> None:
        view.overwrite_lines(y, render_display_strings(rows))

    def render_diff(self) -> None:
        if self.diff_renderer is not None:
            self.diff_renderer()

    def render(self) -> None:
        """Request a redraw; the main loop calls `draw()` on its next tick."""
        self.needs_redraw = True

    def draw(self) -> None:
        focused = self.current_view_name()
        for name, view in self.views.items():
            try:
                view.draw(name == focused)
            except curses.error:
                logger.exception("View '%s' draw() crashed", name)
        try:
            curses.doupdate()
        except curses.error as e:
            logger.error(f"curses.doupdate failed: {e}")
        self.needs_redraw = False

    # --- clipboard ---
    def copy_to_clipboard(self, text: str) -> bool:
        """Copy *text* to the system clipboard, else to the internal one.

        Returns:
            True if the system clipboard received the text.
        """
        if self.use_system_clipboard:
            try:
                pyperclip.copy(text)
                logger.debug("Copied to system clipboard.")
                return True
            except pyperclip.PyperclipException as e:
                logger.warning(f"System clipboard unavailable ({e}); using internal clipboard.")
        self.internal_clipboard = text
        return False
