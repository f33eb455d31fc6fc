# tests/conftest.py
"""Pytest configuration with shared fixtures for the commitview tests."""

from __future__ import annotations

from typing import Any, Callable, Generator
from unittest.mock import MagicMock, patch

import pytest

from commitview.ui.ListContext import ListContext, ListContextConfig
from commitview.ui.PanelManager import PanelManager
from tests.stubs import StubCommitList, StubView


# --- Automatic mocking of curses calls that need an initialised screen ---
@pytest.fixture(autouse=True)
def mock_curses_functions() -> Generator[MagicMock, None, None]:
    """Mock the `curses` functions that fail before `initscr()`.

    Yields:
        MagicMock: The fake window returned by `curses.newwin`.
    """
    window = MagicMock()
    with (
        patch("curses.newwin", return_value=window),
        patch("curses.init_pair"),
        patch("curses.color_pair", return_value=1),
        patch("curses.doupdate"),
        patch("curses.curs_set"),
    ):
        yield window


@pytest.fixture
def mock_config() -> dict[str, dict[str, Any]]:
    """Provide a baseline configuration for commitview tests."""
    return {
        "gui": {
            "horizontal_scroll_factor": 3,
            "use_system_clipboard": True,
            "popup_views": ["menu", "confirmation"],
        },
    }


@pytest.fixture
def gui(mock_config: dict[str, dict[str, Any]]) -> PanelManager:
    """A coordinator with no views and an empty focus stack."""
    return PanelManager(mock_config)


@pytest.fixture
def commits_view(gui: PanelManager) -> StubView:
    """A registered 'commits' view, five rows tall."""
    view = StubView("commits", inner_height=5, inner_width=30)
    gui.add_view(view)
    return view


@pytest.fixture
def make_context(gui: PanelManager) -> Callable[..., tuple[ListContext, StubCommitList]]:
    """Factory building a `ListContext` over a `StubCommitList`.

    Keyword arguments other than ``count``, ``selected`` and ``view_name``
    are forwarded to `ListContextConfig`.
    """

    def _make(
        count: int = 10, selected: int = 0, view_name: str = "commits", **kwargs: Any
    ) -> tuple[ListContext, StubCommitList]:
        data = StubCommitList(count, selected)
        config = ListContextConfig(
            view_name=view_name,
            get_items_length=data.items_length,
            selected_item=data.selected_item,
            get_panel_state=lambda: data.state,
            get_display_strings=kwargs.pop("get_display_strings", data.display_strings),
            **kwargs,
        )
        return ListContext(config, gui), data

    return _make
