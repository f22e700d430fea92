"""Test helper utilities for TaskTabs integration tests."""

from tests.helpers.ui_helpers import (
    # Modal Helpers
    open_task_modal,
    fill_task_modal,
    save_modal,
    create_task_via_modal,

    # Panel Helpers
    get_active_panel,
    get_trash_panel,
    focus_panel,
    assert_panel_shows,
)

__all__ = [
    # Modal Helpers
    "open_task_modal",
    "fill_task_modal",
    "save_modal",
    "create_task_via_modal",

    # Panel Helpers
    "get_active_panel",
    "get_trash_panel",
    "focus_panel",
    "assert_panel_shows",
]
