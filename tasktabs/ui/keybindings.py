"""Keybindings for TaskTabs.

App-level shortcuts for task actions and tab switching. Row navigation
(up/down/enter) is bound on TaskPanel itself so it only applies to the
focused list.
"""

from textual.binding import Binding

from tasktabs.logging_config import get_logger

logger = get_logger(__name__)


# Task action keybindings
TASK_ACTION_BINDINGS = [
    Binding("n,N", "new_task", "New Task", show=True),
    Binding("x,delete", "delete_selected", "Delete", show=True),
    Binding("r,R", "restore_selected", "Restore", show=True),
    Binding("c,C", "clear_current", "Clear", show=True),
]

# Tab switching keybindings
TAB_BINDINGS = [
    Binding("1", "show_tab('tasks-tab')", "Tasks", show=False),
    Binding("2", "show_tab('trash-tab')", "Trash", show=False),
    Binding("t", "toggle_tab", "Switch Tab", show=True),
]

# Application control keybindings
APP_CONTROL_BINDINGS = [
    Binding("q,Q", "quit", "Quit", show=True),
    Binding("question_mark", "help", "Help", show=True),
]

# Tab pane identifiers
TASKS_TAB_ID = "tasks-tab"
TRASH_TAB_ID = "trash-tab"

# Panel identifiers (one list per tab)
ACTIVE_PANEL_ID = "active-panel"
TRASH_PANEL_ID = "trash-panel"

TAB_ORDER = [TASKS_TAB_ID, TRASH_TAB_ID]

PANEL_FOR_TAB = {
    TASKS_TAB_ID: ACTIVE_PANEL_ID,
    TRASH_TAB_ID: TRASH_PANEL_ID,
}


def get_other_tab(current_tab_id: str) -> str:
    """Get the tab to switch to from the current one.

    Args:
        current_tab_id: ID of the visible tab pane

    Returns:
        ID of the other tab (unknown IDs go to the Tasks tab)
    """
    if current_tab_id == TASKS_TAB_ID:
        next_tab = TRASH_TAB_ID
    else:
        next_tab = TASKS_TAB_ID

    logger.debug(f"Keybindings: switch tab - from {current_tab_id} to {next_tab}")
    return next_tab


def get_all_bindings() -> list[Binding]:
    """Get all application keybindings.

    Returns:
        List of all Binding objects
    """
    return TASK_ACTION_BINDINGS + TAB_BINDINGS + APP_CONTROL_BINDINGS
