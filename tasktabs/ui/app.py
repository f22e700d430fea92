"""Main Textual application for TaskTabs.

Two tabs over one TaskStore:
- Tasks: active tasks, with Add / Delete / Clear Tasks
- Trash: deleted tasks, with Restore / Delete Forever / Clear Trash

The app subscribes to the store and re-renders both panels from the
published snapshots after every change; actions only call store operations.
"""

from typing import Optional, Callable

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, TabbedContent, TabPane

from tasktabs.config import Config
from tasktabs.logging_config import get_logger
from tasktabs.models import Task
from tasktabs.services.task_store import StoreChange, TaskStore
from tasktabs.ui.base_styles import BUTTON_BASE_CSS
from tasktabs.ui.components.clear_modal import ClearConfirmModal
from tasktabs.ui.components.detail_modal import TaskDetailModal
from tasktabs.ui.components.task_modal import TaskCreationModal
from tasktabs.ui.components.task_panel import TaskPanel
from tasktabs.ui.constants import (
    BUCKET_ACTIVE,
    BUCKET_TRASH,
    MAX_TITLE_LENGTH_IN_NOTIFICATION,
    NOTIFICATION_TIMEOUT_SHORT,
    NOTIFICATION_TIMEOUT_MEDIUM,
    NOTIFICATION_TIMEOUT_LONG,
    SCREEN_STACK_SIZE_MAIN_APP,
)
from tasktabs.ui.keybindings import (
    get_all_bindings,
    get_other_tab,
    ACTIVE_PANEL_ID,
    TRASH_PANEL_ID,
    TASKS_TAB_ID,
    TRASH_TAB_ID,
    PANEL_FOR_TAB,
    TAB_ORDER,
)
from tasktabs.ui.theme import all_themes, theme_name

logger = get_logger(__name__)


# Button id -> action name
BUTTON_ACTIONS = {
    "add-button": "new_task",
    "delete-button": "delete_selected",
    "clear-tasks-button": "clear_active",
    "restore-button": "restore_selected",
    "purge-button": "purge_selected",
    "clear-trash-button": "clear_trash",
}

TAB_NAMES = {
    TASKS_TAB_ID: "Tasks",
    TRASH_TAB_ID: "Trash",
}


def tab_label(tab_id: str, count: int) -> str:
    """Tab caption with the number of tasks it holds, e.g. "Trash (2)"."""
    return f"{TAB_NAMES[tab_id]} ({count})"


class TaskTabsApp(App):
    """Main TaskTabs application with a Tasks tab and a Trash tab."""

    CSS = BUTTON_BASE_CSS + """
    Screen {
        background: $background;
        layout: vertical;
    }

    TabbedContent {
        height: 1fr;
    }

    TabPane {
        padding: 1 1 0 1;
    }

    .action-bar {
        width: 100%;
        height: 3;
        margin-bottom: 1;
    }
    """

    BINDINGS = get_all_bindings()

    # ==============================================================================
    # LIFECYCLE METHODS
    # ==============================================================================

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        config: Optional[Config] = None,
        **kwargs
    ) -> None:
        """Initialize the TaskTabs application.

        Args:
            store: Task store to display; a fresh empty store by default
            config: Configuration; loaded from ~/.tasktabs/config.ini by default
            **kwargs: Additional keyword arguments for App
        """
        super().__init__(**kwargs)
        self.store = store if store is not None else TaskStore()
        self.config = config if config is not None else Config()

        display = self.config.get_display_config()
        behavior = self.config.get_behavior_config()

        self.title = display["title"]
        self.sub_title = "Press ? for help"
        self._theme_choice: str = display["theme"]
        self._confirm_clear: bool = behavior["confirm_clear"]
        self._unsubscribe: Optional[Callable[[], None]] = None

    def compose(self) -> ComposeResult:
        yield Header()

        with TabbedContent(initial=TASKS_TAB_ID):
            with TabPane(tab_label(TASKS_TAB_ID, 0), id=TASKS_TAB_ID):
                with Horizontal(classes="action-bar"):
                    yield Button("Add Task", id="add-button", classes="success")
                    yield Button("Delete", id="delete-button")
                    yield Button("Clear Tasks", id="clear-tasks-button", classes="error")
                yield TaskPanel(
                    title="My Tasks",
                    empty_message="No tasks yet\nPress N to add a task",
                    id=ACTIVE_PANEL_ID,
                )

            with TabPane(tab_label(TRASH_TAB_ID, 0), id=TRASH_TAB_ID):
                with Horizontal(classes="action-bar"):
                    yield Button("Restore", id="restore-button", classes="success")
                    yield Button("Delete Forever", id="purge-button", classes="error")
                    yield Button("Clear Trash", id="clear-trash-button", classes="error")
                yield TaskPanel(
                    title="Trash",
                    empty_message="Trash is empty",
                    id=TRASH_PANEL_ID,
                )

        yield Footer()

    def on_mount(self) -> None:
        """Apply the theme, subscribe to the store and draw the initial state."""
        logger.info("TaskTabs application mounted, initializing...")

        for theme in all_themes():
            self.register_theme(theme)
        self.theme = theme_name(self._theme_choice)
        logger.debug(f"Theme applied: {self.theme}")

        self._unsubscribe = self.store.subscribe(self._on_store_changed)
        self._render_buckets(self.store.active, self.store.trashed)
        self.query_one(f"#{ACTIVE_PANEL_ID}", TaskPanel).focus()

        logger.info(
            f"TaskTabs application ready (active={self.store.active_count}, "
            f"trashed={self.store.trashed_count})"
        )

    def on_unmount(self) -> None:
        """Detach from the store when the app shuts down."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        logger.info("TaskTabs application shutdown complete")

    # ==============================================================================
    # STORE OBSERVATION
    # ==============================================================================

    def _on_store_changed(self, change: StoreChange) -> None:
        """Re-render both panels from the snapshots in a StoreChange."""
        logger.debug(
            f"Store changed: {change.operation} "
            f"(active={len(change.active)}, trashed={len(change.trashed)})"
        )
        self._render_buckets(change.active, change.trashed)

    def _render_buckets(self, active, trashed) -> None:
        self.query_one(f"#{ACTIVE_PANEL_ID}", TaskPanel).set_tasks(active)
        self.query_one(f"#{TRASH_PANEL_ID}", TaskPanel).set_tasks(trashed)

        tabs = self.query_one(TabbedContent)
        tabs.get_tab(TASKS_TAB_ID).label = tab_label(TASKS_TAB_ID, len(active))
        tabs.get_tab(TRASH_TAB_ID).label = tab_label(TRASH_TAB_ID, len(trashed))

    # ==============================================================================
    # EVENT HANDLERS
    # ==============================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route action-bar buttons to the matching actions."""
        action = BUTTON_ACTIONS.get(event.button.id or "")
        if action is None:
            return

        logger.debug(f"Button pressed: {event.button.id} -> {action}")
        getattr(self, f"action_{action}")()

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        """Move focus to the list of the tab that was just shown."""
        panel_id = PANEL_FOR_TAB.get(event.tabbed_content.active)
        if panel_id:
            self.query_one(f"#{panel_id}", TaskPanel).focus()

    def on_task_panel_task_opened(self, message: TaskPanel.TaskOpened) -> None:
        self._open_details(message.task)

    def on_task_creation_modal_task_created(self, message: TaskCreationModal.TaskCreated) -> None:
        """Add a submitted task to the store."""
        self.store.add_task(message.task)
        self._notify_task("added", message.task)

    def on_task_creation_modal_task_cancelled(self, message: TaskCreationModal.TaskCancelled) -> None:
        logger.debug("Task creation cancelled, store unchanged")

    def on_clear_confirm_modal_clear_confirmed(self, message: ClearConfirmModal.ClearConfirmed) -> None:
        self._clear_bucket(message.bucket)

    def on_clear_confirm_modal_clear_cancelled(self, message: ClearConfirmModal.ClearCancelled) -> None:
        logger.debug(f"Clear cancelled on {self._current_tab()}, store unchanged")

    # ==============================================================================
    # ACTION HANDLERS - TASK OPERATIONS
    # ==============================================================================

    def action_new_task(self) -> None:
        """Open the task creation modal (N key)."""
        if not self._is_main_screen():
            return
        self.action_show_tab(TASKS_TAB_ID)
        self.push_screen(TaskCreationModal())

    def action_delete_selected(self) -> None:
        """Delete the selected task (X/Delete key).

        On the Tasks tab the task moves to the trash. On the Trash tab it is
        erased permanently.
        """
        if not self._is_main_screen():
            return

        if self._current_tab() == TRASH_TAB_ID:
            self.action_purge_selected()
            return

        task = self._selected_task(ACTIVE_PANEL_ID)
        if task is None:
            logger.debug("No task selected for delete")
            return

        if self.store.delete_task(task):
            self._notify_task("moved to trash", task, icon="🗑️")

    def action_purge_selected(self) -> None:
        """Erase the selected trashed task permanently."""
        if not self._is_main_screen():
            return

        task = self._selected_task(TRASH_PANEL_ID)
        if task is None:
            logger.debug("No task selected for purge")
            return

        if self.store.purge_task(task):
            self._notify_task("deleted permanently", task, icon="✖")

    def action_restore_selected(self) -> None:
        """Restore the selected trashed task to the end of the task list (R key)."""
        if not self._is_main_screen():
            return

        if self._current_tab() != TRASH_TAB_ID:
            logger.debug("Restore ignored outside the Trash tab")
            return

        task = self._selected_task(TRASH_PANEL_ID)
        if task is None:
            logger.debug("No task selected for restore")
            return

        if self.store.restore_task(task):
            self._notify_task("restored", task, icon="↩")

    def action_clear_current(self) -> None:
        """Clear the bucket shown in the current tab (C key)."""
        if self._current_tab() == TRASH_TAB_ID:
            self.action_clear_trash()
        else:
            self.action_clear_active()

    def action_clear_active(self) -> None:
        self._request_clear(BUCKET_ACTIVE)

    def action_clear_trash(self) -> None:
        self._request_clear(BUCKET_TRASH)

    # ==============================================================================
    # ACTION HANDLERS - NAVIGATION & UTILITY
    # ==============================================================================

    def action_show_tab(self, tab_id: str) -> None:
        """Switch to a tab by pane id."""
        if not self._is_main_screen():
            return

        if tab_id not in TAB_ORDER:
            logger.warning(f"Unknown tab: {tab_id}")
            return
        self.query_one(TabbedContent).active = tab_id

    def action_toggle_tab(self) -> None:
        if not self._is_main_screen():
            return
        self.action_show_tab(get_other_tab(self._current_tab()))

    def action_help(self) -> None:
        self.notify(
            "N=New Task, X=Delete, R=Restore, C=Clear tab, Enter=Details, T/1/2=Switch tab, Q=Quit",
            severity="information",
            timeout=NOTIFICATION_TIMEOUT_LONG
        )

    # ==============================================================================
    # PRIVATE HELPERS
    # ==============================================================================

    def _is_main_screen(self) -> bool:
        """Whether no modal is open on top of the main screen."""
        return len(self.screen_stack) == SCREEN_STACK_SIZE_MAIN_APP

    def _current_tab(self) -> str:
        return self.query_one(TabbedContent).active

    def _selected_task(self, panel_id: str) -> Optional[Task]:
        return self.query_one(f"#{panel_id}", TaskPanel).get_selected_task()

    def _open_details(self, task: Task) -> None:
        if not self._is_main_screen():
            return
        self.push_screen(TaskDetailModal(task))

    def _request_clear(self, bucket: str) -> None:
        """Clear a bucket, asking first when confirmation is enabled.

        Args:
            bucket: BUCKET_ACTIVE or BUCKET_TRASH
        """
        if not self._is_main_screen():
            return

        count = self.store.active_count if bucket == BUCKET_ACTIVE else self.store.trashed_count
        if count == 0:
            self.notify("Nothing to clear", timeout=NOTIFICATION_TIMEOUT_SHORT)
            return

        if self._confirm_clear:
            self.push_screen(ClearConfirmModal(bucket, count))
        else:
            self._clear_bucket(bucket)

    def _clear_bucket(self, bucket: str) -> None:
        if bucket == BUCKET_ACTIVE:
            cleared = self.store.clear_active()
            label = "Tasks cleared"
        else:
            cleared = self.store.clear_trash()
            label = "Trash emptied"

        if cleared:
            self.notify(f"✓ {label}", severity="information", timeout=NOTIFICATION_TIMEOUT_MEDIUM)

    def _notify_task(self, action: str, task: Task, icon: str = "✓") -> None:
        """Show a notification naming the task an action applied to."""
        title = task.title
        if len(title) > MAX_TITLE_LENGTH_IN_NOTIFICATION:
            title = title[:MAX_TITLE_LENGTH_IN_NOTIFICATION] + "..."
        self.notify(
            f"{icon} Task {action}: {title}",
            severity="information",
            timeout=NOTIFICATION_TIMEOUT_SHORT
        )
