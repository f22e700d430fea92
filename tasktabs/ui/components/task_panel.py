"""Panel widget listing the tasks of one bucket.

TaskPanel shows either the active tasks or the trash:
- Header line with the bucket name and task count
- Scrollable list of TaskRow widgets, or an empty-state message
- Keyboard selection (up/down) and Enter to open the selected task

The panel is a pure view. It receives snapshots from the app via
set_tasks() and never talks to the store.
"""

from typing import List, Optional, Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from tasktabs.logging_config import get_logger
from tasktabs.models import Task
from tasktabs.ui.components.task_row import TaskRow

logger = get_logger(__name__)


class TaskPanel(Widget):
    """A focusable list of tasks with a single selected row.

    Messages:
        TaskOpened: Emitted when the selected task should be shown in detail
    """

    can_focus = True

    DEFAULT_CSS = """
    TaskPanel {
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    TaskPanel:focus {
        border: round $primary;
    }

    TaskPanel .panel-header {
        width: 100%;
        height: 1;
        text-style: bold;
        color: $foreground;
        margin-bottom: 1;
    }

    TaskPanel .panel-content {
        width: 100%;
        height: 1fr;
    }

    TaskPanel .empty-message {
        width: 100%;
        color: $foreground 60%;
        text-align: center;
        text-style: italic;
        padding: 2;
    }
    """

    BINDINGS = [
        Binding("up", "navigate_up", "Up", show=False),
        Binding("down", "navigate_down", "Down", show=False),
        Binding("enter", "open_selected", "Details", show=True),
    ]

    header_title: reactive[str] = reactive("Tasks")

    def __init__(
        self,
        title: str,
        empty_message: str = "No tasks",
        **kwargs
    ) -> None:
        """Initialize a TaskPanel.

        Args:
            title: Header title (the task count is appended)
            empty_message: Message to show when there are no tasks
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self.header_title = title
        self.empty_message = empty_message
        self._tasks: List[Task] = []
        self._selected_index: int = -1

    def compose(self) -> ComposeResult:
        yield Static(self._header_text(), classes="panel-header")
        with VerticalScroll(classes="panel-content"):
            if not self._tasks:
                yield Static(self.empty_message, classes="empty-message")
            for index, task in enumerate(self._tasks):
                row = TaskRow(task, index)
                row.selected = index == self._selected_index
                yield row

    def _header_text(self) -> str:
        return f"{self.header_title} ({len(self._tasks)})"

    @property
    def tasks(self) -> List[Task]:
        """Tasks currently shown, in display order."""
        return list(self._tasks)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    def set_tasks(self, tasks: Sequence[Task]) -> None:
        """Replace the displayed tasks with a new snapshot.

        The selected position is kept where possible and clamped to the new
        length, so deleting a row selects the one that moved into its place.

        Args:
            tasks: Tasks to display, in order
        """
        logger.debug(f"{self.id}: set_tasks() called with {len(tasks)} tasks")
        self._tasks = list(tasks)

        if not self._tasks:
            self._selected_index = -1
        elif self._selected_index < 0:
            self._selected_index = 0
        else:
            self._selected_index = min(self._selected_index, len(self._tasks) - 1)

        if self.is_mounted:
            self.refresh(recompose=True)

    def get_selected_task(self) -> Optional[Task]:
        """Get the currently selected task.

        Returns:
            Selected Task or None if the panel is empty
        """
        if 0 <= self._selected_index < len(self._tasks):
            return self._tasks[self._selected_index]
        return None

    def select_index(self, index: int) -> None:
        """Select the row at a position.

        Args:
            index: Row position; out-of-range values are ignored
        """
        if not 0 <= index < len(self._tasks):
            logger.debug(f"{self.id}: Invalid selection index {index}, skipping")
            return

        self._selected_index = index
        for row in self.query(TaskRow):
            row.selected = row.index == index
            if row.selected:
                row.scroll_visible()

    def action_navigate_up(self) -> None:
        if self._selected_index > 0:
            self.select_index(self._selected_index - 1)

    def action_navigate_down(self) -> None:
        if self._selected_index < len(self._tasks) - 1:
            self.select_index(self._selected_index + 1)

    def action_open_selected(self) -> None:
        task = self.get_selected_task()
        if task is not None:
            self.post_message(self.TaskOpened(task, self.id))

    def on_task_row_clicked(self, message: TaskRow.Clicked) -> None:
        """Select a clicked row; a click on the selected row opens it."""
        message.stop()
        if message.index == self._selected_index:
            self.action_open_selected()
        else:
            self.select_index(message.index)
        self.focus()

    class TaskOpened(Message):
        """Message emitted when a task should be shown in detail."""

        def __init__(self, task: Task, panel_id: Optional[str]) -> None:
            """Initialize the TaskOpened message.

            Args:
                task: The task to show
                panel_id: ID of the panel that emitted this message
            """
            super().__init__()
            self.task = task
            self.panel_id = panel_id
