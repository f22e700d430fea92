"""TaskRow widget for displaying a single task in a list.

Renders one line per task: a bullet, the title, and the date/time when set.
Rows are addressed by position because tasks carry no identifier; two rows
holding equal tasks are indistinguishable to the store.
"""

from textual.widget import Widget
from textual.reactive import reactive
from textual.message import Message
from rich.text import Text

from tasktabs.models import Task


class TaskRow(Widget):
    """A widget representing a single task in a TaskPanel.

    Displays:
    - Bullet (filled when selected)
    - Task title
    - Date and time, dimmed, when present
    """

    DEFAULT_CSS = """
    TaskRow {
        height: 1;
        width: 100%;
        padding: 0 1;
        background: transparent;
    }

    TaskRow:hover {
        background: $primary 15%;
    }

    TaskRow.selected {
        background: $primary 35%;
    }
    """

    selected: reactive[bool] = reactive(False)

    def __init__(self, task: Task, index: int, **kwargs) -> None:
        """Initialize a TaskRow widget.

        Args:
            task: The Task to display
            index: Position of the task in its panel
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self._task_model = task
        self.index = index

    @property
    def task(self) -> Task:
        return self._task_model

    def render(self) -> Text:
        """Render the row as Rich Text."""
        text = Text(no_wrap=True, overflow="ellipsis")
        text.append("● " if self.selected else "○ ")
        text.append(self._task_model.title, style="bold" if self.selected else "")
        if self._task_model.when:
            text.append(f"  {self._task_model.when}", style="dim")
        return text

    def on_click(self) -> None:
        """Ask the parent panel to select (or open) this row."""
        self.post_message(self.Clicked(self.index))

    def watch_selected(self, selected: bool) -> None:
        self.set_class(selected, "selected")
        self.refresh()

    class Clicked(Message):
        """Message emitted when a row is clicked."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index
