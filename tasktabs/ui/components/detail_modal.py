"""Read-only task detail modal for TaskTabs."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Button, Static
from rich.text import Text

from tasktabs.logging_config import get_logger
from tasktabs.models import Task
from tasktabs.ui.base_styles import BUTTON_BASE_CSS, MODAL_BASE_CSS

logger = get_logger(__name__)

NOT_SET = "—"


class TaskDetailModal(ModalScreen):
    """Modal screen showing every field of one task.

    Keyboard shortcuts:
    - Esc / Enter: Close
    """

    DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + """
    TaskDetailModal > Container {
        width: 60;
    }

    TaskDetailModal .detail-body {
        width: 100%;
        height: auto;
        padding: 1 0;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", priority=True),
    ]

    def __init__(self, task: Task, **kwargs) -> None:
        """Initialize the detail modal.

        Args:
            task: Task to display
            **kwargs: Additional keyword arguments for ModalScreen
        """
        super().__init__(**kwargs)
        self.task_model = task

    def compose(self) -> ComposeResult:
        with Container():
            yield Static("Task Details", classes="modal-header")
            yield Static(self._body_text(), classes="detail-body", id="detail-body")
            with Container(classes="button-container"):
                yield Button("Close [Esc]", id="close-button")

    def _body_text(self) -> Text:
        """Build the label/value lines for the task."""
        text = Text()
        rows = [
            ("Title", self.task_model.title),
            ("Description", self.task_model.description),
            ("Date", self.task_model.date),
            ("Time", self.task_model.time),
        ]
        for i, (label, value) in enumerate(rows):
            if i:
                text.append("\n")
            text.append(f"{label}: ", style="bold")
            text.append(value or NOT_SET, style="" if value else "dim")
        return text

    def on_mount(self) -> None:
        logger.debug(f"Detail modal opened for '{self.task_model.title[:50]}'")
        self.query_one("#close-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-button":
            self.action_close()

    def action_close(self) -> None:
        self.dismiss()
