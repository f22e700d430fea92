"""Task creation modal for TaskTabs.

This module provides the dialog used to add a task:
- Title and Description inputs (required)
- Date and Time inputs (optional, free text)
- Inline error when a required field is empty; the dialog stays open
- Keyboard shortcuts (Enter to save, Escape to cancel)

What the user types is collected in a TaskDraft owned by the modal. The draft
lives only as long as the dialog and is cleared on save or cancel.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from tasktabs.exceptions import DraftIncompleteError
from tasktabs.logging_config import get_logger
from tasktabs.models import Task, TaskDraft
from tasktabs.ui.base_styles import BUTTON_BASE_CSS, MODAL_BASE_CSS

logger = get_logger(__name__)


# (input id, draft field, label, placeholder)
FORM_FIELDS = [
    ("title-input", "title", "Title *", "What needs doing?"),
    ("description-input", "description", "Description *", "Details"),
    ("date-input", "date", "Date", "e.g. 2024-01-01"),
    ("time-input", "time", "Time", "e.g. 09:00"),
]

FIELD_FOR_INPUT = {input_id: field for input_id, field, _, _ in FORM_FIELDS}


class TaskCreationModal(ModalScreen):
    """Modal screen for creating a task.

    Messages:
        TaskCreated: Posted to the app when a valid task is submitted
        TaskCancelled: Posted to the app when the dialog is cancelled
    """

    DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + """
    TaskCreationModal > Container {
        width: 70;
        max-height: 90%;
    }

    TaskCreationModal .error-message {
        width: 100%;
        height: auto;
        color: $warning;
        text-align: center;
        text-style: bold;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(self, **kwargs) -> None:
        """Initialize the modal with an empty draft.

        Args:
            **kwargs: Additional keyword arguments for ModalScreen
        """
        super().__init__(**kwargs)
        self.draft = TaskDraft()

    def compose(self) -> ComposeResult:
        with Container():
            yield Static("➕ Add Task", classes="modal-header")

            for input_id, field, label, placeholder in FORM_FIELDS:
                yield Label(label, classes="field-label")
                yield Input(
                    value=getattr(self.draft, field),
                    placeholder=placeholder,
                    id=input_id,
                )

            yield Static("", classes="error-message", id="error-message")

            with Container(classes="button-container"):
                yield Button("Save [Enter]", id="save-button", classes="success")
                yield Button("Cancel [Esc]", id="cancel-button", classes="error")

    def on_mount(self) -> None:
        logger.info("TaskModal: Opened")
        self.query_one("#title-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Copy typed text into the draft and clear a resolved error."""
        field = FIELD_FOR_INPUT.get(event.input.id or "")
        if field is None:
            return

        setattr(self.draft, field, event.value)
        if self.draft.is_submittable:
            self._show_error("")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any field submits the form."""
        event.stop()
        self.action_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        logger.debug(f"TaskModal: Button pressed - {event.button.id}")
        if event.button.id == "save-button":
            self.action_save()
        elif event.button.id == "cancel-button":
            self.action_cancel()

    def action_save(self) -> None:
        """Submit the draft if title and description are filled in.

        On a missing field the error label names it and the modal stays open.
        On success TaskCreated is posted to the app and the modal closes.
        """
        self._read_inputs()

        try:
            task = self.draft.to_task()
        except DraftIncompleteError as e:
            logger.warning(f"TaskModal: Save validation failed - missing {e.missing_fields}")
            self._show_error(f"Please fill in: {', '.join(e.missing_fields)}")
            return

        logger.info(
            f"TaskModal: Task saved - title='{task.title[:50]}', "
            f"has_date={bool(task.date)}, has_time={bool(task.time)}"
        )
        self.draft.clear()
        self.app.post_message(self.TaskCreated(task))
        self.dismiss()

    def action_cancel(self) -> None:
        """Discard the draft and close the modal."""
        logger.info("TaskModal: Cancelled")
        self.draft.clear()
        self.app.post_message(self.TaskCancelled())
        self.dismiss()

    def _read_inputs(self) -> None:
        """Sync the draft with the current input values."""
        for input_id, field, _, _ in FORM_FIELDS:
            setattr(self.draft, field, self.query_one(f"#{input_id}", Input).value)

    def _show_error(self, text: str) -> None:
        self.query_one("#error-message", Static).update(text)

    class TaskCreated(Message):
        """Message emitted when a task is submitted."""

        def __init__(self, task: Task) -> None:
            """Initialize the TaskCreated message.

            Args:
                task: The new task
            """
            super().__init__()
            self.task = task

    class TaskCancelled(Message):
        """Message emitted when task creation is cancelled."""
        pass
