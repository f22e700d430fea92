"""Clear confirmation modal for TaskTabs.

Asks before emptying a whole bucket:
- Clearing active tasks removes them without moving them to the trash
- Clearing the trash erases its tasks permanently
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from tasktabs.logging_config import get_logger
from tasktabs.ui.base_styles import BUTTON_BASE_CSS, MODAL_BASE_CSS
from tasktabs.ui.constants import BUCKET_ACTIVE, BUCKET_TRASH

logger = get_logger(__name__)


BUCKET_LABELS = {
    BUCKET_ACTIVE: "Clear Tasks",
    BUCKET_TRASH: "Clear Trash",
}

BUCKET_WARNINGS = {
    BUCKET_ACTIVE: "They will not be moved to the trash.",
    BUCKET_TRASH: "They cannot be restored afterwards.",
}


class ClearConfirmModal(ModalScreen):
    """Modal screen confirming that a bucket should be emptied.

    Messages:
        ClearConfirmed: Posted to the app with the bucket to clear
        ClearCancelled: Posted to the app when the user backs out
    """

    DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + """
    ClearConfirmModal > Container {
        width: 56;
    }

    ClearConfirmModal .warning-box {
        width: 100%;
        height: auto;
        color: $warning;
        text-align: center;
        padding: 1 0;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
    ]

    def __init__(self, bucket: str, task_count: int, **kwargs) -> None:
        """Initialize the confirmation modal.

        Args:
            bucket: BUCKET_ACTIVE or BUCKET_TRASH
            task_count: Number of tasks that will be removed
            **kwargs: Additional keyword arguments for ModalScreen
        """
        if bucket not in BUCKET_LABELS:
            raise ValueError(f"Unknown bucket: {bucket}")
        super().__init__(**kwargs)
        self.bucket = bucket
        self.task_count = task_count

    def compose(self) -> ComposeResult:
        with Container():
            yield Static(f"🗑️ {BUCKET_LABELS[self.bucket]}", classes="modal-header")
            plural = "s" if self.task_count != 1 else ""
            yield Static(
                f"Remove {self.task_count} task{plural}?\n{BUCKET_WARNINGS[self.bucket]}",
                classes="warning-box",
                id="warning-box",
            )
            with Container(classes="button-container"):
                yield Button("Clear", id="confirm-button", classes="error")
                yield Button("Cancel [Esc]", id="cancel-button")

    def on_mount(self) -> None:
        logger.info(f"ClearConfirmModal: Opened for {self.bucket} ({self.task_count} tasks)")
        self.query_one("#cancel-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        logger.debug(f"ClearConfirmModal: Button pressed - {event.button.id}")
        if event.button.id == "confirm-button":
            self.action_confirm()
        elif event.button.id == "cancel-button":
            self.action_cancel()

    def action_confirm(self) -> None:
        logger.info(f"ClearConfirmModal: Clear confirmed for {self.bucket}")
        self.app.post_message(self.ClearConfirmed(self.bucket))
        self.dismiss()

    def action_cancel(self) -> None:
        logger.info("ClearConfirmModal: Cancelled")
        self.app.post_message(self.ClearCancelled())
        self.dismiss()

    class ClearConfirmed(Message):
        """Message emitted when clearing is confirmed."""

        def __init__(self, bucket: str) -> None:
            """Initialize the ClearConfirmed message.

            Args:
                bucket: BUCKET_ACTIVE or BUCKET_TRASH
            """
            super().__init__()
            self.bucket = bucket

    class ClearCancelled(Message):
        """Message emitted when clearing is cancelled."""
        pass
