"""
Task store for TaskTabs application.

Holds the two in-memory buckets (active and trashed) and implements the
moves between them. Views observe the store through read-only snapshots and
a subscribe/publish change signal; the store knows nothing about Textual.
"""

from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from tasktabs.logging_config import get_logger
from tasktabs.models import Task

logger = get_logger(__name__)


# Operation names published with each StoreChange
OP_ADD = "add"
OP_DELETE = "delete"
OP_CLEAR_ACTIVE = "clear_active"
OP_RESTORE = "restore"
OP_PURGE = "purge"
OP_CLEAR_TRASH = "clear_trash"


class StoreChange(BaseModel):
    """
    Notification published after a state-changing store operation.

    Attributes:
        operation: One of the OP_* names
        task: Task the operation acted on, or None for the clear operations
        active: Snapshot of the active bucket after the change
        trashed: Snapshot of the trashed bucket after the change
    """

    model_config = ConfigDict(frozen=True)

    operation: str = Field(..., description="OP_* name of the operation")
    task: Optional[Task] = Field(default=None, description="Task acted on, if any")
    active: Tuple[Task, ...] = Field(..., description="Active bucket after the change")
    trashed: Tuple[Task, ...] = Field(..., description="Trashed bucket after the change")


StoreListener = Callable[[StoreChange], None]


class TaskStore:
    """
    In-memory store with an active bucket and a trash bucket.

    Tasks have no identifier, so every lookup matches the first
    structurally-equal occurrence. Operations on absent tasks are no-ops:
    nothing is fabricated in the other bucket and no change is published.
    None of the operations raise.
    """

    def __init__(self) -> None:
        """Create an empty store."""
        self._active: List[Task] = []
        self._trashed: List[Task] = []
        self._listeners: List[StoreListener] = []

    # ==============================================================================
    # OBSERVATION
    # ==============================================================================

    @property
    def active(self) -> Tuple[Task, ...]:
        """Snapshot of active tasks in display order."""
        return tuple(self._active)

    @property
    def trashed(self) -> Tuple[Task, ...]:
        """Snapshot of trashed tasks in display order."""
        return tuple(self._trashed)

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def trashed_count(self) -> int:
        return len(self._trashed)

    def is_active(self, task: Task) -> bool:
        return task in self._active

    def is_trashed(self, task: Task) -> bool:
        return task in self._trashed

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """
        Register a listener for store changes.

        Listeners are called synchronously, in registration order, after each
        operation that changed state.

        Args:
            listener: Callable receiving a StoreChange

        Returns:
            Callable that unsubscribes the listener
        """
        self._listeners.append(listener)
        logger.debug(f"Store listener subscribed ({len(self._listeners)} total)")
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        """
        Remove a previously registered listener.

        Args:
            listener: Listener to remove; unknown listeners are ignored
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            return
        logger.debug(f"Store listener unsubscribed ({len(self._listeners)} remaining)")

    # ==============================================================================
    # ACTIVE BUCKET OPERATIONS
    # ==============================================================================

    def add_task(self, task: Task) -> None:
        """
        Append a task to the end of the active bucket.

        Callers are expected to have checked the title/description rule
        (see TaskDraft); the store accepts any Task.

        Args:
            task: Task to add
        """
        self._active.append(task)
        logger.info(f"Task added: '{task.title[:50]}' (active={len(self._active)})")
        self._publish(OP_ADD, task)

    def delete_task(self, task: Task) -> bool:
        """
        Move the first equal occurrence of a task from active to trash.

        Args:
            task: Task to delete

        Returns:
            True if the task was moved, False if it was not active
        """
        if not _remove_first(self._active, task):
            logger.debug(f"Delete ignored, task not active: '{task.title[:50]}'")
            return False

        self._trashed.append(task)
        logger.info(
            f"Task moved to trash: '{task.title[:50]}' "
            f"(active={len(self._active)}, trashed={len(self._trashed)})"
        )
        self._publish(OP_DELETE, task)
        return True

    def clear_active(self) -> bool:
        """
        Remove every task from the active bucket. Trash is untouched.

        Returns:
            True if the active bucket had any tasks
        """
        if not self._active:
            return False

        removed = len(self._active)
        self._active.clear()
        logger.info(f"Active tasks cleared ({removed} removed)")
        self._publish(OP_CLEAR_ACTIVE, None)
        return True

    # ==============================================================================
    # TRASH BUCKET OPERATIONS
    # ==============================================================================

    def restore_task(self, task: Task) -> bool:
        """
        Move the first equal occurrence of a task from trash back to active.

        The restored task is appended to the end of the active bucket; its
        original position is not kept.

        Args:
            task: Task to restore

        Returns:
            True if the task was restored, False if it was not in the trash
        """
        if not _remove_first(self._trashed, task):
            logger.debug(f"Restore ignored, task not in trash: '{task.title[:50]}'")
            return False

        self._active.append(task)
        logger.info(
            f"Task restored: '{task.title[:50]}' "
            f"(active={len(self._active)}, trashed={len(self._trashed)})"
        )
        self._publish(OP_RESTORE, task)
        return True

    def purge_task(self, task: Task) -> bool:
        """
        Permanently remove the first equal occurrence of a task from trash.

        Args:
            task: Task to purge

        Returns:
            True if the task was removed, False if it was not in the trash
        """
        if not _remove_first(self._trashed, task):
            logger.debug(f"Purge ignored, task not in trash: '{task.title[:50]}'")
            return False

        logger.info(f"Task purged: '{task.title[:50]}' (trashed={len(self._trashed)})")
        self._publish(OP_PURGE, task)
        return True

    def clear_trash(self) -> bool:
        """
        Permanently remove every task from the trash. Active is untouched.

        Returns:
            True if the trash had any tasks
        """
        if not self._trashed:
            return False

        removed = len(self._trashed)
        self._trashed.clear()
        logger.info(f"Trash cleared ({removed} purged)")
        self._publish(OP_CLEAR_TRASH, None)
        return True

    # ==============================================================================
    # PRIVATE HELPERS
    # ==============================================================================

    def _publish(self, operation: str, task: Optional[Task]) -> None:
        """
        Notify listeners of a completed change.

        A failing listener is logged and skipped; the mutation stands and the
        remaining listeners still run.

        Args:
            operation: OP_* name of the operation
            task: Task the operation acted on, if any
        """
        change = StoreChange(
            operation=operation,
            task=task,
            active=self.active,
            trashed=self.trashed,
        )
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.error(f"Store listener failed during '{operation}'", exc_info=True)


def _remove_first(bucket: List[Task], task: Task) -> bool:
    """Remove the first element equal to task; report whether one was found."""
    try:
        bucket.remove(task)
    except ValueError:
        return False
    return True
