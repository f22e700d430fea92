"""TaskTabs UI components - Reusable widgets and modal dialogs."""

from tasktabs.ui.components.task_row import TaskRow
from tasktabs.ui.components.task_panel import TaskPanel
from tasktabs.ui.components.task_modal import TaskCreationModal
from tasktabs.ui.components.detail_modal import TaskDetailModal
from tasktabs.ui.components.clear_modal import ClearConfirmModal

__all__ = [
    "TaskRow",
    "TaskPanel",
    "TaskCreationModal",
    "TaskDetailModal",
    "ClearConfirmModal",
]
