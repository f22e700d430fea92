"""Service layer for TaskTabs."""

from tasktabs.services.task_store import StoreChange, TaskStore

__all__ = ["StoreChange", "TaskStore"]
