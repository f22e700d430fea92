"""
Exception types for TaskTabs.

Store operations never raise; these cover input-buffer validation and
configuration problems only.
"""

from typing import Iterable


class TaskTabsError(Exception):
    """Base exception for TaskTabs errors."""
    pass


class DraftIncompleteError(TaskTabsError, ValueError):
    """Raised when a task draft is submitted without its required fields."""

    def __init__(self, missing_fields: Iterable[str]) -> None:
        """
        Initialize with the names of the missing fields.

        Args:
            missing_fields: Names of required fields that are empty
        """
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            f"Required field(s) missing: {', '.join(self.missing_fields)}"
        )


class ConfigError(TaskTabsError):
    """Raised when a configuration value cannot be used."""
    pass
