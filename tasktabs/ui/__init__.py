"""Textual user interface for TaskTabs."""
