"""TaskTabs - a terminal task list with a trash tab."""

__version__ = "0.1.0"
