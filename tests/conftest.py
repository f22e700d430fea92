"""
Pytest configuration and fixtures for TaskTabs tests.

Provides task factories, pre-filled stores, and an isolated configuration.
"""

import pytest

from tasktabs.config import Config
from tasktabs.models import Task
from tasktabs.services.task_store import TaskStore


ENV_VARS = (
    "TASKTABS_THEME",
    "TASKTABS_TITLE",
    "TASKTABS_CONFIRM_CLEAR",
    "TASKTABS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TASKTABS_* variables from the developer's shell out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_task():
    """
    Factory fixture for creating Task models.

    Returns:
        Function that creates Task instances

    Example:
        def test_something(make_task):
            task = make_task(title="Custom Task", date="2024-01-01")
    """
    def _make_task(
        title: str = "Test Task",
        description: str = "Test description",
        date: str = "",
        time: str = "",
    ) -> Task:
        return Task(title=title, description=description, date=date, time=time)
    return _make_task


@pytest.fixture
def store():
    """Empty task store."""
    return TaskStore()


@pytest.fixture
def sample_tasks(make_task):
    """Three distinct tasks, in insertion order."""
    return [
        make_task(title="Buy milk", description="2%"),
        make_task(title="Call mom", description="Sunday", date="2024-01-07"),
        make_task(title="Pay rent", description="Transfer", date="2024-02-01", time="09:00"),
    ]


@pytest.fixture
def populated_store(store, sample_tasks):
    """Store whose active bucket holds sample_tasks."""
    for task in sample_tasks:
        store.add_task(task)
    return store


@pytest.fixture
def test_config(tmp_path):
    """Config pointed at a file that does not exist, so defaults apply."""
    return Config(tmp_path / "missing.ini")


@pytest.fixture
def write_config(tmp_path):
    """
    Factory fixture writing a config.ini and loading it.

    Example:
        def test_something(write_config):
            config = write_config("[display]\\ntheme = light\\n")
    """
    def _write_config(content: str) -> Config:
        path = tmp_path / "config.ini"
        path.write_text(content, encoding="utf-8")
        return Config(path)
    return _write_config
