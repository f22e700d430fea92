"""
Tests for TaskStore.

Covers the moves between the active and trash buckets, no-op behavior for
absent tasks, duplicate handling, and the change notifications published
to listeners.
"""

import logging

import pytest
from pydantic import ValidationError

from tasktabs.services.task_store import (
    OP_ADD,
    OP_CLEAR_ACTIVE,
    OP_CLEAR_TRASH,
    OP_DELETE,
    OP_PURGE,
    OP_RESTORE,
    StoreChange,
    TaskStore,
)


@pytest.fixture
def changes(store):
    """Record every StoreChange published by the store fixture."""
    received = []
    store.subscribe(received.append)
    return received


class TestInitialState:
    """Tests for a freshly created store."""

    def test_new_store_is_empty(self, store):
        assert store.active == ()
        assert store.trashed == ()
        assert store.active_count == 0
        assert store.trashed_count == 0

    def test_snapshots_are_tuples(self, populated_store):
        """Callers cannot mutate the store through a snapshot."""
        snapshot = populated_store.active

        assert isinstance(snapshot, tuple)
        assert isinstance(populated_store.trashed, tuple)


class TestAddTask:
    """Tests for add_task."""

    def test_add_appends_in_order(self, store, sample_tasks):
        for task in sample_tasks:
            store.add_task(task)

        assert store.active == tuple(sample_tasks)
        assert store.trashed == ()

    def test_add_duplicate_keeps_both(self, store, make_task):
        task = make_task()

        store.add_task(task)
        store.add_task(make_task())

        assert store.active_count == 2

    def test_add_publishes_change(self, store, changes, make_task):
        task = make_task()

        store.add_task(task)

        assert changes == [StoreChange(operation=OP_ADD, task=task, active=(task,), trashed=())]


class TestDeleteTask:
    """Tests for delete_task (active -> trash)."""

    def test_delete_moves_task_to_trash(self, populated_store, sample_tasks):
        milk, mom, rent = sample_tasks

        assert populated_store.delete_task(mom) is True

        assert populated_store.active == (milk, rent)
        assert populated_store.trashed == (mom,)

    def test_delete_appends_to_end_of_trash(self, populated_store, sample_tasks):
        milk, mom, rent = sample_tasks

        populated_store.delete_task(rent)
        populated_store.delete_task(milk)

        assert populated_store.trashed == (rent, milk)

    def test_delete_absent_task_is_noop(self, populated_store, changes, make_task):
        before_active = populated_store.active

        assert populated_store.delete_task(make_task(title="Not here")) is False

        assert populated_store.active == before_active
        assert populated_store.trashed == ()
        assert changes == []

    def test_delete_trashed_task_does_not_duplicate(self, populated_store, sample_tasks):
        """A task already in the trash is not active, so delete does nothing."""
        milk = sample_tasks[0]
        populated_store.delete_task(milk)

        assert populated_store.delete_task(milk) is False
        assert populated_store.trashed == (milk,)

    def test_delete_duplicate_removes_first_occurrence_only(self, store, make_task):
        task = make_task()
        other = make_task(title="Other")
        store.add_task(task)
        store.add_task(other)
        store.add_task(make_task())

        store.delete_task(task)

        assert store.active == (other, task)
        assert store.trashed == (task,)

    def test_delete_publishes_change(self, populated_store, changes, sample_tasks):
        milk, mom, rent = sample_tasks

        populated_store.delete_task(milk)

        assert changes == [StoreChange(
            operation=OP_DELETE, task=milk, active=(mom, rent), trashed=(milk,)
        )]


class TestClearActive:
    """Tests for clear_active."""

    def test_clear_active_empties_active_only(self, populated_store, sample_tasks):
        populated_store.delete_task(sample_tasks[0])

        assert populated_store.clear_active() is True

        assert populated_store.active == ()
        assert populated_store.trashed == (sample_tasks[0],)

    def test_cleared_tasks_do_not_go_to_trash(self, populated_store):
        populated_store.clear_active()
        assert populated_store.trashed == ()

    def test_clear_empty_active_is_noop(self, store, changes):
        assert store.clear_active() is False
        assert changes == []

    def test_clear_active_publishes_without_task(self, populated_store, changes):
        populated_store.clear_active()

        assert len(changes) == 1
        assert changes[0].operation == OP_CLEAR_ACTIVE
        assert changes[0].task is None
        assert changes[0].active == ()


class TestRestoreTask:
    """Tests for restore_task (trash -> end of active)."""

    def test_restore_appends_to_end_of_active(self, populated_store, sample_tasks):
        milk, mom, rent = sample_tasks
        populated_store.delete_task(milk)

        assert populated_store.restore_task(milk) is True

        # Original position is not kept
        assert populated_store.active == (mom, rent, milk)
        assert populated_store.trashed == ()

    def test_delete_then_restore_with_other_trash(self, populated_store, sample_tasks):
        """Round trip leaves earlier trash untouched and re-appends the task."""
        milk, mom, rent = sample_tasks
        populated_store.delete_task(mom)

        populated_store.delete_task(milk)
        assert populated_store.trashed == (mom, milk)

        populated_store.restore_task(milk)

        assert populated_store.trashed == (mom,)
        assert populated_store.active == (rent, milk)

    def test_restore_absent_task_is_noop(self, populated_store, changes, sample_tasks):
        """Restoring a task that is active but not trashed changes nothing."""
        assert populated_store.restore_task(sample_tasks[0]) is False

        assert populated_store.active == tuple(sample_tasks)
        assert changes == []

    def test_restore_duplicate_removes_first_occurrence_only(self, store, make_task):
        task = make_task()
        store.add_task(task)
        store.add_task(make_task())
        store.delete_task(task)
        store.delete_task(task)

        store.restore_task(task)

        assert store.active == (task,)
        assert store.trashed == (task,)

    def test_restore_publishes_change(self, populated_store, changes, sample_tasks):
        milk, mom, rent = sample_tasks
        populated_store.delete_task(milk)
        changes.clear()

        populated_store.restore_task(milk)

        assert changes == [StoreChange(
            operation=OP_RESTORE, task=milk, active=(mom, rent, milk), trashed=()
        )]


class TestPurgeTask:
    """Tests for purge_task (trash -> gone)."""

    def test_purge_removes_from_trash(self, populated_store, sample_tasks):
        milk, mom, rent = sample_tasks
        populated_store.delete_task(milk)
        populated_store.delete_task(mom)

        assert populated_store.purge_task(milk) is True

        assert populated_store.trashed == (mom,)
        assert populated_store.active == (rent,)

    def test_purge_active_task_is_noop(self, populated_store, changes, sample_tasks):
        assert populated_store.purge_task(sample_tasks[0]) is False

        assert populated_store.active == tuple(sample_tasks)
        assert changes == []

    def test_purge_publishes_change(self, populated_store, changes, sample_tasks):
        milk = sample_tasks[0]
        populated_store.delete_task(milk)
        changes.clear()

        populated_store.purge_task(milk)

        assert [c.operation for c in changes] == [OP_PURGE]
        assert changes[0].task == milk
        assert changes[0].trashed == ()

    def test_second_purge_is_noop(self, populated_store, changes, sample_tasks):
        milk, mom, rent = sample_tasks
        populated_store.delete_task(milk)
        populated_store.delete_task(mom)
        populated_store.purge_task(milk)
        changes.clear()

        assert populated_store.purge_task(milk) is False

        assert populated_store.trashed == (mom,)
        assert populated_store.active == (rent,)
        assert changes == []


class TestClearTrash:
    """Tests for clear_trash."""

    def test_clear_trash_empties_trash_only(self, populated_store, sample_tasks):
        milk, mom, rent = sample_tasks
        populated_store.delete_task(milk)

        assert populated_store.clear_trash() is True

        assert populated_store.trashed == ()
        assert populated_store.active == (mom, rent)

    def test_clear_empty_trash_is_noop(self, populated_store, changes):
        assert populated_store.clear_trash() is False
        assert changes == []

    def test_clear_trash_publishes_without_task(self, populated_store, changes, sample_tasks):
        populated_store.delete_task(sample_tasks[0])
        changes.clear()

        populated_store.clear_trash()

        assert [(c.operation, c.task) for c in changes] == [(OP_CLEAR_TRASH, None)]

    def test_restore_after_clear_trash_is_noop(self, populated_store, changes, sample_tasks):
        milk, mom, rent = sample_tasks
        populated_store.delete_task(milk)
        populated_store.clear_trash()
        changes.clear()

        assert populated_store.restore_task(milk) is False

        assert populated_store.active == (mom, rent)
        assert populated_store.trashed == ()
        assert changes == []


class TestMembership:
    """Tests for is_active / is_trashed and the one-bucket rule."""

    def test_task_is_in_at_most_one_bucket(self, populated_store, sample_tasks):
        milk = sample_tasks[0]
        assert populated_store.is_active(milk)
        assert not populated_store.is_trashed(milk)

        populated_store.delete_task(milk)
        assert not populated_store.is_active(milk)
        assert populated_store.is_trashed(milk)

        populated_store.purge_task(milk)
        assert not populated_store.is_active(milk)
        assert not populated_store.is_trashed(milk)

    def test_total_count_preserved_by_moves(self, populated_store, sample_tasks):
        """delete and restore move tasks without creating or losing any."""
        total = populated_store.active_count + populated_store.trashed_count

        populated_store.delete_task(sample_tasks[1])
        populated_store.delete_task(sample_tasks[2])
        populated_store.restore_task(sample_tasks[1])

        assert populated_store.active_count + populated_store.trashed_count == total


class TestBuyMilkScenario:
    """End-to-end walk through the lifecycle of one task."""

    def test_full_lifecycle(self, store, make_task):
        milk = make_task(title="Buy milk", description="2%", date="2024-01-01", time="09:00")

        store.add_task(milk)
        assert store.active == (milk,)

        store.delete_task(milk)
        assert store.active == ()
        assert store.trashed == (milk,)

        store.restore_task(milk)
        assert store.active == (milk,)
        assert store.trashed == ()

        store.delete_task(milk)
        assert store.purge_task(milk) is True
        assert store.active == ()
        assert store.trashed == ()


class TestListeners:
    """Tests for subscribe/unsubscribe and listener isolation."""

    def test_listeners_called_in_registration_order(self, store, make_task):
        calls = []
        store.subscribe(lambda change: calls.append("first"))
        store.subscribe(lambda change: calls.append("second"))

        store.add_task(make_task())

        assert calls == ["first", "second"]

    def test_unsubscribe_callable_stops_notifications(self, store, make_task):
        received = []
        unsubscribe = store.subscribe(received.append)

        unsubscribe()
        store.add_task(make_task())

        assert received == []

    def test_unsubscribe_unknown_listener_is_ignored(self, store):
        store.unsubscribe(lambda change: None)

    def test_unsubscribe_twice_is_ignored(self, store):
        unsubscribe = store.subscribe(lambda change: None)
        unsubscribe()
        unsubscribe()

    def test_failing_listener_does_not_block_others(self, store, make_task, caplog):
        received = []

        def broken(change):
            raise RuntimeError("listener bug")

        store.subscribe(broken)
        store.subscribe(received.append)

        with caplog.at_level(logging.ERROR, logger="tasktabs.services.task_store"):
            store.add_task(make_task())

        # Mutation stands and the next listener still runs
        assert store.active_count == 1
        assert len(received) == 1
        assert "Store listener failed" in caplog.text

    def test_listener_may_unsubscribe_during_publish(self, store, make_task):
        received = []

        def once(change):
            received.append(change)
            store.unsubscribe(once)

        store.subscribe(once)
        store.add_task(make_task())
        store.add_task(make_task())

        assert len(received) == 1

    def test_change_snapshot_is_stable(self, store, make_task):
        """A published snapshot does not change with later operations."""
        received = []
        store.subscribe(received.append)

        store.add_task(make_task())
        store.clear_active()

        assert len(received[0].active) == 1
        assert received[1].active == ()

    def test_change_is_frozen(self, store, make_task):
        received = []
        store.subscribe(received.append)
        store.add_task(make_task())

        with pytest.raises(ValidationError):
            received[0].operation = "other"
