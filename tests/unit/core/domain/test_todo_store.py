"""
Unit tests for TodoStore

Tests verify:
- add / toggle / remove / list state transitions
- Position-derived identifiers and re-indexing after removal
- Input validation and error kinds
- Capacity boundary (list may reach max_items + 1)
- Rejected calls never reach save
"""

import pytest

from todolist.core.domain.errors import (
    CapacityExceededError,
    DocumentMissingError,
    InvalidInputError,
    NotFoundError,
)
from todolist.core.domain.models import Task, TaskList
from todolist.core.domain.todo_store import MAX_NUMBER_OF_ITEMS, TodoStore
from todolist.infrastructure.persistence import InMemoryTaskListStore


class TestInitialize:
    def test_initialize_creates_empty_list(self, memory_store):
        store = TodoStore(memory_store)
        store.initialize()
        assert store.list() == []

    def test_initialize_resets_existing_list(self, todo_store):
        todo_store.add("test", 1)
        todo_store.initialize()
        assert todo_store.list() == []

    def test_operations_before_initialize_raise_document_missing(self, memory_store):
        store = TodoStore(memory_store)
        with pytest.raises(DocumentMissingError):
            store.list()
        with pytest.raises(DocumentMissingError):
            store.add("test", 1)
        with pytest.raises(DocumentMissingError):
            store.toggle(1, 1)
        with pytest.raises(DocumentMissingError):
            store.remove(1)


class TestAdd:
    def test_add_appends_open_task(self, todo_store):
        todo_store.add("test", 12345)

        tasks = todo_store.list()
        assert tasks == [Task(title="test", done=False, created_at=12345)]
        assert tasks[0].updated_at is None

    def test_add_preserves_insertion_order(self, todo_store):
        for i, title in enumerate(["a", "b", "c"]):
            todo_store.add(title, i)
        assert [t.title for t in todo_store.list()] == ["a", "b", "c"]

    def test_duplicate_titles_allowed(self, todo_store):
        todo_store.add("same", 1)
        todo_store.add("same", 2)
        assert len(todo_store.list()) == 2

    def test_empty_title_rejected(self, todo_store, memory_store):
        todo_store.add("keep", 1)
        saves = memory_store.save_count

        with pytest.raises(InvalidInputError) as exc_info:
            todo_store.add("", 2)

        assert exc_info.value.message == "Empty content"
        assert exc_info.value.code == "invalid_input"
        assert memory_store.save_count == saves
        assert [t.title for t in todo_store.list()] == ["keep"]

    def test_whitespace_title_is_accepted(self, todo_store):
        todo_store.add("   ", 1)
        assert todo_store.list()[0].title == "   "


class TestToggle:
    def test_toggle_flips_and_stamps(self, todo_store):
        todo_store.add("test", 100)

        todo_store.toggle(1, 110)
        task = todo_store.list()[0]
        assert task.done is True
        assert task.updated_at == 110
        assert task.created_at == 100

        todo_store.toggle(1, 120)
        task = todo_store.list()[0]
        assert task.done is False
        assert task.updated_at == 120

    def test_toggle_only_touches_addressed_task(self, todo_store):
        todo_store.add("a", 1)
        todo_store.add("b", 2)
        todo_store.add("c", 3)

        todo_store.toggle(2, 10)

        a, b, c = todo_store.list()
        assert (a.done, a.updated_at) == (False, None)
        assert (b.done, b.updated_at) == (True, 10)
        assert (c.done, c.updated_at) == (False, None)

    def test_toggle_zero_is_invalid(self, todo_store):
        todo_store.add("test", 1)
        with pytest.raises(InvalidInputError) as exc_info:
            todo_store.toggle(0, 2)
        assert exc_info.value.message == "invalid id"

    def test_toggle_negative_is_invalid(self, todo_store):
        todo_store.add("test", 1)
        with pytest.raises(InvalidInputError):
            todo_store.toggle(-3, 2)

    def test_toggle_past_end_is_not_found(self, todo_store, memory_store):
        todo_store.add("test", 1)
        before = memory_store.snapshot()

        with pytest.raises(NotFoundError) as exc_info:
            todo_store.toggle(2, 5)

        assert exc_info.value.code == "not_found"
        assert exc_info.value.details == {"id": 2}
        assert memory_store.snapshot() == before

    def test_toggle_on_empty_list_is_not_found(self, todo_store):
        with pytest.raises(NotFoundError):
            todo_store.toggle(1, 1)


class TestRemove:
    def test_remove_only_task(self, todo_store):
        todo_store.add("test", 1)
        todo_store.remove(1)
        assert todo_store.list() == []

    def test_remove_reindexes_following_tasks(self, todo_store):
        for title in ["A", "B", "C"]:
            todo_store.add(title, 1)

        todo_store.remove(2)
        assert [t.title for t in todo_store.list()] == ["A", "C"]

        todo_store.toggle(2, 9)
        a, c = todo_store.list()
        assert c.title == "C" and c.done is True
        assert a.done is False

    def test_remove_zero_is_invalid(self, todo_store):
        todo_store.add("test", 1)
        with pytest.raises(InvalidInputError):
            todo_store.remove(0)
        assert len(todo_store.list()) == 1

    def test_remove_past_end_is_not_found(self, todo_store):
        todo_store.add("test", 1)
        with pytest.raises(NotFoundError):
            todo_store.remove(2)
        assert len(todo_store.list()) == 1


class TestList:
    def test_list_returns_copy(self, todo_store):
        todo_store.add("test", 1)
        tasks = todo_store.list()
        tasks.clear()
        assert len(todo_store.list()) == 1


class TestCapacity:
    def test_default_cap(self, memory_store):
        assert TodoStore(memory_store).max_items == MAX_NUMBER_OF_ITEMS == 1000

    def test_list_can_reach_one_past_the_cap(self):
        memory = InMemoryTaskListStore()
        memory.save(TaskList(items=[Task(title=f"t{i}", created_at=1) for i in range(1000)]))
        store = TodoStore(memory)

        store.add("one more", 2)
        assert len(store.list()) == 1001

        with pytest.raises(CapacityExceededError) as exc_info:
            store.add("too many", 3)
        assert exc_info.value.code == "capacity_exceeded"
        assert exc_info.value.message == "List is full"
        assert len(store.list()) == 1001

    def test_small_cap_boundary(self, memory_store):
        store = TodoStore(memory_store, max_items=2)
        store.initialize()
        for i in range(3):
            store.add(f"t{i}", i)

        with pytest.raises(CapacityExceededError) as exc_info:
            store.add("t3", 3)
        assert exc_info.value.details == {"max_items": 2}

        store.remove(1)
        store.add("t3", 4)
        assert [t.title for t in store.list()] == ["t1", "t2", "t3"]

    def test_empty_title_checked_before_capacity(self, memory_store):
        store = TodoStore(memory_store, max_items=0)
        store.initialize()
        store.add("fills", 1)
        with pytest.raises(InvalidInputError):
            store.add("", 2)


def test_concrete_scenario(todo_store):
    todo_store.add("buy milk", 100)
    todo_store.add("call mom", 105)
    todo_store.toggle(2, 110)
    todo_store.remove(1)

    assert todo_store.list() == [
        Task(title="call mom", done=True, created_at=105, updated_at=110)
    ]


def test_injected_logger_receives_events(memory_store):
    events = []

    class RecordingLogger:
        def info(self, event, **kwargs):
            events.append((event, kwargs))

        def warning(self, event, **kwargs):
            events.append((event, kwargs))

        def error(self, event, **kwargs):
            events.append((event, kwargs))

        def debug(self, event, **kwargs):
            events.append((event, kwargs))

    store = TodoStore(memory_store, logger=RecordingLogger())
    store.initialize()
    store.add("test", 7)
    store.toggle(1, 8)
    store.remove(1)

    names = [name for name, _ in events]
    assert names == [
        "task_list_initialized",
        "task_added",
        "task_toggled",
        "task_removed",
    ]
    assert events[1][1] == {"id": 1, "created_at": 7}
