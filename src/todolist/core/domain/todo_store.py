"""
Core Domain - TodoStore

State-transition logic for the single task list. Every operation is a
whole-document read-modify-write against the persistence port:

    load -> validate -> build the new list -> save

Validation failures raise before ``save`` is reached, so a rejected call
leaves the persisted document exactly as it was.

This is pure domain logic with NO I/O of its own. Storage is injected via
TaskListStoreProtocol and the logical height is supplied by the caller.
"""

from __future__ import annotations

import structlog

from todolist.core.domain.errors import (
    CapacityExceededError,
    InvalidInputError,
    NotFoundError,
)
from todolist.core.domain.models import Task, TaskList
from todolist.core.interfaces.logging import LoggerProtocol
from todolist.core.interfaces.persistence import TaskListStoreProtocol

MAX_NUMBER_OF_ITEMS = 1000


class TodoStore:
    """
    Owns the persisted TaskList and implements add, toggle, remove and list.

    Tasks are addressed by their 1-based position at call time. Removing a
    task shifts every later task down by one position.

    The capacity check rejects an add only once the current length is
    strictly greater than ``max_items``, so the list can hold
    ``max_items + 1`` tasks.

    Example:
        >>> store = TodoStore(InMemoryTaskListStore())
        >>> store.initialize()
        >>> store.add("buy milk", height=100)
        >>> store.toggle(1, height=110)
        >>> store.list()[0].done
        True
    """

    def __init__(
        self,
        store: TaskListStoreProtocol,
        *,
        max_items: int = MAX_NUMBER_OF_ITEMS,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._store = store
        self.max_items = max_items
        self._logger = logger or structlog.get_logger(__name__).bind(
            component="todo_store"
        )

    def initialize(self) -> None:
        """Create and persist an empty task list, replacing any existing one."""
        self._store.save(TaskList())
        self._logger.info("task_list_initialized")

    def add(self, title: str, height: int) -> None:
        """
        Append a new open task stamped with ``height``.

        Raises:
            InvalidInputError: If ``title`` is the empty string
            CapacityExceededError: If the list already holds more than
                ``max_items`` tasks
        """
        if not title:
            raise InvalidInputError("Empty content")

        task_list = self._store.load()
        if len(task_list) > self.max_items:
            self._logger.warning(
                "task_list_full", size=len(task_list), max_items=self.max_items
            )
            raise CapacityExceededError(max_items=self.max_items)

        task_list.items.append(Task(title=title, created_at=height))
        self._store.save(task_list)
        self._logger.info("task_added", id=len(task_list), created_at=height)

    def toggle(self, task_id: int, height: int) -> None:
        """
        Flip the ``done`` flag of task ``task_id`` and stamp ``updated_at``.

        Toggling twice restores ``done`` but still refreshes ``updated_at``.

        Raises:
            InvalidInputError: If ``task_id`` is less than 1
            NotFoundError: If no task exists at that position
        """
        task_list = self._store.load()
        index = self._resolve(task_list, task_id)

        task = task_list.items[index].toggled(height)
        task_list.items[index] = task
        self._store.save(task_list)
        self._logger.info(
            "task_toggled", id=task_id, done=task.done, updated_at=height
        )

    def remove(self, task_id: int) -> None:
        """
        Delete task ``task_id``; later tasks move down one position.

        Raises:
            InvalidInputError: If ``task_id`` is less than 1
            NotFoundError: If no task exists at that position
        """
        task_list = self._store.load()
        index = self._resolve(task_list, task_id)

        del task_list.items[index]
        self._store.save(task_list)
        self._logger.info("task_removed", id=task_id, remaining=len(task_list))

    def list(self) -> list[Task]:
        """Return all tasks in stored order. Position N is identifier N."""
        return list(self._store.load().items)

    def _resolve(self, task_list: TaskList, task_id: int) -> int:
        """Validate a 1-based identifier and return its list index."""
        if task_id < 1:
            raise InvalidInputError("invalid id", details={"id": task_id})
        if task_list.get(task_id) is None:
            self._logger.debug("task_not_found", id=task_id, size=len(task_list))
            raise NotFoundError(task_id=task_id)
        return task_id - 1
