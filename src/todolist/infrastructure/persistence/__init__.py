"""Task list persistence implementations."""

from todolist.infrastructure.persistence.file_task_list import FileTaskListStore
from todolist.infrastructure.persistence.memory_task_list import InMemoryTaskListStore

__all__ = ["FileTaskListStore", "InMemoryTaskListStore"]
