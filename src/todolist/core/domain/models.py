"""
Core Domain - Task List Models

Defines the Task and TaskList records that make up the single persisted
document, plus the contract version stamp written on instantiation.

Tasks carry no identifier field. A task is addressed by its 1-based position
in ``TaskList.items`` at the time of the call, so identifiers shift down by
one for every task after a removed one.

Serialization uses the persisted wire names:

    {"list": [{"title": "...", "is_done": false,
               "created_block": 100, "updated_block": 110}]}

``updated_block`` is omitted entirely while unset.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any

# Fixed well-known name of the persisted task list document.
DOCUMENT_NAME = "todolist"


@dataclass(frozen=True)
class Task:
    """
    A single row in the task list.

    Attributes:
        title: Non-empty text, immutable after creation
        done: Completion flag, False on creation
        created_at: Logical height at creation time
        updated_at: Logical height of the latest toggle (None until toggled)
    """

    title: str
    done: bool = False
    created_at: int = 0
    updated_at: int | None = None

    def toggled(self, height: int) -> Task:
        """Return a copy with ``done`` flipped and ``updated_at`` stamped."""
        return replace(self, done=not self.done, updated_at=height)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "is_done": self.done,
            "created_block": self.created_at,
        }
        if self.updated_at is not None:
            data["updated_block"] = self.updated_at
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        if not isinstance(data, dict):
            raise TypeError(f"task entry must be an object, got {type(data).__name__}")
        done = data.get("is_done", False)
        if not isinstance(done, bool):
            raise ValueError(f"is_done must be a boolean, got {done!r}")
        updated = data.get("updated_block")
        return cls(
            title=str(data["title"]),
            done=done,
            created_at=int(data["created_block"]),
            updated_at=int(updated) if updated is not None else None,
        )


@dataclass
class TaskList:
    """
    The single persisted document: an ordered sequence of tasks.

    Insertion order is preserved and titles are not required to be unique.
    """

    items: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def get(self, task_id: int) -> Task | None:
        """Return the task at 1-based position ``task_id`` or None."""
        if task_id < 1 or task_id > len(self.items):
            return None
        return self.items[task_id - 1]

    def to_dict(self) -> dict[str, Any]:
        return {"list": [task.to_dict() for task in self.items]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaskList:
        raw_items = data.get("list") or []
        if not isinstance(raw_items, list):
            raise TypeError(f"list must be an array, got {type(raw_items).__name__}")
        return cls(items=[Task.from_dict(raw) for raw in raw_items])

    @classmethod
    def from_json(cls, text: str) -> TaskList:
        return cls.from_dict(json.loads(text))


@dataclass(frozen=True)
class ContractInfo:
    """Name and version stamped when the list is instantiated."""

    contract: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"contract": self.contract, "version": self.version}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContractInfo:
        return cls(contract=str(data["contract"]), version=str(data["version"]))
