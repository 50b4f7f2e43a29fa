"""In-memory task list store for tests and ephemeral servers."""

from __future__ import annotations

from typing import Any

import structlog

from todolist.core.domain.errors import DocumentMissingError
from todolist.core.domain.models import DOCUMENT_NAME, ContractInfo, TaskList
from todolist.core.interfaces.persistence import (
    TaskListStoreProtocol,
    VersionStoreProtocol,
)


class InMemoryTaskListStore(TaskListStoreProtocol, VersionStoreProtocol):
    """
    Keeps the encoded document in memory.

    The document is stored in its serialized dict form and decoded on every
    load, so callers never share list objects with the stored state.
    """

    def __init__(self) -> None:
        self._document: dict[str, Any] | None = None
        self._contract_info: dict[str, str] | None = None
        self.save_count = 0
        self.logger = structlog.get_logger(__name__).bind(
            component="memory_task_list_store"
        )

    def load(self) -> TaskList:
        if self._document is None:
            raise DocumentMissingError(document=DOCUMENT_NAME)
        return TaskList.from_dict(self._document)

    def save(self, task_list: TaskList) -> None:
        self._document = task_list.to_dict()
        self.save_count += 1
        self.logger.debug("document_saved", items=len(task_list))

    def save_contract_info(self, info: ContractInfo) -> None:
        self._contract_info = info.to_dict()

    def load_contract_info(self) -> ContractInfo:
        if self._contract_info is None:
            raise DocumentMissingError(document="contract_info")
        return ContractInfo.from_dict(self._contract_info)

    def snapshot(self) -> dict[str, Any] | None:
        """Return the raw stored document (as persisted) or None."""
        if self._document is None:
            return None
        return TaskList.from_dict(self._document).to_dict()
