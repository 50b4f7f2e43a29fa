"""
TodoContract - message dispatch for the todo list.

Decodes instantiate / execute / query messages into TodoStore operations.
This is the layer that owns the clock: each mutating message reads the
current height exactly once, before the store applies the change.

Callers must serialize calls on one contract instance; the contract does no
locking of its own.
"""

from __future__ import annotations

from typing import Any

import structlog

from todolist import CONTRACT_NAME, __version__
from todolist.core.domain.messages import (
    ContractResponse,
    ExecuteMsg,
    InstantiateMsg,
    QueryMsg,
    decode_message,
)
from todolist.core.domain.models import ContractInfo, Task
from todolist.core.domain.todo_store import TodoStore
from todolist.core.interfaces.clock import ClockProtocol
from todolist.core.interfaces.persistence import VersionStoreProtocol

logger = structlog.get_logger(__name__)


class TodoContract:
    """
    Entry points of the todo list: ``instantiate``, ``execute``, ``query``.

    Args:
        store: TodoStore applying the state transitions
        clock: Logical height source for add/update
        versions: Where the contract name/version is stamped on instantiate
    """

    def __init__(
        self,
        store: TodoStore,
        clock: ClockProtocol,
        versions: VersionStoreProtocol,
    ) -> None:
        self.store = store
        self.clock = clock
        self.versions = versions
        self._logger = logger.bind(component="todo_contract")

    def instantiate(self, msg: InstantiateMsg | dict[str, Any] | None = None) -> ContractResponse:
        """Stamp the contract version and create an empty task list."""
        decode_message(InstantiateMsg, msg if msg is not None else {})
        self.versions.save_contract_info(
            ContractInfo(contract=CONTRACT_NAME, version=__version__)
        )
        self.store.initialize()
        self._logger.info("contract_instantiated", version=__version__)
        return ContractResponse(attributes={"method": "instantiate"})

    def execute(self, msg: ExecuteMsg | dict[str, Any] | str) -> ContractResponse:
        """
        Apply one add / update / remove message.

        Raises:
            InvalidInputError: Malformed message, empty title or id < 1
            NotFoundError: Id does not address a task
            CapacityExceededError: List is full
            DocumentMissingError / StorageError: Persistence faults
        """
        message: ExecuteMsg = decode_message(ExecuteMsg, msg)
        method = message.method
        self._logger.debug("execute_received", method=method)

        if message.add is not None:
            self.store.add(message.add.title, self.clock.current_height())
        elif message.update is not None:
            self.store.toggle(message.update.id, self.clock.current_height())
        elif message.remove is not None:
            self.store.remove(message.remove.id)

        return ContractResponse(attributes={"method": method})

    def query(self, msg: QueryMsg | dict[str, Any] | str) -> list[dict[str, Any]]:
        """Answer a query message with the encoded task list."""
        decode_message(QueryMsg, msg)
        return [task.to_dict() for task in self.list_tasks()]

    def list_tasks(self) -> list[Task]:
        return self.store.list()

    def contract_info(self) -> ContractInfo:
        return self.versions.load_contract_info()
