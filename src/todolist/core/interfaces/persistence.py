"""
Persistence Protocols

This module defines the protocol interfaces for storing the task list document
and the contract version stamp. Both are whole-document operations: the store
never sees partial writes, and a failed operation must leave the previously
saved document untouched.

Error Handling:
    - load: raises DocumentMissingError if the document was never saved,
      StorageError if it cannot be read or decoded
    - save: raises StorageError if the document cannot be written
"""

from typing import Protocol

from todolist.core.domain.models import ContractInfo, TaskList


class TaskListStoreProtocol(Protocol):
    """
    Protocol defining the contract for task list persistence.

    Implementations hold exactly one document, keyed by a fixed name
    (``todolist``). Callers always load, modify, and save the whole list.
    """

    def load(self) -> TaskList:
        """
        Load the current task list.

        Returns:
            The persisted TaskList. The returned object is owned by the
            caller; mutating it must not affect the stored document.

        Raises:
            DocumentMissingError: If no document has been saved yet
            StorageError: If the document cannot be read or decoded
        """
        ...

    def save(self, task_list: TaskList) -> None:
        """
        Replace the persisted task list with ``task_list``.

        Args:
            task_list: The full document to persist

        Raises:
            StorageError: If the document cannot be written
        """
        ...


class VersionStoreProtocol(Protocol):
    """Protocol for recording which contract and version created the store."""

    def save_contract_info(self, info: ContractInfo) -> None:
        """Persist the contract name and version."""
        ...

    def load_contract_info(self) -> ContractInfo:
        """
        Load the contract name and version.

        Raises:
            DocumentMissingError: If no version stamp has been saved
        """
        ...
