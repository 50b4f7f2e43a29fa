"""Domain-specific exception types for the todo list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TodoListError(Exception):
    """Base exception for todo list domain errors."""

    message: str
    code: str = "todolist_error"
    details: Dict[str, Any] | None = None
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class InvalidInputError(TodoListError):
    """Caller-supplied value fails a structural precondition."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message, code="invalid_input", details=details, status_code=400
        )


class NotFoundError(TodoListError):
    """Identifier does not address an existing task."""

    def __init__(
        self,
        message: str = "Not found",
        *,
        task_id: int | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if task_id is not None:
            details.setdefault("id", task_id)
        self.task_id = task_id
        super().__init__(
            message=message, code="not_found", details=details, status_code=404
        )


class CapacityExceededError(TodoListError):
    """The list is full; tasks must be removed before adding more."""

    def __init__(
        self,
        message: str = "List is full",
        *,
        max_items: int | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if max_items is not None:
            details.setdefault("max_items", max_items)
        super().__init__(
            message=message, code="capacity_exceeded", details=details, status_code=409
        )


class StorageError(TodoListError):
    """The persistence collaborator failed to read or write the document."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message, code="storage_failure", details=details, status_code=500
        )


class DocumentMissingError(TodoListError):
    """The persisted document does not exist (store not initialized)."""

    def __init__(
        self,
        message: str = "Document not found; run initialize first",
        *,
        document: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if document:
            details.setdefault("document", document)
        super().__init__(
            message=message, code="document_missing", details=details, status_code=409
        )


def error_payload(error: TodoListError) -> Dict[str, Any]:
    """Convert a TodoListError into a standardized response payload."""
    return {
        "success": False,
        "code": error.code,
        "error": str(error),
        "error_type": type(error).__name__,
        "details": error.details or {},
    }
