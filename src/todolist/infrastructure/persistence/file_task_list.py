"""
File-Based Task List Store

This module provides a file-based implementation of TaskListStoreProtocol and
VersionStoreProtocol, using JSON files for persistence. It's designed for
single-user CLI use and local development where no database is required.

Files live in ``work_dir``:
- ``todolist.json``: the task list document
- ``contract_info.json``: contract name and version stamp

Writes are atomic: content is written to a temporary file in the same
directory and renamed over the target, so a failed write never leaves a
half-written document behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

from todolist.core.domain.errors import DocumentMissingError, StorageError
from todolist.core.domain.models import DOCUMENT_NAME, ContractInfo, TaskList
from todolist.core.interfaces.persistence import (
    TaskListStoreProtocol,
    VersionStoreProtocol,
)

CONTRACT_INFO_NAME = "contract_info"


class FileTaskListStore(TaskListStoreProtocol, VersionStoreProtocol):
    """
    JSON file persistence for the task list document.

    Example:
        >>> store = FileTaskListStore(work_dir=".todolist")
        >>> store.save(TaskList())
        >>> store.load().items
        []
    """

    def __init__(self, work_dir: str | Path = ".todolist"):
        """
        Initialize the file-based store.

        Args:
            work_dir: Directory holding the document files. Created on first
                      write if it does not exist.
        """
        self.work_dir = Path(work_dir)
        self.document_path = self.work_dir / f"{DOCUMENT_NAME}.json"
        self.contract_info_path = self.work_dir / f"{CONTRACT_INFO_NAME}.json"
        self.logger = structlog.get_logger(__name__).bind(
            component="file_task_list_store"
        )

    def load(self) -> TaskList:
        data = self._read_json(self.document_path, DOCUMENT_NAME)
        try:
            task_list = TaskList.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StorageError(
                f"Malformed task list document: {e}",
                details={"path": str(self.document_path)},
            ) from e
        self.logger.debug("document_loaded", items=len(task_list))
        return task_list

    def save(self, task_list: TaskList) -> None:
        self._write_json(self.document_path, task_list.to_dict())
        self.logger.debug("document_saved", items=len(task_list))

    def save_contract_info(self, info: ContractInfo) -> None:
        self._write_json(self.contract_info_path, info.to_dict())
        self.logger.debug(
            "contract_info_saved", contract=info.contract, version=info.version
        )

    def load_contract_info(self) -> ContractInfo:
        data = self._read_json(self.contract_info_path, CONTRACT_INFO_NAME)
        try:
            return ContractInfo.from_dict(data)
        except (AttributeError, KeyError, TypeError) as e:
            raise StorageError(
                f"Malformed contract info: {e}",
                details={"path": str(self.contract_info_path)},
            ) from e

    def _read_json(self, path: Path, name: str) -> dict[str, Any]:
        if not path.exists():
            raise DocumentMissingError(document=name)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            self.logger.error("document_read_failed", path=str(path), error=str(e))
            raise StorageError(
                f"Failed to read {name}: {e}", details={"path": str(path)}
            ) from e
        if not isinstance(data, dict):
            raise StorageError(
                f"Malformed {name}: expected an object",
                details={"path": str(path)},
            )
        return data

    def _write_json(self, path: Path, data: dict[str, Any]) -> None:
        """
        Write a dictionary to a JSON file atomically.

        1. Write to a temporary file in the same directory (same filesystem).
        2. Replace the target with the temporary file.
        """
        temp_path: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=path.parent, suffix=".tmp", prefix=f".{path.stem}_"
            )
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, path)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)
            self.logger.error("document_write_failed", path=str(path), error=str(e))
            raise StorageError(
                f"Failed to write {path.name}: {e}", details={"path": str(path)}
            ) from e
