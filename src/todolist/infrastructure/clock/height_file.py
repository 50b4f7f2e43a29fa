"""
Persisted Height Floor

The last height handed out for a work directory, stored as plain text in
``{work_dir}/height``. Every file-backed clock reads and advances the same
file, so switching clock types over one document never moves heights
backwards.
"""

import os
import tempfile
from pathlib import Path

from todolist.core.domain.errors import StorageError

HEIGHT_FILE_NAME = "height"


class HeightFile:
    """Read and atomically replace the persisted last height."""

    def __init__(self, work_dir: str | Path):
        self.path = Path(work_dir) / HEIGHT_FILE_NAME

    def read(self) -> int:
        """Return the last persisted height, 0 if none was written yet."""
        if not self.path.exists():
            return 0
        try:
            return int(self.path.read_text(encoding="utf-8").strip() or 0)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise StorageError(
                f"Failed to read height counter: {e}",
                details={"path": str(self.path)},
            ) from e

    def write(self, height: int) -> None:
        temp_path: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent, suffix=".tmp", prefix=".height_"
            )
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.write(str(height))
            os.replace(temp_path, self.path)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)
            raise StorageError(
                f"Failed to persist height counter: {e}",
                details={"path": str(self.path)},
            ) from e
