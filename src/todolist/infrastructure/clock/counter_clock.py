"""
Persisted Counter Clock

Emulates a block height for local use: every call to ``current_height``
advances a counter by one, so heights keep increasing. With a ``work_dir``
the counter is persisted in the shared height file and survives process
restarts; without one it lives in memory. The first height handed out is 1.
"""

from pathlib import Path

import structlog

from todolist.core.interfaces.clock import ClockProtocol
from todolist.infrastructure.clock.height_file import HeightFile


class CounterClock(ClockProtocol):
    """Monotonic counter, stored as plain text in ``{work_dir}/height``."""

    def __init__(self, work_dir: str | Path | None = None):
        self._file = HeightFile(work_dir) if work_dir is not None else None
        self._height = 0
        self.logger = structlog.get_logger(__name__).bind(component="counter_clock")

    @property
    def path(self) -> Path | None:
        return self._file.path if self._file is not None else None

    def peek(self) -> int:
        """Return the last height handed out (0 if none) without advancing."""
        if self._file is None:
            return self._height
        return self._file.read()

    def current_height(self) -> int:
        height = self.peek() + 1
        if self._file is not None:
            self._file.write(height)
        self._height = height
        self.logger.debug("height_advanced", height=height)
        return height
