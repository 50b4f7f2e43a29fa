"""Wall clock height source (UNIX seconds, never moving backwards)."""

import time
from pathlib import Path

import structlog

from todolist.core.interfaces.clock import ClockProtocol
from todolist.infrastructure.clock.height_file import HeightFile


class SystemClock(ClockProtocol):
    """
    Uses the current UNIX time in whole seconds as the logical height.

    If the system clock steps backwards, the last returned value is reused
    so heights stay non-decreasing within the process. With a ``work_dir``
    the last persisted height is also a floor, and every reading is written
    back, so a counter clock on the same directory continues above it.
    """

    def __init__(self, work_dir: str | Path | None = None) -> None:
        self._file = HeightFile(work_dir) if work_dir is not None else None
        self._last = 0
        self.logger = structlog.get_logger(__name__).bind(component="system_clock")

    @property
    def path(self) -> Path | None:
        return self._file.path if self._file is not None else None

    def current_height(self) -> int:
        height = max(self._last, int(time.time()))
        if self._file is not None:
            height = max(height, self._file.read())
            self._file.write(height)
        self._last = height
        self.logger.debug("height_read", height=height)
        return height
