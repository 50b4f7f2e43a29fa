"""Manually driven clock, used by tests and scripted runs."""

from todolist.core.interfaces.clock import ClockProtocol


class ManualClock(ClockProtocol):
    def __init__(self, height: int = 0) -> None:
        self._height = height

    def current_height(self) -> int:
        return self._height

    def set(self, height: int) -> None:
        if height < self._height:
            raise ValueError(
                f"Height must not decrease (current={self._height}, new={height})"
            )
        self._height = height

    def advance(self, blocks: int = 1) -> int:
        self.set(self._height + blocks)
        return self._height
