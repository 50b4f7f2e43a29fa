"""
Clock Protocol

The clock supplies the logical height used to stamp task creation and
toggles. Heights are integers and never decrease between calls; their
meaning (block height, wall clock seconds, counter) is owned by the
implementation.
"""

from typing import Protocol


class ClockProtocol(Protocol):
    """Protocol for logical height providers."""

    def current_height(self) -> int:
        """Return the current logical height (non-decreasing)."""
        ...
