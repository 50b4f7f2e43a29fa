"""Logical height providers."""

from todolist.infrastructure.clock.counter_clock import CounterClock
from todolist.infrastructure.clock.manual_clock import ManualClock
from todolist.infrastructure.clock.system_clock import SystemClock

__all__ = ["CounterClock", "ManualClock", "SystemClock"]
