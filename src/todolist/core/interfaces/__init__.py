"""
Core Protocol Interfaces

Protocols for every collaborator the todo list core depends on. They keep the
core free of storage, clock, and logging implementations.

Available Protocols:
    - TaskListStoreProtocol: Whole-document task list persistence
    - VersionStoreProtocol: Contract name/version stamp persistence
    - ClockProtocol: Logical height provider
    - LoggerProtocol: Structured logging
"""

from todolist.core.interfaces.clock import ClockProtocol
from todolist.core.interfaces.logging import LoggerProtocol
from todolist.core.interfaces.persistence import (
    TaskListStoreProtocol,
    VersionStoreProtocol,
)

__all__ = [
    "ClockProtocol",
    "LoggerProtocol",
    "TaskListStoreProtocol",
    "VersionStoreProtocol",
]
