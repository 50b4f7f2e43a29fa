"""
Logger Protocol

The structured logger the core writes its events to. TodoStore only needs
event-name-plus-fields calls, so any structlog bound logger satisfies it and
tests can pass a recording object instead.
"""

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger: ``logger.info("task_added", id=3, created_at=100)``."""

    def debug(self, event: str, **kwargs: Any) -> None: ...

    def info(self, event: str, **kwargs: Any) -> None: ...

    def warning(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, **kwargs: Any) -> None: ...
