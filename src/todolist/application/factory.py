"""
Todo Factory
============

Wires a TodoContract from a profile: persistence adapter, clock, and
TodoStore settings. The API and CLI layers only talk to this module, never to
infrastructure directly.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from todolist.application.contract import TodoContract
from todolist.application.profile_loader import ProfileLoader
from todolist.core.domain.config_schema import ProfileConfigSchema
from todolist.core.domain.todo_store import TodoStore
from todolist.core.interfaces.clock import ClockProtocol
from todolist.infrastructure.clock import CounterClock, SystemClock
from todolist.infrastructure.persistence import (
    FileTaskListStore,
    InMemoryTaskListStore,
)

logger = structlog.get_logger(__name__)


class TodoFactory:
    """Build TodoContract instances from configuration profiles."""

    def __init__(self, profile_loader: ProfileLoader | None = None) -> None:
        self.profile_loader = profile_loader or ProfileLoader()

    def load_config(
        self, profile: str = "dev", work_dir: str | Path | None = None
    ) -> ProfileConfigSchema:
        """Load ``profile`` and apply a ``work_dir`` override if given."""
        config = self.profile_loader.load_safe(profile)
        if work_dir is not None:
            config.persistence.work_dir = str(work_dir)
        return config

    def create_contract(
        self, profile: str = "dev", work_dir: str | Path | None = None
    ) -> TodoContract:
        config = self.load_config(profile, work_dir)
        return self.create_contract_from_config(config)

    def create_contract_from_config(self, config: ProfileConfigSchema) -> TodoContract:
        persistence = config.persistence
        if persistence.type == "memory":
            store = InMemoryTaskListStore()
        else:
            store = FileTaskListStore(work_dir=persistence.work_dir)

        clock = self._create_clock(config)
        logger.debug(
            "contract_created",
            persistence=persistence.type,
            work_dir=persistence.work_dir,
            clock=config.clock.type,
            max_items=config.store.max_items,
        )
        return TodoContract(
            store=TodoStore(store, max_items=config.store.max_items),
            clock=clock,
            versions=store,
        )

    def _create_clock(self, config: ProfileConfigSchema) -> ClockProtocol:
        # File-backed clocks share {work_dir}/height as a common floor.
        work_dir = (
            None if config.persistence.type == "memory" else config.persistence.work_dir
        )
        if config.clock.type == "system":
            return SystemClock(work_dir=work_dir)
        return CounterClock(work_dir=work_dir)
