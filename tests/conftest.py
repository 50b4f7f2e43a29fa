"""Test configuration and shared fixtures."""

from __future__ import annotations

import pytest

from todolist.application.contract import TodoContract
from todolist.core.domain.todo_store import TodoStore
from todolist.infrastructure.clock import ManualClock
from todolist.infrastructure.persistence import InMemoryTaskListStore


@pytest.fixture
def memory_store() -> InMemoryTaskListStore:
    return InMemoryTaskListStore()


@pytest.fixture
def todo_store(memory_store: InMemoryTaskListStore) -> TodoStore:
    """An initialized TodoStore backed by memory."""
    store = TodoStore(memory_store)
    store.initialize()
    return store


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(12345)


@pytest.fixture
def contract(memory_store: InMemoryTaskListStore, clock: ManualClock) -> TodoContract:
    """An instantiated TodoContract with a manual clock at height 12345."""
    contract = TodoContract(
        store=TodoStore(memory_store), clock=clock, versions=memory_store
    )
    contract.instantiate()
    return contract
