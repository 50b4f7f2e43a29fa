"""
Integration tests for the todo list

Run full operation sequences through TodoContract backed by the JSON file
store, the way the CLI and the HTTP server use it.
"""

import pytest

from todolist.application.contract import TodoContract
from todolist.core.domain.errors import CapacityExceededError, InvalidInputError, NotFoundError
from todolist.core.domain.messages import ExecuteMsg
from todolist.core.domain.todo_store import TodoStore
from todolist.infrastructure.clock import ManualClock
from todolist.infrastructure.persistence import FileTaskListStore


@pytest.fixture
def file_contract(tmp_path):
    store = FileTaskListStore(work_dir=tmp_path)
    contract = TodoContract(store=TodoStore(store), clock=ManualClock(100), versions=store)
    contract.instantiate()
    return contract


def test_documented_scenario(file_contract, tmp_path):
    clock = file_contract.clock
    file_contract.execute(ExecuteMsg.add_task("buy milk"))
    clock.set(105)
    file_contract.execute(ExecuteMsg.add_task("call mom"))
    clock.set(110)
    file_contract.execute(ExecuteMsg.toggle_task(2))
    file_contract.execute(ExecuteMsg.remove_task(1))

    expected = [
        {"title": "call mom", "is_done": True, "created_block": 105, "updated_block": 110}
    ]
    assert file_contract.query({"list": {}}) == expected

    reopened = FileTaskListStore(work_dir=tmp_path)
    assert [t.to_dict() for t in reopened.load().items] == expected


def test_add_toggle_remove_all(file_contract):
    file_contract.execute({"add": {"title": "test"}})
    todos = file_contract.query({"list": {}})
    assert todos[0]["title"] == "test"
    assert todos[0]["is_done"] is False

    file_contract.execute({"update": {"id": 1}})
    assert file_contract.query({"list": {}})[0]["is_done"] is True

    file_contract.execute({"remove": {"id": 1}})
    assert file_contract.query({"list": {}}) == []


@pytest.mark.parametrize(
    ("msg", "error"),
    [
        ({"add": {"title": ""}}, InvalidInputError),
        ({"update": {"id": 0}}, InvalidInputError),
        ({"remove": {"id": 0}}, InvalidInputError),
        ({"update": {"id": 3}}, NotFoundError),
        ({"remove": {"id": 3}}, NotFoundError),
    ],
)
def test_rejected_calls_leave_file_untouched(file_contract, tmp_path, msg, error):
    file_contract.execute(ExecuteMsg.add_task("a"))
    file_contract.execute(ExecuteMsg.add_task("b"))
    document = tmp_path / "todolist.json"
    before = document.read_bytes()

    with pytest.raises(error):
        file_contract.execute(msg)

    assert document.read_bytes() == before


def test_capacity_with_file_store(tmp_path):
    store = FileTaskListStore(work_dir=tmp_path)
    contract = TodoContract(
        store=TodoStore(store, max_items=3), clock=ManualClock(1), versions=store
    )
    contract.instantiate()
    for i in range(4):
        contract.execute(ExecuteMsg.add_task(f"t{i}"))

    before = (tmp_path / "todolist.json").read_bytes()
    with pytest.raises(CapacityExceededError):
        contract.execute(ExecuteMsg.add_task("t4"))
    assert (tmp_path / "todolist.json").read_bytes() == before
    assert len(contract.query({"list": {}})) == 4


def test_reinstantiate_resets_list(file_contract):
    file_contract.execute(ExecuteMsg.add_task("a"))
    file_contract.instantiate()
    assert file_contract.query({"list": {}}) == []
