"""Todo routes - the instantiate / execute / query entry points over HTTP.

Message bodies use the same externally tagged JSON as the contract:

    POST /api/v1/execute  {"add": {"title": "buy milk"}}
    POST /api/v1/execute  {"update": {"id": 1}}
    POST /api/v1/query    {"list": {}}

Domain errors are returned as ``ErrorResponse`` payloads carrying the error
code verbatim (``invalid_input``, ``not_found``, ``capacity_exceeded``, ...).
"""

import threading
from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from todolist.api.dependencies import get_contract, get_contract_lock
from todolist.api.errors import domain_http_exception
from todolist.api.schemas.todo_schemas import ContractInfoResponse, TaskResponse
from todolist.application.contract import TodoContract
from todolist.core.domain.errors import TodoListError
from todolist.core.domain.messages import ContractResponse

router = APIRouter()
logger = structlog.get_logger(__name__)


def _tasks_response(tasks: list[dict[str, Any]]) -> JSONResponse:
    # Keeps ``updated_block`` absent (not null) for tasks never toggled.
    return JSONResponse(content=jsonable_encoder(tasks))


@router.post("/instantiate", response_model=ContractResponse)
def instantiate(
    msg: dict[str, Any] | None = Body(None),
    contract: TodoContract = Depends(get_contract),
    lock: threading.Lock = Depends(get_contract_lock),
) -> ContractResponse:
    """Create an empty task list and stamp the contract version."""
    try:
        with lock:
            return contract.instantiate(msg)
    except TodoListError as e:
        raise domain_http_exception(e) from e


@router.post("/execute", response_model=ContractResponse)
def execute(
    msg: dict[str, Any] = Body(...),
    contract: TodoContract = Depends(get_contract),
    lock: threading.Lock = Depends(get_contract_lock),
) -> ContractResponse:
    """Apply one add / update / remove message."""
    try:
        with lock:
            return contract.execute(msg)
    except TodoListError as e:
        logger.info("execute_rejected", code=e.code, error=e.message)
        raise domain_http_exception(e) from e


@router.post(
    "/query",
    response_model=list[TaskResponse],
    response_model_exclude_unset=True,
)
def query(
    msg: dict[str, Any] = Body(...),
    contract: TodoContract = Depends(get_contract),
    lock: threading.Lock = Depends(get_contract_lock),
) -> JSONResponse:
    """Answer a query message (only ``list``)."""
    try:
        with lock:
            tasks = contract.query(msg)
    except TodoListError as e:
        raise domain_http_exception(e) from e
    return _tasks_response(tasks)


@router.get(
    "/todos",
    response_model=list[TaskResponse],
    response_model_exclude_unset=True,
)
def list_todos(
    contract: TodoContract = Depends(get_contract),
    lock: threading.Lock = Depends(get_contract_lock),
) -> JSONResponse:
    """List all tasks; a task's id is its 1-based position in the result."""
    try:
        with lock:
            tasks = contract.query({"list": {}})
    except TodoListError as e:
        raise domain_http_exception(e) from e
    return _tasks_response(tasks)


@router.get("/contract", response_model=ContractInfoResponse)
def contract_info(
    contract: TodoContract = Depends(get_contract),
    lock: threading.Lock = Depends(get_contract_lock),
) -> ContractInfoResponse:
    """Return the contract name and version stamped on instantiate."""
    try:
        with lock:
            info = contract.contract_info()
    except TodoListError as e:
        raise domain_http_exception(e) from e
    return ContractInfoResponse(**info.to_dict())
