"""
Contract Messages

Pydantic models for the messages accepted by the todo list contract. The
JSON shape is externally tagged, one key per variant:

    {"add": {"title": "buy milk"}}
    {"update": {"id": 2}}        # toggles task 2
    {"remove": {"id": 1}}
    {"list": {}}                 # query

Task ids are unsigned 32-bit integers. Zero decodes successfully and is
rejected later by the store as an invalid id.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from todolist.core.domain.errors import InvalidInputError

MAX_TASK_ID = 2**32 - 1


class InstantiateMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")


class AddMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str


class TaskIdMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., ge=0, le=MAX_TASK_ID)


class EmptyMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ExecuteMsg(BaseModel):
    """Mutating message. Exactly one of ``add``, ``update``, ``remove`` is set."""

    model_config = ConfigDict(extra="forbid")

    add: AddMsg | None = None
    update: TaskIdMsg | None = None
    remove: TaskIdMsg | None = None

    @model_validator(mode="after")
    def exactly_one_variant(self) -> ExecuteMsg:
        variants = [
            name
            for name in ("add", "update", "remove")
            if getattr(self, name) is not None
        ]
        if len(variants) != 1:
            raise ValueError(
                "execute message must contain exactly one of: add, update, remove"
            )
        return self

    @property
    def method(self) -> str:
        for name in ("add", "update", "remove"):
            if getattr(self, name) is not None:
                return name
        raise ValueError("empty execute message")

    @classmethod
    def add_task(cls, title: str) -> ExecuteMsg:
        return cls(add=AddMsg(title=title))

    @classmethod
    def toggle_task(cls, task_id: int) -> ExecuteMsg:
        return cls(update=TaskIdMsg(id=task_id))

    @classmethod
    def remove_task(cls, task_id: int) -> ExecuteMsg:
        return cls(remove=TaskIdMsg(id=task_id))


class QueryMsg(BaseModel):
    """Read-only message. Only ``list`` exists."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    list_: EmptyMsg | None = Field(None, alias="list")

    @model_validator(mode="after")
    def exactly_one_variant(self) -> QueryMsg:
        if self.list_ is None:
            raise ValueError("query message must contain: list")
        return self

    @property
    def method(self) -> str:
        return "list"

    @classmethod
    def list_tasks(cls) -> QueryMsg:
        return cls(list_=EmptyMsg())


class ContractResponse(BaseModel):
    """Result of instantiate/execute: event attributes, e.g. ``{"method": "add"}``."""

    attributes: dict[str, str] = Field(default_factory=dict)


def decode_message(model: type[BaseModel], data: Any) -> Any:
    """
    Decode a raw dict or JSON string into ``model``.

    Raises:
        InvalidInputError: If the payload does not match the message schema
    """
    if isinstance(data, model):
        return data
    try:
        if isinstance(data, (str, bytes)):
            return model.model_validate_json(data)
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid {model.__name__}",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e
