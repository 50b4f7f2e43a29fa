"""Task and contract schemas for the todo routes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TaskResponse(BaseModel):
    """One task as returned by the list query (wire field names)."""

    title: str
    is_done: bool
    created_block: int
    updated_block: int | None = Field(
        None, description="Height of the latest toggle; omitted until toggled"
    )


class ContractInfoResponse(BaseModel):
    contract: str
    version: str
