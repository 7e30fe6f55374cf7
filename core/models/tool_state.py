"""
Tool invocation lifecycle: pending -> running -> completed | error.

Only a completed state has output, and that output is what gets released.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class ToolTime(BaseModel):
    start: float
    end: float | None = None
    # Set by automatic pruning only; release_context leaves it alone
    compacted: float | None = None


class ToolStatePending(BaseModel):
    status: Literal["pending"] = "pending"
    input: dict[str, Any]
    raw: str


class ToolStateRunning(BaseModel):
    status: Literal["running"] = "running"
    input: dict[str, Any]
    title: str | None = None
    metadata: dict[str, Any] | None = None
    time: ToolTime


class ToolStateCompleted(BaseModel):
    status: Literal["completed"] = "completed"
    input: dict[str, Any]
    output: str
    title: str | None = None
    metadata: dict[str, Any] | None = None
    time: ToolTime


class ToolStateError(BaseModel):
    status: Literal["error"] = "error"
    input: dict[str, Any]
    error: str
    metadata: dict[str, Any] | None = None
    time: ToolTime


ToolState = Annotated[
    ToolStatePending | ToolStateRunning | ToolStateCompleted | ToolStateError,
    Field(discriminator="status"),
]
