"""ReleaseRequest model."""

from pydantic import BaseModel, Field


class ReleaseRequest(BaseModel):
    """Request body for the release endpoint."""

    toolCallIds: list[str] | None = Field(
        default=None,
        description="Tool call IDs to release. If omitted, recent tool calls are auto-detected.",
    )
    count: int | None = Field(
        default=None,
        description="Number of recent tool calls to release when toolCallIds is omitted",
    )
    tools: list[str] | None = Field(
        default=None,
        description="Only auto-release calls from these tools",
    )
