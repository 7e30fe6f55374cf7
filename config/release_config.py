"""ReleaseConfig model."""

from pydantic import BaseModel, Field

from .defaults import DEFAULT_RELEASE_COUNT


class ReleaseConfig(BaseModel):
    """Defaults for the release_context tool."""

    default_count: int = Field(
        default=DEFAULT_RELEASE_COUNT,
        description="Number of recent tool calls to release when no IDs are given",
    )
    tools: list[str] = Field(
        default_factory=list,
        description="Tool names eligible for auto-selection (empty means all tools)",
    )
