"""ToolsConfig model."""

from pydantic import BaseModel, Field


class ToolsConfig(BaseModel):
    """Tool enable/disable flags."""

    release_context: bool = Field(
        default=True, description="Enable the release_context tool"
    )
