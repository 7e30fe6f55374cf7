"""Main Config model."""

from pydantic import BaseModel, Field

from .release_config import ReleaseConfig
from .tools_config import ToolsConfig


class Config(BaseModel):
    """Main configuration model."""

    model: str | None = Field(
        default=None,
        description="Model ID for the agent (defaults to DEFAULT_MODEL)",
    )
    tools: ToolsConfig = Field(
        default_factory=ToolsConfig,
        description="Tool enable/disable flags",
    )
    release: ReleaseConfig = Field(
        default_factory=ReleaseConfig,
        description="Context release defaults",
    )
