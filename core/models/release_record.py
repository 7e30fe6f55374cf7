"""Release record models."""

from pydantic import BaseModel, Field


class ReleaseRecord(BaseModel):
    """Metadata about a single released tool output."""

    path: str = Field(description="Display title of the released tool call")
    size: int = Field(description="Size of the original output in UTF-8 bytes")
    lines: int | None = Field(
        default=None,
        description="Line count of the original output, when it could be determined"
    )
    savedTokens: int | None = Field(
        default=None,
        description="Estimated tokens freed by the release"
    )


class ReleaseMetadata(BaseModel):
    releasedCount: int = 0
    savedTokens: int = 0
    files: list[ReleaseRecord] = Field(default_factory=list)


class ReleaseResult(BaseModel):
    """Result of a release_context invocation."""

    title: str
    metadata: ReleaseMetadata = Field(default_factory=ReleaseMetadata)
    output: str
