"""Message part models, discriminated by ``type``."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .tool_state import ToolState


class PartTime(BaseModel):
    start: float
    end: float | None = None


class PartBase(BaseModel):
    id: str
    sessionID: str
    messageID: str


class TextPart(PartBase):
    type: Literal["text"] = "text"
    text: str
    time: PartTime | None = None


class ReasoningPart(PartBase):
    type: Literal["reasoning"] = "reasoning"
    text: str
    time: PartTime | None = None


class ToolPart(PartBase):
    """One tool invocation; ``callID`` is what release_context targets."""

    type: Literal["tool"] = "tool"
    callID: str
    tool: str
    state: ToolState


class FilePart(PartBase):
    type: Literal["file"] = "file"
    mime: str
    url: str
    filename: str | None = None


Part = Annotated[
    TextPart | ReasoningPart | ToolPart | FilePart,
    Field(discriminator="type"),
]
