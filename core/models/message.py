"""Message models, discriminated by ``role``."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from .part import Part


class MessageTime(BaseModel):
    created: float
    completed: float | None = None


class ModelInfo(BaseModel):
    providerID: str
    modelID: str


class TokenInfo(BaseModel):
    input: int
    output: int
    reasoning: int = 0
    cache: dict[str, int] | None = None


class PathInfo(BaseModel):
    """Directories an assistant message was produced in."""

    cwd: str
    root: str


class UserMessage(BaseModel):
    id: str
    sessionID: str
    role: Literal["user"] = "user"
    time: MessageTime
    agent: str
    model: ModelInfo
    system: str | None = None
    tools: dict[str, bool] | None = None


class AssistantMessage(BaseModel):
    id: str
    sessionID: str
    role: Literal["assistant"] = "assistant"
    time: MessageTime
    parentID: str
    modelID: str
    providerID: str
    mode: str
    path: PathInfo
    cost: float
    tokens: TokenInfo
    finish: str | None = None
    summary: bool | None = None
    error: dict[str, Any] | None = None


Message = Annotated[UserMessage | AssistantMessage, Field(discriminator="role")]


class MessageWithParts(BaseModel):
    """A message and its parts in order; the unit a conversation log stores."""

    info: Message
    parts: list[Part] = Field(default_factory=list)
