"""Session models."""

from pydantic import BaseModel


class SessionTime(BaseModel):
    created: float
    updated: float


class Session(BaseModel):
    """A conversation owner; its messages live in core.state."""

    id: str
    projectID: str
    directory: str
    title: str
    version: str
    time: SessionTime
    parentID: str | None = None
