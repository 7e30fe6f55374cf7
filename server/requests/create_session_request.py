"""CreateSessionRequest model."""

from pydantic import BaseModel


class CreateSessionRequest(BaseModel):
    """Request body for POST /session; both fields are optional."""

    title: str | None = None
    parentID: str | None = None
