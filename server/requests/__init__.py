"""
HTTP request models for the API.

These are Pydantic models for validating and parsing API requests.
"""

from .create_session_request import CreateSessionRequest
from .release_request import ReleaseRequest

__all__ = [
    # Session requests
    "CreateSessionRequest",
    "ReleaseRequest",
]
