"""
Core domain exceptions.

These exceptions are transport-agnostic and should be caught by the server
layer to convert into appropriate HTTP responses.
"""


class CoreError(Exception):
    """Base exception for all core errors."""

    pass


class NotFoundError(CoreError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidOperationError(CoreError):
    """Raised when an operation cannot be performed in the current state."""

    pass


# =============================================================================
# Context Release
# =============================================================================


class ReleaseError(InvalidOperationError):
    """Base exception for rejected release_context requests."""

    pass


class DuplicateTargetError(ReleaseError):
    """Raised when the same tool call ID is requested more than once."""

    def __init__(self, call_ids: list[str]):
        self.call_ids = call_ids
        super().__init__(
            "Duplicate toolCallIds detected. Each tool call can only be released once."
        )


class TargetNotFoundError(ReleaseError):
    """Raised when one or more tool call IDs do not exist in the session."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Tool call(s) not found: {', '.join(missing)}. "
            "Make sure you're using the correct toolCallId from previous tool outputs."
        )


class TargetNotTerminalError(ReleaseError):
    """Raised when a tool call has not completed successfully."""

    def __init__(self, call_id: str, status: str):
        self.call_id = call_id
        self.status = status
        super().__init__(
            f"Cannot release tool call {call_id}: "
            f"only completed tools can be released. Current status: {status}"
        )


class TargetAlreadyReleasedError(ReleaseError):
    """Raised when a tool call's output has already been released."""

    def __init__(self, call_id: str):
        self.call_id = call_id
        super().__init__(
            f"Tool call {call_id} has already been released. "
            "You cannot release the same tool call twice."
        )
