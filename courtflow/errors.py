"""Error taxonomy for animation generation and sequence lifecycle.

Validation errors and not-found errors are distinct outcomes. Reads that
the caller is expected to react to (e.g. "no default animation yet")
return None instead of raising; these exceptions are for operations that
cannot proceed.
"""

from typing import Optional


class AnimationError(Exception):
    """Base error carrying the HTTP status the API layer should use."""

    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AnimationError):
    """Input violates a constraint. Always names the offending field."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"message": self.message, "field": self.field}


class NotFoundError(AnimationError):
    """A referenced play or animation does not exist."""

    status_code = 404

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier
