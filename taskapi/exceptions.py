"""Domain errors raised by the service layer.

Every failure a service can report is an ``AppError`` subclass carrying the
HTTP status it maps to. The boundary layer translates them in one place
(``taskapi.api.error_handlers``); services never build HTTP responses.
"""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base class for all errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(AppError):
    """A requested record, or a record it references, does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(AppError):
    """A uniqueness constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, field: str, value: Any):
        super().__init__(f"User with {field} {value} already exists")
        self.field = field
        self.value = value


class InvalidRequestError(AppError):
    """Input failed validation.

    ``details`` optionally maps field names to messages.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: dict[str, str] | None = None):
        super().__init__(message, details)


class InternalError(AppError):
    """Unclassified failure; the message shown to clients is always generic."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
