"""Field validation rules shared by the services.

Every rule is a pure function that either returns normally or raises
``InvalidRequestError`` with a per-field ``details`` mapping.
"""

import re
from typing import Any

from taskapi.exceptions import InvalidRequestError
from taskapi.models.enums import TaskStatus

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_TITLE_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000


def _fail(field_name: str, message: str) -> InvalidRequestError:
    return InvalidRequestError(message, details={field_name: message})


def validate_email_format(email: Any) -> None:
    """Require a ``local@domain.tld`` shaped string."""
    if email is None or (isinstance(email, str) and not email.strip()):
        raise _fail("email", "Email is required")
    if not isinstance(email, str) or not EMAIL_PATTERN.match(email):
        raise _fail("email", "Invalid email format")
    if len(email) > MAX_EMAIL_LENGTH:
        raise _fail("email", f"Email must not exceed {MAX_EMAIL_LENGTH} characters")


def validate_required_text(value: Any, field_name: str, max_length: int) -> None:
    """Require a non-blank string no longer than ``max_length``."""
    label = field_name.capitalize()
    if value is None or not isinstance(value, str) or not value.strip():
        raise _fail(field_name, f"{label} is required")
    if len(value) > max_length:
        raise _fail(field_name, f"{label} must not exceed {max_length} characters")


def validate_optional_text(value: Any, field_name: str, max_length: int) -> None:
    """Allow ``None``; otherwise require a string no longer than ``max_length``."""
    if value is None:
        return
    label = field_name.capitalize()
    if not isinstance(value, str):
        raise _fail(field_name, f"{label} must be a string")
    if len(value) > max_length:
        raise _fail(field_name, f"{label} must not exceed {max_length} characters")


def validate_status(status: Any) -> TaskStatus:
    """Return the matching ``TaskStatus``; only exact values are accepted."""
    if status is None:
        raise _fail("status", "Status is required")
    if isinstance(status, TaskStatus):
        return status
    if isinstance(status, str) and status in TaskStatus.values():
        return TaskStatus(status)
    raise _fail(
        "status",
        f"Invalid task status. Must be one of: {', '.join(TaskStatus.values())}",
    )
