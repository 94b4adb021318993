"""User schemas."""

from datetime import datetime

from taskapi.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Create a new user.

    Presence and format checks run in the service so that direct callers get
    the same errors as HTTP clients.
    """

    email: str | None = None
    name: str | None = None


class UserUpdate(CamelModel):
    """Partially update a user; omitted or null fields are left unchanged."""

    email: str | None = None
    name: str | None = None


class UserResponse(CamelModel):
    """User response."""

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
