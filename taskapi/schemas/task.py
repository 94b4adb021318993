"""Task schemas."""

from datetime import datetime

from taskapi.schemas.base import CamelModel


class TaskCreate(CamelModel):
    """Create a new task.

    ``status`` is accepted as a plain string and checked against the closed
    set of task statuses by the service.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None
    user_id: int | None = None


class TaskUpdate(CamelModel):
    """Partially update a task; omitted or null fields are left unchanged."""

    title: str | None = None
    description: str | None = None
    status: str | None = None
    user_id: int | None = None


class TaskStatusUpdate(CamelModel):
    """Update only the status of a task."""

    status: str | None = None


class TaskResponse(CamelModel):
    """Task response."""

    id: int
    title: str
    description: str | None
    status: str
    user_id: int
    created_at: datetime
    updated_at: datetime
