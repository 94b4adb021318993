"""SQLAlchemy models."""

from taskapi.models.enums import TaskStatus
from taskapi.models.task import Task
from taskapi.models.user import User

__all__ = [
    "User",
    "Task",
    "TaskStatus",
]
