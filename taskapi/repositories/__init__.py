"""Repository layer for data access."""

from taskapi.repositories.task_repository import TaskRepository
from taskapi.repositories.user_repository import UserRepository

__all__ = [
    "TaskRepository",
    "UserRepository",
]
