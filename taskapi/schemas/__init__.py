"""Pydantic schemas for API requests and responses."""

from taskapi.schemas.error import ErrorResponse
from taskapi.schemas.task import TaskCreate, TaskResponse, TaskStatusUpdate, TaskUpdate
from taskapi.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskStatusUpdate",
    "TaskResponse",
    "ErrorResponse",
]
