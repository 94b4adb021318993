"""FastAPI dependencies wiring services to the request's database session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from taskapi.database import get_db
from taskapi.repositories import TaskRepository, UserRepository
from taskapi.services.task_service import TaskService
from taskapi.services.user_service import UserService


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db, users=UserRepository(db), tasks=TaskRepository(db))


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(db, tasks=TaskRepository(db), users=UserRepository(db))
