"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from taskapi.api.dependencies import get_task_service
from taskapi.schemas.task import TaskCreate, TaskResponse, TaskStatusUpdate, TaskUpdate
from taskapi.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    user_id: Annotated[int | None, Query(alias="userId")] = None,
):
    """Get all tasks, optionally only those owned by ``userId`` (newest first)."""
    return service.list_tasks(user_id)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a specific task."""
    return service.get_task(task_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a new task for an existing user."""
    return service.create_task(task_data)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Update a task. Only the fields present in the body are changed."""
    return service.update_task(task_id, task_data)


@router.patch("/{task_id}/status", response_model=TaskResponse)
def update_task_status(
    task_id: int,
    status_data: TaskStatusUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Change only the status of a task."""
    return service.update_task_status(task_id, status_data.status)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task."""
    service.delete_task(task_id)
