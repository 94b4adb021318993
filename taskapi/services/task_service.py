"""Task service: CRUD with owner checks, status validation and partial updates."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskapi.exceptions import InvalidRequestError, NotFoundError
from taskapi.models.enums import TaskStatus
from taskapi.models.task import Task
from taskapi.repositories.task_repository import TaskRepository
from taskapi.repositories.user_repository import UserRepository
from taskapi.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskapi.services.validation import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    validate_optional_text,
    validate_required_text,
    validate_status,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task-related operations."""

    def __init__(
        self,
        db: Session,
        tasks: TaskRepository,
        users: UserRepository,
    ):
        self.db = db
        self.tasks = tasks
        self.users = users

    def list_tasks(self, user_id: int | None = None) -> list[TaskResponse]:
        """Return all tasks, or one user's tasks newest first."""
        logger.debug("Retrieving tasks with user_id filter: %s", user_id)
        if user_id is not None:
            tasks = self.tasks.find_by_user_id(user_id)
        else:
            tasks = self.tasks.find_all()
        return [TaskResponse.model_validate(task) for task in tasks]

    def get_task(self, task_id: int) -> TaskResponse:
        """Return a single task."""
        logger.debug("Retrieving task with ID: %s", task_id)
        return TaskResponse.model_validate(self._get_or_404(task_id))

    def create_task(self, data: TaskCreate) -> TaskResponse:
        """Create a task for an existing user.

        Status defaults to PENDING when omitted.
        """
        logger.debug("Creating task with title: %s", data.title)
        validate_required_text(data.title, "title", MAX_TITLE_LENGTH)
        if data.user_id is None:
            raise InvalidRequestError("User ID is required", details={"userId": "User ID is required"})
        validate_optional_text(data.description, "description", MAX_DESCRIPTION_LENGTH)
        status = validate_status(data.status) if data.status is not None else TaskStatus.PENDING

        self._require_user(data.user_id)

        task = Task(
            title=data.title,
            description=data.description,
            status=status.value,
            user_id=data.user_id,
        )
        task.stamp_created()
        self._save(task)

        logger.info("Created task with ID: %s", task.id)
        return TaskResponse.model_validate(task)

    def update_task(self, task_id: int, data: TaskUpdate) -> TaskResponse:
        """Apply a partial update; title, description, status and owner are independent."""
        logger.debug("Updating task with ID: %s", task_id)
        task = self._get_or_404(task_id)
        changes = data.supplied_fields()

        if "user_id" in changes and changes["user_id"] != task.user_id:
            self._require_user(changes["user_id"])
        if "status" in changes:
            changes["status"] = validate_status(changes["status"]).value
        if "title" in changes:
            validate_required_text(changes["title"], "title", MAX_TITLE_LENGTH)
        if "description" in changes:
            validate_optional_text(changes["description"], "description", MAX_DESCRIPTION_LENGTH)

        self._apply(task, changes)

        logger.info("Updated task with ID: %s", task.id)
        return TaskResponse.model_validate(task)

    def update_task_status(self, task_id: int, status: Any) -> TaskResponse:
        """Overwrite only the status of a task."""
        logger.debug("Updating task status for ID: %s to status: %s", task_id, status)
        task = self._get_or_404(task_id)
        new_status = validate_status(status)

        self._apply(task, {"status": new_status.value})

        logger.info("Updated task status for ID: %s to status: %s", task.id, task.status)
        return TaskResponse.model_validate(task)

    def delete_task(self, task_id: int) -> None:
        """Delete a task."""
        logger.debug("Deleting task with ID: %s", task_id)
        task = self._get_or_404(task_id)

        try:
            self.tasks.delete(task)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Deleted task with ID: %s", task_id)

    def _get_or_404(self, task_id: int) -> Task:
        task = self.tasks.find_by_id(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    def _require_user(self, user_id: int) -> None:
        if not self.users.exists_by_id(user_id):
            raise NotFoundError("User", user_id)

    def _apply(self, task: Task, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(task, field, value)
        task.touch()
        self._save(task)

    def _save(self, task: Task) -> None:
        """Persist and commit; an owner removed concurrently surfaces as not found."""
        user_id = task.user_id
        try:
            self.tasks.save(task)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("User %s vanished before the task could be saved", user_id)
            raise NotFoundError("User", user_id) from None
        self.db.refresh(task)
