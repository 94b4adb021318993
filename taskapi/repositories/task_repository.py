"""Task repository."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from taskapi.database import is_storable_id
from taskapi.models.task import Task


class TaskRepository:
    """Data access for tasks.

    Methods flush but never commit; the calling service owns the transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> list[Task]:
        """Return all tasks ordered by id."""
        return list(self.session.scalars(select(Task).order_by(Task.id)).all())

    def find_by_id(self, task_id: int) -> Task | None:
        """Return the task with the given id, if any."""
        if not is_storable_id(task_id):
            return None
        return self.session.get(Task, task_id)

    def find_by_user_id(self, user_id: int) -> list[Task]:
        """Return a user's tasks, newest first."""
        if not is_storable_id(user_id):
            return []
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.created_at.desc(), Task.id.desc())
        )
        return list(self.session.scalars(statement).all())

    def save(self, task: Task) -> Task:
        """Add or update a task and flush to obtain generated values."""
        self.session.add(task)
        self.session.flush()
        return task

    def delete(self, task: Task) -> None:
        """Delete a task."""
        self.session.delete(task)
        self.session.flush()

    def delete_by_user_id(self, user_id: int) -> int:
        """Delete every task owned by a user and return how many were removed."""
        if not is_storable_id(user_id):
            return 0
        result = self.session.execute(
            delete(Task).where(Task.user_id == user_id).execution_options(synchronize_session="fetch")
        )
        self.session.flush()
        return result.rowcount or 0
