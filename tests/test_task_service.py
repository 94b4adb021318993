"""Tests for the task service."""

import pytest

from taskapi.exceptions import InvalidRequestError, NotFoundError
from taskapi.models.task import Task
from taskapi.repositories import TaskRepository, UserRepository
from taskapi.schemas.task import TaskCreate, TaskUpdate
from taskapi.schemas.user import UserCreate
from taskapi.services.task_service import TaskService


@pytest.fixture
def task(task_service, user):
    """A stored task owned by ``user``."""
    return task_service.create_task(
        TaskCreate(title="Write tests", description="Cover the services", user_id=user.id)
    )


class TestCreateTask:
    """Tests for TaskService.create_task."""

    def test_defaults_status_to_pending(self, task_service, user):
        created = task_service.create_task(TaskCreate(title="t", user_id=user.id))

        assert created.status == "PENDING"
        assert created.user_id == user.id
        assert created.description is None
        assert created.created_at == created.updated_at

    def test_explicit_status(self, task_service, user):
        created = task_service.create_task(
            TaskCreate(title="t", status="IN_PROGRESS", user_id=user.id)
        )
        assert created.status == "IN_PROGRESS"

    def test_unknown_user_is_not_found(self, task_service):
        with pytest.raises(NotFoundError) as exc_info:
            task_service.create_task(TaskCreate(title="t", user_id=404))

        assert exc_info.value.entity == "User"
        assert exc_info.value.entity_id == 404
        assert task_service.list_tasks() == []

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_missing_title_is_invalid(self, task_service, user, title):
        with pytest.raises(InvalidRequestError, match="Title is required"):
            task_service.create_task(TaskCreate(title=title, user_id=user.id))

    def test_title_too_long_is_invalid(self, task_service, user):
        with pytest.raises(InvalidRequestError, match="255"):
            task_service.create_task(TaskCreate(title="x" * 256, user_id=user.id))

    def test_description_too_long_is_invalid(self, task_service, user):
        with pytest.raises(InvalidRequestError, match="1000"):
            task_service.create_task(
                TaskCreate(title="t", description="d" * 1001, user_id=user.id)
            )

    def test_missing_user_id_is_invalid(self, task_service):
        with pytest.raises(InvalidRequestError, match="User ID is required"):
            task_service.create_task(TaskCreate(title="t"))

    def test_invalid_status_is_rejected_before_user_lookup(self, task_service):
        with pytest.raises(InvalidRequestError):
            task_service.create_task(TaskCreate(title="t", status="DONE", user_id=404))


class TestListAndGetTasks:
    """Tests for TaskService.list_tasks and get_task."""

    def test_get_task(self, task_service, task):
        assert task_service.get_task(task.id) == task

    def test_get_missing_task(self, task_service):
        with pytest.raises(NotFoundError, match="Task with ID 77 not found"):
            task_service.get_task(77)

    def test_filter_by_user_newest_first(self, task_service, user_service, user):
        other = user_service.create_user(UserCreate(email="other@example.com", name="Other"))
        first = task_service.create_task(TaskCreate(title="first", user_id=user.id))
        task_service.create_task(TaskCreate(title="someone else's", user_id=other.id))
        second = task_service.create_task(TaskCreate(title="second", user_id=user.id))

        tasks = task_service.list_tasks(user.id)

        assert [t.id for t in tasks] == [second.id, first.id]

    def test_list_all(self, task_service, user_service, user):
        other = user_service.create_user(UserCreate(email="other@example.com", name="Other"))
        task_service.create_task(TaskCreate(title="a", user_id=user.id))
        task_service.create_task(TaskCreate(title="b", user_id=other.id))

        assert {t.title for t in task_service.list_tasks()} == {"a", "b"}

    def test_unknown_user_filter_is_empty(self, task_service, task):
        assert task_service.list_tasks(999) == []


class TestUpdateTask:
    """Tests for TaskService.update_task."""

    def test_updates_only_supplied_fields(self, task_service, task):
        updated = task_service.update_task(task.id, TaskUpdate(title="Renamed"))

        assert updated.title == "Renamed"
        assert updated.description == task.description
        assert updated.status == task.status
        assert updated.user_id == task.user_id
        assert updated.created_at == task.created_at
        assert updated.updated_at > task.updated_at

    def test_null_description_does_not_clear_it(self, task_service, task):
        updated = task_service.update_task(task.id, TaskUpdate(description=None, status="COMPLETED"))

        assert updated.description == "Cover the services"
        assert updated.status == "COMPLETED"

    def test_reassign_to_existing_user(self, task_service, user_service, task):
        other = user_service.create_user(UserCreate(email="other@example.com", name="Other"))

        updated = task_service.update_task(task.id, TaskUpdate(user_id=other.id))

        assert updated.user_id == other.id
        assert [t.id for t in task_service.list_tasks(other.id)] == [task.id]

    def test_reassign_to_unknown_user_is_not_found(self, task_service, task):
        with pytest.raises(NotFoundError, match="User with ID 999 not found"):
            task_service.update_task(task.id, TaskUpdate(user_id=999, title="Changed"))

        assert task_service.get_task(task.id) == task

    def test_same_user_id_skips_lookup(self, task_service, task):
        updated = task_service.update_task(task.id, TaskUpdate(user_id=task.user_id))
        assert updated.user_id == task.user_id

    def test_invalid_status_leaves_task_untouched(self, task_service, task):
        with pytest.raises(InvalidRequestError):
            task_service.update_task(task.id, TaskUpdate(title="Changed", status="BOGUS"))

        assert task_service.get_task(task.id) == task

    def test_blank_title_is_invalid(self, task_service, task):
        with pytest.raises(InvalidRequestError, match="Title is required"):
            task_service.update_task(task.id, TaskUpdate(title=""))

    def test_missing_task(self, task_service):
        with pytest.raises(NotFoundError, match="Task with ID 5 not found"):
            task_service.update_task(5, TaskUpdate(title="x"))


class TestUpdateTaskStatus:
    """Tests for TaskService.update_task_status."""

    def test_changes_status_only(self, task_service, task):
        updated = task_service.update_task_status(task.id, "IN_PROGRESS")

        assert updated.status == "IN_PROGRESS"
        assert updated.title == task.title
        assert updated.updated_at > task.updated_at

    def test_bogus_status_is_invalid_and_unchanged(self, task_service, task):
        with pytest.raises(InvalidRequestError):
            task_service.update_task_status(task.id, "BOGUS")

        assert task_service.get_task(task.id).status == "PENDING"

    def test_missing_status_is_invalid(self, task_service, task):
        with pytest.raises(InvalidRequestError, match="Status is required"):
            task_service.update_task_status(task.id, None)

    def test_missing_task_is_not_found_before_validation(self, task_service):
        with pytest.raises(NotFoundError):
            task_service.update_task_status(12, "BOGUS")


class TestDeleteTask:
    """Tests for TaskService.delete_task."""

    def test_deletes_task(self, task_service, task, db):
        task_service.delete_task(task.id)

        assert db.get(Task, task.id) is None
        with pytest.raises(NotFoundError):
            task_service.get_task(task.id)

    def test_missing_task(self, task_service):
        with pytest.raises(NotFoundError):
            task_service.delete_task(31)


class TrustingUserRepository(UserRepository):
    """Repository that reports every user as existing, as if it was deleted mid-request."""

    def exists_by_id(self, user_id: int) -> bool:
        return True


class TestDatabaseBackstop:
    """The foreign key catches owners that vanished after the existence check."""

    @pytest.fixture
    def racing_service(self, db):
        return TaskService(db, tasks=TaskRepository(db), users=TrustingUserRepository(db))

    def test_create_for_vanished_user_is_not_found(self, db, racing_service):
        with pytest.raises(NotFoundError) as exc_info:
            racing_service.create_task(TaskCreate(title="t", user_id=12345))

        assert exc_info.value.entity_id == 12345
        assert db.query(Task).count() == 0

    def test_reassign_to_vanished_user_is_not_found(self, racing_service, task_service, task):
        with pytest.raises(NotFoundError, match="User with ID 12345 not found"):
            racing_service.update_task(task.id, TaskUpdate(user_id=12345))

        assert task_service.get_task(task.id).user_id == task.user_id


class TestOutOfRangeIds:
    """Ids no Integer column can hold behave like any other unknown id."""

    def test_get_task(self, task_service):
        with pytest.raises(NotFoundError):
            task_service.get_task(2**63)

    def test_list_for_user(self, task_service, task):
        assert task_service.list_tasks(2**63) == []

    def test_create_for_user(self, task_service):
        with pytest.raises(NotFoundError):
            task_service.create_task(TaskCreate(title="t", user_id=2**63))

    def test_negative_id(self, task_service):
        with pytest.raises(NotFoundError):
            task_service.get_task(-1)


class TestConstruction:
    """Services are built with explicit repositories."""

    def test_repositories_are_required(self, db):
        with pytest.raises(TypeError):
            TaskService(db)
