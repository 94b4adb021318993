"""User service: CRUD with email uniqueness and cascade delete."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskapi.exceptions import ConflictError, NotFoundError
from taskapi.models.user import User
from taskapi.repositories.task_repository import TaskRepository
from taskapi.repositories.user_repository import UserRepository
from taskapi.schemas.user import UserCreate, UserResponse, UserUpdate
from taskapi.services.validation import (
    MAX_NAME_LENGTH,
    validate_email_format,
    validate_required_text,
)

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations."""

    def __init__(
        self,
        db: Session,
        users: UserRepository,
        tasks: TaskRepository,
    ):
        self.db = db
        self.users = users
        self.tasks = tasks

    def list_users(self) -> list[UserResponse]:
        """Return every user as a response copy."""
        logger.debug("Retrieving all users")
        return [UserResponse.model_validate(user) for user in self.users.find_all()]

    def get_user(self, user_id: int) -> UserResponse:
        """Return a single user."""
        logger.debug("Retrieving user with ID: %s", user_id)
        return UserResponse.model_validate(self._get_or_404(user_id))

    def create_user(self, data: UserCreate) -> UserResponse:
        """Create a user after checking name, email format and uniqueness."""
        logger.debug("Creating user with email: %s", data.email)
        validate_required_text(data.name, "name", MAX_NAME_LENGTH)
        validate_email_format(data.email)

        if self.users.exists_by_email(data.email):
            raise ConflictError("email", data.email)

        user = User(email=data.email, name=data.name)
        user.stamp_created()
        self._save(user, email=data.email)
        self.db.refresh(user)

        logger.info("Created user with ID: %s", user.id)
        return UserResponse.model_validate(user)

    def update_user(self, user_id: int, data: UserUpdate) -> UserResponse:
        """Apply a partial update; only supplied fields change."""
        logger.debug("Updating user with ID: %s", user_id)
        user = self._get_or_404(user_id)
        changes = data.supplied_fields()

        if "email" in changes:
            validate_email_format(changes["email"])
            existing = self.users.find_by_email(changes["email"])
            if existing is not None and existing.id != user.id:
                raise ConflictError("email", changes["email"])
        if "name" in changes:
            validate_required_text(changes["name"], "name", MAX_NAME_LENGTH)

        for field, value in changes.items():
            setattr(user, field, value)
        user.touch()
        self._save(user, email=changes.get("email"))
        self.db.refresh(user)

        logger.info("Updated user with ID: %s", user.id)
        return UserResponse.model_validate(user)

    def delete_user(self, user_id: int) -> None:
        """Delete a user together with every task it owns."""
        logger.debug("Deleting user with ID: %s", user_id)
        user = self._get_or_404(user_id)

        try:
            removed = self.tasks.delete_by_user_id(user.id)
            self.users.delete(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Deleted user with ID: %s and %d owned task(s)", user_id, removed)

    def _get_or_404(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def _save(self, user: User, email: str | None) -> None:
        """Persist and commit, reporting a unique-email race lost at the store as a conflict."""
        try:
            self.users.save(user)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if email is None:
                raise
            logger.warning("Email uniqueness enforced by the database for %s", email)
            raise ConflictError("email", email) from None
