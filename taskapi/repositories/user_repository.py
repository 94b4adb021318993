"""User repository."""

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from taskapi.database import is_storable_id
from taskapi.models.user import User


class UserRepository:
    """Data access for users.

    Methods flush but never commit; the calling service owns the transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> list[User]:
        """Return all users ordered by id."""
        return list(self.session.scalars(select(User).order_by(User.id)).all())

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with the given id, if any."""
        if not is_storable_id(user_id):
            return None
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        """Return the user holding the given email (exact match)."""
        return self.session.scalars(select(User).where(User.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        """Check whether any user holds the given email."""
        return bool(self.session.scalar(select(exists().where(User.email == email))))

    def exists_by_id(self, user_id: int) -> bool:
        """Check whether a user with the given id exists."""
        if not is_storable_id(user_id):
            return False
        return bool(self.session.scalar(select(exists().where(User.id == user_id))))

    def save(self, user: User) -> User:
        """Add or update a user and flush to obtain generated values."""
        self.session.add(user)
        self.session.flush()
        return user

    def delete(self, user: User) -> None:
        """Delete a user."""
        self.session.delete(user)
        self.session.flush()
