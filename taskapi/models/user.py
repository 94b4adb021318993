"""User model."""

from sqlalchemy import Column, Integer, String

from taskapi.database import Base
from taskapi.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model owning zero or more tasks."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
