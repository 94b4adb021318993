"""Task model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from taskapi.database import Base
from taskapi.models.enums import TaskStatus
from taskapi.models.mixins import TimestampMixin


class Task(Base, TimestampMixin):
    """Task model, always owned by an existing user."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # Stored as plain text; the closed set is enforced by the service layer
    status = Column(String(20), nullable=False, default=TaskStatus.PENDING.value)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
