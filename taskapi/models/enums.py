"""Enums for model fields."""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle states of a task."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @classmethod
    def values(cls) -> list[str]:
        """Return the accepted wire values in declaration order."""
        return [member.value for member in cls]
