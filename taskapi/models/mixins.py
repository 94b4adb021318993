"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, func
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime that always comes back in UTC.

    SQLite has no timezone support and returns naive values; those are stored
    in UTC, so UTC is attached on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns.

    Services stamp both columns explicitly so that a freshly created record has
    ``created_at == updated_at`` and every mutation refreshes ``updated_at``.
    The server defaults only cover rows inserted outside the service layer.
    """

    created_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)
    updated_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)

    def stamp_created(self, now: datetime | None = None) -> None:
        """Set both timestamps to the same instant."""
        now = now or utcnow()
        self.created_at = now
        self.updated_at = now

    def touch(self) -> None:
        """Refresh updated_at after a mutation."""
        self.updated_at = utcnow()
