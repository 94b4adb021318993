"""Error response schema."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    message: str
    details: Any | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
