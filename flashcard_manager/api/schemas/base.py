"""
Base schemas shared across the API.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error kind or code")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class EmptyResponse(BaseModel):
    """Returned by delete operations."""


def format_timestamp(value: datetime | None) -> str:
    """Render a store timestamp as RFC 3339 UTC; unset timestamps become "".

    Aware values are converted to UTC. Naive values come from SQLite, whose
    CURRENT_TIMESTAMP is already UTC.
    """
    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat() + "Z"
