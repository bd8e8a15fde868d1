"""
Event envelope published for every handled operation.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class OperationType(str, Enum):
    """Names of the handled operations, one per RPC."""

    CreateDeck = "CreateDeck"
    GetDeckById = "GetDeckById"
    UpdateDeck = "UpdateDeck"
    DeleteDeck = "DeleteDeck"
    CreateCard = "CreateCard"
    GetCardById = "GetCardById"
    UpdateCard = "UpdateCard"
    DeleteCard = "DeleteCard"


class EventEnvelope(BaseModel):
    """Wire format: {"timestamp": ..., "type": ..., "raw_query": ...}."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    type: str
    raw_query: str

    @classmethod
    def build(cls, operation: OperationType, raw_query: str) -> "EventEnvelope":
        return cls(type=operation.value, raw_query=raw_query)
