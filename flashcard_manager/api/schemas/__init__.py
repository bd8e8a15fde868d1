"""
API schemas: typed request/response messages for decks and cards.
"""

from .base import EmptyResponse, ErrorResponse, format_timestamp
from .card_schemas import (
    CardResponse,
    CreateCardRequest,
    DeleteCardRequest,
    GetCardByIdRequest,
    UpdateCardRequest,
)
from .deck_schemas import (
    CreateDeckRequest,
    DeckResponse,
    DeckWithCardsResponse,
    DeleteDeckRequest,
    GetDeckByIdRequest,
    UpdateDeckRequest,
)

__all__ = [
    "EmptyResponse",
    "ErrorResponse",
    "format_timestamp",
    "CardResponse",
    "CreateCardRequest",
    "DeleteCardRequest",
    "GetCardByIdRequest",
    "UpdateCardRequest",
    "CreateDeckRequest",
    "DeckResponse",
    "DeckWithCardsResponse",
    "DeleteDeckRequest",
    "GetDeckByIdRequest",
    "UpdateDeckRequest",
]
