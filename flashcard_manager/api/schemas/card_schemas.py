"""
Card request/response messages.

Fields default to empty values so that missing input reaches the command
layer, which owns validation.
"""

from pydantic import BaseModel

from flashcard_manager.api.schemas.base import format_timestamp
from flashcard_manager.domain.entities import Card


class CreateCardRequest(BaseModel):
    front: str = ""
    back: str = ""
    deck_id: int = 0
    author: str = ""


class GetCardByIdRequest(BaseModel):
    id: int = 0


class UpdateCardRequest(BaseModel):
    id: int = 0
    front: str = ""
    back: str = ""
    deck_id: int = 0
    author: str = ""


class DeleteCardRequest(BaseModel):
    id: int = 0


class CardResponse(BaseModel):
    id: int
    front: str
    back: str
    deck_id: int
    author: str
    created_at: str = ""

    @classmethod
    def from_entity(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            front=card.front,
            back=card.back,
            deck_id=card.deck_id,
            author=card.author,
            created_at=format_timestamp(card.created_at),
        )
