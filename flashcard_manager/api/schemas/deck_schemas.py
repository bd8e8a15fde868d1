"""
Deck request/response messages.
"""

from typing import List

from pydantic import BaseModel, Field

from flashcard_manager.api.schemas.base import format_timestamp
from flashcard_manager.api.schemas.card_schemas import CardResponse
from flashcard_manager.domain.entities import Deck, DeckWithCards


class CreateDeckRequest(BaseModel):
    title: str = ""
    description: str = ""
    author: str = ""


class GetDeckByIdRequest(BaseModel):
    id: int = 0


class UpdateDeckRequest(BaseModel):
    id: int = 0
    title: str = ""
    description: str = ""
    author: str = ""


class DeleteDeckRequest(BaseModel):
    id: int = 0


class DeckResponse(BaseModel):
    id: int
    title: str
    description: str
    author: str
    created_at: str = ""

    @classmethod
    def from_entity(cls, deck: Deck) -> "DeckResponse":
        return cls(
            id=deck.id,
            title=deck.title,
            description=deck.description,
            author=deck.author,
            created_at=format_timestamp(deck.created_at),
        )


class DeckWithCardsResponse(BaseModel):
    deck: DeckResponse
    cards: List[CardResponse] = Field(default_factory=list)

    @classmethod
    def from_aggregate(cls, aggregate: DeckWithCards) -> "DeckWithCardsResponse":
        return cls(
            deck=DeckResponse.from_entity(aggregate.deck),
            cards=[CardResponse.from_entity(card) for card in aggregate.cards],
        )
