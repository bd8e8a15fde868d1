"""
Deck endpoints: REST transcoding of the deck RPCs.
"""

from fastapi import APIRouter

from flashcard_manager.api.dependencies import DeckCommandsDep
from flashcard_manager.api.schemas import (
    CreateDeckRequest,
    DeckResponse,
    DeckWithCardsResponse,
    DeleteDeckRequest,
    EmptyResponse,
    GetDeckByIdRequest,
    UpdateDeckRequest,
)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.post("", response_model=DeckResponse)
async def create_deck(
    body: CreateDeckRequest, commands: DeckCommandsDep
) -> DeckResponse:
    return await commands.create(body)


@router.get("/{deck_id}", response_model=DeckWithCardsResponse)
async def get_deck_by_id(
    deck_id: int, commands: DeckCommandsDep
) -> DeckWithCardsResponse:
    """Deck with all of its cards."""
    return await commands.get_with_cards(GetDeckByIdRequest(id=deck_id))


@router.put("/{deck_id}", response_model=DeckResponse)
async def update_deck(
    deck_id: int, body: UpdateDeckRequest, commands: DeckCommandsDep
) -> DeckResponse:
    # The path wins over any id sent in the body
    return await commands.update(body.model_copy(update={"id": deck_id}))


@router.delete("/{deck_id}", response_model=EmptyResponse)
async def delete_deck(deck_id: int, commands: DeckCommandsDep) -> EmptyResponse:
    return await commands.delete(DeleteDeckRequest(id=deck_id))
