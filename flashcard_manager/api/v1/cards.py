"""
Card endpoints: REST transcoding of the card RPCs.
"""

from fastapi import APIRouter

from flashcard_manager.api.dependencies import CardCommandsDep
from flashcard_manager.api.schemas import (
    CardResponse,
    CreateCardRequest,
    DeleteCardRequest,
    EmptyResponse,
    GetCardByIdRequest,
    UpdateCardRequest,
)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.post("", response_model=CardResponse)
async def create_card(body: CreateCardRequest, commands: CardCommandsDep) -> CardResponse:
    return await commands.create(body)


@router.get("/{card_id}", response_model=CardResponse)
async def get_card_by_id(card_id: int, commands: CardCommandsDep) -> CardResponse:
    return await commands.get_by_id(GetCardByIdRequest(id=card_id))


@router.put("/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: int, body: UpdateCardRequest, commands: CardCommandsDep
) -> CardResponse:
    return await commands.update(body.model_copy(update={"id": card_id}))


@router.delete("/{card_id}", response_model=EmptyResponse)
async def delete_card(card_id: int, commands: CardCommandsDep) -> EmptyResponse:
    return await commands.delete(DeleteCardRequest(id=card_id))
