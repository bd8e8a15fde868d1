"""API v1 routers"""

from fastapi import APIRouter

from .cards import router as cards_router
from .decks import router as decks_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(decks_router)
v1_router.include_router(cards_router)
