"""Global test configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_flashcards.db"
os.environ["EVENTS_ENABLED"] = "false"
os.environ["OTEL_ENABLED"] = "false"
os.environ["LOG_FORMAT"] = "console"
os.environ["LOG_LEVEL"] = "WARNING"

from flashcard_manager.infra.config.database import create_engine, init_db
from tests._helpers.fakes import (
    FakeCardRepository,
    FakeDeckRepository,
    RecordingPublisher,
)


# Database fixtures
@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """File-backed SQLite engine with the schema created."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'flashcards.db'}")
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    """Create database session for testing."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


# Fakes
@pytest.fixture
def card_repo() -> FakeCardRepository:
    return FakeCardRepository()


@pytest.fixture
def deck_repo(card_repo) -> FakeDeckRepository:
    """Deck fake sharing its card store with card_repo."""
    return FakeDeckRepository(card_repo)


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()
