"""Fixtures for exercising the REST routes end to end."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from flashcard_manager.api.dependencies import get_event_publisher
from flashcard_manager.infra.config import database
from flashcard_manager.main import app


def use_database(path) -> None:
    """Point the lazily created engine at a fresh SQLite file."""
    database._engine = database.create_engine(f"sqlite+aiosqlite:///{path}")
    database._session_factory = None


@pytest.fixture
def client(tmp_path, publisher):
    """TestClient over a fresh SQLite file, recording published envelopes."""
    use_database(tmp_path / "api.db")
    app.dependency_overrides[get_event_publisher] = lambda: publisher

    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
        # Shutdown normally disposes it; this covers a failed startup
        if database._engine is not None:
            asyncio.run(database.dispose_engine())
