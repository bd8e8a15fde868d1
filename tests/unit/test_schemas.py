"""Unit tests for response assembly helpers."""

from datetime import datetime, timedelta, timezone

from flashcard_manager.api.schemas import CardResponse, format_timestamp
from flashcard_manager.domain.entities import Card


def test_unset_timestamp_is_empty():
    assert format_timestamp(None) == ""


def test_naive_timestamp_is_taken_as_utc():
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 678)) == "2024-01-02T03:04:05Z"


def test_aware_timestamp_is_converted_to_utc():
    plus_two = timezone(timedelta(hours=2))

    rendered = format_timestamp(datetime(2024, 1, 2, 5, 4, 5, tzinfo=plus_two))

    assert rendered == "2024-01-02T03:04:05Z"


def test_card_response_from_entity():
    card = Card(
        front="2+2",
        back="4",
        deck_id=3,
        author="Ana",
        id=9,
        created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )

    response = CardResponse.from_entity(card)

    assert response.id == 9
    assert response.deck_id == 3
    assert response.created_at == "2024-01-02T03:04:05Z"
