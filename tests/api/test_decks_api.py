"""Tests for the /v1/decks routes."""


def _create_deck(client, **overrides):
    payload = {"title": "Algebra", "description": "Basics", "author": "Ana"}
    payload.update(overrides)
    return client.post("/v1/decks", json=payload)


def test_create_deck(client, publisher):
    resp = _create_deck(client)

    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] > 0
    assert data["title"] == "Algebra"
    assert data["created_at"] != ""
    assert publisher.types == ["CreateDeck"]


def test_create_deck_missing_field_is_400(client, publisher):
    resp = _create_deck(client, author="")

    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "INVALID_ARGUMENT"
    assert data["detail"] == "title, description, and author are required"
    assert publisher.envelopes == []


def test_create_deck_with_empty_body_is_400(client):
    resp = client.post("/v1/decks", json={})

    assert resp.status_code == 400


def test_get_deck_returns_aggregate(client):
    deck_id = _create_deck(client).json()["id"]
    client.post(
        "/v1/cards", json={"front": "2+2", "back": "4", "deck_id": deck_id, "author": "Ana"}
    )

    resp = client.get(f"/v1/decks/{deck_id}")

    assert resp.status_code == 200
    data = resp.json()
    assert data["deck"]["id"] == deck_id
    assert [card["front"] for card in data["cards"]] == ["2+2"]


def test_get_unknown_deck_is_404(client):
    resp = client.get("/v1/decks/999")

    assert resp.status_code == 404
    assert resp.json()["error"] == "NOT_FOUND"


def test_get_deck_with_zero_id_is_400(client):
    resp = client.get("/v1/decks/0")

    assert resp.status_code == 400
    assert resp.json()["detail"] == "invalid ID parameter"


def test_non_numeric_id_is_422(client):
    resp = client.get("/v1/decks/abc")

    assert resp.status_code == 422
    assert resp.json()["error"] == "VALIDATION_ERROR"


def test_update_deck_uses_path_id(client, publisher):
    deck_id = _create_deck(client).json()["id"]

    resp = client.put(
        f"/v1/decks/{deck_id}",
        json={"id": 12345, "title": "Geometry", "description": "Shapes", "author": "Bo"},
    )

    assert resp.status_code == 200
    assert resp.json()["id"] == deck_id
    assert client.get(f"/v1/decks/{deck_id}").json()["deck"]["title"] == "Geometry"
    assert publisher.types == ["CreateDeck", "UpdateDeck", "GetDeckById"]


def test_update_unknown_deck_is_404(client):
    resp = client.put(
        "/v1/decks/999", json={"title": "x", "description": "y", "author": "z"}
    )

    assert resp.status_code == 404


def test_delete_deck(client, publisher):
    deck_id = _create_deck(client).json()["id"]

    resp = client.delete(f"/v1/decks/{deck_id}")

    assert resp.status_code == 200
    assert resp.json() == {}
    assert client.get(f"/v1/decks/{deck_id}").status_code == 404
    assert publisher.types == ["CreateDeck", "DeleteDeck"]


def test_delete_unknown_deck_is_404(client):
    resp = client.delete("/v1/decks/999")

    assert resp.status_code == 404


def test_health_and_metrics(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    _create_deck(client)
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "flashcard_commands_total" in metrics.text


def test_request_id_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert resp.headers["X-Request-ID"] == "abc-123"
