"""Unit tests for the command-line client."""

import json

import httpx
import pytest
from typer.testing import CliRunner

from flashcard_manager import cli

runner = CliRunner()


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def api(monkeypatch, requests_seen):
    """Route the CLI's HTTP client to an in-process handler."""
    responses = {}

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        requests_seen.append((request.method, request.url.path, body))
        status_code, payload = responses.get(
            (request.method, request.url.path), (404, {"error": "NOT_FOUND", "detail": "deck not found"})
        )
        return httpx.Response(status_code, json=payload)

    def build_client(base_url):
        return cli.ApiClient(base_url or "http://test", transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "build_client", build_client)
    return responses


def test_create_deck_posts_payload(api, requests_seen):
    api[("POST", "/v1/decks")] = (
        200,
        {"id": 1, "title": "Algebra", "description": "Basics", "author": "Ana", "created_at": ""},
    )

    result = runner.invoke(cli.app, ["create-deck", "Algebra", "Basics", "Ana"])

    assert result.exit_code == 0
    assert "Algebra" in result.output
    assert requests_seen == [
        ("POST", "/v1/decks", {"title": "Algebra", "description": "Basics", "author": "Ana"})
    ]


def test_update_card_uses_path_id(api, requests_seen):
    api[("PUT", "/v1/cards/7")] = (
        200,
        {"id": 7, "front": "q", "back": "a", "deck_id": 2, "author": "", "created_at": ""},
    )

    result = runner.invoke(cli.app, ["update-card", "7", "q", "a", "2", ""])

    assert result.exit_code == 0
    method, path, body = requests_seen[0]
    assert (method, path) == ("PUT", "/v1/cards/7")
    assert body == {"front": "q", "back": "a", "deck_id": 2, "author": ""}


def test_delete_card(api, requests_seen):
    api[("DELETE", "/v1/cards/3")] = (200, {})

    result = runner.invoke(cli.app, ["delete-card", "3"])

    assert result.exit_code == 0
    assert requests_seen == [("DELETE", "/v1/cards/3", None)]


def test_error_response_exits_non_zero(api):
    result = runner.invoke(cli.app, ["get-deck", "42"])

    assert result.exit_code == 1
    assert "HTTP 404" in result.output
    assert "deck not found" in result.output


def test_base_url_option_is_passed_through(monkeypatch):
    seen = []

    def build_client(base_url):
        seen.append(base_url)
        return cli.ApiClient(
            base_url,
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
        )

    monkeypatch.setattr(cli, "build_client", build_client)

    result = runner.invoke(cli.app, ["get-card", "1", "--base-url", "http://cards.local"])

    assert result.exit_code == 0
    assert seen == ["http://cards.local"]
