"""
CLI entry point for flashcard-manager.

Talks to the REST API for the deck and card commands, and can also run
the API server and the event consumer.
"""

from typing import Any, Optional

import httpx
import typer
from rich.console import Console

from flashcard_manager.infra.config.settings import get_settings

console = Console()

app = typer.Typer(
    name="flashcard-manager",
    help="Manage flashcard decks and cards.",
    add_completion=False,
    rich_markup_mode="markdown",
)


class ApiError(Exception):
    """Non-2xx answer from the API."""

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class ApiClient:
    """Thin httpx wrapper over the /v1 REST routes."""

    def __init__(self, base_url: str, transport: Optional[httpx.BaseTransport] = None):
        self._http = httpx.Client(base_url=base_url, transport=transport, timeout=10.0)

    def close(self) -> None:
        self._http.close()

    def _call(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        response = self._http.request(method, path, json=payload)
        try:
            body = response.json()
        except ValueError:
            body = response.text
        if response.is_error:
            raise ApiError(response.status_code, body)
        return body

    def create_deck(self, title: str, description: str, author: str) -> Any:
        return self._call(
            "POST",
            "/v1/decks",
            {"title": title, "description": description, "author": author},
        )

    def get_deck(self, deck_id: int) -> Any:
        return self._call("GET", f"/v1/decks/{deck_id}")

    def update_deck(self, deck_id: int, title: str, description: str, author: str) -> Any:
        return self._call(
            "PUT",
            f"/v1/decks/{deck_id}",
            {"title": title, "description": description, "author": author},
        )

    def delete_deck(self, deck_id: int) -> Any:
        return self._call("DELETE", f"/v1/decks/{deck_id}")

    def create_card(self, front: str, back: str, deck_id: int, author: str) -> Any:
        return self._call(
            "POST",
            "/v1/cards",
            {"front": front, "back": back, "deck_id": deck_id, "author": author},
        )

    def get_card(self, card_id: int) -> Any:
        return self._call("GET", f"/v1/cards/{card_id}")

    def update_card(
        self, card_id: int, front: str, back: str, deck_id: int, author: str
    ) -> Any:
        return self._call(
            "PUT",
            f"/v1/cards/{card_id}",
            {"front": front, "back": back, "deck_id": deck_id, "author": author},
        )

    def delete_card(self, card_id: int) -> Any:
        return self._call("DELETE", f"/v1/cards/{card_id}")


def build_client(base_url: Optional[str]) -> ApiClient:
    return ApiClient(base_url or get_settings().api_url)


_base_url_option = typer.Option(  # noqa: B008
    None,
    "--base-url",
    help="Base URL of the API. Falls back to FLASHCARDS_API_URL.",
    envvar="FLASHCARDS_API_URL",
)


def _run(base_url: Optional[str], label: str, method: str, *args: Any) -> None:
    client = build_client(base_url)
    try:
        result = getattr(client, method)(*args)
    except ApiError as exc:
        console.print(f"[bold red]Failed to {label}: HTTP {exc.status_code}[/bold red]")
        if isinstance(exc.body, dict):
            console.print_json(data=exc.body)
        else:
            console.print(str(exc.body))
        raise typer.Exit(code=1)
    except httpx.HTTPError as exc:
        console.print(f"[bold red]Failed to {label}: {exc}[/bold red]")
        raise typer.Exit(code=1)
    finally:
        client.close()

    console.print(f"[green]{label.capitalize()} succeeded[/green]")
    console.print_json(data=result)


@app.command("create-deck")
def create_deck(
    title: str,
    description: str,
    author: str,
    base_url: Optional[str] = _base_url_option,
) -> None:
    """Create a deck."""
    _run(base_url, "create deck", "create_deck", title, description, author)


@app.command("get-deck")
def get_deck(deck_id: int, base_url: Optional[str] = _base_url_option) -> None:
    """Show a deck with its cards."""
    _run(base_url, "get deck", "get_deck", deck_id)


@app.command("update-deck")
def update_deck(
    deck_id: int,
    title: str,
    description: str,
    author: str,
    base_url: Optional[str] = _base_url_option,
) -> None:
    """Replace the title, description and author of a deck."""
    _run(base_url, "update deck", "update_deck", deck_id, title, description, author)


@app.command("delete-deck")
def delete_deck(deck_id: int, base_url: Optional[str] = _base_url_option) -> None:
    """Delete a deck."""
    _run(base_url, "delete deck", "delete_deck", deck_id)


@app.command("create-card")
def create_card(
    front: str,
    back: str,
    deck_id: int,
    author: str,
    base_url: Optional[str] = _base_url_option,
) -> None:
    """Create a card in a deck."""
    _run(base_url, "create card", "create_card", front, back, deck_id, author)


@app.command("get-card")
def get_card(card_id: int, base_url: Optional[str] = _base_url_option) -> None:
    """Show a card."""
    _run(base_url, "get card", "get_card", card_id)


@app.command("update-card")
def update_card(
    card_id: int,
    front: str,
    back: str,
    deck_id: int,
    author: str,
    base_url: Optional[str] = _base_url_option,
) -> None:
    """Replace the fields of a card."""
    _run(
        base_url, "update card", "update_card", card_id, front, back, deck_id, author
    )


@app.command("delete-card")
def delete_card(card_id: int, base_url: Optional[str] = _base_url_option) -> None:
    """Delete a card."""
    _run(base_url, "delete card", "delete_card", card_id)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address."),
    port: Optional[int] = typer.Option(None, help="Bind port."),
) -> None:
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "flashcard_manager.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level="debug" if settings.debug else "info",
    )


@app.command("consume")
def consume(
    since_id: str = typer.Option(
        "$", "--since", help="Stream id to start after; 0-0 replays everything."
    ),
) -> None:
    """Tail the event stream and log every envelope."""
    import asyncio

    from flashcard_manager.infra.config.logging_config import setup_logging
    from flashcard_manager.worker import run_consumer

    setup_logging()
    try:
        asyncio.run(run_consumer(since_id=since_id))
    except KeyboardInterrupt:
        console.print("Stopped.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
