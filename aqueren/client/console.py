#!/usr/bin/env python3
"""
Console client for an Aqueren server.

Fetches the game over HTTP and lets the turn holder play from a prompt:

    $ dump
    $ place B1
    $ buy luxor luxor imperial
    $ draw
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

from aqueren.client.render import render_game
from aqueren.core.exceptions import DecodeError
from aqueren.core.game import Game, Hotel, Tile
from aqueren.core.game.tiles import parse_cell_ref
from aqueren.core.snapshot import deserialize_game
from aqueren.settings import get_client_settings

logger = logging.getLogger(__name__)

HELP = """Commands:
  dump                 show the game
  place <cell>         place a tile, e.g. place B1
  buy [hotel ...]      buy up to three shares, e.g. buy luxor luxor imperial
  found <hotel>        name the chain you just created
  draw                 draw a tile and end your turn
  help                 show this message
  quit                 leave the client"""

HOTEL_NAMES = ", ".join(h.key for h in Hotel)


class CommandError(ValueError):
    """The typed line is not a valid command."""


class ClientError(Exception):
    """The server could not be reached or rejected the request."""


@dataclass(frozen=True)
class Command:
    name: str
    tile: Optional[Tile] = None
    hotels: Tuple[Hotel, ...] = ()


def _parse_hotel(text: str, usage: str) -> Hotel:
    try:
        return Hotel.parse(text)
    except ValueError:
        raise CommandError(f"Unknown hotel '{text}', expected one of: {HOTEL_NAMES}\n{usage}") from None


def parse_command(line: str) -> Command:
    """
    Parse one line of user input.

    Raises:
        CommandError: with a usage message when the line is malformed.
    """
    parts = line.split()
    if not parts:
        raise CommandError("Type a command, try 'help'")
    name, args = parts[0].lower(), parts[1:]

    if name in ("dump", "draw", "help"):
        return Command(name)
    if name in ("quit", "exit"):
        return Command("quit")
    if name == "place":
        usage = "Usage example: place B1"
        if not args:
            raise CommandError(f"Did you forget a tile?\n{usage}")
        tile = parse_cell_ref(args[0])
        if tile is None:
            raise CommandError(f"Couldn't parse tile '{args[0]}'\n{usage}")
        return Command("place", tile=tile)
    if name == "buy":
        usage = "Usage example: buy luxor luxor imperial"
        if len(args) > 3:
            raise CommandError(f"At most three shares per turn\n{usage}")
        return Command("buy", hotels=tuple(_parse_hotel(a, usage) for a in args))
    if name == "found":
        usage = "Usage example: found tower"
        if len(args) != 1:
            raise CommandError(f"Name exactly one hotel\n{usage}")
        return Command("found", hotels=(_parse_hotel(args[0], usage),))
    raise CommandError(f"'{line.strip()}' is not a command, try 'help'")


class GameClient:
    """Thin HTTP client for the game server."""

    def __init__(self, server_url: str, timeout: float = 5.0, transport: Optional[httpx.BaseTransport] = None):
        self.server_url = server_url.rstrip("/")
        self._http = httpx.Client(base_url=self.server_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def get_state(self) -> Game:
        return self._request("GET", "/state")

    def place_tile(self, tile: Tile) -> Game:
        return self._request("POST", "/action", {"tile": {"row": tile.row, "col": tile.col}})

    def buy_stocks(self, hotels: Tuple[Hotel, ...]) -> Game:
        return self._request("POST", "/actions", {"type": "buy_stocks", "hotels": [h.value for h in hotels]})

    def found_chain(self, hotel: Hotel) -> Game:
        return self._request("POST", "/actions", {"type": "found_chain", "hotel": hotel.value})

    def draw_tile(self) -> Game:
        return self._request("POST", "/actions", {"type": "draw_tile"})

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Game:
        try:
            resp = self._http.request(method, path, json=body)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {path} failed: {e}")
            raise ClientError(
                f"Could not reach {self.server_url}, is the server running and is the URL correct?"
            ) from e
        try:
            data = resp.json()
        except ValueError as e:
            raise ClientError(f"Server sent a non-JSON response ({resp.status_code})") from e
        if isinstance(data, dict) and "error" in data:
            raise ClientError(data["error"])
        if resp.is_error:
            raise ClientError(f"Server responded with {resp.status_code}")
        try:
            return deserialize_game(data)
        except DecodeError as e:
            raise ClientError(f"Could not parse state: {e}") from e


def run_command(client: GameClient, command: Command) -> str:
    """Execute a parsed command and return the text to show."""
    handlers: Dict[str, Callable[[], Game]] = {
        "dump": client.get_state,
        "place": lambda: client.place_tile(command.tile),
        "buy": lambda: client.buy_stocks(command.hotels),
        "found": lambda: client.found_chain(command.hotels[0]),
        "draw": client.draw_tile,
    }
    if command.name == "help":
        return HELP
    try:
        return render_game(handlers[command.name]())
    except ClientError as e:
        return f"Error: {e}"


def start_repl(client: GameClient, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
    """Prompt for commands until 'quit' or end of input."""
    while True:
        try:
            line = read("$ ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        try:
            command = parse_command(line)
        except CommandError as e:
            write(str(e))
            continue
        if command.name == "quit":
            return
        write(run_command(client, command))


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_client_settings()
    parser = argparse.ArgumentParser(description="Play Aqueren against a running server")
    parser.add_argument(
        "server_url",
        nargs="?",
        default=settings.server_url,
        help=f"Base URL of the game server (default: {settings.server_url})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.timeout_seconds,
        help="HTTP timeout in seconds",
    )
    args = parser.parse_args(argv)

    print(f"Starting client, connecting to {args.server_url}")
    client = GameClient(args.server_url, timeout=args.timeout)
    try:
        print()
        print(run_command(client, Command("dump")))
        start_repl(client)
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
