"""
Console client: parses typed commands, talks to the server over HTTP and
renders the game as text.
"""

from .console import ClientError, Command, CommandError, GameClient, main, parse_command
from .render import render_game

__all__ = [
    "ClientError",
    "Command",
    "CommandError",
    "GameClient",
    "main",
    "parse_command",
    "render_game",
]
