"""
HTTP surface of the game server.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
