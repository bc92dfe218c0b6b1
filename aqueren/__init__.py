"""
Aqueren

An authoritative server for a four-player hotel-chain tile and stock game.
"""

__version__ = "0.2.0"
