"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for a game of Aqueren."""

    starting_money: int = 6000
    hand_size: int = 6

    max_stocks_per_turn: int = 3
    founder_bonus_shares: int = 1

    seed: Optional[int] = None
