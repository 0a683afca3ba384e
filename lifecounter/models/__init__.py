"""Data models module for LifeCounter."""

# Player
from lifecounter.models.player import Player

# History
from lifecounter.models.history import HistoryEntry

# Views
from lifecounter.models.state import GameSnapshot, PlayerView

__all__ = [
    # Player
    "Player",
    # History
    "HistoryEntry",
    # Views
    "GameSnapshot",
    "PlayerView",
]
