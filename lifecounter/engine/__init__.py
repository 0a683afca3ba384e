"""Game engine package."""

from lifecounter.engine.errors import InvalidArgumentError, LifeCounterError, PlayerIndexError
from lifecounter.engine.game import Game
from lifecounter.engine.history import LifeHistory
from lifecounter.engine.status import GameStatus

__all__ = [
    "Game",
    "GameStatus",
    "InvalidArgumentError",
    "LifeCounterError",
    "LifeHistory",
    "PlayerIndexError",
]
