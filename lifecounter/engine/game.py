"""Game state machine: roster, life changes and loss detection."""

import logging
import uuid
from typing import Optional

from lifecounter.config import DEFAULT_PLAYER_COUNT, MAX_PLAYERS, MIN_PLAYERS
from lifecounter.engine.errors import InvalidArgumentError, PlayerIndexError
from lifecounter.engine.history import LifeHistory
from lifecounter.engine.status import GameStatus
from lifecounter.models.player import Player
from lifecounter.models.state import GameSnapshot, PlayerView

logger = logging.getLogger(__name__)


class Game:
    """
    Life-tracking game for 1 to 8 players.

    The game has two logical states, not started and started. A game is
    started while any life total differs from the starting value; this is
    re-evaluated from the totals rather than latched, so the roster can grow
    again if every total is brought back to the starting value.

    Not thread-safe: callers sharing a Game between threads must serialise
    access (see lifecounter.api.app).
    """

    def __init__(self, player_count: int = DEFAULT_PLAYER_COUNT) -> None:
        """
        Initialize a game with a fresh roster.

        Args:
            player_count: Number of players, 1 to 8

        Raises:
            InvalidArgumentError: If player_count is out of range
        """
        is_int = isinstance(player_count, int) and not isinstance(player_count, bool)
        if not is_int or not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            raise InvalidArgumentError(
                f"player_count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count!r}"
            )

        self._game_id = str(uuid.uuid4())
        self._players: list[Player] = [Player.create(f"Player {i}") for i in range(1, player_count + 1)]
        self._history = LifeHistory()
        self._was_started = False
        logger.info(f"Created game {self._game_id} with {player_count} player(s)")

    @classmethod
    def create(cls, player_count: int = DEFAULT_PLAYER_COUNT) -> "Game":
        """Create a new game."""
        return cls(player_count)

    @property
    def game_id(self) -> str:
        """Get game identifier."""
        return self._game_id

    @property
    def players(self) -> tuple[PlayerView, ...]:
        """Get read-only views of the roster in join order."""
        return tuple(PlayerView.from_player(player) for player in self._players)

    @property
    def history(self) -> LifeHistory:
        """Get life change history."""
        return self._history

    @property
    def is_game_started(self) -> bool:
        """Whether any life total differs from the starting value."""
        return GameStatus.is_game_started(self._players)

    def can_add_player(self) -> bool:
        """Check whether a player may join right now."""
        return GameStatus.can_add_player(self._players)

    def add_player(self) -> bool:
        """
        Add the next player to the roster.

        Returns:
            True if a player was added, False if the roster is full or the
            game has started (nothing changes in that case)
        """
        if not self.can_add_player():
            logger.info(f"Refused to add player to game {self._game_id}")
            return False

        player = Player.create(f"Player {len(self._players) + 1}")
        self._players.append(player)
        logger.info(f"Added {player.name} to game {self._game_id}")
        return True

    def player_index(self, player_id: str) -> int:
        """
        Get roster position of a player.

        Raises:
            PlayerIndexError: If no player has this id
        """
        for index, player in enumerate(self._players):
            if player.player_id == player_id:
                return index
        raise PlayerIndexError(f"Player {player_id} not found")

    def adjust_player_life(self, index: int, delta: int) -> None:
        """
        Change a player's life total and record it.

        Nonzero changes are logged with the player's name before the change
        is applied; zero changes are not logged.

        Args:
            index: Roster position of the player
            delta: Signed life change

        Raises:
            PlayerIndexError: If index is not a valid roster position
        """
        if not self._is_valid_index(index):
            raise PlayerIndexError(f"No player at index {index!r} (roster size {len(self._players)})")

        player = self._players[index]
        if delta != 0:
            self._history.record(player, delta)
        player.adjust_life(delta)
        logger.debug(f"{player.name} life {delta:+d} -> {player.life_total}")
        self.update_game_started()

    def adjust_life_by_id(self, player_id: str, delta: int) -> None:
        """Change a player's life total, addressing the player by id."""
        self.adjust_player_life(self.player_index(player_id), delta)

    def update_game_started(self) -> bool:
        """
        Re-evaluate the started state from the current life totals.

        Returns:
            Current started state
        """
        started = self.is_game_started
        if started != self._was_started:
            logger.info(f"Game {self._game_id} {'started' if started else 'returned to not started'}")
            self._was_started = started
        return started

    def check_game_status(self) -> str:
        """Get loss message for the first defeated player, or an empty string."""
        return GameStatus.check_game_status(self._players)

    def defeated_players(self) -> list[PlayerView]:
        """List all defeated players in roster order."""
        return [PlayerView.from_player(player) for player in self._players if player.is_defeated]

    def get_player(self, index: int) -> Optional[PlayerView]:
        """Get player by roster position, None if there is no player there."""
        if self._is_valid_index(index):
            return PlayerView.from_player(self._players[index])
        return None

    def _is_valid_index(self, index: object) -> bool:
        """Check index is a non-negative int inside the roster (bools excluded)."""
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._players)
        )

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view of the game."""
        return GameSnapshot(
            game_id=self._game_id,
            players=[PlayerView.from_player(player) for player in self._players],
            history=self._history.list_entries(),
            is_game_started=self.is_game_started,
            can_add_player=self.can_add_player(),
            status=self.check_game_status(),
        )
