"""Game status evaluation."""

from typing import Optional, Sequence

from lifecounter.config import MAX_PLAYERS, NO_STATUS, STARTING_LIFE
from lifecounter.models.player import Player


class GameStatus:
    """Pure derivations over a roster."""

    @staticmethod
    def is_game_started(players: Sequence[Player]) -> bool:
        """
        Check whether any life total has left the starting value.

        Recomputed from the current totals every time, so a game whose totals
        all return to the starting value counts as not started again.
        """
        return any(player.life_total != STARTING_LIFE for player in players)

    @staticmethod
    def can_add_player(players: Sequence[Player]) -> bool:
        """Check whether the roster may grow."""
        return len(players) < MAX_PLAYERS and not GameStatus.is_game_started(players)

    @staticmethod
    def first_defeated(players: Sequence[Player]) -> Optional[Player]:
        """Get the lowest-index defeated player, if any."""
        return next((player for player in players if player.is_defeated), None)

    @staticmethod
    def loss_message(player: Player) -> str:
        return f"{player.name} LOSES!"

    @staticmethod
    def check_game_status(players: Sequence[Player]) -> str:
        """
        Build the status line for the table.

        Only the first defeated player (by roster order) is reported.

        Returns:
            Loss message, or NO_STATUS when nobody has lost
        """
        defeated = GameStatus.first_defeated(players)
        if defeated is None:
            return NO_STATUS
        return GameStatus.loss_message(defeated)
