"""Read-only views of a game for the presentation layer."""

from pydantic import BaseModel, ConfigDict, Field

from lifecounter.models.history import HistoryEntry
from lifecounter.models.player import Player


class PlayerView(BaseModel):
    """Snapshot of one player."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    player_id: str = Field(description="Stable player identifier")
    name: str = Field(description="Display name")
    life_total: int = Field(description="Life total at snapshot time")
    is_defeated: bool = Field(description="Whether the player had lost at snapshot time")

    @classmethod
    def from_player(cls, player: Player) -> "PlayerView":
        return cls(
            player_id=player.player_id,
            name=player.name,
            life_total=player.life_total,
            is_defeated=player.is_defeated,
        )


class GameSnapshot(BaseModel):
    """Everything a renderer needs for one frame."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    game_id: str = Field(description="Game identifier")
    players: list[PlayerView] = Field(default_factory=list, description="Roster in join order")
    history: list[HistoryEntry] = Field(default_factory=list, description="Life changes, oldest first")
    is_game_started: bool = Field(description="Whether any life total differs from the starting value")
    can_add_player: bool = Field(description="Whether the add-player control should be enabled")
    status: str = Field(description="Loss message, empty when nobody has lost")
