"""Life change history models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HistoryEntry(BaseModel):
    """Single nonzero life change."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    sequence_number: int = Field(ge=0, description="Order of entries")
    player_id: str = Field(description="Id of the player whose life changed")
    player_name: str = Field(description="Player name at the time of the change")
    life_change: int = Field(description="Signed life delta, never zero")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the change was made")

    @field_validator("life_change")
    @classmethod
    def reject_zero_change(cls, value: int) -> int:
        if value == 0:
            raise ValueError("life_change must be nonzero")
        return value

    @property
    def label(self) -> str:
        """Display text such as 'Player 1 -5'."""
        return f"{self.player_name} {self.life_change:+d}"
