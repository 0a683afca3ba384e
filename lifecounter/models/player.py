"""Player model."""

import uuid

from pydantic import BaseModel, ConfigDict, Field

from lifecounter.config import MAX_LIFE, MIN_LIFE, STARTING_LIFE


class Player(BaseModel):
    """A seat at the table with a bounded life total."""

    model_config = ConfigDict(validate_assignment=True)

    player_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), frozen=True, description="Stable player identifier"
    )
    name: str = Field(frozen=True, description="Display name, e.g. 'Player 1'")
    life_total: int = Field(
        default=STARTING_LIFE, ge=MIN_LIFE, le=MAX_LIFE, description="Current life total"
    )

    @classmethod
    def create(cls, name: str) -> "Player":
        """Create a player at starting life."""
        return cls(name=name)

    @property
    def is_defeated(self) -> bool:
        """Whether the player has run out of life."""
        return self.life_total <= MIN_LIFE

    def adjust_life(self, delta: int) -> None:
        """
        Change life total by delta, clamped to the legal range.

        Args:
            delta: Signed life change, zero allowed
        """
        self.life_total = max(MIN_LIFE, min(self.life_total + delta, MAX_LIFE))
