"""Life change history log."""

from datetime import datetime
from typing import Iterator, Optional

from lifecounter.engine.errors import InvalidArgumentError
from lifecounter.models.history import HistoryEntry
from lifecounter.models.player import Player


class LifeHistory:
    """Append-only log of life changes, oldest first."""

    def __init__(self) -> None:
        """Initialize empty history."""
        self._entries: list[HistoryEntry] = []

    def record(self, player: Player, delta: int) -> HistoryEntry:
        """
        Record a life change for a player.

        Args:
            player: Player about to change; name and id are copied
            delta: Signed life change

        Returns:
            Created HistoryEntry
        """
        if delta == 0:
            raise InvalidArgumentError("Zero life changes are not recorded")

        entry = HistoryEntry(
            sequence_number=len(self._entries),
            player_id=player.player_id,
            player_name=player.name,
            life_change=delta,
            timestamp=datetime.now(),
        )
        self._entries.append(entry)
        return entry

    def get_entry(self, index: int) -> Optional[HistoryEntry]:
        """
        Get entry by index.

        Args:
            index: Entry index

        Returns:
            HistoryEntry if found, None otherwise
        """
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def list_entries(self) -> list[HistoryEntry]:
        """List all entries."""
        return self._entries.copy()

    def entries_for(self, player_id: str) -> list[HistoryEntry]:
        """List entries for one player."""
        return [entry for entry in self._entries if entry.player_id == player_id]

    def get_latest(self) -> Optional[HistoryEntry]:
        """Get the latest entry."""
        if self._entries:
            return self._entries[-1]
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries.copy())
