"""Players already claimed or dropped elsewhere in a weekly plan."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Set

from .player import Player


@dataclass(frozen=True)
class ExclusionSnapshot:
    """Immutable view of the exclusion sets at one point in time."""
    streamers: FrozenSet[str] = frozenset()
    dropped: FrozenSet[str] = frozenset()

    def is_excluded(self, player: Player) -> bool:
        """Check if a player was already chosen or dropped."""
        return player.name in self.streamers or player.name in self.dropped


@dataclass
class ExclusionContext:
    """
    Mutable exclusion sets owned by one weekly plan.

    Each plan evaluated in parallel must own its own context.
    """
    cur_streamers: Set[Player] = field(default_factory=set)
    dropped_players: Dict[str, Player] = field(default_factory=dict)

    def add_streamer(self, player: Player):
        """Mark a player as a chosen streamer for the week."""
        self.cur_streamers.add(player)

    def remove_streamer(self, player: Player):
        """Unmark a chosen streamer."""
        self.cur_streamers.discard(player)

    def record_drop(self, player: Player):
        """Record that a player was dropped this week."""
        self.dropped_players[player.name] = player

    def is_dropped(self, player: Player) -> bool:
        """Check if a player was dropped this week."""
        return player.name in self.dropped_players

    def is_excluded(self, player: Player) -> bool:
        """Check if a player is already chosen or dropped."""
        return player in self.cur_streamers or self.is_dropped(player)

    def snapshot(self) -> ExclusionSnapshot:
        """Freeze the current exclusions."""
        return ExclusionSnapshot(
            streamers=frozenset(p.name for p in self.cur_streamers),
            dropped=frozenset(self.dropped_players),
        )
