"""Team context shared read-only by every daily state in a week."""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from .player import Player
from .schedule import Schedule


@dataclass
class TeamContext:
    """Per-week view of a fantasy team.

    unused_positions:
        Day index -> slot names with nobody from the base roster able to
        fill them that day. These are the slots streamers compete for.

    streamable_players:
        Incumbent players that may be moved around or dropped, in the order
        they should be packed. Present more-constrained players first for a
        better greedy packing.

    free_agents:
        Pool of players available for acquisition.
    """

    week: int
    schedule: Schedule
    unused_positions: Dict[int, Set[str]] = field(default_factory=dict)
    streamable_players: List[Player] = field(default_factory=list)
    free_agents: List[Player] = field(default_factory=list)

    def is_playing(self, day: int, team: str) -> bool:
        """Check if a team plays on a day of this week."""
        return self.schedule.is_playing(self.week, day, team)

    def unused_positions_for(self, day: int) -> Set[str]:
        """Get structurally unused slots for a day."""
        return set(self.unused_positions.get(day, set()))
