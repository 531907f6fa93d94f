"""Daily roster state: one day's slot occupancy, free slots and bench."""

import copy
from typing import Dict, List, Optional, Set, Tuple, Union

import numpy as np
from loguru import logger

from ..config.streaming_config import ROSTER_CONFIG
from ..models.bench import Bench
from ..models.exclusions import ExclusionContext, ExclusionSnapshot
from ..models.player import Player
from ..models.team import TeamContext
from .sampler import find_random_free_agent
from .snapshot import SlimDailyState, SlimPlayer


class DailyState:
    """
    Roster/bench snapshot for a single day of a weekly streaming plan.

    A slot is empty when its key is missing from ``roster`` or maps to None.
    A slot name is never both occupied and in ``free_slots``, and a player
    sits in at most one slot or on the bench.
    """

    def __init__(self, team: TeamContext, day: int,
                 roster: Optional[Dict[str, Optional[Player]]] = None):
        """
        Initialize an empty daily state.

        Args:
            team: Team context for the week
            day: Day index within the week
            roster: Optional pre-filled slots; occupied slots are never marked free
        """
        days = team.schedule.days_in_week(team.week)
        if day < 0 or (days and day >= days):
            raise ValueError(f"Invalid day: {day}")

        self.day = day
        self.roster: Dict[str, Optional[Player]] = dict(roster or {})
        self.free_slots: Set[str] = set()
        self.bench = Bench()
        self.new_players: List[Player] = []
        self.dropped_players: List[Player] = []
        self.acquisitions = 0

        # Slots freed by removal; the rest of free_slots comes from the team context
        self._vacated: Set[str] = set()

        for pos in team.unused_positions_for(day):
            if self._is_open(pos):
                self.free_slots.add(pos)

    def _is_open(self, pos: str) -> bool:
        return self.roster.get(pos) is None

    def _occupied(self) -> Dict[str, Player]:
        return {pos: p for pos, p in self.roster.items() if p is not None}

    # ------------------------------------------------------------------
    # Slot packing
    # ------------------------------------------------------------------

    def insert_streamable_players(self, team: TeamContext):
        """Slot every streamable player in the order the team context supplies."""
        for streamer in team.streamable_players:
            self.slot_player(team, streamer)

    def slot_player(self, team: TeamContext, player: Player) -> Optional[str]:
        """
        Put a player in the first open slot they are eligible for, else the bench.

        Eligible slots are tried in the player's own order (most restrictive
        first), so flexible slots are left for players with fewer options.

        Returns:
            The slot filled, or None if the player was benched
        """
        assert not self.is_player_in_state(player), f"{player.name} is already in day {self.day}"

        # A player whose team is off can never fill a slot
        if not team.is_playing(self.day, player.team):
            self.bench.add_player(player)
            logger.debug(f"Day {self.day}: {player.name} not playing, benched")
            return None

        matches = [pos for pos in player.valid_positions if pos in self.free_slots]
        if not matches:
            self.bench.add_player(player)
            logger.debug(f"Day {self.day}: no free slot for {player.name}, benched")
            return None

        for pos in matches:
            if self._is_open(pos):
                self.roster[pos] = player
                self.free_slots.discard(pos)
                logger.debug(f"Day {self.day}: {player.name} slotted at {pos}")
                return pos

        self.bench.add_player(player)
        logger.debug(f"Day {self.day}: eligible slots for {player.name} already filled, benched")
        return None

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def find_random_free_agent(self, team: TeamContext,
                               exclusions: Union[ExclusionContext, ExclusionSnapshot],
                               rng: Optional[np.random.Generator] = None) -> Optional[Player]:
        """Sample a free agent who can fill one of today's free slots."""
        return find_random_free_agent(team, self, exclusions, rng)

    def add_free_agent(self, team: TeamContext, player: Player) -> Optional[str]:
        """
        Acquire a free agent on this day.

        The player is slotted (or benched), recorded as a new player and
        charged as one acquisition. The weekly acquisition limit is enforced
        by the caller.

        Returns:
            The slot filled, or None if the player was benched
        """
        pos = self.slot_player(team, player)
        self.new_players.append(player)
        self.acquisitions += 1
        return pos

    # ------------------------------------------------------------------
    # Removal and bench
    # ------------------------------------------------------------------

    def remove_streamer(self, player: Player) -> bool:
        """
        Remove a player from the bench or their roster slot.

        A vacated slot becomes free.

        Returns:
            True if the player was found
        """
        if self.bench.is_on_bench(player):
            self.bench.remove_player(player)
            return True

        for pos, occupant in self._occupied().items():
            if occupant.name == player.name:
                del self.roster[pos]
                self.free_slots.add(pos)
                self._vacated.add(pos)
                return True

        return False

    def drop_streamer(self, player: Player) -> bool:
        """Remove a player and record the drop for this day."""
        found = self.remove_streamer(player)
        if found:
            self.dropped_players.append(player)
        return found

    def drop_worst_bench_player(self) -> Tuple[Optional[Player], bool]:
        """
        Remove the lowest-ranked bench player.

        Returns:
            Tuple of (player, found); (None, False) on an empty bench
        """
        if len(self.bench) == 0:
            return None, False
        return self.bench.remove_player(self.bench.players[0])

    def add_player_to_bench(self, player: Player):
        """Add a player to the bench without any duplicate check."""
        self.bench.add_player(player)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_player_in_state(self, player: Player) -> bool:
        """Check if a player is in a slot or on the bench."""
        return self.is_player_in_roster(player) or self.bench.is_on_bench(player)

    def is_player_in_roster(self, player: Player) -> bool:
        """Check if a player occupies a slot."""
        return any(p.name == player.name for p in self._occupied().values())

    def get_position_of_player(self, player: Player) -> str:
        """Slot holding the player, or the bench position if not slotted."""
        for pos, occupant in self._occupied().items():
            if occupant.name == player.name:
                return pos
        return ROSTER_CONFIG.BENCH_POSITION

    def get_num_streamers(self) -> int:
        """Number of players on the bench or in a slot."""
        return len(self.bench) + len(self._occupied())

    def validate(self, team: Optional[TeamContext] = None) -> Tuple[bool, str]:
        """
        Check slot and player exclusivity.

        Args:
            team: If given, also check free slots come only from the day's
                  unused slots or from removals

        Returns:
            Tuple of (is_valid, error_message)
        """
        occupied = self._occupied()

        for pos in sorted(self.free_slots):
            if pos in occupied:
                return False, f"Slot {pos} is free and occupied by {occupied[pos].name}"

        seen: Set[str] = set()
        for pos, player in occupied.items():
            if player.name in seen:
                return False, f"{player.name} is in more than one slot"
            seen.add(player.name)

        for player in self.bench:
            if player.name in seen:
                return False, f"{player.name} is both slotted and benched"
            seen.add(player.name)

        if team is not None:
            allowed = team.unused_positions_for(self.day) | self._vacated
            stray = self.free_slots - allowed
            if stray:
                return False, f"Free slots {sorted(stray)} were never unused or vacated"

        return True, "Valid state"

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def slim(self) -> SlimDailyState:
        """Project to an immutable snapshot for scoring and serialization."""
        return SlimDailyState(
            day=self.day,
            additions=tuple(SlimPlayer.from_player(p) for p in self.new_players),
            removals=tuple(SlimPlayer.from_player(p) for p in self.dropped_players),
            roster={pos: SlimPlayer.from_player(p) for pos, p in self._occupied().items()},
        )

    def clone(self) -> "DailyState":
        """Copy with independent containers; players are shared."""
        state = copy.copy(self)
        state.roster = dict(self.roster)
        state.free_slots = set(self.free_slots)
        state.bench = self.bench.copy()
        state.new_players = list(self.new_players)
        state.dropped_players = list(self.dropped_players)
        state._vacated = set(self._vacated)
        return state

    def format_roster(self) -> str:
        """Render slots in canonical order followed by the bench."""
        lines = []
        for pos in ROSTER_CONFIG.POSITION_ORDER:
            if pos in self.free_slots:
                lines.append(f"{pos:<4} Unused")
            elif not self._is_open(pos):
                player = self.roster[pos]
                lines.append(f"{pos:<4} {player.name} {player.avg_points:.1f}")
            else:
                lines.append(f"{pos:<4} --------")

        lines.append("Bench")
        lines.extend(player.name for player in self.bench)
        return "\n".join(lines)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"DailyState(day {self.day}, {len(self._occupied())} slotted, "
            f"{len(self.free_slots)} free, {len(self.bench)} benched)"
        )
