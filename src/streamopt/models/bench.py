"""Bench container for players not placed in a roster slot."""

from typing import Iterator, List, Optional, Tuple

from .player import Player


class Bench:
    """Overflow area kept sorted worst-to-best.

    The first player is always the lowest ``avg_points`` occupant; ties keep
    insertion order.
    """

    def __init__(self, players: Optional[List[Player]] = None):
        self._players: List[Player] = []
        for player in players or []:
            self.add_player(player)

    @property
    def players(self) -> List[Player]:
        """Bench players, worst first."""
        return list(self._players)

    def add_player(self, player: Player):
        """Add a player, keeping worst-first ordering."""
        index = len(self._players)
        for i, benched in enumerate(self._players):
            if player.avg_points < benched.avg_points:
                index = i
                break
        self._players.insert(index, player)

    def remove_player(self, player: Player) -> Tuple[Optional[Player], bool]:
        """
        Remove a player from the bench.

        Returns:
            Tuple of (removed player, found)
        """
        for i, benched in enumerate(self._players):
            if benched.name == player.name:
                return self._players.pop(i), True
        return None, False

    def is_on_bench(self, player: Player) -> bool:
        """Check if a player is on the bench."""
        return any(benched.name == player.name for benched in self._players)

    def copy(self) -> "Bench":
        """Shallow copy sharing the player objects."""
        bench = Bench()
        bench._players = list(self._players)
        return bench

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __repr__(self) -> str:
        """String representation."""
        return f"Bench({[p.name for p in self._players]})"
