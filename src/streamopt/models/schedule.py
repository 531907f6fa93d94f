"""Game schedule lookup."""

from typing import Dict, Iterable, Set, Tuple


class Schedule:
    """Which teams play on each day of each week."""

    def __init__(self, games: Dict[int, Dict[int, Set[str]]] = None):
        """
        Initialize schedule.

        Args:
            games: Mapping of week -> day -> set of team abbreviations playing
        """
        self._games: Dict[int, Dict[int, Set[str]]] = {}
        for week, days in (games or {}).items():
            for day, teams in days.items():
                for team in teams:
                    self.add_game(week, day, team)

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[int, int, str]]) -> "Schedule":
        """Build a schedule from (week, day, team) triples."""
        schedule = cls()
        for week, day, team in entries:
            schedule.add_game(week, day, team)
        return schedule

    def add_game(self, week: int, day: int, team: str):
        """Mark a team as playing on a given day."""
        self._games.setdefault(int(week), {}).setdefault(int(day), set()).add(team.upper())

    def is_playing(self, week: int, day: int, team: str) -> bool:
        """Check if a team has a game on a given day."""
        return team.upper() in self._games.get(week, {}).get(day, set())

    def teams_playing(self, week: int, day: int) -> Set[str]:
        """Get all teams with a game on a given day."""
        return set(self._games.get(week, {}).get(day, set()))

    def days_in_week(self, week: int) -> int:
        """Number of scheduled days in a week."""
        days = self._games.get(week, {})
        return max(days) + 1 if days else 0

    def __repr__(self) -> str:
        """String representation."""
        return f"Schedule({len(self._games)} weeks)"
