"""Slim, immutable projections of daily states for scoring and export."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

import pandas as pd

from ..config.streaming_config import ROSTER_CONFIG
from ..models.player import Player


@dataclass(frozen=True)
class SlimPlayer:
    """Player reduced to the fields needed for reporting."""
    name: str
    avg_points: float
    team: str

    @classmethod
    def from_player(cls, player: Player) -> "SlimPlayer":
        return cls(name=player.name, avg_points=player.avg_points, team=player.team)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "avg_points": self.avg_points, "team": self.team}


@dataclass(frozen=True)
class SlimDailyState:
    """Minimal snapshot of one day: who came in, who left, who played where."""
    day: int
    additions: Tuple[SlimPlayer, ...] = ()
    removals: Tuple[SlimPlayer, ...] = ()
    roster: Mapping[str, SlimPlayer] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze the roster mapping."""
        object.__setattr__(self, "roster", MappingProxyType(dict(self.roster)))

    def __hash__(self) -> int:
        return hash((self.day, self.additions, self.removals, frozenset(self.roster.items())))

    @property
    def total_points(self) -> float:
        """Sum of average points across occupied slots."""
        return sum(p.avg_points for p in self.roster.values())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "day": self.day,
            "additions": [p.to_dict() for p in self.additions],
            "removals": [p.to_dict() for p in self.removals],
            "roster": {pos: p.to_dict() for pos, p in self.roster.items()},
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        Flatten the snapshot into one row per player.

        Returns:
            DataFrame with columns day, section, position, name, avg_points, team
        """
        order = {pos: i for i, pos in enumerate(ROSTER_CONFIG.POSITION_ORDER)}
        positions = sorted(self.roster, key=lambda pos: (order.get(pos, len(order)), pos))

        rows: List[Dict[str, Any]] = []
        for pos in positions:
            rows.append({"day": self.day, "section": "roster", "position": pos, **self.roster[pos].to_dict()})
        for player in self.additions:
            rows.append({"day": self.day, "section": "addition", "position": None, **player.to_dict()})
        for player in self.removals:
            rows.append({"day": self.day, "section": "removal", "position": None, **player.to_dict()})

        columns = ["day", "section", "position", "name", "avg_points", "team"]
        return pd.DataFrame(rows, columns=columns)
