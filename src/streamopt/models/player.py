"""Player model for streaming optimization."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Player:
    """Immutable player facts used for slot eligibility.

    ``valid_positions`` is ordered most-restrictive first (e.g. ``PG`` before
    ``G`` before ``UT1``); slotting walks it in that order.
    """

    name: str
    team: str
    valid_positions: Tuple[str, ...] = ()
    avg_points: float = 0.0
    injured: bool = False

    def __post_init__(self):
        """Coerce eligibility lists to a tuple."""
        if not isinstance(self.valid_positions, tuple):
            object.__setattr__(self, "valid_positions", tuple(self.valid_positions))

    def __hash__(self) -> int:
        """Make player hashable by name."""
        return hash(self.name)

    def __eq__(self, other) -> bool:
        """Check equality based on name."""
        if not isinstance(other, Player):
            return False
        return self.name == other.name

    def __repr__(self) -> str:
        """String representation."""
        positions = "/".join(self.valid_positions)
        injured = ", INJ" if self.injured else ""
        return f"Player({self.name}, {self.team}, {positions}, {self.avg_points:.1f}pts{injured})"
