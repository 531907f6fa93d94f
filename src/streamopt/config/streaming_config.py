"""Configuration constants for daily roster states."""

from dataclasses import dataclass
from typing import List


@dataclass
class SamplingConfig:
    """Free agent sampling parameters."""
    MAX_FREE_AGENT_TRIALS: int = 25  # Independent draws before giving up


@dataclass
class RosterConfig:
    """Roster slot layout."""
    BENCH_POSITION: str = "BE"  # Returned for players not in a slot
    POSITION_ORDER: List[str] = None

    def __post_init__(self):
        if self.POSITION_ORDER is None:
            self.POSITION_ORDER = ["PG", "SG", "SF", "PF", "C", "G", "F", "UT1", "UT2", "UT3"]


# Default instances
SAMPLING_CONFIG = SamplingConfig()
ROSTER_CONFIG = RosterConfig()
