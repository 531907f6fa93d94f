"""Per-day roster slot assignment engine for weekly streaming optimization."""

from .models import Bench, ExclusionContext, ExclusionSnapshot, Player, Schedule, TeamContext
from .population import DailyState, SlimDailyState, SlimPlayer, find_random_free_agent

__all__ = [
    "Bench", "ExclusionContext", "ExclusionSnapshot", "Player", "Schedule",
    "TeamContext", "DailyState", "SlimDailyState", "SlimPlayer",
    "find_random_free_agent",
]
