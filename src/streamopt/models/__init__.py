"""Data models for daily roster states."""

from .player import Player
from .schedule import Schedule
from .team import TeamContext
from .bench import Bench
from .exclusions import ExclusionContext, ExclusionSnapshot

__all__ = [
    "Player", "Schedule", "TeamContext", "Bench",
    "ExclusionContext", "ExclusionSnapshot"
]
