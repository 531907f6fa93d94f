"""Daily roster states and the operations a weekly search applies to them."""

from .daily_state import DailyState
from .sampler import find_random_free_agent
from .snapshot import SlimDailyState, SlimPlayer

__all__ = ["DailyState", "find_random_free_agent", "SlimDailyState", "SlimPlayer"]
