"""Bounded random sampling of a free agent for a daily state."""

from typing import TYPE_CHECKING, Optional, Union

import numpy as np
from loguru import logger

from ..config.streaming_config import SAMPLING_CONFIG
from ..models.exclusions import ExclusionContext, ExclusionSnapshot
from ..models.player import Player
from ..models.team import TeamContext

if TYPE_CHECKING:
    from .daily_state import DailyState


def find_random_free_agent(team: TeamContext,
                           state: "DailyState",
                           exclusions: Union[ExclusionContext, ExclusionSnapshot],
                           rng: Optional[np.random.Generator] = None,
                           max_trials: Optional[int] = None) -> Optional[Player]:
    """
    Draw free agents uniformly (with replacement) until one can be rostered.

    A draw is rejected when the player's team is not playing that day, the
    player is injured, or the player is already a chosen streamer or was
    dropped this week. The first remaining draw eligible for one of the
    state's free slots wins.

    Args:
        team: Team context holding the free agent pool and schedule
        state: Daily state whose free slots must be matched
        exclusions: Exclusion context (frozen at call time) or a snapshot
        rng: Random generator; a fresh unseeded one if omitted
        max_trials: Number of draws before giving up

    Returns:
        The chosen free agent, or None if no draw succeeded

    Raises:
        ValueError: If the free agent pool is empty
    """
    pool = team.free_agents
    if not pool:
        raise ValueError("Free agent pool is empty")

    if rng is None:
        rng = np.random.default_rng()
    if max_trials is None:
        max_trials = SAMPLING_CONFIG.MAX_FREE_AGENT_TRIALS
    if isinstance(exclusions, ExclusionContext):
        exclusions = exclusions.snapshot()

    free_slots = frozenset(state.free_slots)

    for _ in range(max_trials):
        free_agent = pool[int(rng.integers(len(pool)))]

        if free_agent.injured or not team.is_playing(state.day, free_agent.team):
            continue

        if exclusions.is_excluded(free_agent):
            continue

        for pos in free_agent.valid_positions:
            if pos in free_slots:
                logger.debug(f"Day {state.day}: sampled {free_agent.name} for {pos}")
                return free_agent

    logger.debug(f"Day {state.day}: no free agent found in {max_trials} trials")
    return None
