"""Shared fixtures for daily state tests."""

import numpy as np
import pytest

from streamopt.models import Player, Schedule, TeamContext


class CountingRng:
    """numpy Generator wrapper that counts draws."""

    def __init__(self, seed: int = 0):
        self._rng = np.random.default_rng(seed)
        self.calls = 0

    def integers(self, high):
        self.calls += 1
        return self._rng.integers(high)


@pytest.fixture
def schedule():
    """Week 1: four teams on day 0, two on day 3."""
    return Schedule({
        1: {
            0: {"LAL", "BOS", "DEN", "PHX"},
            3: {"LAL", "BOS"},
        }
    })


@pytest.fixture
def free_agents():
    return [
        Player("Fa Guard", "LAL", ("PG", "G", "UT1", "UT2", "UT3"), avg_points=22.0),
        Player("Fa Center", "BOS", ("C", "UT1", "UT2", "UT3"), avg_points=18.5),
        Player("Fa Hurt", "DEN", ("SF", "F", "UT1", "UT2", "UT3"), avg_points=30.0, injured=True),
        Player("Fa Idle", "MIA", ("PF", "F", "UT1", "UT2", "UT3"), avg_points=15.0),
    ]


@pytest.fixture
def team(schedule, free_agents):
    return TeamContext(
        week=1,
        schedule=schedule,
        unused_positions={0: {"PG", "C", "G", "UT1"}, 3: {"UT1"}},
        streamable_players=[],
        free_agents=free_agents,
    )


@pytest.fixture
def counting_rng():
    return CountingRng(seed=7)
