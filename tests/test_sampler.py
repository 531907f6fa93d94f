"""Tests for bounded free agent sampling."""

import numpy as np
import pytest

from streamopt.models import ExclusionContext, Player, TeamContext
from streamopt.population import DailyState, find_random_free_agent


def test_returns_eligible_free_agent(team, free_agents):
    """Only the two healthy, playing free agents can be returned on day 0."""
    state = DailyState(team, 0)
    valid = {free_agents[0], free_agents[1]}

    for seed in range(20):
        player = find_random_free_agent(team, state, ExclusionContext(), np.random.default_rng(seed))
        assert player in valid


def test_all_excluded_returns_none_after_bound(team, free_agents, counting_rng):
    """With every free agent excluded, the sampler gives up after 25 draws."""
    state = DailyState(team, 0)
    exclusions = ExclusionContext()
    exclusions.add_streamer(free_agents[0])
    exclusions.add_streamer(free_agents[2])
    exclusions.record_drop(free_agents[1])
    exclusions.record_drop(free_agents[3])

    assert find_random_free_agent(team, state, exclusions, counting_rng) is None
    assert counting_rng.calls == 25


def test_excluded_players_never_returned(team, free_agents):
    state = DailyState(team, 0)
    exclusions = ExclusionContext()
    exclusions.add_streamer(free_agents[0])

    for seed in range(50):
        player = find_random_free_agent(team, state, exclusions, np.random.default_rng(seed))
        assert player is None or player == free_agents[1]

    exclusions.record_drop(free_agents[1])
    for seed in range(50):
        assert find_random_free_agent(team, state, exclusions, np.random.default_rng(seed)) is None


def test_injured_and_idle_never_returned(schedule, free_agents):
    """Injured players and players whose team is off are rejected."""
    team = TeamContext(week=1, schedule=schedule,
                       unused_positions={0: {"SF", "F", "PF", "UT1"}},
                       free_agents=[free_agents[2], free_agents[3]])
    state = DailyState(team, 0)

    for seed in range(20):
        assert find_random_free_agent(team, state, ExclusionContext(), np.random.default_rng(seed)) is None


def test_no_matching_free_slot(team, free_agents, counting_rng):
    """Playing free agents without an eligible free slot are not returned."""
    state = DailyState(team, 3)
    state.slot_player(team, Player("Ut Guy", "LAL", ("UT1",)))
    assert state.free_slots == set()

    assert find_random_free_agent(team, state, ExclusionContext(), counting_rng) is None
    assert counting_rng.calls == 25


def test_max_trials_override(team, counting_rng):
    state = DailyState(team, 3)
    state.free_slots.clear()

    find_random_free_agent(team, state, ExclusionContext(), counting_rng, max_trials=5)
    assert counting_rng.calls == 5


def test_first_success_returns_immediately(schedule, counting_rng):
    only = Player("Only", "LAL", ("C",))
    team = TeamContext(week=1, schedule=schedule,
                       unused_positions={0: {"C"}}, free_agents=[only])
    state = DailyState(team, 0)

    assert find_random_free_agent(team, state, ExclusionContext(), counting_rng) == only
    assert counting_rng.calls == 1


def test_empty_pool_raises(schedule):
    team = TeamContext(week=1, schedule=schedule, unused_positions={0: {"C"}})
    state = DailyState(team, 0)

    with pytest.raises(ValueError):
        find_random_free_agent(team, state, ExclusionContext(), np.random.default_rng(0))


def test_same_seed_same_sequence(schedule):
    """Packing then sampling is reproducible for a fixed seed."""
    slots = ["PG", "SG", "C", "UT1", "UT2"]
    pool = [Player(f"Fa{i}", ["LAL", "BOS", "DEN"][i % 3], (slots[i % 5], "UT2"), avg_points=float(i))
            for i in range(40)]
    streamers = [Player("S1", "LAL", ("PG", "UT1")), Player("S2", "BOS", ("PG", "UT1"))]
    team = TeamContext(week=1, schedule=schedule,
                       unused_positions={0: set(slots)},
                       streamable_players=streamers, free_agents=pool)

    def run(seed):
        rng = np.random.default_rng(seed)
        state = DailyState(team, 0)
        state.insert_streamable_players(team)
        exclusions = ExclusionContext(cur_streamers=set(streamers))
        placements = []
        for _ in range(4):
            player = state.find_random_free_agent(team, exclusions, rng)
            if player is None:
                placements.append(None)
                continue
            exclusions.add_streamer(player)
            placements.append((player.name, state.add_free_agent(team, player)))
        return placements, dict(state.roster)

    assert run(11) == run(11)


def test_snapshot_exclusions(team, free_agents):
    """A frozen snapshot is accepted in place of the live context."""
    state = DailyState(team, 0)
    exclusions = ExclusionContext()
    exclusions.add_streamer(free_agents[0])
    snapshot = exclusions.snapshot()
    exclusions.remove_streamer(free_agents[0])

    assert snapshot.is_excluded(free_agents[0])
    for seed in range(30):
        player = find_random_free_agent(team, state, snapshot, np.random.default_rng(seed))
        assert player != free_agents[0]
