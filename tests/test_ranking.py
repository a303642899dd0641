import random

import pytest

from hotdog_core import Event, StandingRow, compute_standings, select_winner


def _sorted_winner(events):
    ordered = sorted(events, key=lambda e: (-e.total_units_consumed, e.name.lower()))
    return ordered[0].name if ordered else None


def test_case_insensitive_tie_break_picks_lexically_first_name():
    events = [Event(5, "Bob", 10.0), Event(5, "alice", 10.0)]
    assert select_winner(events) == "alice"
    assert select_winner(list(reversed(events))) == "alice"


def test_more_units_beats_earlier_name():
    events = [Event(5, "alice", 9.999), Event(5, "Zed", 10.0)]
    assert select_winner(events) == "Zed"


def test_empty_timeline_has_no_winner():
    assert select_winner([]) is None
    assert compute_standings([]) == ()


def test_all_zero_totals_still_produce_a_winner():
    events = [Event(0, "Bob", 0), Event(0, "amy", 0)]
    assert select_winner(events) == "amy"


def test_winner_uses_unrounded_totals():
    events = [Event(5, "alice", 2.8331), Event(5, "Bob", 2.8334)]
    assert events[0].rounded().total_units_consumed == events[1].rounded().total_units_consumed
    assert select_winner(events) == "Bob"


@pytest.mark.parametrize("seed", range(20))
def test_linear_scan_matches_full_sort(seed):
    rng = random.Random(seed)
    names = ["alice", "Bob", "carl", "Dana", "ed"]
    events = [
        Event(rng.randint(0, 5), rng.choice(names), rng.choice([0, 1, 2, 2.5, 3]))
        for _ in range(rng.randint(1, 15))
    ]
    assert select_winner(events) == _sorted_winner(events)


def test_standings_use_best_total_and_share_ranks_on_ties():
    events = [
        Event(1, "Alice", 1),
        Event(5, "Alice", 2.5),
        Event(5, "carl", 4.0),
        Event(5, "Bob", 4.0),
        Event(5, "dora", 1.0),
    ]
    assert compute_standings(events) == (
        StandingRow(rank=1, name="Bob", total_units_consumed=4.0),
        StandingRow(rank=1, name="carl", total_units_consumed=4.0),
        StandingRow(rank=3, name="Alice", total_units_consumed=2.5),
        StandingRow(rank=4, name="dora", total_units_consumed=1.0),
    )
    assert compute_standings(events)[0].name == select_winner(events)
