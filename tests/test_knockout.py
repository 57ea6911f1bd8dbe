import random
from collections import Counter

import pytest

from leaguecompetitions import generate_single_knockout
from leaguecompetitions.exceptions import (
    DuplicateParticipantException,
    InsufficientParticipantsException,
)
from leaguecompetitions.generation.knockout import (
    build_opening_slots,
    knockout_round_name,
    next_power_of_two,
    seeding_positions,
)
from leaguecompetitions.generation.randomness import get_default_rng, set_default_rng
from leaguecompetitions.models.competition import ByeSlot, ParticipantSlot, WinnerOfSlot


def test_five_participants_get_three_byes(ids):
    rounds = generate_single_knockout(ids(5), randomize=False)

    assert [r.name for r in rounds] == ["Round of 8", "Semi-Final", "Final"]
    assert [len(r.matches) for r in rounds] == [4, 2, 1]

    opening = rounds[0].matches
    walkovers = [m for m in opening if m.is_bye]
    assert len(walkovers) == 3
    assert {m.winner_id for m in walkovers} == {"P1", "P2", "P3"}
    assert all(m.is_walkover for m in walkovers)
    assert opening[1].participant_ids == ["P4", "P5"]
    assert opening[1].result is None


def test_walkover_winners_are_placed_in_round_two(ids):
    rounds = generate_single_knockout(ids(5), randomize=False)

    semi_one, semi_two = rounds[1].matches
    assert semi_one.slot1 == ParticipantSlot("P1")
    assert semi_one.slot2 == WinnerOfSlot(1, 1)
    assert semi_two.slot1 == ParticipantSlot("P2")
    assert semi_two.slot2 == ParticipantSlot("P3")
    assert rounds[2].matches[0].slot1 == WinnerOfSlot(2, 0)
    assert rounds[2].matches[0].slot2 == WinnerOfSlot(2, 1)


@pytest.mark.parametrize(
    "count, names",
    [
        (2, ["Final"]),
        (3, ["Semi-Final", "Final"]),
        (4, ["Semi-Final", "Final"]),
        (16, ["Round of 16", "Quarter-Final", "Semi-Final", "Final"]),
        (
            17,
            ["Round of 32", "Round of 16", "Quarter-Final", "Semi-Final", "Final"],
        ),
    ],
)
def test_round_names(ids, count, names):
    rounds = generate_single_knockout(ids(count), randomize=False)
    assert [r.name for r in rounds] == names
    assert [r.round_number for r in rounds] == list(range(1, len(names) + 1))


@pytest.mark.parametrize("count", range(2, 20))
def test_every_participant_appears_once_in_round_one(ids, rng, count):
    participants = ids(count)
    rounds = generate_single_knockout(participants, rng=rng)

    counts = Counter(rounds[0].participant_ids)
    assert set(counts) == set(participants)
    assert all(c == 1 for c in counts.values())
    assert len(rounds[-1].matches) == 1
    byes = sum(1 for m in rounds[0].matches for s in m.slots if isinstance(s, ByeSlot))
    assert byes == next_power_of_two(count) - count


def test_no_bye_plays_a_bye(ids):
    for count in range(2, 33):
        for match in generate_single_knockout(ids(count), randomize=False)[0].matches:
            assert not (isinstance(match.slot1, ByeSlot) and isinstance(match.slot2, ByeSlot))


def test_top_two_seeds_are_in_opposite_halves(ids):
    rounds = generate_single_knockout(ids(8), randomize=False)
    opening = rounds[0].matches

    top_half = {pid for m in opening[:2] for pid in m.participant_ids}
    bottom_half = {pid for m in opening[2:] for pid in m.participant_ids}
    assert "P1" in top_half
    assert "P2" in bottom_half
    assert opening[0].participant_ids == ["P1", "P8"]


def test_seeding_positions():
    assert seeding_positions(1) == [1]
    assert seeding_positions(2) == [1, 2]
    assert seeding_positions(4) == [1, 4, 2, 3]
    assert seeding_positions(8) == [1, 8, 4, 5, 2, 7, 3, 6]
    for size in (2, 4, 8, 16, 32):
        order = seeding_positions(size)
        assert sorted(order) == list(range(1, size + 1))
        assert all(a + b == size + 1 for a, b in zip(order[::2], order[1::2]))


def test_next_power_of_two():
    assert next_power_of_two(1) == 1
    assert next_power_of_two(2) == 2
    assert next_power_of_two(5) == 8
    assert next_power_of_two(8) == 8
    assert next_power_of_two(9) == 16


def test_build_opening_slots_fills_missing_seeds_with_byes():
    slots = build_opening_slots(["a", "b", "c"])
    assert slots == [ParticipantSlot("a"), ByeSlot(), ParticipantSlot("b"), ParticipantSlot("c")]


def test_knockout_round_name():
    assert knockout_round_name(3, 3) == "Final"
    assert knockout_round_name(2, 3) == "Semi-Final"
    assert knockout_round_name(1, 3) == "Round of 8"
    assert knockout_round_name(1, 2) == "Semi-Final"
    assert knockout_round_name(2, 5) == "Round of 16"


def test_randomized_bracket_is_reproducible_with_same_seed(ids):
    participants = ids(11)
    first = generate_single_knockout(participants, rng=random.Random(3))
    second = generate_single_knockout(participants, rng=random.Random(3))
    assert first == second
    assert participants == ids(11)


def test_ordered_bracket_ignores_rng(ids):
    participants = ids(6)
    first = generate_single_knockout(participants, randomize=False, rng=random.Random(1))
    second = generate_single_knockout(participants, randomize=False, rng=random.Random(2))
    assert first == second


def test_duplicate_participants_are_rejected():
    with pytest.raises(DuplicateParticipantException):
        generate_single_knockout(["a", "b", "a"])


@pytest.mark.parametrize("participants", [[], ["solo"]])
def test_too_few_participants_are_rejected(participants):
    with pytest.raises(InsufficientParticipantsException):
        generate_single_knockout(participants)


def test_default_source_can_be_replaced_with_a_seeded_one(ids):
    original = get_default_rng()
    previous = set_default_rng(random.Random(7))
    try:
        first = generate_single_knockout(ids(12), randomize=True)
        set_default_rng(random.Random(7))
        second = generate_single_knockout(ids(12), randomize=True)
    finally:
        set_default_rng(previous)

    assert previous is original
    assert get_default_rng() is original
    assert first == second
    assert [r.name for r in first] == ["Round of 16", "Quarter-Final", "Semi-Final", "Final"]
