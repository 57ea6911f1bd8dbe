"""Single-elimination bracket generation.

Seeds are placed with the standard tournament layout: seed 1 and seed 2 sit
in opposite halves, recursively, so the two strongest entrants can only
meet in the final. When the field is not a power of two the missing
(highest-numbered) seeds become byes, which excuses the top seeds from the
opening round.

Bye matches stay in the opening round as walkovers, and the advanced
participant is written straight into the second round. Every other later
slot is a `WinnerOfSlot` referring back to the feeding match by
(round number, match index).
"""

# League Competitions
# Copyright (C) 2025  League Competitions developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import List, Optional, Sequence

from leaguecompetitions.constants import (
    KNOCKOUT_ROUND_LABELS,
    OPENING_ROUND_MIN_BRACKET,
    ROUND_OF_N,
)
from leaguecompetitions.models.competition import (
    ByeSlot,
    Match,
    MatchResult,
    ParticipantSlot,
    Round,
    Slot,
    WinnerOfSlot,
)
from leaguecompetitions.type_hints import ParticipantId, Rounds
from leaguecompetitions.utils import setup_logger
from leaguecompetitions.utils.validation import require_valid_participants

from .randomness import seed_order

logger = setup_logger(__name__)


def next_power_of_two(n: int) -> int:
    """Smallest power of two greater than or equal to ``n`` (minimum 1)."""
    size = 1
    while size < n:
        size *= 2
    return size


def seeding_positions(bracket_size: int) -> List[int]:
    """Seed numbers in bracket slot order for a power-of-two bracket.

    Each pass mirrors the previous order so that every pair sums to
    ``slots + 1``:

        >>> seeding_positions(8)
        [1, 8, 4, 5, 2, 7, 3, 6]
    """
    order = [1]
    while len(order) < bracket_size:
        mirror = len(order) * 2 + 1
        order = [seed for top in order for seed in (top, mirror - top)]
    return order


def knockout_round_name(round_number: int, total_rounds: int) -> str:
    """Label a knockout round by its distance from the final.

    Args:
        round_number: Round number (1-indexed)
        total_rounds: Number of rounds in the bracket

    Returns:
        "Final", "Semi-Final", "Quarter-Final" or "Round of N". Brackets of
        eight or more slots always open with "Round of <bracket size>".
    """
    bracket_size = 2**total_rounds
    if round_number == 1 and bracket_size >= OPENING_ROUND_MIN_BRACKET:
        return ROUND_OF_N.format(size=bracket_size)

    distance = total_rounds - round_number
    if distance in KNOCKOUT_ROUND_LABELS:
        return KNOCKOUT_ROUND_LABELS[distance]
    return ROUND_OF_N.format(size=2 ** (distance + 1))


def build_opening_slots(seeds: Sequence[ParticipantId]) -> List[Slot]:
    """Map seeds onto bracket slots, filling missing seeds with byes."""
    bracket_size = next_power_of_two(len(seeds))
    slots: List[Slot] = []
    for seed in seeding_positions(bracket_size):
        if seed <= len(seeds):
            slots.append(ParticipantSlot(seeds[seed - 1]))
        else:
            slots.append(ByeSlot())
    return slots


def _opening_match(slot1: Slot, slot2: Slot) -> Match:
    """Create a first round match, resolving it as a walkover if one side is a bye."""
    if isinstance(slot2, ByeSlot) and isinstance(slot1, ParticipantSlot):
        return Match(
            slot1=slot1,
            slot2=slot2,
            result=MatchResult(0, 0, walkover=True),
            winner_id=slot1.participant_id,
        )
    if isinstance(slot1, ByeSlot) and isinstance(slot2, ParticipantSlot):
        return Match(
            slot1=slot1,
            slot2=slot2,
            result=MatchResult(0, 0, walkover=True),
            winner_id=slot2.participant_id,
        )
    return Match(slot1=slot1, slot2=slot2)


def _advancing_slot(previous: Round, match_index: int) -> Slot:
    """Slot filled by the winner of ``previous.matches[match_index]``."""
    feeder = previous.matches[match_index]
    if feeder.winner_id is not None:
        return ParticipantSlot(feeder.winner_id)
    return WinnerOfSlot(previous.round_number, match_index)


def generate_single_knockout(
    participants: Sequence[ParticipantId],
    randomize: bool = True,
    rng: Optional[random.Random] = None,
) -> Rounds:
    """Generate a seeded single-elimination bracket.

    Args:
        participants: Distinct participant ids; list order is seed order
            unless ``randomize`` is set
        randomize: Shuffle the seed order first
        rng: Random source for the shuffle (module default when None)

    Returns:
        Rounds from the opening round to the final. The final always holds
        exactly one match.

    Raises:
        InsufficientParticipantsException: If fewer than two participants
        DuplicateParticipantException: If an id is repeated
    """
    entrants = require_valid_participants(participants)
    seeds = seed_order(entrants, randomize, rng)

    slots = build_opening_slots(seeds)
    bracket_size = len(slots)
    total_rounds = bracket_size.bit_length() - 1

    opening = Round(
        round_number=1,
        name=knockout_round_name(1, total_rounds),
        matches=[_opening_match(slots[i], slots[i + 1]) for i in range(0, bracket_size, 2)],
    )
    rounds = [opening]

    for round_number in range(2, total_rounds + 1):
        previous = rounds[-1]
        matches = [
            Match(
                slot1=_advancing_slot(previous, index),
                slot2=_advancing_slot(previous, index + 1),
            )
            for index in range(0, len(previous.matches), 2)
        ]
        rounds.append(
            Round(
                round_number=round_number,
                name=knockout_round_name(round_number, total_rounds),
                matches=matches,
            )
        )

    logger.info(
        f"Generated knockout for {len(seeds)} participants: bracket size "
        f"{bracket_size}, {bracket_size - len(seeds)} byes, {total_rounds} rounds"
    )
    return rounds
