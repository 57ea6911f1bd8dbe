"""Round robin (all-play-all) schedule generation using the circle method."""

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
from typing import List, Optional, Sequence, Tuple

from leaguecompetitions.constants import ROUND_ROBIN_LABEL
from leaguecompetitions.models.competition import Match, ParticipantSlot, Round
from leaguecompetitions.type_hints import ParticipantId, Rounds
from leaguecompetitions.utils import setup_logger
from leaguecompetitions.utils.validation import require_valid_participants

from .randomness import seed_order

logger = setup_logger(__name__)

# Pairing against this marker means sitting the round out
_REST = None


def number_of_rounds(participant_count: int) -> int:
    """Rounds needed for a full round robin: N-1 for even N, N for odd N."""
    if participant_count < 2:
        return 0
    return participant_count - 1 if participant_count % 2 == 0 else participant_count


def circle_pairings(
    positions: Sequence[Optional[ParticipantId]],
) -> List[List[Tuple[Optional[ParticipantId], Optional[ParticipantId]]]]:
    """Pair an even-sized list round by round with the circle method.

    Position 0 stays fixed; after every round the last position moves to
    index 1 and the rest shift one place along.

    Args:
        positions: Even-length working list (may contain the rest marker)

    Returns:
        One list of pairs per round, N-1 rounds for N positions.
    """
    working = list(positions)
    size = len(working)
    schedule = []
    for _ in range(size - 1):
        schedule.append([(working[i], working[size - 1 - i]) for i in range(size // 2)])
        working.insert(1, working.pop())
    return schedule


def generate_round_robin(
    participants: Sequence[ParticipantId],
    randomize: bool = True,
    rng: Optional[random.Random] = None,
) -> Rounds:
    """Generate a round robin schedule where every pair meets exactly once.

    For an odd field a synthetic rest slot is added; whoever draws it sits
    the round out and the rest slot itself never appears in the output.

    Args:
        participants: Distinct participant ids
        randomize: Shuffle the input order first
        rng: Random source for the shuffle (module default when None)

    Returns:
        Rounds labelled "Round 1", "Round 2", ...

    Raises:
        InsufficientParticipantsException: If fewer than two participants
        DuplicateParticipantException: If an id is repeated
    """
    entrants = require_valid_participants(participants)
    ordered: List[Optional[ParticipantId]] = list(seed_order(entrants, randomize, rng))
    if len(ordered) % 2 != 0:
        ordered.append(_REST)

    rounds = []
    for index, pairs in enumerate(circle_pairings(ordered)):
        round_number = index + 1
        matches = [
            Match(slot1=ParticipantSlot(home), slot2=ParticipantSlot(away))
            for home, away in pairs
            if home is not _REST and away is not _REST
        ]
        rounds.append(
            Round(
                round_number=round_number,
                name=ROUND_ROBIN_LABEL.format(number=round_number),
                matches=matches,
            )
        )

    logger.info(
        f"Generated round robin for {len(entrants)} participants: "
        f"{len(rounds)} rounds, {sum(len(r.matches) for r in rounds)} matches"
    )
    return rounds
