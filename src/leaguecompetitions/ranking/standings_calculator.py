"""Standings calculation for league tables and groups.

This module turns recorded match results into an ordered league table.
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

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from leaguecompetitions.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from leaguecompetitions.models.competition import Match, ParticipantSlot, Standing
from leaguecompetitions.type_hints import ParticipantId
from leaguecompetitions.utils import setup_logger
from leaguecompetitions.utils.validation import require_unique_scope

logger = setup_logger(__name__)


class StandingsCalculator:
    """Calculates standings for a scope of participants.

    Scoring is fixed: 2 points for a win, 1 for a draw, 0 for a loss.
    Rows are ordered by:
    - Points
    - Score difference (for minus against)
    - Score for

    Ties left after all three keys keep the order of the input scope.
    """

    def compute_standings(
        self, participants: Sequence[ParticipantId], matches: Iterable[Match]
    ) -> List[Standing]:
        """Compute ordered standings.

        Args:
            participants: The participant scope, in tie-break order
            matches: Matches that may carry results for this scope

        Returns:
            One `Standing` per participant with positions assigned

        Raises:
            DuplicateParticipantException: If the scope repeats an id
        """
        scope = require_unique_scope(participants)
        table: Dict[ParticipantId, Standing] = {
            pid: Standing(participant_id=pid) for pid in scope
        }

        counted = 0
        for match in matches:
            sides = self._counted_sides(match, table)
            if sides is None:
                continue
            self._apply_result(table, match, *sides)
            counted += 1

        ordered = self.sort_standings([table[pid] for pid in scope])
        logger.debug(
            f"Computed standings for {len(scope)} participants from {counted} results"
        )
        return ordered

    def sort_standings(self, standings: List[Standing]) -> List[Standing]:
        """Sort rows and assign 1-based positions (stable for full ties)."""
        ordered = sorted(
            standings,
            key=lambda s: (-s.points, -s.score_difference, -s.score_for),
        )
        for index, standing in enumerate(ordered):
            standing.position = index + 1
        return ordered

    def _counted_sides(
        self, match: Match, table: Dict[ParticipantId, Standing]
    ) -> Optional[Tuple[ParticipantId, ParticipantId]]:
        """Return both participant ids if the match counts towards the table."""
        if match.result is None or match.result.walkover:
            return None
        if not isinstance(match.slot1, ParticipantSlot) or not isinstance(
            match.slot2, ParticipantSlot
        ):
            return None
        first = match.slot1.participant_id
        second = match.slot2.participant_id
        if first not in table or second not in table or first == second:
            return None
        return first, second

    def _apply_result(
        self,
        table: Dict[ParticipantId, Standing],
        match: Match,
        first: ParticipantId,
        second: ParticipantId,
    ) -> None:
        score1 = match.result.score1
        score2 = match.result.score2
        self._add_side(table[first], score1, score2)
        self._add_side(table[second], score2, score1)

    def _add_side(self, standing: Standing, scored: int, conceded: int) -> None:
        standing.played += 1
        standing.score_for += scored
        standing.score_against += conceded
        if scored > conceded:
            standing.won += 1
            standing.points += WIN_POINTS
        elif scored == conceded:
            standing.drawn += 1
            standing.points += DRAW_POINTS
        else:
            standing.lost += 1
            standing.points += LOSS_POINTS


def compute_standings(
    participants: Sequence[ParticipantId], matches: Iterable[Match]
) -> List[Standing]:
    """Compute ordered standings; see `StandingsCalculator.compute_standings`."""
    return StandingsCalculator().compute_standings(participants, matches)
