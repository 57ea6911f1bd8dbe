"""Result recording and validation for competitions.

This module records match results with proper validation and, for
knockouts, moves winners into the next round. Recording never modifies the
rounds it is given; it returns updated copies.
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

import copy
from dataclasses import replace
from typing import List, Optional, Sequence

from leaguecompetitions.exceptions import (
    InvalidResultException,
    MatchNotFoundException,
)
from leaguecompetitions.models.competition import (
    Group,
    Match,
    MatchResult,
    ParticipantSlot,
    Round,
    WinnerOfSlot,
)
from leaguecompetitions.type_hints import ParticipantId
from leaguecompetitions.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Recording match results with proper validation
    - Moving knockout winners into the following round
    - Undoing results that later rounds do not depend on
    """

    def record_result(
        self,
        rounds: Sequence[Round],
        round_number: int,
        match_index: int,
        score1: int,
        score2: int,
        knockout: bool = False,
    ) -> List[Round]:
        """Record the result of one match.

        Args:
            rounds: Current rounds of a competition or group
            round_number: The round number (1-indexed)
            match_index: Position of the match in its round (0-indexed)
            score1: Score of the first slot
            score2: Score of the second slot
            knockout: Reject draws and advance the winner

        Returns:
            Updated copy of ``rounds``

        Raises:
            MatchNotFoundException: If the round or match does not exist
            InvalidResultException: If the result cannot be recorded
        """
        updated = copy.deepcopy(list(rounds))
        round_ = self._find_round(updated, round_number)
        match = self._find_match(round_, match_index)
        self._validate_result(match, score1, score2, knockout)

        winner = self._winner(match, score1, score2)
        round_.matches[match_index] = replace(
            match, result=MatchResult(score1, score2), winner_id=winner
        )
        logger.debug(
            f"Recorded {match.slot1} {score1}-{score2} {match.slot2} "
            f"in round {round_number}"
        )

        if knockout:
            self._advance_winner(updated, round_number, match_index, winner)
        return updated

    def record_group_result(
        self,
        groups: Sequence[Group],
        group_number: int,
        round_number: int,
        match_index: int,
        score1: int,
        score2: int,
    ) -> List[Group]:
        """Record a group match result and return updated copies of ``groups``."""
        updated = copy.deepcopy(list(groups))
        for index, group in enumerate(updated):
            if group.group_number == group_number:
                updated[index] = replace(
                    group,
                    rounds=self.record_result(
                        group.rounds, round_number, match_index, score1, score2
                    ),
                )
                return updated

        logger.error(f"Cannot find group {group_number}")
        raise MatchNotFoundException(f"Group {group_number} does not exist")

    def undo_result(
        self,
        rounds: Sequence[Round],
        round_number: int,
        match_index: int,
        knockout: bool = False,
    ) -> List[Round]:
        """Clear a recorded result.

        In a knockout the winner is withdrawn from the next round again,
        which is only allowed while that next match is unplayed.

        Raises:
            MatchNotFoundException: If the round or match does not exist
            InvalidResultException: If the match is a walkover or a later
                result depends on it
        """
        updated = copy.deepcopy(list(rounds))
        round_ = self._find_round(updated, round_number)
        match = self._find_match(round_, match_index)

        if match.is_walkover:
            raise InvalidResultException("Walkovers cannot be undone")
        if match.result is None:
            logger.warning(
                f"No result to undo for match {match_index} in round {round_number}"
            )
            return updated

        if knockout:
            next_match = self._next_match(updated, round_number, match_index)
            if next_match is not None:
                if next_match.is_complete:
                    raise InvalidResultException(
                        f"Round {round_number + 1} result depends on this match"
                    )
                self._set_next_slot(
                    next_match, match_index, WinnerOfSlot(round_number, match_index)
                )

        round_.matches[match_index] = replace(match, result=None, winner_id=None)
        logger.info(f"Undid result for match {match_index} in round {round_number}")
        return updated

    def _find_round(self, rounds: List[Round], round_number: int) -> Round:
        for round_ in rounds:
            if round_.round_number == round_number:
                return round_
        logger.error(f"Invalid round number: {round_number}")
        raise MatchNotFoundException(f"Round {round_number} does not exist")

    def _find_match(self, round_: Round, match_index: int) -> Match:
        if 0 <= match_index < len(round_.matches):
            return round_.matches[match_index]
        logger.error(f"Invalid match index {match_index} in {round_.name}")
        raise MatchNotFoundException(
            f"Match {match_index} does not exist in round {round_.round_number}"
        )

    def _validate_result(
        self, match: Match, score1: int, score2: int, knockout: bool
    ) -> None:
        if match.is_bye:
            logger.error(f"Cannot record a result for bye match {match}")
            raise InvalidResultException("Bye matches are resolved automatically")
        if not match.is_resolved:
            logger.error(f"Cannot record a result before both sides are known: {match}")
            raise InvalidResultException("Both participants must be known")
        if score1 < 0 or score2 < 0:
            logger.error(f"Invalid score: {score1}-{score2} (must not be negative)")
            raise InvalidResultException(f"Invalid score {score1}-{score2}")
        if knockout and score1 == score2:
            logger.error(f"Knockout match cannot be drawn: {match}")
            raise InvalidResultException("Knockout matches need a winner")

    def _winner(self, match: Match, score1: int, score2: int) -> Optional[ParticipantId]:
        if score1 > score2:
            return match.slot1.participant_id
        if score2 > score1:
            return match.slot2.participant_id
        return None

    def _next_match(
        self, rounds: List[Round], round_number: int, match_index: int
    ) -> Optional[Match]:
        for round_ in rounds:
            if round_.round_number == round_number + 1:
                return round_.matches[match_index // 2]
        return None

    def _set_next_slot(self, next_match: Match, match_index: int, slot) -> None:
        if match_index % 2 == 0:
            next_match.slot1 = slot
        else:
            next_match.slot2 = slot

    def _advance_winner(
        self,
        rounds: List[Round],
        round_number: int,
        match_index: int,
        winner: ParticipantId,
    ) -> None:
        next_match = self._next_match(rounds, round_number, match_index)
        if next_match is None:
            logger.info(f"Final decided: {winner} wins")
            return
        if next_match.is_complete:
            raise InvalidResultException(
                f"Round {round_number + 1} result depends on this match"
            )
        self._set_next_slot(next_match, match_index, ParticipantSlot(winner))
