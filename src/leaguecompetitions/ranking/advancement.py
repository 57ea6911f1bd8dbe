"""Promotion of group finishers into the main and plate knockouts."""

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

from typing import Dict, List, Sequence

from leaguecompetitions.exceptions import InvalidInputException
from leaguecompetitions.models.competition import Group, Standing
from leaguecompetitions.type_hints import Advancement, ParticipantId
from leaguecompetitions.utils import setup_logger

from .standings_calculator import StandingsCalculator

logger = setup_logger(__name__)


def group_standings(groups: Sequence[Group]) -> Dict[str, List[Standing]]:
    """Standings of every group over its own matches, keyed by group name."""
    calculator = StandingsCalculator()
    return {
        group.name: calculator.compute_standings(group.participant_ids, group.matches)
        for group in groups
    }


def advance_from_groups(
    groups: Sequence[Group], top_advance: int, lower_to_plate: int
) -> Advancement:
    """Select the participants promoted to the main and plate knockouts.

    Within each group, positions ``1..top_advance`` go to the knockout list
    and the next ``lower_to_plate`` positions go to the plate list. Lists are
    built group by group, then in finishing order. Groups smaller than the
    requested counts simply contribute fewer participants.

    Args:
        groups: Groups with recorded results
        top_advance: Participants promoted per group
        lower_to_plate: Participants sent to the plate per group

    Returns:
        Tuple of (knockout-bound ids, plate-bound ids)

    Raises:
        InvalidInputException: If either count is negative
    """
    if top_advance < 0 or lower_to_plate < 0:
        message = (
            f"Advancement counts cannot be negative: top={top_advance}, "
            f"plate={lower_to_plate}"
        )
        logger.error(message)
        raise InvalidInputException(message)

    calculator = StandingsCalculator()
    knockout: List[ParticipantId] = []
    plate: List[ParticipantId] = []

    for group in groups:
        standings = calculator.compute_standings(group.participant_ids, group.matches)
        if not group.is_completed:
            logger.warning(f"{group.name} has unplayed matches; advancing on current table")
        knockout.extend(s.participant_id for s in standings[:top_advance])
        plate.extend(
            s.participant_id
            for s in standings[top_advance : top_advance + lower_to_plate]
        )

    logger.info(
        f"Advanced {len(knockout)} participants to the knockout and "
        f"{len(plate)} to the plate from {len(groups)} groups"
    )
    return knockout, plate
