"""Group stage generation.

Participants are dealt into groups one at a time (index ``i`` goes to group
``i % number_of_groups``), so group sizes never differ by more than one.
Each group then gets its own round robin. When the settings route lower
finishers to a plate, a draft plate competition shell is returned next to
the groups; persisting and linking it is the caller's job.
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
import string
from typing import List, Optional, Sequence

from leaguecompetitions.constants import GROUP_LABEL_PREFIX
from leaguecompetitions.exceptions import InsufficientParticipantsException
from leaguecompetitions.models.competition import (
    Competition,
    CompetitionFormat,
    CompetitionStatus,
    Group,
    GroupSettings,
)
from leaguecompetitions.type_hints import GroupStage, ParticipantId
from leaguecompetitions.utils import setup_logger
from leaguecompetitions.utils.validation import require_valid_participants

from .randomness import seed_order
from .round_robin import generate_round_robin

logger = setup_logger(__name__)


def group_label(index: int) -> str:
    """Label for the group at 0-based ``index``: "Group A" ... "Group Z", then numbers."""
    if index < len(string.ascii_uppercase):
        return f"{GROUP_LABEL_PREFIX} {string.ascii_uppercase[index]}"
    return f"{GROUP_LABEL_PREFIX} {index + 1}"


def distribute(
    participants: Sequence[ParticipantId], number_of_groups: int
) -> List[List[ParticipantId]]:
    """Deal participants into ``number_of_groups`` buckets in turn."""
    buckets: List[List[ParticipantId]] = [[] for _ in range(number_of_groups)]
    for index, participant_id in enumerate(participants):
        buckets[index % number_of_groups].append(participant_id)
    return buckets


def plate_competition_shell(
    settings: GroupSettings,
    competition_format: CompetitionFormat,
    season_id: Optional[str],
    name: str,
) -> Competition:
    """Draft plate competition for the lower finishers of a group stage."""
    return Competition(
        name=f"{name} {settings.plate_name_suffix}".strip(),
        format=competition_format.knockout_counterpart,
        status=CompetitionStatus.DRAFT,
        season_id=season_id,
    )


def generate_group_stage(
    participants: Sequence[ParticipantId],
    settings: GroupSettings,
    competition_format: CompetitionFormat,
    season_id: Optional[str],
    name: str,
    randomize: bool = True,
    rng: Optional[random.Random] = None,
) -> GroupStage:
    """Partition participants into balanced groups with round robin schedules.

    Args:
        participants: Distinct participant ids
        settings: Group stage configuration
        competition_format: Format of the parent competition
        season_id: Season of the parent competition (for the plate shell)
        name: Name of the parent competition (for the plate shell)
        randomize: Shuffle participants before dealing them into groups
        rng: Random source for the shuffle (module default when None)

    Returns:
        Tuple of (groups, plate competition shell or None)

    Raises:
        InvalidGroupSettingsException: If a settings count is out of range
        InsufficientParticipantsException: If any group would have fewer
            than two members
        DuplicateParticipantException: If an id is repeated
    """
    settings.validate()
    entrants = require_valid_participants(participants)

    required = settings.minimum_participants
    if len(entrants) < required:
        logger.error(
            f"Group stage needs at least {required} participants for "
            f"{settings.number_of_groups} groups, got {len(entrants)}"
        )
        raise InsufficientParticipantsException(required, len(entrants))

    ordered = seed_order(entrants, randomize, rng)

    groups = []
    for index, members in enumerate(distribute(ordered, settings.number_of_groups)):
        groups.append(
            Group(
                name=group_label(index),
                group_number=index + 1,
                participant_ids=members,
                rounds=generate_round_robin(members, randomize=False),
            )
        )

    plate = None
    if settings.wants_plate:
        plate = plate_competition_shell(settings, competition_format, season_id, name)
        logger.info(f"Created plate competition shell '{plate.name}'")

    logger.info(
        f"Generated {len(groups)} groups for {len(entrants)} participants with "
        f"{sum(len(g.matches) for g in groups)} total matches"
    )
    return groups, plate
