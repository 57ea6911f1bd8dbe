"""Per-format schedule builders.

Each `CompetitionFormat` maps to a `FormatScheduler` that knows how to turn
a participant list into a `Schedule`. Callers look the scheduler up with
`scheduler_for` instead of branching on the format themselves.
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
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from leaguecompetitions.exceptions import (
    InvalidGroupSettingsException,
    UnsupportedFormatException,
)
from leaguecompetitions.models.competition import (
    Competition,
    CompetitionFormat,
    Group,
    Round,
)
from leaguecompetitions.type_hints import ParticipantId
from leaguecompetitions.utils import setup_logger

from .group_stage import generate_group_stage
from .knockout import generate_single_knockout
from .round_robin import generate_round_robin

logger = setup_logger(__name__)


@dataclass
class Schedule:
    """Output of a format scheduler.

    Attributes:
        rounds: Knockout or round robin rounds
        groups: Groups of a group stage
        plate_competition: Plate shell created by a group stage, if any
    """

    rounds: List[Round] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    plate_competition: Optional[Competition] = None

    @property
    def match_count(self) -> int:
        return sum(len(r.matches) for r in self.rounds) + sum(
            len(g.matches) for g in self.groups
        )


class FormatScheduler(ABC):
    """Builds the initial schedule for one family of formats."""

    @abstractmethod
    def build_schedule(
        self,
        participants: Sequence[ParticipantId],
        competition: Competition,
        randomize: bool = True,
        rng: Optional[random.Random] = None,
    ) -> Schedule:
        """Build a schedule for ``participants`` in the context of ``competition``."""


class KnockoutScheduler(FormatScheduler):
    """Single-elimination bracket (singles, doubles and team knockouts)."""

    def build_schedule(self, participants, competition, randomize=True, rng=None):
        return Schedule(rounds=generate_single_knockout(participants, randomize, rng))


class RoundRobinScheduler(FormatScheduler):
    """All-play-all schedule."""

    def build_schedule(self, participants, competition, randomize=True, rng=None):
        return Schedule(rounds=generate_round_robin(participants, randomize, rng))


class GroupStageScheduler(FormatScheduler):
    """Groups with round robins, plus an optional plate competition shell."""

    def build_schedule(self, participants, competition, randomize=True, rng=None):
        if competition.group_settings is None:
            logger.error(f"No group settings configured for '{competition.name}'")
            raise InvalidGroupSettingsException(
                f"No group settings configured for '{competition.name}'"
            )
        groups, plate = generate_group_stage(
            participants,
            competition.group_settings,
            competition.format,
            competition.season_id,
            competition.name,
            randomize,
            rng,
        )
        return Schedule(groups=groups, plate_competition=plate)


class UnsupportedScheduler(FormatScheduler):
    """Formats paired round by round outside this engine (e.g. Swiss)."""

    def build_schedule(self, participants, competition, randomize=True, rng=None):
        raise UnsupportedFormatException(
            f"Format '{competition.format.display_name}' has no automatic schedule"
        )


SCHEDULERS: Dict[CompetitionFormat, FormatScheduler] = {
    CompetitionFormat.SINGLES_KNOCKOUT: KnockoutScheduler(),
    CompetitionFormat.DOUBLES_KNOCKOUT: KnockoutScheduler(),
    CompetitionFormat.TEAM_KNOCKOUT: KnockoutScheduler(),
    CompetitionFormat.ROUND_ROBIN: RoundRobinScheduler(),
    CompetitionFormat.SWISS: UnsupportedScheduler(),
    CompetitionFormat.SINGLES_GROUP_STAGE: GroupStageScheduler(),
    CompetitionFormat.DOUBLES_GROUP_STAGE: GroupStageScheduler(),
}


def scheduler_for(competition_format: CompetitionFormat) -> FormatScheduler:
    """Return the scheduler registered for ``competition_format``."""
    return SCHEDULERS[competition_format]
