"""Competition format and status enumerations."""

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

from enum import Enum


class CompetitionFormat(Enum):
    """Format of a competition.

    Knockout formats differ only in what a participant id refers to
    (player, doubles team or club team); the engine treats them alike.
    """

    SINGLES_KNOCKOUT = "singles_knockout"
    DOUBLES_KNOCKOUT = "doubles_knockout"
    TEAM_KNOCKOUT = "team_knockout"
    ROUND_ROBIN = "round_robin"
    SWISS = "swiss"
    SINGLES_GROUP_STAGE = "singles_group_stage"
    DOUBLES_GROUP_STAGE = "doubles_group_stage"

    @property
    def is_knockout(self) -> bool:
        return self in _KNOCKOUT_FORMATS

    @property
    def is_group_stage(self) -> bool:
        return self in _GROUP_STAGE_FORMATS

    @property
    def is_doubles(self) -> bool:
        """Doubles formats take doubles team ids as participants."""
        return self in (
            CompetitionFormat.DOUBLES_KNOCKOUT,
            CompetitionFormat.DOUBLES_GROUP_STAGE,
        )

    @property
    def knockout_counterpart(self) -> "CompetitionFormat":
        """Knockout format used by brackets that follow this format.

        Group stage formats map to the knockout of the same family; every
        other format maps to itself.
        """
        return _GROUP_STAGE_KNOCKOUTS.get(self, self)

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class CompetitionStatus(Enum):
    """Lifecycle status of a competition."""

    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


_KNOCKOUT_FORMATS = frozenset(
    {
        CompetitionFormat.SINGLES_KNOCKOUT,
        CompetitionFormat.DOUBLES_KNOCKOUT,
        CompetitionFormat.TEAM_KNOCKOUT,
    }
)

_GROUP_STAGE_FORMATS = frozenset(
    {
        CompetitionFormat.SINGLES_GROUP_STAGE,
        CompetitionFormat.DOUBLES_GROUP_STAGE,
    }
)

_GROUP_STAGE_KNOCKOUTS = {
    CompetitionFormat.SINGLES_GROUP_STAGE: CompetitionFormat.SINGLES_KNOCKOUT,
    CompetitionFormat.DOUBLES_GROUP_STAGE: CompetitionFormat.DOUBLES_KNOCKOUT,
}
