"""Core data models for competitions.

This package defines the data structures shared by the generators, the
ranking engine and the competition builder.
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

from leaguecompetitions.models.competition.competition import Competition
from leaguecompetitions.models.competition.doubles_team import DoublesTeam
from leaguecompetitions.models.competition.enums import (
    CompetitionFormat,
    CompetitionStatus,
)
from leaguecompetitions.models.competition.group import Group
from leaguecompetitions.models.competition.group_settings import GroupSettings
from leaguecompetitions.models.competition.match import (
    ByeSlot,
    Match,
    MatchResult,
    ParticipantSlot,
    Slot,
    WinnerOfSlot,
    slot_from_dict,
)
from leaguecompetitions.models.competition.round_data import Round
from leaguecompetitions.models.competition.standing import Standing

__all__ = [
    "ByeSlot",
    "Competition",
    "CompetitionFormat",
    "CompetitionStatus",
    "DoublesTeam",
    "Group",
    "GroupSettings",
    "Match",
    "MatchResult",
    "ParticipantSlot",
    "Round",
    "Slot",
    "Standing",
    "WinnerOfSlot",
    "slot_from_dict",
]
