"""Competition aggregate."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import uuid4

from dateutil.parser import isoparse

from leaguecompetitions.constants import DEFAULT_COMPETITION_NAME
from leaguecompetitions.type_hints import ParticipantId

from .doubles_team import DoublesTeam
from .enums import CompetitionFormat, CompetitionStatus
from .group import Group
from .group_settings import GroupSettings
from .round_data import Round


def _format_date(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    return isoparse(value) if value else None


@dataclass
class Competition:
    """A competition within a season.

    Competitions are created by the caller. Generators never modify one in
    place; they return new rounds, groups and participant lists which the
    caller assigns (see `leaguecompetitions.controllers.competition`).

    Attributes
    ----------
    name : str
        Competition name.
    format : CompetitionFormat
        Bracket, round robin or group stage format.
    status : CompetitionStatus
        Draft until a schedule has been generated.
    season_id : str or None
        Season the competition belongs to.
    participant_ids : list of str
        Entrants in seed order (players or teams).
    doubles_teams : list of DoublesTeam
        Entrants of doubles formats.
    rounds : list of Round
        Knockout or round robin rounds.
    groups : list of Group
        Groups of a group stage competition.
    group_settings : GroupSettings or None
        Group stage configuration.
    plate_competition_id : str or None
        Id of the linked plate competition.
    """

    name: str = DEFAULT_COMPETITION_NAME
    format: CompetitionFormat = CompetitionFormat.SINGLES_KNOCKOUT
    status: CompetitionStatus = CompetitionStatus.DRAFT
    season_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_date: datetime = field(default_factory=datetime.now)
    start_date: Optional[datetime] = None
    notes: Optional[str] = None
    participant_ids: List[ParticipantId] = field(default_factory=list)
    doubles_teams: List[DoublesTeam] = field(default_factory=list)
    rounds: List[Round] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    group_settings: Optional[GroupSettings] = None
    plate_competition_id: Optional[str] = None

    def entrant_ids(self) -> List[ParticipantId]:
        """Participant ids the engine schedules for this competition.

        Doubles formats are played between doubles teams, so their team ids
        are the entrants; every other format uses ``participant_ids``.
        """
        if self.format.is_doubles:
            return [team.id for team in self.doubles_teams]
        return list(self.participant_ids)

    @property
    def match_count(self) -> int:
        group_matches = sum(len(g.matches) for g in self.groups)
        return group_matches + sum(len(r.matches) for r in self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competition to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "format": self.format.value,
            "status": self.status.value,
            "season_id": self.season_id,
            "created_date": _format_date(self.created_date),
            "start_date": _format_date(self.start_date),
            "notes": self.notes,
            "participant_ids": list(self.participant_ids),
            "doubles_teams": [t.to_dict() for t in self.doubles_teams],
            "rounds": [r.to_dict() for r in self.rounds],
            "groups": [g.to_dict() for g in self.groups],
            "group_settings": (
                self.group_settings.to_dict() if self.group_settings else None
            ),
            "plate_competition_id": self.plate_competition_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competition":
        """Deserialize competition from dictionary."""
        settings = data.get("group_settings")
        return cls(
            id=data["id"],
            name=data.get("name", DEFAULT_COMPETITION_NAME),
            format=CompetitionFormat(
                data.get("format", CompetitionFormat.SINGLES_KNOCKOUT.value)
            ),
            status=CompetitionStatus(
                data.get("status", CompetitionStatus.DRAFT.value)
            ),
            season_id=data.get("season_id"),
            created_date=_parse_date(data.get("created_date")) or datetime.now(),
            start_date=_parse_date(data.get("start_date")),
            notes=data.get("notes"),
            participant_ids=list(data.get("participant_ids", [])),
            doubles_teams=[
                DoublesTeam.from_dict(t) for t in data.get("doubles_teams", [])
            ],
            rounds=[Round.from_dict(r) for r in data.get("rounds", [])],
            groups=[Group.from_dict(g) for g in data.get("groups", [])],
            group_settings=GroupSettings.from_dict(settings) if settings else None,
            plate_competition_id=data.get("plate_competition_id"),
        )

    def __str__(self) -> str:
        return self.name or "Unnamed Competition"
