"""Data model for a group in a group stage competition."""

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
from typing import Any, Dict, List

from leaguecompetitions.type_hints import ParticipantId

from .match import Match
from .round_data import Round


@dataclass
class Group:
    """A group of participants playing an all-play-all schedule.

    Attributes
    ----------
    name : str
        Group label, e.g. "Group A".
    group_number : int
        Group number (1-indexed).
    participant_ids : list of str
        Members of the group.
    rounds : list of Round
        Round robin schedule within the group.
    """

    name: str
    group_number: int
    participant_ids: List[ParticipantId] = field(default_factory=list)
    rounds: List[Round] = field(default_factory=list)

    @property
    def matches(self) -> List[Match]:
        """All group matches, round by round."""
        return [match for round_ in self.rounds for match in round_.matches]

    @property
    def size(self) -> int:
        return len(self.participant_ids)

    @property
    def is_completed(self) -> bool:
        return all(match.is_complete for match in self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "name": self.name,
            "group_number": self.group_number,
            "participant_ids": list(self.participant_ids),
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        """Deserialize group from dictionary."""
        return cls(
            name=data["name"],
            group_number=data["group_number"],
            participant_ids=list(data.get("participant_ids", [])),
            rounds=[Round.from_dict(r) for r in data.get("rounds", [])],
        )

    def __str__(self) -> str:
        return self.name
