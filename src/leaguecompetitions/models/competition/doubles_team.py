"""DoublesTeam data class."""

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
from uuid import uuid4

from leaguecompetitions.type_hints import ParticipantId


@dataclass
class DoublesTeam:
    """A pair of players entered together in a doubles competition.

    The team id is the participant id used by the engine.
    """

    player1_id: ParticipantId
    player2_id: ParticipantId
    team_name: str = ""
    id: ParticipantId = field(default_factory=lambda: str(uuid4()))

    @property
    def player_ids(self) -> List[ParticipantId]:
        return [self.player1_id, self.player2_id]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "team_name": self.team_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DoublesTeam":
        return cls(
            id=data["id"],
            player1_id=data["player1_id"],
            player2_id=data["player2_id"],
            team_name=data.get("team_name", ""),
        )

    def __str__(self) -> str:
        return self.team_name
