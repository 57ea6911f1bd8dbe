"""Data model for a competition round."""

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


@dataclass
class Round:
    """Container for all matches of a single competition round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    name : str
        Human label, e.g. "Final", "Semi-Final", "Round of 16", "Round 3".
    matches : list of Match
        Matches in bracket (or fixture) order.
    """

    round_number: int
    name: str = ""
    matches: List[Match] = field(default_factory=list)

    @property
    def participant_ids(self) -> List[ParticipantId]:
        """Concrete participants appearing in this round, in match order."""
        return [pid for match in self.matches for pid in match.participant_ids]

    @property
    def is_completed(self) -> bool:
        return bool(self.matches) and all(m.is_complete for m in self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "name": self.name,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round_number"],
            name=data.get("name", ""),
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )

    def __str__(self) -> str:
        return self.name
