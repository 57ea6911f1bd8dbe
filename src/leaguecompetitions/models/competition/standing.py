"""Standing data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from leaguecompetitions.type_hints import ParticipantId


@dataclass
class Standing:
    """League table row for one participant.

    Attributes
    ----------
    participant_id : str
        Participant the row belongs to.
    played, won, drawn, lost : int
        Match counts over the counted results.
    score_for, score_against : int
        Aggregate scores (frames, legs...) for and against.
    points : int
        League points (2 per win, 1 per draw).
    position : int
        1-based rank, 0 until assigned.
    """

    participant_id: ParticipantId
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    score_for: int = 0
    score_against: int = 0
    points: int = 0
    position: int = 0

    @property
    def score_difference(self) -> int:
        return self.score_for - self.score_against

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "participant_id": self.participant_id,
            "position": self.position,
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "score_for": self.score_for,
            "score_against": self.score_against,
            "score_difference": self.score_difference,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Standing":
        """Deserialize standing from dictionary."""
        return cls(
            participant_id=data["participant_id"],
            played=data.get("played", 0),
            won=data.get("won", 0),
            drawn=data.get("drawn", 0),
            lost=data.get("lost", 0),
            score_for=data.get("score_for", 0),
            score_against=data.get("score_against", 0),
            points=data.get("points", 0),
            position=data.get("position", 0),
        )
