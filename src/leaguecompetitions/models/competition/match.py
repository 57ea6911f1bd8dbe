"""Match, match slot and match result data classes."""

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
from typing import Any, Dict, List, Optional, Union

from leaguecompetitions.constants import (
    BYE_LABEL,
    SLOT_BYE,
    SLOT_PARTICIPANT,
    SLOT_WINNER_OF,
    TBD_LABEL,
    WALKOVER_LABEL,
)
from leaguecompetitions.type_hints import ParticipantId


@dataclass(frozen=True)
class ParticipantSlot:
    """Slot holding a concrete participant."""

    participant_id: ParticipantId

    def to_dict(self) -> Dict[str, Any]:
        return {"type": SLOT_PARTICIPANT, "participant_id": self.participant_id}

    def __str__(self) -> str:
        return str(self.participant_id)


@dataclass(frozen=True)
class ByeSlot:
    """Slot with no opponent; the other side advances automatically."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": SLOT_BYE}

    def __str__(self) -> str:
        return BYE_LABEL


@dataclass(frozen=True)
class WinnerOfSlot:
    """Placeholder for the winner of an earlier match.

    Attributes
    ----------
    round_number : int
        1-indexed round of the feeding match.
    match_index : int
        0-indexed position of the feeding match within that round.
    """

    round_number: int
    match_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": SLOT_WINNER_OF,
            "round_number": self.round_number,
            "match_index": self.match_index,
        }

    def __str__(self) -> str:
        return f"{TBD_LABEL} (R{self.round_number} M{self.match_index + 1})"


Slot = Union[ParticipantSlot, ByeSlot, WinnerOfSlot]


def slot_from_dict(data: Dict[str, Any]) -> Slot:
    """Deserialize any slot from its tagged dictionary."""
    slot_type = data.get("type")
    if slot_type == SLOT_PARTICIPANT:
        return ParticipantSlot(participant_id=data["participant_id"])
    if slot_type == SLOT_BYE:
        return ByeSlot()
    if slot_type == SLOT_WINNER_OF:
        return WinnerOfSlot(
            round_number=data["round_number"], match_index=data["match_index"]
        )
    raise ValueError(f"Unknown slot type: {slot_type!r}")


@dataclass(frozen=True)
class MatchResult:
    """Recorded result of a match.

    Attributes
    ----------
    score1 : int
        Score of the first slot (frames, legs, games...).
    score2 : int
        Score of the second slot.
    walkover : bool
        True when the match was decided without being played (a bye).
    """

    score1: int
    score2: int
    walkover: bool = False

    @property
    def is_draw(self) -> bool:
        return not self.walkover and self.score1 == self.score2

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "score1": self.score1,
            "score2": self.score2,
            "walkover": self.walkover,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        return cls(
            score1=data["score1"],
            score2=data["score2"],
            walkover=data.get("walkover", False),
        )

    def __str__(self) -> str:
        if self.walkover:
            return WALKOVER_LABEL
        return f"{self.score1}-{self.score2}"


@dataclass
class Match:
    """A single match between two slots.

    Attributes
    ----------
    slot1 : Slot
        First side (home side in a round robin).
    slot2 : Slot
        Second side.
    result : MatchResult or None
        Recorded result, None until played.
    winner_id : str or None
        Participant that won. None for unplayed or drawn matches.
    """

    slot1: Slot
    slot2: Slot
    result: Optional[MatchResult] = None
    winner_id: Optional[ParticipantId] = None

    @property
    def slots(self) -> List[Slot]:
        return [self.slot1, self.slot2]

    @property
    def participant_ids(self) -> List[ParticipantId]:
        """Concrete participants in this match, in slot order."""
        return [s.participant_id for s in self.slots if isinstance(s, ParticipantSlot)]

    @property
    def is_bye(self) -> bool:
        return isinstance(self.slot1, ByeSlot) or isinstance(self.slot2, ByeSlot)

    @property
    def is_resolved(self) -> bool:
        """Both sides known (no pending winner-of placeholders)."""
        return not any(isinstance(s, WinnerOfSlot) for s in self.slots)

    @property
    def is_complete(self) -> bool:
        return self.result is not None

    @property
    def is_walkover(self) -> bool:
        return self.result is not None and self.result.walkover

    @property
    def loser_id(self) -> Optional[ParticipantId]:
        if self.winner_id is None or self.is_bye:
            return None
        others = [pid for pid in self.participant_ids if pid != self.winner_id]
        return others[0] if others else None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "slot1": self.slot1.to_dict(),
            "slot2": self.slot2.to_dict(),
            "result": self.result.to_dict() if self.result else None,
            "winner_id": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        result = data.get("result")
        return cls(
            slot1=slot_from_dict(data["slot1"]),
            slot2=slot_from_dict(data["slot2"]),
            result=MatchResult.from_dict(result) if result else None,
            winner_id=data.get("winner_id"),
        )

    def __str__(self) -> str:
        score = f" [{self.result}]" if self.result else ""
        return f"{self.slot1} vs {self.slot2}{score}"
