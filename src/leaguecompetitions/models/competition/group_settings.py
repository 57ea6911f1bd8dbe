"""GroupSettings data class."""

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

from leaguecompetitions.constants import (
    DEFAULT_LOWER_PLAYERS_TO_PLATE,
    DEFAULT_NUMBER_OF_GROUPS,
    DEFAULT_PLATE_NAME_SUFFIX,
    DEFAULT_TOP_PLAYERS_ADVANCE,
)
from leaguecompetitions.utils.validation import (
    minimum_group_stage_participants,
    require_valid_group_counts,
)


@dataclass
class GroupSettings:
    """Group stage configuration settings.

    Attributes
    ----------
    number_of_groups : int
        Number of groups to create (>= 1).
    top_players_advance : int
        Participants per group promoted to the main knockout (>= 0).
    lower_players_to_plate : int
        Participants per group routed to the plate knockout (>= 0).
    create_plate_competition : bool
        Whether a plate competition shell is created alongside the groups.
    plate_name_suffix : str
        Qualifier appended to the parent name to name the plate.
    """

    number_of_groups: int = DEFAULT_NUMBER_OF_GROUPS
    top_players_advance: int = DEFAULT_TOP_PLAYERS_ADVANCE
    lower_players_to_plate: int = DEFAULT_LOWER_PLAYERS_TO_PLATE
    create_plate_competition: bool = True
    plate_name_suffix: str = DEFAULT_PLATE_NAME_SUFFIX

    @property
    def minimum_participants(self) -> int:
        """Smallest field that fills every group with at least two members."""
        return minimum_group_stage_participants(self.number_of_groups)

    @property
    def wants_plate(self) -> bool:
        return self.create_plate_competition and self.lower_players_to_plate > 0

    def validate(self) -> None:
        """Raise `InvalidGroupSettingsException` if any count is out of range."""
        require_valid_group_counts(
            self.number_of_groups,
            self.top_players_advance,
            self.lower_players_to_plate,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "number_of_groups": self.number_of_groups,
            "top_players_advance": self.top_players_advance,
            "lower_players_to_plate": self.lower_players_to_plate,
            "create_plate_competition": self.create_plate_competition,
            "plate_name_suffix": self.plate_name_suffix,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupSettings":
        """Deserialize settings from dictionary."""
        return cls(
            number_of_groups=data.get("number_of_groups", DEFAULT_NUMBER_OF_GROUPS),
            top_players_advance=data.get(
                "top_players_advance", DEFAULT_TOP_PLAYERS_ADVANCE
            ),
            lower_players_to_plate=data.get(
                "lower_players_to_plate", DEFAULT_LOWER_PLAYERS_TO_PLATE
            ),
            create_plate_competition=data.get("create_plate_competition", True),
            plate_name_suffix=data.get("plate_name_suffix", DEFAULT_PLATE_NAME_SUFFIX),
        )
