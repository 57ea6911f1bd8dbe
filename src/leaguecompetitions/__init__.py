"""League Competitions: schedule generation and ranking for league competitions."""

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

from leaguecompetitions.generation import (
    generate_group_stage,
    generate_round_robin,
    generate_single_knockout,
)
from leaguecompetitions.ranking import advance_from_groups, compute_standings

__version__ = "0.1.0"

__all__ = [
    "advance_from_groups",
    "compute_standings",
    "generate_group_stage",
    "generate_round_robin",
    "generate_single_knockout",
]
