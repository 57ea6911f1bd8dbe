"""Schedule and bracket generators.

Every generator is a pure function: it validates its input, optionally
shuffles a copy of it, and returns new rounds or groups.
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

from leaguecompetitions.generation.formats import (
    FormatScheduler,
    Schedule,
    scheduler_for,
)
from leaguecompetitions.generation.group_stage import generate_group_stage
from leaguecompetitions.generation.knockout import generate_single_knockout
from leaguecompetitions.generation.randomness import get_default_rng, set_default_rng
from leaguecompetitions.generation.round_robin import generate_round_robin

__all__ = [
    "FormatScheduler",
    "Schedule",
    "generate_group_stage",
    "generate_round_robin",
    "generate_single_knockout",
    "get_default_rng",
    "scheduler_for",
    "set_default_rng",
]
