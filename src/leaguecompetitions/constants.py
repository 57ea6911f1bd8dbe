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

# --- Constants ---
# Minimum entrants for any generated structure
MIN_PARTICIPANTS = 2

# Minimum members per group in a group stage
MIN_GROUP_SIZE = 2

# League table points (fixed scoring rule)
WIN_POINTS = 2
DRAW_POINTS = 1
LOSS_POINTS = 0

# Slot type tags (for serialization)
SLOT_PARTICIPANT = "participant"
SLOT_BYE = "bye"
SLOT_WINNER_OF = "winner_of"

# Display markers
BYE_LABEL = "BYE"
WALKOVER_LABEL = "W/O"
TBD_LABEL = "TBD"

# Knockout round labels, keyed by distance from the final
ROUND_FINAL = "Final"
ROUND_SEMI_FINAL = "Semi-Final"
ROUND_QUARTER_FINAL = "Quarter-Final"
ROUND_OF_N = "Round of {size}"
KNOCKOUT_ROUND_LABELS = {
    0: ROUND_FINAL,
    1: ROUND_SEMI_FINAL,
    2: ROUND_QUARTER_FINAL,
}
# Brackets at least this big always open with "Round of <bracket size>"
OPENING_ROUND_MIN_BRACKET = 8

# Round robin round label
ROUND_ROBIN_LABEL = "Round {number}"

# Group stage defaults
GROUP_LABEL_PREFIX = "Group"
DEFAULT_NUMBER_OF_GROUPS = 4
DEFAULT_TOP_PLAYERS_ADVANCE = 2
DEFAULT_LOWER_PLAYERS_TO_PLATE = 2
DEFAULT_PLATE_NAME_SUFFIX = "Plate"

# Default competition name
DEFAULT_COMPETITION_NAME = "Untitled Competition"

# Environment variable controlling the package log level
LOG_LEVEL_ENV_VAR = "LEAGUECOMPETITIONS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
