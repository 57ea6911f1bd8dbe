"""Validation utilities for League Competitions.

This module provides reusable input checks with consistent error handling.
Each ``validate_*`` function returns a `ValidationResult`; the matching
``require_*`` function raises the appropriate `InvalidInputException`
subclass instead.
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

from collections import Counter
from typing import List, Optional, Sequence

from leaguecompetitions.constants import MIN_GROUP_SIZE, MIN_PARTICIPANTS
from leaguecompetitions.exceptions import (
    DuplicateParticipantException,
    InsufficientParticipantsException,
    InvalidGroupSettingsException,
)
from leaguecompetitions.type_hints import ParticipantId
from leaguecompetitions.utils import setup_logger

logger = setup_logger(__name__)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        duplicates: Participant ids that appeared more than once
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        duplicates: Optional[List[ParticipantId]] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.duplicates = duplicates or []

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Participant Validation ==========


def find_duplicates(participants: Sequence[ParticipantId]) -> List[ParticipantId]:
    """Return the ids that occur more than once, in first-seen order."""
    counts = Counter(participants)
    seen = set()
    duplicates = []
    for participant_id in participants:
        if counts[participant_id] > 1 and participant_id not in seen:
            duplicates.append(participant_id)
            seen.add(participant_id)
    return duplicates


def validate_participants(
    participants: Optional[Sequence[ParticipantId]],
    minimum: int = MIN_PARTICIPANTS,
) -> ValidationResult:
    """Validate a participant list handed to a builder.

    Args:
        participants: Participant ids in seed order
        minimum: Minimum number of participants required

    Returns:
        ValidationResult with validation status

    Example:
        >>> result = validate_participants(["a", "b", "a"])
        >>> result.duplicates
        ['a']
    """
    count = len(participants) if participants else 0
    if count < minimum:
        return ValidationResult(
            is_valid=False,
            error_message=f"Need at least {minimum} participants, got {count}",
        )

    duplicates = find_duplicates(participants)
    if duplicates:
        return ValidationResult(
            is_valid=False,
            error_message=f"Duplicate participant ids: {duplicates}",
            duplicates=duplicates,
        )

    return ValidationResult(is_valid=True)


def require_valid_participants(
    participants: Optional[Sequence[ParticipantId]],
    minimum: int = MIN_PARTICIPANTS,
) -> List[ParticipantId]:
    """Validate ``participants`` and return them as a new list.

    Raises:
        InsufficientParticipantsException: If fewer than ``minimum`` ids
        DuplicateParticipantException: If any id appears more than once
    """
    result = validate_participants(participants, minimum)
    if not result:
        logger.error(result.error_message)
        if result.duplicates:
            raise DuplicateParticipantException(result.error_message)
        raise InsufficientParticipantsException(
            minimum, len(participants) if participants else 0
        )
    return list(participants)


def require_unique_scope(participants: Sequence[ParticipantId]) -> List[ParticipantId]:
    """Check a ranking scope for duplicates; an empty scope is allowed."""
    duplicates = find_duplicates(participants)
    if duplicates:
        message = f"Duplicate participant ids in ranking scope: {duplicates}"
        logger.error(message)
        raise DuplicateParticipantException(message)
    return list(participants)


# ========== Group Settings Validation ==========


def validate_group_counts(
    number_of_groups: int,
    top_players_advance: int,
    lower_players_to_plate: int,
) -> ValidationResult:
    """Validate the numeric fields of a group stage configuration."""
    if number_of_groups < 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of groups must be at least 1, got {number_of_groups}",
        )
    if top_players_advance < 0:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Top players advancing cannot be negative, got {top_players_advance}"
            ),
        )
    if lower_players_to_plate < 0:
        return ValidationResult(
            is_valid=False,
            error_message=(
                "Lower players to plate cannot be negative, "
                f"got {lower_players_to_plate}"
            ),
        )
    return ValidationResult(is_valid=True)


def require_valid_group_counts(
    number_of_groups: int,
    top_players_advance: int,
    lower_players_to_plate: int,
) -> None:
    """Raise `InvalidGroupSettingsException` when group counts are out of range."""
    result = validate_group_counts(
        number_of_groups, top_players_advance, lower_players_to_plate
    )
    if not result:
        logger.error(result.error_message)
        raise InvalidGroupSettingsException(result.error_message)


def minimum_group_stage_participants(number_of_groups: int) -> int:
    """Smallest field that gives every group at least two members."""
    return number_of_groups * MIN_GROUP_SIZE
