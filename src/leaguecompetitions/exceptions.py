"""Exceptions for use in League Competitions"""

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


# ========== Base Application Exception ==========


class LeagueCompetitionsException(Exception):
    """Base exception for all League Competitions errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every engine error with a single except clause.
    """

    pass


# ========== Generation Exceptions ==========


class GenerationException(LeagueCompetitionsException):
    """Base exception for schedule and bracket generation errors."""

    pass


class InvalidInputException(GenerationException):
    """Raised when the participants or settings handed to a builder are invalid."""

    pass


class DuplicateParticipantException(InvalidInputException):
    """Raised when the same participant id is supplied more than once."""

    pass


class InsufficientParticipantsException(InvalidInputException):
    """Raised when there are too few participants for the requested structure."""

    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(f"Need at least {required} participants, got {actual}")


class InvalidGroupSettingsException(InvalidInputException):
    """Raised when group stage settings are out of range."""

    pass


class UnsupportedFormatException(GenerationException):
    """Raised when a competition format has no automatic generator."""

    pass


# ========== Result Exceptions ==========


class ResultException(LeagueCompetitionsException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., a drawn knockout match)."""

    pass


class MatchNotFoundException(ResultException):
    """Raised when a requested round or match does not exist."""

    pass


# ========== Competition Exceptions ==========


class CompetitionException(LeagueCompetitionsException):
    """Base exception for competition-level errors."""

    pass


class CompetitionStateException(CompetitionException):
    """Raised when a competition is in an invalid state for the requested operation."""

    pass
