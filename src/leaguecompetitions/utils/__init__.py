"""Shared utilities for League Competitions."""

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

import logging
import os
import sys

from leaguecompetitions.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

_ROOT_LOGGER_NAME = "leaguecompetitions"
_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, configuring the package logger once.

    The package root logger writes to stderr. Its level comes from the
    ``LEAGUECOMPETITIONS_LOG_LEVEL`` environment variable and defaults to
    WARNING, so the engine is quiet unless asked otherwise.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The configured `logging.Logger`.
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(
            _resolve_level(os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        )
    return logging.getLogger(name)


def set_log_level(level_name: str) -> None:
    """Change the package log level at runtime (e.g. from the CLI)."""
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(_resolve_level(level_name))


__all__ = ["setup_logger", "set_log_level"]
