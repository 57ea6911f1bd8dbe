"""Competition schedule management.

This module drives schedule generation for a whole competition: building
the bracket or round robin, generating the group stage, and turning final
group tables into the main and plate knockouts.
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

import random
from dataclasses import replace
from typing import List, Optional, Protocol, Tuple

from leaguecompetitions.constants import MIN_PARTICIPANTS
from leaguecompetitions.exceptions import (
    CompetitionStateException,
    InvalidGroupSettingsException,
)
from leaguecompetitions.generation import generate_single_knockout, scheduler_for
from leaguecompetitions.models.competition import Competition, CompetitionStatus
from leaguecompetitions.ranking import advance_from_groups
from leaguecompetitions.type_hints import ParticipantId
from leaguecompetitions.utils import setup_logger

logger = setup_logger(__name__)


class CompetitionStore(Protocol):
    """Persistence capability owned by the caller.

    The builder only reads from it; saving what the builder returns is the
    caller's responsibility.
    """

    def save_competition(self, competition: Competition) -> None: ...

    def create_competition(self, competition: Competition) -> None: ...

    def read_competitions_by_season(
        self, season_id: Optional[str]
    ) -> List[Competition]: ...


def find_plate_competition(
    store: CompetitionStore, competition: Competition
) -> Optional[Competition]:
    """Look up the plate competition linked to ``competition``, if any."""
    if competition.plate_competition_id is None:
        return None
    for candidate in store.read_competitions_by_season(competition.season_id):
        if candidate.id == competition.plate_competition_id:
            return candidate
    logger.warning(
        f"Plate competition {competition.plate_competition_id} of "
        f"'{competition.name}' not found"
    )
    return None


class CompetitionBuilder:
    """Generates schedules for competitions.

    This class is responsible for:
    - Building knockout brackets and round robins for a competition
    - Generating group stages and their plate competition shells
    - Promoting group finishers into the main and plate knockouts

    Every method returns new `Competition` values; the inputs are left
    untouched. Callers must not run two generations for the same
    competition concurrently and apply both results.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the builder.

        Args:
            rng: Random source for shuffles (module default when None)
        """
        self.rng = rng

    def generate_bracket(
        self, competition: Competition, randomize: bool = True
    ) -> Competition:
        """Generate rounds for a knockout or round robin competition.

        Returns:
            Copy of ``competition`` with new rounds and status IN_PROGRESS

        Raises:
            CompetitionStateException: If the competition is a group stage
            InvalidInputException: If the entrants are invalid
            UnsupportedFormatException: If the format has no generator
        """
        if competition.format.is_group_stage:
            raise CompetitionStateException(
                f"'{competition.name}' is a group stage; generate groups instead"
            )

        entrants = competition.entrant_ids()
        schedule = scheduler_for(competition.format).build_schedule(
            entrants, competition, randomize, self.rng
        )
        logger.info(
            f"Generated {len(schedule.rounds)} rounds with {schedule.match_count} "
            f"matches for '{competition.name}' "
            f"{'(random)' if randomize else '(ordered)'}"
        )
        return replace(
            competition, rounds=schedule.rounds, status=CompetitionStatus.IN_PROGRESS
        )

    def generate_groups(
        self, competition: Competition, randomize: bool = True
    ) -> Tuple[Competition, Optional[Competition]]:
        """Generate the group stage of a group stage competition.

        Returns:
            Tuple of (updated competition, plate competition shell or None).
            The updated competition is linked to the shell through
            ``plate_competition_id``; the caller must persist the shell.

        Raises:
            CompetitionStateException: If the format is not a group stage
            InvalidInputException: If entrants or group settings are invalid
        """
        if not competition.format.is_group_stage:
            raise CompetitionStateException(
                f"'{competition.name}' is not a group stage competition"
            )

        schedule = scheduler_for(competition.format).build_schedule(
            competition.entrant_ids(), competition, randomize, self.rng
        )
        plate = schedule.plate_competition
        updated = replace(
            competition,
            groups=schedule.groups,
            status=CompetitionStatus.IN_PROGRESS,
            plate_competition_id=plate.id if plate else competition.plate_competition_id,
        )
        logger.info(
            f"Generated {len(schedule.groups)} groups with {schedule.match_count} "
            f"total matches for '{competition.name}'"
        )
        return updated, plate

    def finalize_groups(
        self,
        competition: Competition,
        plate_competition: Optional[Competition] = None,
    ) -> Tuple[Competition, Optional[Competition]]:
        """Build the main and plate knockouts from the group tables.

        Promoted participants are seeded in group-then-position order
        without shuffling. The main bracket is only built with at least two
        promoted participants; the plate bracket only with at least two plate
        participants and a linked ``plate_competition``.

        Returns:
            Tuple of (updated competition, updated plate competition or the
            ``plate_competition`` passed in)

        Raises:
            InvalidGroupSettingsException: If no group settings are configured
            CompetitionStateException: If ``plate_competition`` is not the
                linked plate
        """
        settings = competition.group_settings
        if settings is None:
            logger.error(f"No group settings configured for '{competition.name}'")
            raise InvalidGroupSettingsException(
                f"No group settings configured for '{competition.name}'"
            )
        if (
            plate_competition is not None
            and plate_competition.id != competition.plate_competition_id
        ):
            raise CompetitionStateException(
                f"'{plate_competition.name}' is not the plate of '{competition.name}'"
            )

        knockout_ids, plate_ids = advance_from_groups(
            competition.groups,
            settings.top_players_advance,
            settings.lower_players_to_plate,
        )

        rounds = competition.rounds
        if len(knockout_ids) >= MIN_PARTICIPANTS:
            rounds = generate_single_knockout(knockout_ids, randomize=False)
        else:
            logger.warning(
                f"Only {len(knockout_ids)} participants advanced; no main knockout built"
            )

        updated_plate = plate_competition
        if len(plate_ids) >= MIN_PARTICIPANTS and plate_competition is not None:
            updated_plate = self._fill_plate(competition, plate_competition, plate_ids)

        updated = replace(
            competition, rounds=rounds, status=CompetitionStatus.IN_PROGRESS
        )
        logger.info(
            f"Knockouts created for '{competition.name}': main {len(knockout_ids)}, "
            f"plate {len(plate_ids)}"
        )
        return updated, updated_plate

    def _fill_plate(
        self,
        competition: Competition,
        plate_competition: Competition,
        plate_ids: List[ParticipantId],
    ) -> Competition:
        if competition.format.is_doubles:
            wanted = set(plate_ids)
            entrants = {
                "doubles_teams": [
                    t for t in competition.doubles_teams if t.id in wanted
                ]
            }
        else:
            entrants = {"participant_ids": list(plate_ids)}

        return replace(
            plate_competition,
            rounds=generate_single_knockout(plate_ids, randomize=False),
            status=CompetitionStatus.IN_PROGRESS,
            **entrants,
        )


def describe_schedule(competition: Competition) -> str:
    """One-line summary of a competition's generated schedule."""
    if competition.groups:
        return (
            f"{len(competition.groups)} groups with "
            f"{sum(len(g.matches) for g in competition.groups)} total matches"
        )
    return (
        f"{len(competition.rounds)} rounds with "
        f"{sum(len(r.matches) for r in competition.rounds)} matches"
    )
