"""Structural validation of generated schedules.

This module checks knockout brackets, round robins and group stages against
the properties every generated schedule must have, and reports each check
as a separate criterion.
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

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Dict, Iterable, List, Sequence

from leaguecompetitions.generation.knockout import next_power_of_two
from leaguecompetitions.generation.round_robin import number_of_rounds
from leaguecompetitions.models.competition import (
    ByeSlot,
    Competition,
    Group,
    Match,
    ParticipantSlot,
    Round,
)
from leaguecompetitions.type_hints import ParticipantId
from leaguecompetitions.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a structural check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass
class CriterionResult:
    """Result of validating a single structural criterion."""

    criterion: str
    status: CriterionStatus
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status != CriterionStatus.VIOLATION


@dataclass
class ValidationReport:
    """Complete validation report for one schedule."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0

    @property
    def is_valid(self) -> bool:
        return self.overall_status != CriterionStatus.VIOLATION


def _check(criterion: str, problems: List[str], ok_message: str) -> CriterionResult:
    if problems:
        return CriterionResult(
            criterion=criterion,
            status=CriterionStatus.VIOLATION,
            description="; ".join(problems[:5]),
            details={"problem_count": len(problems)},
        )
    return CriterionResult(
        criterion=criterion, status=CriterionStatus.COMPLIANT, description=ok_message
    )


def _participants_in(matches: Iterable[Match]) -> List[ParticipantId]:
    return [pid for match in matches for pid in match.participant_ids]


class StructureValidator:
    """Validates generated schedules."""

    def validate_competition(self, competition: Competition) -> ValidationReport:
        """Validate whatever schedule ``competition`` currently holds."""
        entrants = competition.entrant_ids()
        if competition.groups:
            return self.validate_group_stage(entrants, competition.groups)
        if competition.format.is_knockout:
            return self.validate_knockout(entrants, competition.rounds)
        return self.validate_round_robin(entrants, competition.rounds)

    def validate_knockout(
        self, participants: Sequence[ParticipantId], rounds: Sequence[Round]
    ) -> ValidationReport:
        """Validate a single-elimination bracket for ``participants``."""
        results = [
            self._check_no_self_matches(rounds),
            self._check_opening_round(participants, rounds),
            self._check_round_count(participants, rounds),
            self._check_bracket_halves(rounds),
            self._check_byes_resolved(rounds),
        ]
        return self._build_report("knockout", results)

    def validate_round_robin(
        self, participants: Sequence[ParticipantId], rounds: Sequence[Round]
    ) -> ValidationReport:
        """Validate a round robin schedule for ``participants``."""
        results = [
            self._check_no_self_matches(rounds),
            self._check_once_per_round(rounds),
            self._check_all_pairs_once(participants, rounds),
            self._check_round_robin_length(participants, rounds),
        ]
        return self._build_report("round robin", results)

    def validate_group_stage(
        self, participants: Sequence[ParticipantId], groups: Sequence[Group]
    ) -> ValidationReport:
        """Validate group membership and every group's round robin."""
        results = [
            self._check_partition(participants, groups),
            self._check_balanced_groups(groups),
        ]
        for group in groups:
            report = self.validate_round_robin(group.participant_ids, group.rounds)
            for result in report.criteria_results:
                result.criterion = f"{group.name}: {result.criterion}"
                results.append(result)
        return self._build_report("group stage", results)

    # ========== Shared checks ==========

    def _check_no_self_matches(self, rounds: Sequence[Round]) -> CriterionResult:
        problems = [
            f"{match} in {round_.name}"
            for round_ in rounds
            for match in round_.matches
            if len(match.participant_ids) == 2
            and match.participant_ids[0] == match.participant_ids[1]
        ]
        return _check("No self matches", problems, "Nobody is paired with themselves")

    def _check_once_per_round(self, rounds: Sequence[Round]) -> CriterionResult:
        problems = []
        for round_ in rounds:
            counts = Counter(_participants_in(round_.matches))
            problems.extend(
                f"{pid} plays {count} times in {round_.name}"
                for pid, count in counts.items()
                if count > 1
            )
        return _check(
            "Once per round", problems, "Every participant plays at most once per round"
        )

    # ========== Knockout checks ==========

    def _check_opening_round(
        self, participants: Sequence[ParticipantId], rounds: Sequence[Round]
    ) -> CriterionResult:
        if not rounds:
            return _check("Opening round", ["No rounds generated"], "")
        counts = Counter(_participants_in(rounds[0].matches))
        problems = [f"{pid} missing" for pid in participants if counts[pid] == 0]
        problems.extend(f"{pid} appears {c} times" for pid, c in counts.items() if c > 1)
        entered = set(participants)
        problems.extend(f"{pid} is not entered" for pid in counts if pid not in entered)
        return _check(
            "Opening round", problems, "Every participant appears exactly once"
        )

    def _check_round_count(
        self, participants: Sequence[ParticipantId], rounds: Sequence[Round]
    ) -> CriterionResult:
        expected = int(math.log2(next_power_of_two(len(participants))))
        problems = []
        if len(rounds) != expected:
            problems.append(f"Expected {expected} rounds, got {len(rounds)}")
        if rounds and len(rounds[-1].matches) != 1:
            problems.append(f"Final has {len(rounds[-1].matches)} matches")
        return _check("Round count", problems, f"{expected} rounds ending in one final")

    def _check_bracket_halves(self, rounds: Sequence[Round]) -> CriterionResult:
        problems = [
            f"{current.name} has {len(current.matches)} matches after "
            f"{len(previous.matches)} in {previous.name}"
            for previous, current in zip(rounds, rounds[1:])
            if len(current.matches) * 2 != len(previous.matches)
        ]
        return _check("Bracket halves", problems, "Each round halves the field")

    def _check_byes_resolved(self, rounds: Sequence[Round]) -> CriterionResult:
        problems = []
        for round_ in rounds:
            for match in round_.matches:
                if isinstance(match.slot1, ByeSlot) and isinstance(match.slot2, ByeSlot):
                    problems.append(f"Bye against bye in {round_.name}")
                elif match.is_bye and not match.is_walkover:
                    problems.append(f"Unresolved bye {match} in {round_.name}")
        return _check("Byes", problems, "Every bye is resolved as a walkover")

    # ========== Round robin checks ==========

    def _check_all_pairs_once(
        self, participants: Sequence[ParticipantId], rounds: Sequence[Round]
    ) -> CriterionResult:
        meetings = Counter(
            frozenset(match.participant_ids)
            for round_ in rounds
            for match in round_.matches
            if all(isinstance(s, ParticipantSlot) for s in match.slots)
        )
        problems = []
        for first, second in combinations(participants, 2):
            count = meetings.get(frozenset((first, second)), 0)
            if count != 1:
                problems.append(f"{first} and {second} meet {count} times")
        return _check("All pairs once", problems, "Every pair meets exactly once")

    def _check_round_robin_length(
        self, participants: Sequence[ParticipantId], rounds: Sequence[Round]
    ) -> CriterionResult:
        expected = number_of_rounds(len(participants))
        problems = []
        if len(rounds) != expected:
            problems.append(f"Expected {expected} rounds, got {len(rounds)}")
        return _check("Round robin length", problems, f"{expected} rounds")

    # ========== Group checks ==========

    def _check_partition(
        self, participants: Sequence[ParticipantId], groups: Sequence[Group]
    ) -> CriterionResult:
        counts = Counter(pid for g in groups for pid in g.participant_ids)
        problems = [f"{pid} is in no group" for pid in participants if counts[pid] == 0]
        problems.extend(
            f"{pid} is in {count} groups" for pid, count in counts.items() if count > 1
        )
        return _check("Partition", problems, "Every participant is in exactly one group")

    def _check_balanced_groups(self, groups: Sequence[Group]) -> CriterionResult:
        sizes = [group.size for group in groups]
        problems = []
        if sizes and max(sizes) - min(sizes) > 1:
            problems.append(f"Group sizes {sizes} differ by more than one")
        return _check("Balanced groups", problems, "Group sizes differ by at most one")

    def _build_report(
        self, kind: str, results: List[CriterionResult]
    ) -> ValidationReport:
        violations = [r for r in results if r.status == CriterionStatus.VIOLATION]
        compliant_count = sum(
            1 for r in results if r.status == CriterionStatus.COMPLIANT
        )
        overall_status = (
            CriterionStatus.VIOLATION if violations else CriterionStatus.COMPLIANT
        )
        if violations:
            summary = f"{kind.capitalize()} invalid - {len(violations)} criteria failed"
        else:
            summary = f"{kind.capitalize()} satisfies all {len(results)} criteria"

        logger.info(f"Structure validation complete: {summary}")
        return ValidationReport(
            total_criteria=len(results),
            compliant_count=compliant_count,
            violations=violations,
            overall_status=overall_status,
            summary=summary,
            criteria_results=results,
        )


def create_structure_validator() -> StructureValidator:
    """Factory function to create a structure validator."""
    return StructureValidator()
