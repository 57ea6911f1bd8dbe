import random

import pytest

from leaguecompetitions.models.competition import (
    Match,
    MatchResult,
    ParticipantSlot,
)


@pytest.fixture
def rng():
    return random.Random(20250101)


@pytest.fixture
def ids():
    def _ids(count, prefix="P"):
        return [f"{prefix}{i}" for i in range(1, count + 1)]

    return _ids


@pytest.fixture
def played():
    """Build a played match between two participants."""

    def _played(first, second, score1, score2):
        winner = None
        if score1 > score2:
            winner = first
        elif score2 > score1:
            winner = second
        return Match(
            slot1=ParticipantSlot(first),
            slot2=ParticipantSlot(second),
            result=MatchResult(score1, score2),
            winner_id=winner,
        )

    return _played
