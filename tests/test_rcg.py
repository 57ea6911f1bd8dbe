import json

import pytest

from leaguecompetitions.exceptions import UnsupportedFormatException
from leaguecompetitions.models.competition import CompetitionFormat, CompetitionStatus
from leaguecompetitions.testing import RandomCompetitionGenerator, RCGConfig, ResultPattern
from leaguecompetitions.testing.rcg import (
    create_group_stage_competition,
    create_round_robin_competition,
    create_small_competition,
)


def test_small_knockout_is_played_through():
    data = create_small_competition(10, seed=5).generate_complete_competition()
    competition = data["competition"]

    assert competition.status == CompetitionStatus.COMPLETED
    assert all(r.is_completed for r in competition.rounds)
    assert data["champion"] in competition.participant_ids
    assert data["validation_report"]["violations"] == []


def test_same_seed_gives_same_competition():
    first = create_small_competition(12, seed=99).generate_complete_competition()
    second = create_small_competition(12, seed=99).generate_complete_competition()
    assert first["champion"] == second["champion"]
    assert first["competition"].rounds == second["competition"].rounds


def test_round_robin_standings():
    data = create_round_robin_competition(6, seed=1).generate_complete_competition()
    standings = data["standings"]

    assert len(standings) == 6
    assert sum(s.played for s in standings) == 2 * 15
    assert data["champion"] == standings[0].participant_id


def test_group_stage_with_plate():
    data = create_group_stage_competition(16, seed=3).generate_complete_competition()
    competition = data["competition"]
    plate = data["plate_competition"]

    assert len(competition.groups) == 4
    assert all(g.is_completed for g in competition.groups)
    assert competition.plate_competition_id == plate.id
    assert len(plate.participant_ids) == 8
    assert data["plate_champion"] in plate.participant_ids
    assert data["champion"] not in plate.participant_ids
    assert data["validation_report"]["violations"] == []
    assert data["knockout_report"]["violations"] == []


def test_doubles_group_stage():
    data = create_group_stage_competition(
        16, seed=4, doubles=True
    ).generate_complete_competition()
    competition = data["competition"]
    assert competition.format == CompetitionFormat.DOUBLES_GROUP_STAGE
    assert data["champion"] in {t.id for t in competition.doubles_teams}


@pytest.mark.parametrize("pattern", list(ResultPattern))
def test_result_patterns_never_draw_knockouts(pattern):
    config = RCGConfig(num_participants=9, result_pattern=pattern, seed=8)
    data = RandomCompetitionGenerator(config).generate_complete_competition()
    for round_ in data["competition"].rounds:
        for match in round_.matches:
            assert match.winner_id is not None


def test_swiss_is_not_generated():
    config = RCGConfig(num_participants=8, competition_format=CompetitionFormat.SWISS)
    with pytest.raises(UnsupportedFormatException):
        RandomCompetitionGenerator(config).generate_complete_competition()


def test_export_json_format():
    generator = create_group_stage_competition(12, seed=2)
    data = generator.generate_complete_competition()
    exported = json.loads(generator.export_json_format(data))

    assert exported["competition_config"]["num_participants"] == 12
    assert exported["competition"]["id"] == data["competition"].id
    assert set(exported["group_standings"]) == {g.name for g in data["competition"].groups}
    assert exported["champion"] == data["champion"]
