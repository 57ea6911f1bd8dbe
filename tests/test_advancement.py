import pytest

from leaguecompetitions import advance_from_groups, generate_group_stage
from leaguecompetitions.controllers.competition import ResultRecorder
from leaguecompetitions.exceptions import InvalidInputException
from leaguecompetitions.models.competition import (
    CompetitionFormat,
    Group,
    GroupSettings,
    Round,
)
from leaguecompetitions.ranking import group_standings


@pytest.fixture
def ranked_group(played):
    """Group whose final table is members[0], members[1], ... in order."""

    def _group(name, number, members):
        matches = [
            played(members[i], members[j], 2, 0)
            for i in range(len(members))
            for j in range(i + 1, len(members))
        ]
        return Group(
            name=name,
            group_number=number,
            participant_ids=list(reversed(members)),
            rounds=[Round(1, "Round 1", matches)],
        )

    return _group


def test_top_finishers_and_plate_in_group_order(ranked_group):
    groups = [
        ranked_group("Group A", 1, ["a1", "a2", "a3", "a4"]),
        ranked_group("Group B", 2, ["b1", "b2", "b3", "b4"]),
    ]
    knockout, plate = advance_from_groups(groups, 2, 2)
    assert knockout == ["a1", "a2", "b1", "b2"]
    assert plate == ["a3", "a4", "b3", "b4"]


def test_small_groups_contribute_fewer(ranked_group):
    groups = [
        ranked_group("Group A", 1, ["a1", "a2", "a3"]),
        ranked_group("Group B", 2, ["b1", "b2"]),
    ]
    knockout, plate = advance_from_groups(groups, 2, 2)
    assert knockout == ["a1", "a2", "b1", "b2"]
    assert plate == ["a3"]


def test_zero_counts(ranked_group):
    groups = [ranked_group("Group A", 1, ["a1", "a2", "a3"])]
    assert advance_from_groups(groups, 0, 0) == ([], [])


@pytest.mark.parametrize("top, lower", [(-1, 2), (2, -1)])
def test_negative_counts_are_rejected(ranked_group, top, lower):
    with pytest.raises(InvalidInputException):
        advance_from_groups([ranked_group("Group A", 1, ["a", "b"])], top, lower)


def test_twelve_participants_advance_six_and_six(ids):
    settings = GroupSettings(
        number_of_groups=3, top_players_advance=2, lower_players_to_plate=2
    )
    groups, _ = generate_group_stage(
        ids(12), settings, CompetitionFormat.SINGLES_GROUP_STAGE, None, "Cup",
        randomize=False,
    )
    recorder = ResultRecorder()
    for group in groups:
        for round_ in group.rounds:
            for index in range(len(round_.matches)):
                groups = recorder.record_group_result(
                    groups, group.group_number, round_.round_number, index, 3, 1
                )

    knockout, plate = advance_from_groups(groups, 2, 2)
    assert len(knockout) == 6
    assert len(plate) == 6
    assert set(knockout).isdisjoint(plate)
    assert sorted(knockout + plate) == sorted(ids(12))


def test_group_standings_keyed_by_name(ranked_group):
    groups = [
        ranked_group("Group A", 1, ["a1", "a2"]),
        ranked_group("Group B", 2, ["b1", "b2"]),
    ]
    tables = group_standings(groups)
    assert list(tables) == ["Group A", "Group B"]
    assert tables["Group B"][0].participant_id == "b1"
