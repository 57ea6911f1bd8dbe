import pytest

from leaguecompetitions import generate_group_stage
from leaguecompetitions.exceptions import (
    DuplicateParticipantException,
    InsufficientParticipantsException,
    InvalidGroupSettingsException,
)
from leaguecompetitions.generation.group_stage import distribute, group_label
from leaguecompetitions.models.competition import (
    CompetitionFormat,
    CompetitionStatus,
    GroupSettings,
)


def _stage(participants, settings, fmt=CompetitionFormat.SINGLES_GROUP_STAGE, **kwargs):
    return generate_group_stage(
        participants, settings, fmt, "season-1", "Summer Cup", **kwargs
    )


def test_twelve_participants_in_three_groups(ids):
    settings = GroupSettings(
        number_of_groups=3, top_players_advance=2, lower_players_to_plate=2
    )
    groups, plate = _stage(ids(12), settings, randomize=False)

    assert [g.name for g in groups] == ["Group A", "Group B", "Group C"]
    assert [g.group_number for g in groups] == [1, 2, 3]
    for group in groups:
        assert group.size == 4
        assert len(group.rounds) == 3
        assert len(group.matches) == 6
        assert all(set(m.participant_ids) <= set(group.participant_ids) for m in group.matches)
    assert plate is not None


def test_participants_are_dealt_round_the_groups(ids):
    settings = GroupSettings(number_of_groups=3)
    groups, _ = _stage(ids(12), settings, randomize=False)
    assert groups[0].participant_ids == ["P1", "P4", "P7", "P10"]
    assert groups[2].participant_ids == ["P3", "P6", "P9", "P12"]


def test_groups_partition_the_field(ids, rng):
    participants = ids(10)
    groups, _ = _stage(participants, GroupSettings(number_of_groups=3), rng=rng)

    members = [pid for g in groups for pid in g.participant_ids]
    assert sorted(members) == sorted(participants)
    assert sorted(g.size for g in groups) == [3, 3, 4]


def test_plate_shell(ids):
    groups, plate = _stage(ids(8), GroupSettings(number_of_groups=2, plate_name_suffix="Bowl"))

    assert plate.name == "Summer Cup Bowl"
    assert plate.format == CompetitionFormat.SINGLES_KNOCKOUT
    assert plate.status == CompetitionStatus.DRAFT
    assert plate.season_id == "season-1"
    assert plate.rounds == []
    assert plate.participant_ids == []


def test_doubles_plate_is_a_doubles_knockout(ids):
    _, plate = _stage(
        ids(8), GroupSettings(number_of_groups=2), CompetitionFormat.DOUBLES_GROUP_STAGE
    )
    assert plate.format == CompetitionFormat.DOUBLES_KNOCKOUT


@pytest.mark.parametrize(
    "settings",
    [
        GroupSettings(number_of_groups=2, create_plate_competition=False),
        GroupSettings(number_of_groups=2, lower_players_to_plate=0),
    ],
)
def test_no_plate_when_not_wanted(ids, settings):
    _, plate = _stage(ids(8), settings)
    assert plate is None


def test_every_group_needs_two_members(ids):
    with pytest.raises(InsufficientParticipantsException) as excinfo:
        _stage(ids(5), GroupSettings(number_of_groups=3))
    assert excinfo.value.required == 6
    assert excinfo.value.actual == 5


@pytest.mark.parametrize(
    "settings",
    [
        GroupSettings(number_of_groups=0),
        GroupSettings(top_players_advance=-1),
        GroupSettings(lower_players_to_plate=-1),
    ],
)
def test_invalid_settings(ids, settings):
    with pytest.raises(InvalidGroupSettingsException):
        _stage(ids(12), settings)


def test_duplicates_rejected():
    with pytest.raises(DuplicateParticipantException):
        _stage(["a", "b", "c", "a"], GroupSettings(number_of_groups=1))


def test_group_label():
    assert group_label(0) == "Group A"
    assert group_label(25) == "Group Z"
    assert group_label(26) == "Group 27"


def test_distribute():
    assert distribute(["a", "b", "c", "d", "e"], 2) == [["a", "c", "e"], ["b", "d"]]
