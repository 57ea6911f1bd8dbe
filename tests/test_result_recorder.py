import pytest

from leaguecompetitions import generate_group_stage, generate_round_robin, generate_single_knockout
from leaguecompetitions.controllers.competition import ResultRecorder
from leaguecompetitions.exceptions import InvalidResultException, MatchNotFoundException
from leaguecompetitions.models.competition import (
    CompetitionFormat,
    GroupSettings,
    ParticipantSlot,
    WinnerOfSlot,
)


@pytest.fixture
def recorder():
    return ResultRecorder()


@pytest.fixture
def four_bracket(ids):
    # Round 1: P1 v P4, P2 v P3
    return generate_single_knockout(ids(4), randomize=False)


def test_knockout_winners_move_into_next_round(recorder, four_bracket):
    rounds = recorder.record_result(four_bracket, 1, 0, 3, 1, knockout=True)
    rounds = recorder.record_result(rounds, 1, 1, 1, 3, knockout=True)

    final = rounds[1].matches[0]
    assert final.slot1 == ParticipantSlot("P1")
    assert final.slot2 == ParticipantSlot("P3")
    assert rounds[0].matches[0].winner_id == "P1"
    assert rounds[0].matches[1].loser_id == "P2"


def test_input_rounds_are_not_modified(recorder, four_bracket):
    recorder.record_result(four_bracket, 1, 0, 3, 1, knockout=True)
    assert four_bracket[0].matches[0].result is None
    assert four_bracket[1].matches[0].slot1 == WinnerOfSlot(1, 0)


def test_final_result_decides_the_winner(recorder, four_bracket):
    rounds = recorder.record_result(four_bracket, 1, 0, 3, 1, knockout=True)
    rounds = recorder.record_result(rounds, 1, 1, 3, 0, knockout=True)
    rounds = recorder.record_result(rounds, 2, 0, 2, 4, knockout=True)
    assert rounds[1].matches[0].winner_id == "P2"
    assert rounds[1].is_completed


def test_knockout_draw_is_rejected(recorder, four_bracket):
    with pytest.raises(InvalidResultException):
        recorder.record_result(four_bracket, 1, 0, 2, 2, knockout=True)


def test_round_robin_draw_has_no_winner(recorder):
    rounds = generate_round_robin(["A", "B"], randomize=False)
    rounds = recorder.record_result(rounds, 1, 0, 1, 1)
    match = rounds[0].matches[0]
    assert match.result.is_draw
    assert match.winner_id is None


def test_bye_match_cannot_take_a_result(recorder, ids):
    rounds = generate_single_knockout(ids(5), randomize=False)
    with pytest.raises(InvalidResultException):
        recorder.record_result(rounds, 1, 0, 1, 0, knockout=True)


def test_semi_between_walkover_winners_is_playable(recorder, ids):
    rounds = generate_single_knockout(ids(5), randomize=False)
    rounds = recorder.record_result(rounds, 2, 1, 0, 2, knockout=True)
    assert rounds[2].matches[0].slot2 == ParticipantSlot("P3")


def test_unresolved_match_is_rejected(recorder, four_bracket):
    with pytest.raises(InvalidResultException):
        recorder.record_result(four_bracket, 2, 0, 1, 0, knockout=True)


def test_negative_score_is_rejected(recorder, four_bracket):
    with pytest.raises(InvalidResultException):
        recorder.record_result(four_bracket, 1, 0, -1, 2, knockout=True)


@pytest.mark.parametrize("round_number, match_index", [(3, 0), (1, 5), (1, -1)])
def test_missing_match(recorder, four_bracket, round_number, match_index):
    with pytest.raises(MatchNotFoundException):
        recorder.record_result(four_bracket, round_number, match_index, 1, 0)


def test_changing_a_result_after_the_next_round_is_played(recorder, four_bracket):
    rounds = recorder.record_result(four_bracket, 1, 0, 3, 1, knockout=True)
    rounds = recorder.record_result(rounds, 1, 1, 3, 1, knockout=True)
    rounds = recorder.record_result(rounds, 2, 0, 3, 1, knockout=True)

    with pytest.raises(InvalidResultException):
        recorder.record_result(rounds, 1, 0, 1, 3, knockout=True)
    with pytest.raises(InvalidResultException):
        recorder.undo_result(rounds, 1, 0, knockout=True)


def test_undo_restores_the_placeholder(recorder, four_bracket):
    rounds = recorder.record_result(four_bracket, 1, 0, 3, 1, knockout=True)
    rounds = recorder.undo_result(rounds, 1, 0, knockout=True)

    assert rounds[0].matches[0].result is None
    assert rounds[0].matches[0].winner_id is None
    assert rounds[1].matches[0].slot1 == WinnerOfSlot(1, 0)


def test_walkover_cannot_be_undone(recorder, ids):
    rounds = generate_single_knockout(ids(3), randomize=False)
    with pytest.raises(InvalidResultException):
        recorder.undo_result(rounds, 1, 0, knockout=True)


def test_undo_unplayed_match_is_a_no_op(recorder, four_bracket):
    rounds = recorder.undo_result(four_bracket, 1, 0, knockout=True)
    assert rounds == list(four_bracket)


def test_record_group_result(recorder, ids):
    groups, _ = generate_group_stage(
        ids(6),
        GroupSettings(number_of_groups=2),
        CompetitionFormat.SINGLES_GROUP_STAGE,
        None,
        "Cup",
        randomize=False,
    )
    updated = recorder.record_group_result(groups, 2, 1, 0, 4, 2)

    assert updated[1].rounds[0].matches[0].result.score1 == 4
    assert updated[0].rounds[0].matches[0].result is None
    assert groups[1].rounds[0].matches[0].result is None


def test_record_result_for_unknown_group(recorder):
    with pytest.raises(MatchNotFoundException):
        recorder.record_group_result([], 1, 1, 0, 1, 0)
