import pytest

from courtpairing.exceptions import CourtNotFoundException, InvalidScoreException
from courtpairing.models.enums import ScoreKind
from courtpairing.models.match import CourtResult, MatchScorecard, SetScore


def test_valid_sets_pass_validation():
    SetScore(6, 4).validate()
    SetScore(7, 6, is_tiebreak=True, tiebreak_home=7, tiebreak_away=5).validate()
    SetScore(10, 7, set_number=3, is_match_tiebreak=True).validate()


@pytest.mark.parametrize(
    "set_score",
    [
        SetScore(6, 5),
        SetScore(8, 6),
        SetScore(6, 4, set_number=4),
        SetScore(6, 4, set_number=0),
        SetScore(10, 8, set_number=2, is_match_tiebreak=True),
        SetScore(10, 9, set_number=3, is_match_tiebreak=True),
        SetScore(6, 4, tiebreak_home=7, tiebreak_away=3),
        SetScore(7, 6, tiebreak_home=7),
        SetScore(7, 6, tiebreak_home=-1, tiebreak_away=7),
    ],
)
def test_invalid_sets_are_rejected(set_score):
    with pytest.raises(InvalidScoreException):
        set_score.validate(court_number=2)


def test_rejection_names_court_and_set():
    with pytest.raises(InvalidScoreException) as exc_info:
        SetScore(6, 5, set_number=2).validate(court_number=3)
    assert exc_info.value.court_number == 3
    assert exc_info.value.set_number == 2
    assert "please correct this set score" in str(exc_info.value)


def test_kind():
    assert SetScore(6, 0).kind is ScoreKind.REGULAR
    assert SetScore(6, 7).kind is ScoreKind.TIEBREAK
    assert SetScore(11, 9, set_number=3, is_match_tiebreak=True).kind is (
        ScoreKind.MATCH_TIEBREAK
    )
    assert SetScore(5, 5).kind is ScoreKind.INVALID


def test_from_row_derives_tiebreak_flag():
    row = {
        "set_number": 1,
        "home_games": 7,
        "away_games": 6,
        "tiebreak_home": 7,
        "tiebreak_away": 2,
    }
    set_score = SetScore.from_dict(row)
    assert set_score.is_tiebreak
    assert set_score.has_tiebreak_points
    assert set_score.to_dict()["tiebreak_away"] == 2

    plain = SetScore.from_dict({"home_games": 6, "away_games": 2})
    assert not plain.is_tiebreak
    assert plain.set_number == 1


def test_court_result_derives_won():
    court = CourtResult(
        1, [SetScore(3, 6, set_number=1), SetScore(2, 6, set_number=2)], "a", "b"
    )
    assert not court.won
    assert court.is_complete
    assert court.has_decided_set

    data = court.to_dict()
    assert data["won"] is False
    assert CourtResult.from_dict(data).sets == court.sets


def test_scorecard_courts():
    card = MatchScorecard(match_id="m", team_id="t")
    card.add_court(2, "c", "d")
    card.add_court(1, "a", "b")
    card.add_court(3)
    assert [c.court_number for c in card.court_results] == [1, 2, 3]
    assert card.scored_courts == []

    with pytest.raises(CourtNotFoundException):
        card.get_court(4)

    restored = MatchScorecard.from_dict(card.to_dict())
    assert restored.get_court(2).player1_id == "c"


def test_tiebreak_flag_must_match_score():
    with pytest.raises(InvalidScoreException):
        SetScore(6, 3, is_tiebreak=True).validate(court_number=1)
    with pytest.raises(InvalidScoreException):
        SetScore(7, 6).validate(court_number=1)
    with pytest.raises(InvalidScoreException):
        SetScore(11, 9, is_tiebreak=True, set_number=3, is_match_tiebreak=True).validate()
    SetScore(6, 7, is_tiebreak=True).validate()


def test_from_row_without_flag_follows_score():
    assert SetScore.from_dict({"home_games": 7, "away_games": 6}).is_tiebreak
    assert SetScore.from_dict({"home_games": "6", "away_games": "7"}).is_tiebreak
    assert not SetScore.from_dict({"home_games": 7, "away_games": 5}).is_tiebreak
    row = {"set_number": 3, "home_games": 10, "away_games": 8, "is_match_tiebreak": True}
    assert not SetScore.from_dict(row).is_tiebreak


def test_non_integer_values_are_rejected():
    for set_score in (SetScore("6", 4), SetScore(6.0, 4), SetScore(True, 4)):
        with pytest.raises(InvalidScoreException):
            set_score.validate(court_number=1)


def test_from_row_normalizes_whole_numbers():
    set_score = SetScore.from_dict(
        {"set_number": "2", "home_games": " 6 ", "away_games": 3.0}
    )
    assert (set_score.set_number, set_score.home_games, set_score.away_games) == (2, 6, 3)
    set_score.validate()
