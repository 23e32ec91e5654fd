from courtpairing.models.enums import MatchOutcome, Side
from courtpairing.models.match import CourtResult, SetScore
from courtpairing.scoring.outcome import (
    are_all_sets_complete,
    calculate_court_winner,
    calculate_match_result,
    calculate_set_winner,
    calculate_total_games,
    count_sets,
    generate_score_summary,
    summarize_match,
)


def _sets(*scores):
    return [SetScore(h, a, set_number=i) for i, (h, a) in enumerate(scores, start=1)]


class _Court:
    def __init__(self, won):
        self.won = won


def test_set_winner():
    assert calculate_set_winner(6, 4) is Side.HOME
    assert calculate_set_winner(4, 6) is Side.AWAY
    assert calculate_set_winner(6, 5) is None
    assert calculate_set_winner(7, 6) is Side.HOME
    assert calculate_set_winner(6, 7) is Side.AWAY
    assert calculate_set_winner(7, 5) is Side.HOME
    assert calculate_set_winner(3, 2) is None


def test_court_winner_best_of_three():
    assert calculate_court_winner(_sets((6, 4), (4, 6), (6, 3)))
    assert not calculate_court_winner(_sets((6, 4), (4, 6), (3, 6)))
    assert calculate_court_winner(_sets((6, 2), (7, 6)))


def test_court_winner_even_split_is_not_won():
    assert not calculate_court_winner(_sets((6, 4), (4, 6)))
    assert not calculate_court_winner([])


def test_court_winner_with_match_tiebreak():
    sets = _sets((6, 4), (4, 6)) + [
        SetScore(10, 8, set_number=3, is_match_tiebreak=True)
    ]
    assert calculate_court_winner(sets)
    assert count_sets(sets) == (2, 1)


def test_incomplete_set_counts_for_nobody():
    sets = _sets((6, 4), (5, 5))
    assert count_sets(sets) == (1, 0)
    assert not are_all_sets_complete(sets)
    assert are_all_sets_complete(_sets((6, 4), (6, 1)))
    assert not are_all_sets_complete([])


def test_total_games():
    assert calculate_total_games(_sets((6, 4), (4, 6), (7, 6))) == (17, 16)
    with_match_tiebreak = _sets((6, 4), (4, 6)) + [
        SetScore(8, 10, set_number=3, is_match_tiebreak=True)
    ]
    assert calculate_total_games(with_match_tiebreak) == (10, 11)


def test_match_result_majority_of_courts():
    courts = [_Court(True), _Court(False), _Court(True)]
    assert calculate_match_result(courts) is MatchOutcome.WIN
    assert generate_score_summary(courts) == "2-1"

    courts = [_Court(True), _Court(True), _Court(False)]
    assert calculate_match_result(courts) is MatchOutcome.WIN
    assert generate_score_summary(courts) == "2-1"

    courts = [_Court(False), _Court(False), _Court(True)]
    assert calculate_match_result(courts) is MatchOutcome.LOSS
    assert generate_score_summary(courts) == "1-2"


def test_match_result_tie_is_a_result():
    courts = [_Court(True), _Court(False)]
    assert calculate_match_result(courts) is MatchOutcome.TIE
    assert generate_score_summary(courts) == "1-1"


def test_summarize_match_from_court_results():
    courts = [
        CourtResult(1, _sets((6, 4), (6, 4)), "a", "b"),
        CourtResult(2, _sets((2, 6), (3, 6)), "c", "d"),
        CourtResult(3, _sets((7, 6), (6, 7), (6, 0)), "e", "f"),
    ]
    result = summarize_match(courts)
    assert result.outcome is MatchOutcome.WIN
    assert result.score_summary == "2-1"
    assert result.to_dict() == {"match_result": "win", "score_summary": "2-1"}
