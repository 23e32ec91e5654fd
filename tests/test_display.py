from courtpairing.models.match import SetScore
from courtpairing.scoring.display import (
    format_score_display,
    format_score_display_with_tiebreak,
)


def test_empty_court_has_no_score():
    assert format_score_display([]) == "No score"
    assert format_score_display_with_tiebreak([]) == "No score"


def test_sets_ordered_by_set_number():
    sets = [
        SetScore(6, 3, set_number=3),
        SetScore(6, 4, set_number=1),
        SetScore(4, 6, set_number=2),
    ]
    assert format_score_display(sets) == "6-4, 4-6, 6-3"


def test_tiebreak_points_of_the_losing_side():
    sets = [
        SetScore(7, 6, is_tiebreak=True, set_number=1, tiebreak_home=7, tiebreak_away=4),
        SetScore(6, 7, is_tiebreak=True, set_number=2, tiebreak_home=8, tiebreak_away=10),
        SetScore(6, 2, set_number=3),
    ]
    assert format_score_display_with_tiebreak(sets) == "7-6(4), 6-7(8), 6-2"


def test_tiebreak_set_without_points_has_no_bracket():
    sets = [SetScore(7, 6, is_tiebreak=True, set_number=1), SetScore(6, 1, set_number=2)]
    assert format_score_display_with_tiebreak(sets) == "7-6, 6-1"
