"""Set score validation rules.

A recorded set is a final score: somebody reached six games with a two game
lead, or the set went to 7-5 or to a 7-6 tiebreak. Anything else is either
an unfinished set or a typing error, and the entry boundary rejects it.
"""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
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

from courtpairing.constants import (
    EXTENDED_SET_LOSER_GAMES,
    GAMES_TO_WIN_SET,
    MATCH_TIEBREAK_POINTS,
    MAX_SET_GAMES,
    MIN_SET_MARGIN,
    TIEBREAK_SET_LOSER_GAMES,
)
from courtpairing.models.enums import ScoreKind


def is_valid_tennis_score(home_games: int, away_games: int) -> bool:
    """Check whether two game counts form a finished tennis set.

    Valid scores are 6-0 through 6-4, 7-5 and 7-6, in either direction.

    Parameters
    ----------
    home_games : int
        Games won by the home side.
    away_games : int
        Games won by the away side.

    Returns
    -------
    bool
        True if the pair is a valid final set score.
    """
    if home_games < 0 or away_games < 0:
        return False

    # Nobody has reached six yet: the set is not over
    if home_games < GAMES_TO_WIN_SET and away_games < GAMES_TO_WIN_SET:
        return False

    if home_games >= MAX_SET_GAMES and away_games >= MAX_SET_GAMES:
        return False

    if home_games > MAX_SET_GAMES or away_games > MAX_SET_GAMES:
        return False

    winner = max(home_games, away_games)
    loser = min(home_games, away_games)

    if winner == GAMES_TO_WIN_SET:
        # 6-5 and 6-6 are still being played
        return winner - loser >= MIN_SET_MARGIN

    # winner == 7: only 7-5 or a 7-6 tiebreak
    return loser in (EXTENDED_SET_LOSER_GAMES, TIEBREAK_SET_LOSER_GAMES)


def is_valid_match_tiebreak_score(home_points: int, away_points: int) -> bool:
    """Check a 10 point match tiebreak played in place of a third set.

    The winner needs at least ten points and a two point lead; past ten the
    tiebreak stops as soon as the lead is two, so the margin is then exactly two.
    """
    if home_points < 0 or away_points < 0:
        return False

    winner = max(home_points, away_points)
    margin = winner - min(home_points, away_points)

    if winner < MATCH_TIEBREAK_POINTS or margin < MIN_SET_MARGIN:
        return False

    if winner > MATCH_TIEBREAK_POINTS and margin != MIN_SET_MARGIN:
        return False

    return True


def requires_tiebreak(home_games: int, away_games: int) -> bool:
    """True if the score is 7-6 or 6-7."""
    return (
        home_games == MAX_SET_GAMES and away_games == TIEBREAK_SET_LOSER_GAMES
    ) or (home_games == TIEBREAK_SET_LOSER_GAMES and away_games == MAX_SET_GAMES)


def classify_set_score(
    home_games: int, away_games: int, match_tiebreak: bool = False
) -> ScoreKind:
    """Classify a recorded set.

    Args:
        home_games: Games (or points for a match tiebreak) won by the home side
        away_games: Games (or points) won by the away side
        match_tiebreak: Whether the set was recorded as a match tiebreak

    Returns:
        ScoreKind of the set, ``ScoreKind.INVALID`` if it fails validation
    """
    if match_tiebreak:
        if is_valid_match_tiebreak_score(home_games, away_games):
            return ScoreKind.MATCH_TIEBREAK
        return ScoreKind.INVALID

    if not is_valid_tennis_score(home_games, away_games):
        return ScoreKind.INVALID

    if requires_tiebreak(home_games, away_games):
        return ScoreKind.TIEBREAK

    return ScoreKind.REGULAR
