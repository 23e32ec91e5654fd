"""Set, court and match outcome rules.

Outcomes are always computed from the stored set scores, never stored on
their own. The functions here are total: they assume the sets were validated
at the entry boundary and never raise.
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

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from courtpairing.constants import (
    GAMES_TO_WIN_SET,
    MATCH_TIEBREAK_POINTS,
    MAX_SET_GAMES,
    MIN_SET_MARGIN,
    TIEBREAK_SET_LOSER_GAMES,
)
from courtpairing.models.enums import MatchOutcome, Side
from courtpairing.type_hints import GameCounts

if TYPE_CHECKING:
    from courtpairing.models.match.court_result import CourtResult
    from courtpairing.models.match.match_result import MatchResult
    from courtpairing.models.match.set_score import SetScore


def calculate_set_winner(home_games: int, away_games: int) -> Optional[Side]:
    """Determine the winner of a set from its game counts.

    First to six with a two game margin, or 7-6 after a tiebreak.
    Invalid combinations are not rejected here.

    Returns:
        ``Side.HOME``, ``Side.AWAY`` or None if the set is not complete
    """
    if home_games >= GAMES_TO_WIN_SET and home_games - away_games >= MIN_SET_MARGIN:
        return Side.HOME
    if away_games >= GAMES_TO_WIN_SET and away_games - home_games >= MIN_SET_MARGIN:
        return Side.AWAY

    if home_games == MAX_SET_GAMES and away_games == TIEBREAK_SET_LOSER_GAMES:
        return Side.HOME
    if away_games == MAX_SET_GAMES and home_games == TIEBREAK_SET_LOSER_GAMES:
        return Side.AWAY

    return None


def calculate_match_tiebreak_winner(
    home_points: int, away_points: int
) -> Optional[Side]:
    """Winner of a 10 point match tiebreak, None while it is still running."""
    if (
        home_points >= MATCH_TIEBREAK_POINTS
        and home_points - away_points >= MIN_SET_MARGIN
    ):
        return Side.HOME
    if (
        away_points >= MATCH_TIEBREAK_POINTS
        and away_points - home_points >= MIN_SET_MARGIN
    ):
        return Side.AWAY
    return None


def set_winner(set_score: "SetScore") -> Optional[Side]:
    """Winner of a recorded set, using match tiebreak rules where flagged."""
    if set_score.is_match_tiebreak:
        return calculate_match_tiebreak_winner(
            set_score.home_games, set_score.away_games
        )
    return calculate_set_winner(set_score.home_games, set_score.away_games)


def count_sets(sets: Sequence["SetScore"]) -> GameCounts:
    """Return ``(sets won, sets lost)`` for the home side.

    Incomplete sets count for neither side.
    """
    sets_won = 0
    sets_lost = 0
    for set_score in sets:
        winner = set_winner(set_score)
        if winner is Side.HOME:
            sets_won += 1
        elif winner is Side.AWAY:
            sets_lost += 1
    return sets_won, sets_lost


def calculate_court_winner(sets: Sequence["SetScore"]) -> bool:
    """True if the home pair won strictly more sets than the away pair.

    An even split (only reachable with an abandoned third set) is reported
    as not won.
    """
    sets_won, sets_lost = count_sets(sets)
    return sets_won > sets_lost


def are_all_sets_complete(sets: Sequence["SetScore"]) -> bool:
    """True if at least one set was entered and every set has a winner."""
    if not sets:
        return False
    return all(set_winner(set_score) is not None for set_score in sets)


def calculate_total_games(sets: Sequence["SetScore"]) -> GameCounts:
    """Return ``(games won, games lost)`` for the home side.

    A match tiebreak counts as a single game for its winner, so its points
    do not swamp the games of the regular sets.
    """
    games_won = 0
    games_lost = 0
    for set_score in sets:
        if set_score.is_match_tiebreak:
            winner = set_winner(set_score)
            if winner is Side.HOME:
                games_won += 1
            elif winner is Side.AWAY:
                games_lost += 1
            continue
        games_won += set_score.home_games
        games_lost += set_score.away_games
    return games_won, games_lost


def count_courts(court_results: Sequence["CourtResult"]) -> Tuple[int, int]:
    """Return ``(courts won, courts lost)``."""
    courts_won = sum(1 for court in court_results if court.won)
    return courts_won, len(court_results) - courts_won


def calculate_match_result(court_results: Sequence["CourtResult"]) -> MatchOutcome:
    """Team result by majority of courts won.

    Returns:
        ``MatchOutcome.WIN``, ``LOSS`` or ``TIE``; a tie is a normal result
    """
    courts_won, courts_lost = count_courts(court_results)
    if courts_won > courts_lost:
        return MatchOutcome.WIN
    if courts_lost > courts_won:
        return MatchOutcome.LOSS
    return MatchOutcome.TIE


def generate_score_summary(court_results: Sequence["CourtResult"]) -> str:
    """Courts won and lost, e.g. ``"2-1"``."""
    courts_won, courts_lost = count_courts(court_results)
    return f"{courts_won}-{courts_lost}"


def summarize_match(court_results: Sequence["CourtResult"]) -> "MatchResult":
    """Build the MatchResult value for a set of finished courts."""
    # Import here to avoid circular imports
    from courtpairing.models.match.match_result import MatchResult

    courts_won, courts_lost = count_courts(court_results)
    return MatchResult(
        outcome=calculate_match_result(court_results),
        courts_won=courts_won,
        courts_lost=courts_lost,
    )
