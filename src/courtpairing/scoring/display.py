"""Human readable score strings for courts."""

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

from typing import TYPE_CHECKING, List, Sequence

from courtpairing.constants import NO_SCORE_DISPLAY, SET_SEPARATOR

if TYPE_CHECKING:
    from courtpairing.models.match.set_score import SetScore


def _in_play_order(sets: Sequence["SetScore"]) -> List["SetScore"]:
    return sorted(sets, key=lambda s: s.set_number)


def format_score_display(sets: Sequence["SetScore"]) -> str:
    """Format a court's sets, e.g. ``"6-4, 4-6, 6-3"``.

    Returns:
        The joined set scores, or ``"No score"`` when nothing was entered
    """
    if not sets:
        return NO_SCORE_DISPLAY

    return SET_SEPARATOR.join(
        f"{s.home_games}-{s.away_games}" for s in _in_play_order(sets)
    )


def format_score_display_with_tiebreak(sets: Sequence["SetScore"]) -> str:
    """Format a court's sets with tiebreak notation, e.g. ``"7-6(4), 6-3"``.

    The number in brackets is the tiebreak points of the side that lost the
    tiebreak, written only when both tiebreak counts were recorded.
    """
    if not sets:
        return NO_SCORE_DISPLAY

    parts = []
    for s in _in_play_order(sets):
        base_score = f"{s.home_games}-{s.away_games}"
        if s.has_tiebreak_points:
            loser_points = (
                s.tiebreak_away if s.home_games > s.away_games else s.tiebreak_home
            )
            parts.append(f"{base_score}({loser_points})")
        else:
            parts.append(base_score)

    return SET_SEPARATOR.join(parts)
