"""Ranked pair suggestion produced by the lineup optimizer."""

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

from dataclasses import dataclass
from typing import Any, Dict

from courtpairing.models.player import PlayerRef
from courtpairing.type_hints import PairKey


@dataclass(frozen=True, slots=True)
class PairSuggestion:
    """A candidate doubles pair with its desirability score.

    Suggestions are recomputed on every run and never persisted.

    Attributes
    ----------
    player1 : PlayerRef
        First player, in pool order.
    player2 : PlayerRef
        Second player, in pool order.
    score : float
        Weighted blend of win %, games % and fair play.
    win_pct : float
        Historical court win percentage, 50 without history.
    games_pct : float
        Historical games percentage, 50 without history.
    fair_play : float
        Mean fair-play score of the two players.
    """

    player1: PlayerRef
    player2: PlayerRef
    score: float
    win_pct: float
    games_pct: float
    fair_play: float

    @property
    def player_ids(self) -> PairKey:
        return (self.player1.id, self.player2.id)

    def shares_player_with(self, other: "PairSuggestion") -> bool:
        return bool(set(self.player_ids) & set(other.player_ids))

    def __str__(self) -> str:
        return f"{self.player1.full_name} & {self.player2.full_name} ({self.score:.1f})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the lineup screen."""
        return {
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict(),
            "score": self.score,
            "win_pct": self.win_pct,
            "games_pct": self.games_pct,
            "fair_play": self.fair_play,
        }
