"""Weighted desirability score for a candidate pair."""

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

from typing import Iterable, List, Optional, Tuple

from courtpairing.constants import (
    FAIR_PLAY_WEIGHT,
    GAMES_PCT_WEIGHT,
    NEUTRAL_GAMES_PCT,
    NEUTRAL_WIN_PCT,
    WIN_PCT_WEIGHT,
)
from courtpairing.models.lineup import PairSuggestion
from courtpairing.models.player import PlayerRef
from courtpairing.models.statistics import PairStatistic
from courtpairing.statistics.store import PairStatisticsStore
from courtpairing.type_hints import TeamId
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def calculate_pair_score(win_pct: float, games_pct: float, fair_play: float) -> float:
    """Blend the three components with the fixed 0.4 / 0.3 / 0.3 weights."""
    return (
        win_pct * WIN_PCT_WEIGHT
        + games_pct * GAMES_PCT_WEIGHT
        + fair_play * FAIR_PLAY_WEIGHT
    )


def history_percentages(statistic: Optional[PairStatistic]) -> Tuple[float, float]:
    """Return ``(win %, games %)``, neutral 50 for anything without history."""
    if statistic is None:
        return NEUTRAL_WIN_PCT, NEUTRAL_GAMES_PCT

    win_pct = statistic.win_percentage
    games_pct = statistic.games_percentage
    return (
        NEUTRAL_WIN_PCT if win_pct is None else win_pct,
        NEUTRAL_GAMES_PCT if games_pct is None else games_pct,
    )


class PairScorer:
    """Scores candidate pairs from their history and fair play.

    The scorer only reads from the store, so scoring the same pair twice
    without an increment in between gives the same result.
    """

    def __init__(self, store: PairStatisticsStore):
        self.store = store

    def score_pair(
        self, team_id: TeamId, player1: PlayerRef, player2: PlayerRef
    ) -> PairSuggestion:
        """Score one pair.

        Args:
            team_id: Team whose statistics are used
            player1: First player
            player2: Second player

        Returns:
            PairSuggestion with the score and its components
        """
        statistic = self.store.get(team_id, player1.id, player2.id)
        win_pct, games_pct = history_percentages(statistic)
        fair_play = (player1.fair_play_score + player2.fair_play_score) / 2
        score = calculate_pair_score(win_pct, games_pct, fair_play)

        logger.debug(
            f"Scored {player1.full_name} & {player2.full_name}: {score:.2f} "
            f"(win {win_pct:.1f}%, games {games_pct:.1f}%, fair play {fair_play:.1f})"
        )
        return PairSuggestion(
            player1=player1,
            player2=player2,
            score=score,
            win_pct=win_pct,
            games_pct=games_pct,
            fair_play=fair_play,
        )

    def score_pairs(
        self, team_id: TeamId, pairs: Iterable[Tuple[PlayerRef, PlayerRef]]
    ) -> List[PairSuggestion]:
        """Score every candidate pair, keeping candidate order."""
        return [self.score_pair(team_id, p1, p2) for p1, p2 in pairs]
