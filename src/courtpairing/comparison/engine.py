"""Comparison engine for the greedy and exact lineup strategies."""

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

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from courtpairing.comparison.metrics import (
    LineupMetrics,
    calculate_lineup_metrics,
    calculate_optimality_ratio,
    calculate_score_gap,
)
from courtpairing.constants import DEFAULT_COURT_COUNT, DEFAULT_EXACT_PLAYER_LIMIT
from courtpairing.lineup.availability import filter_eligible
from courtpairing.lineup.candidates import generate_candidate_pairs
from courtpairing.lineup.optimizer import (
    ExactLineupStrategy,
    GreedyLineupStrategy,
    LineupStrategy,
)
from courtpairing.lineup.scorer import PairScorer
from courtpairing.models.lineup import PairSuggestion
from courtpairing.models.player import PlayerRef
from courtpairing.models.statistics import pair_key
from courtpairing.statistics.store import PairStatisticsStore
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class LineupDifference:
    """Represents the difference between two lineups."""

    matching_pairs: int = 0
    greedy_only_pairs: List[Tuple[str, str]] = field(default_factory=list)
    exact_only_pairs: List[Tuple[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "matching_pairs": self.matching_pairs,
            "matching_percentage": self.matching_percentage,
            "greedy_only_pairs": self.greedy_only_pairs,
            "exact_only_pairs": self.exact_only_pairs,
            "total_differences": len(self.greedy_only_pairs)
            + len(self.exact_only_pairs),
        }

    @property
    def is_identical(self) -> bool:
        return not self.greedy_only_pairs and not self.exact_only_pairs

    @property
    def matching_percentage(self) -> float:
        """Calculate percentage of matching pairs."""
        total_pairs = (
            self.matching_pairs
            + len(self.greedy_only_pairs)
            + len(self.exact_only_pairs)
        )
        if total_pairs == 0:
            return 100.0
        return (self.matching_pairs / total_pairs) * 100


@dataclass
class ComparisonResult:
    """Comparison of both strategies on one candidate pool."""

    run_id: str
    player_count: int = 0
    court_count: int = DEFAULT_COURT_COUNT

    greedy_lineup: List[PairSuggestion] = field(default_factory=list)
    exact_lineup: List[PairSuggestion] = field(default_factory=list)

    greedy_metrics: Optional[LineupMetrics] = None
    exact_metrics: Optional[LineupMetrics] = None

    lineup_differences: Optional[LineupDifference] = None

    score_gap: float = 0.0
    optimality_ratio: float = 100.0
    # Pool was above the exhaustive search limit
    exact_fell_back: bool = False

    @property
    def greedy_is_optimal(self) -> bool:
        return self.score_gap == 0.0

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        result = {
            "run_id": self.run_id,
            "player_count": self.player_count,
            "court_count": self.court_count,
            "score_gap": self.score_gap,
            "optimality_ratio": self.optimality_ratio,
            "greedy_is_optimal": self.greedy_is_optimal,
            "exact_fell_back": self.exact_fell_back,
            "greedy_lineup": [list(s.player_ids) for s in self.greedy_lineup],
            "exact_lineup": [list(s.player_ids) for s in self.exact_lineup],
        }

        if self.greedy_metrics:
            result["greedy_metrics"] = self.greedy_metrics.to_dict()

        if self.exact_metrics:
            result["exact_metrics"] = self.exact_metrics.to_dict()

        if self.lineup_differences:
            result["lineup_differences"] = self.lineup_differences.to_dict()

        return result


class StrategyComparisonEngine:
    """Main engine for comparing lineup strategies."""

    def __init__(self, exact_player_limit: int = DEFAULT_EXACT_PLAYER_LIMIT):
        """Initialize the comparison engine.

        Args:
            exact_player_limit: Largest pool the exact strategy searches
        """
        self.exact_player_limit = exact_player_limit
        self.greedy = GreedyLineupStrategy()
        self.exact = ExactLineupStrategy(player_limit=exact_player_limit)
        logger.info(
            f"Initialized comparison engine (exact search up to "
            f"{exact_player_limit} players)"
        )

    def compare_lineups(
        self,
        run_id: str,
        suggestions: Sequence[PairSuggestion],
        court_count: int = DEFAULT_COURT_COUNT,
    ) -> ComparisonResult:
        """Run both strategies on the same scored candidates.

        Args:
            run_id: Identifier for the run
            suggestions: Scored candidate pairs
            court_count: Courts to fill

        Returns:
            Comparison result with metrics and lineup differences
        """
        player_ids = {pid for s in suggestions for pid in s.player_ids}

        greedy_lineup, greedy_ms = self._timed_select(
            self.greedy, suggestions, court_count
        )
        exact_lineup, exact_ms = self._timed_select(
            self.exact, suggestions, court_count
        )

        result = ComparisonResult(
            run_id=run_id,
            player_count=len(player_ids),
            court_count=court_count,
            greedy_lineup=greedy_lineup,
            exact_lineup=exact_lineup,
            greedy_metrics=calculate_lineup_metrics(greedy_lineup, greedy_ms),
            exact_metrics=calculate_lineup_metrics(exact_lineup, exact_ms),
            lineup_differences=self._analyze_lineup_differences(
                greedy_lineup, exact_lineup
            ),
            exact_fell_back=len(player_ids) > self.exact_player_limit,
        )
        result.score_gap = calculate_score_gap(
            result.greedy_metrics.total_score, result.exact_metrics.total_score
        )
        result.optimality_ratio = calculate_optimality_ratio(
            result.greedy_metrics.total_score, result.exact_metrics.total_score
        )

        logger.info(
            f"Comparison {run_id}: greedy {result.greedy_metrics.total_score:.2f}, "
            f"exact {result.exact_metrics.total_score:.2f}, "
            f"gap {result.score_gap:.2f}"
        )
        return result

    def compare_roster(
        self,
        run_id: str,
        team_id: str,
        players: Sequence[PlayerRef],
        store: PairStatisticsStore,
        court_count: int = DEFAULT_COURT_COUNT,
    ) -> ComparisonResult:
        """Score a roster's candidate pairs and compare both strategies on them."""
        eligible = filter_eligible(players)
        suggestions = PairScorer(store).score_pairs(
            team_id, generate_candidate_pairs(eligible)
        )
        return self.compare_lineups(run_id, suggestions, court_count)

    def _timed_select(
        self,
        strategy: LineupStrategy,
        suggestions: Sequence[PairSuggestion],
        court_count: int,
    ) -> Tuple[List[PairSuggestion], float]:
        start = time.perf_counter()
        lineup = strategy.select(suggestions, court_count)
        return lineup, (time.perf_counter() - start) * 1000

    def _analyze_lineup_differences(
        self,
        greedy_lineup: Sequence[PairSuggestion],
        exact_lineup: Sequence[PairSuggestion],
    ) -> LineupDifference:
        """Analyze differences between two lineups, ignoring court order."""

        def to_set(lineup: Sequence[PairSuggestion]) -> Set[Tuple[str, str]]:
            return {pair_key(*s.player_ids) for s in lineup}

        greedy_set = to_set(greedy_lineup)
        exact_set = to_set(exact_lineup)

        return LineupDifference(
            matching_pairs=len(greedy_set & exact_set),
            greedy_only_pairs=sorted(greedy_set - exact_set),
            exact_only_pairs=sorted(exact_set - greedy_set),
        )
