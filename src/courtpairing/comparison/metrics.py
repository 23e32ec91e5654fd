"""Metrics for judging a selected lineup.

This module scores a lineup by its total and spread of pair scores, and
measures how far a heuristic lineup falls short of the exhaustive one.
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

from dataclasses import dataclass
from typing import Dict, Sequence

from courtpairing.models.lineup import PairSuggestion

# Totals closer than this are treated as equal
SCORE_TOLERANCE = 1e-9


@dataclass
class LineupMetrics:
    """Metrics for one strategy's lineup."""

    total_score: float = 0.0
    pair_count: int = 0
    mean_score: float = 0.0
    min_score: float = 0.0  # Weakest court
    computation_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "total_score": self.total_score,
            "pair_count": self.pair_count,
            "mean_score": self.mean_score,
            "min_score": self.min_score,
            "computation_time_ms": self.computation_time_ms,
        }


def calculate_lineup_metrics(
    lineup: Sequence[PairSuggestion], computation_time_ms: float = 0.0
) -> LineupMetrics:
    """Calculate metrics for a selected lineup.

    Args:
        lineup: Selected pairs
        computation_time_ms: Time the strategy took

    Returns:
        Metrics, all zero for an empty lineup
    """
    if not lineup:
        return LineupMetrics(computation_time_ms=computation_time_ms)

    scores = [s.score for s in lineup]
    return LineupMetrics(
        total_score=sum(scores),
        pair_count=len(scores),
        mean_score=sum(scores) / len(scores),
        min_score=min(scores),
        computation_time_ms=computation_time_ms,
    )


def calculate_score_gap(greedy_total: float, exact_total: float) -> float:
    """How much total score the greedy lineup leaves on the table (never negative)."""
    gap = exact_total - greedy_total
    return gap if gap > SCORE_TOLERANCE else 0.0


def calculate_optimality_ratio(greedy_total: float, exact_total: float) -> float:
    """Greedy total as a percentage of the exact total.

    Returns:
        100.0 when both are equal or the exact total is zero
    """
    if exact_total <= SCORE_TOLERANCE:
        return 100.0
    return min(100.0, greedy_total / exact_total * 100)
