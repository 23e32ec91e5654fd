"""Statistical analysis across many strategy comparisons."""

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

import statistics
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from courtpairing.comparison.engine import ComparisonResult
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class StatisticalSummary:
    """Statistical summary of multiple lineup comparisons."""

    total_comparisons: int = 0
    greedy_optimal: int = 0
    identical_lineups: int = 0
    fallbacks: int = 0

    # Rates
    greedy_optimal_rate: float = 0.0
    identical_lineup_rate: float = 0.0

    # Score gap statistics
    average_score_gap: float = 0.0
    median_score_gap: float = 0.0
    max_score_gap: float = 0.0
    stddev_score_gap: float = 0.0
    average_optimality_ratio: float = 100.0
    worst_optimality_ratio: float = 100.0

    # Whether enough runs were compared to trust the rates
    sample_size_sufficient: bool = False

    # Performance by roster size
    size_based_performance: Dict[int, Dict] = field(default_factory=dict)

    # Computational efficiency
    performance_stats: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "total_comparisons": self.total_comparisons,
            "greedy_optimal": self.greedy_optimal,
            "identical_lineups": self.identical_lineups,
            "fallbacks": self.fallbacks,
            "greedy_optimal_rate": self.greedy_optimal_rate,
            "identical_lineup_rate": self.identical_lineup_rate,
            "average_score_gap": self.average_score_gap,
            "median_score_gap": self.median_score_gap,
            "max_score_gap": self.max_score_gap,
            "stddev_score_gap": self.stddev_score_gap,
            "average_optimality_ratio": self.average_optimality_ratio,
            "worst_optimality_ratio": self.worst_optimality_ratio,
            "sample_size_sufficient": self.sample_size_sufficient,
            "size_based_performance": self.size_based_performance,
            "performance_stats": self.performance_stats,
        }


class StatisticalAnalyzer:
    """Analyzer for multi-run strategy comparison."""

    def __init__(self, min_significance_samples: int = 30):
        """Initialize the statistical analyzer.

        Args:
            min_significance_samples: Runs needed before rates are trusted
        """
        self.min_significance_samples = min_significance_samples
        logger.info("Initialized statistical analyzer")

    def analyze(self, comparison_results: List[ComparisonResult]) -> StatisticalSummary:
        """Analyze multiple comparison results.

        Args:
            comparison_results: List of individual comparison results

        Returns:
            Statistical summary, empty when there is nothing to analyze
        """
        if not comparison_results:
            logger.warning("No comparison results to analyze")
            return StatisticalSummary()

        summary = StatisticalSummary()
        summary.total_comparisons = len(comparison_results)

        for result in comparison_results:
            if result.greedy_is_optimal:
                summary.greedy_optimal += 1
            if result.lineup_differences and result.lineup_differences.is_identical:
                summary.identical_lineups += 1
            if result.exact_fell_back:
                summary.fallbacks += 1

        summary.greedy_optimal_rate = summary.greedy_optimal / summary.total_comparisons
        summary.identical_lineup_rate = (
            summary.identical_lineups / summary.total_comparisons
        )

        gaps = [r.score_gap for r in comparison_results]
        summary.average_score_gap = statistics.mean(gaps)
        summary.median_score_gap = statistics.median(gaps)
        summary.max_score_gap = max(gaps)
        if len(gaps) > 1:
            summary.stddev_score_gap = statistics.stdev(gaps)

        ratios = [r.optimality_ratio for r in comparison_results]
        summary.average_optimality_ratio = statistics.mean(ratios)
        summary.worst_optimality_ratio = min(ratios)

        summary.sample_size_sufficient = (
            summary.total_comparisons >= self.min_significance_samples
        )
        summary.size_based_performance = self._analyze_by_roster_size(
            comparison_results
        )
        summary.performance_stats = self._analyze_performance(comparison_results)

        logger.info(
            f"Analysis complete: {summary.total_comparisons} comparisons, "
            f"greedy optimal {summary.greedy_optimal_rate * 100:.1f}%, "
            f"identical lineups {summary.identical_lineup_rate * 100:.1f}%"
        )
        return summary

    def _analyze_by_roster_size(
        self, results: List[ComparisonResult]
    ) -> Dict[int, Dict]:
        """Group gap and optimal rate by number of eligible players."""
        by_size: Dict[int, List[ComparisonResult]] = defaultdict(list)
        for result in results:
            by_size[result.player_count].append(result)

        performance = {}
        for size in sorted(by_size):
            group = by_size[size]
            performance[size] = {
                "comparisons": len(group),
                "greedy_optimal_rate": sum(1 for r in group if r.greedy_is_optimal)
                / len(group),
                "average_score_gap": statistics.mean(r.score_gap for r in group),
            }
        return performance

    def _analyze_performance(self, results: List[ComparisonResult]) -> Dict[str, float]:
        """Timing statistics for both strategies."""
        greedy_times = [
            r.greedy_metrics.computation_time_ms for r in results if r.greedy_metrics
        ]
        exact_times = [
            r.exact_metrics.computation_time_ms for r in results if r.exact_metrics
        ]
        if not greedy_times or not exact_times:
            return {}

        greedy_avg = statistics.mean(greedy_times)
        exact_avg = statistics.mean(exact_times)
        return {
            "greedy_avg_ms": greedy_avg,
            "greedy_max_ms": max(greedy_times),
            "exact_avg_ms": exact_avg,
            "exact_max_ms": max(exact_times),
            "exact_slowdown": exact_avg / greedy_avg if greedy_avg > 0 else 0.0,
        }


def create_statistical_analyzer(min_significance_samples: int = 30) -> StatisticalAnalyzer:
    """Create a statistical analyzer."""
    return StatisticalAnalyzer(min_significance_samples=min_significance_samples)
