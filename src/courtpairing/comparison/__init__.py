"""Comparison module for evaluating greedy vs exact lineup selection.

This module provides comparison, analysis, and reporting capabilities for
measuring how close the greedy lineup strategy gets to the exhaustive one.
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

from courtpairing.comparison.analyzer import (
    StatisticalAnalyzer,
    StatisticalSummary,
)
from courtpairing.comparison.engine import (
    ComparisonResult,
    LineupDifference,
    StrategyComparisonEngine,
)
from courtpairing.comparison.metrics import (
    LineupMetrics,
    calculate_lineup_metrics,
    calculate_optimality_ratio,
    calculate_score_gap,
)
from courtpairing.comparison.reporter import (
    ComparisonReporter,
    generate_comprehensive_report,
)

__all__ = [
    "LineupMetrics",
    "calculate_lineup_metrics",
    "calculate_optimality_ratio",
    "calculate_score_gap",
    "StrategyComparisonEngine",
    "ComparisonResult",
    "LineupDifference",
    "StatisticalAnalyzer",
    "StatisticalSummary",
    "ComparisonReporter",
    "generate_comprehensive_report",
]
