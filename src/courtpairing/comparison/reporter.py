"""Reporting for lineup strategy comparisons."""

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

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from courtpairing.comparison.analyzer import StatisticalSummary
from courtpairing.comparison.engine import ComparisonResult
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

REPORT_VERSION = "1.0.0"


class ComparisonReporter:
    """Reporter for generating comparison reports."""

    def generate_report(
        self,
        comparison_results: List[ComparisonResult],
        statistical_summary: StatisticalSummary,
        configuration: Optional[Dict] = None,
    ) -> Dict:
        """Generate comparison report.

        Args:
            comparison_results: List of individual comparison results
            statistical_summary: Statistical analysis summary
            configuration: Optional configuration metadata

        Returns:
            Complete report as dictionary
        """
        return {
            "comparison_metadata": self._generate_metadata(
                len(comparison_results), configuration
            ),
            "overall_results": self._generate_overall_results(statistical_summary),
            "size_based_performance": statistical_summary.size_based_performance,
            "performance_comparison": statistical_summary.performance_stats,
            "run_breakdown": [r.to_dict() for r in comparison_results],
        }

    def save_report(self, report: Dict, output_path: Path, pretty: bool = True) -> None:
        """Save report to JSON file.

        Args:
            report: Report dictionary
            output_path: Path to save JSON file
            pretty: Whether to pretty-print JSON
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            if pretty:
                json.dump(report, f, indent=2, ensure_ascii=False)
            else:
                json.dump(report, f, ensure_ascii=False)

        logger.info(f"Report saved to: {output_path}")

    def _generate_metadata(
        self, total_runs: int, configuration: Optional[Dict]
    ) -> Dict:
        metadata = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "total_runs": total_runs,
            "report_version": REPORT_VERSION,
        }
        if configuration:
            metadata["configuration"] = configuration
        return metadata

    def _generate_overall_results(self, summary: StatisticalSummary) -> Dict:
        return {
            "total_comparisons": summary.total_comparisons,
            "greedy_optimal_rate": round(summary.greedy_optimal_rate, 4),
            "identical_lineup_rate": round(summary.identical_lineup_rate, 4),
            "fallbacks": summary.fallbacks,
            "average_score_gap": round(summary.average_score_gap, 4),
            "median_score_gap": round(summary.median_score_gap, 4),
            "max_score_gap": round(summary.max_score_gap, 4),
            "stddev_score_gap": round(summary.stddev_score_gap, 4),
            "average_optimality_ratio": round(summary.average_optimality_ratio, 2),
            "worst_optimality_ratio": round(summary.worst_optimality_ratio, 2),
            "sample_size_sufficient": summary.sample_size_sufficient,
        }

    def format_text_summary(self, summary: StatisticalSummary) -> str:
        """Short human readable summary for the terminal."""
        lines = [
            f"Runs compared:          {summary.total_comparisons}",
            f"Greedy optimal:         {summary.greedy_optimal_rate * 100:.1f}%",
            f"Identical lineups:      {summary.identical_lineup_rate * 100:.1f}%",
            f"Average score gap:      {summary.average_score_gap:.3f}",
            f"Worst score gap:        {summary.max_score_gap:.3f}",
            f"Worst optimality ratio: {summary.worst_optimality_ratio:.2f}%",
        ]
        if summary.performance_stats:
            lines.append(
                f"Average time (ms):      greedy "
                f"{summary.performance_stats['greedy_avg_ms']:.3f}, exact "
                f"{summary.performance_stats['exact_avg_ms']:.3f}"
            )
        if summary.fallbacks:
            lines.append(f"Exact fallbacks:        {summary.fallbacks}")
        return "\n".join(lines)


def generate_comprehensive_report(
    comparison_results: List[ComparisonResult],
    statistical_summary: StatisticalSummary,
    output_path: Path,
    configuration: Optional[Dict] = None,
) -> Dict:
    """Generate and save a comparison report.

    Returns:
        The report dictionary that was written
    """
    reporter = ComparisonReporter()
    report = reporter.generate_report(
        comparison_results, statistical_summary, configuration
    )
    reporter.save_report(report, output_path)
    return report
