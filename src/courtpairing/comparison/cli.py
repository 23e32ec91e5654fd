"""Command-line interface for the lineup strategy comparison tool.

This module provides the court-compare entry point.
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

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from courtpairing.comparison.analyzer import create_statistical_analyzer
from courtpairing.comparison.engine import StrategyComparisonEngine
from courtpairing.comparison.reporter import (
    ComparisonReporter,
    generate_comprehensive_report,
)
from courtpairing.constants import DEFAULT_COURT_COUNT
from courtpairing.exceptions import ConfigurationException
from courtpairing.models.lineup import LineupConfig, load_lineup_config
from courtpairing.testing.rsg import (
    NtrpDistribution,
    RosterFactory,
    RSGConfig,
    create_random_statistics,
)
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

# Largest roster the tool will generate
MAX_ROSTER_SIZE = 40


def parse_size_range(value: str) -> List[int]:
    """Parse roster size parameter (single value or range).

    Args:
        value: Size value as string (e.g., "12" or "8-16")

    Returns:
        [size] for single value, [min, max] for range

    Raises:
        argparse.ArgumentTypeError: If format is invalid

    Examples:
        >>> parse_size_range("12")
        [12]
        >>> parse_size_range("8-16")
        [8, 16]
    """
    value = value.strip()
    parts = value.split("-")
    if len(parts) > 2:
        raise argparse.ArgumentTypeError(
            f"Invalid range format '{value}'. Use 'MIN-MAX' (e.g., '8-16')"
        )

    try:
        sizes = [int(part.strip()) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid roster size '{value}'. Must be an integer or range (e.g., '8-16')"
        ) from None

    if len(sizes) == 2 and sizes[0] >= sizes[1]:
        raise argparse.ArgumentTypeError(
            f"Range minimum ({sizes[0]}) must be less than maximum ({sizes[1]})"
        )
    if sizes[0] < 2:
        raise argparse.ArgumentTypeError("Roster size must be at least 2")
    if sizes[-1] > MAX_ROSTER_SIZE:
        raise argparse.ArgumentTypeError(
            f"Roster size ({sizes[-1]}) exceeds limit ({MAX_ROSTER_SIZE})"
        )
    return sizes


def create_output_directory(base_path: Optional[str] = None) -> Path:
    """Create output directory for comparison results.

    Args:
        base_path: Optional base path (defaults to comparison_results/[timestamp]_comparison)

    Returns:
        Path to output directory
    """
    if base_path:
        output_dir = Path(base_path)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_dir = Path("comparison_results") / f"{timestamp}_comparison"

    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")
    return output_dir


def load_configuration(config_file: Optional[str]) -> Optional[LineupConfig]:
    """Load the lineup configuration, if a file was given.

    Raises:
        ConfigurationException: If the file is missing or invalid
    """
    if not config_file:
        return None
    return load_lineup_config(config_file)


def run_comparison(args: argparse.Namespace) -> int:
    """Run the comparison based on CLI arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    try:
        config = load_configuration(args.config)
    except ConfigurationException as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    court_count = config.court_count if config else args.courts
    exact_limit = config.exact_player_limit if config else args.exact_limit

    output_dir = create_output_directory(args.output)
    size_spec = args.players
    rng = random.Random(args.seed)

    logger.info(f"Starting comparison of {args.runs} rosters")
    engine = StrategyComparisonEngine(exact_player_limit=exact_limit)
    results = []

    for i in range(args.runs):
        roster_size = (
            rng.randint(size_spec[0], size_spec[1])
            if len(size_spec) == 2
            else size_spec[0]
        )
        run_seed = args.seed + i if args.seed is not None else None
        roster_config = RSGConfig(
            num_players=roster_size,
            ntrp_distribution=NtrpDistribution[args.distribution.upper()],
            seed=run_seed,
        )
        factory = RosterFactory(roster_config)
        players = factory.assign_availability(factory.create_players())
        team_id = f"team-{i + 1}"
        store = create_random_statistics(
            players, team_id, history_rate=args.history_rate, seed=run_seed
        )

        results.append(
            engine.compare_roster(
                run_id=f"run_{i + 1}",
                team_id=team_id,
                players=players,
                store=store,
                court_count=court_count,
            )
        )

    analyzer = create_statistical_analyzer(
        min_significance_samples=args.min_significance
    )
    summary = analyzer.analyze(results)

    configuration_metadata = {
        "runs": args.runs,
        "players": args.players,
        "courts": court_count,
        "exact_player_limit": exact_limit,
        "distribution": args.distribution,
        "history_rate": args.history_rate,
        "seed": args.seed,
    }
    report_path = output_dir / "comparison_report.json"
    generate_comprehensive_report(results, summary, report_path, configuration_metadata)

    print(ComparisonReporter().format_text_summary(summary))
    print(f"\nReport: {report_path}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="court-compare",
        description="Compare greedy and exact lineup selection on random rosters",
    )
    return add_comparison_arguments(parser)


def add_comparison_arguments(
    parser: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Add the comparison options to a parser (also used by court-test compare)."""
    parser.add_argument(
        "--runs", type=int, default=50, help="Number of rosters to compare (default: 50)"
    )
    parser.add_argument(
        "--players",
        type=parse_size_range,
        default=[12],
        help="Roster size, single value or range such as 8-16 (default: 12)",
    )
    parser.add_argument(
        "--courts",
        type=int,
        default=DEFAULT_COURT_COUNT,
        help=f"Courts per lineup (default: {DEFAULT_COURT_COUNT})",
    )
    parser.add_argument(
        "--exact-limit",
        type=int,
        default=LineupConfig().exact_player_limit,
        help="Largest eligible pool searched exhaustively",
    )
    parser.add_argument(
        "--distribution",
        choices=[d.value for d in NtrpDistribution],
        default=NtrpDistribution.NORMAL.value,
        help="NTRP rating distribution of generated rosters",
    )
    parser.add_argument(
        "--history-rate",
        type=float,
        default=0.6,
        help="Share of pairs with made-up history (default: 0.6)",
    )
    parser.add_argument("--config", help="Lineup configuration JSON file")
    parser.add_argument("--output", help="Output directory for the report")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--min-significance",
        type=int,
        default=30,
        help="Runs needed before rates are considered reliable (default: 30)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for court-compare."""
    args = create_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger("courtpairing").setLevel(logging.DEBUG)
    if args.runs < 1:
        logger.error("At least one run is required")
        return 1
    return run_comparison(args)


if __name__ == "__main__":
    sys.exit(main())
