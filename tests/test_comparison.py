import argparse
import json

import pytest

from courtpairing.comparison import ComparisonReporter, StrategyComparisonEngine
from courtpairing.comparison.analyzer import create_statistical_analyzer
from courtpairing.comparison.cli import main, parse_size_range
from courtpairing.comparison.metrics import (
    calculate_lineup_metrics,
    calculate_optimality_ratio,
    calculate_score_gap,
)
from courtpairing.models.lineup import PairSuggestion


def _suggestion(player, a, b, score):
    return PairSuggestion(player(a), player(b), score, 50.0, 50.0, 100.0)


@pytest.fixture
def trap(player):
    return [
        _suggestion(player, "a", "b", 10.0),
        _suggestion(player, "a", "c", 9.0),
        _suggestion(player, "b", "d", 9.0),
        _suggestion(player, "c", "d", 1.0),
    ]


def test_metrics():
    assert calculate_score_gap(11.0, 18.0) == 7.0
    assert calculate_score_gap(18.0, 18.0 + 1e-12) == 0.0
    assert calculate_optimality_ratio(9.0, 18.0) == 50.0
    assert calculate_optimality_ratio(0.0, 0.0) == 100.0
    assert calculate_lineup_metrics([]).pair_count == 0


def test_compare_trapped_pool(trap):
    result = StrategyComparisonEngine().compare_lineups("run_1", trap, court_count=2)
    assert result.player_count == 4
    assert result.score_gap == pytest.approx(7.0)
    assert not result.greedy_is_optimal
    assert result.lineup_differences.matching_pairs == 0
    assert result.exact_metrics.min_score == 9.0
    assert not result.exact_fell_back


def test_compare_roster_gap_is_never_negative(store, roster):
    store.increment("t1", "p1", "p3", won=True, games_won=12, games_played=13)
    result = StrategyComparisonEngine().compare_roster(
        "run_1", "t1", roster, store, court_count=2
    )
    assert result.score_gap >= 0.0
    assert result.player_count == 5
    assert result.to_dict()["greedy_lineup"][0] == ["p1", "p3"]


def test_engine_flags_fallback(trap):
    result = StrategyComparisonEngine(exact_player_limit=3).compare_lineups(
        "run_1", trap, court_count=2
    )
    assert result.exact_fell_back
    assert result.greedy_is_optimal
    assert result.lineup_differences.is_identical


def test_analyzer_and_report(trap, tmp_path):
    engine = StrategyComparisonEngine()
    results = [
        engine.compare_lineups("run_1", trap, court_count=2),
        engine.compare_lineups("run_2", trap, court_count=1),
    ]
    summary = create_statistical_analyzer(min_significance_samples=5).analyze(results)
    assert summary.total_comparisons == 2
    assert summary.greedy_optimal == 1
    assert summary.max_score_gap == pytest.approx(7.0)
    assert not summary.sample_size_sufficient
    assert list(summary.size_based_performance) == [4]

    reporter = ComparisonReporter()
    path = tmp_path / "out" / "report.json"
    reporter.save_report(reporter.generate_report(results, summary), path)
    report = json.loads(path.read_text())
    assert report["overall_results"]["greedy_optimal_rate"] == 0.5
    assert len(report["run_breakdown"]) == 2
    assert "Runs compared" in reporter.format_text_summary(summary)


def test_analyzer_without_results():
    assert create_statistical_analyzer().analyze([]).total_comparisons == 0


def test_parse_size_range():
    assert parse_size_range("12") == [12]
    assert parse_size_range(" 8-16 ") == [8, 16]
    for bad in ("16-8", "1", "a", "4-6-8", "100"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_size_range(bad)


def test_cli_writes_report(tmp_path, capsys):
    code = main(
        ["--runs", "3", "--players", "6-8", "--seed", "7", "--output", str(tmp_path)]
    )
    assert code == 0
    report = json.loads((tmp_path / "comparison_report.json").read_text())
    assert report["comparison_metadata"]["total_runs"] == 3
    assert "Runs compared" in capsys.readouterr().out


def test_cli_rejects_missing_config(tmp_path):
    code = main(
        ["--runs", "1", "--config", str(tmp_path / "missing.json"),
         "--output", str(tmp_path)]
    )
    assert code == 1
