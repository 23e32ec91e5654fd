import json

from courtpairing.testing.__main__ import COMMAND_PARSERS, create_main_parser, main


def test_generate_writes_season(tmp_path, capsys):
    output = tmp_path / "season.json"
    code = main(
        [
            "generate",
            "--players", "8",
            "--matches", "2",
            "--seed", "3",
            "--start", "2025-05-03",
            "--output", str(output),
        ]
    )
    assert code == 0
    season = json.loads(output.read_text())
    assert [m["match_date"] for m in season["matches"]] == ["2025-05-03", "2025-05-10"]
    assert "Season Generated" in capsys.readouterr().out


def test_benchmark_runs(capsys):
    code = main(["benchmark", "--players", "6", "--iterations", "2", "--strategy", "exact"])
    assert code == 0
    assert "Average" in capsys.readouterr().out


def test_compare_subcommand_shares_options():
    args = create_main_parser().parse_args(["compare", "--runs", "5", "--players", "8-12"])
    assert args.runs == 5
    assert args.players == [8, 12]


def test_every_command_has_a_parser():
    for name, (make_parser, handler) in COMMAND_PARSERS.items():
        assert make_parser().prog == name
        assert callable(handler)
