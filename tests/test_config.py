import json

import pytest

from courtpairing.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from courtpairing.models.lineup import LineupConfig, load_lineup_config


def test_defaults():
    config = LineupConfig()
    assert config.court_count == 3
    assert config.strategy == "greedy"
    assert config.exact_player_limit == 16


@pytest.mark.parametrize(
    "fields",
    [
        {"court_count": 0},
        {"court_count": 11},
        {"strategy": "random"},
        {"exact_player_limit": 1},
        {"exact_player_limit": True},
    ],
)
def test_invalid_values(fields):
    with pytest.raises(InvalidConfigurationException):
        LineupConfig(**fields)


def test_from_dict():
    config = LineupConfig.from_dict({"court_count": 4, "strategy": "EXACT"})
    assert config.strategy == "exact"
    assert LineupConfig.from_dict(config.to_dict()) == config

    with pytest.raises(InvalidConfigurationException):
        LineupConfig.from_dict({"courts": 4})
    with pytest.raises(InvalidConfigurationException):
        LineupConfig.from_dict([3])


def test_load_from_file(tmp_path):
    path = tmp_path / "lineup.json"
    path.write_text(json.dumps({"court_count": 2, "strategy": "exact"}))
    config = load_lineup_config(path)
    assert config.court_count == 2
    assert config.strategy == "exact"


def test_load_missing_file(tmp_path):
    with pytest.raises(MissingConfigurationException):
        load_lineup_config(tmp_path / "nope.json")


def test_load_bad_json(tmp_path):
    path = tmp_path / "lineup.json"
    path.write_text("{court_count: 2")
    with pytest.raises(InvalidConfigurationException):
        load_lineup_config(str(path))
