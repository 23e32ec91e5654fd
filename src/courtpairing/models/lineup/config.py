"""Lineup configuration and its JSON loader."""

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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from courtpairing.constants import (
    CONFIG_FILE_EXTENSION,
    DEFAULT_COURT_COUNT,
    DEFAULT_EXACT_PLAYER_LIMIT,
    DEFAULT_LINEUP_STRATEGY,
    LINEUP_STRATEGIES,
)
from courtpairing.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_court_count

logger = setup_logger(__name__)


@dataclass(frozen=True)
class LineupConfig:
    """Settings for a lineup wizard run.

    Attributes
    ----------
    court_count : int
        Number of courts to fill.
    strategy : str
        Name of the selection strategy, ``"greedy"`` or ``"exact"``.
    exact_player_limit : int
        Largest eligible pool the exact strategy searches exhaustively.
    """

    court_count: int = DEFAULT_COURT_COUNT
    strategy: str = DEFAULT_LINEUP_STRATEGY
    exact_player_limit: int = DEFAULT_EXACT_PLAYER_LIMIT

    def __post_init__(self):
        court_result = validate_court_count(self.court_count)
        if not court_result:
            raise InvalidConfigurationException(court_result.error_message)

        if self.strategy not in LINEUP_STRATEGIES:
            raise InvalidConfigurationException(
                f"Unknown lineup strategy '{self.strategy}', "
                f"expected one of: {', '.join(LINEUP_STRATEGIES)}"
            )

        if (
            isinstance(self.exact_player_limit, bool)
            or not isinstance(self.exact_player_limit, int)
            or self.exact_player_limit < 2
        ):
            raise InvalidConfigurationException(
                f"Exact player limit must be a whole number of at least 2: "
                f"{self.exact_player_limit}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "court_count": self.court_count,
            "strategy": self.strategy,
            "exact_player_limit": self.exact_player_limit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineupConfig":
        """Build a config, unknown keys are rejected.

        Raises:
            InvalidConfigurationException: If a key or value is invalid
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Lineup configuration must be an object, got {type(data).__name__}"
            )

        unknown = set(data) - {"court_count", "strategy", "exact_player_limit"}
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown lineup configuration keys: {', '.join(sorted(unknown))}"
            )

        return cls(
            court_count=data.get("court_count", DEFAULT_COURT_COUNT),
            strategy=str(data.get("strategy", DEFAULT_LINEUP_STRATEGY)).lower(),
            exact_player_limit=data.get(
                "exact_player_limit", DEFAULT_EXACT_PLAYER_LIMIT
            ),
        )


def load_lineup_config(path: Union[str, Path]) -> LineupConfig:
    """Load a lineup configuration from a JSON file.

    Args:
        path: Path to the ``.json`` file

    Returns:
        The parsed configuration

    Raises:
        MissingConfigurationException: If the file does not exist
        InvalidConfigurationException: If the file is not valid JSON or holds
            invalid values
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.error(f"Configuration file not found: {config_path}")
        raise MissingConfigurationException(
            f"Configuration file not found: {config_path}"
        )

    if config_path.suffix.lower() != CONFIG_FILE_EXTENSION:
        logger.warning(
            f"Configuration file {config_path} does not have a "
            f"{CONFIG_FILE_EXTENSION} extension, reading it as JSON anyway"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse configuration {config_path}: {e}")
        raise InvalidConfigurationException(
            f"Configuration file {config_path} is not valid JSON: {e}"
        ) from e

    config = LineupConfig.from_dict(data)
    logger.info(f"Loaded lineup configuration from {config_path}")
    return config
