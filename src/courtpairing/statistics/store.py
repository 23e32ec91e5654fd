"""Storage interface for pair statistics.

The engine never keeps statistics between calls. Everything goes through a
store handed in by the caller, which owns persistence and serializes
concurrent increments for the same pair.
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

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from courtpairing.models.statistics import (
    PairStatistic,
    PairStatisticDelta,
    pair_key,
)
from courtpairing.type_hints import PlayerId, Row, TeamId
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class PairStatisticsStore(ABC):
    """
    Abstract interface to the per-team pair statistics.

    Implementations must key lookups and increments by the unordered pair,
    so ``get(team, a, b)`` and ``get(team, b, a)`` return the same record.
    A pairing run started after an increment must observe it.

    Examples
    --------
    Backing the store with the hosted database::

        class HostedPairStatisticsStore(PairStatisticsStore):
            def get(self, team_id, player_a, player_b):
                p1, p2 = pair_key(player_a, player_b)
                row = db.select_pair_statistic(team_id, p1, p2)
                return PairStatistic.from_dict(row) if row else None

            def increment(self, team_id, player_a, player_b, won,
                          games_won, games_played):
                ...
    """

    @abstractmethod
    def get(
        self, team_id: TeamId, player_a: PlayerId, player_b: PlayerId
    ) -> Optional[PairStatistic]:
        """Return the statistic for a pair, or None if they never played together."""

    @abstractmethod
    def increment(
        self,
        team_id: TeamId,
        player_a: PlayerId,
        player_b: PlayerId,
        won: bool,
        games_won: int,
        games_played: int,
    ) -> PairStatistic:
        """Add one finalized court to a pair, creating the record if needed.

        Returns:
            The updated statistic
        """

    def apply(self, delta: PairStatisticDelta) -> PairStatistic:
        """Increment from a delta produced by match finalization."""
        return self.increment(
            delta.team_id,
            delta.player1_id,
            delta.player2_id,
            delta.won,
            delta.games_won,
            delta.games_played,
        )


class InMemoryPairStatisticsStore(PairStatisticsStore):
    """Dictionary backed store, used by tests, the season generator and the CLI.

    Increments are serialized with a lock so concurrent finalizations for
    the same pair do not lose updates.
    """

    def __init__(self, statistics: Optional[Iterable[PairStatistic]] = None):
        self._lock = threading.Lock()
        self._statistics: Dict[Tuple[TeamId, PlayerId, PlayerId], PairStatistic] = {}
        for statistic in statistics or []:
            self._statistics[(statistic.team_id, *statistic.key)] = statistic

    def get(
        self, team_id: TeamId, player_a: PlayerId, player_b: PlayerId
    ) -> Optional[PairStatistic]:
        return self._statistics.get((team_id, *pair_key(player_a, player_b)))

    def increment(
        self,
        team_id: TeamId,
        player_a: PlayerId,
        player_b: PlayerId,
        won: bool,
        games_won: int,
        games_played: int,
    ) -> PairStatistic:
        delta = PairStatisticDelta.for_pair(
            team_id, player_a, player_b, won, games_won, games_played
        )
        key = (team_id, *delta.key)
        with self._lock:
            current = self._statistics.get(key)
            if current is None:
                current = PairStatistic.empty(team_id, player_a, player_b)
            updated = current.apply(delta)
            self._statistics[key] = updated

        logger.debug(
            f"Pair {delta.player1_id}/{delta.player2_id} on team {team_id}: "
            f"{updated.wins}/{updated.matches_together} wins, "
            f"{updated.total_games_won}/{updated.total_games_played} games"
        )
        return updated

    def for_team(self, team_id: TeamId) -> List[PairStatistic]:
        """All statistics of a team, ordered by pair."""
        return sorted(
            (s for s in self._statistics.values() if s.team_id == team_id),
            key=lambda s: s.key,
        )

    def to_rows(self) -> List[Row]:
        """Dump every statistic as pair_statistics rows."""
        return [self._statistics[key].to_dict() for key in sorted(self._statistics)]

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> InMemoryPairStatisticsStore:
        """Build a store from pair_statistics rows."""
        return cls(PairStatistic.from_dict(row) for row in rows)

    def __len__(self) -> int:
        return len(self._statistics)
