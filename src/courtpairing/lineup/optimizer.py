"""Selection of non-overlapping pairs for the courts of a match.

Two strategies share one interface:

greedy
    Highest score first, skipping pairs with an already used player. Fast,
    can miss the best total.
exact
    Exhaustive search for the largest total over disjoint pairs. Limited to
    small pools, larger pools fall back to greedy.
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

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Set, Tuple

from courtpairing.constants import (
    DEFAULT_COURT_COUNT,
    DEFAULT_EXACT_PLAYER_LIMIT,
    DEFAULT_LINEUP_STRATEGY,
    STRATEGY_EXACT,
    STRATEGY_GREEDY,
)
from courtpairing.exceptions import UnknownStrategyException
from courtpairing.models.lineup import PairSuggestion
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def rank_suggestions(suggestions: Sequence[PairSuggestion]) -> List[PairSuggestion]:
    """Sort by score, highest first. Equal scores keep their candidate order."""
    return sorted(suggestions, key=lambda s: s.score, reverse=True)


def total_score(suggestions: Sequence[PairSuggestion]) -> float:
    return sum(s.score for s in suggestions)


class LineupStrategy(ABC):
    """Interface of a pair selection strategy."""

    name: str = ""

    @abstractmethod
    def select(
        self, suggestions: Sequence[PairSuggestion], court_count: int
    ) -> List[PairSuggestion]:
        """Pick up to ``court_count`` pairs with no player used twice.

        Returns:
            Selected pairs ranked by score
        """


class GreedyLineupStrategy(LineupStrategy):
    """Take the best remaining pair whose players are both still free."""

    name = STRATEGY_GREEDY

    def select(
        self, suggestions: Sequence[PairSuggestion], court_count: int
    ) -> List[PairSuggestion]:
        selected: List[PairSuggestion] = []
        used: Set[str] = set()

        for suggestion in rank_suggestions(suggestions):
            if len(selected) >= court_count:
                break
            player1_id, player2_id = suggestion.player_ids
            if player1_id in used or player2_id in used:
                continue
            selected.append(suggestion)
            used.add(player1_id)
            used.add(player2_id)

        return selected


class ExactLineupStrategy(LineupStrategy):
    """Exhaustive maximum total score over disjoint pairs.

    A pair is only added when it raises the total, so the result can hold
    fewer pairs than courts when the remaining pairs score zero.

    Attributes
    ----------
    player_limit : int
        Largest pool searched exhaustively.
    fallback : LineupStrategy
        Strategy used above the limit.
    """

    name = STRATEGY_EXACT

    def __init__(
        self,
        player_limit: int = DEFAULT_EXACT_PLAYER_LIMIT,
        fallback: Optional[LineupStrategy] = None,
    ):
        self.player_limit = player_limit
        self.fallback = fallback or GreedyLineupStrategy()

    def select(
        self, suggestions: Sequence[PairSuggestion], court_count: int
    ) -> List[PairSuggestion]:
        if court_count <= 0 or not suggestions:
            return []

        ranked = rank_suggestions(suggestions)
        player_ids: List[str] = []
        for suggestion in ranked:
            for player_id in suggestion.player_ids:
                if player_id not in player_ids:
                    player_ids.append(player_id)

        if len(player_ids) > self.player_limit:
            logger.warning(
                f"Exact lineup search limited to {self.player_limit} players, "
                f"pool has {len(player_ids)}: using {self.fallback.name} selection"
            )
            return self.fallback.select(suggestions, court_count)

        index = {player_id: i for i, player_id in enumerate(player_ids)}
        # Best suggestion per pair of player indexes, first in ranking wins
        by_pair: Dict[Tuple[int, int], int] = {}
        for position, suggestion in enumerate(ranked):
            a, b = (index[pid] for pid in suggestion.player_ids)
            if a == b:
                continue
            key = (min(a, b), max(a, b))
            by_pair.setdefault(key, position)

        partners: Dict[int, List[Tuple[int, int]]] = {i: [] for i in index.values()}
        for (a, b), position in by_pair.items():
            partners[a].append((b, position))
        player_count = len(player_ids)

        @lru_cache(maxsize=None)
        def best(decided: int, courts_left: int) -> Tuple[float, Tuple[int, ...]]:
            # Lowest player not yet decided is either left out or paired
            if courts_left == 0:
                return 0.0, ()
            lowest = 0
            while lowest < player_count and decided & (1 << lowest):
                lowest += 1
            if lowest >= player_count - 1:
                return 0.0, ()

            decided_with_lowest = decided | (1 << lowest)
            best_total, best_positions = best(decided_with_lowest, courts_left)
            for partner, position in partners[lowest]:
                if decided & (1 << partner):
                    continue
                rest_total, rest_positions = best(
                    decided_with_lowest | (1 << partner), courts_left - 1
                )
                total = ranked[position].score + rest_total
                if total > best_total:
                    best_total = total
                    best_positions = (position,) + rest_positions
            return best_total, best_positions

        _, positions = best(0, min(court_count, player_count // 2))
        return rank_suggestions([ranked[p] for p in positions])


STRATEGIES = {
    STRATEGY_GREEDY: GreedyLineupStrategy,
    STRATEGY_EXACT: ExactLineupStrategy,
}


def get_strategy(
    name: str, exact_player_limit: int = DEFAULT_EXACT_PLAYER_LIMIT
) -> LineupStrategy:
    """Instantiate a strategy by name.

    Raises:
        UnknownStrategyException: If no strategy has that name
    """
    key = name.strip().lower() if isinstance(name, str) else name
    if key == STRATEGY_EXACT:
        return ExactLineupStrategy(player_limit=exact_player_limit)
    if key in STRATEGIES:
        return STRATEGIES[key]()
    raise UnknownStrategyException(
        f"Unknown lineup strategy '{name}', expected one of: {', '.join(STRATEGIES)}"
    )


class LineupOptimizer:
    """Selects the lineup from scored candidate pairs.

    Never raises on well-formed input: an empty or too small pool just gives
    fewer (or no) suggestions.

    Example:
        >>> optimizer = LineupOptimizer()
        >>> optimizer.select([], court_count=3)
        []
    """

    def __init__(self, strategy: Optional[LineupStrategy] = None):
        self.strategy = strategy or get_strategy(DEFAULT_LINEUP_STRATEGY)

    def select(
        self,
        suggestions: Sequence[PairSuggestion],
        court_count: int = DEFAULT_COURT_COUNT,
    ) -> List[PairSuggestion]:
        """Choose up to ``court_count`` disjoint pairs with the configured strategy."""
        if court_count <= 0 or not suggestions:
            return []

        selected = self.strategy.select(suggestions, court_count)
        logger.debug(
            f"{self.strategy.name} selection: {len(selected)} of {court_count} courts "
            f"filled from {len(suggestions)} candidates, "
            f"total {total_score(selected):.2f}"
        )
        return selected
