"""Lineup wizard: from the roster answers to ranked court pairs."""

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

from typing import Iterable, List, Optional

from courtpairing.lineup.availability import filter_eligible
from courtpairing.lineup.candidates import generate_candidate_pairs
from courtpairing.lineup.optimizer import LineupOptimizer, get_strategy, total_score
from courtpairing.lineup.scorer import PairScorer
from courtpairing.models.lineup import LineupConfig, PairSuggestion
from courtpairing.models.player import PlayerRef
from courtpairing.statistics.store import PairStatisticsStore
from courtpairing.type_hints import TeamId
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_court_count_strict

logger = setup_logger(__name__)


class LineupWizard:
    """Suggests the pairs a captain should put on court.

    The run goes availability gate, candidate pairs, pair scores (read from
    the injected store), then the configured selection strategy. Nothing is
    written back; the store is only read.

    Example:
        >>> wizard = LineupWizard(InMemoryPairStatisticsStore())
        >>> lineup = wizard.suggest("team-1", roster)
    """

    def __init__(
        self,
        store: PairStatisticsStore,
        config: Optional[LineupConfig] = None,
    ):
        """Initialize the wizard.

        Args:
            store: Pair statistics source
            config: Court count and strategy, defaults to 3 courts greedy
        """
        self.store = store
        self.config = config or LineupConfig()
        self.scorer = PairScorer(store)
        self.optimizer = LineupOptimizer(
            get_strategy(self.config.strategy, self.config.exact_player_limit)
        )

    def suggest(
        self,
        team_id: TeamId,
        players: Iterable[PlayerRef],
        court_count: Optional[int] = None,
    ) -> List[PairSuggestion]:
        """Build the ranked lineup for a match.

        Args:
            team_id: Team the lineup is for
            players: Roster with availability answers for the match
            court_count: Overrides the configured number of courts

        Returns:
            Up to ``court_count`` pairs, best first, no player twice

        Raises:
            InvalidLineupConfigException: If ``court_count`` is not a valid
                number of courts
        """
        courts = (
            self.config.court_count
            if court_count is None
            else validate_court_count_strict(court_count)
        )

        eligible = filter_eligible(players)
        if len(eligible) < 2:
            logger.info(
                f"Lineup for team {team_id}: {len(eligible)} eligible players, "
                "no pairs to suggest"
            )
            return []

        candidates = generate_candidate_pairs(eligible)
        scored = self.scorer.score_pairs(team_id, candidates)
        lineup = self.optimizer.select(scored, court_count=courts)

        logger.info(
            f"Lineup for team {team_id}: {len(lineup)}/{courts} courts from "
            f"{len(eligible)} eligible players ({len(candidates)} candidate pairs), "
            f"total score {total_score(lineup):.2f}"
        )
        return lineup
