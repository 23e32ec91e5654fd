"""Score recording and finalization for team matches.

This module validates scores entered by a captain, derives the match result
and pushes finished courts into the pair statistics.
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

from typing import Any, Dict, List, Sequence, Union

from courtpairing.exceptions import (
    InvalidScoreException,
    MatchAlreadyFinalizedException,
    MatchNotCompleteException,
)
from courtpairing.models.enums import MatchOutcome
from courtpairing.models.match import MatchResult, MatchScorecard, SetScore
from courtpairing.models.statistics import PairStatisticDelta
from courtpairing.scoring.display import format_score_display_with_tiebreak
from courtpairing.scoring.outcome import (
    calculate_total_games,
    count_courts,
    count_sets,
    summarize_match,
)
from courtpairing.statistics.store import PairStatisticsStore
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

SetEntry = Union[SetScore, Dict[str, Any]]


class MatchScoreRecorder:
    """Handles recording, evaluating and finalizing match scores.

    This class is responsible for:
    - Validating a court's sets before anything is stored
    - Deriving the match result, pending while courts are unfinished
    - Incrementing pair statistics once when the match is finalized
    """

    def record_court_scores(
        self,
        scorecard: MatchScorecard,
        court_number: int,
        sets: Sequence[SetEntry],
    ) -> List[SetScore]:
        """Record (or re-record) all sets of one court.

        The entry is accepted or rejected as a whole: on rejection the
        court keeps the sets it had before.

        Args:
            scorecard: Match the court belongs to
            court_number: Court being scored
            sets: SetScore instances or match_scores rows

        Returns:
            The stored sets, in set number order

        Raises:
            CourtNotFoundException: If the court has no pair assigned
            MatchAlreadyFinalizedException: If the match was already finalized
            InvalidScoreException: If any set breaks the scoring rules
        """
        court = scorecard.get_court(court_number)

        if scorecard.is_finalized:
            logger.error(
                f"Match {scorecard.match_id} is already finalized, court "
                f"{court_number} scores cannot be edited"
            )
            raise MatchAlreadyFinalizedException(
                f"Match {scorecard.match_id} is already finalized, its pair "
                "statistics would no longer match the scores"
            )

        entries = [s if isinstance(s, SetScore) else SetScore.from_dict(s) for s in sets]

        seen_numbers = set()
        for set_score in entries:
            try:
                set_score.validate(court_number=court_number)
            except InvalidScoreException as e:
                logger.error(
                    f"Match {scorecard.match_id}, court {court_number}, "
                    f"set {set_score.set_number}: {e}"
                )
                raise

            if set_score.set_number in seen_numbers:
                logger.error(
                    f"Match {scorecard.match_id}, court {court_number}: "
                    f"set {set_score.set_number} entered twice"
                )
                raise InvalidScoreException(
                    f"Set {set_score.set_number} entered twice",
                    court_number=court_number,
                    set_number=set_score.set_number,
                )
            seen_numbers.add(set_score.set_number)

        ordered = sorted(entries, key=lambda s: s.set_number)
        for set_score in ordered:
            logger.debug(
                f"Recorded court {court_number} set {set_score.set_number}: "
                f"{set_score.home_games}-{set_score.away_games} ({set_score.kind.value})"
            )

        court.sets = ordered
        return list(ordered)

    def evaluate(self, scorecard: MatchScorecard) -> MatchResult:
        """Derive the match result from the scored courts.

        Courts with an unfinished set make the result pending; their
        decided sets still show in the court counts. Courts without any
        decided set are not counted.
        """
        scored = scorecard.scored_courts
        counted = [c for c in scored if c.has_decided_set]

        for court in counted:
            sets_won, sets_lost = count_sets(court.sets)
            if court.is_complete and sets_won == sets_lost:
                logger.warning(
                    f"Match {scorecard.match_id}, court {court.court_number}: sets "
                    f"split {sets_won}-{sets_lost}, court counted as lost"
                )

        if not scored or any(not c.is_complete for c in scored):
            courts_won, courts_lost = count_courts(counted)
            return MatchResult(
                outcome=MatchOutcome.PENDING,
                courts_won=courts_won,
                courts_lost=courts_lost,
            )

        return summarize_match(counted)

    def finalize(
        self,
        scorecard: MatchScorecard,
        store: PairStatisticsStore,
        force: bool = False,
    ) -> List[PairStatisticDelta]:
        """Push every counted court into the pair statistics.

        Args:
            scorecard: Match to finalize
            store: Where pair statistics are incremented
            force: Finalize even if some courts are unfinished

        Returns:
            The applied increments, one per counted court

        Raises:
            MatchAlreadyFinalizedException: If the match was finalized before
            MatchNotCompleteException: If courts are unfinished and not forced
        """
        if scorecard.is_finalized:
            logger.warning(
                f"Match {scorecard.match_id} is already finalized, "
                "statistics were not incremented again"
            )
            raise MatchAlreadyFinalizedException(
                f"Match {scorecard.match_id} is already finalized"
            )

        result = self.evaluate(scorecard)
        if result.is_pending and not force:
            raise MatchNotCompleteException(
                f"Match {scorecard.match_id} still has unfinished courts "
                f"({result.score_summary} so far)"
            )

        # Build every delta first so a bad court leaves the store untouched
        deltas = []
        for court in scorecard.scored_courts:
            if not court.has_decided_set:
                continue
            games_won, games_lost = calculate_total_games(court.sets)
            deltas.append(
                PairStatisticDelta.for_pair(
                    scorecard.team_id,
                    court.player1_id,
                    court.player2_id,
                    won=court.won,
                    games_won=games_won,
                    games_played=games_won + games_lost,
                )
            )

        for delta in deltas:
            store.apply(delta)

        scorecard.is_finalized = True
        logger.info(
            f"Finalized match {scorecard.match_id} for team {scorecard.team_id}: "
            f"{result.outcome.value} {result.score_summary}, "
            f"{len(deltas)} pair statistics updated"
        )
        return deltas

    def court_summaries(self, scorecard: MatchScorecard) -> Dict[int, str]:
        """Score line per court for match history, e.g. ``{1: "7-6(4), 6-3"}``."""
        return {
            court.court_number: format_score_display_with_tiebreak(court.sets)
            for court in scorecard.court_results
        }
