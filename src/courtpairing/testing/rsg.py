"""Random Season Generator (RSG) for lineup and scoring runs."""

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
import json
import math
import random
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from courtpairing.constants import (
    DEFAULT_COURT_COUNT,
    DEFAULT_LINEUP_STRATEGY,
    GAMES_TO_WIN_SET,
    MATCH_TIEBREAK_POINTS,
    MATCH_TIEBREAK_SET_NUMBER,
    MAX_NTRP_RATING,
    MAX_SET_GAMES,
    MIN_NTRP_RATING,
)
from courtpairing.controllers.match import MatchScoreRecorder
from courtpairing.lineup.wizard import LineupWizard
from courtpairing.models.enums import AvailabilityStatus
from courtpairing.models.lineup import LineupConfig, PairSuggestion
from courtpairing.models.match import MatchScorecard, SetScore
from courtpairing.models.player import PlayerFactory, PlayerRef
from courtpairing.statistics.store import (
    InMemoryPairStatisticsStore,
    PairStatisticsStore,
)
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

# Points needed to take a regular 7 point tiebreak
TIEBREAK_POINTS = 7


class NtrpDistribution(Enum):
    """Rating distribution patterns for generated rosters."""

    UNIFORM = "uniform"
    NORMAL = "normal"
    CLUB = "club"


class ScorePattern(Enum):
    """How strongly ratings decide simulated sets."""

    REALISTIC = "realistic"
    BALANCED = "balanced"
    RANDOM = "random"


@dataclass
class RSGConfig:
    """Configuration for the Random Season Generator."""

    num_players: int = 12
    num_matches: int = 8
    court_count: int = DEFAULT_COURT_COUNT
    strategy: str = DEFAULT_LINEUP_STRATEGY
    team_id: str = "team-rsg"
    ntrp_distribution: NtrpDistribution = NtrpDistribution.NORMAL
    ntrp_range: Tuple[float, float] = (2.5, 5.0)
    score_pattern: ScorePattern = ScorePattern.REALISTIC
    availability_weights: Dict[AvailabilityStatus, float] = field(
        default_factory=lambda: {
            AvailabilityStatus.AVAILABLE: 0.6,
            AvailabilityStatus.MAYBE: 0.15,
            AvailabilityStatus.LATE: 0.1,
            AvailabilityStatus.UNAVAILABLE: 0.15,
        }
    )
    match_tiebreak_rate: float = 0.3
    season_start: Optional[date] = None
    seed: Optional[int] = None


class RosterFactory:
    """Factory for realistic club rosters."""

    def __init__(self, config: RSGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.player_factory = PlayerFactory()

    def create_players(self) -> List[PlayerRef]:
        """Create the roster, everybody available."""
        players = []
        for i in range(self.config.num_players):
            rating = self._generate_rating()
            players.append(
                self.player_factory.create_player(
                    player_id=f"rm-{i + 1:03d}",
                    full_name=self._generate_name(i + 1, rating),
                    ntrp_rating=rating,
                    fair_play_score=self._generate_fair_play(),
                )
            )

        logger.info(
            f"Created {len(players)} players with "
            f"{self.config.ntrp_distribution.value} NTRP distribution"
        )
        return players

    def assign_availability(self, players: List[PlayerRef]) -> List[PlayerRef]:
        """Draw a fresh availability answer for every player."""
        statuses = list(self.config.availability_weights)
        weights = [self.config.availability_weights[s] for s in statuses]
        return [
            player.with_availability(self.random.choices(statuses, weights=weights)[0])
            for player in players
        ]

    def _generate_rating(self) -> float:
        min_rating, max_rating = self.config.ntrp_range
        if self.config.ntrp_distribution == NtrpDistribution.NORMAL:
            mean = (min_rating + max_rating) / 2
            std_dev = (max_rating - min_rating) / 6
            rating = self.random.gauss(mean, std_dev)
        elif self.config.ntrp_distribution == NtrpDistribution.CLUB:
            base = self.random.choice([3.0, 3.5, 4.0])
            rating = base + self.random.choice([-0.5, 0.0, 0.0, 0.5])
        else:
            rating = self.random.uniform(min_rating, max_rating)

        rating = max(min_rating, min(max_rating, rating))
        rating = max(MIN_NTRP_RATING, min(MAX_NTRP_RATING, rating))
        # NTRP ratings move in half point steps
        return round(rating * 2) / 2

    def _generate_fair_play(self) -> float:
        # Most players sit near the top of the scale
        return round(max(0.0, min(100.0, self.random.gauss(85, 10))), 1)

    def _generate_name(self, number: int, rating: float) -> str:
        if rating < 3.0:
            prefix = "Beginner"
        elif rating < 3.5:
            prefix = "Club"
        elif rating < 4.0:
            prefix = "League"
        elif rating < 4.5:
            prefix = "Advanced"
        else:
            prefix = "Tournament"
        return f"{prefix}-{number:03d}"


class ScoreSimulator:
    """Simulates valid tennis scores for a court."""

    def __init__(self, config: RSGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed + 1)
            if config.seed is not None
            else random.Random()
        )

    def opponent_strength(self) -> float:
        """Mean NTRP of an opposing pair."""
        min_rating, max_rating = self.config.ntrp_range
        return self.random.uniform(min_rating, max_rating)

    def set_win_probability(self, home_strength: float, away_strength: float) -> float:
        diff = home_strength - away_strength
        if self.config.score_pattern == ScorePattern.RANDOM:
            return 0.5
        if self.config.score_pattern == ScorePattern.BALANCED:
            return max(0.2, min(0.8, 0.5 + diff * 0.2))
        return 1.0 / (1.0 + math.exp(-3.0 * diff))

    def simulate_court(
        self, home_strength: float, away_strength: float
    ) -> List[SetScore]:
        """Play a best of three court, with a match tiebreak at one set all
        when the dice say so."""
        p_home = self.set_win_probability(home_strength, away_strength)
        sets: List[SetScore] = []
        home_sets = away_sets = 0

        while home_sets < 2 and away_sets < 2:
            set_number = len(sets) + 1
            home_wins = self.random.random() < p_home
            if (
                set_number == MATCH_TIEBREAK_SET_NUMBER
                and self.random.random() < self.config.match_tiebreak_rate
            ):
                sets.append(self._match_tiebreak(home_wins))
            else:
                sets.append(self._regular_set(set_number, home_wins))
            if home_wins:
                home_sets += 1
            else:
                away_sets += 1

        return sets

    def _regular_set(self, set_number: int, home_wins: bool) -> SetScore:
        roll = self.random.random()
        tiebreak_points = None
        if roll < 0.15:
            winner_games, loser_games = MAX_SET_GAMES, GAMES_TO_WIN_SET
            tiebreak_points = self._extended_points(TIEBREAK_POINTS)
        elif roll < 0.3:
            winner_games, loser_games = MAX_SET_GAMES, GAMES_TO_WIN_SET - 1
        else:
            winner_games = GAMES_TO_WIN_SET
            loser_games = self.random.randint(0, GAMES_TO_WIN_SET - 2)

        home_games, away_games = (
            (winner_games, loser_games) if home_wins else (loser_games, winner_games)
        )
        tiebreak_home = tiebreak_away = None
        if tiebreak_points is not None:
            winner_points, loser_points = tiebreak_points
            tiebreak_home, tiebreak_away = (
                (winner_points, loser_points)
                if home_wins
                else (loser_points, winner_points)
            )

        return SetScore(
            home_games=home_games,
            away_games=away_games,
            is_tiebreak=tiebreak_points is not None,
            set_number=set_number,
            tiebreak_home=tiebreak_home,
            tiebreak_away=tiebreak_away,
        )

    def _match_tiebreak(self, home_wins: bool) -> SetScore:
        winner_points, loser_points = self._extended_points(MATCH_TIEBREAK_POINTS)
        home_points, away_points = (
            (winner_points, loser_points)
            if home_wins
            else (loser_points, winner_points)
        )
        return SetScore(
            home_games=home_points,
            away_games=away_points,
            set_number=MATCH_TIEBREAK_SET_NUMBER,
            is_match_tiebreak=True,
        )

    def _extended_points(self, target: int) -> Tuple[int, int]:
        """Winner and loser points of a tiebreak played to ``target``, win by 2."""
        loser = self.random.randint(0, target + 2)
        if loser <= target - 2:
            return target, loser
        return loser + 2, loser


class RandomSeasonGenerator:
    """Main season generator: rosters, weekly lineups, scores and statistics."""

    def __init__(
        self, config: RSGConfig, store: Optional[PairStatisticsStore] = None
    ):
        self.config = config
        self.roster_factory = RosterFactory(config)
        self.score_simulator = ScoreSimulator(config)
        self.store = store if store is not None else InMemoryPairStatisticsStore()
        self.recorder = MatchScoreRecorder()
        self.wizard = LineupWizard(
            self.store,
            LineupConfig(court_count=config.court_count, strategy=config.strategy),
        )

    def generate_complete_season(self) -> Dict:
        """Generate a season: one lineup, scorecard and result per week."""
        logger.info(
            f"Generating season: {self.config.num_players} players, "
            f"{self.config.num_matches} matches"
        )

        players = self.roster_factory.create_players()
        start = self.config.season_start or date.today()
        season_data = {"config": self.config, "players": players, "matches": []}

        for match_number in range(1, self.config.num_matches + 1):
            match_date = start + relativedelta(weeks=+(match_number - 1))
            season_data["matches"].append(
                self._simulate_match(players, match_number, match_date)
            )

        season_data["statistics"] = self.store_rows()
        logger.info("Season generation complete")
        return season_data

    def store_rows(self) -> List[Dict]:
        if isinstance(self.store, InMemoryPairStatisticsStore):
            return self.store.to_rows()
        return []

    def _simulate_match(
        self, players: List[PlayerRef], match_number: int, match_date: date
    ) -> Dict:
        roster = self.roster_factory.assign_availability(players)
        lineup = self.wizard.suggest(self.config.team_id, roster)

        scorecard = MatchScorecard(
            match_id=f"match-{match_number:02d}", team_id=self.config.team_id
        )
        for court_number, suggestion in enumerate(lineup, start=1):
            scorecard.add_court(
                court_number, suggestion.player1.id, suggestion.player2.id
            )
            sets = self.score_simulator.simulate_court(
                self._pair_strength(suggestion),
                self.score_simulator.opponent_strength(),
            )
            self.recorder.record_court_scores(scorecard, court_number, sets)

        result = self.recorder.evaluate(scorecard)
        deltas = []
        if scorecard.scored_courts:
            deltas = self.recorder.finalize(scorecard, self.store)

        logger.debug(
            f"Match {match_number} on {match_date.isoformat()}: "
            f"{result.outcome.value} {result.score_summary}"
        )
        return {
            "match_number": match_number,
            "match_date": match_date,
            "roster": roster,
            "lineup": lineup,
            "scorecard": scorecard,
            "result": result,
            "deltas": deltas,
        }

    def _pair_strength(self, suggestion: PairSuggestion) -> float:
        min_rating, max_rating = self.config.ntrp_range
        default = (min_rating + max_rating) / 2
        ratings = [
            p.ntrp_rating if p.ntrp_rating is not None else default
            for p in (suggestion.player1, suggestion.player2)
        ]
        return sum(ratings) / len(ratings)

    def export_json_format(self, season_data: Dict) -> str:
        """Serialize a generated season for storage or inspection."""
        export_data = {
            "season_config": {
                "num_players": self.config.num_players,
                "num_matches": self.config.num_matches,
                "court_count": self.config.court_count,
                "strategy": self.config.strategy,
                "ntrp_distribution": self.config.ntrp_distribution.value,
                "score_pattern": self.config.score_pattern.value,
                "seed": self.config.seed,
            },
            "players": [p.to_dict() for p in season_data["players"]],
            "matches": [
                {
                    "match_number": m["match_number"],
                    "match_date": m["match_date"].isoformat(),
                    "lineup": [s.to_dict() for s in m["lineup"]],
                    "scorecard": m["scorecard"].to_dict(),
                    "result": m["result"].to_dict(),
                    "pair_statistic_deltas": [d.to_dict() for d in m["deltas"]],
                }
                for m in season_data["matches"]
            ],
            "pair_statistics": season_data.get("statistics", []),
        }
        return json.dumps(export_data, indent=2)


def create_random_statistics(
    players: List[PlayerRef],
    team_id: str,
    history_rate: float = 0.6,
    max_matches: int = 10,
    seed: Optional[int] = None,
) -> InMemoryPairStatisticsStore:
    """Store with made-up history for a share of the roster's pairs.

    Args:
        players: Roster to invent history for
        team_id: Team owning the statistics
        history_rate: Share of pairs that get any history
        max_matches: Most courts a pair can have played together
        seed: Random seed for reproducibility
    """
    rng = random.Random(seed) if seed is not None else random.Random()
    store = InMemoryPairStatisticsStore()
    for i in range(len(players)):
        for j in range(i + 1, len(players)):
            if rng.random() >= history_rate:
                continue
            for _ in range(rng.randint(1, max_matches)):
                games_played = rng.randint(12, 26)
                games_won = rng.randint(0, games_played)
                store.increment(
                    team_id,
                    players[i].id,
                    players[j].id,
                    won=games_won * 2 > games_played,
                    games_won=games_won,
                    games_played=games_played,
                )
    return store


def create_rsg_generator(config: RSGConfig) -> RandomSeasonGenerator:
    """Create a season generator with given configuration."""
    return RandomSeasonGenerator(config)


def create_small_season(
    num_players: int = 6, seed: Optional[int] = None
) -> RandomSeasonGenerator:
    """Create small season for testing."""
    config = RSGConfig(
        num_players=num_players,
        num_matches=4,
        court_count=2,
        seed=seed,
    )
    return create_rsg_generator(config)


def create_normal_season(
    num_players: int = 12, seed: Optional[int] = None
) -> RandomSeasonGenerator:
    """Create a typical league season."""
    config = RSGConfig(
        num_players=num_players,
        num_matches=10,
        court_count=DEFAULT_COURT_COUNT,
        seed=seed,
    )
    return create_rsg_generator(config)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Random Season Generator (RSG)")
    parser.add_argument(
        "--players",
        type=int,
        default=12,
        help="Number of players on the roster (default: 12)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--type",
        choices=["normal", "small"],
        default="normal",
        help="Season type: normal (10 matches, 3 courts), small (4 matches, 2 courts)",
    )
    args = parser.parse_args()

    if args.type == "small":
        generator = create_small_season(args.players, seed=args.seed)
    else:
        generator = create_normal_season(args.players, seed=args.seed)

    season = generator.generate_complete_season()
    print("Generated Season:")
    print(f"Players: {len(season['players'])}")
    print(f"Matches: {len(season['matches'])}")
    for match in season["matches"]:
        print(
            f"  {match['match_date'].isoformat()}  "
            f"{match['result'].outcome.value:<7} {match['result'].score_summary}"
        )
