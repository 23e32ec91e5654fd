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

# --- Constants ---
CONFIG_FILE_EXTENSION = ".json"

# Set rules
GAMES_TO_WIN_SET = 6
MIN_SET_MARGIN = 2
MAX_SET_GAMES = 7
TIEBREAK_SET_LOSER_GAMES = 6  # 7-6
EXTENDED_SET_LOSER_GAMES = 5  # 7-5
SETS_PER_COURT = 3  # Best of three
MATCH_TIEBREAK_SET_NUMBER = 3
MATCH_TIEBREAK_POINTS = 10  # Super tiebreak played in place of a third set

# Score display
NO_SCORE_DISPLAY = "No score"
SET_SEPARATOR = ", "

# Pair scoring policy
WIN_PCT_WEIGHT = 0.4
GAMES_PCT_WEIGHT = 0.3
FAIR_PLAY_WEIGHT = 0.3
NEUTRAL_WIN_PCT = 50.0  # Pairs with no history start at the midpoint
NEUTRAL_GAMES_PCT = 50.0

# Fair play and rating bounds
MIN_FAIR_PLAY_SCORE = 0.0
MAX_FAIR_PLAY_SCORE = 100.0
DEFAULT_FAIR_PLAY_SCORE = 100.0
MIN_NTRP_RATING = 1.0
MAX_NTRP_RATING = 7.0

# Availability values (as stored by the roster)
AVAILABILITY_AVAILABLE = "available"
AVAILABILITY_UNAVAILABLE = "unavailable"
AVAILABILITY_MAYBE = "maybe"
AVAILABILITY_LATE = "late"

# Statuses that qualify a player for lineup selection
ELIGIBLE_AVAILABILITY = frozenset(
    {AVAILABILITY_AVAILABLE, AVAILABILITY_MAYBE, AVAILABILITY_LATE}
)

# Match outcome values (as stored on the match row)
RESULT_WIN = "win"
RESULT_LOSS = "loss"
RESULT_TIE = "tie"
RESULT_PENDING = "pending"

# Lineup strategies
STRATEGY_GREEDY = "greedy"
STRATEGY_EXACT = "exact"
LINEUP_STRATEGIES = [STRATEGY_GREEDY, STRATEGY_EXACT]

# Lineup defaults
DEFAULT_COURT_COUNT = 3
MAX_COURT_COUNT = 10
DEFAULT_LINEUP_STRATEGY = STRATEGY_GREEDY
# Exhaustive search grows quickly with the eligible pool
DEFAULT_EXACT_PLAYER_LIMIT = 16
