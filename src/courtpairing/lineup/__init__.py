"""Lineup generation: availability gate, candidates, scoring and selection."""

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

from courtpairing.lineup.availability import filter_eligible
from courtpairing.lineup.candidates import generate_candidate_pairs
from courtpairing.lineup.optimizer import (
    ExactLineupStrategy,
    GreedyLineupStrategy,
    LineupOptimizer,
    LineupStrategy,
    get_strategy,
)
from courtpairing.lineup.scorer import PairScorer, calculate_pair_score
from courtpairing.lineup.wizard import LineupWizard

__all__ = [
    "filter_eligible",
    "generate_candidate_pairs",
    "PairScorer",
    "calculate_pair_score",
    "LineupStrategy",
    "GreedyLineupStrategy",
    "ExactLineupStrategy",
    "LineupOptimizer",
    "get_strategy",
    "LineupWizard",
]
