"""Match scoring models: sets, courts, results and scorecards."""

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

from courtpairing.models.match.match_result import MatchResult
from courtpairing.models.match.set_score import SetScore
from courtpairing.models.match.court_result import CourtResult
from courtpairing.models.match.scorecard import MatchScorecard

__all__ = ["SetScore", "CourtResult", "MatchResult", "MatchScorecard"]
