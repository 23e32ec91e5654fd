"""Data models for a match scorecard."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from courtpairing.exceptions import CourtNotFoundException
from courtpairing.models.match.court_result import CourtResult
from courtpairing.type_hints import PlayerId, TeamId


@dataclass
class MatchScorecard:
    """Container for all scores entered for one team match.

    Attributes
    ----------
    match_id : str
        Identifier of the match.
    team_id : str
        Team whose pairs played the home side of every court.
    courts : dict of int to CourtResult
        Courts keyed by court number.
    is_finalized : bool
        Indicates whether the result has been pushed into pair statistics.
    """

    match_id: str
    team_id: TeamId
    courts: Dict[int, CourtResult] = field(default_factory=dict)
    is_finalized: bool = False

    def add_court(
        self,
        court_number: int,
        player1_id: Optional[PlayerId] = None,
        player2_id: Optional[PlayerId] = None,
    ) -> CourtResult:
        """Assign a pair to a court, keeping scores already entered for it."""
        court = self.courts.get(court_number)
        if court is None:
            court = CourtResult(court_number=court_number)
            self.courts[court_number] = court
        court.player1_id = player1_id
        court.player2_id = player2_id
        return court

    def get_court(self, court_number: int) -> CourtResult:
        """Return a court.

        Raises:
            CourtNotFoundException: If no pair was assigned to the court
        """
        try:
            return self.courts[court_number]
        except KeyError:
            raise CourtNotFoundException(
                f"Court {court_number} is not part of match {self.match_id}"
            ) from None

    @property
    def court_results(self) -> List[CourtResult]:
        """Courts in court number order."""
        return [self.courts[n] for n in sorted(self.courts)]

    @property
    def scored_courts(self) -> List[CourtResult]:
        """Courts with a pair and at least one entered set."""
        return [c for c in self.court_results if c.has_pair and c.sets]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize scorecard to dictionary."""
        return {
            "match_id": self.match_id,
            "team_id": self.team_id,
            "courts": [c.to_dict() for c in self.court_results],
            "is_finalized": self.is_finalized,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchScorecard":
        """Deserialize scorecard from dictionary."""
        courts = [CourtResult.from_dict(c) for c in data.get("courts", [])]
        return cls(
            match_id=data["match_id"],
            team_id=data["team_id"],
            courts={c.court_number: c for c in courts},
            is_finalized=data.get("is_finalized", False),
        )
