"""Court result data class."""

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

from courtpairing.models.match.set_score import SetScore
from courtpairing.scoring.outcome import (
    are_all_sets_complete,
    calculate_court_winner,
    count_sets,
)
from courtpairing.type_hints import PlayerId


@dataclass
class CourtResult:
    """One court of a match: the pair we put on it and its sets.

    Attributes
    ----------
    court_number : int
        Court slot in the lineup, starting at 1.
    sets : list of SetScore
        Sets in the order they were played.
    player1_id : str or None
        First player of our pair.
    player2_id : str or None
        Second player of our pair.
    """

    court_number: int
    sets: List[SetScore] = field(default_factory=list)
    player1_id: Optional[PlayerId] = None
    player2_id: Optional[PlayerId] = None

    @property
    def won(self) -> bool:
        """Whether our pair took the court (derived from the sets)."""
        return calculate_court_winner(self.sets)

    @property
    def is_complete(self) -> bool:
        """Every entered set has a winner."""
        return are_all_sets_complete(self.sets)

    @property
    def has_decided_set(self) -> bool:
        """At least one set has a winner, so the court counts toward the match."""
        sets_won, sets_lost = count_sets(self.sets)
        return sets_won + sets_lost > 0

    @property
    def has_pair(self) -> bool:
        return bool(self.player1_id and self.player2_id)

    @property
    def ordered_sets(self) -> List[SetScore]:
        """Sets sorted by set number."""
        return sorted(self.sets, key=lambda s: s.set_number)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court result to dictionary."""
        return {
            "court_number": self.court_number,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "won": self.won,
            "sets": [s.to_dict() for s in self.ordered_sets],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourtResult":
        """Deserialize court result from dictionary.

        ``won`` is ignored if present, it is always recomputed.
        """
        return cls(
            court_number=data["court_number"],
            sets=[SetScore.from_dict(s) for s in data.get("sets", [])],
            player1_id=data.get("player1_id"),
            player2_id=data.get("player2_id"),
        )
