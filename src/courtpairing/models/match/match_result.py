"""Match result data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from courtpairing.models.enums import MatchOutcome


@dataclass(frozen=True)
class MatchResult:
    """Represents the team result of a match.

    Attributes
    ----------
    outcome : MatchOutcome
        Win, loss or tie by courts; pending while courts are unfinished.
    courts_won : int
        Courts our team won.
    courts_lost : int
        Courts our team lost.
    """

    outcome: MatchOutcome
    courts_won: int = 0
    courts_lost: int = 0

    @property
    def score_summary(self) -> str:
        """Courts won and lost, e.g. ``"2-1"``."""
        return f"{self.courts_won}-{self.courts_lost}"

    @property
    def is_pending(self) -> bool:
        return self.outcome is MatchOutcome.PENDING

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the columns stored on the match row."""
        return {
            "match_result": self.outcome.value,
            "score_summary": self.score_summary,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize from a match row."""
        won, lost = data.get("score_summary", "0-0").split("-")
        return cls(
            outcome=MatchOutcome(data["match_result"]),
            courts_won=int(won),
            courts_lost=int(lost),
        )
