"""A roster member as seen by the lineup engine."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from courtpairing.constants import DEFAULT_FAIR_PLAY_SCORE
from courtpairing.models.enums import AvailabilityStatus
from courtpairing.type_hints import PlayerId


@dataclass(frozen=True, slots=True)
class PlayerRef:
    """
    Read-only view of a roster member used for pairing.

    The engine never changes a roster member; availability answers and
    fair-play scores are owned by the roster and handed in for each run.

    Attributes
    ----------
    id : str
        Roster member identifier.
    full_name : str
        Player's full name.
    ntrp_rating : float or None
        NTRP rating, None for unrated players.
    fair_play_score : float
        Fairness/participation metric, 0 to 100.
    availability : AvailabilityStatus
        Answer for the match the lineup is built for.

    Examples
    --------
    Creating a player::

        player = PlayerRef(
            id="rm-001",
            full_name="Serena Park",
            ntrp_rating=4.0,
            fair_play_score=92.5,
            availability=AvailabilityStatus.MAYBE,
        )

    Marking the player unavailable for another match::

        away = player.with_availability(AvailabilityStatus.UNAVAILABLE)
    """

    id: PlayerId
    full_name: str
    ntrp_rating: Optional[float] = None
    fair_play_score: float = DEFAULT_FAIR_PLAY_SCORE
    availability: AvailabilityStatus = AvailabilityStatus.AVAILABLE

    def with_availability(self, availability: AvailabilityStatus) -> "PlayerRef":
        """Copy of the player with another availability answer."""
        return replace(self, availability=availability)

    def __str__(self) -> str:
        rating = f"{self.ntrp_rating:.1f}" if self.ntrp_rating is not None else "NR"
        return f"{self.full_name} ({rating})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to a roster row."""
        return {
            "id": self.id,
            "full_name": self.full_name,
            "ntrp_rating": self.ntrp_rating,
            "fair_play_score": self.fair_play_score,
            "availability": self.availability.value,
        }
