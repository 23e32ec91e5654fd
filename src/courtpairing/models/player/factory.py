"""Factory for building PlayerRef instances from roster data."""

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

from typing import Any, Dict, Iterable, List, Optional, Union

from courtpairing.constants import DEFAULT_FAIR_PLAY_SCORE
from courtpairing.exceptions import InvalidPlayerDataException
from courtpairing.models.enums import AvailabilityStatus
from courtpairing.models.player.player_ref import PlayerRef
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import (
    validate_fair_play_score,
    validate_ntrp_rating,
)

logger = setup_logger(__name__)


class PlayerFactory:
    """Factory for creating PlayerRef instances.

    Roster rows come from the hosted store with loose types (ratings as
    strings, missing fair-play scores, free-form availability). The factory
    normalizes them and validates the numeric fields.

    Example:
        >>> factory = PlayerFactory()
        >>> player = factory.create_player("rm-1", "Ana Ruiz", ntrp_rating="3.5")
        >>> player.ntrp_rating
        3.5
    """

    def __init__(self, strict: bool = True):
        """Initialize the PlayerFactory.

        Args:
            strict: Whether to raise on invalid data; otherwise the invalid
                field is replaced by its default and a warning is logged
        """
        self.strict = strict

    def create_player(
        self,
        player_id: str,
        full_name: str,
        ntrp_rating: Optional[Union[float, str]] = None,
        fair_play_score: Optional[Union[float, str]] = None,
        availability: Union[AvailabilityStatus, str, None] = None,
    ) -> PlayerRef:
        """Create a PlayerRef.

        Args:
            player_id: Roster member id
            full_name: Player's name
            ntrp_rating: NTRP rating, None for unrated
            fair_play_score: Fair-play score, defaults to the maximum
            availability: Availability answer, defaults to available

        Returns:
            PlayerRef instance

        Raises:
            InvalidPlayerDataException: If validation fails and strict=True
        """
        if not player_id:
            raise InvalidPlayerDataException("Player id is required")

        errors: List[str] = []

        rating_result = validate_ntrp_rating(ntrp_rating)
        rating = rating_result.sanitized_value if rating_result else None
        if not rating_result:
            errors.append(rating_result.error_message)

        if fair_play_score is None:
            fair_play = DEFAULT_FAIR_PLAY_SCORE
        else:
            fair_play_result = validate_fair_play_score(fair_play_score)
            fair_play = (
                fair_play_result.sanitized_value
                if fair_play_result
                else DEFAULT_FAIR_PLAY_SCORE
            )
            if not fair_play_result:
                errors.append(fair_play_result.error_message)

        try:
            status = self._parse_availability(availability)
        except ValueError as e:
            errors.append(str(e))
            status = AvailabilityStatus.UNAVAILABLE

        if errors:
            error_msg = "; ".join(errors)
            if self.strict:
                raise InvalidPlayerDataException(
                    f"Invalid player data for {full_name}: {error_msg}"
                )
            logger.warning(f"Player {full_name} has invalid data: {error_msg}")

        return PlayerRef(
            id=str(player_id),
            full_name=full_name,
            ntrp_rating=rating,
            fair_play_score=fair_play,
            availability=status,
        )

    def from_roster_row(self, row: Dict[str, Any]) -> PlayerRef:
        """Create a player from a roster_members row joined with availability."""
        return self.create_player(
            player_id=row.get("id"),
            full_name=row.get("full_name", ""),
            ntrp_rating=row.get("ntrp_rating"),
            fair_play_score=row.get("fair_play_score"),
            availability=row.get("availability"),
        )

    def from_roster_rows(self, rows: Iterable[Dict[str, Any]]) -> List[PlayerRef]:
        """Create players for a whole roster, in roster order."""
        return [self.from_roster_row(row) for row in rows]

    @staticmethod
    def _parse_availability(
        availability: Union[AvailabilityStatus, str, None],
    ) -> AvailabilityStatus:
        if availability is None:
            return AvailabilityStatus.AVAILABLE
        if isinstance(availability, AvailabilityStatus):
            return availability
        try:
            return AvailabilityStatus(str(availability).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown availability: {availability}") from None
