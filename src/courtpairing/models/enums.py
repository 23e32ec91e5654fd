"""Closed enumerations shared by the scoring and lineup engines."""

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

from enum import Enum

from courtpairing.constants import (
    AVAILABILITY_AVAILABLE,
    AVAILABILITY_LATE,
    AVAILABILITY_MAYBE,
    AVAILABILITY_UNAVAILABLE,
    ELIGIBLE_AVAILABILITY,
    RESULT_LOSS,
    RESULT_PENDING,
    RESULT_TIE,
    RESULT_WIN,
)
from courtpairing.type_hints import AWAY, HOME


class Side(Enum):
    """Side of a court: our team plays as home."""

    HOME = HOME
    AWAY = AWAY

    @property
    def opponent(self) -> "Side":
        return Side.AWAY if self is Side.HOME else Side.HOME


class AvailabilityStatus(Enum):
    """A roster member's answer for a match."""

    AVAILABLE = AVAILABILITY_AVAILABLE
    UNAVAILABLE = AVAILABILITY_UNAVAILABLE
    MAYBE = AVAILABILITY_MAYBE
    LATE = AVAILABILITY_LATE

    @property
    def is_eligible(self) -> bool:
        """Whether a player with this status may be put in a lineup."""
        return self.value in ELIGIBLE_AVAILABILITY


class MatchOutcome(Enum):
    """Team result of a match, decided by courts won."""

    WIN = RESULT_WIN
    LOSS = RESULT_LOSS
    TIE = RESULT_TIE
    # Not every court has finished all of its sets yet
    PENDING = RESULT_PENDING


class ScoreKind(Enum):
    """Classification of a recorded set score."""

    REGULAR = "regular"  # 6-0 .. 6-4, 7-5
    TIEBREAK = "tiebreak"  # 7-6
    MATCH_TIEBREAK = "match_tiebreak"  # 10 point super tiebreak as third set
    INVALID = "invalid"
