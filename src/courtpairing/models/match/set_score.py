"""Set score data class."""

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
from typing import Any, Dict, Optional

from courtpairing.constants import MATCH_TIEBREAK_SET_NUMBER, SETS_PER_COURT
from courtpairing.exceptions import InvalidScoreException
from courtpairing.models.enums import ScoreKind
from courtpairing.scoring.validator import classify_set_score, requires_tiebreak
from courtpairing.utils.validation import (
    as_game_count,
    validate_set_score,
    validate_tiebreak_points,
)


@dataclass(frozen=True)
class SetScore:
    """One set of a court, seen from our (home) team.

    Instances are immutable: a re-edit replaces the set, which sends it
    through validation again.

    Attributes
    ----------
    home_games : int
        Games won by our pair. Points, when ``is_match_tiebreak`` is set.
    away_games : int
        Games won by the opponents. Points, when ``is_match_tiebreak`` is set.
    is_tiebreak : bool
        Whether the set was decided by a tiebreak at 6-6.
    set_number : int
        1-based position of the set on the court.
    tiebreak_home : int or None
        Tiebreak points won by our pair, if recorded.
    tiebreak_away : int or None
        Tiebreak points won by the opponents, if recorded.
    is_match_tiebreak : bool
        Whether this third "set" is a 10 point match tiebreak.
    """

    home_games: int
    away_games: int
    is_tiebreak: bool = False
    set_number: int = 1
    tiebreak_home: Optional[int] = None
    tiebreak_away: Optional[int] = None
    is_match_tiebreak: bool = False

    @property
    def kind(self) -> ScoreKind:
        """Classification of the score, INVALID if it breaks the rules."""
        return classify_set_score(
            self.home_games, self.away_games, self.is_match_tiebreak
        )

    @property
    def has_tiebreak_points(self) -> bool:
        return self.tiebreak_home is not None and self.tiebreak_away is not None

    def validate(self, court_number: Optional[int] = None) -> None:
        """Check the set against the scoring rules.

        Game counts, tiebreak points and the set number must already be
        ints; ``from_dict`` normalizes row values before they get here.

        Args:
            court_number: Court the set belongs to, used in the error

        Raises:
            InvalidScoreException: If the set cannot be accepted
        """
        counts = [self.set_number, self.home_games, self.away_games]
        counts += [p for p in (self.tiebreak_home, self.tiebreak_away) if p is not None]
        if any(isinstance(c, bool) or not isinstance(c, int) for c in counts):
            raise InvalidScoreException(
                f"Set {self.set_number!r} has non-integer values: "
                f"{self.home_games!r}-{self.away_games!r}",
                court_number=court_number,
                set_number=self.set_number if isinstance(self.set_number, int) else None,
            )

        if not (1 <= self.set_number <= SETS_PER_COURT):
            raise InvalidScoreException(
                f"Set number must be between 1 and {SETS_PER_COURT}: {self.set_number}",
                court_number=court_number,
                set_number=self.set_number,
            )

        if self.is_match_tiebreak and self.set_number != MATCH_TIEBREAK_SET_NUMBER:
            raise InvalidScoreException(
                f"Only set {MATCH_TIEBREAK_SET_NUMBER} can be a match tiebreak",
                court_number=court_number,
                set_number=self.set_number,
            )

        result = validate_set_score(
            self.home_games, self.away_games, self.is_match_tiebreak
        )
        if not result:
            raise InvalidScoreException(
                result.error_message,
                court_number=court_number,
                set_number=self.set_number,
            )

        tiebreak_set = not self.is_match_tiebreak and requires_tiebreak(
            self.home_games, self.away_games
        )
        if self.is_tiebreak != tiebreak_set:
            raise InvalidScoreException(
                f"A {self.home_games}-{self.away_games} set "
                f"{'is' if tiebreak_set else 'is not'} a tiebreak set",
                court_number=court_number,
                set_number=self.set_number,
            )

        points = validate_tiebreak_points(self.tiebreak_home, self.tiebreak_away)
        if not points:
            raise InvalidScoreException(
                points.error_message,
                court_number=court_number,
                set_number=self.set_number,
            )

        if self.has_tiebreak_points and not tiebreak_set:
            raise InvalidScoreException(
                f"Tiebreak points recorded on a {self.home_games}-{self.away_games} set",
                court_number=court_number,
                set_number=self.set_number,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the set to a match_scores row."""
        return {
            "set_number": self.set_number,
            "home_games": self.home_games,
            "away_games": self.away_games,
            "tiebreak_home": self.tiebreak_home,
            "tiebreak_away": self.tiebreak_away,
            "is_match_tiebreak": self.is_match_tiebreak,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SetScore":
        """Deserialize a set from a match_scores row.

        Whole numbers sent as strings or floats (``"6"``, ``6.0``) become
        ints; anything else is kept as is and rejected by ``validate``.
        Rows do not store the tiebreak flag, it follows from a 7-6 score.
        """
        home_games = _whole(data["home_games"])
        away_games = _whole(data["away_games"])
        is_match_tiebreak = bool(data.get("is_match_tiebreak", False))
        is_tiebreak = data.get("is_tiebreak")
        if is_tiebreak is None:
            is_tiebreak = (
                not is_match_tiebreak
                and isinstance(home_games, int)
                and isinstance(away_games, int)
                and requires_tiebreak(home_games, away_games)
            )
        return cls(
            home_games=home_games,
            away_games=away_games,
            is_tiebreak=bool(is_tiebreak),
            set_number=_whole(data.get("set_number", 1)),
            tiebreak_home=_whole(data.get("tiebreak_home")),
            tiebreak_away=_whole(data.get("tiebreak_away")),
            is_match_tiebreak=is_match_tiebreak,
        )


def _whole(value: Any) -> Any:
    """``value`` as an int when it is a whole number, otherwise unchanged."""
    count = as_game_count(value)
    return value if count is None else count
