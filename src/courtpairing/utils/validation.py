"""Validation utilities for Court Pairing.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Optional

from courtpairing.constants import (
    MAX_COURT_COUNT,
    MAX_FAIR_PLAY_SCORE,
    MAX_NTRP_RATING,
    MIN_FAIR_PLAY_SCORE,
    MIN_NTRP_RATING,
)
from courtpairing.exceptions import (
    FairPlayValidationException,
    InvalidLineupConfigException,
    InvalidScoreException,
    RatingValidationException,
)
from courtpairing.scoring.validator import (
    is_valid_match_tiebreak_score,
    is_valid_tennis_score,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[object] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def as_game_count(value: object) -> Optional[int]:
    """Return ``value`` as an int game count, or None if it is not whole."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return None


# ========== Set Score Validation ==========


def validate_set_score(
    home_games: object, away_games: object, match_tiebreak: bool = False
) -> ValidationResult:
    """Validate one set as entered by a captain.

    Args:
        home_games: Games (or points, for a match tiebreak) won by our team
        away_games: Games (or points) won by the opponent
        match_tiebreak: Whether the set is a 10 point match tiebreak

    Returns:
        ValidationResult whose sanitized value is the ``(home, away)`` tuple

    Example:
        >>> validate_set_score(6, 4).sanitized_value
        (6, 4)
        >>> bool(validate_set_score(6, 5))
        False
    """
    home = as_game_count(home_games)
    away = as_game_count(away_games)
    if home is None or away is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Scores must be whole numbers: {home_games}-{away_games}",
        )

    if home < 0 or away < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Scores cannot be negative: {home}-{away}",
        )

    if match_tiebreak:
        if not is_valid_match_tiebreak_score(home, away):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid match tiebreak score {home}-{away}: play to 10, win by 2"
                ),
            )
    elif not is_valid_tennis_score(home, away):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid set score {home}-{away}: please correct this set score",
        )

    return ValidationResult(is_valid=True, sanitized_value=(home, away))


def validate_set_score_strict(
    home_games: object, away_games: object, match_tiebreak: bool = False
) -> tuple:
    """Validate a set score and raise exception if invalid.

    Raises:
        InvalidScoreException: If the score is invalid
    """
    result = validate_set_score(home_games, away_games, match_tiebreak)
    if not result.is_valid:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


def validate_tiebreak_points(
    tiebreak_home: Optional[int], tiebreak_away: Optional[int]
) -> ValidationResult:
    """Validate the optional tiebreak point pair of a set.

    Both counts are recorded together or not at all.
    """
    if tiebreak_home is None and tiebreak_away is None:
        return ValidationResult(is_valid=True, sanitized_value=None)

    if tiebreak_home is None or tiebreak_away is None:
        return ValidationResult(
            is_valid=False,
            error_message="Tiebreak points must be entered for both sides",
        )

    home = as_game_count(tiebreak_home)
    away = as_game_count(tiebreak_away)
    if home is None or away is None or home < 0 or away < 0:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Tiebreak points must be non-negative whole numbers: "
                f"{tiebreak_home}-{tiebreak_away}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=(home, away))


# ========== Player Validation ==========


def validate_fair_play_score(
    score: object,
    min_score: float = MIN_FAIR_PLAY_SCORE,
    max_score: float = MAX_FAIR_PLAY_SCORE,
) -> ValidationResult:
    """Validate a fair-play score.

    Args:
        score: Fair-play score to validate
        min_score: Minimum allowed score
        max_score: Maximum allowed score

    Returns:
        ValidationResult with the score as float if valid
    """
    try:
        float_score = float(score)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Fair play score must be a number: {score}",
        )

    if not (min_score <= float_score <= max_score):
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Fair play score must be between {min_score:g} and {max_score:g}: "
                f"{float_score:g}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=float_score)


def validate_fair_play_score_strict(score: object) -> float:
    """Validate a fair-play score and raise exception if invalid.

    Raises:
        FairPlayValidationException: If the score is invalid
    """
    result = validate_fair_play_score(score)
    if not result.is_valid:
        raise FairPlayValidationException(result.error_message)
    return result.sanitized_value


def validate_ntrp_rating(
    rating: object,
    min_rating: float = MIN_NTRP_RATING,
    max_rating: float = MAX_NTRP_RATING,
) -> ValidationResult:
    """Validate an NTRP rating.

    NTRP ratings move in half point steps (3.0, 3.5, 4.0 ...). A missing
    rating is valid, unrated players are common on rosters.

    Args:
        rating: Rating value to validate, or None
        min_rating: Minimum allowed rating
        max_rating: Maximum allowed rating

    Returns:
        ValidationResult with the rating as float (or None) if valid
    """
    if rating is None or (isinstance(rating, str) and not rating.strip()):
        return ValidationResult(is_valid=True, sanitized_value=None)

    try:
        float_rating = float(rating)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"NTRP rating must be a number: {rating}",
        )

    if not (min_rating <= float_rating <= max_rating):
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"NTRP rating must be between {min_rating:g} and {max_rating:g}: "
                f"{float_rating:g}"
            ),
        )

    if (float_rating * 2) != int(float_rating * 2):
        return ValidationResult(
            is_valid=False,
            error_message=f"NTRP rating must be in 0.5 steps: {float_rating:g}",
        )

    return ValidationResult(is_valid=True, sanitized_value=float_rating)


def validate_ntrp_rating_strict(rating: object) -> Optional[float]:
    """Validate an NTRP rating and raise exception if invalid.

    Raises:
        RatingValidationException: If the rating is invalid
    """
    result = validate_ntrp_rating(rating)
    if not result.is_valid:
        raise RatingValidationException(result.error_message)
    return result.sanitized_value


# ========== Lineup Validation ==========


def validate_court_count(
    court_count: object, max_courts: int = MAX_COURT_COUNT
) -> ValidationResult:
    """Validate the number of courts requested for a lineup.

    Args:
        court_count: Number of courts
        max_courts: Upper bound for a single match

    Returns:
        ValidationResult with the court count as int if valid
    """
    if court_count is None or isinstance(court_count, bool):
        return ValidationResult(
            is_valid=False,
            error_message="Court count is required",
        )

    try:
        int_value = int(court_count)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Court count must be a number: {court_count}",
        )

    if int_value <= 0 or int_value != court_count:
        return ValidationResult(
            is_valid=False,
            error_message=f"Court count must be a positive whole number: {court_count}",
        )

    if int_value > max_courts:
        return ValidationResult(
            is_valid=False,
            error_message=f"Court count cannot exceed {max_courts}: {int_value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=int_value)


def validate_court_count_strict(court_count: object) -> int:
    """Validate a court count and raise exception if invalid.

    Raises:
        InvalidLineupConfigException: If the court count is invalid
    """
    result = validate_court_count(court_count)
    if not result.is_valid:
        raise InvalidLineupConfigException(result.error_message)
    return result.sanitized_value
