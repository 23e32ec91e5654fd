"""Exceptions for use in Court Pairing"""

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

from typing import Optional

# ========== Base Application Exception ==========


class CourtPairingException(Exception):
    """Base exception for all Court Pairing errors.

    All custom exceptions in the package should inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Score Exceptions ==========


class ScoreException(CourtPairingException):
    """Base exception for score entry and match result errors."""

    pass


class InvalidScoreException(ScoreException):
    """Raised when a set's game counts are not a valid tennis score.

    The offending court and set are kept on the exception so the entry
    boundary can tell the captain exactly which score to correct.
    """

    def __init__(
        self,
        message: str,
        court_number: Optional[int] = None,
        set_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.court_number = court_number
        self.set_number = set_number


class MatchNotCompleteException(ScoreException):
    """Raised when finalizing a match whose courts still have unfinished sets."""

    pass


class MatchAlreadyFinalizedException(ScoreException):
    """Raised when finalizing a match that was already finalized."""

    pass


class CourtNotFoundException(ScoreException):
    """Raised when a requested court is not part of the match."""

    pass


# ========== Statistics Exceptions ==========


class StatisticsException(CourtPairingException):
    """Base exception for pair statistics errors."""

    pass


class InvalidPairStatisticException(StatisticsException):
    """Raised when a pair statistic or increment breaks its counting rules."""

    pass


# ========== Lineup Exceptions ==========


class LineupException(CourtPairingException):
    """Base exception for lineup generation errors."""

    pass


class InvalidLineupConfigException(LineupException):
    """Raised when a lineup request has an invalid court count or limit."""

    pass


class UnknownStrategyException(LineupException):
    """Raised when a lineup strategy name is not registered."""

    pass


# ========== Player Exceptions ==========


class PlayerException(CourtPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when roster data for a player is invalid or incomplete."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(CourtPairingException):
    """Base exception for validation errors."""

    pass


class FairPlayValidationException(ValidationException):
    """Raised when a fair-play score is out of range."""

    pass


class RatingValidationException(ValidationException):
    """Raised when an NTRP rating is invalid."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when a configuration file cannot be found."""

    pass
