"""Pair statistic data classes."""

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

from courtpairing.exceptions import InvalidPairStatisticException
from courtpairing.type_hints import PairKey, PlayerId, TeamId


def pair_key(player_a: PlayerId, player_b: PlayerId) -> PairKey:
    """Order-independent key for two players.

    Raises:
        InvalidPairStatisticException: If both ids are the same player
    """
    if player_a == player_b:
        raise InvalidPairStatisticException(
            f"A pair needs two different players: {player_a}"
        )
    a, b = str(player_a), str(player_b)
    return (a, b) if a < b else (b, a)


@dataclass(frozen=True)
class PairStatisticDelta:
    """What one finalized court adds to a pair's statistic.

    Attributes
    ----------
    team_id : str
        Team owning the statistic.
    player1_id, player2_id : str
        The pair, in ascending id order.
    won : bool
        Whether the pair won the court.
    games_won : int
        Games the pair won on the court.
    games_played : int
        Games played on the court.
    """

    team_id: TeamId
    player1_id: PlayerId
    player2_id: PlayerId
    won: bool
    games_won: int
    games_played: int

    def __post_init__(self):
        if self.games_won < 0 or self.games_played < self.games_won:
            raise InvalidPairStatisticException(
                f"Games won ({self.games_won}) must be between 0 and games "
                f"played ({self.games_played})"
            )

    @classmethod
    def for_pair(
        cls,
        team_id: TeamId,
        player_a: PlayerId,
        player_b: PlayerId,
        won: bool,
        games_won: int,
        games_played: int,
    ) -> "PairStatisticDelta":
        """Build a delta with the pair key normalized."""
        player1_id, player2_id = pair_key(player_a, player_b)
        return cls(team_id, player1_id, player2_id, won, games_won, games_played)

    @property
    def key(self) -> PairKey:
        return (self.player1_id, self.player2_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "won": self.won,
            "games_won": self.games_won,
            "games_played": self.games_played,
        }


@dataclass(frozen=True)
class PairStatistic:
    """Aggregated history of two players partnering on a team.

    Attributes
    ----------
    team_id : str
        Team owning the statistic.
    player1_id, player2_id : str
        The pair, in ascending id order.
    matches_together : int
        Finalized courts the pair played together.
    wins : int
        Courts the pair won.
    total_games_won : int
        Games won across those courts.
    total_games_played : int
        Games played across those courts.
    """

    team_id: TeamId
    player1_id: PlayerId
    player2_id: PlayerId
    matches_together: int = 0
    wins: int = 0
    total_games_won: int = 0
    total_games_played: int = 0

    def __post_init__(self):
        if not (0 <= self.wins <= self.matches_together):
            raise InvalidPairStatisticException(
                f"Wins ({self.wins}) must be between 0 and matches together "
                f"({self.matches_together})"
            )
        if not (0 <= self.total_games_won <= self.total_games_played):
            raise InvalidPairStatisticException(
                f"Games won ({self.total_games_won}) must be between 0 and games "
                f"played ({self.total_games_played})"
            )

    @classmethod
    def empty(
        cls, team_id: TeamId, player_a: PlayerId, player_b: PlayerId
    ) -> "PairStatistic":
        """Statistic for a pair that has not played together yet."""
        player1_id, player2_id = pair_key(player_a, player_b)
        return cls(team_id=team_id, player1_id=player1_id, player2_id=player2_id)

    @property
    def key(self) -> PairKey:
        return (self.player1_id, self.player2_id)

    @property
    def win_percentage(self) -> Optional[float]:
        """Share of courts won (0-100), None without history."""
        if self.matches_together == 0:
            return None
        return self.wins / self.matches_together * 100

    @property
    def games_percentage(self) -> Optional[float]:
        """Share of games won (0-100), None without history."""
        if self.total_games_played == 0:
            return None
        return self.total_games_won / self.total_games_played * 100

    def apply(self, delta: PairStatisticDelta) -> "PairStatistic":
        """Return the statistic with one finalized court added."""
        if delta.key != self.key or delta.team_id != self.team_id:
            raise InvalidPairStatisticException(
                f"Delta for {delta.key} cannot be applied to {self.key}"
            )
        return PairStatistic(
            team_id=self.team_id,
            player1_id=self.player1_id,
            player2_id=self.player2_id,
            matches_together=self.matches_together + 1,
            wins=self.wins + (1 if delta.won else 0),
            total_games_won=self.total_games_won + delta.games_won,
            total_games_played=self.total_games_played + delta.games_played,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a pair_statistics row."""
        return {
            "team_id": self.team_id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "matches_together": self.matches_together,
            "wins": self.wins,
            "total_games_won": self.total_games_won,
            "total_games_played": self.total_games_played,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairStatistic":
        """Deserialize from a pair_statistics row, normalizing the pair order."""
        player1_id, player2_id = pair_key(data["player1_id"], data["player2_id"])
        return cls(
            team_id=data["team_id"],
            player1_id=player1_id,
            player2_id=player2_id,
            matches_together=data.get("matches_together", 0),
            wins=data.get("wins", 0),
            total_games_won=data.get("total_games_won", 0),
            total_games_played=data.get("total_games_played", 0),
        )
