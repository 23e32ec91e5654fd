"""Enumeration of candidate doubles pairs."""

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

from typing import List, Sequence, Tuple

from courtpairing.models.player import PlayerRef


def generate_candidate_pairs(
    players: Sequence[PlayerRef],
) -> List[Tuple[PlayerRef, PlayerRef]]:
    """All unordered pairs of the pool, each exactly once.

    Pairs come out in pool order: ``(p0, p1), (p0, p2), ..., (p1, p2), ...``.
    A player listed twice is only paired once and never with itself.

    Returns:
        ``n * (n - 1) / 2`` pairs for ``n`` distinct players
    """
    unique: List[PlayerRef] = []
    seen = set()
    for player in players:
        if player.id in seen:
            continue
        seen.add(player.id)
        unique.append(player)

    pairs = []
    for i in range(len(unique)):
        for j in range(i + 1, len(unique)):
            pairs.append((unique[i], unique[j]))
    return pairs
