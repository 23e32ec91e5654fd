"""Availability gate for the lineup pool."""

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

from typing import Iterable, List

from courtpairing.models.player import PlayerRef
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def is_eligible(player: PlayerRef) -> bool:
    """Available, maybe and late players can be selected. Unavailable never."""
    return player.availability.is_eligible


def filter_eligible(players: Iterable[PlayerRef]) -> List[PlayerRef]:
    """Keep the players whose availability qualifies them, in pool order."""
    pool = list(players)
    eligible = [p for p in pool if is_eligible(p)]
    if len(eligible) < len(pool):
        logger.debug(
            f"Availability gate: {len(eligible)} of {len(pool)} players eligible"
        )
    return eligible
