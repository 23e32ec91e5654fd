"""Type hints used in Court Pairing."""

from typing import Dict, Tuple

# Side string constants (for runtime use)
HOME = "home"
AWAY = "away"

# Player identifier as handed over by the roster
PlayerId = str
TeamId = str
# Two player ids in ascending order
PairKey = Tuple[PlayerId, PlayerId]
# (home games, away games)
GameCounts = Tuple[int, int]
# Row shaped data exchanged with the persistence layer
Row = Dict[str, object]
