import pytest

from courtpairing.controllers.match import MatchScoreRecorder
from courtpairing.models.enums import AvailabilityStatus
from courtpairing.models.match import MatchScorecard
from courtpairing.models.player import PlayerRef
from courtpairing.statistics.store import InMemoryPairStatisticsStore


def make_player(
    player_id,
    fair_play=100.0,
    availability=AvailabilityStatus.AVAILABLE,
    rating=None,
):
    return PlayerRef(
        id=player_id,
        full_name=f"Player {player_id}",
        ntrp_rating=rating,
        fair_play_score=fair_play,
        availability=availability,
    )


@pytest.fixture
def player():
    return make_player


@pytest.fixture
def store():
    return InMemoryPairStatisticsStore()


@pytest.fixture
def recorder():
    return MatchScoreRecorder()


@pytest.fixture
def roster():
    return [
        make_player("p1", fair_play=90.0),
        make_player("p2", fair_play=80.0),
        make_player("p3", fair_play=70.0, availability=AvailabilityStatus.MAYBE),
        make_player("p4", fair_play=60.0, availability=AvailabilityStatus.LATE),
        make_player("p5", fair_play=100.0, availability=AvailabilityStatus.UNAVAILABLE),
        make_player("p6", fair_play=50.0),
    ]


@pytest.fixture
def scorecard():
    card = MatchScorecard(match_id="m1", team_id="t1")
    card.add_court(1, "p1", "p2")
    card.add_court(2, "p3", "p4")
    card.add_court(3, "p5", "p6")
    return card
