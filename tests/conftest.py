import pytest

from swisspairing.models import Player
from swisspairing.tournament import Tournament


def make_player(
    name,
    number,
    score=0.0,
    opponents=(),
    had_bye=False,
    balance=0,
):
    """Player whose id is its name, to keep assertions readable."""
    return Player(
        id=name,
        name=name,
        pairing_number=number,
        score=score,
        opponent_ids=tuple(opponents),
        had_bye=had_bye,
        colour_balance=balance,
    )


def ids_by_name(tournament):
    return {p.name: p.id for p in tournament.players()}


@pytest.fixture
def four_players():
    tournament = Tournament(name="Club Championship")
    tournament.register_many("A, B, C, D")
    return tournament


@pytest.fixture
def five_players():
    tournament = Tournament(name="Odd Club Night")
    tournament.register_many("A\nB\nC\nD\nE")
    return tournament
