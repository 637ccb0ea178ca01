from dataclasses import replace

import pytest

from conftest import make_player
from swisspairing.controllers import TiebreakCalculator
from swisspairing.exceptions import PlayerNotFoundException


def test_buchholz_sums_current_opponent_scores():
    players = [
        make_player("A", 1, score=2.0, opponents=["B", "C"]),
        make_player("B", 2, score=1.5, opponents=["A"]),
        make_player("C", 3, score=0.5, opponents=["A"], had_bye=True),
    ]

    calculator = TiebreakCalculator()

    assert calculator.buchholz(players[0], players) == 2.0
    assert calculator.buchholz(players[1], players) == 2.0
    assert calculator.buchholz(players[2], players) == 2.0


def test_bye_contributes_nothing():
    player = make_player("A", 1, score=1.0, had_bye=True)

    assert TiebreakCalculator().buchholz(player, [player]) == 0.0


def test_unknown_opponent_raises():
    player = make_player("A", 1, opponents=["ghost"])

    with pytest.raises(PlayerNotFoundException):
        TiebreakCalculator().buchholz(player, [player])


def test_calculate_all_returns_new_snapshot():
    players = (
        make_player("A", 1, score=1.0, opponents=["B"]),
        make_player("B", 2, score=0.0, opponents=["A"]),
    )

    updated = TiebreakCalculator().calculate_all(players)

    assert [p.buchholz for p in updated] == [0.0, 1.0]
    assert [p.buchholz for p in players] == [0.0, 0.0]


def test_calculate_all_is_recomputed_from_scratch():
    stale = make_player("A", 1, score=1.0, opponents=["B"])
    stale = replace(stale, buchholz=9.0)
    opponent = make_player("B", 2, score=0.5, opponents=["A"])

    updated = TiebreakCalculator().calculate_all([stale, opponent])

    assert updated[0].buchholz == 0.5


def test_standings_order_score_then_buchholz_then_pairing_number():
    players = [
        make_player("D", 4, score=1.0),
        make_player("C", 3, score=1.0),
        make_player("B", 2, score=2.0),
        make_player("A", 1, score=1.0),
    ]
    players[1] = replace(players[1], buchholz=1.5)

    ordered = TiebreakCalculator().sort_standings(players)

    assert [p.name for p in ordered] == ["B", "C", "A", "D"]
