import pytest

from conftest import make_player
from swisspairing.exceptions import InvalidPairingException
from swisspairing.models import Bye, GameResult, Match
from swisspairing.pairing import (
    assign_colours,
    create_swiss_pairings,
    rank_players,
    select_bye_player,
)


def _pairs(matchups):
    return {frozenset(m.player_ids) for m in matchups if isinstance(m, Match)}


def _byes(matchups):
    return [m for m in matchups if isinstance(m, Bye)]


@pytest.mark.parametrize("count", range(2, 12))
def test_every_player_appears_exactly_once(count):
    players = [make_player(f"P{i}", i, score=(i % 3) * 0.5) for i in range(1, count + 1)]

    matchups = create_swiss_pairings(players, 1)

    seen = [pid for m in matchups for pid in m.player_ids]
    assert sorted(seen) == sorted(p.id for p in players)
    assert len(_byes(matchups)) == count % 2


def test_ranking_breaks_score_ties_by_pairing_number():
    players = [
        make_player("D", 4),
        make_player("B", 2, score=1.0),
        make_player("C", 3),
        make_player("A", 1),
    ]

    ranked = rank_players(players)

    assert [p.name for p in ranked] == ["B", "A", "C", "D"]


def test_bye_goes_to_lowest_ranked_without_bye():
    ranked = [
        make_player("A", 1, score=2.0),
        make_player("B", 2, score=1.0),
        make_player("C", 3, score=0.0, had_bye=True),
    ]

    assert select_bye_player(ranked).name == "B"


def test_repeat_bye_only_when_everyone_had_one():
    ranked = [
        make_player("A", 1, score=2.0, had_bye=True),
        make_player("B", 2, score=1.0, had_bye=True),
        make_player("C", 3, score=0.0, had_bye=True),
    ]

    assert select_bye_player(ranked).name == "C"


def test_bye_is_listed_first_with_deterministic_id():
    players = [make_player(name, i) for i, name in enumerate("ABCDE", start=1)]

    matchups = create_swiss_pairings(players, 3)

    assert matchups[0] == Bye(id="3-bye-E", player_id="E")


def test_rematch_is_avoided_when_a_fresh_opponent_exists():
    players = [
        make_player("A", 1, opponents=["B"]),
        make_player("B", 2, opponents=["A"]),
        make_player("C", 3),
        make_player("D", 4),
    ]

    matchups = create_swiss_pairings(players, 2)

    assert _pairs(matchups) == {frozenset("AC"), frozenset("BD")}


def test_rematch_is_forced_when_no_fresh_opponent_remains():
    players = [
        make_player("A", 1, opponents=["B"]),
        make_player("B", 2, opponents=["A"]),
    ]

    matchups = create_swiss_pairings(players, 2)

    assert _pairs(matchups) == {frozenset("AB")}


def test_greedy_pass_does_not_backtrack():
    # A-C / B-D would avoid every rematch, but the top-down pass takes A-B
    # first and is left with the C-D rematch.
    players = [
        make_player("A", 1),
        make_player("B", 2),
        make_player("C", 3, opponents=["D"]),
        make_player("D", 4, opponents=["C"]),
    ]

    matchups = create_swiss_pairings(players, 2)

    assert _pairs(matchups) == {frozenset("AB"), frozenset("CD")}


def test_score_groups_are_paired_top_down():
    players = [
        make_player("A", 1, score=1.0, opponents=["B"]),
        make_player("B", 2, score=0.0, opponents=["A"]),
        make_player("C", 3, score=0.5, opponents=["D"]),
        make_player("D", 4, score=0.5, opponents=["C"]),
    ]

    matchups = create_swiss_pairings(players, 2)

    # A is top and meets the best-placed newcomer, C
    assert _pairs(matchups) == {frozenset("AC"), frozenset("BD")}


def test_lower_colour_balance_gets_white():
    higher = make_player("A", 1, balance=1)
    lower = make_player("B", 2, balance=-1)

    white, black = assign_colours(higher, lower)

    assert (white.name, black.name) == ("B", "A")


def test_equal_colour_balance_gives_white_to_higher_ranked():
    higher = make_player("A", 1, balance=0)
    lower = make_player("B", 2, balance=0)

    white, black = assign_colours(higher, lower)

    assert (white.name, black.name) == ("A", "B")


def test_match_ids_follow_round_and_colours():
    players = [make_player("A", 1, balance=1), make_player("B", 2, balance=0)]

    (match,) = create_swiss_pairings(players, 4)

    assert match == Match(id="4-B-A", white_id="B", black_id="A")
    assert match.result is GameResult.PENDING


def test_input_is_not_modified():
    players = [make_player(name, i) for i, name in enumerate("DCBA", start=1)]
    before = list(players)

    create_swiss_pairings(players, 1)

    assert players == before


def test_fewer_than_two_players_is_rejected():
    with pytest.raises(InvalidPairingException):
        create_swiss_pairings([make_player("A", 1)], 1)


def test_match_cannot_pair_a_player_with_themselves():
    with pytest.raises(InvalidPairingException):
        Match(id="1-A-A", white_id="A", black_id="A")
