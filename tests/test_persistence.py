import json

import pytest

from swisspairing.exceptions import FileLoadException
from swisspairing.models import GameResult, Phase
from swisspairing.persistence import load_tournament, save_tournament


def test_save_adds_json_extension(tmp_path, four_players):
    written = save_tournament(four_players, tmp_path / "club")

    assert written == tmp_path / "club.json"
    assert written.exists()
    assert json.loads(written.read_text())["config"]["name"] == "Club Championship"


def test_saved_tournament_loads_and_continues(tmp_path, four_players):
    first = four_players.start(2)
    four_players.record_result(1, first.matches[0].id, GameResult.WHITE_WINS)
    path = save_tournament(four_players, tmp_path / "event.json")

    loaded = load_tournament(path)

    assert loaded.phase is Phase.IN_PROGRESS
    assert loaded.players() == four_players.players()
    assert loaded.round(1).matches[0].result is GameResult.WHITE_WINS

    loaded.record_result(1, first.matches[1].id, "0-1")
    second = loaded.advance()
    assert second.round_number == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        load_tournament(tmp_path / "nowhere.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_load_rejects_inconsistent_state(tmp_path, four_players):
    four_players.start(3)
    data = four_players.to_dict()
    data["state"]["current_round"] = 2
    path = tmp_path / "tampered.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_load_rejects_rounds_naming_unregistered_players(tmp_path, four_players):
    four_players.start(2)
    data = four_players.to_dict()
    data["rounds"][0]["matchups"][0]["white_id"] = "Player-ghost"
    path = tmp_path / "ghost.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_tournament(path)
