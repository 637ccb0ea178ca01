import json

import pytest

from swisspairing.cli import __main__ as director
from swisspairing.cli.__main__ import (
    COMMANDS,
    DirectorContext,
    create_completer,
    create_main_parser,
    execute,
    main,
    parse_result,
    run_interactive_mode,
)
from swisspairing.exceptions import InvalidResultException
from swisspairing.models import GameResult, Phase
from swisspairing.persistence import load_tournament, save_tournament
from swisspairing.tournament import Tournament


@pytest.fixture
def save_file(tmp_path):
    return tmp_path / "event.json"


def run(save_file, *args):
    return main(["--file", str(save_file), *args])


def test_full_event_from_the_command_line(save_file, capsys):
    assert run(save_file, "add", "Alice, Bob, Carol") == 0
    assert run(save_file, "start", "--rounds", "2", "--name", "Friday Blitz") == 0

    out = capsys.readouterr().out
    assert "Added Carol" in out
    assert "Round 1" in out
    tournament = load_tournament(save_file)
    assert tournament.name == "Friday Blitz"
    assert tournament.round(1).bye.player_id == tournament.registry.find_by_name("Carol").id

    assert run(save_file, "result", "1", "1-0") == 0
    assert run(save_file, "advance") == 0
    tournament = load_tournament(save_file)
    second = tournament.round(2)
    names = {p.id: p.name for p in tournament.players()}
    assert names[second.bye.player_id] == "Bob"
    assert (names[second.matches[0].white_id], names[second.matches[0].black_id]) == (
        "Carol",
        "Alice",
    )

    assert run(save_file, "result", "1", "black") == 0
    assert run(save_file, "advance") == 0
    out = capsys.readouterr().out
    assert "Tournament finished!" in out

    tournament = load_tournament(save_file)
    assert tournament.phase is Phase.FINISHED
    assert tournament.standings()[0].name == "Alice"
    assert tournament.standings()[0].score == 2.0


def test_errors_exit_with_status_one(save_file, capsys):
    assert run(save_file, "advance") == 1
    assert "Error:" in capsys.readouterr().out

    run(save_file, "add", "Alice, Bob")
    run(save_file, "start", "--rounds", "1")
    assert run(save_file, "result", "1", "2-0") == 1
    assert run(save_file, "result", "7", "1-0") == 1
    assert load_tournament(save_file).round(1).matches[0].is_pending


def test_failed_command_is_not_saved(save_file):
    run(save_file, "add", "Alice")

    assert run(save_file, "start", "--rounds", "3") == 1
    assert load_tournament(save_file).phase is Phase.SETUP


def test_reset_asks_for_confirmation(save_file, monkeypatch, capsys):
    run(save_file, "add", "Alice, Bob")
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    assert run(save_file, "reset") == 1
    assert "Reset cancelled" in capsys.readouterr().out
    assert len(load_tournament(save_file).players()) == 2

    assert run(save_file, "reset", "--yes") == 0
    assert load_tournament(save_file).players() == ()


def test_remove_by_name(save_file):
    run(save_file, "add", "Alice, Bob")

    assert run(save_file, "remove", "alice") == 0
    assert [p.name for p in load_tournament(save_file).players()] == ["Bob"]
    assert run(save_file, "remove", "Zed") == 1


def test_report_is_written(save_file, tmp_path):
    report = tmp_path / "report.html"
    run(save_file, "add", "Alice, Bob")

    assert run(save_file, "report", "--output", str(report)) == 0
    assert "Final Tournament Standings" in report.read_text(encoding="utf-8")


def test_simulate_prints_standings(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "sim"

    status = main(
        ["simulate", "--players", "6", "--rounds", "3", "--seed", "5", "--output", str(output)]
    )

    assert status == 0
    assert "Standings" in capsys.readouterr().out
    assert load_tournament(tmp_path / "sim.json").is_finished


@pytest.mark.parametrize(
    "typed, expected",
    [
        ("1-0", GameResult.WHITE_WINS),
        ("White", GameResult.WHITE_WINS),
        ("0-1", GameResult.BLACK_WINS),
        ("=", GameResult.DRAW),
        ("½-½", GameResult.DRAW),
        ("1/2-1/2", GameResult.DRAW),
        ("pending", GameResult.PENDING),
    ],
)
def test_parse_result_aliases(typed, expected):
    assert parse_result(typed) is expected


def test_parse_result_rejects_nonsense():
    with pytest.raises(InvalidResultException):
        parse_result("3-0")


def test_completer_knows_both_command_spellings():
    completer = create_completer()

    for command in COMMANDS:
        assert command in completer.options
        assert f"/{command}" in completer.options


def test_parser_marks_read_only_commands():
    parser = create_main_parser()

    assert parser.parse_args(["standings"]).mutates is False
    assert parser.parse_args(["advance"]).mutates is True


def test_rejected_start_keeps_the_old_name(save_file):
    tournament = Tournament(name="Club Night")
    tournament.register_many("Alice, Bob")
    ctx = DirectorContext(tournament=tournament, path=save_file, confirm=lambda q: True)
    args = create_main_parser().parse_args(["start", "--rounds", "0", "--name", "Renamed"])

    assert execute(ctx, args) == 1
    assert tournament.name == "Club Night"
    assert tournament.phase is Phase.SETUP


def test_corrupt_save_file_exits_with_status_one(save_file, capsys):
    tournament = Tournament()
    tournament.register_many("Alice, Bob")
    tournament.start(2)
    data = tournament.to_dict()
    data["rounds"][0]["matchups"][0]["white_id"] = "Player-ghost"
    save_file.write_text(json.dumps(data), encoding="utf-8")

    assert run(save_file, "pairings") == 1
    assert "Error:" in capsys.readouterr().out


class ScriptedSession:
    """Stands in for a prompt_toolkit session, replaying typed lines."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


def _script(monkeypatch, lines):
    session = ScriptedSession(lines)
    monkeypatch.setattr(director, "PromptSession", lambda **kwargs: session)
    return session


def test_interactive_session_runs_commands(save_file, monkeypatch, capsys):
    _script(
        monkeypatch,
        [
            "add Alice, Bob, Carol",
            "",
            "/players",
            "bogus",
            "/start --rounds 0 --name Renamed",
            "start --rounds 2",
            "help advance",
            "exit",
        ],
    )

    assert run_interactive_mode(save_file) == 0

    out = capsys.readouterr().out
    assert "Unknown command: bogus" in out
    assert "Command: advance" in out
    assert "Goodbye!" in out
    tournament = load_tournament(save_file)
    assert tournament.phase is Phase.IN_PROGRESS
    assert tournament.total_rounds == 2
    assert tournament.name != "Renamed"
    assert [p.name for p in tournament.players()] == ["Alice", "Bob", "Carol"]


def test_interactive_reset_uses_the_session_to_confirm(save_file, monkeypatch, capsys):
    tournament = Tournament()
    tournament.register_many("Alice, Bob")
    save_tournament(tournament, save_file)
    session = _script(monkeypatch, ["reset", "n"])

    assert run_interactive_mode(save_file) == 0

    assert "Reset cancelled" in capsys.readouterr().out
    assert any("Are you sure" in p for p in session.prompts)
    assert len(load_tournament(save_file).players()) == 2
