"""Tournament Director CLI for Swiss Pairing.

This module provides an interactive shell and a one-shot command-line
interface for running a tournament: registering players, showing pairings,
entering results, advancing rounds and exporting the final standings.
The tournament is saved to a JSON file after every change.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swisspairing.constants import (
    DEFAULT_NUM_ROUNDS,
    DEFAULT_SAVE_FILE,
    REPORT_FILE_NAME,
)
from swisspairing.exceptions import (
    MatchNotFoundException,
    PlayerNotFoundException,
    SwissPairingException,
)
from swisspairing.models import GameResult, Match, Phase, RoundData
from swisspairing.persistence import load_tournament, save_path, save_tournament
from swisspairing.reports import (
    PAIRINGS_HEADERS,
    STANDINGS_HEADERS,
    format_table,
    pairings_table,
    render_html_report,
    standings_table,
)
from swisspairing.testing import SimulationConfig, TournamentSimulator
from swisspairing.tournament import Tournament
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Accepted spellings when typing a result
RESULT_ALIASES = {
    "1-0": GameResult.WHITE_WINS,
    "white": GameResult.WHITE_WINS,
    "0-1": GameResult.BLACK_WINS,
    "black": GameResult.BLACK_WINS,
    "1/2-1/2": GameResult.DRAW,
    "½-½": GameResult.DRAW,
    "=": GameResult.DRAW,
    "draw": GameResult.DRAW,
    "pending": GameResult.PENDING,
}

# Command definitions with their options
COMMANDS = {
    "add": {
        "description": "Register players (comma separated names)",
        "options": {"<names>": "One or more names, separated by commas"},
    },
    "remove": {
        "description": "Remove a player before the tournament starts",
        "options": {"<player>": "Player name or id"},
    },
    "players": {"description": "List registered players", "options": {}},
    "start": {
        "description": "Start the tournament and pair round 1",
        "options": {
            "--rounds": f"Number of rounds (default: {DEFAULT_NUM_ROUNDS})",
            "--name": "Tournament name",
        },
    },
    "pairings": {
        "description": "Show the pairings of a round",
        "options": {"--round": "Round number (default: current round)"},
    },
    "result": {
        "description": "Enter a result for the current round",
        "options": {
            "<board>": "Board number or match id",
            "<result>": "1-0, 0-1, draw or pending",
        },
    },
    "advance": {
        "description": "Score the current round and pair the next one",
        "options": {},
    },
    "standings": {"description": "Show current standings", "options": {}},
    "report": {
        "description": "Export the standings as an HTML report",
        "options": {"--output": f"Output file (default: {REPORT_FILE_NAME})"},
    },
    "simulate": {
        "description": "Play a random tournament and show its standings",
        "options": {
            "--players": "Number of players (default: 16)",
            "--rounds": f"Number of rounds (default: {DEFAULT_NUM_ROUNDS})",
            "--seed": "Random seed for reproducibility",
            "--draws": "Draw percentage (default: 30)",
            "--output": "Save the simulated tournament to this file",
        },
    },
    "reset": {
        "description": "Delete all players and rounds",
        "options": {"--yes": "Skip the confirmation prompt"},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


@dataclass
class DirectorContext:
    """State shared by the command handlers."""

    tournament: Tournament
    path: Path
    confirm: Callable[[str], bool]


def confirm_with_input(question: str) -> bool:
    answer = input(f"{question} [y/N] ").strip().lower()
    return answer in ("y", "yes")


def load_or_create(path: Path) -> Tournament:
    """Load the tournament saved at ``path``, or start a new one."""
    if path.exists():
        return load_tournament(path)
    logger.info(f"No tournament at {path}, starting a new one")
    return Tournament()


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                  SWISS PAIRING - DIRECTOR                     ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        words = [opt for opt in info["options"] if opt.startswith("--")]
        if cmd == "result":
            words = list(RESULT_ALIASES)
        options_completer = WordCompleter(words) if words else None
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    return NestedCompleter.from_nested_dict(completions)


def print_round(tournament: Tournament, round_data: RoundData) -> None:
    print(f"\n{Colors.BOLD}Round {round_data.round_number}{Colors.ENDC}")
    rows = pairings_table(round_data, tournament.players())
    print(format_table(PAIRINGS_HEADERS, rows))
    print()


def print_standings(tournament: Tournament) -> None:
    print(f"\n{Colors.BOLD}Standings{Colors.ENDC}")
    print(format_table(STANDINGS_HEADERS, standings_table(tournament)))
    print()


def parse_result(value: str) -> GameResult:
    """Map a typed result to a ``GameResult``, accepting common spellings."""
    key = value.strip().lower()
    if key in RESULT_ALIASES:
        return RESULT_ALIASES[key]
    return GameResult.parse(value)


def find_match(round_data: RoundData, board_or_id: str) -> Match:
    """Resolve a board number (1-based) or match id within a round."""
    matches = round_data.matches
    if board_or_id.isdigit():
        board = int(board_or_id)
        if 1 <= board <= len(matches):
            return matches[board - 1]
        raise MatchNotFoundException(
            f"Round {round_data.round_number} has no board {board}"
        )
    for match in matches:
        if match.id == board_or_id:
            return match
    raise MatchNotFoundException(
        f"Round {round_data.round_number} has no match with id {board_or_id}"
    )


# ========== Command handlers ==========


def run_add_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    added = ctx.tournament.register_many(" ".join(args.names))
    for player in added:
        print(f"{Colors.OKGREEN}Added {player.name}{Colors.ENDC}")
    if not added:
        print(f"{Colors.WARNING}No new players added{Colors.ENDC}")
    return 0


def run_remove_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    target = " ".join(args.player)
    player = ctx.tournament.registry.find_by_name(target)
    player_id = player.id if player is not None else target
    if player_id not in ctx.tournament.registry:
        raise PlayerNotFoundException(f"No player named or with id '{target}'")
    removed = ctx.tournament.remove(player_id)
    print(f"{Colors.OKGREEN}Removed {removed.name}{Colors.ENDC}")
    return 0


def run_players_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    players = ctx.tournament.players()
    print(f"\n{Colors.BOLD}Players ({len(players)}){Colors.ENDC}")
    rows = [[str(p.pairing_number), p.name, p.id] for p in players]
    print(format_table(["No.", "Name", "Id"], rows))
    print()
    return 0


def run_start_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    first_round = ctx.tournament.start(args.rounds)
    if args.name:
        ctx.tournament.name = args.name
    print(
        f"{Colors.OKGREEN}Started '{ctx.tournament.name}': "
        f"{len(ctx.tournament.players())} players, {args.rounds} rounds{Colors.ENDC}"
    )
    print_round(ctx.tournament, first_round)
    return 0


def run_pairings_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    round_number = args.round or ctx.tournament.current_round
    print_round(ctx.tournament, ctx.tournament.round(round_number))
    return 0


def run_result_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    tournament = ctx.tournament
    round_number = args.round or tournament.current_round
    match = find_match(tournament.round(round_number), args.board)
    updated = tournament.record_result(round_number, match.id, parse_result(args.result))

    white = tournament.get_player(updated.white_id)
    black = tournament.get_player(updated.black_id)
    print(f"{white.name} - {black.name}: {updated.result.value}")
    if tournament.is_complete(round_number):
        print(f"{Colors.OKCYAN}All results in; use 'advance' to continue{Colors.ENDC}")
    return 0


def run_advance_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    next_round = ctx.tournament.advance()
    if next_round is None:
        print(f"{Colors.OKGREEN}{Colors.BOLD}Tournament finished!{Colors.ENDC}")
        print_standings(ctx.tournament)
    else:
        print_round(ctx.tournament, next_round)
    return 0


def run_standings_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    print_standings(ctx.tournament)
    return 0


def run_report_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    if ctx.tournament.phase is not Phase.FINISHED:
        print(f"{Colors.WARNING}Tournament is not finished; exporting current standings{Colors.ENDC}")
    output = Path(args.output)
    output.write_text(render_html_report(ctx.tournament), encoding="utf-8")
    print(f"{Colors.OKGREEN}Report saved to: {output}{Colors.ENDC}")
    return 0


def run_simulate_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    config = SimulationConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        seed=args.seed,
        draw_percentage=args.draws,
    )
    result = TournamentSimulator(config).run()
    print_standings(result.tournament)
    if args.output:
        target = save_tournament(result.tournament, args.output)
        print(f"{Colors.OKGREEN}Simulated tournament saved to: {target}{Colors.ENDC}")
    return 0


def run_reset_command(ctx: DirectorContext, args: argparse.Namespace) -> int:
    if not args.yes and not ctx.confirm(
        "Are you sure you want to reset? All current tournament data will be lost."
    ):
        print(f"{Colors.WARNING}Reset cancelled{Colors.ENDC}")
        return 1
    ctx.tournament.reset()
    print(f"{Colors.OKGREEN}Tournament reset{Colors.ENDC}")
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swiss-director",
        description="Run a Swiss-system chess tournament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  swiss-director

  # Register players and start
  swiss-director add "Alice, Bob, Carol, Dave"
  swiss-director start --rounds 3

  # Enter results by board and advance
  swiss-director result 1 1-0
  swiss-director result 2 draw
  swiss-director advance
        """,
    )
    parser.add_argument(
        "--file", default=DEFAULT_SAVE_FILE, help="Tournament save file (JSON)"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_parser = subparsers.add_parser("add", help="Register players")
    add_parser.add_argument("names", nargs="+")
    add_parser.set_defaults(func=run_add_command, mutates=True)

    remove_parser = subparsers.add_parser("remove", help="Remove a player")
    remove_parser.add_argument("player", nargs="+")
    remove_parser.set_defaults(func=run_remove_command, mutates=True)

    players_parser = subparsers.add_parser("players", help="List players")
    players_parser.set_defaults(func=run_players_command, mutates=False)

    start_parser = subparsers.add_parser("start", help="Start the tournament")
    start_parser.add_argument("--rounds", type=int, default=DEFAULT_NUM_ROUNDS)
    start_parser.add_argument("--name")
    start_parser.set_defaults(func=run_start_command, mutates=True)

    pairings_parser = subparsers.add_parser("pairings", help="Show pairings")
    pairings_parser.add_argument("--round", type=int)
    pairings_parser.set_defaults(func=run_pairings_command, mutates=False)

    result_parser = subparsers.add_parser("result", help="Enter a result")
    result_parser.add_argument("board")
    result_parser.add_argument("result")
    result_parser.add_argument("--round", type=int)
    result_parser.set_defaults(func=run_result_command, mutates=True)

    advance_parser = subparsers.add_parser("advance", help="Advance to next round")
    advance_parser.set_defaults(func=run_advance_command, mutates=True)

    standings_parser = subparsers.add_parser("standings", help="Show standings")
    standings_parser.set_defaults(func=run_standings_command, mutates=False)

    report_parser = subparsers.add_parser("report", help="Export HTML report")
    report_parser.add_argument("--output", default=REPORT_FILE_NAME)
    report_parser.set_defaults(func=run_report_command, mutates=False)

    sim_parser = subparsers.add_parser("simulate", help="Simulate a tournament")
    sim_parser.add_argument("--players", type=int, default=16)
    sim_parser.add_argument("--rounds", type=int, default=DEFAULT_NUM_ROUNDS)
    sim_parser.add_argument("--seed", type=int)
    sim_parser.add_argument("--draws", type=int, default=30)
    sim_parser.add_argument("--output")
    sim_parser.set_defaults(func=run_simulate_command, mutates=False)

    reset_parser = subparsers.add_parser("reset", help="Reset the tournament")
    reset_parser.add_argument("--yes", action="store_true")
    reset_parser.set_defaults(func=run_reset_command, mutates=True)

    return parser


def execute(ctx: DirectorContext, args: argparse.Namespace) -> int:
    """Run one parsed command, saving the tournament if it changed."""
    try:
        status = args.func(ctx, args)
        if status == 0 and args.mutates:
            save_tournament(ctx.tournament, ctx.path)
    except SwissPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command failed", exc_info=True)
        return 1
    return status


def run_interactive_mode(path: Path) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    def confirm(question: str) -> bool:
        answer = session.prompt(f"{question} [y/N] ").strip().lower()
        return answer in ("y", "yes")

    ctx = DirectorContext(tournament=load_or_create(path), path=path, confirm=confirm)
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("swiss> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q", "/exit"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                cmd = user_input.split()[1].lstrip("/")
                print_command_help(cmd)
                continue

            parts = user_input.split()
            # Strip leading "/" if present (support both "/command" and "command")
            command = parts[0].lstrip("/")

            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                args = parser.parse_args([command] + parts[1:])
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue

            try:
                execute(ctx, args)
            except Exception as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                logger.exception("Command execution failed")

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def run_standard_mode(argv: List[str]) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("swisspairing").setLevel(logging.DEBUG)

    path = save_path(args.file)
    if args.interactive:
        return run_interactive_mode(path)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        ctx = DirectorContext(
            tournament=load_or_create(path), path=path, confirm=confirm_with_input
        )
    except SwissPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1
    return execute(ctx, args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the swiss-director CLI."""
    argv = sys.argv[1:] if argv is None else argv

    # If no arguments, start interactive mode
    if not argv:
        return run_interactive_mode(save_path(DEFAULT_SAVE_FILE))

    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
