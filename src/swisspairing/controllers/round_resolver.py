"""Round resolution and the tournament lifecycle.

``resolve_round`` folds a completed round into a player snapshot without
touching the input. ``RoundResolver`` drives the setup, in-progress and
finished phases on top of it, pairing each new round from the updated
snapshot.
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

from typing import Any, Dict, Optional, Sequence

from swisspairing.constants import BYE_SCORE, MIN_PLAYERS, MIN_ROUNDS
from swisspairing.controllers.player_registry import PlayerRegistry
from swisspairing.controllers.round_ledger import RoundLedger
from swisspairing.controllers.tiebreak_calculator import TiebreakCalculator
from swisspairing.exceptions import (
    InvalidConfigurationException,
    PlayerNotFoundException,
    RoundIncompleteException,
    TournamentStateException,
)
from swisspairing.models.matchup import Bye, Match
from swisspairing.models.phase import Phase
from swisspairing.models.player import Player
from swisspairing.models.round_data import RoundData
from swisspairing.pairing.greedy_swiss import create_swiss_pairings
from swisspairing.type_hints import PairingFunction, PlayerSnapshot
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

def resolve_round(
    players: Sequence[Player], round_data: RoundData
) -> PlayerSnapshot:
    """Apply a completed round's results to a player snapshot.

    For every match each player records the other as an opponent, White's
    colour balance goes up by one and Black's down by one, and points are
    awarded per the result. The bye recipient gets a full point and is
    flagged as having had a bye.

    Args:
        players: Snapshot before the round
        round_data: The round to fold in; every match must have a result

    Returns:
        New snapshot in the same order as ``players``

    Raises:
        RoundIncompleteException: If a match is still pending
        PlayerNotFoundException: If a matchup refers to an unknown player
    """
    if not round_data.is_complete:
        raise RoundIncompleteException(
            f"Round {round_data.round_number} still has pending results"
        )

    updated: Dict[str, Player] = {p.id: p for p in players}

    def lookup(player_id: str) -> Player:
        if player_id not in updated:
            raise PlayerNotFoundException(
                f"Round {round_data.round_number} refers to unknown player {player_id}"
            )
        return updated[player_id]

    for matchup in round_data.matchups:
        if isinstance(matchup, Match):
            white = lookup(matchup.white_id)
            black = lookup(matchup.black_id)
            white_points, black_points = matchup.result.points
            updated[white.id] = white.with_game(black.id, +1, white_points)
            updated[black.id] = black.with_game(white.id, -1, black_points)
        elif isinstance(matchup, Bye):
            bye_player = lookup(matchup.player_id)
            updated[bye_player.id] = bye_player.with_bye(BYE_SCORE)

    return tuple(updated[p.id] for p in players)


class RoundResolver:
    """Drives the tournament through its phases.

    This class is responsible for:
    - Starting the tournament and pairing round 1
    - Folding each completed round into the registry
    - Recomputing tiebreaks after every round
    - Pairing the next round or finishing the tournament

    Each call computes everything it needs before committing, so a call
    that raises leaves registry, ledger and counters untouched.
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        ledger: RoundLedger,
        tiebreak_calculator: Optional[TiebreakCalculator] = None,
        pairing_function: PairingFunction = create_swiss_pairings,
    ):
        """Initialize the round resolver.

        Args:
            registry: Player registry to read from and update
            ledger: Round ledger to read results from and append rounds to
            tiebreak_calculator: Calculator used after every round
            pairing_function: Produces a round's matchups from a snapshot
        """
        self.registry = registry
        self.ledger = ledger
        self.tiebreak_calculator = tiebreak_calculator or TiebreakCalculator()
        self.pairing_function = pairing_function
        self.phase = Phase.SETUP
        self.current_round = 0
        self.total_rounds = 0

    def start(self, num_rounds: int) -> RoundData:
        """Start the tournament and pair the first round.

        Args:
            num_rounds: Total number of rounds to play

        Returns:
            Round 1

        Raises:
            InvalidConfigurationException: If not in setup, fewer than two
                players are registered, or ``num_rounds`` is not a positive
                integer
        """
        if self.phase is not Phase.SETUP:
            raise InvalidConfigurationException(
                f"Tournament can only be started from setup (currently {self.phase.value})"
            )
        if len(self.registry) < MIN_PLAYERS:
            raise InvalidConfigurationException(
                f"At least {MIN_PLAYERS} players are required, "
                f"{len(self.registry)} registered"
            )
        if (
            isinstance(num_rounds, bool)
            or not isinstance(num_rounds, int)
            or num_rounds < MIN_ROUNDS
        ):
            raise InvalidConfigurationException(
                f"Number of rounds must be a positive integer, got {num_rounds!r}"
            )

        first_round = self._pair_round(self.registry.snapshot(), 1)
        self.ledger.append(first_round)
        self.current_round = 1
        self.total_rounds = num_rounds
        self.phase = Phase.IN_PROGRESS
        logger.info(
            f"Tournament started: {len(self.registry)} players, {num_rounds} rounds"
        )
        return first_round

    def advance(self) -> Optional[RoundData]:
        """Resolve the current round and move on.

        Returns:
            The newly paired round, or None if the tournament just finished

        Raises:
            TournamentStateException: If the tournament is not in progress
            RoundIncompleteException: If the current round has pending results
        """
        if self.phase is not Phase.IN_PROGRESS:
            raise TournamentStateException(
                f"Cannot advance a tournament in phase {self.phase.value}"
            )

        round_data = self.ledger.get_round(self.current_round)
        if not round_data.is_complete:
            pending = sum(1 for m in round_data.matches if m.is_pending)
            raise RoundIncompleteException(
                f"Round {self.current_round} has {pending} pending result(s)"
            )

        resolved = resolve_round(self.registry.snapshot(), round_data)
        resolved = self.tiebreak_calculator.calculate_all(resolved)

        if self.current_round >= self.total_rounds:
            self.registry.replace_all(resolved)
            self.phase = Phase.FINISHED
            logger.info(f"Tournament finished after round {self.current_round}")
            return None

        next_round = self._pair_round(resolved, self.current_round + 1)
        self.ledger.append(next_round)
        self.registry.replace_all(resolved)
        self.current_round += 1
        return next_round

    def reset(self) -> None:
        """Clear players, rounds and counters and go back to setup."""
        self.registry.clear()
        self.ledger.clear()
        self.phase = Phase.SETUP
        self.current_round = 0
        self.total_rounds = 0
        logger.info("Tournament reset")

    def _pair_round(self, players: Sequence[Player], round_number: int) -> RoundData:
        matchups = self.pairing_function(players, round_number)
        return RoundData(round_number=round_number, matchups=list(matchups))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize lifecycle counters to dictionary."""
        return {
            "phase": self.phase.value,
            "current_round": self.current_round,
            "total_rounds": self.total_rounds,
        }

    def restore(self, data: Dict[str, Any]) -> None:
        """Restore lifecycle counters saved by ``to_dict``.

        Raises:
            TournamentStateException: If the counters disagree with the ledger
        """
        phase = Phase(data.get("phase", Phase.SETUP.value))
        current_round = int(data.get("current_round", 0))
        total_rounds = int(data.get("total_rounds", 0))

        if phase is Phase.SETUP:
            consistent = current_round == 0 and len(self.ledger) == 0
        else:
            consistent = (
                1 <= current_round <= total_rounds and len(self.ledger) == current_round
            )
        if not consistent:
            raise TournamentStateException(
                f"Saved state is inconsistent: phase={phase.value}, "
                f"current_round={current_round}, total_rounds={total_rounds}, "
                f"rounds stored={len(self.ledger)}"
            )

        self.phase = phase
        self.current_round = current_round
        self.total_rounds = total_rounds
