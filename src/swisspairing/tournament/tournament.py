"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
registry, the round ledger and the round resolver behind one API.
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

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from swisspairing.constants import DEFAULT_TOURNAMENT_NAME
from swisspairing.controllers import (
    PlayerRegistry,
    RoundLedger,
    RoundResolver,
    TiebreakCalculator,
)
from swisspairing.exceptions import TournamentStateException
from swisspairing.models import GameResult, Match, Phase, Player, RoundData, TournamentConfig
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class StandingRow:
    """One line of the standings table."""

    rank: int
    player: Player

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def score(self) -> float:
        return self.player.score

    @property
    def buchholz(self) -> float:
        return self.player.buchholz


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - PlayerRegistry: player registration and running state
    - RoundLedger: rounds, matchups and entered results
    - RoundResolver: phase transitions, scoring and pairing of new rounds
    - TiebreakCalculator: Buchholz and standings order

    Operations that are not allowed in the current phase raise
    ``TournamentStateException``; every failed call leaves state unchanged.
    """

    def __init__(self, name: str = DEFAULT_TOURNAMENT_NAME) -> None:
        """Initialize an empty tournament in the setup phase.

        Args
        ----
        name: Tournament name
        """
        self.config = TournamentConfig(name=name)
        self.registry = PlayerRegistry()
        self.ledger = RoundLedger()
        self.tiebreak_calculator = TiebreakCalculator()
        self.resolver = RoundResolver(
            registry=self.registry,
            ledger=self.ledger,
            tiebreak_calculator=self.tiebreak_calculator,
        )

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @name.setter
    def name(self, value: str) -> None:
        """Set tournament name."""
        self.config.name = value

    @property
    def phase(self) -> Phase:
        return self.resolver.phase

    @property
    def current_round(self) -> int:
        """The round being played (0 before the tournament starts)."""
        return self.resolver.current_round

    @property
    def total_rounds(self) -> int:
        return self.resolver.total_rounds

    @property
    def is_finished(self) -> bool:
        return self.phase is Phase.FINISHED

    # ========== Player Management ==========

    def register(self, name: str) -> Player:
        """Add a player to the tournament.

        Args:
            name: Player name, unique ignoring case

        Returns:
            The registered player
        """
        self._require_setup("register players")
        return self.registry.register(name)

    def register_many(self, text: str) -> List[Player]:
        """Add every player in a comma or newline separated list.

        Names already registered are skipped.
        """
        self._require_setup("register players")
        return self.registry.register_many(text)

    def remove(self, player_id: str) -> Player:
        """Remove a player from the tournament.

        Args:
            player_id: ID of player to remove

        Returns:
            The removed player
        """
        self._require_setup("remove players")
        return self.registry.remove(player_id)

    def players(self) -> Tuple[Player, ...]:
        """Snapshot of all players in registration order."""
        return self.registry.snapshot()

    def get_player(self, player_id: str) -> Player:
        return self.registry.get(player_id)

    # ========== Round Management ==========

    def start(self, num_rounds: int) -> RoundData:
        """Start the tournament and pair round 1.

        Args:
            num_rounds: Number of rounds to play

        Returns:
            The first round
        """
        first_round = self.resolver.start(num_rounds)
        self.config.num_rounds = num_rounds
        return first_round

    def round(self, round_number: int) -> RoundData:
        """Get data for a specific round (1-indexed)."""
        return self.ledger.get_round(round_number)

    def rounds(self) -> Tuple[RoundData, ...]:
        return self.ledger.rounds

    def is_complete(self, round_number: int) -> bool:
        """True iff every match of the round has a result."""
        return self.ledger.is_complete(round_number)

    def record_result(
        self, round_number: int, match_id: str, result: Union[GameResult, str]
    ) -> Match:
        """Record or change the result of a match in the current round.

        Args:
            round_number: Round the match belongs to (1-indexed)
            match_id: Id of the match
            result: A ``GameResult`` or its display string

        Returns:
            The updated match
        """
        if self.phase is not Phase.IN_PROGRESS:
            raise TournamentStateException(
                f"Results can only be recorded while in progress (currently {self.phase.value})"
            )
        # Unknown rounds surface as RoundNotFoundException
        self.ledger.get_round(round_number)
        if round_number < self.current_round:
            raise TournamentStateException(
                f"Round {round_number} has already been resolved"
            )
        return self.ledger.record_result(round_number, match_id, result)

    def advance(self) -> Optional[RoundData]:
        """Resolve the current round and pair the next one.

        Returns:
            The next round, or None when the tournament has finished
        """
        next_round = self.resolver.advance()
        if next_round is None:
            logger.info(f"Tournament '{self.name}' finished")
        else:
            logger.info(
                f"Tournament '{self.name}' advanced to round {next_round.round_number}"
            )
        return next_round

    def reset(self) -> None:
        """Discard all players and rounds and return to setup.

        Irreversible; callers are expected to confirm with the user first.
        """
        self.resolver.reset()
        self.config = TournamentConfig(name=self.config.name)

    # ========== Standings and Tiebreaks ==========

    def standings(self) -> List[StandingRow]:
        """Get current tournament standings.

        Returns:
            Rows sorted by score, then Buchholz, best first
        """
        ordered = self.tiebreak_calculator.sort_standings(self.registry.snapshot())
        return [StandingRow(rank=i, player=p) for i, p in enumerate(ordered, start=1)]

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "config": self.config.to_dict(),
            "state": self.resolver.to_dict(),
            "registry": self.registry.to_dict(),
            "rounds": self.ledger.to_dict()["rounds"],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object

        Raises:
            TournamentStateException: If counters, rounds and players disagree
        """
        config = TournamentConfig.from_dict(data.get("config", {}))
        tournament = cls(name=config.name)
        tournament.config = config

        registry = PlayerRegistry.from_dict(data.get("registry", {}))
        ledger = RoundLedger.from_dict({"rounds": data.get("rounds", [])})
        tournament.registry = registry
        tournament.ledger = ledger
        tournament.resolver = RoundResolver(
            registry=registry,
            ledger=ledger,
            tiebreak_calculator=tournament.tiebreak_calculator,
        )
        tournament.resolver.restore(data.get("state", {}))
        tournament._check_snapshot()

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament

    def _check_snapshot(self) -> None:
        """Verify that loaded rounds and config agree with registry and counters.

        Registration closes when the tournament starts, so every stored round
        covers exactly the registered players.

        Raises:
            TournamentStateException: If the snapshot is inconsistent
        """
        registered = {p.id for p in self.registry.snapshot()}
        for round_data in self.ledger.rounds:
            participants = set(round_data.participant_ids())
            if participants != registered:
                mismatched = sorted(participants ^ registered)
                raise TournamentStateException(
                    f"Round {round_data.round_number} does not match the registered "
                    f"players: {mismatched}"
                )

        if self.phase is not Phase.SETUP and self.config.num_rounds != self.total_rounds:
            raise TournamentStateException(
                f"Configured rounds ({self.config.num_rounds}) disagree with "
                f"total rounds ({self.total_rounds})"
            )

    def _require_setup(self, action: str) -> None:
        if self.phase is not Phase.SETUP:
            raise TournamentStateException(
                f"Cannot {action} once the tournament has started"
            )
