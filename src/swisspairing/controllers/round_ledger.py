"""Round management for tournaments.

This module stores the ordered sequence of rounds and the results entered
for their matches.
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

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple, Union

from swisspairing.exceptions import (
    InvalidPairingException,
    InvalidResultTargetException,
    MatchNotFoundException,
    RoundNotFoundException,
    RoundSequenceException,
)
from swisspairing.models.matchup import Bye, GameResult, Match
from swisspairing.models.round_data import RoundData
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundLedger:
    """Ordered, append-only record of the tournament's rounds.

    Round numbers are contiguous from 1. Match results may be set and
    changed freely; the ledger does not know whether a round has been
    resolved, so the ``Tournament`` facade guards that.
    """

    def __init__(self) -> None:
        self._rounds: List[RoundData] = []

    def __len__(self) -> int:
        return len(self._rounds)

    @property
    def rounds(self) -> Tuple[RoundData, ...]:
        return tuple(self._rounds)

    @property
    def latest_round(self) -> Optional[RoundData]:
        """The most recently appended round, or None if there is none."""
        return self._rounds[-1] if self._rounds else None

    def append(self, round_data: RoundData) -> None:
        """Add the next round.

        Raises:
            RoundSequenceException: If the round number is not the next one
            InvalidPairingException: If a player appears twice in the round
        """
        expected = len(self._rounds) + 1
        if round_data.round_number != expected:
            raise RoundSequenceException(
                f"Expected round {expected}, got round {round_data.round_number}"
            )

        participants = round_data.participant_ids()
        if len(participants) != len(set(participants)):
            raise InvalidPairingException(
                f"Round {round_data.round_number} lists a player more than once"
            )

        self._rounds.append(round_data)
        logger.info(
            f"Round {round_data.round_number} created with "
            f"{len(round_data.matchups)} matchups"
        )

    def get_round(self, round_number: int) -> RoundData:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Raises:
            RoundNotFoundException: If the round does not exist
        """
        if 1 <= round_number <= len(self._rounds):
            return self._rounds[round_number - 1]
        raise RoundNotFoundException(f"Round {round_number} does not exist")

    def record_result(
        self,
        round_number: int,
        match_id: str,
        result: Union[GameResult, str],
    ) -> Match:
        """Set (or overwrite) the result of one match.

        Args:
            round_number: The round number (1-indexed)
            match_id: Id of the match within that round
            result: A ``GameResult`` or its display string ("1-0", ...)

        Returns:
            The updated match

        Raises:
            RoundNotFoundException: If the round does not exist
            MatchNotFoundException: If the round has no matchup with this id
            InvalidResultTargetException: If the matchup is a bye
            InvalidResultException: If the result is not recognised
        """
        round_data = self.get_round(round_number)
        matchup = round_data.get_matchup(match_id)
        if matchup is None:
            raise MatchNotFoundException(
                f"Round {round_number} has no match with id {match_id}"
            )
        if isinstance(matchup, Bye):
            raise InvalidResultTargetException(
                f"Cannot set a result on bye {match_id}"
            )

        parsed = GameResult.parse(result)
        updated = replace(matchup, result=parsed)
        index = round_data.matchups.index(matchup)
        round_data.matchups[index] = updated
        logger.debug(f"Round {round_number}: result {parsed.value} for {match_id}")
        return updated

    def is_complete(self, round_number: int) -> bool:
        """True iff every match in the round has a result.

        Raises:
            RoundNotFoundException: If the round does not exist
        """
        return self.get_round(round_number).is_complete

    def clear(self) -> None:
        self._rounds = []

    def to_dict(self) -> Dict[str, Any]:
        return {"rounds": [r.to_dict() for r in self._rounds]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundLedger":
        """Rebuild a ledger, re-checking the round sequence."""
        ledger = cls()
        for r_data in data.get("rounds", []):
            ledger.append(RoundData.from_dict(r_data))
        return ledger
