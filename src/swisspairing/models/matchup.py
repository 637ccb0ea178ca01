"""Matchups produced by the pairing engine: a game between two players or a bye.

``Matchup`` is a closed sum type over :class:`Match` and :class:`Bye`.
Callers branch on it with ``isinstance``.
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

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from swisspairing.constants import (
    DRAW_SCORE,
    LOSS_SCORE,
    RESULT_BLACK_WIN,
    RESULT_DRAW,
    RESULT_PENDING,
    RESULT_WHITE_WIN,
    WIN_SCORE,
)
from swisspairing.exceptions import InvalidPairingException, InvalidResultException

MATCH_TYPE = "match"
BYE_TYPE = "bye"


class GameResult(Enum):
    """Outcome of a single game, from White's point of view."""

    PENDING = RESULT_PENDING
    WHITE_WINS = RESULT_WHITE_WIN
    BLACK_WINS = RESULT_BLACK_WIN
    DRAW = RESULT_DRAW

    @classmethod
    def parse(cls, value: Union[GameResult, str]) -> GameResult:
        """Coerce a result or its display string into a ``GameResult``.

        Raises:
            InvalidResultException: If the value is not a known result
        """
        if isinstance(value, cls):
            return value
        for result in cls:
            if value == result.value or value == result.name:
                return result
        raise InvalidResultException(f"Unknown game result: {value!r}")

    @property
    def points(self) -> Tuple[float, float]:
        """Points awarded as (white, black)."""
        if self is GameResult.WHITE_WINS:
            return WIN_SCORE, LOSS_SCORE
        if self is GameResult.BLACK_WINS:
            return LOSS_SCORE, WIN_SCORE
        if self is GameResult.DRAW:
            return DRAW_SCORE, DRAW_SCORE
        return LOSS_SCORE, LOSS_SCORE


@dataclass(frozen=True)
class Match:
    """A game between two players.

    Attributes:
        id: Unique id within the round
        white_id: ID of the player with the first move
        black_id: ID of the player with the second move
        result: Current result, pending until entered
    """

    id: str
    white_id: str
    black_id: str
    result: GameResult = GameResult.PENDING

    def __post_init__(self) -> None:
        if self.white_id == self.black_id:
            raise InvalidPairingException(
                f"Match {self.id} pairs player {self.white_id} with themselves"
            )

    @property
    def player_ids(self) -> Tuple[str, str]:
        return (self.white_id, self.black_id)

    @property
    def is_pending(self) -> bool:
        return self.result is GameResult.PENDING

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "type": MATCH_TYPE,
            "id": self.id,
            "white_id": self.white_id,
            "black_id": self.black_id,
            "result": self.result.value,
        }


@dataclass(frozen=True)
class Bye:
    """A player sitting out the round for a full point."""

    id: str
    player_id: str

    @property
    def player_ids(self) -> Tuple[str]:
        return (self.player_id,)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bye to dictionary."""
        return {"type": BYE_TYPE, "id": self.id, "player_id": self.player_id}


Matchup = Union[Match, Bye]


def matchup_from_dict(data: Dict[str, Any]) -> Matchup:
    """Deserialize a matchup, dispatching on its ``type`` field."""
    kind = data.get("type")
    if kind == MATCH_TYPE:
        return Match(
            id=data["id"],
            white_id=str(data["white_id"]),
            black_id=str(data["black_id"]),
            result=GameResult.parse(data.get("result", RESULT_PENDING)),
        )
    if kind == BYE_TYPE:
        return Bye(id=data["id"], player_id=str(data["player_id"]))
    raise InvalidPairingException(f"Unknown matchup type: {kind!r}")
