"""A player in the tournament and the running state the engine keeps for it."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from swisspairing.utils import generate_id


@dataclass(frozen=True)
class Player:
    """Represents a player in the tournament.

    Instances are immutable. Every change to a player's running state
    produces a new instance, so a tuple of players is a snapshot that can be
    handed to the pairing engine or the tie-break calculator safely.

    Attributes:
        name: Player's display name
        pairing_number: 1-based registration order, used to break score ties
        id: Unique identifier for the player
        score: Current tournament score
        opponent_ids: IDs of opponents faced, one per game played (not byes)
        had_bye: Whether player has received a bye
        colour_balance: +1 per game with White, -1 per game with Black
        buchholz: Last calculated Buchholz tiebreak
    """

    name: str
    pairing_number: int
    id: str = field(default_factory=lambda: generate_id("Player"))
    score: float = 0.0
    opponent_ids: Tuple[str, ...] = ()
    had_bye: bool = False
    colour_balance: int = 0
    buchholz: float = 0.0

    @property
    def games_played(self) -> int:
        """Number of games played over the board."""
        return len(self.opponent_ids)

    def has_played(self, opponent_id: str) -> bool:
        """Check if this player has already met ``opponent_id``."""
        return opponent_id in self.opponent_ids

    def with_game(self, opponent_id: str, colour_delta: int, points: float) -> Player:
        """Return a copy with one played game folded in."""
        return replace(
            self,
            opponent_ids=self.opponent_ids + (opponent_id,),
            colour_balance=self.colour_balance + colour_delta,
            score=self.score + points,
        )

    def with_bye(self, points: float) -> Player:
        """Return a copy with a bye folded in."""
        return replace(self, score=self.score + points, had_bye=True)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "pairing_number": self.pairing_number,
            "score": self.score,
            "opponent_ids": list(self.opponent_ids),
            "had_bye": self.had_bye,
            "colour_balance": self.colour_balance,
            "buchholz": self.buchholz,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Player:
        """Deserialize player from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            pairing_number=int(data["pairing_number"]),
            score=float(data.get("score", 0.0)),
            opponent_ids=tuple(str(o) for o in data.get("opponent_ids", [])),
            had_bye=bool(data.get("had_bye", False)),
            colour_balance=int(data.get("colour_balance", 0)),
            buchholz=float(data.get("buchholz", 0.0)),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.score:g})"
