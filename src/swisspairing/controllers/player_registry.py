"""Player registration and the registry of running player state.

This module handles player registration with proper validation and holds
the current snapshot that the resolver replaces after every round.
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

from typing import Any, Dict, Iterable, List, Optional

from swisspairing.exceptions import (
    DuplicatePlayerException,
    InvalidPlayerDataException,
    PlayerNotFoundException,
)
from swisspairing.models.player import Player
from swisspairing.type_hints import PlayerSnapshot
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import split_player_list, validate_player_name

logger = setup_logger(__name__)


class PlayerRegistry:
    """Holds player identity and cumulative tournament state.

    This class is responsible for:
    - Registering players with unique (case-insensitive) names
    - Removing players before the tournament starts
    - Handing out immutable snapshots for pairing and scoring
    - Accepting the updated snapshot after a round is resolved

    Phase rules (no registration once the tournament is running) are
    enforced by the ``Tournament`` facade, not here.
    """

    def __init__(self) -> None:
        self._players: Dict[str, Player] = {}
        self._next_pairing_number = 1

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def register(self, name: str) -> Player:
        """Register a new player.

        Args:
            name: Display name; surrounding whitespace is ignored

        Returns:
            The newly created player

        Raises:
            InvalidPlayerDataException: If the name is empty or too long
            DuplicatePlayerException: If the name is already taken, ignoring case
        """
        result = validate_player_name(name)
        if not result:
            raise InvalidPlayerDataException(result.error_message)

        clean_name = result.sanitized_value
        existing = self.find_by_name(clean_name)
        if existing is not None:
            raise DuplicatePlayerException(
                f"A player named '{existing.name}' is already registered"
            )

        player = Player(name=clean_name, pairing_number=self._next_pairing_number)
        self._players[player.id] = player
        self._next_pairing_number += 1
        logger.info(f"Added player: {player.name} ({player.id})")
        return player

    def register_many(self, text: str) -> List[Player]:
        """Register every name in a pasted list.

        Names are separated by newlines or commas. Names that are already
        registered, or repeated within the list, are skipped.

        Returns:
            The players actually added, in list order
        """
        added = []
        for name in split_player_list(text):
            try:
                added.append(self.register(name))
            except DuplicatePlayerException:
                logger.warning(f"Skipping duplicate player name: {name}")
            except InvalidPlayerDataException as e:
                logger.warning(f"Skipping invalid player name {name!r}: {e}")
        return added

    def remove(self, player_id: str) -> Player:
        """Remove a player.

        Raises:
            PlayerNotFoundException: If no player has this id
        """
        player = self._players.pop(player_id, None)
        if player is None:
            raise PlayerNotFoundException(f"No player with id {player_id}")
        logger.info(f"Removed player: {player.name} ({player_id})")
        return player

    def get(self, player_id: str) -> Player:
        """Look up a player by id.

        Raises:
            PlayerNotFoundException: If no player has this id
        """
        try:
            return self._players[player_id]
        except KeyError:
            raise PlayerNotFoundException(f"No player with id {player_id}") from None

    def find_by_name(self, name: str) -> Optional[Player]:
        """Case-insensitive lookup by name, or None."""
        key = name.strip().casefold()
        for player in self._players.values():
            if player.name.casefold() == key:
                return player
        return None

    def snapshot(self) -> PlayerSnapshot:
        """Immutable view of all players in registration order."""
        return tuple(sorted(self._players.values(), key=lambda p: p.pairing_number))

    def replace_all(self, players: Iterable[Player]) -> None:
        """Swap in an updated snapshot covering exactly the registered players.

        Raises:
            PlayerNotFoundException: If the id sets differ
        """
        updated = {p.id: p for p in players}
        if updated.keys() != self._players.keys():
            unknown = set(updated) ^ set(self._players)
            raise PlayerNotFoundException(
                f"Updated snapshot does not match registered players: {sorted(unknown)}"
            )
        self._players = updated

    def clear(self) -> None:
        self._players = {}
        self._next_pairing_number = 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize registry to dictionary."""
        return {
            "players": [p.to_dict() for p in self.snapshot()],
            "next_pairing_number": self._next_pairing_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerRegistry":
        """Deserialize registry from dictionary."""
        registry = cls()
        for p_data in data.get("players", []):
            player = Player.from_dict(p_data)
            registry._players[player.id] = player
        highest = max((p.pairing_number for p in registry._players.values()), default=0)
        registry._next_pairing_number = max(
            int(data.get("next_pairing_number", 1)), highest + 1
        )
        return registry
