"""Tiebreak calculation for tournaments.

This module handles the Buchholz tiebreak and the standings order built on it.
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
from typing import Dict, Iterable, List, Sequence, Tuple

from swisspairing.exceptions import PlayerNotFoundException
from swisspairing.models.player import Player
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class TiebreakCalculator:
    """Calculates tiebreak scores for tournament standings.

    Buchholz: sum of the current scores of every opponent a player has
    faced. Byes contribute nothing. Opponents' scores move every round, so
    the value is always recomputed from scratch.
    """

    def buchholz(self, player: Player, all_players: Iterable[Player]) -> float:
        """Calculate one player's Buchholz against a snapshot.

        Args:
            player: The player to calculate for
            all_players: Snapshot used to look up opponent scores

        Returns:
            Sum of the opponents' scores

        Raises:
            PlayerNotFoundException: If an opponent id is not in the snapshot
        """
        scores = self._score_lookup(all_players)
        return self._buchholz(player, scores)

    def calculate_all(self, players: Sequence[Player]) -> Tuple[Player, ...]:
        """Return a new snapshot with every player's Buchholz recalculated."""
        scores = self._score_lookup(players)
        updated = tuple(
            replace(player, buchholz=self._buchholz(player, scores)) for player in players
        )
        logger.debug(f"Recalculated Buchholz for {len(updated)} players")
        return updated

    def sort_standings(self, players: Iterable[Player]) -> List[Player]:
        """Order players by score, then Buchholz, then pairing number."""
        return sorted(
            players, key=lambda p: (-p.score, -p.buchholz, p.pairing_number)
        )

    @staticmethod
    def _score_lookup(players: Iterable[Player]) -> Dict[str, float]:
        return {p.id: p.score for p in players}

    @staticmethod
    def _buchholz(player: Player, scores: Dict[str, float]) -> float:
        total = 0.0
        for opponent_id in player.opponent_ids:
            if opponent_id not in scores:
                raise PlayerNotFoundException(
                    f"Opponent {opponent_id} of {player.name} is not registered"
                )
            total += scores[opponent_id]
        return total
