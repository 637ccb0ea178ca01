"""Greedy Swiss pairing.

Players are ranked by score, the lowest ranked player without a bye sits
out when the count is odd, and the rest are paired top-down with the first
player further down the list they have not met yet. The pass never
backtracks: when every remaining candidate is a past opponent, the first
one is taken and the rematch is logged.
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

from typing import List, Optional, Sequence, Set, Tuple

from swisspairing.constants import MIN_PLAYERS
from swisspairing.exceptions import InvalidPairingException
from swisspairing.models.matchup import Bye, Match, Matchup
from swisspairing.models.player import Player
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def rank_players(players: Sequence[Player]) -> List[Player]:
    """Order players for pairing: score descending, then pairing number."""
    return sorted(players, key=lambda p: (-p.score, p.pairing_number))


def select_bye_player(ranked: Sequence[Player]) -> Player:
    """Pick the bye recipient from a ranked list.

    Scanning from the bottom, the first player who has not had a bye gets
    it. If everybody already had one, the lowest ranked player gets a
    second bye.

    Args:
        ranked: Players ordered best to worst

    Returns:
        The player who sits out this round
    """
    for player in reversed(ranked):
        if not player.had_bye:
            return player

    selected = ranked[-1]
    logger.warning(
        f"All players have already received a bye; assigning another to {selected.name}"
    )
    return selected


def assign_colours(higher: Player, lower: Player) -> Tuple[Player, Player]:
    """Return (white, black) for a pair.

    The player with the lower colour balance (more games with Black) gets
    White. On equal balance the higher ranked player gets White.
    """
    if higher.colour_balance <= lower.colour_balance:
        return higher, lower
    return lower, higher


def _find_opponent(
    player: Player, pool: Sequence[Player], start: int, paired: Set[str]
) -> Optional[Player]:
    """First unpaired player after ``start`` not yet met, else first unpaired."""
    fallback: Optional[Player] = None
    for candidate in pool[start:]:
        if candidate.id in paired:
            continue
        if not player.has_played(candidate.id):
            return candidate
        if fallback is None:
            fallback = candidate

    if fallback is not None:
        logger.warning(
            f"No new opponent left for {player.name}; rematch against {fallback.name}"
        )
    return fallback


def create_swiss_pairings(
    players: Sequence[Player], round_number: int
) -> List[Matchup]:
    """Generate the matchups for one round.

    Args:
        players: Snapshot of every registered player; left untouched
        round_number: The 1-indexed round being paired

    Returns:
        The bye (if the player count is odd) followed by the matches, best
        ranked boards first

    Raises:
        InvalidPairingException: If fewer than two players are given
    """
    if len(players) < MIN_PLAYERS:
        raise InvalidPairingException(
            f"At least {MIN_PLAYERS} players are needed to pair a round, got {len(players)}"
        )

    pool = rank_players(players)
    matchups: List[Matchup] = []

    if len(pool) % 2 != 0:
        bye_player = select_bye_player(pool)
        matchups.append(Bye(id=f"{round_number}-bye-{bye_player.id}", player_id=bye_player.id))
        pool = [p for p in pool if p.id != bye_player.id]
        logger.debug(f"Round {round_number}: bye for {bye_player.name}")

    paired: Set[str] = set()
    for index, player_a in enumerate(pool):
        if player_a.id in paired:
            continue

        player_b = _find_opponent(player_a, pool, index + 1, paired)
        if player_b is None:
            # Unreachable with an even pool
            raise InvalidPairingException(f"Could not find an opponent for {player_a.name}")

        white, black = assign_colours(player_a, player_b)
        matchups.append(
            Match(
                id=f"{round_number}-{white.id}-{black.id}",
                white_id=white.id,
                black_id=black.id,
            )
        )
        paired.update((player_a.id, player_b.id))
        logger.debug(f"Round {round_number}: {white.name} (W) vs {black.name} (B)")

    logger.info(
        f"Paired round {round_number}: {len(pool) // 2} games, "
        f"{'one bye' if len(matchups) > len(pool) // 2 else 'no bye'}"
    )
    return matchups
