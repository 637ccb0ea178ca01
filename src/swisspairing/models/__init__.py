"""Data models for Swiss Pairing."""

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

from swisspairing.models.matchup import Bye, GameResult, Match, Matchup, matchup_from_dict
from swisspairing.models.phase import Phase
from swisspairing.models.player import Player
from swisspairing.models.round_data import RoundData
from swisspairing.models.tournament_config import TournamentConfig

__all__ = [
    "Bye",
    "GameResult",
    "Match",
    "Matchup",
    "Phase",
    "Player",
    "RoundData",
    "TournamentConfig",
    "matchup_from_dict",
]
