"""Round data model."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from swisspairing.models.matchup import Bye, Match, Matchup, matchup_from_dict


@dataclass
class RoundData:
    """Contains all data for a single round.

    Attributes
    ----------
    round_number : int
        The round number (1-indexed)
    matchups : list
        Matches and at most one bye, in the order the pairing engine made them
    """

    round_number: int
    matchups: List[Matchup] = field(default_factory=list)

    @property
    def matches(self) -> List[Match]:
        return [m for m in self.matchups if isinstance(m, Match)]

    @property
    def bye(self) -> Optional[Bye]:
        for matchup in self.matchups:
            if isinstance(matchup, Bye):
                return matchup
        return None

    @property
    def is_complete(self) -> bool:
        """True when every match has a result; byes never hold a round up."""
        return all(not match.is_pending for match in self.matches)

    def participant_ids(self) -> List[str]:
        """All player ids in this round, in matchup order."""
        return [pid for matchup in self.matchups for pid in matchup.player_ids]

    def get_matchup(self, matchup_id: str) -> Optional[Matchup]:
        for matchup in self.matchups:
            if matchup.id == matchup_id:
                return matchup
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "matchups": [m.to_dict() for m in self.matchups],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=int(data["round_number"]),
            matchups=[matchup_from_dict(m) for m in data.get("matchups", [])],
        )
