"""Type hints used in Swiss Pairing."""

from typing import TYPE_CHECKING, Callable, List, Sequence, Tuple, Union

if TYPE_CHECKING:
    from swisspairing.models import Bye, Match, Player

# Colour labels (for display)
WHITE = "White"
BLACK = "Black"

# Immutable view of every registered player
PlayerSnapshot = Tuple["Player", ...]
# One round's matchups, bye first
Matchups = List[Union["Match", "Bye"]]
# (players, round_number) -> matchups
PairingFunction = Callable[[Sequence["Player"], int], Matchups]
