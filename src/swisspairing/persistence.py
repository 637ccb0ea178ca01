"""Saving and loading tournament snapshots as JSON files."""

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

import json
from pathlib import Path
from typing import Union

from swisspairing.constants import SAVE_FILE_EXTENSION
from swisspairing.exceptions import (
    FileLoadException,
    FileSaveException,
    SwissPairingException,
)
from swisspairing.tournament import Tournament
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def save_path(path: Union[str, Path]) -> Path:
    """Path with the save file extension appended when missing."""
    path = Path(path)
    if path.suffix != SAVE_FILE_EXTENSION:
        path = path.with_name(path.name + SAVE_FILE_EXTENSION)
    return path


def save_tournament(tournament: Tournament, path: Union[str, Path]) -> Path:
    """Write the tournament snapshot to ``path``.

    Args:
        tournament: Tournament to save
        path: Target file; ``.json`` is appended when missing

    Returns:
        The path actually written

    Raises:
        FileSaveException: If the file cannot be written
    """
    target = save_path(path)
    try:
        target.write_text(json.dumps(tournament.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise FileSaveException(f"Could not save tournament to {target}: {e}") from e

    logger.info(f"Saved tournament '{tournament.name}' to {target}")
    return target


def load_tournament(path: Union[str, Path]) -> Tournament:
    """Read a tournament snapshot written by ``save_tournament``.

    Raises:
        FileLoadException: If the file is missing, unreadable or not a valid snapshot
    """
    source = save_path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except OSError as e:
        raise FileLoadException(f"Could not read {source}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"{source} is not valid JSON: {e}") from e

    try:
        return Tournament.from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError, SwissPairingException) as e:
        raise FileLoadException(f"{source} is not a valid tournament file: {e}") from e
