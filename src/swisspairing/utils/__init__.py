"""Shared helpers: logger setup and identifier generation."""

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

import logging
import uuid

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_configured = False


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger, configuring the package root logger once.

    Args:
        name: Usually ``__name__`` of the calling module
        level: Level applied to the package root logger on first call

    Returns:
        The logger for ``name``
    """
    global _root_configured

    if not _root_configured:
        root = logging.getLogger("swisspairing")
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
        root.setLevel(level)
        _root_configured = True

    return logging.getLogger(name)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``Player-1f3a9c2e``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"
