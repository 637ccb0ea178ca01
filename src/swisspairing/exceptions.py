"""Exceptions for use in Swiss Pairing"""

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


# ========== Base Application Exception ==========


class SwissPairingException(Exception):
    """Base exception for all Swiss Pairing errors.

    Every failed engine operation raises a subclass of this and leaves the
    tournament state exactly as it was before the call.
    """

    pass


class NotFoundException(SwissPairingException):
    """Base exception for unknown player, round or match ids."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing configuration is invalid."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(SwissPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotFoundException(TournamentException, NotFoundException):
    """Raised when a requested round does not exist."""

    pass


class RoundSequenceException(TournamentException):
    """Raised when a round is appended out of order."""

    pass


class RoundIncompleteException(TournamentException):
    """Raised when advancing past a round that still has pending results."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when a player name is already registered (case-insensitive)."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissPairingException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException, NotFoundException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result value is not a known game result."""

    pass


class InvalidResultTargetException(ResultException):
    """Raised when setting a result on a bye, which has no result."""

    pass


class MatchNotFoundException(ResultException, NotFoundException):
    """Raised when a match id does not exist in the given round."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SwissPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when a tournament cannot start with the given setup."""

    pass
