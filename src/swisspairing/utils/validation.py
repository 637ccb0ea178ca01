"""Validation utilities for Swiss Pairing.

This module provides reusable validation functions with consistent error handling.
"""

import re
from typing import List, Optional

from swisspairing.constants import PLAYER_LIST_SEPARATORS

MAX_NAME_LENGTH = 100


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Name Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a player's display name.

    Surrounding whitespace is stripped and runs of inner whitespace are
    collapsed to a single space.

    Args:
        name: Name as typed by the user

    Returns:
        ValidationResult with validation status

    Example:
        >>> result = validate_player_name("  Magnus   Carlsen ")
        >>> result.sanitized_value
        'Magnus Carlsen'
    """
    if name is None or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Player name is required",
        )

    cleaned = re.sub(r"\s+", " ", name.strip())

    if len(cleaned) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Player name is too long (max {MAX_NAME_LENGTH} characters)",
        )

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


def split_player_list(text: str) -> List[str]:
    """Split a pasted list of names on newlines and commas, dropping blanks."""
    return [part.strip() for part in re.split(PLAYER_LIST_SEPARATORS, text) if part.strip()]
