"""Validation helpers for interactive and command-line input."""

from __future__ import annotations

INVALID_NAME_CHARACTERS = '<>:"/\\|?*'


class InputValidationError(Exception):
    """Raised when a required value is missing or malformed."""


def require_value(value: str, label: str) -> str:
    """Return ``value`` stripped, rejecting empty input."""

    value = value.strip()
    if not value:
        raise InputValidationError(f"{label} cannot be empty.")
    return value


def validate_name(value: str, label: str) -> str:
    """Reject names that cannot be used as file or folder names."""

    value = require_value(value, label)
    bad = sorted({char for char in value if char in INVALID_NAME_CHARACTERS})
    if bad:
        raise InputValidationError(f"{label} contains invalid characters: {' '.join(bad)}")
    return value


__all__ = ["INVALID_NAME_CHARACTERS", "InputValidationError", "require_value", "validate_name"]
