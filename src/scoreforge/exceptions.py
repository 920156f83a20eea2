# src/scoreforge/exceptions.py

"""Custom exception hierarchy for ScoreForge.

This module provides a structured exception hierarchy that enables:
1. Clear distinction between storage failures and bad caller input
2. Detailed error context for logging and debugging
3. A single base class the CLI can catch and report
"""

from __future__ import annotations


class ScoreForgeError(Exception):
    """Base exception for all ScoreForge errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Storage Errors (surfaced to the caller, never retried)
# =============================================================================


class StorageError(ScoreForgeError):
    """Base class for persistence layer errors."""

    pass


class StorageUnavailableError(StorageError):
    """Raised when the key-value store cannot read, write or flush."""

    def __init__(self, operation: str, key: str | None = None, reason: str = "") -> None:
        target = f" for key '{key}'" if key is not None else ""
        suffix = f": {reason}" if reason else ""
        super().__init__(
            message=f"Storage unavailable during {operation}{target}{suffix}",
            details={"operation": operation, "key": key, "reason": reason},
        )


# =============================================================================
# Decode Errors (recovered locally by the codec)
# =============================================================================


class RecordDecodeError(ScoreForgeError):
    """Raised when stored text is not a valid high score envelope.

    Only the strict codec entry point raises this; the fail-soft decoder
    logs it and substitutes an empty record list.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Could not decode high scores: {reason}",
            details={"reason": reason},
        )


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(ScoreForgeError):
    """Base class for validation errors."""

    pass


class InvalidLimitError(ValidationError):
    """Raised when a high score capacity limit is not a positive integer."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            message=f"High score limit must be at least 1, got {limit}",
            details={"limit": limit},
        )
