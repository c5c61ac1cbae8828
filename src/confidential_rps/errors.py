# Area: Shared
"""
confidential_rps.errors — Custom exception classes
==================================================

Defines the exception hierarchy for the game engine and session.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class RPSGameError(Exception):
    """Base exception for all confidential_rps errors."""
    pass


class InvalidChoiceError(RPSGameError):
    """Raised when a move is not rock, paper or scissors."""

    def __init__(self, value: Any, valid_choices: List[str]):
        self.value = value
        self.valid_choices = valid_choices
        super().__init__(
            f"Invalid choice {value!r}; expected one of {valid_choices}"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_CHOICE",
            operation="submit_choice",
            context={"value": repr(self.value)},
            details=[f"Valid choices: {', '.join(self.valid_choices)}"],
        )


class SerializationError(RPSGameError):
    """Raised when a state cannot be sealed or a sealed payload cannot be unsealed."""

    def __init__(self, reason: str, payload: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.payload = payload or {}
        super().__init__(f"State serialization failed: {reason}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="SERIALIZATION_FAILURE",
            operation="seal/unseal",
            context=self.payload,
            details=[self.reason],
        )


class RoundInProgressError(RPSGameError):
    """Raised when an operation needs an idle session but a round is in flight."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Cannot {operation} while a round is in progress"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="ROUND_IN_PROGRESS",
            operation=self.operation,
            context={},
            details=None,
        )
