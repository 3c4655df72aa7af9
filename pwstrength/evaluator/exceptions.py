"""Custom exception hierarchy for the password evaluator."""

from __future__ import annotations


class EvaluatorError(Exception):
    """Base exception for all evaluator errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(EvaluatorError):
    """Raised when settings loading or validation fails."""
