"""Application-level exception types.

This module defines domain errors used across services/adapters, enabling
consistent error handling, logging, and API responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code (logged, not returned).
        message: Human-readable error message returned to clients.
        details: Optional extra fields merged into the error body.
    """

    code: str
    message: str
    details: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when a required field is missing or empty."""


class RateLimitAppError(AppError):
    """Raised when a client exceeds its request budget for the window."""


class LLMAppError(AppError):
    """Raised when the inference provider call fails."""


class StorageAppError(AppError):
    """Raised when the relational store rejects an operation."""
