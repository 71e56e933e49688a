"""Domain exceptions.

Raised by the application layer and mapped to HTTP responses by the
exception handlers in ``offices.infrastructure.api.error_handlers``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class OfficesError(Exception):
    """Base exception for all offices service errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(OfficesError):
    """Raised when an office or its photo blob does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NOT_FOUND")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ValidationError(OfficesError):
    """Raised when an office request breaks one or more field rules."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(
            f"Validation failed: {summary}",
            "VALIDATION_ERROR",
            {"errors": [{"field": e.field, "message": e.message} for e in self.errors]},
        )
