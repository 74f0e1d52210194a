"""Domain exceptions raised by the money module and surfaced by API and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidInputError(DomainError):
    """Raised when money input cannot be parsed into minor units."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_MONEY_INPUT",
            message=message
            or compose_error_message(
                cause="Money input is not a readable amount.",
                action="Type an amount such as 19.99 or 1 234,56.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class MinorIntegerError(DomainError):
    """Raised when a minor-unit amount is not a finite integer."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_MINOR_AMOUNT",
            message=message
            or compose_error_message(
                cause="Minor amount must be a finite integer.",
                action="Pass the stored integer amount in minor units.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )


class InvalidFormatOptionsError(DomainError):
    """Raised when locale formatting options are rejected."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_FORMAT_OPTIONS",
            message=message
            or compose_error_message(
                cause="Money formatting options are invalid.",
                action="Check locale, currency and fraction digit settings.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )
