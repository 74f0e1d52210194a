"""API request and response schemas."""

from pocket_budget.api.schemas.money import (
    AmountMinor,
    FormatMoneyRequest,
    FormatMoneyResponse,
    ParseMoneyRequest,
    ParseMoneyResponse,
    ValidateMoneyRequest,
    ValidateMoneyResponse,
)

__all__ = [
    "AmountMinor",
    "FormatMoneyRequest",
    "FormatMoneyResponse",
    "ParseMoneyRequest",
    "ParseMoneyResponse",
    "ValidateMoneyRequest",
    "ValidateMoneyResponse",
]
