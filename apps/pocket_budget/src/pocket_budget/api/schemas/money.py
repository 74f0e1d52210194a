"""Schemas for money parse, format and validate endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
)

from pocket_budget.domain.errors import MinorIntegerError
from pocket_budget.domain.money import ensure_minor_integer


def _coerce_amount_minor(value: object) -> int:
    try:
        return ensure_minor_integer(value)
    except MinorIntegerError as exc:
        raise ValueError(exc.message) from exc


AmountMinor = Annotated[
    int,
    BeforeValidator(_coerce_amount_minor),
    Field(description="Signed amount in minor units (1/100 of the major unit)."),
]
MoneyText = StrictStr | StrictInt | StrictFloat


class ParseMoneyRequest(BaseModel):
    """Human-typed money to convert into minor units."""

    value: MoneyText = Field(examples=["1 234,56", "19.99", 12.34])


class ParseMoneyResponse(BaseModel):
    """Parsed amount with its editable rendering."""

    amount_minor: AmountMinor
    editable: str


class FormatMoneyRequest(BaseModel):
    """Stored amount to render for editing and display."""

    amount_minor: AmountMinor
    separator: str = Field(default=".", min_length=1, max_length=1)
    pad_fraction: bool = True
    options: dict[str, Any] = Field(default_factory=dict)


class FormatMoneyResponse(BaseModel):
    """Editable and localized renderings of one amount."""

    amount_minor: AmountMinor
    editable: str
    display: str


class ValidateMoneyRequest(BaseModel):
    """Money input to check without converting."""

    value: MoneyText


class ValidateMoneyResponse(BaseModel):
    """Whether the input would parse into minor units."""

    valid: bool
