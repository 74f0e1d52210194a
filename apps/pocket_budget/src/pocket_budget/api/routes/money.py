"""Money conversion routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from pocket_budget.api.dependencies import get_money_helpers
from pocket_budget.api.schemas.money import (
    FormatMoneyRequest,
    FormatMoneyResponse,
    ParseMoneyRequest,
    ParseMoneyResponse,
    ValidateMoneyRequest,
    ValidateMoneyResponse,
)
from pocket_budget.domain.money_helpers import MoneyHelpers

router = APIRouter(prefix="/money", tags=["Money"])


@router.post("/parse", response_model=ParseMoneyResponse)
def parse_money(
    payload: ParseMoneyRequest,
    money: Annotated[MoneyHelpers, Depends(get_money_helpers)],
) -> ParseMoneyResponse:
    """Convert typed money into integer minor units."""

    amount_minor = money.to_minor_units(payload.value)
    return ParseMoneyResponse(
        amount_minor=amount_minor,
        editable=money.minor_units_to_editable_string(amount_minor),
    )


@router.post("/format", response_model=FormatMoneyResponse)
def format_money(
    payload: FormatMoneyRequest,
    money: Annotated[MoneyHelpers, Depends(get_money_helpers)],
) -> FormatMoneyResponse:
    """Render a stored amount for editing and for display."""

    return FormatMoneyResponse(
        amount_minor=payload.amount_minor,
        editable=money.minor_units_to_editable_string(
            payload.amount_minor,
            separator=payload.separator,
            pad_fraction=payload.pad_fraction,
        ),
        display=money.format_localized_money(payload.amount_minor, payload.options),
    )


@router.post("/validate", response_model=ValidateMoneyResponse)
def validate_money(
    payload: ValidateMoneyRequest,
    money: Annotated[MoneyHelpers, Depends(get_money_helpers)],
) -> ValidateMoneyResponse:
    """Report whether typed money would parse, without failing."""

    return ValidateMoneyResponse(valid=money.is_valid_money_input(payload.value))
