"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from pocket_budget.core.settings import Settings, get_settings
from pocket_budget.domain.money_helpers import MoneyHelpers, create_bound_money_helpers


def get_money_helpers(
    settings: Annotated[Settings, Depends(get_settings)],
) -> MoneyHelpers:
    """Build money helpers bound to the configured display defaults."""

    return create_bound_money_helpers(settings.format_defaults())
