"""Money helpers bound to a default display configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pocket_budget.domain.money import (
    MoneyInput,
    is_valid_money_input,
    minor_units_to_editable_string,
    to_minor_units,
)
from pocket_budget.domain.money_format import (
    LocaleFormatOptions,
    format_localized_money,
)


@dataclass(frozen=True, slots=True)
class MoneyHelpers:
    """Parse, edit and display operations sharing bound format defaults."""

    defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def to_minor_units(self, value: MoneyInput) -> int:
        return to_minor_units(value)

    def minor_units_to_editable_string(
        self,
        amount_minor: int,
        *,
        separator: str = ".",
        pad_fraction: bool = True,
    ) -> str:
        return minor_units_to_editable_string(
            amount_minor, separator=separator, pad_fraction=pad_fraction
        )

    def format_localized_money(
        self,
        amount_minor: int,
        override: Mapping[str, Any] | None = None,
    ) -> str:
        """Format with bound defaults; override keys replace them one by one."""
        merged = {**self.defaults, **(override or {})}
        return format_localized_money(amount_minor, merged)

    def is_valid_money_input(self, value: MoneyInput) -> bool:
        return is_valid_money_input(value)


def create_bound_money_helpers(
    defaults: Mapping[str, Any] | None = None,
) -> MoneyHelpers:
    """Bind default locale format options, rejecting invalid ones up front."""

    bound = dict(defaults or {})
    LocaleFormatOptions.from_mapping(bound)
    return MoneyHelpers(defaults=MappingProxyType(bound))
