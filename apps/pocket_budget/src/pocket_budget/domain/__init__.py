"""Money value module: parsing, editing and display of minor-unit amounts."""

from pocket_budget.domain.errors import (
    DomainError,
    InvalidFormatOptionsError,
    InvalidInputError,
    MinorIntegerError,
)
from pocket_budget.domain.money import (
    MAX_MAJOR_DIGITS,
    MONEY_MINOR_FACTOR,
    MoneyInput,
    MoneyParts,
    ensure_minor_integer,
    is_valid_money_input,
    minor_units_to_editable_string,
    parse_money_parts,
    to_minor_units,
)
from pocket_budget.domain.money_format import (
    LocaleFormatOptions,
    format_localized_money,
)
from pocket_budget.domain.money_helpers import (
    MoneyHelpers,
    create_bound_money_helpers,
)

__all__ = [
    "MAX_MAJOR_DIGITS",
    "MONEY_MINOR_FACTOR",
    "DomainError",
    "InvalidFormatOptionsError",
    "InvalidInputError",
    "LocaleFormatOptions",
    "MinorIntegerError",
    "MoneyHelpers",
    "MoneyInput",
    "MoneyParts",
    "create_bound_money_helpers",
    "ensure_minor_integer",
    "format_localized_money",
    "is_valid_money_input",
    "minor_units_to_editable_string",
    "parse_money_parts",
    "to_minor_units",
]
