"""Locale-aware money display backed by Babel CLDR number patterns."""

from __future__ import annotations

import copy
import decimal
import logging
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Literal

from babel import Locale, UnknownLocaleError
from babel.numbers import NumberPattern, format_currency, get_plus_sign_symbol
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from pocket_budget.domain.errors import (
    InvalidFormatOptionsError,
    compose_error_message,
)
from pocket_budget.domain.money import MINOR_DIGITS, ensure_minor_integer

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "ru-RU"
DEFAULT_CURRENCY = "RUB"
MAX_FRACTION_DIGITS = 20
PERCENT_SCALE = 2

NumberStyle = Literal["currency", "decimal", "percent"]
SignDisplay = Literal["auto", "always", "except_zero", "negative", "never"]
CurrencySign = Literal["standard", "accounting"]
CurrencyDisplay = Literal["symbol", "code", "name"]


def parse_locale(identifier: str) -> Locale:
    """Resolve BCP 47 (``en-US``) or CLDR (``en_US``) identifiers."""

    return Locale.parse(identifier.replace("-", "_"))


class LocaleFormatOptions(BaseModel):
    """Options for rendering minor units as a localized display string."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    locale: str = DEFAULT_LOCALE
    style: NumberStyle = "currency"
    currency: str = Field(default=DEFAULT_CURRENCY, pattern=r"^[A-Za-z]{3}$")
    minimum_fraction_digits: int = Field(default=2, ge=0, le=MAX_FRACTION_DIGITS)
    maximum_fraction_digits: int = Field(default=2, ge=0, le=MAX_FRACTION_DIGITS)
    sign_display: SignDisplay = "auto"
    use_grouping: bool = True
    currency_sign: CurrencySign = "standard"
    currency_display: CurrencyDisplay = "symbol"

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, value: str) -> str:
        try:
            parse_locale(value)
        except (UnknownLocaleError, ValueError) as exc:
            raise ValueError(f"Unknown locale: {value!r}.") from exc
        return value

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def validate_fraction_digits(self) -> LocaleFormatOptions:
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            raise ValueError(
                "minimum_fraction_digits cannot exceed maximum_fraction_digits."
            )
        return self

    @classmethod
    def from_mapping(
        cls, options: Mapping[str, Any] | None = None
    ) -> LocaleFormatOptions:
        """Validate caller options layered over the defaults."""

        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as exc:
            logger.warning(
                "money_format_options_rejected",
                extra={"error_count": exc.error_count()},
            )
            raise InvalidFormatOptionsError(
                message=compose_error_message(
                    cause="Money formatting options are invalid.",
                    action="Fix the listed options and format again.",
                ),
                details={
                    "errors": exc.errors(
                        include_url=False, include_context=False, include_input=False
                    )
                },
            ) from exc


def _select_pattern(locale: Locale, options: LocaleFormatOptions) -> NumberPattern:
    if options.style == "currency" and options.currency_display != "name":
        return locale.currency_formats[options.currency_sign]
    if options.style == "percent":
        return locale.percent_formats[None]
    return locale.decimal_formats[None]


def _code_affix(affix: str, *, before_number: bool) -> str:
    if "¤" not in affix:
        return affix
    affix = affix.replace("¤", "¤¤")
    # codes are set apart from the digits, symbols are not
    if before_number and affix.endswith("¤¤"):
        return f"{affix}\u00a0"
    if not before_number and affix.startswith("¤¤"):
        return f"\u00a0{affix}"
    return affix


def _with_currency_code(pattern: NumberPattern) -> None:
    pattern.prefix = tuple(
        _code_affix(affix, before_number=True) for affix in pattern.prefix
    )
    pattern.suffix = tuple(
        _code_affix(affix, before_number=False) for affix in pattern.suffix
    )


def _with_explicit_plus(pattern: NumberPattern, plus_sign: str) -> None:
    positive_prefix, negative_prefix = pattern.prefix
    positive_suffix, negative_suffix = pattern.suffix
    if "-" in negative_prefix:
        pattern.prefix = (negative_prefix.replace("-", plus_sign), negative_prefix)
        pattern.suffix = (negative_suffix, negative_suffix)
    else:
        # accounting patterns mark negatives with parentheses
        pattern.prefix = (f"{plus_sign}{positive_prefix}", negative_prefix)
        pattern.suffix = (positive_suffix, negative_suffix)


def _display_value(
    value: Decimal, sign_display: SignDisplay, *, rounds_to_zero: bool
) -> Decimal:
    if sign_display == "never":
        return abs(value)
    if rounds_to_zero and sign_display in ("negative", "except_zero"):
        return abs(value)
    return value


def format_localized_money(
    amount_minor: int,
    options: Mapping[str, Any] | None = None,
) -> str:
    """Render minor units through the locale's currency, decimal or percent format.

    ``options`` is layered over the defaults: Russian locale, RUB currency,
    exactly two fraction digits and automatic sign display. The sign is
    decided on the value as displayed, so ``-0.01`` shown without fraction
    digits counts as zero for ``negative`` and ``except_zero``.
    """

    amount = ensure_minor_integer(amount_minor)
    resolved = LocaleFormatOptions.from_mapping(options)
    locale = parse_locale(resolved.locale)
    is_currency = resolved.style == "currency"

    pattern = copy.copy(_select_pattern(locale, resolved))
    pattern.frac_prec = (
        resolved.minimum_fraction_digits,
        resolved.maximum_fraction_digits,
    )
    if is_currency and resolved.currency_display == "code":
        _with_currency_code(pattern)

    # percent patterns multiply by 100 before rounding
    scale = PERCENT_SCALE if resolved.style == "percent" else 0
    with decimal.localcontext() as context:
        context.rounding = ROUND_HALF_UP
        context.prec = max(
            context.prec,
            len(str(abs(amount))) + scale + resolved.maximum_fraction_digits + 4,
        )
        value = Decimal(amount).scaleb(-MINOR_DIGITS)
        displayed = value.scaleb(scale).quantize(
            Decimal(1).scaleb(-resolved.maximum_fraction_digits)
        )
        rounds_to_zero = not displayed
        if resolved.sign_display == "always" or (
            resolved.sign_display == "except_zero" and not rounds_to_zero
        ):
            _with_explicit_plus(pattern, get_plus_sign_symbol(locale))
        value = _display_value(
            value, resolved.sign_display, rounds_to_zero=rounds_to_zero
        )

        if is_currency and resolved.currency_display == "name":
            return format_currency(
                value,
                resolved.currency,
                format=pattern,
                locale=locale,
                currency_digits=False,
                format_type="name",
                group_separator=resolved.use_grouping,
            )
        return pattern.apply(
            value,
            locale,
            currency=resolved.currency if is_currency else None,
            currency_digits=False,
            group_separator=resolved.use_grouping,
        )
