"""Money helpers converting typed amounts to integer minor units and back.

Every monetary value stored or compared by the application is a signed
integer count of minor units (kopecks, cents) with a fixed factor of 100.
Parsing accepts free-form text: the rightmost comma or dot is taken as the
decimal separator and any earlier one as a grouping mark, so both
``"1,234.56"`` and ``"1 234,56"`` resolve to ``123456``. Fractional digits
beyond the second are truncated, never rounded.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal

from pocket_budget.domain.errors import (
    InvalidInputError,
    MinorIntegerError,
    compose_error_message,
)

logger = logging.getLogger(__name__)

MONEY_MINOR_FACTOR = 100
MINOR_DIGITS = 2
# Python refuses int/str conversions past 4300 digits
MAX_MAJOR_DIGITS = 1000
_MAJOR_LIMIT = 10**MAX_MAJOR_DIGITS
_MINOR_LIMIT = _MAJOR_LIMIT * MONEY_MINOR_FACTOR

MoneyInput = str | int | float | Decimal

_WHITESPACE = re.compile(r"\s")
_LEADING_SIGN = re.compile(r"^[-+]")
_NOT_DIGIT_OR_SEPARATOR = re.compile(r"[^0-9.,]")
_NOT_DIGIT = re.compile(r"[^0-9]")
_DIGIT = re.compile(r"[0-9]")


@dataclass(frozen=True, slots=True)
class MoneyParts:
    """Sign and raw digit runs extracted from a money input."""

    sign: int
    integer_digits: str
    fractional_digits: str


def _too_large_input() -> InvalidInputError:
    return InvalidInputError(
        message=compose_error_message(
            cause=f"Money input cannot exceed {MAX_MAJOR_DIGITS} integer digits.",
            action="Type a smaller amount.",
        ),
        details={"max_integer_digits": MAX_MAJOR_DIGITS},
    )


def _normalize_money_input(value: MoneyInput) -> str:
    if isinstance(value, bool):
        raise InvalidInputError(
            message=compose_error_message(
                cause="Money input must be text or a number, not a boolean.",
                action="Pass the amount as text or as a number.",
            ),
            details={"type": type(value).__name__},
        )

    if isinstance(value, str):
        return value.strip()

    if isinstance(value, int):
        if abs(value) >= _MAJOR_LIMIT:
            raise _too_large_input()
        return str(value)

    if isinstance(value, (float, Decimal)):
        # repr keeps the shortest round-trip digits of a float
        decimal_value = Decimal(repr(value)) if isinstance(value, float) else value
        if not decimal_value.is_finite():
            raise InvalidInputError(
                message=compose_error_message(
                    cause="Money input must be a finite number.",
                    action="Pass a regular amount instead of NaN or infinity.",
                ),
                details={"value": str(value)},
            )
        if not decimal_value or decimal_value.adjusted() < -MINOR_DIGITS:
            # nothing survives truncation to minor units
            return "0"
        if decimal_value.adjusted() >= MAX_MAJOR_DIGITS:
            raise _too_large_input()
        return format(decimal_value, "f")

    raise InvalidInputError(
        message=compose_error_message(
            cause="Money input must be text or a number.",
            action="Pass the amount as text or as a number.",
        ),
        details={"type": type(value).__name__},
    )


def _split_decimal_portion(value: str) -> tuple[str, str]:
    separator_index = max(value.rfind(","), value.rfind("."))
    if separator_index == -1:
        return value, ""
    return value[:separator_index], value[separator_index + 1 :]


def parse_money_parts(value: MoneyInput) -> MoneyParts:
    """Extract sign, integer digits and fractional digits from money input.

    Raises:
        InvalidInputError: when the input is not finite, is empty after
            trimming or contains no digit.
    """

    raw = _normalize_money_input(value)
    if not raw:
        raise InvalidInputError(
            message=compose_error_message(
                cause="Money input cannot be empty.",
                action="Type an amount before submitting.",
            )
        )

    compact = _WHITESPACE.sub("", raw)
    sign = -1 if compact.startswith("-") else 1
    unsigned = _LEADING_SIGN.sub("", compact, count=1)
    digits_and_separators = _NOT_DIGIT_OR_SEPARATOR.sub("", unsigned)

    if _DIGIT.search(digits_and_separators) is None:
        raise InvalidInputError(
            message=compose_error_message(
                cause="Money input must contain at least one digit.",
                action="Type an amount such as 19.99 or 1 234,56.",
            ),
            details={"value": raw},
        )

    integer_raw, fractional_raw = _split_decimal_portion(digits_and_separators)
    integer_digits = _NOT_DIGIT.sub("", integer_raw).lstrip("0") or "0"
    if len(integer_digits) > MAX_MAJOR_DIGITS:
        raise _too_large_input()
    return MoneyParts(
        sign=sign,
        integer_digits=integer_digits,
        fractional_digits=_NOT_DIGIT.sub("", fractional_raw),
    )


def scale_to_minor_units(parts: MoneyParts) -> int:
    """Combine parsed parts into signed minor units, truncating extra digits."""

    major = int(parts.integer_digits)
    fraction_minor = int((parts.fractional_digits + "0" * MINOR_DIGITS)[:MINOR_DIGITS])
    return parts.sign * (major * MONEY_MINOR_FACTOR + fraction_minor)


def to_minor_units(value: MoneyInput) -> int:
    """Parse human-typed money text or a number into integer minor units."""

    return scale_to_minor_units(parse_money_parts(value))


def _too_large_minor() -> MinorIntegerError:
    return MinorIntegerError(
        message=compose_error_message(
            cause="Minor amount has too many digits.",
            action=f"Keep amounts under {MAX_MAJOR_DIGITS} integer digits.",
        ),
        details={"max_integer_digits": MAX_MAJOR_DIGITS},
    )


def ensure_minor_integer(value: object) -> int:
    """Return value as int when it is an integral minor-unit amount.

    Integral ``float`` and ``Decimal`` values are accepted and converted;
    booleans, fractions, NaN and infinities raise ``MinorIntegerError``.
    Amounts with more than MAX_MAJOR_DIGITS + 2 digits are rejected too.
    """

    if isinstance(value, bool):
        raise MinorIntegerError(details={"type": "bool"})
    if isinstance(value, int):
        if abs(value) >= _MINOR_LIMIT:
            raise _too_large_minor()
        return value
    if isinstance(value, (float, Decimal)):
        decimal_value = Decimal(repr(value)) if isinstance(value, float) else value
        if not decimal_value.is_finite():
            raise MinorIntegerError(
                message=compose_error_message(
                    cause="Minor amount must be a finite number.",
                    action="Pass the stored integer amount in minor units.",
                ),
                details={"value": str(value)},
            )
        max_adjusted = MAX_MAJOR_DIGITS + MINOR_DIGITS
        if decimal_value and decimal_value.adjusted() >= max_adjusted:
            raise _too_large_minor()
        if decimal_value != decimal_value.to_integral_value():
            raise MinorIntegerError(
                message=compose_error_message(
                    cause="Minor amount must be an integer value.",
                    action="Convert the amount with to_minor_units first.",
                ),
                details={"value": str(value)},
            )
        return int(decimal_value)
    raise MinorIntegerError(details={"type": type(value).__name__})


def minor_units_to_editable_string(
    amount_minor: int,
    *,
    separator: str = ".",
    pad_fraction: bool = True,
) -> str:
    """Render minor units as an editable decimal string like ``19.99``."""

    amount = ensure_minor_integer(amount_minor)
    sign = "-" if amount < 0 else ""
    major, fractional_minor = divmod(abs(amount), MONEY_MINOR_FACTOR)

    if not pad_fraction and fractional_minor == 0:
        return f"{sign}{major}"

    return f"{sign}{major}{separator}{fractional_minor:0{MINOR_DIGITS}d}"


def is_valid_money_input(value: MoneyInput) -> bool:
    """Return whether value parses into minor units, without raising."""

    try:
        to_minor_units(value)
    except Exception as exc:
        logger.debug(
            "money_input_rejected",
            extra={"error_type": type(exc).__name__, "reason": str(exc)},
        )
        return False
    return True
