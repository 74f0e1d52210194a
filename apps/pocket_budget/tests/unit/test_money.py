from decimal import Decimal

import pytest

from pocket_budget.domain.errors import InvalidInputError, MinorIntegerError
from pocket_budget.domain.money import (
    MAX_MAJOR_DIGITS,
    MONEY_MINOR_FACTOR,
    MoneyParts,
    ensure_minor_integer,
    is_valid_money_input,
    minor_units_to_editable_string,
    parse_money_parts,
    to_minor_units,
)


def test_to_minor_units_parses_decimal_separators_and_trims_whitespace() -> None:
    assert to_minor_units("19,99") == 1999
    assert to_minor_units(" 19.99 ") == 1999
    assert to_minor_units("\u00a019.99\u00a0") == 1999


def test_to_minor_units_treats_rightmost_separator_as_decimal_point() -> None:
    assert to_minor_units("1 234,56") == 123456
    assert to_minor_units("1,234.56") == 123456
    assert to_minor_units("1.234.567,89") == 123456789
    assert to_minor_units("1\u202f234,56") == 123456
    assert to_minor_units("1'234.56") == 123456


def test_to_minor_units_reads_single_separator_as_decimal_point() -> None:
    assert to_minor_units("1.234") == 123
    assert to_minor_units("1,5") == 150


def test_to_minor_units_handles_negative_and_partial_values() -> None:
    assert to_minor_units("-0.01") == -1
    assert to_minor_units("-.5") == -50
    assert to_minor_units("+5") == 500
    assert to_minor_units("5.") == 500
    assert to_minor_units("12") == 1200


def test_to_minor_units_truncates_extra_fraction_digits() -> None:
    assert to_minor_units("1.999") == 199
    assert to_minor_units("-1.999") == -199
    assert to_minor_units("0.0099") == 0


def test_to_minor_units_discards_currency_symbols_and_letters() -> None:
    assert to_minor_units("R$ 20,50") == 2050
    assert to_minor_units("1 234,56 ₽") == 123456
    assert to_minor_units("$1,234.56") == 123456
    assert to_minor_units("-$19.99") == -1999


def test_to_minor_units_accepts_numbers() -> None:
    assert to_minor_units(12.34) == 1234
    assert to_minor_units(12) == 1200
    assert to_minor_units(-0.5) == -50
    assert to_minor_units(0.1 + 0.2) == 30
    assert to_minor_units(1e21) == 10**23
    assert to_minor_units(Decimal("19.999")) == 1999


def test_to_minor_units_keeps_large_magnitudes_exact() -> None:
    assert to_minor_units("123456789012345678901234567890.12") == (
        12345678901234567890123456789012
    )


@pytest.mark.parametrize(
    "value",
    [
        Decimal("1E+999999999"),
        "9" * (MAX_MAJOR_DIGITS + 1),
        "1 " + "0" * 5000 + ",50",
        10**MAX_MAJOR_DIGITS,
    ],
)
def test_to_minor_units_rejects_amounts_beyond_digit_ceiling(value: object) -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        to_minor_units(value)  # type: ignore[arg-type]

    assert exc_info.value.details == {"max_integer_digits": MAX_MAJOR_DIGITS}


def test_to_minor_units_accepts_amounts_at_digit_ceiling() -> None:
    widest = "9" * MAX_MAJOR_DIGITS

    assert to_minor_units(widest) == int(widest) * MONEY_MINOR_FACTOR
    assert to_minor_units("0" * 5000 + "1.5") == 150
    assert to_minor_units(Decimal("1E-999999999")) == 0
    assert to_minor_units(Decimal("0E+999999999")) == 0
    assert to_minor_units(Decimal("-1E-3")) == 0


@pytest.mark.parametrize(
    "value",
    ["", "   ", "abc", "-", "-,", "R$", float("nan"), float("inf"), Decimal("NaN")],
)
def test_to_minor_units_rejects_unreadable_input(value: object) -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        to_minor_units(value)  # type: ignore[arg-type]

    assert exc_info.value.code == "INVALID_MONEY_INPUT"
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("value", [True, None, ["1"]])
def test_to_minor_units_rejects_unsupported_types(value: object) -> None:
    with pytest.raises(InvalidInputError):
        to_minor_units(value)  # type: ignore[arg-type]


def test_parse_money_parts_exposes_sign_and_digit_runs() -> None:
    assert parse_money_parts("-1,234.5") == MoneyParts(
        sign=-1, integer_digits="1234", fractional_digits="5"
    )
    assert parse_money_parts(".75") == MoneyParts(
        sign=1, integer_digits="0", fractional_digits="75"
    )


def test_minor_units_to_editable_string_uses_default_separator() -> None:
    assert minor_units_to_editable_string(1999) == "19.99"
    assert minor_units_to_editable_string(-1) == "-0.01"
    assert minor_units_to_editable_string(0) == "0.00"


def test_minor_units_to_editable_string_supports_separator_and_padding() -> None:
    assert minor_units_to_editable_string(500, separator=",") == "5,00"
    assert minor_units_to_editable_string(500, pad_fraction=False) == "5"
    assert minor_units_to_editable_string(-500, pad_fraction=False) == "-5"
    assert minor_units_to_editable_string(150, pad_fraction=False) == "1.50"


def test_minor_units_to_editable_string_accepts_integral_numbers() -> None:
    assert minor_units_to_editable_string(MONEY_MINOR_FACTOR) == "1.00"
    assert minor_units_to_editable_string(250.0) == "2.50"  # type: ignore[arg-type]
    assert minor_units_to_editable_string(Decimal(200)) == "2.00"  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [1.5, float("nan"), float("-inf"), "100", True])
def test_minor_units_to_editable_string_rejects_non_integers(value: object) -> None:
    with pytest.raises(MinorIntegerError) as exc_info:
        minor_units_to_editable_string(value)  # type: ignore[arg-type]

    assert exc_info.value.code == "INVALID_MINOR_AMOUNT"


def test_ensure_minor_integer_converts_integral_values() -> None:
    assert ensure_minor_integer(7) == 7
    assert ensure_minor_integer(7.0) == 7
    assert ensure_minor_integer(Decimal("1E+2")) == 100


@pytest.mark.parametrize(
    "value",
    [Decimal("1E+999999999"), Decimal("-1E+1002"), 10 ** (MAX_MAJOR_DIGITS + 2)],
)
def test_ensure_minor_integer_rejects_amounts_beyond_digit_ceiling(
    value: object,
) -> None:
    with pytest.raises(MinorIntegerError) as exc_info:
        ensure_minor_integer(value)

    assert exc_info.value.details == {"max_integer_digits": MAX_MAJOR_DIGITS}
    assert ensure_minor_integer(10 ** (MAX_MAJOR_DIGITS + 2) - 1) > 0


@pytest.mark.parametrize(
    "amount_minor",
    [0, 1, -1, 5, 99, 100, 101, 1999, -1999, 123456789, 10**30 + 7, -(10**25)],
)
def test_editable_string_round_trips_through_parser(amount_minor: int) -> None:
    assert to_minor_units(minor_units_to_editable_string(amount_minor)) == amount_minor


def test_is_valid_money_input_reflects_parser_readiness() -> None:
    assert is_valid_money_input("19,99") is True
    assert is_valid_money_input(12.34) is True
    assert is_valid_money_input("abc") is False
    assert is_valid_money_input("") is False
    assert is_valid_money_input(float("nan")) is False
    assert is_valid_money_input(None) is False  # type: ignore[arg-type]
