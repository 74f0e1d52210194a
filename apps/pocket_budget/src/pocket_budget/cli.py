"""CLI bootstrap for pocket-budget money helpers."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer

from pocket_budget.core.settings import get_settings
from pocket_budget.domain.errors import DomainError
from pocket_budget.domain.money import (
    is_valid_money_input,
    minor_units_to_editable_string,
    to_minor_units,
)
from pocket_budget.domain.money_helpers import create_bound_money_helpers

app = typer.Typer(help="Parse and format money amounts stored as minor units.")
VALUE_ARGUMENT = typer.Argument(..., help="Typed amount, e.g. '1 234,56'.")
AMOUNT_MINOR_ARGUMENT = typer.Argument(..., help="Stored amount in minor units.")
SEPARATOR_OPTION = typer.Option(None, help="Decimal separator for the output.")
PAD_FRACTION_OPTION = typer.Option(True, help="Keep ',00' on whole amounts.")
LOCALE_OPTION = typer.Option(None, help="Locale such as ru-RU or en-US.")
CURRENCY_OPTION = typer.Option(None, help="ISO 4217 currency code.")
STYLE_OPTION = typer.Option(None, help="currency, decimal or percent.")
SIGN_DISPLAY_OPTION = typer.Option(
    None, help="auto, always, except_zero, negative or never."
)
CURRENCY_DISPLAY_OPTION = typer.Option(None, help="symbol, code or name.")
MIN_FRACTION_OPTION = typer.Option(None, min=0, help="Minimum fraction digits.")
MAX_FRACTION_OPTION = typer.Option(None, min=0, help="Maximum fraction digits.")


def _fail(exc: DomainError) -> NoReturn:
    typer.echo(exc.message, err=True)
    raise typer.Exit(code=1)


@app.callback()
def configure() -> None:
    """Configure logging from settings before running a command."""
    logging.basicConfig(level=get_settings().log_level.upper())


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("pocket-budget is ready")


@app.command("to-minor")
def to_minor(value: str = VALUE_ARGUMENT) -> None:
    """Print the amount in integer minor units."""
    try:
        typer.echo(str(to_minor_units(value)))
    except DomainError as exc:
        _fail(exc)


@app.command("edit")
def edit(
    amount_minor: int = AMOUNT_MINOR_ARGUMENT,
    separator: str | None = SEPARATOR_OPTION,
    pad_fraction: bool = PAD_FRACTION_OPTION,
) -> None:
    """Print the amount as an editable decimal string."""
    settings = get_settings()
    typer.echo(
        minor_units_to_editable_string(
            amount_minor,
            separator=separator or settings.money_decimal_separator,
            pad_fraction=pad_fraction,
        )
    )


@app.command("format")
def format_(
    amount_minor: int = AMOUNT_MINOR_ARGUMENT,
    locale: str | None = LOCALE_OPTION,
    currency: str | None = CURRENCY_OPTION,
    style: str | None = STYLE_OPTION,
    sign_display: str | None = SIGN_DISPLAY_OPTION,
    currency_display: str | None = CURRENCY_DISPLAY_OPTION,
    minimum_fraction_digits: int | None = MIN_FRACTION_OPTION,
    maximum_fraction_digits: int | None = MAX_FRACTION_OPTION,
) -> None:
    """Print the amount formatted for the configured locale and currency."""
    override = {
        key: value
        for key, value in {
            "locale": locale,
            "currency": currency,
            "style": style,
            "sign_display": sign_display,
            "currency_display": currency_display,
            "minimum_fraction_digits": minimum_fraction_digits,
            "maximum_fraction_digits": maximum_fraction_digits,
        }.items()
        if value is not None
    }
    try:
        money = create_bound_money_helpers(get_settings().format_defaults())
        typer.echo(money.format_localized_money(amount_minor, override))
    except DomainError as exc:
        _fail(exc)


@app.command("validate")
def validate(value: str = VALUE_ARGUMENT) -> None:
    """Print whether the amount parses; exit code 1 when it does not."""
    if is_valid_money_input(value):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=1)


def main() -> None:
    """Run the pocket-budget CLI application."""
    app()


if __name__ == "__main__":
    main()
