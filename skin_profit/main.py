"""Main entry point for the skin resale profit calculator"""

import json
import sys
from typing import Optional

import click

from skin_profit.core.config import settings
from skin_profit.core.constants import PANEL_WIDTH
from skin_profit.core.logger import configure_logging, get_logger
from skin_profit.domain.currency import REFERENCE_CURRENCY
from skin_profit.domain.models import CalculationOutcome, Currency, ProfitReport
from skin_profit.domain.rules import SELLER_FEE_PERCENT
from skin_profit.services.calculator import CalculatorSession

logger = get_logger(__name__)

CURRENCY_CHOICE = click.Choice([c.value for c in Currency], case_sensitive=False)


def _render_report(report: ProfitReport) -> None:
    """Print the profit details panel, green for a gain and red for a loss."""
    color = "green" if report.is_gain else "red"
    code = report.currency.value

    click.echo("=" * PANEL_WIDTH)
    click.secho("Profit Details", fg=color, bold=True)
    click.echo("=" * PANEL_WIDTH)

    rows = [
        ("Buy price", f"{REFERENCE_CURRENCY.value} {report.source_price_display}"),
        ("Sell price", f"{code} {report.target_price_local}"),
        ("Proceeds (before fee)", f"{code} {report.proceeds_before_fee_local}"),
        ("Proceeds (after fee)", f"{code} {report.proceeds_after_fee_local}"),
    ]
    for label, value in rows:
        click.echo(f"  {label + ':':<24}{value}")

    click.secho(f"  {'Profit:':<24}{code} {report.profit_local_display}", fg=color)
    click.secho(f"  {'Profit percentage:':<24}{report.percentage_display}", fg=color)
    click.echo("=" * PANEL_WIDTH)


def _echo_error(outcome: CalculationOutcome) -> None:
    click.secho(f"Error: {outcome.error}", fg="red", err=True)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Override the configured log format",
)
def cli(log_level: Optional[str], log_format: Optional[str]):
    """Skin resale profit calculator (buy in USD, sell with a 13% fee)"""
    configure_logging(
        log_level=log_level.upper() if log_level else None, log_format=log_format
    )


@cli.command()
@click.option("--source", "-s", required=True, help="Buy price in USD")
@click.option(
    "--target", "-t", required=True, help="Sell price in the selected currency"
)
@click.option(
    "--currency",
    "-c",
    type=CURRENCY_CHOICE,
    default=None,
    help=f"Sell-side currency (default: {settings.default_currency.value})",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def calc(source: str, target: str, currency: Optional[str], as_json: bool):
    """Calculate profit for a single item

    Examples:
        python -m skin_profit.main calc -s 10.00 -t 500 -c UAH
        python -m skin_profit.main calc -s 20 -t 20 -c USD --json
    """
    session = CalculatorSession.from_settings(settings)
    if currency:
        session.set_currency(currency)
    session.set_source_price(source)
    session.set_target_price(target)

    outcome = session.calculate()
    if not outcome.ok:
        _echo_error(outcome)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(outcome.report.to_display_dict(), indent=2))
    else:
        _render_report(outcome.report)


@cli.command()
@click.option(
    "--currency", "-c", type=CURRENCY_CHOICE, default=None, help="Initial currency"
)
def interactive(currency: Optional[str]):
    """Prompt for prices repeatedly; an empty buy price quits"""
    session = CalculatorSession.from_settings(settings)
    if currency:
        session.set_currency(currency)

    click.echo(f"Seller fee: {SELLER_FEE_PERCENT}% | Leave the buy price empty to quit")

    calculations = 0
    while True:
        code = click.prompt(
            "Currency", default=session.currency.value, type=CURRENCY_CHOICE
        )
        session.set_currency(code)

        source = click.prompt("Buy price (USD)", default="", show_default=False)
        if not source.strip():
            break
        target = click.prompt(
            f"Sell price ({session.currency.value})", default="", show_default=False
        )

        session.set_source_price(source)
        session.set_target_price(target)
        outcome = session.calculate()
        calculations += 1

        if outcome.ok:
            _render_report(outcome.report)
        else:
            _echo_error(outcome)

    logger.info("interactive_finished", calculations=calculations)
    if session.last_report is not None:
        report = session.last_report
        click.echo(
            f"Last result: {report.currency.value} {report.profit_local_display} "
            f"({report.percentage_display}, {report.classification})"
        )


@cli.command()
def rates():
    """Show the configured units-per-USD rate table"""
    click.echo(f"Rates per 1 {REFERENCE_CURRENCY.value}:")
    for currency, rate in settings.rate_table().items():
        marker = " *" if currency == settings.default_currency else ""
        click.echo(f"  {currency.value}: {rate}{marker}")


@cli.command()
def test_config():
    """Test configuration loading"""
    click.echo("Configuration Test")
    click.echo(f"  Default currency: {settings.default_currency.value}")
    click.echo(f"  Seller fee: {SELLER_FEE_PERCENT}%")
    click.echo(
        "  Rates: "
        + ", ".join(f"{c.value}={r}" for c, r in settings.rate_table().items())
    )
    click.echo(f"  Log Level: {settings.log_level}")
    click.echo(f"  Log Format: {settings.log_format}")
    click.echo(f"  Log Dir: {settings.log_dir or '-'}")


if __name__ == "__main__":
    cli()
