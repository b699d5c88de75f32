import click

from config.constants import CURRENCIES, GSTMode, TenureUnit, UnitSystem
from config.logging_config import setup_logging
from config.settings import (
    DEFAULT_FROM_CURRENCY, DEFAULT_GST_RATE, DEFAULT_TO_CURRENCY, EMI_CURRENCY, GST_CURRENCY,
    MAX_SCHEDULE_MONTHS,
)
from core.calculator import generate_emi_schedule
from core.runner import CalculationOutcome, run_bmi, run_currency, run_emi, run_gst, schedule_allowed
from utils.formatters import fmt_currency, fmt_number


def _check(outcome: CalculationOutcome) -> None:
    if not outcome.ok:
        raise click.ClickException("; ".join(outcome.errors.values()))


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default='WARNING', help='Logging level')
def cli(log_level):
    """A CLI for the finance calculator suite."""
    setup_logging(log_level)


@cli.command()
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--annual-rate', type=float, required=True, help='Annual interest rate (%)')
@click.option('--tenure', type=int, required=True, help='Loan tenure')
@click.option('--tenure-unit', type=click.Choice([u.value for u in TenureUnit]), default='months', help='Tenure unit')
@click.option('--schedule', is_flag=True, help='Also print the amortization schedule as CSV')
def emi(principal, annual_rate, tenure, tenure_unit, schedule):
    """Calculates the monthly EMI, total interest and total amount."""
    outcome = run_emi(principal, annual_rate, tenure, tenure_unit)
    _check(outcome)
    result = outcome.result
    click.echo(f"Monthly EMI: {fmt_currency(result.emi, EMI_CURRENCY)}")
    click.echo(f"Total interest: {fmt_currency(result.total_interest, EMI_CURRENCY)}")
    click.echo(f"Total amount: {fmt_currency(result.total_amount, EMI_CURRENCY)}")
    terms = outcome.query
    if schedule and not schedule_allowed(terms.tenure_months):
        click.echo(f"Schedule skipped: tenure exceeds {MAX_SCHEDULE_MONTHS} months", err=True)
    elif schedule:
        sch = generate_emi_schedule(terms.principal, terms.annual_rate, terms.tenure_months)
        click.echo(sch.to_csv(index=False))


@cli.command()
@click.option('--amount', type=float, required=True, help='Amount')
@click.option('--rate', type=float, default=DEFAULT_GST_RATE, show_default=True, help='GST rate (%)')
@click.option('--mode', type=click.Choice([m.value for m in GSTMode]), default='add', help='Add GST or extract it from an inclusive amount')
def gst(amount, rate, mode):
    """Calculates the GST component and final amount."""
    outcome = run_gst(amount, rate, mode)
    _check(outcome)
    result = outcome.result
    click.echo(f"Base amount: {fmt_currency(result.base_amount, GST_CURRENCY)}")
    click.echo(f"GST: {fmt_currency(result.gst_amount, GST_CURRENCY)}")
    click.echo(f"Final amount: {fmt_currency(result.final_amount, GST_CURRENCY)}")


@cli.command('convert')
@click.option('--amount', type=float, required=True, help='Amount to convert')
@click.option('--from', 'from_code', type=str, default=DEFAULT_FROM_CURRENCY, help='Source currency code')
@click.option('--to', 'to_code', type=str, default=DEFAULT_TO_CURRENCY, help='Target currency code')
def convert_command(amount, from_code, to_code):
    """Converts an amount between two currencies using static rates."""
    outcome = run_currency(amount, from_code.upper(), to_code.upper())
    _check(outcome)
    result = outcome.result
    click.echo(f"{fmt_currency(result.original_amount, result.from_code)} = "
               f"{fmt_currency(result.converted_amount, result.to_code)}")
    click.echo(f"Exchange rate: 1 {result.from_code} = {fmt_number(result.exchange_rate, 4)} {result.to_code}")


@cli.command()
@click.option('--weight', type=float, required=True, help='Weight (kg or lb)')
@click.option('--height', type=float, required=True, help='Height (cm or in)')
@click.option('--unit', type=click.Choice([u.value for u in UnitSystem]), default='metric', help='Measurement unit')
def bmi(weight, height, unit):
    """Calculates the Body Mass Index and its WHO category."""
    outcome = run_bmi(weight, height, unit)
    _check(outcome)
    result = outcome.result
    click.echo(f"BMI: {fmt_number(result.bmi, 1)}")
    click.echo(f"Category: {result.category.value}")


@cli.command()
def currencies():
    """Lists the supported currencies and their rates against USD."""
    for info in CURRENCIES.values():
        click.echo(f"{info.code}  {info.symbol:<4} {info.name:<20} {info.rate_to_usd:>10.4f}")


if __name__ == "__main__":
    cli()
