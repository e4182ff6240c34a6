"""Flask CLI commands for calculating zakat from the terminal."""
import json
import logging

import click
from flask.cli import with_appcontext

from zakat_engine.constants import (
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
    NISAB_BASES,
    STOCK_TREATMENTS,
    MADHABS,
    PROPERTY_INTENTS,
    JEWELRY_PURPOSES,
    DEFAULT_JEWELRY_PURPOSE,
)
from zakat_engine.data.metals import get_nisab_options
from zakat_engine.services.calc import CalculationOptions, compute
from zakat_engine.services.config import get_default_options
from zakat_engine.services.normalize import format_currency, normalize_snapshot, parse_amount

logger = logging.getLogger(__name__)


def _parse_pairs(categories: dict):
    """Build a click callback turning KEY=VALUE pairs into amounts."""
    def callback(ctx, param, values):
        amounts = {}
        for pair in values:
            key, sep, raw = pair.partition('=')
            key = key.strip()
            if not sep:
                raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'")
            if key not in categories:
                raise click.BadParameter(f"unknown category '{key}'. Choose from: {', '.join(categories)}")
            amounts[key] = parse_amount(raw)
        return normalize_snapshot(amounts, categories)
    return callback


def _default(field: str):
    return lambda: get_default_options()[field]


@click.command('calculate')
@click.option('--asset', 'assets', multiple=True, callback=_parse_pairs(ASSET_CATEGORIES),
              help='Asset amount as KEY=VALUE, Danish formatting (bank_accounts=700.000).')
@click.option('--liability', 'liabilities', multiple=True, callback=_parse_pairs(LIABILITY_CATEGORIES),
              help='Liability amount as KEY=VALUE (debts=1.500,50).')
@click.option('--nisab-basis', type=click.Choice(list(NISAB_BASES)), default=_default('nisab_basis'),
              show_default='configured')
@click.option('--stock-treatment', type=click.Choice(list(STOCK_TREATMENTS)), default=_default('stock_treatment'),
              show_default='configured')
@click.option('--madhab', type=click.Choice(list(MADHABS)), default=_default('madhab'),
              show_default='configured')
@click.option('--property-intent', type=click.Choice(list(PROPERTY_INTENTS)), default=_default('property_intent'),
              show_default='configured')
@click.option('--gold-purpose', type=click.Choice(list(JEWELRY_PURPOSES)), default=DEFAULT_JEWELRY_PURPOSE,
              show_default=True)
@click.option('--silver-purpose', type=click.Choice(list(JEWELRY_PURPOSES)), default=DEFAULT_JEWELRY_PURPOSE,
              show_default=True)
@click.option('--json', 'as_json', is_flag=True, help='Print the full result as JSON.')
@with_appcontext
def calculate_command(assets, liabilities, nisab_basis, stock_treatment, madhab,
                      property_intent, gold_purpose, silver_purpose, as_json):
    """Calculate zakat for the given assets and liabilities.

    Example: flask --app zakat_engine calculate --asset bank_accounts=700.000 --madhab hanafi
    """
    options = CalculationOptions(
        nisab_basis=nisab_basis,
        stock_treatment=stock_treatment,
        madhab=madhab,
        property_intent=property_intent,
        gold_purpose=gold_purpose,
        silver_purpose=silver_purpose,
    )
    result = compute(assets, liabilities, options)
    logger.debug(f"CLI calculation complete (meets_nisab={result['meets_nisab']})")

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    nisab = result['nisab']
    click.echo(f"Madhab:                 {MADHABS[madhab]}")
    click.echo(f"Total assets:           {format_currency(result['total_assets'])}")
    click.echo(f"Total liabilities:      {format_currency(result['total_liabilities'])}")
    click.echo(f"Deductible liabilities: {format_currency(result['deductible_liabilities'])}")
    click.echo(f"Net worth:              {format_currency(result['net_worth'])}")
    click.echo(f"Nisab ({nisab['basis_used']}):          {format_currency(nisab['threshold_used'])}")
    click.echo(f"Meets nisab:            {'yes' if result['meets_nisab'] else 'no'}")
    click.echo(f"Stock zakat:            {format_currency(result['stock_zakat'])}")
    click.echo(f"Zakat due:              {format_currency(result['zakat_due'])}")


@click.command('nisab')
@with_appcontext
def nisab_command():
    """Show the gold and silver nisab thresholds."""
    for metal in get_nisab_options():
        click.echo(
            f"{metal['name']}: {metal['grams']} g x {metal['price_per_gram']} "
            f"= {format_currency(metal['threshold'])}"
        )


def register_cli(app):
    """Register CLI commands with the Flask app."""
    app.cli.add_command(calculate_command)
    app.cli.add_command(nisab_command)
