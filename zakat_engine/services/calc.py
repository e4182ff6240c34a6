"""Zakat calculation engine.

Computes net worth and zakat due from an asset snapshot, a liability
snapshot and a set of policy options (nisab basis, stock treatment, madhab,
property intent, jewelry purposes). Pure: no I/O, inputs are never mutated.
"""
import logging
from dataclasses import dataclass, asdict

from zakat_engine.constants import (
    ZAKAT_RATE,
    AMANA_RATE,
    QUARTER_METHOD_FRACTION,
    NISAB_NEAR_RATIO,
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
)
from zakat_engine.data.madhabs import get_debt_rules, is_deductible
from zakat_engine.data.metals import NISAB_METALS, get_nisab_threshold

logger = logging.getLogger(__name__)

# Assets counted at full value in the base zakatable wealth. Metals, property
# and stocks each follow their own inclusion rule.
BASE_WEALTH_CATEGORIES = ('cash', 'bank_accounts', 'business_inventory', 'receivables')


@dataclass(frozen=True)
class CalculationOptions:
    """Policy selections for a single calculation."""
    nisab_basis: str      # silver, gold
    stock_treatment: str  # quarter, cash, amana
    madhab: str           # hanafi, maliki, shafii, hanbali
    property_intent: str  # rental, resale
    gold_purpose: str     # personal, savings
    silver_purpose: str   # personal, savings

    def to_dict(self) -> dict:
        return asdict(self)


def _amount(snapshot: dict, category: str) -> float:
    return snapshot.get(category) or 0.0


def calculate_nisab(net_worth: float, nisab_basis: str) -> dict:
    """Calculate the nisab threshold and how net worth compares to it.

    Args:
        net_worth: Net worth after deductible liabilities (may be negative)
        nisab_basis: "gold" or "silver"

    Returns:
        Dict with threshold, ratio (clamped 0-1 for display), status and
        the absolute difference between net worth and the threshold
    """
    threshold = get_nisab_threshold(nisab_basis)
    metal = NISAB_METALS[nisab_basis]

    if threshold > 0:
        raw_ratio = net_worth / threshold
        display_ratio = min(max(raw_ratio, 0), 1)
    else:
        raw_ratio = 0
        display_ratio = 0

    if raw_ratio < NISAB_NEAR_RATIO:
        status = 'below'
    elif raw_ratio < 1.0:
        status = 'near'
    else:
        status = 'above'

    return {
        'basis_used': nisab_basis,
        'grams': metal['nisab_grams'],
        'price_per_gram': metal['price_per_gram'],
        'threshold_used': round(threshold, 2),
        'gold_threshold': round(get_nisab_threshold('gold'), 2),
        'silver_threshold': round(get_nisab_threshold('silver'), 2),
        'ratio': round(display_ratio, 4),
        'status': status,
        'difference': round(abs(net_worth - threshold), 2),
    }


def calculate_zakatable_metal(value: float, purpose: str, rules: dict) -> float:
    """Zakatable value of gold or silver jewelry.

    Always the full value where the school holds jewelry zakatable;
    otherwise only when held as savings or for trade.
    """
    if rules['jewelry_always_zakatable'] or purpose == 'savings':
        return value
    return 0.0


def calculate_zakatable_property(value: float, intent: str) -> float:
    """Property held for resale is zakatable capital; rental property is not."""
    if intent == 'resale':
        return value
    return 0.0


def calculate_base_wealth(assets: dict, zakatable_gold: float, zakatable_silver: float) -> float:
    total = sum(_amount(assets, category) for category in BASE_WEALTH_CATEGORIES)
    return total + zakatable_gold + zakatable_silver


def calculate_deductible_liabilities(liabilities: dict, madhab: str) -> float:
    """Sum the liability categories the madhab allows to be deducted.

    Categories are deducted in full or not at all.
    """
    return sum(
        _amount(liabilities, category)
        for category in LIABILITY_CATEGORIES
        if is_deductible(madhab, category)
    )


def _quarter_stock_zakat(stocks: float, stock_gains: float) -> float:
    return stocks * QUARTER_METHOD_FRACTION * ZAKAT_RATE


def _cash_stock_zakat(stocks: float, stock_gains: float) -> float:
    return stocks * ZAKAT_RATE


def _amana_stock_zakat(stocks: float, stock_gains: float) -> float:
    # Losses never reduce zakat
    if stock_gains > 0:
        return stock_gains * AMANA_RATE
    return 0.0


STOCK_ZAKAT_METHODS = {
    'quarter': _quarter_stock_zakat,
    'cash': _cash_stock_zakat,
    'amana': _amana_stock_zakat,
}


def calculate_stock_zakat(stocks: float, stock_gains: float, stock_treatment: str) -> float:
    """Zakat contribution of stocks under the selected treatment.

    Methods:
        - quarter: 25% of the stock value at the base rate
        - cash: full stock value at the base rate
        - amana: the year's gains at the productive-capital rate (10%)
    """
    return STOCK_ZAKAT_METHODS[stock_treatment](stocks, stock_gains)


def calculate_total_assets(assets: dict) -> float:
    """Face value of every asset, ignoring zakatability rules.

    Stock gains are part of the stock value and are not added again.
    """
    return sum(
        _amount(assets, category)
        for category in ASSET_CATEGORIES
        if category != 'stock_gains'
    )


def calculate_total_liabilities(liabilities: dict) -> float:
    return sum(_amount(liabilities, category) for category in LIABILITY_CATEGORIES)


def compute(assets: dict, liabilities: dict, options: CalculationOptions) -> dict:
    """Calculate zakat for one asset/liability snapshot.

    Args:
        assets: Asset category -> amount. Missing categories count as zero.
        liabilities: Liability category -> amount. Missing categories count as zero.
        options: Policy selections

    Returns:
        Result with display totals, deductible liabilities, net worth,
        zakat due, stock zakat, nisab status and the zakatable breakdown
    """
    rules = get_debt_rules(options.madhab)

    zakatable_gold = calculate_zakatable_metal(_amount(assets, 'gold'), options.gold_purpose, rules)
    zakatable_silver = calculate_zakatable_metal(_amount(assets, 'silver'), options.silver_purpose, rules)
    zakatable_property = calculate_zakatable_property(
        _amount(assets, 'property_investment'), options.property_intent
    )
    base_wealth = calculate_base_wealth(assets, zakatable_gold, zakatable_silver)
    deductible = calculate_deductible_liabilities(liabilities, options.madhab)

    stocks = _amount(assets, 'stocks')
    other_investments = _amount(assets, 'other_investments')
    stock_zakat = calculate_stock_zakat(stocks, _amount(assets, 'stock_gains'), options.stock_treatment)

    net_worth = base_wealth + zakatable_property + other_investments + stocks - deductible
    nisab = calculate_nisab(net_worth, options.nisab_basis)
    meets_nisab = net_worth >= get_nisab_threshold(options.nisab_basis)

    if meets_nisab:
        base_zakat = (base_wealth + other_investments + zakatable_property - deductible) * ZAKAT_RATE
        zakat_due = max(0, base_zakat + stock_zakat)
    else:
        zakat_due = 0.0

    logger.debug(
        f"Computed zakat ({options.madhab}, {options.nisab_basis}, {options.stock_treatment}): "
        f"meets_nisab={meets_nisab}"
    )

    return {
        'total_assets': round(calculate_total_assets(assets), 2),
        'total_liabilities': round(calculate_total_liabilities(liabilities), 2),
        'deductible_liabilities': round(deductible, 2),
        'net_worth': round(net_worth, 2),
        'stock_zakat': round(stock_zakat, 2),
        'zakat_due': round(zakat_due, 2),
        'meets_nisab': meets_nisab,
        'zakatable': {
            'base_wealth': round(base_wealth, 2),
            'gold': round(zakatable_gold, 2),
            'silver': round(zakatable_silver, 2),
            'property': round(zakatable_property, 2),
            'other_investments': round(other_investments, 2),
            'stocks': round(stocks, 2),
        },
        'nisab': nisab,
        'debt_rule': {
            'madhab': options.madhab,
            **rules,
        },
        'options': options.to_dict(),
        'rates': {
            'zakat_rate': ZAKAT_RATE,
            'amana_rate': AMANA_RATE,
            'quarter_fraction': QUARTER_METHOD_FRACTION,
        },
    }
