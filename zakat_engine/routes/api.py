"""API routes for zakat calculation."""
from flask import Blueprint, jsonify, request, current_app

from zakat_engine.constants import (
    ZAKAT_RATE,
    AMANA_RATE,
    QUARTER_METHOD_FRACTION,
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
    NISAB_BASES,
    STOCK_TREATMENTS,
    MADHABS,
    PROPERTY_INTENTS,
    JEWELRY_PURPOSES,
)
from zakat_engine.data.madhabs import get_supported_madhabs
from zakat_engine.data.metals import get_nisab_options, get_nisab_threshold, is_valid_nisab_basis
from zakat_engine.services.calc import CalculationOptions, compute
from zakat_engine.services.config import get_currency_code, get_default_options
from zakat_engine.services.normalize import (
    format_currency,
    format_input_value,
    normalize_snapshot,
    parse_amount,
)

api_bp = Blueprint('api', __name__)

# Option field -> allowed values
OPTION_CHOICES = {
    'nisab_basis': NISAB_BASES,
    'stock_treatment': STOCK_TREATMENTS,
    'madhab': MADHABS,
    'property_intent': PROPERTY_INTENTS,
    'gold_purpose': JEWELRY_PURPOSES,
    'silver_purpose': JEWELRY_PURPOSES,
}

MONETARY_FIELDS = (
    'total_assets',
    'total_liabilities',
    'deductible_liabilities',
    'net_worth',
    'stock_zakat',
    'zakat_due',
)


def _labelled(choices: dict) -> list[dict]:
    return [{'id': key, 'label': label} for key, label in choices.items()]


def _parse_options(body: dict) -> tuple[CalculationOptions | None, str | None]:
    """Build calculation options from a request body, defaulting missing fields."""
    defaults = get_default_options()
    values = {}
    for field, choices in OPTION_CHOICES.items():
        value = body.get(field)
        if value is None:
            values[field] = defaults[field]
            continue
        value = str(value).lower()
        if value not in choices:
            return None, f"Invalid {field}: {value}. Must be one of: {', '.join(choices)}"
        values[field] = value
    return CalculationOptions(**values), None


def _parse_snapshot(body: dict, key: str, categories: dict) -> tuple[dict | None, str | None]:
    raw = body.get(key)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return None, f"{key} must be an object"
    unknown = sorted(set(raw) - set(categories))
    if unknown:
        return None, f"Unknown {key} categories: {', '.join(unknown)}"
    return normalize_snapshot(raw, categories), None


@api_bp.route('/calculate', methods=['POST'])
def calculate():
    """Calculate zakat from submitted assets and liabilities.

    Request body:
    {
        "assets": {"bank_accounts": "700.000", "gold": 50000, ...},
        "liabilities": {"debts": "1.500,50", ...},
        "nisab_basis": "silver",
        "stock_treatment": "amana",
        "madhab": "hanafi",
        "property_intent": "rental",
        "gold_purpose": "personal",
        "silver_purpose": "personal"
    }

    Amounts may be numbers or Danish-formatted strings. Missing categories
    count as zero and missing options take the configured defaults.
    """
    body = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    assets, error = _parse_snapshot(body, 'assets', ASSET_CATEGORIES)
    if error:
        current_app.logger.warning(f"Rejected calculation: {error}")
        return jsonify({'error': error}), 400

    liabilities, error = _parse_snapshot(body, 'liabilities', LIABILITY_CATEGORIES)
    if error:
        current_app.logger.warning(f"Rejected calculation: {error}")
        return jsonify({'error': error}), 400

    options, error = _parse_options(body)
    if error:
        current_app.logger.warning(f"Rejected calculation: {error}")
        return jsonify({'error': error}), 400

    result = compute(assets, liabilities, options)
    current_app.logger.info(
        f"Calculated zakat: madhab={options.madhab}, nisab={options.nisab_basis}, "
        f"stocks={options.stock_treatment}, meets_nisab={result['meets_nisab']}"
    )

    result['currency'] = get_currency_code()
    result['formatted'] = {field: format_currency(result[field]) for field in MONETARY_FIELDS}
    result['formatted']['nisab_threshold'] = format_currency(result['nisab']['threshold_used'])
    return jsonify(result)


@api_bp.route('/nisab')
def nisab():
    """Return nisab thresholds.

    Query Parameters:
        basis: gold or silver (default: configured default basis)
    """
    basis = request.args.get('basis', get_default_options()['nisab_basis']).lower()
    if not is_valid_nisab_basis(basis):
        return jsonify({'error': f'Invalid nisab basis: {basis}'}), 400

    threshold = get_nisab_threshold(basis)
    return jsonify({
        'basis': basis,
        'threshold': round(threshold, 2),
        'formatted': format_currency(threshold),
        'currency': get_currency_code(),
        'metals': get_nisab_options(),
    })


@api_bp.route('/options')
def options():
    """Return every calculation option with labels, defaults and madhab rules."""
    return jsonify({
        'asset_categories': _labelled(ASSET_CATEGORIES),
        'liability_categories': _labelled(LIABILITY_CATEGORIES),
        'nisab_bases': _labelled(NISAB_BASES),
        'stock_treatments': _labelled(STOCK_TREATMENTS),
        'madhabs': get_supported_madhabs(),
        'property_intents': _labelled(PROPERTY_INTENTS),
        'jewelry_purposes': _labelled(JEWELRY_PURPOSES),
        'defaults': get_default_options(),
        'rates': {
            'zakat_rate': ZAKAT_RATE,
            'amana_rate': AMANA_RATE,
            'quarter_fraction': QUARTER_METHOD_FRACTION,
        },
        'currency': get_currency_code(),
    })


@api_bp.route('/format', methods=['POST'])
def format_value():
    """Normalize and format a raw amount as typed by the user.

    Request body: {"value": "1234567,5"}
    """
    body = request.get_json(silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    value = body.get('value', '')
    if not isinstance(value, str):
        return jsonify({'error': 'value must be a string'}), 400

    amount = parse_amount(value)
    return jsonify({
        'amount': amount,
        'display': format_input_value(value),
        'currency': format_currency(amount),
    })
