"""Amount parsing and formatting for Danish-style number text.

Input text uses "." as the thousands separator and "," as the decimal
separator ("1.234.567,50"). Parsing is total: anything that cannot be read
as an amount becomes 0.
"""
import math
import re

from zakat_engine.constants import MAX_AMOUNT
from zakat_engine.services.config import get_currency_symbol

_STRIP_PATTERN = re.compile(r'[^\d,\-]')
_NUMERIC_PREFIX = re.compile(r'-?\d*(?:\.\d+)?')
_THOUSANDS_PATTERN = re.compile(r'\B(?=(\d{3})+(?!\d))')
_SEPARATOR_SWAP = str.maketrans(',.', '.,')


def parse_amount(text) -> float:
    """Parse locale-formatted text into a non-negative amount.

    Dots are dropped as thousands separators, the first comma is the decimal
    separator and the leading numeric part is read. Empty, malformed or
    negative input yields 0.0, as does anything above MAX_AMOUNT.
    Amounts are rounded to minor units (2 decimals).
    """
    if text is None:
        return 0.0
    clean = _STRIP_PATTERN.sub('', str(text)).replace(',', '.', 1)
    match = _NUMERIC_PREFIX.match(clean)
    try:
        value = float(match.group(0))
    except ValueError:
        return 0.0
    if not math.isfinite(value) or not 0 < value <= MAX_AMOUNT:
        return 0.0
    return round(value, 2)


def format_input_value(text: str) -> str:
    """Format text as the user types: "1234567,5" -> "1.234.567,5".

    A trailing decimal separator and its digits are kept verbatim.
    """
    clean = _STRIP_PATTERN.sub('', text or '')
    parts = clean.split(',')
    integer_part = _THOUSANDS_PATTERN.sub('.', parts[0])
    if len(parts) > 1:
        return f"{integer_part},{parts[1]}"
    return integer_part


def format_amount(value: float) -> str:
    """Render an amount with 2 decimals: 17500 -> "17.500,00"."""
    return f"{value:,.2f}".translate(_SEPARATOR_SWAP)


def format_currency(value: float, symbol: str | None = None) -> str:
    """Render an amount as currency text: 17500 -> "17.500,00 kr."."""
    if symbol is None:
        symbol = get_currency_symbol()
    return f"{format_amount(value)} {symbol}"


def normalize_amount(value) -> float:
    """Normalize a raw JSON/CLI value into a non-negative amount.

    Negative or oversized numbers become 0 and the rest are rounded to minor
    units. Strings go through parse_amount; anything else (None, bools,
    lists) is 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            value = float(value)
        except OverflowError:
            return 0.0
        if not math.isfinite(value) or not 0 <= value <= MAX_AMOUNT:
            return 0.0
        return round(value, 2)
    if isinstance(value, str):
        return parse_amount(value)
    return 0.0


def normalize_snapshot(raw: dict | None, categories) -> dict:
    """Build a complete snapshot with every category present."""
    raw = raw or {}
    return {category: normalize_amount(raw.get(category)) for category in categories}
