"""Configuration service for display and default calculation settings."""
import logging
import os

from zakat_engine.constants import (
    NISAB_BASES,
    STOCK_TREATMENTS,
    MADHABS,
    PROPERTY_INTENTS,
    DEFAULT_NISAB_BASIS,
    DEFAULT_STOCK_TREATMENT,
    DEFAULT_MADHAB,
    DEFAULT_PROPERTY_INTENT,
    DEFAULT_JEWELRY_PURPOSE,
)


def get_currency_code() -> str:
    """Get the ISO 4217 code of the display currency.

    Controlled by ZAKAT_CURRENCY env var (default: DKK).
    """
    return os.environ.get('ZAKAT_CURRENCY', 'DKK').upper()


def get_currency_symbol() -> str:
    """Get the symbol appended to formatted amounts.

    Controlled by ZAKAT_CURRENCY_SYMBOL env var (default: kr.).
    """
    return os.environ.get('ZAKAT_CURRENCY_SYMBOL', 'kr.')


def get_log_level() -> int:
    """Get the package log level from LOG_LEVEL (default: INFO)."""
    level = logging.getLevelName(os.environ.get('LOG_LEVEL', 'INFO').upper())
    return level if isinstance(level, int) else logging.INFO


def _choice_from_env(name: str, choices: dict, default: str) -> str:
    value = os.environ.get(name, default).lower()
    return value if value in choices else default


def get_default_options() -> dict:
    """Get default calculation options for fields a caller leaves out.

    Controlled by ZAKAT_DEFAULT_NISAB_BASIS, ZAKAT_DEFAULT_STOCK_TREATMENT,
    ZAKAT_DEFAULT_MADHAB and ZAKAT_DEFAULT_PROPERTY_INTENT. Unknown values
    fall back to the built-in defaults.
    """
    return {
        'nisab_basis': _choice_from_env('ZAKAT_DEFAULT_NISAB_BASIS', NISAB_BASES, DEFAULT_NISAB_BASIS),
        'stock_treatment': _choice_from_env('ZAKAT_DEFAULT_STOCK_TREATMENT', STOCK_TREATMENTS, DEFAULT_STOCK_TREATMENT),
        'madhab': _choice_from_env('ZAKAT_DEFAULT_MADHAB', MADHABS, DEFAULT_MADHAB),
        'property_intent': _choice_from_env('ZAKAT_DEFAULT_PROPERTY_INTENT', PROPERTY_INTENTS, DEFAULT_PROPERTY_INTENT),
        'gold_purpose': DEFAULT_JEWELRY_PURPOSE,
        'silver_purpose': DEFAULT_JEWELRY_PURPOSE,
    }


def get_engine_config() -> dict:
    """Get complete configuration status."""
    return {
        'currency': get_currency_code(),
        'currency_symbol': get_currency_symbol(),
        'log_level': logging.getLevelName(get_log_level()),
        'default_options': get_default_options(),
    }
