"""Pytest fixtures for zakat engine tests."""
import pytest

from zakat_engine import create_app
from zakat_engine.constants import ASSET_CATEGORIES, LIABILITY_CATEGORIES
from zakat_engine.services.calc import CalculationOptions


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration overrides so tests see built-in defaults."""
    for name in (
        'ZAKAT_CURRENCY',
        'ZAKAT_CURRENCY_SYMBOL',
        'ZAKAT_DEFAULT_NISAB_BASIS',
        'ZAKAT_DEFAULT_STOCK_TREATMENT',
        'ZAKAT_DEFAULT_MADHAB',
        'ZAKAT_DEFAULT_PROPERTY_INTENT',
        'LOG_LEVEL',
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app():
    """Create application for testing.

    Yields:
        Flask application configured for testing.
    """
    app = create_app({'TESTING': True})
    yield app


@pytest.fixture
def client(app):
    """Create test client.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making requests.
    """
    with app.test_client() as client:
        yield client


@pytest.fixture
def runner(app):
    """Create CLI runner for the Flask commands."""
    return app.test_cli_runner()


@pytest.fixture
def empty_assets():
    return {category: 0.0 for category in ASSET_CATEGORIES}


@pytest.fixture
def empty_liabilities():
    return {category: 0.0 for category in LIABILITY_CATEGORIES}


@pytest.fixture
def make_options():
    """Factory for calculation options with overridable fields.

    Defaults: silver nisab, cash stock treatment, hanafi, resale property,
    personal jewelry.
    """
    def _make(**overrides):
        fields = {
            'nisab_basis': 'silver',
            'stock_treatment': 'cash',
            'madhab': 'hanafi',
            'property_intent': 'resale',
            'gold_purpose': 'personal',
            'silver_purpose': 'personal',
        }
        fields.update(overrides)
        return CalculationOptions(**fields)
    return _make
