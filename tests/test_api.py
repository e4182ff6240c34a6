"""Tests for the nisab, options and format endpoints."""
import pytest


def test_nisab_returns_200(client):
    """GET /api/v1/nisab should return status 200."""
    response = client.get('/api/v1/nisab')
    assert response.status_code == 200


def test_nisab_defaults_to_silver(client):
    """GET /api/v1/nisab without a basis uses the configured default."""
    data = client.get('/api/v1/nisab').get_json()

    assert data['basis'] == 'silver'
    assert data['threshold'] == 4286.52
    assert data['formatted'] == '4.286,52 kr.'
    assert data['currency'] == 'DKK'


def test_nisab_gold(client):
    data = client.get('/api/v1/nisab?basis=GOLD').get_json()

    assert data['basis'] == 'gold'
    assert data['threshold'] == 48114.0
    assert data['formatted'] == '48.114,00 kr.'


def test_nisab_lists_both_metals(client):
    data = client.get('/api/v1/nisab').get_json()
    metals = {m['id']: m for m in data['metals']}

    assert metals['gold']['grams'] == 87.48
    assert metals['silver']['grams'] == 612.36


def test_nisab_invalid_basis(client):
    """GET /api/v1/nisab with an unknown basis should return 400."""
    response = client.get('/api/v1/nisab?basis=platinum')
    assert response.status_code == 400
    assert 'platinum' in response.get_json()['error']


def test_options_returns_required_keys(client):
    """GET /api/v1/options should return every option group."""
    data = client.get('/api/v1/options').get_json()

    required_keys = ['asset_categories', 'liability_categories', 'nisab_bases', 'stock_treatments',
                     'madhabs', 'property_intents', 'jewelry_purposes', 'defaults', 'rates', 'currency']
    for key in required_keys:
        assert key in data, f"Missing required key: {key}"


def test_options_rates(client):
    data = client.get('/api/v1/options').get_json()
    assert data['rates'] == {'zakat_rate': 0.025, 'amana_rate': 0.10, 'quarter_fraction': 0.25}


def test_options_categories_are_labelled(client):
    data = client.get('/api/v1/options').get_json()
    ids = [c['id'] for c in data['asset_categories']]

    assert 'bank_accounts' in ids
    assert 'stock_gains' in ids
    assert all(c['label'] for c in data['asset_categories'])
    assert [c['id'] for c in data['liability_categories']] == ['debts', 'loans', 'other_liabilities']


def test_options_madhabs_carry_rules(client):
    data = client.get('/api/v1/options').get_json()
    maliki = next(m for m in data['madhabs'] if m['id'] == 'maliki')

    assert maliki['deduct_debts'] is False
    assert maliki['jewelry_always_zakatable'] is False


def test_options_defaults_follow_configuration(client, monkeypatch):
    monkeypatch.setenv('ZAKAT_DEFAULT_NISAB_BASIS', 'gold')
    data = client.get('/api/v1/options').get_json()
    assert data['defaults']['nisab_basis'] == 'gold'


@pytest.mark.parametrize('value, amount, display, currency', [
    ('1234567,5', 1234567.5, '1.234.567,5', '1.234.567,50 kr.'),
    ('700.000', 700000.0, '700.000', '700.000,00 kr.'),
    ('', 0.0, '', '0,00 kr.'),
    ('abc', 0.0, '', '0,00 kr.'),
])
def test_format_value(client, value, amount, display, currency):
    """POST /api/v1/format normalizes typed input."""
    response = client.post('/api/v1/format', json={'value': value})
    data = response.get_json()

    assert response.status_code == 200
    assert data['amount'] == amount
    assert data['display'] == display
    assert data['currency'] == currency


def test_format_rejects_non_string(client):
    response = client.post('/api/v1/format', json={'value': 1234})
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_format_rejects_non_object(client):
    response = client.post('/api/v1/format', json=['1234'])
    assert response.status_code == 400
