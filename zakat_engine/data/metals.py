"""Nisab metals and their static prices."""
from zakat_engine.constants import (
    NISAB_GOLD_GRAMS,
    NISAB_SILVER_GRAMS,
    GOLD_PRICE_PER_GRAM,
    SILVER_PRICE_PER_GRAM,
)

# Metals that can define the nisab threshold
NISAB_METALS = {
    'gold': {
        'name': 'Gold',
        'symbol': 'Au',
        'nisab_grams': NISAB_GOLD_GRAMS,
        'price_per_gram': GOLD_PRICE_PER_GRAM,
    },
    'silver': {
        'name': 'Silver',
        'symbol': 'Ag',
        'nisab_grams': NISAB_SILVER_GRAMS,
        'price_per_gram': SILVER_PRICE_PER_GRAM,
    },
}


def get_nisab_threshold(basis: str) -> float:
    """Nisab threshold for a basis metal: nisab weight times price per gram."""
    metal = NISAB_METALS[basis]
    return metal['nisab_grams'] * metal['price_per_gram']


def get_nisab_options() -> list[dict]:
    """Get both nisab bases with their thresholds for UI dropdowns."""
    return [
        {
            'id': metal_id,
            'name': info['name'],
            'symbol': info['symbol'],
            'grams': info['nisab_grams'],
            'price_per_gram': info['price_per_gram'],
            'threshold': round(get_nisab_threshold(metal_id), 2),
        }
        for metal_id, info in NISAB_METALS.items()
    ]


def is_valid_nisab_basis(basis: str) -> bool:
    return basis in NISAB_METALS
