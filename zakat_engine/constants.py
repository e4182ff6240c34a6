"""Shared constants for zakat calculation."""

# Zakat rate (2.5%)
ZAKAT_RATE = 0.025

# Amana method: stocks treated as productive capital, 10% of the year's gains
AMANA_RATE = 0.10

# Quarter method: 25% of the stock value is zakatable at the base rate
QUARTER_METHOD_FRACTION = 0.25

# Nisab thresholds (minimum wealth for zakat obligation)
NISAB_GOLD_GRAMS = 87.48
NISAB_SILVER_GRAMS = 612.36

# Approximate metal prices per gram (DKK), static
GOLD_PRICE_PER_GRAM = 550
SILVER_PRICE_PER_GRAM = 7

# Asset categories, in form order
ASSET_CATEGORIES = {
    'cash': 'Cash',
    'bank_accounts': 'Bank accounts',
    'gold': 'Gold',
    'silver': 'Silver',
    'stocks': 'Stocks and securities',
    'stock_gains': 'Stock gains this year',
    'business_inventory': 'Business inventory',
    'property_investment': 'Investment property',
    'other_investments': 'Other investments (crypto)',
    'receivables': 'Receivables',
}

# Liability categories
LIABILITY_CATEGORIES = {
    'debts': 'Personal debt',
    'loans': 'Bank loans and credit card debt',
    'other_liabilities': 'Other obligations',
}

# ============================================================
# Calculation options
# ============================================================

NISAB_BASES = {
    'silver': 'Silver (612.36 g), lower threshold',
    'gold': 'Gold (87.48 g)',
}
DEFAULT_NISAB_BASIS = 'silver'

STOCK_TREATMENTS = {
    'quarter': 'Quarter method (25% of value at 2.5%)',
    'cash': 'Cash method (full value at 2.5%)',
    'amana': 'Amana method (10% of the year\'s gains)',
}
DEFAULT_STOCK_TREATMENT = 'amana'

MADHABS = {
    'hanafi': 'Hanafi',
    'maliki': 'Maliki',
    'shafii': "Shafi'i",
    'hanbali': 'Hanbali',
}
DEFAULT_MADHAB = 'hanafi'

# Investment property intent
PROPERTY_INTENTS = {
    'resale': 'Held for resale (include market value)',
    'rental': 'Held for rental income (not part of capital)',
}
DEFAULT_PROPERTY_INTENT = 'rental'

# Purpose of gold/silver jewelry (ignored under the Hanafi school)
JEWELRY_PURPOSES = {
    'personal': 'Personal use',
    'savings': 'Savings or trade',
}
DEFAULT_JEWELRY_PURPOSE = 'personal'

# Nisab indicator status cut-off (ratio of net worth to threshold)
NISAB_NEAR_RATIO = 0.90

# Largest accepted amount; anything above is treated as malformed input
MAX_AMOUNT = 1e15
