"""Debt and jewelry rules of the four Sunni schools (madhabs).

Each school maps to a debt rule set: which liability categories are deducted
from zakatable wealth, and whether personal gold/silver jewelry is zakatable
regardless of its purpose.
"""
from zakat_engine.constants import MADHABS

MADHAB_RULES = {
    'hanafi': {
        'deduct_debts': True,
        'deduct_loans': True,
        'deduct_other_liabilities': True,
        'jewelry_always_zakatable': True,
        'description': 'All debts are deducted. Gold and silver jewelry is always zakatable.',
    },
    'maliki': {
        'deduct_debts': False,
        'deduct_loans': False,
        'deduct_other_liabilities': False,
        'jewelry_always_zakatable': False,
        'description': 'Debts are not deducted. Jewelry for personal use is exempt.',
    },
    'shafii': {
        'deduct_debts': True,
        'deduct_loans': True,
        'deduct_other_liabilities': True,
        'jewelry_always_zakatable': False,
        'description': 'Only short-term (current) debts are deducted. Jewelry for personal use is exempt.',
    },
    'hanbali': {
        'deduct_debts': True,
        'deduct_loans': True,
        'deduct_other_liabilities': True,
        'jewelry_always_zakatable': False,
        'description': 'All debts are deducted. Jewelry for personal use is exempt.',
    },
}

# Liability category -> rule flag that controls its deduction
DEDUCTION_FLAGS = {
    'debts': 'deduct_debts',
    'loans': 'deduct_loans',
    'other_liabilities': 'deduct_other_liabilities',
}


def get_debt_rules(madhab: str) -> dict:
    """Get the debt rule set for a madhab.

    Raises:
        KeyError: If the madhab is not in the rule table.
    """
    return MADHAB_RULES[madhab]


def is_deductible(madhab: str, liability_category: str) -> bool:
    """Check whether a liability category is deducted under a madhab."""
    return get_debt_rules(madhab)[DEDUCTION_FLAGS[liability_category]]


def get_supported_madhabs() -> list[dict]:
    """Get list of madhabs with their rules for UI dropdowns."""
    return [
        {
            'id': madhab_id,
            'name': MADHABS[madhab_id],
            **rules,
        }
        for madhab_id, rules in MADHAB_RULES.items()
    ]


def is_valid_madhab(madhab: str) -> bool:
    return madhab in MADHAB_RULES
