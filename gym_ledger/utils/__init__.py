"""
Utility functions for the gym ledger engine
"""

from .date_utils import (
    add_days,
    add_months,
    days_between,
    days_in_month,
    parse_salary_month,
    salary_period_label,
    today,
)

from .formatters import (
    CurrencyFormatter,
    amount_in_words,
    to_decimal,
    number_to_words,
)

__all__ = [
    "add_days",
    "add_months",
    "days_between",
    "days_in_month",
    "parse_salary_month",
    "salary_period_label",
    "today",
    "CurrencyFormatter",
    "amount_in_words",
    "to_decimal",
    "number_to_words",
]
