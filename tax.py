"""
Progressive federal tax model with a flat per-state effective rate.
Produces the blended, capped rate applied to retirement withdrawals.
"""
import logging
from typing import Mapping, Sequence

from financial_data import (
    FEDERAL_TAX_BRACKETS_2025, STATE_EFFECTIVE_TAX_RATES,
    DEFAULT_STATE_TAX_RATE, MAX_TOTAL_TAX_RATE, TaxBracket
)

logger = logging.getLogger(__name__)


def calculate_tax(taxable_income: float,
                  tax_brackets: Sequence[TaxBracket] = FEDERAL_TAX_BRACKETS_2025) -> float:
    """
    Calculate tax using progressive brackets.

    Args:
        taxable_income: Income subject to tax
        tax_brackets: Ascending, contiguous brackets with inclusive min/max

    Returns:
        Total tax owed
    """
    if taxable_income <= 0:
        return 0.0

    tax = 0.0
    remaining_income = taxable_income

    for bracket in tax_brackets:
        income_in_bracket = min(remaining_income, bracket.width)
        if income_in_bracket <= 0:
            break

        tax += income_in_bracket * bracket.rate
        remaining_income -= income_in_bracket

        if remaining_income <= 0:
            break

    return tax


def federal_effective_rate(taxable_income: float,
                           tax_brackets: Sequence[TaxBracket] = FEDERAL_TAX_BRACKETS_2025) -> float:
    """
    Effective (blended) federal rate: total tax divided by taxable income.

    Returns 0 for zero or negative income.
    """
    if taxable_income <= 0:
        return 0.0

    return calculate_tax(taxable_income, tax_brackets) / taxable_income


def marginal_tax_rate(taxable_income: float,
                      tax_brackets: Sequence[TaxBracket] = FEDERAL_TAX_BRACKETS_2025) -> float:
    """Rate of the bracket the last dollar of income falls into"""
    if taxable_income <= 0 or not tax_brackets:
        return 0.0

    current_rate = 0.0
    for bracket in tax_brackets:
        if taxable_income >= bracket.min:
            current_rate = bracket.rate
        else:
            break

    return current_rate


def state_tax_rate(state: str,
                   state_rates: Mapping[str, float] = STATE_EFFECTIVE_TAX_RATES) -> float:
    """Flat effective rate for a retirement state, default rate when unknown"""
    if state not in state_rates:
        logger.debug("Unknown retirement state %r, using default rate %.2f%%",
                     state, DEFAULT_STATE_TAX_RATE * 100)
        return DEFAULT_STATE_TAX_RATE
    return state_rates[state]


def combined_tax_rate(federal_rate: float, state_rate: float,
                      cap: float = MAX_TOTAL_TAX_RATE) -> float:
    """Federal plus state rate, clamped to the cap"""
    return min(federal_rate + state_rate, cap)
