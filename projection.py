"""
Deterministic retirement projection using a fixed growth rate (no randomness).
Compounds current savings and monthly contributions to retirement, applies the
4% rule and a capped federal + state tax rate, and solves the inverse what-if.
"""
import logging
from dataclasses import dataclass, replace
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from financial_data import (
    FINANCIAL_ASSUMPTIONS, FEDERAL_TAX_BRACKETS_2025, STATE_EFFECTIVE_TAX_RATES,
    WHAT_IF_ESTIMATED_TAX_RATE, FinancialAssumptions, TaxBracket
)
from tax import federal_effective_rate, state_tax_rate, combined_tax_rate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserInputs:
    """Snapshot of the answers collected by the onboarding wizard"""
    current_age: int
    retirement_age: int
    monthly_take_home: float
    monthly_expenses: float
    monthly_investments: float
    current_savings: float
    high_interest_debt: bool
    retirement_state: str


@dataclass(frozen=True)
class FinancialProjection:
    """Results from a single projection"""
    years_to_retirement: int
    future_value_current_savings: float
    future_value_contributions: float
    total_retirement_balance: float
    annual_withdrawal_before_tax: float
    monthly_withdrawal_before_tax: float
    annual_withdrawal_after_tax: float
    monthly_withdrawal_after_tax: float
    current_savings_rate: float
    total_tax_rate: float
    federal_tax_rate: float
    state_tax_rate: float


@dataclass(frozen=True)
class WhatIfResult:
    """Contribution needed on top of current investments to hit a target income"""
    required_additional_monthly_investment: float
    required_total_balance: float


@dataclass(frozen=True)
class InvestmentBoost:
    """Effect of investing an extra amount every month"""
    additional_monthly_investment: float
    additional_monthly_income: float
    enhanced_projection: FinancialProjection


def future_value_lump_sum(present_value: float, annual_rate: float, years: int) -> float:
    """Annually compounded growth of a single balance"""
    return present_value * (1 + annual_rate) ** years


def annuity_due_factor(monthly_rate: float, num_payments: int) -> float:
    """
    Future value of 1 paid at the start of each month for num_payments months.

    Returns 0 when there are no payments.
    """
    if num_payments <= 0:
        return 0.0
    return (((1 + monthly_rate) ** num_payments - 1) / monthly_rate) * (1 + monthly_rate)


def future_value_contributions(monthly_payment: float, annual_rate: float, years: int) -> float:
    """Monthly compounded, annuity-due value of a recurring contribution"""
    num_payments = years * 12
    if monthly_payment <= 0 or num_payments <= 0:
        return 0.0
    return monthly_payment * annuity_due_factor(annual_rate / 12, num_payments)


def project_retirement(inputs: UserInputs,
                       assumptions: FinancialAssumptions = FINANCIAL_ASSUMPTIONS,
                       state_rates: Mapping[str, float] = STATE_EFFECTIVE_TAX_RATES,
                       tax_brackets: Sequence[TaxBracket] = FEDERAL_TAX_BRACKETS_2025) -> FinancialProjection:
    """
    Project the balance at retirement and the sustainable after-tax income.

    Never raises for numeric input: a zero horizon leaves savings ungrown and a
    zero take-home pay gives a zero savings rate.
    """
    years_to_retirement = max(0, inputs.retirement_age - inputs.current_age)

    fv_savings = future_value_lump_sum(inputs.current_savings, assumptions.annual_return,
                                       years_to_retirement)
    fv_contributions = future_value_contributions(inputs.monthly_investments,
                                                  assumptions.annual_return, years_to_retirement)
    total_balance = fv_savings + fv_contributions

    annual_before_tax = total_balance * assumptions.withdrawal_rate
    monthly_before_tax = annual_before_tax / 12

    federal_rate = federal_effective_rate(annual_before_tax, tax_brackets)
    state_rate = state_tax_rate(inputs.retirement_state, state_rates)
    total_rate = combined_tax_rate(federal_rate, state_rate)

    annual_after_tax = annual_before_tax * (1 - total_rate)

    annual_take_home = inputs.monthly_take_home * 12
    savings_rate = (inputs.monthly_investments * 12) / annual_take_home if annual_take_home > 0 else 0.0

    logger.debug("Projected %d years: balance=%.2f, federal=%.4f, state=%.4f",
                 years_to_retirement, total_balance, federal_rate, state_rate)

    return FinancialProjection(
        years_to_retirement=years_to_retirement,
        future_value_current_savings=fv_savings,
        future_value_contributions=fv_contributions,
        total_retirement_balance=total_balance,
        annual_withdrawal_before_tax=annual_before_tax,
        monthly_withdrawal_before_tax=monthly_before_tax,
        annual_withdrawal_after_tax=annual_after_tax,
        monthly_withdrawal_after_tax=annual_after_tax / 12,
        current_savings_rate=savings_rate,
        total_tax_rate=total_rate,
        federal_tax_rate=federal_rate,
        state_tax_rate=state_rate,
    )


def calculate_what_if_scenario(projection: FinancialProjection,
                               target_monthly_income: float,
                               inputs: UserInputs,
                               assumptions: FinancialAssumptions = FINANCIAL_ASSUMPTIONS) -> WhatIfResult:
    """
    Solve for the extra monthly contribution that reaches a target after-tax income.

    The target is grossed up with a flat estimated tax rate rather than the
    bracket model so the annuity formula can be inverted directly.

    Args:
        projection: Projection for the current inputs
        target_monthly_income: Desired monthly income after tax
        inputs: Inputs the projection was computed from

    Returns:
        WhatIfResult with the required extra contribution (0 when the current
        after-tax income already meets the target or when no time is left)
        and the required balance
    """
    target_annual_income = target_monthly_income * 12
    required_annual_before_tax = target_annual_income / (1 - WHAT_IF_ESTIMATED_TAX_RATE)
    required_total_balance = required_annual_before_tax / assumptions.withdrawal_rate

    shortfall = max(0.0, required_total_balance - projection.total_retirement_balance)
    already_on_track = target_monthly_income <= projection.monthly_withdrawal_after_tax

    num_payments = projection.years_to_retirement * 12
    required_additional = 0.0
    if not already_on_track and shortfall > 0 and num_payments > 0:
        factor = annuity_due_factor(assumptions.annual_return / 12, num_payments)
        required_additional = shortfall / factor

    logger.debug("What-if for %s: target=%.2f/mo, shortfall=%.2f, extra=%.2f/mo",
                 inputs.retirement_state, target_monthly_income, shortfall, required_additional)

    return WhatIfResult(
        required_additional_monthly_investment=required_additional,
        required_total_balance=required_total_balance,
    )


def calculate_investment_boost(inputs: UserInputs,
                               additional_monthly_investment: float,
                               assumptions: FinancialAssumptions = FINANCIAL_ASSUMPTIONS,
                               state_rates: Mapping[str, float] = STATE_EFFECTIVE_TAX_RATES,
                               tax_brackets: Sequence[TaxBracket] = FEDERAL_TAX_BRACKETS_2025) -> InvestmentBoost:
    """Extra monthly retirement income from investing more each month"""
    base = project_retirement(inputs, assumptions, state_rates, tax_brackets)
    enhanced_inputs = replace(
        inputs, monthly_investments=inputs.monthly_investments + additional_monthly_investment)
    enhanced = project_retirement(enhanced_inputs, assumptions, state_rates, tax_brackets)

    return InvestmentBoost(
        additional_monthly_investment=additional_monthly_investment,
        additional_monthly_income=enhanced.monthly_withdrawal_after_tax - base.monthly_withdrawal_after_tax,
        enhanced_projection=enhanced,
    )


def projection_schedule(inputs: UserInputs,
                        assumptions: FinancialAssumptions = FINANCIAL_ASSUMPTIONS) -> pd.DataFrame:
    """
    Year-by-year balances from today until retirement.

    Row 0 is today; the last row matches project_retirement's totals.
    """
    years_to_retirement = max(0, inputs.retirement_age - inputs.current_age)
    year_offsets = np.arange(years_to_retirement + 1)

    savings_balance = inputs.current_savings * (1 + assumptions.annual_return) ** year_offsets
    contributions_balance = np.array([
        future_value_contributions(inputs.monthly_investments, assumptions.annual_return, int(year))
        for year in year_offsets
    ])

    return pd.DataFrame({
        'year': year_offsets,
        'age': inputs.current_age + year_offsets,
        'savings_balance': savings_balance,
        'contributions_balance': contributions_balance,
        'total_balance': savings_balance + contributions_balance,
    })


def to_todays_dollars(amount: float, years: int,
                      inflation_rate: float = FINANCIAL_ASSUMPTIONS.inflation_rate) -> float:
    """Deflate a future nominal amount to today's purchasing power"""
    return amount / (1 + inflation_rate) ** max(0, years)
