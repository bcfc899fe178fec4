"""
Configuration Utilities for the Retirement Snapshot
Onboarding step definitions, default inputs and optional assumption overrides.
"""

import json
import logging
import os
from typing import Dict, Any, List

from financial_data import (
    DEFAULT_VALUES, FINANCIAL_ASSUMPTIONS, STATE_EFFECTIVE_TAX_RATES, FinancialAssumptions
)

logger = logging.getLogger(__name__)

ASSUMPTIONS_FILE = 'assumptions.json'
ASSUMPTION_KEYS = ('annual_return', 'inflation_rate', 'withdrawal_rate')


def load_assumptions(path: str = ASSUMPTIONS_FILE) -> FinancialAssumptions:
    """
    Load growth/withdrawal/inflation overrides from a JSON file.

    A missing file gives the built-in assumptions. An unreadable file or a
    non-numeric value logs a warning and also gives the defaults; out-of-range
    values raise ValueError.
    """
    if not os.path.exists(path):
        logger.debug("No assumptions file at %s, using defaults", path)
        return FINANCIAL_ASSUMPTIONS

    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s: %s", path, e)
        return FINANCIAL_ASSUMPTIONS

    if not isinstance(config, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return FINANCIAL_ASSUMPTIONS

    try:
        overrides = {key: float(config[key]) for key in ASSUMPTION_KEYS if key in config}
    except (TypeError, ValueError) as e:
        logger.warning("Ignoring %s: non-numeric assumption value (%s)", path, e)
        return FINANCIAL_ASSUMPTIONS

    unknown = set(config) - set(ASSUMPTION_KEYS)
    if unknown:
        logger.warning("Ignoring unknown assumption keys in %s: %s", path, sorted(unknown))

    logger.info("Loaded %d assumption override(s) from %s", len(overrides), path)
    return FinancialAssumptions(**{
        key: overrides.get(key, getattr(FINANCIAL_ASSUMPTIONS, key)) for key in ASSUMPTION_KEYS
    })


# Onboarding step configuration, one question per UserInputs field
ONBOARDING_STEPS: List[Dict[str, Any]] = [
    {"id": "current_age", "title": "How old are you?",
     "input_type": "slider", "min": 20, "max": 75, "step": 1, "suffix": " years old"},
    {"id": "retirement_age", "title": "When do you want to retire?",
     "input_type": "slider", "min": 45, "max": 75, "step": 1, "suffix": " years old"},
    {"id": "monthly_take_home", "title": "What is your take home pay per month?",
     "input_type": "slider", "min": 0, "max": 20_000, "step": 100, "prefix": "$", "suffix": " / month"},
    {"id": "monthly_expenses", "title": "What is your average monthly spending?",
     "tooltip": "Include rent/mortgage, utilities, groceries, transportation, etc.",
     "input_type": "slider", "min": 0, "max": 20_000, "step": 100, "prefix": "$", "suffix": " / month"},
    {"id": "monthly_investments", "title": "How much do you invest per month?",
     "tooltip": "For 401(k), IRA, brokerage, etc.",
     "input_type": "slider", "min": 0, "max": 10_000, "step": 100, "prefix": "$", "suffix": " / month"},
    {"id": "current_savings", "title": "Your total retirement savings to date?",
     "tooltip": "Include 401k balances, IRAs and brokerage accounts.",
     "input_type": "slider", "min": 0, "max": 2_000_000, "step": 1_000, "prefix": "$"},
    {"id": "high_interest_debt", "title": "Do you have any high interest debt (6%+ APR)?",
     "tooltip": "Includes credit card, student loans, car loan, etc.",
     "input_type": "toggle"},
    {"id": "retirement_state", "title": "Where do you plan to retire (which state)?",
     "input_type": "dropdown", "options": list(STATE_EFFECTIVE_TAX_RATES)},
]


def get_default_inputs() -> Dict[str, Any]:
    """Get a fresh, mutable copy of the default wizard answers"""
    return dict(DEFAULT_VALUES)


def get_onboarding_widget_mappings() -> Dict[str, str]:
    """Get mapping from Streamlit widget keys to UserInputs field names"""
    return {f"onb_{step['id']}": step['id'] for step in ONBOARDING_STEPS}
