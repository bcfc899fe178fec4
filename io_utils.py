"""
IO utilities for converting wizard state to engine inputs and formatting results.
Nothing here touches disk: user inputs live only in the session.
"""
from dataclasses import asdict, fields
from typing import Dict, Any

from financial_data import DEFAULT_VALUES, SAVINGS_RATE_THRESHOLDS
from projection import UserInputs, FinancialProjection

SAVINGS_RATE_COLORS = {
    'red': '#F87171',
    'orange': '#F59E0B',
    'teal': '#2CB67D',
}


def _safe_numeric_convert(value: Any, default: float) -> float:
    """Safely convert a value to a numeric type, using default if invalid"""
    try:
        return float(value) if value is not None else default
    except (ValueError, TypeError):
        return default


def _safe_int_convert(value: Any, default: int) -> int:
    """Safely convert a value to an int, using default if invalid"""
    try:
        return int(float(value)) if value is not None else default
    except (ValueError, TypeError):
        return default


def _safe_bool_convert(value: Any, default: bool) -> bool:
    """Interpret toggles and yes/no strings as booleans"""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('true', 'yes', '1', 'y')
    return bool(value)


def inputs_to_dict(inputs: UserInputs) -> Dict[str, Any]:
    """Convert UserInputs to a plain dictionary (e.g. for session state)"""
    return asdict(inputs)


def dict_to_inputs(param_dict: Dict[str, Any]) -> UserInputs:
    """
    Convert a dictionary of wizard answers to UserInputs.

    Missing or malformed values fall back to DEFAULT_VALUES; unknown keys are ignored.

    Args:
        param_dict: Dictionary with wizard values

    Returns:
        UserInputs object
    """
    known = {f.name for f in fields(UserInputs)}
    values = {key: value for key, value in param_dict.items() if key in known}

    state = values.get('retirement_state')
    return UserInputs(
        current_age=_safe_int_convert(values.get('current_age'), DEFAULT_VALUES['current_age']),
        retirement_age=_safe_int_convert(values.get('retirement_age'), DEFAULT_VALUES['retirement_age']),
        monthly_take_home=_safe_numeric_convert(values.get('monthly_take_home'),
                                                DEFAULT_VALUES['monthly_take_home']),
        monthly_expenses=_safe_numeric_convert(values.get('monthly_expenses'),
                                               DEFAULT_VALUES['monthly_expenses']),
        monthly_investments=_safe_numeric_convert(values.get('monthly_investments'),
                                                  DEFAULT_VALUES['monthly_investments']),
        current_savings=_safe_numeric_convert(values.get('current_savings'),
                                              DEFAULT_VALUES['current_savings']),
        high_interest_debt=_safe_bool_convert(values.get('high_interest_debt'),
                                              DEFAULT_VALUES['high_interest_debt']),
        retirement_state=str(state) if state else DEFAULT_VALUES['retirement_state'],
    )


def projection_to_dict(projection: FinancialProjection) -> Dict[str, Any]:
    return asdict(projection)


def format_currency(amount: float) -> str:
    """
    Format a dollar amount rounded to whole dollars.

    Examples: 1234.5 -> "$1,234", -50000 -> "-$50,000"
    """
    rounded = int(round(amount))
    if rounded < 0:
        return f"-${-rounded:,}"
    return f"${rounded:,}"


def format_percentage(rate: float) -> str:
    """Format a fraction as a whole percentage, e.g. 0.125 -> "12%" """
    return f"{round(rate * 100)}%"


def savings_rate_status(savings_rate: float) -> str:
    if savings_rate < SAVINGS_RATE_THRESHOLDS['RED']:
        return 'Below recommended'
    if savings_rate < SAVINGS_RATE_THRESHOLDS['YELLOW']:
        return 'Getting there'
    return 'On track'


def savings_rate_color(savings_rate: float) -> str:
    """Hex color for the savings-rate band"""
    if savings_rate < SAVINGS_RATE_THRESHOLDS['RED']:
        return SAVINGS_RATE_COLORS['red']
    if savings_rate < SAVINGS_RATE_THRESHOLDS['YELLOW']:
        return SAVINGS_RATE_COLORS['orange']
    return SAVINGS_RATE_COLORS['teal']
