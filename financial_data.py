"""
Static financial data: growth assumptions, 2025 federal brackets and state rates.
All tables are read-only; pass alternatives into the engine instead of mutating these.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple


@dataclass(frozen=True)
class FinancialAssumptions:
    """Fixed scalars shared by every calculation"""
    annual_return: float = 0.08
    inflation_rate: float = 0.02
    withdrawal_rate: float = 0.04

    def __post_init__(self):
        for name in ('annual_return', 'inflation_rate', 'withdrawal_rate'):
            value = getattr(self, name)
            if not 0 < value < 1:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")


@dataclass(frozen=True)
class TaxBracket:
    """One progressive bracket; max is inclusive"""
    rate: float
    min: float
    max: float

    def __post_init__(self):
        if not 0 <= self.rate < 1:
            raise ValueError(f"Bracket rate must be in [0, 1), got {self.rate}")
        if self.max < self.min:
            raise ValueError(f"Bracket max {self.max} is below min {self.min}")

    @property
    def width(self) -> float:
        return self.max - self.min + 1


FINANCIAL_ASSUMPTIONS = FinancialAssumptions()

FEDERAL_TAX_BRACKETS_2025: Tuple[TaxBracket, ...] = (
    TaxBracket(rate=0.10, min=0, max=11_925),
    TaxBracket(rate=0.12, min=11_926, max=48_475),
    TaxBracket(rate=0.22, min=48_476, max=103_350),
    TaxBracket(rate=0.24, min=103_351, max=197_300),
    TaxBracket(rate=0.32, min=197_301, max=250_525),
    TaxBracket(rate=0.35, min=250_526, max=626_350),
    TaxBracket(rate=0.37, min=626_351, max=float('inf')),
)

DEFAULT_STATE = 'Not Sure/Other'
DEFAULT_STATE_TAX_RATE = 0.05

# Combined federal + state rate never exceeds this
MAX_TOTAL_TAX_RATE = 0.47

# Flat rate used to gross up a target income in the what-if solver
WHAT_IF_ESTIMATED_TAX_RATE = 0.25

STATE_EFFECTIVE_TAX_RATES = MappingProxyType({
    'Alabama': 0.045,
    'Alaska': 0.00,
    'Arizona': 0.045,
    'Arkansas': 0.048,
    'California': 0.093,
    'Colorado': 0.046,
    'Connecticut': 0.055,
    'Delaware': 0.057,
    'Florida': 0.00,
    'Georgia': 0.0575,
    'Hawaii': 0.082,
    'Idaho': 0.058,
    'Illinois': 0.0495,
    'Indiana': 0.0323,
    'Iowa': 0.067,
    'Kansas': 0.057,
    'Kentucky': 0.050,
    'Louisiana': 0.042,
    'Maine': 0.075,
    'Maryland': 0.0575,
    'Massachusetts': 0.050,
    'Michigan': 0.0425,
    'Minnesota': 0.098,
    'Mississippi': 0.050,
    'Missouri': 0.054,
    'Montana': 0.069,
    'Nebraska': 0.068,
    'Nevada': 0.00,
    'New Hampshire': 0.00,
    'New Jersey': 0.108,
    'New Mexico': 0.059,
    'New York': 0.108,
    'North Carolina': 0.0475,
    'North Dakota': 0.029,
    'Ohio': 0.0399,
    'Oklahoma': 0.050,
    'Oregon': 0.099,
    'Pennsylvania': 0.0307,
    'Rhode Island': 0.0599,
    'South Carolina': 0.070,
    'South Dakota': 0.00,
    'Tennessee': 0.00,
    'Texas': 0.00,
    'Utah': 0.0495,
    'Vermont': 0.088,
    'Virginia': 0.0575,
    'Washington': 0.00,
    'West Virginia': 0.065,
    'Wisconsin': 0.076,
    'Wyoming': 0.00,
    DEFAULT_STATE: DEFAULT_STATE_TAX_RATE,
})

SAVINGS_RATE_THRESHOLDS = MappingProxyType({
    'RED': 0.10,
    'YELLOW': 0.20,
})

DEFAULT_VALUES = MappingProxyType({
    'current_age': 25,
    'retirement_age': 65,
    'monthly_take_home': 4000,
    'monthly_expenses': 3000,
    'monthly_investments': 0,
    'current_savings': 0,
    'high_interest_debt': False,
    'retirement_state': DEFAULT_STATE,
})
