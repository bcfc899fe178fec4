"""
Unit tests for input conversion and display formatting.
"""
import pytest
from financial_data import DEFAULT_VALUES
from io_utils import (
    dict_to_inputs, inputs_to_dict, projection_to_dict, format_currency, format_percentage,
    savings_rate_status, savings_rate_color, SAVINGS_RATE_COLORS
)
from projection import UserInputs, project_retirement


class TestInputConversion:
    """Test wizard dictionary <-> UserInputs conversion"""

    def test_defaults_when_empty(self):
        inputs = dict_to_inputs({})

        assert inputs.current_age == DEFAULT_VALUES['current_age']
        assert inputs.retirement_age == DEFAULT_VALUES['retirement_age']
        assert inputs.monthly_take_home == DEFAULT_VALUES['monthly_take_home']
        assert inputs.retirement_state == 'Not Sure/Other'
        assert inputs.high_interest_debt is False

    def test_string_values_converted(self):
        inputs = dict_to_inputs({
            'current_age': '40',
            'monthly_take_home': '5500.50',
            'high_interest_debt': 'yes',
        })

        assert inputs.current_age == 40
        assert inputs.monthly_take_home == 5500.50
        assert inputs.high_interest_debt is True

    def test_malformed_values_fall_back(self):
        inputs = dict_to_inputs({'current_age': 'forty', 'current_savings': None})

        assert inputs.current_age == DEFAULT_VALUES['current_age']
        assert inputs.current_savings == DEFAULT_VALUES['current_savings']

    def test_unknown_keys_ignored(self):
        inputs = dict_to_inputs({'favorite_color': 'blue', 'retirement_state': 'Ohio'})
        assert inputs.retirement_state == 'Ohio'

    def test_dict_round_trip(self):
        inputs = UserInputs(30, 60, 5000.0, 3500.0, 800.0, 25000.0, True, 'Oregon')
        assert dict_to_inputs(inputs_to_dict(inputs)) == inputs

    def test_projection_to_dict(self):
        projection = project_retirement(dict_to_inputs({}))
        result = projection_to_dict(projection)

        assert result['years_to_retirement'] == 40
        assert 'monthly_withdrawal_after_tax' in result


class TestFormatting:
    """Test display formatting helpers"""

    def test_format_currency(self):
        assert format_currency(0) == "$0"
        assert format_currency(999.4) == "$999"
        assert format_currency(1_234.4) == "$1,234"
        assert format_currency(1_250_000) == "$1,250,000"

    def test_format_currency_negative(self):
        assert format_currency(-50_000) == "-$50,000"

    def test_format_percentage(self):
        assert format_percentage(0) == "0%"
        assert format_percentage(0.2) == "20%"
        assert format_percentage(0.157) == "16%"


class TestSavingsRateBands:
    """Test savings-rate status and colors"""

    @pytest.mark.parametrize("rate,status,color", [
        (0.0, 'Below recommended', 'red'),
        (0.099, 'Below recommended', 'red'),
        (0.10, 'Getting there', 'orange'),
        (0.19, 'Getting there', 'orange'),
        (0.20, 'On track', 'teal'),
        (0.50, 'On track', 'teal'),
    ])
    def test_bands(self, rate, status, color):
        assert savings_rate_status(rate) == status
        assert savings_rate_color(rate) == SAVINGS_RATE_COLORS[color]
