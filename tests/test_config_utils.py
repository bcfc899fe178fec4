"""
Unit tests for configuration helpers.
"""
import json
import pytest
from dataclasses import fields
from config_utils import (
    ONBOARDING_STEPS, load_assumptions, get_default_inputs, get_onboarding_widget_mappings
)
from financial_data import FINANCIAL_ASSUMPTIONS, DEFAULT_VALUES, STATE_EFFECTIVE_TAX_RATES
from projection import UserInputs


class TestLoadAssumptions:
    """Test optional assumption overrides"""

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_assumptions(str(tmp_path / 'missing.json')) is FINANCIAL_ASSUMPTIONS

    def test_partial_override(self, tmp_path):
        path = tmp_path / 'assumptions.json'
        path.write_text(json.dumps({'annual_return': 0.06}))

        assumptions = load_assumptions(str(path))

        assert assumptions.annual_return == 0.06
        assert assumptions.withdrawal_rate == FINANCIAL_ASSUMPTIONS.withdrawal_rate
        assert assumptions.inflation_rate == FINANCIAL_ASSUMPTIONS.inflation_rate
        assert FINANCIAL_ASSUMPTIONS.annual_return == 0.08

    def test_invalid_json_returns_defaults(self, tmp_path):
        path = tmp_path / 'assumptions.json'
        path.write_text('{not json')

        assert load_assumptions(str(path)) is FINANCIAL_ASSUMPTIONS

    def test_non_object_returns_defaults(self, tmp_path):
        path = tmp_path / 'assumptions.json'
        path.write_text('[0.05]')

        assert load_assumptions(str(path)) is FINANCIAL_ASSUMPTIONS

    def test_null_value_returns_defaults(self, tmp_path):
        path = tmp_path / 'assumptions.json'
        path.write_text(json.dumps({'annual_return': None}))

        assert load_assumptions(str(path)) is FINANCIAL_ASSUMPTIONS

    def test_non_numeric_value_returns_defaults(self, tmp_path):
        path = tmp_path / 'assumptions.json'
        path.write_text(json.dumps({'withdrawal_rate': 'four percent'}))

        assert load_assumptions(str(path)) is FINANCIAL_ASSUMPTIONS

    def test_out_of_range_value_raises(self, tmp_path):
        path = tmp_path / 'assumptions.json'
        path.write_text(json.dumps({'withdrawal_rate': 1.5}))

        with pytest.raises(ValueError):
            load_assumptions(str(path))


class TestOnboardingConfig:
    """Test onboarding step table and defaults"""

    def test_one_step_per_input_field(self):
        step_ids = [step['id'] for step in ONBOARDING_STEPS]
        assert step_ids == [f.name for f in fields(UserInputs)]

    def test_slider_steps_have_ranges(self):
        for step in ONBOARDING_STEPS:
            if step['input_type'] == 'slider':
                assert step['min'] < step['max']
                assert step['step'] > 0

    def test_state_dropdown_lists_every_state(self):
        dropdown = ONBOARDING_STEPS[-1]
        assert dropdown['input_type'] == 'dropdown'
        assert dropdown['options'] == list(STATE_EFFECTIVE_TAX_RATES)

    def test_default_inputs_are_a_copy(self):
        defaults = get_default_inputs()
        defaults['current_age'] = 99

        assert DEFAULT_VALUES['current_age'] == 25
        assert get_default_inputs()['current_age'] == 25

    def test_widget_mappings(self):
        mappings = get_onboarding_widget_mappings()
        assert mappings['onb_current_age'] == 'current_age'
        assert len(mappings) == len(ONBOARDING_STEPS)
