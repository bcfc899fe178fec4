"""
Unit tests for onboarding input validation.
"""
import pytest
from dataclasses import replace
from projection import UserInputs
from validation import ValidationError, validate_inputs, errors_for_field


@pytest.fixture
def valid_inputs():
    return UserInputs(
        current_age=30,
        retirement_age=65,
        monthly_take_home=4_000,
        monthly_expenses=3_000,
        monthly_investments=0,
        current_savings=0,
        high_interest_debt=False,
        retirement_state='Not Sure/Other',
    )


class TestValidateInputs:
    """Test each validation rule in isolation"""

    def test_valid_inputs_have_no_errors(self, valid_inputs):
        assert validate_inputs(valid_inputs) == []

    def test_retirement_before_current_age(self, valid_inputs):
        """Exactly one error, tagged to retirement_age"""
        errors = validate_inputs(replace(valid_inputs, retirement_age=25))

        assert len(errors) == 1
        assert errors[0].field == 'retirement_age'

    def test_retirement_equal_to_current_age(self, valid_inputs):
        errors = validate_inputs(replace(valid_inputs, retirement_age=30))
        assert [e.field for e in errors] == ['retirement_age']

    def test_expenses_exceed_income_plus_investments(self, valid_inputs):
        errors = validate_inputs(replace(valid_inputs, monthly_expenses=4_500))
        assert [e.field for e in errors] == ['monthly_expenses']

    def test_expenses_covered_by_investments(self, valid_inputs):
        """Investments count toward the income side of the check"""
        inputs = replace(valid_inputs, monthly_expenses=4_500, monthly_investments=500)
        assert validate_inputs(inputs) == []

    def test_zero_take_home(self, valid_inputs):
        errors = validate_inputs(replace(valid_inputs, monthly_take_home=0, monthly_expenses=0))
        assert [e.field for e in errors] == ['monthly_take_home']

    @pytest.mark.parametrize("age", [15, 101])
    def test_current_age_out_of_range(self, valid_inputs, age):
        inputs = replace(valid_inputs, current_age=age, retirement_age=110)
        assert [e.field for e in validate_inputs(inputs)] == ['current_age']

    @pytest.mark.parametrize("age", [16, 100])
    def test_current_age_bounds_inclusive(self, valid_inputs, age):
        inputs = replace(valid_inputs, current_age=age, retirement_age=110)
        assert validate_inputs(inputs) == []

    def test_multiple_errors_returned_together(self, valid_inputs):
        inputs = replace(valid_inputs, current_age=12, retirement_age=10,
                         monthly_take_home=0, monthly_expenses=100)
        fields = {e.field for e in validate_inputs(inputs)}

        assert fields == {'retirement_age', 'monthly_expenses', 'monthly_take_home', 'current_age'}


class TestErrorsForField:
    """Test filtering errors for a single wizard step"""

    def test_filters_by_field(self):
        errors = [
            ValidationError(field='retirement_age', message='a'),
            ValidationError(field='current_age', message='b'),
            ValidationError(field='retirement_age', message='c'),
        ]
        assert errors_for_field(errors, 'retirement_age') == ['a', 'c']
        assert errors_for_field(errors, 'monthly_expenses') == []
