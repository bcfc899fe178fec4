"""
Input validation for the onboarding wizard.
Every check is independent; all failures are returned together.
"""
from dataclasses import dataclass
from typing import List

from projection import UserInputs

MIN_AGE = 16
MAX_AGE = 100


@dataclass(frozen=True)
class ValidationError:
    """Advisory message tied to a single UserInputs field"""
    field: str
    message: str


def validate_inputs(inputs: UserInputs) -> List[ValidationError]:
    """Return every validation error for the inputs (empty when all pass)"""
    errors = []

    if inputs.current_age >= inputs.retirement_age:
        errors.append(ValidationError(
            field='retirement_age',
            message="Retirement age must be greater than current age"
        ))

    if inputs.monthly_expenses > inputs.monthly_take_home + inputs.monthly_investments:
        errors.append(ValidationError(
            field='monthly_expenses',
            message="Your expenses exceed your income plus investments. "
                    "Consider reducing spending or increasing contributions"
        ))

    if inputs.monthly_take_home <= 0:
        errors.append(ValidationError(
            field='monthly_take_home',
            message="Please enter a positive monthly income"
        ))

    if inputs.current_age < MIN_AGE or inputs.current_age > MAX_AGE:
        errors.append(ValidationError(
            field='current_age',
            message="Please enter a valid age"
        ))

    return errors


def errors_for_field(errors: List[ValidationError], field: str) -> List[str]:
    """Messages for one wizard step"""
    return [error.message for error in errors if error.field == field]
