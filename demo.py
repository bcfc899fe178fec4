#!/usr/bin/env python3
"""
Demo script showing how to use the projection modules programmatically.
This demonstrates the core functionality without the Streamlit UI.
"""

from projection import UserInputs, project_retirement, calculate_what_if_scenario, calculate_investment_boost
from tax import federal_effective_rate, marginal_tax_rate
from validation import validate_inputs
from io_utils import format_currency, format_percentage, savings_rate_status


def main():
    print("🚀 Retirement Snapshot Demo")
    print("=" * 50)

    # 1. Collect inputs
    inputs = UserInputs(
        current_age=25,
        retirement_age=65,
        monthly_take_home=4_000,
        monthly_expenses=3_000,
        monthly_investments=500,
        current_savings=10_000,
        high_interest_debt=False,
        retirement_state='Texas',
    )
    print(f"\n📝 Age {inputs.current_age}, retiring at {inputs.retirement_age} in {inputs.retirement_state}")
    print(f"   Investing {format_currency(inputs.monthly_investments)}/month, "
          f"{format_currency(inputs.current_savings)} saved so far")

    # 2. Validate
    errors = validate_inputs(inputs)
    if errors:
        for error in errors:
            print(f"   ⚠️ {error.field}: {error.message}")
        return

    # 3. Project
    projection = project_retirement(inputs)
    print("\n📈 Projection:")
    print(f"   Balance at retirement: {format_currency(projection.total_retirement_balance)}")
    print(f"     from current savings: {format_currency(projection.future_value_current_savings)}")
    print(f"     from monthly investing: {format_currency(projection.future_value_contributions)}")
    print(f"   Monthly income (after tax): {format_currency(projection.monthly_withdrawal_after_tax)}")
    print(f"   Tax rate: {format_percentage(projection.total_tax_rate)} "
          f"(federal {projection.federal_tax_rate:.1%}, state {projection.state_tax_rate:.1%})")
    print(f"   Savings rate: {format_percentage(projection.current_savings_rate)} "
          f"- {savings_rate_status(projection.current_savings_rate)}")

    # 4. Tax bracket demo
    print("\n💰 Federal effective vs marginal rate:")
    for income in (11_925, 48_475, 100_000, 250_000):
        print(f"   {format_currency(income)}: effective {federal_effective_rate(income):.2%}, "
              f"marginal {marginal_tax_rate(income):.0%}")

    # 5. What-if tools
    boost = calculate_investment_boost(inputs, 100)
    print(f"\n🔧 Investing $100 more each month adds {format_currency(boost.additional_monthly_income)}/month")

    target = 10_000
    what_if = calculate_what_if_scenario(projection, target, inputs)
    print(f"   To reach {format_currency(target)}/month, invest "
          f"{format_currency(what_if.required_additional_monthly_investment)} more each month "
          f"(target balance {format_currency(what_if.required_total_balance)})")

    print("\n✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
