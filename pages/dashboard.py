"""
Retirement Dashboard
Recomputes the projection on every rerun from the answers held in session state.
"""

import streamlit as st

from charts import create_savings_rate_gauge, create_balance_growth_chart, create_withdrawal_breakdown_chart
from config_utils import load_assumptions
from io_utils import dict_to_inputs, format_currency, format_percentage, savings_rate_status
from projection import (
    project_retirement, calculate_what_if_scenario, calculate_investment_boost,
    projection_schedule, to_todays_dollars
)

if not st.session_state.get('onboarding_completed', False):
    st.info("ℹ️ Answer a few questions first to see your retirement snapshot.")
    if st.button("🚀 Start", type="primary"):
        st.switch_page("pages/onboarding.py")
    st.stop()

assumptions = load_assumptions()
inputs = dict_to_inputs(st.session_state.user_inputs)
projection = project_retirement(inputs, assumptions)

st.title("📊 Your Retirement Snapshot")

if st.button("← Back to questions"):
    st.session_state.onboarding_completed = False
    st.switch_page("pages/onboarding.py")

if inputs.high_interest_debt:
    st.error("**High-interest debt detected.** You have debt above 6% APR. "
             "Pay it off before investing more.")

col1, col2 = st.columns(2)
with col1:
    st.metric("Projected balance at retirement", format_currency(projection.total_retirement_balance))
    st.caption(f"At age {inputs.retirement_age}, in {projection.years_to_retirement} years")
with col2:
    st.metric("Monthly income in retirement (after tax)",
              f"{format_currency(projection.monthly_withdrawal_after_tax)}/month")
    todays_value = to_todays_dollars(projection.monthly_withdrawal_after_tax,
                                     projection.years_to_retirement, assumptions.inflation_rate)
    st.caption(f"About {format_currency(todays_value)}/month in today's dollars")

st.markdown("---")

col1, col2 = st.columns([1, 2])
with col1:
    st.plotly_chart(create_savings_rate_gauge(projection.current_savings_rate), use_container_width=True)
    st.write(f"You currently save {format_percentage(projection.current_savings_rate)} of your take-home pay "
             f"({savings_rate_status(projection.current_savings_rate).lower()}).")
with col2:
    st.plotly_chart(create_balance_growth_chart(projection_schedule(inputs, assumptions)),
                    use_container_width=True)

st.subheader("How we calculated it")
breakdown_col, chart_col = st.columns([1, 2])
with breakdown_col:
    st.write(f"**Growth of current savings:** {format_currency(projection.future_value_current_savings)}")
    st.write(f"**Growth of monthly investments:** {format_currency(projection.future_value_contributions)}")
    st.write(f"**Estimated tax rate:** {format_percentage(projection.total_tax_rate)}")
    st.write(f"**Total at retirement:** {format_currency(projection.total_retirement_balance)}")
    st.caption(f"Assumes {assumptions.annual_return:.0%} annual growth and a "
               f"{assumptions.withdrawal_rate:.0%} withdrawal rate.")
with chart_col:
    st.plotly_chart(create_withdrawal_breakdown_chart(projection), use_container_width=True)

st.markdown("---")

boost_col, target_col = st.columns(2)
with boost_col:
    st.subheader("Investment Boost Impact")
    additional = st.number_input("Additional monthly investment ($)", min_value=0, value=100, step=50)
    boost = calculate_investment_boost(inputs, additional, assumptions)
    st.metric("Extra retirement income", f"+{format_currency(boost.additional_monthly_income)}/month")
    st.caption(f"By investing {format_currency(additional)} more monthly")

with target_col:
    st.subheader("Reach a target income")
    default_target = int(max(projection.monthly_withdrawal_after_tax, 1_000) // 100 * 100)
    target = st.slider("Target monthly income in retirement ($)", min_value=0,
                       max_value=max(20_000, default_target), value=default_target, step=100)
    what_if = calculate_what_if_scenario(projection, target, inputs, assumptions)
    if what_if.required_additional_monthly_investment > 0:
        st.metric("Extra to invest each month",
                  format_currency(what_if.required_additional_monthly_investment))
    else:
        st.success("✅ You're on track for this income.")
    st.caption(f"Needs roughly {format_currency(what_if.required_total_balance)} at retirement "
               f"(assumes a 25% blended tax rate).")

st.markdown("---")

with st.expander("Recommended account set up strategy for retirement"):
    st.markdown("""
    1. **401(k) employer match**: contribute at least enough to get your company match.
       It's free money and should be your first priority.
    2. **Roth IRA**: if eligible, fund a Roth IRA for tax-free growth. Great for younger
       investors and those expecting higher income in retirement.
    3. **Max out your 401(k)**: after the match and your Roth IRA, consider maxing out
       your 401(k) for additional tax advantages.
    """)
