"""
Plotly chart builders for the retirement dashboard.
Savings-rate gauge, balance growth until retirement, and withdrawal tax breakdown.
"""
import plotly.graph_objects as go
import pandas as pd

from financial_data import SAVINGS_RATE_THRESHOLDS
from io_utils import SAVINGS_RATE_COLORS, savings_rate_color, savings_rate_status
from projection import FinancialProjection


def create_savings_rate_gauge(savings_rate: float,
                              title: str = "Savings Rate") -> go.Figure:
    """
    Create a half-dial gauge for the share of take-home pay being invested.

    Args:
        savings_rate: Fraction of take-home pay invested (clipped to 0-100% for display)
        title: Chart title

    Returns:
        Plotly figure
    """
    percentage = min(max(savings_rate * 100, 0), 100)
    red_limit = SAVINGS_RATE_THRESHOLDS['RED'] * 100
    yellow_limit = SAVINGS_RATE_THRESHOLDS['YELLOW'] * 100

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=percentage,
        number={'suffix': '%', 'valueformat': '.0f'},
        title={'text': f"{title}<br><sub>{savings_rate_status(savings_rate)}</sub>"},
        gauge={
            'axis': {'range': [0, 100]},
            'bar': {'color': savings_rate_color(savings_rate)},
            'steps': [
                {'range': [0, red_limit], 'color': SAVINGS_RATE_COLORS['red'], 'thickness': 0.15},
                {'range': [red_limit, yellow_limit], 'color': SAVINGS_RATE_COLORS['orange'], 'thickness': 0.15},
                {'range': [yellow_limit, 100], 'color': SAVINGS_RATE_COLORS['teal'], 'thickness': 0.15},
            ],
        },
    ))

    fig.update_layout(height=300, margin=dict(t=80, b=20, l=30, r=30))
    return fig


def create_balance_growth_chart(schedule: pd.DataFrame,
                                title: str = "Projected Balance Until Retirement") -> go.Figure:
    """
    Stacked area of grown savings and accumulated contributions by age.

    Args:
        schedule: DataFrame from projection_schedule()
        title: Chart title

    Returns:
        Plotly figure
    """
    fig = go.Figure()
    if schedule.empty:
        return fig

    fig.add_trace(go.Scatter(
        x=schedule['age'],
        y=schedule['savings_balance'],
        mode='lines',
        name='Current savings',
        stackgroup='balance',
        line=dict(color='#45B7D1'),
        hovertemplate='Age %{x}<br>$%{y:,.0f}<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        x=schedule['age'],
        y=schedule['contributions_balance'],
        mode='lines',
        name='Monthly investments',
        stackgroup='balance',
        line=dict(color='#2CB67D'),
        hovertemplate='Age %{x}<br>$%{y:,.0f}<extra></extra>'
    ))

    fig.update_layout(
        title=title,
        xaxis_title="Age",
        yaxis_title="Balance ($)",
        yaxis_tickformat="$,.0f",
        hovermode='x unified',
        height=400,
        template="plotly_white"
    )
    return fig


def create_withdrawal_breakdown_chart(projection: FinancialProjection,
                                      title: str = "Monthly Withdrawal Breakdown") -> go.Figure:
    """Bar chart of gross withdrawal, estimated taxes and take-home income per month"""
    gross = projection.monthly_withdrawal_before_tax
    net = projection.monthly_withdrawal_after_tax
    taxes = gross - net

    fig = go.Figure(go.Bar(
        x=['Gross withdrawal', 'Estimated taxes', 'After-tax income'],
        y=[gross, taxes, net],
        marker_color=['#4ECDC4', '#F87171', '#2CB67D'],
        text=[f"${value:,.0f}" for value in (gross, taxes, net)],
        textposition='outside'
    ))

    fig.update_layout(
        title=f"{title}<br><sub>Total tax rate: {projection.total_tax_rate:.1%}</sub>",
        yaxis_title="Per month ($)",
        yaxis_tickformat="$,.0f",
        showlegend=False,
        height=400,
        template="plotly_white"
    )
    return fig
