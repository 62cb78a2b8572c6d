"""Plotly chart components for loan pre-closure visualization."""

import plotly.graph_objects as go
import pandas as pd

STATUS_COLORS = {'paid': '#7f7f7f', 'remaining': '#1f77b4'}


def create_amortization_chart(schedule: pd.DataFrame, preclosure_amount: float = 0.0) -> go.Figure:
    """Remaining principal by month, paid months greyed out.

    The outstanding balance at the pre-closure month is marked together
    with the pre-closure amount including charges.
    """
    fig = go.Figure()

    for status, label in (('paid', 'Paid Months'), ('remaining', 'Remaining Months')):
        rows = schedule[schedule['status'] == status]
        if rows.empty:
            continue
        fig.add_trace(go.Bar(
            x=rows['month'],
            y=rows['balance'],
            name=label,
            marker_color=STATUS_COLORS[status],
            hovertemplate='Month %{x}<br>Balance: ₹%{y:,.0f}<extra></extra>',
        ))

    paid = schedule[schedule['status'] == 'paid']
    if not paid.empty and preclosure_amount > 0:
        last_paid = paid.iloc[-1]
        fig.add_trace(go.Scatter(
            x=[last_paid['month']],
            y=[preclosure_amount],
            mode='markers',
            name='Pre-closure Amount',
            marker=dict(color='#d62728', size=12, symbol='diamond'),
            hovertemplate='Pay off after month %{x}<br>₹%{y:,.0f} with charges<extra></extra>',
        ))

    fig.update_layout(
        title='Outstanding Principal at Pre-closure',
        xaxis_title='Month',
        yaxis_title='Remaining Principal (₹)',
        barmode='overlay',
        bargap=0.1,
        yaxis=dict(tickformat=',.0f'),
    )

    return fig


def create_payment_breakdown_chart(schedule: pd.DataFrame) -> go.Figure:
    """Interest share of each EMI, split into paid and remaining months."""
    fig = go.Figure()

    series = (
        ('paid', 'Interest Already Paid', STATUS_COLORS['paid']),
        ('remaining', 'Interest Avoided by Pre-closing', '#d62728'),
    )
    for status, label, color in series:
        rows = schedule[schedule['status'] == status]
        if rows.empty:
            continue
        fig.add_trace(go.Bar(
            x=rows['month'],
            y=rows['interest'],
            name=label,
            marker_color=color,
            hovertemplate='Month %{x}<br>Interest: ₹%{y:,.2f}<extra></extra>',
        ))

    fig.update_layout(
        title='Interest in Each EMI',
        xaxis_title='Month',
        yaxis_title='Interest (₹)',
        yaxis=dict(tickformat=',.0f'),
    )

    return fig


def create_strategy_growth_chart(growth_data: pd.DataFrame) -> go.Figure:
    """Create chart comparing invested pre-closure amount against invested EMIs."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=growth_data['month'],
        y=growth_data['preclose_value'],
        name='Pre-closure Amount Invested',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='Month %{x}<br>Value: ₹%{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=growth_data['month'],
        y=growth_data['continue_value'],
        name='EMIs Invested',
        line=dict(color='#2ca02c', width=2),
        hovertemplate='Month %{x}<br>Value: ₹%{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Investment Value by Strategy',
        xaxis_title='Months After Pre-closure Date',
        yaxis_title='Value (₹)',
        hovermode='x unified',
        yaxis=dict(tickformat=',.0f'),
        legend=dict(
            yanchor='top',
            y=0.99,
            xanchor='left',
            x=0.01,
        ),
    )

    return fig
