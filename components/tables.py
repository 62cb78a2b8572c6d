"""Streamlit table and summary display components."""


import pandas as pd
import streamlit as st

SCHEDULE_VIEWS = {
    "Remaining Months": ['remaining'],
    "Paid Months": ['paid'],
    "All Months": ['paid', 'remaining'],
}

ROW_HEIGHT_PX = 35


def _currency(value: float) -> str:
    return f"₹{value:,.2f}"


def display_amortization_table(schedule: pd.DataFrame, visible_rows: int = 36) -> None:
    """Display the schedule split at the pre-closure month.

    Args:
        schedule: DataFrame from schedule_frame, including the status column
        visible_rows: Rows shown before the table scrolls
    """
    st.subheader("Amortization Schedule")

    if schedule.empty:
        st.caption("No schedule for the current inputs.")
        return

    paid = int((schedule['status'] == 'paid').sum())
    st.caption(f"{paid} of {len(schedule)} EMIs paid by the pre-closure date.")

    view = st.radio("Show", options=list(SCHEDULE_VIEWS), horizontal=True, key="schedule_view")
    rows = schedule[schedule['status'].isin(SCHEDULE_VIEWS[view])]

    if rows.empty:
        st.caption("No months in this view.")
        return

    display_df = rows.rename(columns={
        'month': 'Month',
        'status': 'Status',
        'payment': 'EMI',
        'principal': 'Principal',
        'interest': 'Interest',
        'balance': 'Balance',
        'total_paid': 'Total Paid',
    })[['Month', 'Status', 'EMI', 'Principal', 'Interest', 'Balance', 'Total Paid']].copy()
    display_df['Status'] = display_df['Status'].str.title()

    st.dataframe(
        display_df.style.format(_currency, subset=['EMI', 'Principal', 'Interest', 'Balance', 'Total Paid']),
        use_container_width=True,
        hide_index=True,
        height=ROW_HEIGHT_PX * (min(len(display_df), visible_rows) + 1) + 3,
    )


def display_preclosure_summary(summary: dict) -> None:
    """Display pre-closure and investment comparison from summarize_result."""
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Monthly EMI", _currency(summary['emi']))
    with col2:
        st.metric("EMIs Paid/Remaining", f"{summary['paid_count']}/{summary['remaining_count']}")

    st.subheader("Pre-closure Scenario")
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Interest Paid", _currency(summary['interest_paid']))
        st.metric(
            "Pre-closure Amount",
            _currency(summary['preclosure_amount']),
            help=f"Including {summary['preclosure_charge_percent']}% charges",
        )

    with col2:
        st.metric("Principal Paid", _currency(summary['principal_paid']))
        st.metric("Total Cost with Pre-closure", _currency(summary['total_cost_if_preclose']))

    st.subheader("Continue EMI Scenario")
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Total Cost if Continuing EMIs", _currency(summary['total_cost_if_continue']))

    with col2:
        st.metric("Saved by Pre-closing", _currency(summary['interest_saved_by_preclosing']))

    st.subheader(f"Investment Scenario at {summary['investment_return_percent']}% Return")
    col1, col2 = st.columns(2)

    with col1:
        st.metric(
            "Future Value of Pre-closure Amount if Invested",
            _currency(summary['future_value_of_preclosure_amount']),
        )

    with col2:
        st.metric(
            "Future Value of Monthly EMI Investments",
            _currency(summary['future_value_of_emi_stream']),
        )

    benefit = summary['net_benefit_of_continuing']
    st.metric(
        "Financial Benefit of Continuing EMIs",
        _currency(benefit),
        delta="gain" if summary['should_continue'] else "loss",
    )

    if summary['should_continue']:
        st.success(summary['recommendation'])
    else:
        st.info(summary['recommendation'])
