"""Streamlit input components for loan parameters."""

import streamlit as st
from preclosure.loan import LoanParameters


def loan_input_form(defaults: LoanParameters, key_prefix: str = "loan") -> LoanParameters:
    """Create input form for loan and pre-closure parameters.

    Returns a LoanParameters built from the current widget values. Invalid
    combinations are passed through; the calculation handles them.
    """
    st.subheader("Loan Details")
    col1, col2 = st.columns(2)

    with col1:
        principal = st.number_input(
            "Loan Amount",
            min_value=0.0,
            value=float(defaults.principal),
            step=10000.0,
            format="%.2f",
            key=f"{key_prefix}_principal",
            help="The total amount borrowed",
        )

        annual_rate = st.number_input(
            "Interest Rate (%)",
            min_value=0.0,
            max_value=50.0,
            value=float(defaults.annual_rate_percent),
            step=0.1,
            key=f"{key_prefix}_rate",
            help="Nominal annual interest rate",
        )

        tenure_months = st.number_input(
            "Loan Tenure (months)",
            min_value=0,
            max_value=600,
            value=int(defaults.tenure_months),
            step=1,
            key=f"{key_prefix}_tenure",
            help="Total number of monthly installments",
        )

        start_date = st.date_input(
            "Loan Start Date",
            value=defaults.start_date,
            key=f"{key_prefix}_start",
        )

    with col2:
        evaluation_date = st.date_input(
            "Pre-closure Date",
            value=defaults.evaluation_date,
            key=f"{key_prefix}_evaluation",
            help="When you are considering paying off the loan. Only month and year count.",
        )

        preclosure_charge = st.number_input(
            "Pre-closure Charges (%)",
            min_value=0.0,
            max_value=20.0,
            value=float(defaults.preclosure_charge_percent),
            step=0.1,
            key=f"{key_prefix}_charge",
            help="Penalty charged on the outstanding balance",
        )

        investment_return = st.number_input(
            "Expected Investment Return (%)",
            min_value=0.0,
            max_value=50.0,
            value=float(defaults.investment_return_percent),
            step=0.1,
            key=f"{key_prefix}_return",
            help="Annual return on money invested instead",
        )

    return LoanParameters(
        principal=principal,
        annual_rate_percent=annual_rate,
        tenure_months=int(tenure_months),
        start_date=start_date,
        evaluation_date=evaluation_date,
        preclosure_charge_percent=preclosure_charge,
        investment_return_percent=investment_return,
    )
