"""Loan Pre-closure Planner - Streamlit Application."""


import streamlit as st

from components.charts import (
    create_amortization_chart,
    create_payment_breakdown_chart,
    create_strategy_growth_chart,
)
from components.inputs import loan_input_form
from components.tables import display_amortization_table, display_preclosure_summary
from preclosure.config import DEFAULT_PARAMETERS, SCHEDULE_PAGE_SIZE, configure_logging
from preclosure.controller import ScenarioController
from preclosure.loan import schedule_frame
from preclosure.scenario import generate_strategy_growth_data, summarize_result

configure_logging()

# Page configuration
st.set_page_config(
    page_title="Loan Pre-closure Planner",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS
st.markdown("""
<style>
    .stMetric {
        background-color: #f0f2f6;
        padding: 10px;
        border-radius: 5px;
    }
    .stMetric label, .stMetric [data-testid="stMetricValue"], .stMetric [data-testid="stMetricDelta"] {
        color: #262730 !important;
    }
</style>
""", unsafe_allow_html=True)


def _get_controller() -> ScenarioController:
    """Return the session's controller, creating it on first run."""
    if "controller" not in st.session_state:
        st.session_state.controller = ScenarioController(DEFAULT_PARAMETERS)
    return st.session_state.controller


def main():
    """Main application entry point."""
    st.title("Loan Pre-closure Analysis")
    st.markdown("*Compare paying off a loan early with continuing EMIs and investing*")

    with st.sidebar.expander("How the comparison works"):
        st.markdown("""
        **Pre-close:** the outstanding principal plus the pre-closure charge is the lump sum you would otherwise invest until the original tenure ends.

        **Continue:** each remaining EMI is treated as money you could invest from its due month until the tenure ends.

        Continuing is recommended only when the invested EMIs end up worth more than the invested lump sum.
        """)

    controller = _get_controller()
    params = loan_input_form(controller.params)

    # Every rerun follows a widget edit; the result is swapped as a whole
    if params != controller.params:
        controller.set_params(params)

    result = controller.result
    summary = summarize_result(controller.params, result)

    display_preclosure_summary(summary)

    schedule_df = schedule_frame(result.schedule, result.paid_count)

    if result.schedule:
        tab1, tab2, tab3 = st.tabs(["Investment Growth", "Amortization", "EMI Breakdown"])

        with tab1:
            growth_data = generate_strategy_growth_data(controller.params, result)
            if growth_data.empty:
                st.caption("No remaining EMIs: the loan is already fully amortized.")
            else:
                st.plotly_chart(create_strategy_growth_chart(growth_data), use_container_width=True)

        with tab2:
            st.plotly_chart(create_amortization_chart(schedule_df, result.preclosure_amount), use_container_width=True)

        with tab3:
            st.plotly_chart(
                create_payment_breakdown_chart(schedule_df),
                use_container_width=True,
            )

    if st.toggle("Show Amortization Schedule", key="show_schedule"):
        display_amortization_table(schedule_df, visible_rows=SCHEDULE_PAGE_SIZE)


if __name__ == "__main__":
    main()
