"""Tab 4: Algorithm Comparison. Replay a vehicle batch under every strategy."""

import streamlit as st
import pandas as pd

from data.session_store import (
    get_inventory, get_rule_config, get_comparison_results, set_comparison_results,
    get_comparison_vehicles, set_comparison_vehicles,
)
from data.sample_data import generate_sample_vehicles
from engine.comparison import compare_strategies, comparison_rows, pick_winner
from components.charts import strategy_comparison_bar, strategy_radar
from components.tables import render_comparison_table
from config.defaults import STRATEGY_LABELS


def render(sidebar_state):
    """Render the Algorithm Comparison tab."""
    st.header("Algorithm Comparison")

    with st.expander("How is the comparison run?", expanded=False):
        st.markdown("""
Each strategy allocates the **same batch of arriving vehicles**, in order, starting
from a copy of the current facility. The live facility is not changed.

- **Type Optimization**: share of vehicles placed where the smart policy prefers
  (government on the lowest free floor, public at the exit end, private by stay length)
- **Avg Walk**: modelled walk from spot to exit
- **Overall Score**: weighted blend of type optimization, walk and success rate
        """)

    col1, col2, col3 = st.columns(3)
    with col1:
        count = st.number_input("Vehicles in batch", min_value=1, max_value=200, value=20, key="cmp_count")
    with col2:
        seed = st.number_input("Seed", min_value=0, value=42, step=1, key="cmp_seed")
    with col3:
        st.write("")
        if st.button("New Batch", key="btn_cmp_batch"):
            set_comparison_vehicles(generate_sample_vehicles(int(count), int(seed)))
            set_comparison_results({})

    vehicles = get_comparison_vehicles()
    with st.expander(f"Batch ({len(vehicles)} vehicles)"):
        st.dataframe(pd.DataFrame([{
            "Plate": v.license_plate,
            "Type": v.vehicle_type.capitalize(),
            "Arrival": v.arrival_time,
            "Stay (h)": v.stay_duration,
        } for v in vehicles]), use_container_width=True, hide_index=True)

    run_col, reset_col = st.columns(2)
    with run_col:
        if st.button("Run Comparison", type="primary", key="btn_cmp_run"):
            set_comparison_results(
                compare_strategies(get_inventory(), vehicles, int(seed), get_rule_config())
            )
    with reset_col:
        if st.button("Reset Comparison", key="btn_cmp_reset"):
            set_comparison_results({})

    results = get_comparison_results()
    if not results:
        st.info("Run a comparison to see results.")
        return

    winner = pick_winner(results)
    if winner:
        st.success(
            f"Best strategy: **{STRATEGY_LABELS.get(winner.strategy, winner.strategy)}** "
            f"(overall score {winner.overall_score:.1f})"
        )

    rows = comparison_rows(results)
    render_comparison_table(pd.DataFrame(rows))

    col_a, col_b = st.columns(2)
    with col_a:
        metric = st.selectbox(
            "Metric",
            ["Overall Score", "Type Optimization %", "Avg Walk (m)", "Utilization %", "Allocated"],
            key="cmp_metric",
        )
        st.plotly_chart(strategy_comparison_bar(rows, metric), use_container_width=True)
    with col_b:
        st.plotly_chart(strategy_radar(rows), use_container_width=True)
