"""Tab 1: Dashboard. Facility occupancy at a glance."""

import streamlit as st
import pandas as pd

from data.session_store import get_inventory
from engine.statistics import get_parking_statistics
from components.metrics_cards import render_metric_row
from components.charts import floor_grid_heatmap, occupancy_donut
from components.tables import render_occupancy_table
from config.defaults import FLOOR_SATURATION_THRESHOLD, STRATEGY_LABELS


def render(sidebar_state):
    """Render the Dashboard tab."""
    st.header("Parking Dashboard")

    inventory = get_inventory()
    stats = get_parking_statistics(inventory)

    render_metric_row([
        {"label": "Total Spots", "value": f"{stats['total_spots']:,}"},
        {"label": "Occupied", "value": f"{stats['occupied_spots']:,}"},
        {"label": "Available", "value": f"{stats['available_spots']:,}",
         "delta": "Full" if stats["available_spots"] == 0 else None,
         "delta_color": "inverse"},
        {"label": "Occupancy", "value": f"{stats['occupancy_rate']:.1f}%"},
    ])
    st.caption(f"Active strategy: {STRATEGY_LABELS.get(sidebar_state.strategy, sidebar_state.strategy)}")

    st.divider()

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_grid_heatmap(inventory), use_container_width=True)
    with col2:
        st.plotly_chart(
            occupancy_donut(stats["occupied_spots"], stats["total_spots"]),
            use_container_width=True,
        )

    saturated = [f for f in stats["floor_statistics"]
                 if f["occupancy_rate"] / 100 > FLOOR_SATURATION_THRESHOLD]
    for f in saturated:
        st.warning(f"Floor {f['floor'] + 1} is at {f['occupancy_rate']:.0f}% occupancy.")

    st.divider()

    # --- Floor Detail ---
    st.subheader("Floor Detail")
    floor_options = [f"Floor {f + 1}" for f in inventory.floors]
    selected = st.selectbox("Floor", floor_options, key="dashboard_floor")
    floor_idx = floor_options.index(selected)
    floor_no = inventory.floors[floor_idx]

    rows = [{
        "Spot": s.id,
        "Status": "Occupied" if s.is_occupied else "Free",
        "Plate": s.license_plate or "—",
        "Type": s.vehicle_type.capitalize() if s.is_occupied else "—",
        "Arrival": s.arrival_time or "—",
        "Expected Departure": s.expected_departure or "—",
        "Allocated By": STRATEGY_LABELS.get(s.allocated_by, s.allocated_by) or "—",
    } for s in inventory.spots_by_floor()[floor_no]]
    render_occupancy_table(pd.DataFrame(rows))
