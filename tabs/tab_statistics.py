"""Tab 3: Statistics. Occupancy breakdowns by floor, vehicle type and strategy."""

import streamlit as st
import pandas as pd

from data.session_store import get_inventory, get_service
from engine.statistics import get_parking_statistics
from components.charts import floor_occupancy_bar, vehicle_type_pie
from components.tables import render_styled_table
from config.defaults import STRATEGY_LABELS


def render(sidebar_state):
    """Render the Statistics tab."""
    st.header("Parking Statistics")

    stats = get_parking_statistics(get_inventory())

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_occupancy_bar(stats["floor_statistics"]), use_container_width=True)
    with col2:
        if stats["occupied_spots"] > 0:
            st.plotly_chart(vehicle_type_pie(stats["vehicle_types"]), use_container_width=True)
        else:
            st.info("No vehicles parked.")

    st.divider()

    floor_rows = [{
        "Floor": f"Floor {f['floor'] + 1}",
        "Total": f["total"],
        "Occupied": f["occupied"],
        "Available": f["available"],
        "Occupancy": f"{f['occupancy_rate']:.0f}%",
    } for f in stats["floor_statistics"]]
    render_styled_table(pd.DataFrame(floor_rows), title="Floor Distribution")

    strategy_rows = [{
        "Placed By": STRATEGY_LABELS.get(k, "Pre-existing"),
        "Vehicles": v,
    } for k, v in stats["strategies"].items()]
    render_styled_table(pd.DataFrame(strategy_rows), title="Current Occupants by Strategy")

    st.divider()

    # --- Exit History ---
    st.subheader("Vehicle History")
    plate_filter = st.text_input("Filter by plate", key="history_plate")
    history = get_service().history(plate_filter or None)
    if not history:
        st.info("No exits recorded yet.")
        return
    rows = [{
        "Plate": r.license_plate,
        "Type": r.vehicle_type.capitalize(),
        "Spot": r.spot_id,
        "Floor": r.floor + 1,
        "Arrival": r.arrival_time,
        "Exit": r.exit_time,
        "Duration": r.duration_label,
        "Allocated By": STRATEGY_LABELS.get(r.allocated_by, r.allocated_by) or "—",
    } for r in history]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
