"""Tab 5: Admin. Policy settings, facility reset and inventory upload/export."""

import streamlit as st

from data.loader import load_file, parse_inventory, inventory_to_df
from data.validator import validate_inventory
from data.sample_data import build_inventory, generate_demo_inventory
from data.session_store import get_inventory, get_rule_config, set_rule_config, reset_inventory
from config.defaults import FLOOR_COUNT, SPOTS_PER_FLOOR, DEMO_SEED


def _load_and_validate(df):
    """Validate and install an uploaded inventory."""
    result = validate_inventory(df)
    for e in result.errors:
        st.error(e)
    if not result.is_valid:
        return False
    for w in result.warnings:
        st.warning(w)

    inventory = parse_inventory(df)
    reset_inventory(inventory)
    st.success(f"Inventory loaded: {len(inventory)} spots on {len(inventory.floors)} floors, "
               f"{len(inventory.occupied)} occupied.")
    return True


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    # --- Policy Settings ---
    st.subheader("Allocation Policy")
    config = dict(get_rule_config())
    col1, col2, col3 = st.columns(3)
    with col1:
        config["long_stay_threshold_hours"] = st.number_input(
            "Long stay threshold (hours)", min_value=1, max_value=24,
            value=int(config["long_stay_threshold_hours"]), key="cfg_long_stay",
        )
    with col2:
        config["long_stay_min_floor"] = st.number_input(
            "Long stay from floor (0-based)", min_value=0, max_value=20,
            value=int(config["long_stay_min_floor"]), key="cfg_long_floor",
        )
    with col3:
        config["short_stay_max_floor"] = st.number_input(
            "Short stay up to floor (0-based)", min_value=0, max_value=20,
            value=int(config["short_stay_max_floor"]), key="cfg_short_floor",
        )
    if st.button("Save Policy", key="btn_save_policy"):
        set_rule_config(config)
        st.success("Policy updated.")

    st.divider()

    # --- Facility Reset ---
    st.subheader("Facility")
    col1, col2 = st.columns(2)
    with col1:
        floors = st.number_input("Floors", min_value=1, max_value=20, value=FLOOR_COUNT, key="reset_floors")
    with col2:
        per_floor = st.number_input("Spots per floor", min_value=1, max_value=100,
                                    value=SPOTS_PER_FLOOR, key="reset_per_floor")

    col_empty, col_demo = st.columns(2)
    with col_empty:
        if st.button("Reset to Empty", key="btn_reset_empty"):
            reset_inventory(build_inventory(int(floors), int(per_floor)))
            st.rerun()
    with col_demo:
        if st.button("Load Demo Occupancy", key="btn_reset_demo"):
            reset_inventory(generate_demo_inventory(DEMO_SEED, int(floors), int(per_floor)))
            st.rerun()

    st.divider()

    # --- Upload / Export ---
    st.subheader("Inventory Upload")
    st.caption("Columns: Spot ID, Floor, Occupied, and for occupied spots Vehicle Type, "
               "License Plate, Arrival Time, Expected Departure.")
    uploaded = st.file_uploader("Inventory file", type=["csv", "xlsx"], key="upload_inventory")
    if st.button("Upload & Validate", type="primary", key="btn_upload_inventory"):
        if uploaded:
            try:
                _load_and_validate(load_file(uploaded))
            except ValueError as e:
                st.error(f"Error loading file: {e}")
        else:
            st.warning("Please upload a file.")

    st.download_button(
        "Export Inventory (CSV)",
        data=inventory_to_df(get_inventory()).to_csv(index=False),
        file_name="inventory.csv",
        mime="text/csv",
        key="btn_export_inventory",
    )
