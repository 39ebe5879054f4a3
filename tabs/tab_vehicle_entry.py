"""Tab 2: Vehicle Entry & Exit. Allocate and release spots."""

import logging
import random

import streamlit as st

from data.session_store import get_service, get_rule_config, get_last_allocation, set_last_allocation
from data.sample_data import random_plate
from models.vehicle import VehicleEntry
from models.allocation import AllocationSuccess
from engine.explainer import allocation_message, explain_decision
from engine.validation import ValidationError
from engine.time_utils import add_hours, now_time_of_day, parse_time_of_day
from engine.api_mapping import build_exit_response
from components.metrics_cards import render_allocation_card
from config.defaults import VEHICLE_TYPES, STRATEGY_LABELS

logger = logging.getLogger(__name__)


def _submit_entry(entry: VehicleEntry, strategy: str):
    service = get_service()
    snapshot = service.snapshot()
    try:
        result = service.allocate(entry, strategy)
    except ValidationError as e:
        st.error(f"Invalid entry: {e}")
        return

    set_last_allocation({
        "success": isinstance(result, AllocationSuccess),
        "message": allocation_message(entry, result),
        "explanation": explain_decision(snapshot, entry, result, strategy, get_rule_config()),
    })


def render(sidebar_state):
    """Render the Vehicle Entry & Exit tab."""
    st.header("Vehicle Entry & Exit")

    col_entry, col_exit = st.columns(2)

    with col_entry:
        st.subheader("Vehicle Entry")
        if st.button("Scan Plate", key="btn_scan_plate", help="Simulated plate recognition"):
            st.session_state["entry_plate"] = random_plate(random.Random())

        with st.form("vehicle_entry_form", clear_on_submit=False):
            plate = st.text_input("License Plate", key="entry_plate")
            vehicle_type = st.radio(
                "Vehicle Type", VEHICLE_TYPES,
                index=VEHICLE_TYPES.index("private"),
                format_func=str.capitalize,
                horizontal=True,
            )
            arrival = st.text_input("Arrival Time (HH:MM)", value=now_time_of_day())
            stay = st.number_input("Stay Duration (hours)", min_value=1, max_value=24, value=1, step=1)
            submitted = st.form_submit_button(
                f"Allocate ({STRATEGY_LABELS.get(sidebar_state.strategy, sidebar_state.strategy)})",
                type="primary",
            )

        if submitted:
            try:
                parse_time_of_day(arrival)
                departure = add_hours(arrival, stay)
            except ValueError:
                st.error("Arrival time must be HH:MM.")
            else:
                entry = VehicleEntry(
                    license_plate=plate.strip().upper(),
                    vehicle_type=vehicle_type,
                    arrival_time=arrival.strip(),
                    expected_departure=departure,
                    stay_duration=stay,
                )
                _submit_entry(entry, sidebar_state.strategy)

        last = get_last_allocation()
        if last:
            render_allocation_card(last)

    with col_exit:
        st.subheader("Vehicle Exit")
        service = get_service()
        parked = service.active_allocations()
        plates = sorted(s.license_plate for s in parked)

        if not plates:
            st.info("No vehicles currently parked.")
        else:
            with st.form("vehicle_exit_form"):
                plate = st.selectbox("License Plate", plates)
                exit_time = st.text_input("Exit Time (HH:MM)", value=now_time_of_day())
                exited = st.form_submit_button("Process Exit")

            if exited:
                try:
                    parse_time_of_day(exit_time)
                    record = service.release(plate, exit_time.strip())
                except ValueError:
                    st.error("Exit time must be HH:MM.")
                except KeyError as e:
                    st.error(str(e))
                else:
                    response = build_exit_response(record)
                    st.success(f"{response['message']} Parked for {response['parking_duration']}.")
                    logger.debug("Exit response: %s", response)
