"""Typed wrapper around st.session_state for application data."""

import random
from typing import Dict, List, Optional

import streamlit as st

from models.inventory import Inventory
from models.vehicle import VehicleEntry
from engine.parking_service import ParkingService
from engine.comparison import StrategyPerformance
from data.sample_data import generate_demo_inventory, generate_sample_vehicles
from config.defaults import (
    DEFAULT_STRATEGY, DEMO_SEED, LONG_STAY_THRESHOLD_HOURS, LONG_STAY_MIN_FLOOR,
    SHORT_STAY_MAX_FLOOR,
)


def _default_rule_config() -> dict:
    return {
        "long_stay_threshold_hours": LONG_STAY_THRESHOLD_HOURS,
        "long_stay_min_floor": LONG_STAY_MIN_FLOOR,
        "short_stay_max_floor": SHORT_STAY_MAX_FLOOR,
    }


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    if "rule_config" not in st.session_state:
        st.session_state["rule_config"] = _default_rule_config()
    if "parking_service" not in st.session_state:
        st.session_state["parking_service"] = ParkingService(
            generate_demo_inventory(DEMO_SEED),
            rng=random.Random(),
            rule_config=st.session_state["rule_config"],
        )
    defaults = {
        "active_strategy": DEFAULT_STRATEGY,
        "last_allocation": None,
        "comparison_results": {},
        "comparison_vehicles": generate_sample_vehicles(20, DEMO_SEED),
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_service() -> ParkingService:
    return st.session_state["parking_service"]


def get_inventory() -> Inventory:
    """Read-only snapshot; mutate through the service."""
    return get_service().snapshot()


def get_active_strategy() -> str:
    return st.session_state.get("active_strategy", DEFAULT_STRATEGY)


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def get_last_allocation() -> Optional[dict]:
    return st.session_state.get("last_allocation")


def get_comparison_results() -> Dict[str, StrategyPerformance]:
    return st.session_state.get("comparison_results", {})


def get_comparison_vehicles() -> List[VehicleEntry]:
    return st.session_state.get("comparison_vehicles", [])


# --- Setters ---

def set_active_strategy(strategy: str):
    st.session_state["active_strategy"] = strategy


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config
    get_service().rule_config = config


def set_last_allocation(record: Optional[dict]):
    st.session_state["last_allocation"] = record


def set_comparison_results(results: Dict[str, StrategyPerformance]):
    st.session_state["comparison_results"] = results


def set_comparison_vehicles(vehicles: List[VehicleEntry]):
    st.session_state["comparison_vehicles"] = vehicles


def reset_inventory(inventory: Inventory):
    """Replace the facility with a fresh service; exit history starts over."""
    st.session_state["parking_service"] = ParkingService(
        inventory, rng=random.Random(), rule_config=get_rule_config(),
    )
    st.session_state["last_allocation"] = None
    st.session_state["comparison_results"] = {}
