"""Global sidebar controls for strategy selection and facility status."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import get_active_strategy, set_active_strategy, get_inventory
from config.defaults import STRATEGIES, STRATEGY_LABELS


@dataclass
class SidebarState:
    strategy: str


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Smart Parking")
        st.divider()

        current = get_active_strategy()
        strategy = st.selectbox(
            "Allocation Strategy",
            options=STRATEGIES,
            format_func=lambda s: STRATEGY_LABELS.get(s, s),
            index=STRATEGIES.index(current) if current in STRATEGIES else 0,
            key="sidebar_strategy",
        )
        if strategy != current:
            set_active_strategy(strategy)

        st.divider()

        inventory = get_inventory()
        free = len(inventory.available)
        if free == 0:
            st.error("Facility full")
        else:
            st.success(f"{free} of {len(inventory)} spots free")
        st.caption(f"Floors: {len(inventory.floors)}")

    return SidebarState(strategy=strategy)
