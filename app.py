"""Smart Parking Allocation Platform: Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.defaults import LOG_LEVEL, LOG_FORMAT
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_dashboard,
    tab_vehicle_entry,
    tab_statistics,
    tab_algorithm_comparison,
    tab_admin,
)

logging.basicConfig(level=os.environ.get("PARKING_LOG_LEVEL", LOG_LEVEL), format=LOG_FORMAT)


def main():
    st.set_page_config(
        page_title="Smart Parking",
        page_icon="🅿️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4, tab5 = st.tabs([
        "🏢 Dashboard",
        "🚗 Entry & Exit",
        "📊 Statistics",
        "⚖️ Algorithm Comparison",
        "⚙️ Admin",
    ])

    with tab1:
        tab_dashboard.render(sidebar_state)
    with tab2:
        tab_vehicle_entry.render(sidebar_state)
    with tab3:
        tab_statistics.render(sidebar_state)
    with tab4:
        tab_algorithm_comparison.render(sidebar_state)
    with tab5:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
