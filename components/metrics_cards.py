"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_allocation_card(record: dict):
    """Show the outcome of the latest allocation request."""
    if record.get("success"):
        st.success(record["message"], icon="✅")
    else:
        st.warning(record["message"], icon="🟡")
    steps = record.get("explanation") or []
    if steps:
        with st.expander("Why this spot?"):
            for step in steps:
                st.markdown(f"- {step}")
