"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def render_occupancy_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render a spot table with occupied/free rows color-coded."""
    def color_status(val):
        if val == "Occupied":
            return "background-color: #fde2d8; color: #a83a12; font-weight: bold"
        elif val == "Free":
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        return ""

    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_comparison_table(df: pd.DataFrame, score_column: str = "Overall Score"):
    """Render a strategy comparison table with the best score highlighted."""
    def highlight_best(col):
        best = col.max()
        return ["background-color: #d4edda; font-weight: bold" if v == best else "" for v in col]

    if score_column in df.columns and not df.empty:
        styled = df.style.apply(highlight_best, subset=[score_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
