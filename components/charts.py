"""Plotly chart builders for the Smart Parking Platform."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from models.inventory import Inventory
from config.defaults import MAX_WALK_FOR_SCORE

VEHICLE_TYPE_COLORS = {
    "government": "#4A90D9",
    "private": "#6BBF59",
    "public": "#F5C542",
}
STRATEGY_COLORS = {
    "Smart Algorithm": "#4A90D9",
    "Random": "#E8734A",
    "Sequential": "#A855F7",
}


def occupancy_donut(occupied: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing occupied vs free spots."""
    available = total - occupied
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Available"],
        values=[occupied, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def floor_occupancy_bar(floor_stats: List[dict], title: str = "Occupancy by Floor") -> go.Figure:
    """Stacked bar of occupied and available spots per floor."""
    df = pd.DataFrame(floor_stats)
    df["Floor"] = df["floor"].map(lambda f: f"Floor {f + 1}")
    fig = px.bar(
        df, x="Floor", y=["occupied", "available"],
        barmode="stack",
        labels={"value": "Spots", "variable": ""},
        title=title,
        color_discrete_map={"occupied": "#E8734A", "available": "#4A90D9"},
    )
    fig.update_layout(legend_title_text="", height=400)
    return fig


def vehicle_type_pie(counts: Dict[str, int], title: str = "Parked Vehicles by Type") -> go.Figure:
    labels = list(counts.keys())
    fig = go.Figure(data=[go.Pie(
        labels=[l.capitalize() for l in labels],
        values=[counts[l] for l in labels],
        marker_colors=[VEHICLE_TYPE_COLORS.get(l, "#999999") for l in labels],
        textinfo="value+percent",
    )])
    fig.update_layout(title=title, height=350)
    return fig


def floor_grid_heatmap(inventory: Inventory) -> go.Figure:
    """Spot grid: one row per floor (top floor first), one cell per spot."""
    by_floor = inventory.spots_by_floor()
    floors = sorted(by_floor.keys(), reverse=True)
    width = max(len(spots) for spots in by_floor.values()) if by_floor else 0

    z, text = [], []
    for floor in floors:
        spots = sorted(by_floor[floor], key=lambda s: s.id)
        row_z = [1 if s.is_occupied else 0 for s in spots] + [None] * (width - len(spots))
        row_text = [
            f"Spot {s.id}<br>{s.license_plate} ({s.vehicle_type})" if s.is_occupied else f"Spot {s.id}<br>free"
            for s in spots
        ] + [""] * (width - len(spots))
        z.append(row_z)
        text.append(row_text)

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[f"#{i + 1}" for i in range(width)],
        y=[f"Floor {f + 1}" for f in floors],
        text=text,
        hovertemplate="%{text}<extra></extra>",
        colorscale=[[0, "#4A90D9"], [1, "#E8734A"]],
        zmin=0, zmax=1,
        showscale=False,
        xgap=3, ygap=3,
    ))
    fig.update_layout(
        title="Spot Map (blue = free, orange = occupied)",
        height=max(250, len(floors) * 70),
        yaxis_type="category",
    )
    return fig


def strategy_comparison_bar(rows: List[dict], metric: str = "Overall Score") -> go.Figure:
    """Bar chart of one metric across strategies."""
    df = pd.DataFrame(rows)
    fig = px.bar(
        df, x="Strategy", y=metric,
        color="Strategy",
        color_discrete_map=STRATEGY_COLORS,
        title=f"{metric} by Strategy",
    )
    fig.update_layout(showlegend=False, height=380)
    return fig


def strategy_radar(rows: List[dict]) -> go.Figure:
    """Radar of the 0-100 metrics for each strategy."""
    axes = ["Overall Score", "Utilization %", "Type Optimization %", "Walk Score"]
    fig = go.Figure()
    for r in rows:
        walk_score = max(0.0, 100 - r["Avg Walk (m)"] / MAX_WALK_FOR_SCORE * 100)
        values = [r["Overall Score"], r["Utilization %"], r["Type Optimization %"], walk_score]
        fig.add_trace(go.Scatterpolar(
            r=values + values[:1],
            theta=axes + axes[:1],
            name=r["Strategy"],
            line_color=STRATEGY_COLORS.get(r["Strategy"]),
        ))
    fig.update_layout(
        polar=dict(radialaxis=dict(range=[0, 100])),
        title="Strategy Profile",
        height=420,
    )
    return fig
