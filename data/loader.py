"""File upload parsing: CSV/XLSX into an Inventory and back."""

from typing import List

import pandas as pd

from models.spot import ParkingSpot
from models.inventory import Inventory

COLUMN_MAP = {
    "Spot ID": "id",
    "Floor": "floor",
    "Occupied": "is_occupied",
    "Vehicle Type": "vehicle_type",
    "License Plate": "license_plate",
    "Arrival Time": "arrival_time",
    "Expected Departure": "expected_departure",
    "Allocated By": "allocated_by",
}


def _text(row, column: str) -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def parse_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1", "occupied")
    return bool(value) and not pd.isna(value)


def parse_inventory(df: pd.DataFrame) -> Inventory:
    """Convert an inventory DataFrame into an Inventory ordered floor-major."""
    spots: List[ParkingSpot] = []
    for _, row in df.iterrows():
        spot = ParkingSpot(id=int(row["Spot ID"]), floor=int(row["Floor"]))
        if parse_flag(row.get("Occupied", False)):
            spot.occupy(
                license_plate=_text(row, "License Plate").upper(),
                vehicle_type=_text(row, "Vehicle Type").lower(),
                arrival_time=_text(row, "Arrival Time"),
                expected_departure=_text(row, "Expected Departure"),
                allocated_by=_text(row, "Allocated By"),
            )
        spots.append(spot)
    spots.sort(key=lambda s: (s.floor, s.id))
    return Inventory(spots=spots)


def inventory_to_df(inventory: Inventory) -> pd.DataFrame:
    rows = []
    for s in inventory.spots:
        rows.append({
            "Spot ID": s.id,
            "Floor": s.floor,
            "Occupied": s.is_occupied,
            "Vehicle Type": s.vehicle_type,
            "License Plate": s.license_plate,
            "Arrival Time": s.arrival_time,
            "Expected Departure": s.expected_departure,
            "Allocated By": s.allocated_by,
        })
    return pd.DataFrame(rows, columns=list(COLUMN_MAP.keys()))


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
