"""Schema validation for uploaded inventory files."""

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from data.loader import parse_flag
from config.defaults import VEHICLE_TYPES


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


INVENTORY_REQUIRED_COLUMNS = [
    "Spot ID",
    "Floor",
    "Occupied",
]

OCCUPANT_COLUMNS = [
    "Vehicle Type",
    "License Plate",
    "Arrival Time",
    "Expected Departure",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_inventory(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, INVENTORY_REQUIRED_COLUMNS, "Inventory")
    if not result.is_valid:
        return result

    if (df["Spot ID"] <= 0).any():
        result.is_valid = False
        result.errors.append("Inventory: Spot ID must be a positive integer.")

    if (df["Floor"] < 0).any():
        result.is_valid = False
        result.errors.append("Inventory: Floor cannot be negative.")

    dupes = df.duplicated(subset=["Spot ID"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Inventory: Duplicate spot ids: {df[dupes]['Spot ID'].unique().tolist()}")

    occupied = df[df["Occupied"].map(parse_flag)]
    if occupied.empty:
        return result

    missing_occupant = [c for c in OCCUPANT_COLUMNS if c not in df.columns]
    if missing_occupant:
        result.is_valid = False
        result.errors.append(
            f"Inventory: Occupied spots need columns: {', '.join(missing_occupant)}"
        )
        return result

    blank_plates = occupied["License Plate"].isna() | (occupied["License Plate"].astype(str).str.strip() == "")
    if blank_plates.any():
        result.is_valid = False
        result.errors.append(
            f"Inventory: Occupied spots without a license plate: {occupied[blank_plates]['Spot ID'].tolist()}"
        )

    bad_types = ~occupied["Vehicle Type"].astype(str).str.strip().str.lower().isin(VEHICLE_TYPES)
    if bad_types.any():
        result.is_valid = False
        result.errors.append(
            f"Inventory: Unknown vehicle types on spots: {occupied[bad_types]['Spot ID'].tolist()}"
        )

    plates = occupied["License Plate"].astype(str).str.strip().str.upper()
    if plates[~blank_plates].duplicated().any():
        result.warnings.append("Inventory: The same license plate occupies more than one spot.")

    return result
