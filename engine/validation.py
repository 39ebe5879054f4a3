"""Request validation for allocation entries."""

import math

from models.vehicle import VehicleEntry
from engine.time_utils import parse_time_of_day
from config.defaults import VEHICLE_TYPES, STRATEGIES


class ValidationError(ValueError):
    """An allocation request that violates the caller contract."""


def validate_entry(entry: VehicleEntry) -> None:
    """Reject malformed entries before any allocation policy runs."""
    if not entry.license_plate or not entry.license_plate.strip():
        raise ValidationError("License plate is required.")

    if entry.vehicle_type not in VEHICLE_TYPES:
        raise ValidationError(
            f"Unknown vehicle type: {entry.vehicle_type!r}. "
            f"Expected one of: {', '.join(VEHICLE_TYPES)}."
        )

    # bool is an int subclass; True is not a duration
    if isinstance(entry.stay_duration, bool) or not isinstance(entry.stay_duration, (int, float)):
        raise ValidationError(f"Stay duration must be a number, got {entry.stay_duration!r}.")
    if not math.isfinite(entry.stay_duration) or entry.stay_duration <= 0:
        raise ValidationError(f"Stay duration must be positive, got {entry.stay_duration}.")

    priority = entry.priority_level
    if priority is not None and (isinstance(priority, bool) or not isinstance(priority, int)):
        raise ValidationError(f"Priority level must be an integer, got {priority!r}.")

    for field_name in ("arrival_time", "expected_departure"):
        value = getattr(entry, field_name)
        if value:
            try:
                parse_time_of_day(value)
            except ValueError:
                raise ValidationError(f"{field_name} must be HH:MM, got {value!r}.") from None


def validate_strategy(strategy: str) -> None:
    if strategy not in STRATEGIES:
        raise ValidationError(
            f"Unknown allocation strategy: {strategy!r}. "
            f"Expected one of: {', '.join(STRATEGIES)}."
        )
