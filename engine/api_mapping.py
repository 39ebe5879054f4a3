"""Request/response payload mapping for the parking backend contract.

Covers POST /parking/allocate, GET /parking/status and POST /parking/exit
bodies as plain dicts. No transport is involved.
"""

from datetime import datetime, timedelta
from typing import Optional

from models.spot import ParkingSpot
from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.history import ExitRecord
from models.allocation import AllocationSuccess, AllocationResult
from engine.explainer import allocation_message
from engine.validation import ValidationError, validate_entry
from config.defaults import (
    PLATE_TYPE_CODES, BODY_TYPE_CODES, DEFAULT_PRIORITY, MIN_PRIORITY, MAX_PRIORITY,
)

_PLATE_TYPES_BY_CODE = {code: vt for vt, code in PLATE_TYPE_CODES.items()}


def vehicle_type_to_code(vehicle_type: str) -> int:
    """0 = private, 1 = public, 2 = government."""
    try:
        return PLATE_TYPE_CODES[vehicle_type]
    except KeyError:
        raise ValidationError(f"Unknown vehicle type: {vehicle_type!r}") from None


def vehicle_type_from_code(code: int) -> str:
    try:
        return _PLATE_TYPES_BY_CODE[code]
    except KeyError:
        raise ValidationError(f"Unknown vehicle plate type code: {code!r}") from None


def body_type_code(vehicle_type: str) -> int:
    """Vehicle body code: public vehicles travel as trucks (1), the rest as cars (0)."""
    return BODY_TYPE_CODES.get(vehicle_type, 0)


def priority_level(vehicle_type: str, override: Optional[int] = None) -> int:
    if override is not None:
        return min(max(override, MIN_PRIORITY), MAX_PRIORITY)
    return DEFAULT_PRIORITY.get(vehicle_type, DEFAULT_PRIORITY["private"])


def build_allocation_request(entry: VehicleEntry, arrival: Optional[datetime] = None) -> dict:
    """Body for POST /parking/allocate. Departure is arrival plus the stay duration."""
    validate_entry(entry)
    arrival = arrival or datetime.now()
    departure = arrival + timedelta(hours=entry.stay_duration)
    return {
        "vehicle_plate_num": entry.license_plate,
        "vehicle_plate_type": vehicle_type_to_code(entry.vehicle_type),
        "vehicle_type": body_type_code(entry.vehicle_type),
        "arrival_time": arrival.isoformat(),
        "departure_time": departure.isoformat(),
        "priority_level": priority_level(entry.vehicle_type, entry.priority_level),
    }


def parse_allocation_request(payload: dict) -> VehicleEntry:
    """Turn an allocate body back into a VehicleEntry with HH:MM times."""
    missing = [k for k in ("vehicle_plate_num", "vehicle_plate_type", "arrival_time", "departure_time")
               if k not in payload]
    if missing:
        raise ValidationError(f"Allocation request missing fields: {', '.join(missing)}")

    try:
        arrival = datetime.fromisoformat(payload["arrival_time"])
        departure = datetime.fromisoformat(payload["departure_time"])
    except (TypeError, ValueError):
        raise ValidationError("arrival_time and departure_time must be ISO timestamps") from None
    if (arrival.tzinfo is None) != (departure.tzinfo is None):
        raise ValidationError("arrival_time and departure_time must both carry a UTC offset or neither")

    entry = VehicleEntry(
        license_plate=str(payload["vehicle_plate_num"]),
        vehicle_type=vehicle_type_from_code(payload["vehicle_plate_type"]),
        arrival_time=arrival.strftime("%H:%M"),
        expected_departure=departure.strftime("%H:%M"),
        stay_duration=(departure - arrival).total_seconds() / 3600,
        priority_level=payload.get("priority_level"),
    )
    validate_entry(entry)
    return entry


def build_allocation_response(entry: VehicleEntry, result: AllocationResult) -> dict:
    """Capacity exhaustion is success: false, not an error status."""
    message = allocation_message(entry, result)
    if isinstance(result, AllocationSuccess):
        return {
            "success": True,
            "spot_id": result.spot_id,
            "floor": result.floor,
            "message": message,
        }
    return {"success": False, "message": message}


def spot_to_status(spot: ParkingSpot) -> dict:
    status = {
        "id": spot.id,
        "floor": spot.floor,
        "status": "occupied" if spot.is_occupied else "available",
    }
    if spot.is_occupied:
        status.update({
            "vehicle_plate_num": spot.license_plate,
            "vehicle_plate_type": vehicle_type_to_code(spot.vehicle_type),
            "vehicle_type": body_type_code(spot.vehicle_type),
            "arrival_time": spot.arrival_time,
            "departure_time": spot.expected_departure,
            "allocated_by": spot.allocated_by,
        })
    return status


def build_status_response(inventory: Inventory, timestamp: Optional[datetime] = None) -> dict:
    """Body for GET /parking/status."""
    return {
        "spots": [spot_to_status(s) for s in inventory.spots],
        "timestamp": (timestamp or datetime.now()).isoformat(),
    }


def status_to_inventory(payload: dict) -> Inventory:
    """Rebuild an inventory from a status body."""
    spots = []
    for item in payload.get("spots", []):
        occupied = item.get("status") == "occupied"
        spot = ParkingSpot(id=int(item["id"]), floor=int(item["floor"]))
        if occupied:
            missing = [k for k in ("vehicle_plate_num", "vehicle_plate_type") if item.get(k) in (None, "")]
            if missing:
                raise ValidationError(
                    f"Occupied spot {spot.id} missing fields: {', '.join(missing)}"
                )
            spot.occupy(
                license_plate=item["vehicle_plate_num"],
                vehicle_type=vehicle_type_from_code(item["vehicle_plate_type"]),
                arrival_time=item.get("arrival_time", ""),
                expected_departure=item.get("departure_time", ""),
                allocated_by=item.get("allocated_by", ""),
            )
        spots.append(spot)
    return Inventory(spots=spots)


def build_exit_response(record: ExitRecord) -> dict:
    """Body returned by POST /parking/exit. Fees are not computed here."""
    return {
        "success": True,
        "vehicle_plate_num": record.license_plate,
        "spot_id": record.spot_id,
        "floor": record.floor,
        "parking_duration": record.duration_label,
        "message": f"Vehicle {record.license_plate} exited from spot {record.spot_id}.",
    }
