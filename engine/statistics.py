"""Occupancy statistics over an inventory snapshot."""

from typing import Dict, List

from models.inventory import Inventory
from config.defaults import VEHICLE_TYPES, STRATEGIES


def get_floor_statistics(inventory: Inventory) -> List[dict]:
    """Compute occupancy stats per floor."""
    results = []
    for floor, spots in sorted(inventory.spots_by_floor().items()):
        total = len(spots)
        occupied = sum(1 for s in spots if s.is_occupied)
        results.append({
            "floor": floor,
            "total": total,
            "occupied": occupied,
            "available": total - occupied,
            "occupancy_rate": occupied / total * 100 if total > 0 else 0,
        })
    return results


def get_vehicle_type_counts(inventory: Inventory) -> Dict[str, int]:
    counts = {vt: 0 for vt in VEHICLE_TYPES}
    for s in inventory.occupied:
        if s.vehicle_type in counts:
            counts[s.vehicle_type] += 1
    return counts


def get_strategy_counts(inventory: Inventory) -> Dict[str, int]:
    """Current occupants by the strategy that placed them (unknown for seeded spots)."""
    counts = {st: 0 for st in STRATEGIES}
    counts["unknown"] = 0
    for s in inventory.occupied:
        counts[s.allocated_by if s.allocated_by in counts else "unknown"] += 1
    return counts


def get_parking_statistics(inventory: Inventory) -> dict:
    total = len(inventory)
    occupied = len(inventory.occupied)
    return {
        "total_spots": total,
        "occupied_spots": occupied,
        "available_spots": total - occupied,
        "occupancy_rate": occupied / total * 100 if total > 0 else 0,
        "vehicle_types": get_vehicle_type_counts(inventory),
        "floor_statistics": get_floor_statistics(inventory),
        "strategies": get_strategy_counts(inventory),
    }
