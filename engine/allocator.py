"""Rule-based spot allocation: the core parking heuristic."""

import logging
from typing import List, Optional, Tuple

from models.spot import ParkingSpot
from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.allocation import AllocationSuccess, AllocationFailure, AllocationResult
from engine.validation import validate_entry
from config.defaults import (
    LONG_STAY_THRESHOLD_HOURS, LONG_STAY_MIN_FLOOR, SHORT_STAY_MAX_FLOOR,
    NO_CAPACITY,
)

logger = logging.getLogger(__name__)


def _government_key(spot: ParkingSpot):
    return (spot.floor, spot.id)


def _public_key(spot: ParkingSpot):
    # Higher id is modelled as closer to the exit
    return -spot.id


def _private_key(spot: ParkingSpot):
    return spot.id


def select_candidates(
    available: List[ParkingSpot],
    entry: VehicleEntry,
    rule_config: Optional[dict] = None,
) -> Tuple[List[ParkingSpot], str, bool]:
    """Apply the vehicle-type policy to the free spots.

    Returns (ordered candidates, policy name, whether the filter fell back to
    all available spots).
    """
    cfg = rule_config or {}
    threshold = cfg.get("long_stay_threshold_hours", LONG_STAY_THRESHOLD_HOURS)
    long_min_floor = cfg.get("long_stay_min_floor", LONG_STAY_MIN_FLOOR)
    short_max_floor = cfg.get("short_stay_max_floor", SHORT_STAY_MAX_FLOOR)

    if entry.vehicle_type == "government":
        return sorted(available, key=_government_key), "government_low_floor", False

    if entry.vehicle_type == "public":
        return sorted(available, key=_public_key), "public_near_exit", False

    if entry.stay_duration > threshold:
        policy = "private_long_stay"
        filtered = [s for s in available if s.floor >= long_min_floor]
    else:
        policy = "private_short_stay"
        filtered = [s for s in available if s.floor <= short_max_floor]

    fell_back = not filtered
    if fell_back:
        filtered = list(available)
    return sorted(filtered, key=_private_key), policy, fell_back


def allocate(
    inventory: Inventory,
    entry: VehicleEntry,
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Choose a free spot for the vehicle. Does not mutate the inventory."""
    validate_entry(entry)

    # Step 1: Free spots
    available = inventory.available
    if not available:
        logger.info("No capacity for %s (%s)", entry.license_plate, entry.vehicle_type)
        return AllocationFailure(reason=NO_CAPACITY)

    # Step 2-4: Policy ordering with fallback; head of the ordering wins
    candidates, policy, fell_back = select_candidates(available, entry, rule_config)
    chosen = candidates[0]

    logger.debug(
        "Allocated spot %d (floor %d) to %s via %s%s",
        chosen.id, chosen.floor, entry.license_plate, policy,
        " after fallback" if fell_back else "",
    )
    return AllocationSuccess(spot_id=chosen.id, floor=chosen.floor)


def preferred_spot_ids(
    inventory: Inventory,
    entry: VehicleEntry,
    rule_config: Optional[dict] = None,
) -> set:
    """Spot ids the smart policy considers a good match for this vehicle.

    Government: any free spot on the lowest free floor. Public: the highest free
    id. Private: the filtered zone, or every free spot when the zone is full.
    """
    available = inventory.available
    if not available:
        return set()

    if entry.vehicle_type == "government":
        lowest = min(s.floor for s in available)
        return {s.id for s in available if s.floor == lowest}

    if entry.vehicle_type == "public":
        return {max(s.id for s in available)}

    candidates, _, _ = select_candidates(available, entry, rule_config)
    return {s.id for s in candidates}
