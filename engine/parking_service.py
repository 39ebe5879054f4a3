"""Single-writer owner of the parking inventory.

All mutations go through ParkingService so that choosing a spot and marking it
occupied happen as one unit. The allocator itself stays a pure function over a
snapshot.
"""

import logging
import random
import threading
from typing import List, Optional

from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.history import ExitRecord
from models.allocation import AllocationSuccess, AllocationFailure, AllocationResult
from engine.strategies import allocate_with_strategy
from engine.validation import ValidationError, validate_entry
from engine.time_utils import minutes_between, now_time_of_day
from config.defaults import DEFAULT_STRATEGY, NO_CAPACITY

logger = logging.getLogger(__name__)


class ParkingService:
    def __init__(
        self,
        inventory: Inventory,
        rng: Optional[random.Random] = None,
        rule_config: Optional[dict] = None,
    ):
        self._inventory = inventory
        self._history: List[ExitRecord] = []
        self._lock = threading.Lock()
        self._rng = rng or random.Random()
        self.rule_config = rule_config or {}

    def allocate(self, entry: VehicleEntry, strategy: str = DEFAULT_STRATEGY) -> AllocationResult:
        """Pick a spot and commit the occupancy under the inventory lock."""
        validate_entry(entry)

        with self._lock:
            if self._inventory.find_by_plate(entry.license_plate):
                raise ValidationError(f"Vehicle {entry.license_plate} is already parked.")

            result = allocate_with_strategy(
                self._inventory, entry, strategy, self._rng, self.rule_config,
            )
            if not isinstance(result, AllocationSuccess):
                logger.info("Allocation refused for %s: %s", entry.license_plate, result.reason)
                return result

            spot = self._inventory.get(result.spot_id)
            if spot is None or spot.is_occupied:
                # Only reachable if the inventory was mutated outside the service
                logger.error("Spot %s no longer free at commit", result.spot_id)
                return AllocationFailure(reason=NO_CAPACITY)

            spot.occupy(
                license_plate=entry.license_plate.strip().upper(),
                vehicle_type=entry.vehicle_type,
                arrival_time=entry.arrival_time,
                expected_departure=entry.expected_departure,
                allocated_by=strategy,
            )

        logger.info(
            "Vehicle %s (%s) parked at spot %d, floor %d via %s",
            spot.license_plate, entry.vehicle_type, spot.id, spot.floor, strategy,
        )
        return result

    def release(self, license_plate: str, exit_time: Optional[str] = None) -> ExitRecord:
        """Free the spot held by a plate. Raises KeyError when the plate is not parked."""
        with self._lock:
            spot = self._inventory.find_by_plate(license_plate)
            if spot is None:
                raise KeyError(f"No active allocation for {license_plate}")
            return self._release_locked(spot, exit_time)

    def release_spot(self, spot_id: int, exit_time: Optional[str] = None) -> ExitRecord:
        """Free a spot by id. Raises KeyError for unknown or already free spots."""
        with self._lock:
            spot = self._inventory.get(spot_id)
            if spot is None or not spot.is_occupied:
                raise KeyError(f"Spot {spot_id} is not occupied")
            return self._release_locked(spot, exit_time)

    def _release_locked(self, spot, exit_time: Optional[str]) -> ExitRecord:
        exit_time = exit_time or now_time_of_day()
        duration = minutes_between(spot.arrival_time, exit_time) if spot.arrival_time else 0

        record = ExitRecord(
            license_plate=spot.license_plate,
            vehicle_type=spot.vehicle_type,
            spot_id=spot.id,
            floor=spot.floor,
            arrival_time=spot.arrival_time,
            exit_time=exit_time,
            duration_minutes=duration,
            allocated_by=spot.allocated_by,
        )

        spot.clear()

        self._history.append(record)
        logger.info("Vehicle %s left spot %d after %d minutes",
                    record.license_plate, record.spot_id, duration)
        return record

    def snapshot(self) -> Inventory:
        with self._lock:
            return self._inventory.copy()

    def history(self, license_plate: Optional[str] = None) -> List[ExitRecord]:
        """Exit records, most recent first."""
        with self._lock:
            records = list(reversed(self._history))
        if license_plate:
            plate = license_plate.strip().upper()
            records = [r for r in records if r.license_plate.upper() == plate]
        return records

    def active_allocations(self, license_plate: Optional[str] = None):
        snap = self.snapshot()
        spots = snap.occupied
        if license_plate:
            plate = license_plate.strip().upper()
            spots = [s for s in spots if s.license_plate.upper() == plate]
        return spots
