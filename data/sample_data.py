"""Generate synthetic inventories and vehicle batches for the Smart Parking Platform."""

import os
import random
import string
from typing import List, Optional

import pandas as pd

from models.spot import ParkingSpot
from models.vehicle import VehicleEntry
from models.inventory import Inventory
from engine.time_utils import add_hours
from data.loader import inventory_to_df
from config.defaults import (
    FLOOR_COUNT, SPOTS_PER_FLOOR, DEMO_OCCUPANCY_RATE, DEMO_SEED, VEHICLE_TYPES,
)


def build_inventory(floor_count: int = FLOOR_COUNT, spots_per_floor: int = SPOTS_PER_FLOOR) -> Inventory:
    """All-free floor-major layout; ids run 1..floor_count*spots_per_floor."""
    if floor_count <= 0 or spots_per_floor <= 0:
        raise ValueError("Facility needs at least one floor and one spot per floor.")
    spots = [
        ParkingSpot(id=floor * spots_per_floor + idx + 1, floor=floor)
        for floor in range(floor_count)
        for idx in range(spots_per_floor)
    ]
    return Inventory(spots=spots)


def random_plate(rng: random.Random) -> str:
    """Stand-in for plate recognition: three letters and three digits."""
    letters = "".join(rng.choice(string.ascii_uppercase) for _ in range(3))
    return f"{letters}{rng.randint(0, 999):03d}"


def generate_demo_inventory(
    seed: Optional[int] = DEMO_SEED,
    floor_count: int = FLOOR_COUNT,
    spots_per_floor: int = SPOTS_PER_FLOOR,
    occupancy_rate: float = DEMO_OCCUPANCY_RATE,
) -> Inventory:
    """Partly occupied facility; the first spot of every floor is left free."""
    rng = random.Random(seed)
    inventory = build_inventory(floor_count, spots_per_floor)
    for spot in inventory.spots:
        first_on_floor = (spot.id - 1) % spots_per_floor == 0
        if first_on_floor or rng.random() >= occupancy_rate:
            continue
        spot.occupy(
            license_plate=random_plate(rng),
            vehicle_type=rng.choice(VEHICLE_TYPES),
            arrival_time="09:00",
            expected_departure="17:00",
        )
    return inventory


def generate_sample_vehicles(count: int = 20, seed: Optional[int] = DEMO_SEED) -> List[VehicleEntry]:
    """Random arrivals across all vehicle types with 1-8 hour stays."""
    rng = random.Random(seed)
    vehicles = []
    for _ in range(count):
        arrival = f"{rng.randint(7, 12):02d}:{rng.choice([0, 15, 30, 45]):02d}"
        stay = rng.randint(1, 8)
        vehicles.append(VehicleEntry(
            license_plate=random_plate(rng),
            vehicle_type=rng.choice(VEHICLE_TYPES),
            arrival_time=arrival,
            expected_departure=add_hours(arrival, stay),
            stay_duration=stay,
        ))
    return vehicles


def generate_inventory_df(seed: Optional[int] = DEMO_SEED) -> pd.DataFrame:
    return inventory_to_df(generate_demo_inventory(seed))


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    os.makedirs(out, exist_ok=True)
    generate_inventory_df().to_csv(os.path.join(out, "inventory.csv"), index=False)
    print("Sample inventory written to sample_files/inventory.csv")
