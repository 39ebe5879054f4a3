"""Tests for sample data, inventory loading and validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from models.spot import ParkingSpot
from models.inventory import Inventory
from data.sample_data import (
    build_inventory, generate_demo_inventory, generate_sample_vehicles,
)
from data.loader import parse_inventory, inventory_to_df
from data.validator import validate_inventory
from engine.validation import validate_entry
from engine.time_utils import add_hours, minutes_between


class TestBuildInventory:
    def test_floor_major_ids(self):
        inv = build_inventory(4, 10)
        assert len(inv) == 40
        assert [s.id for s in inv.spots] == list(range(1, 41))
        assert inv.get(11).floor == 1
        assert inv.get(40).floor == 3
        assert len(inv.available) == 40

    def test_rejects_empty_facility(self):
        with pytest.raises(ValueError):
            build_inventory(0, 10)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            Inventory([ParkingSpot(1, 0), ParkingSpot(1, 1)])


class TestDemoInventory:
    def test_first_spot_of_each_floor_free(self):
        inv = generate_demo_inventory(seed=1)
        for spot_id in (1, 11, 21, 31):
            assert not inv.get(spot_id).is_occupied

    def test_occupied_spots_are_complete(self):
        inv = generate_demo_inventory(seed=2)
        for s in inv.occupied:
            assert s.license_plate and s.vehicle_type and s.arrival_time and s.expected_departure

    def test_seeded(self):
        assert generate_demo_inventory(seed=3) == generate_demo_inventory(seed=3)


class TestSampleVehicles:
    def test_vehicles_are_valid(self):
        vehicles = generate_sample_vehicles(25, seed=4)
        assert len(vehicles) == 25
        for v in vehicles:
            validate_entry(v)


class TestLoader:
    def test_round_trip_through_dataframe(self):
        inv = generate_demo_inventory(seed=5)
        assert parse_inventory(inventory_to_df(inv)) == inv

    def test_parse_sorts_floor_major(self):
        df = pd.DataFrame([
            {"Spot ID": 3, "Floor": 1, "Occupied": False},
            {"Spot ID": 1, "Floor": 0, "Occupied": "yes", "Vehicle Type": "Public",
             "License Plate": "ab12", "Arrival Time": "08:00", "Expected Departure": "09:00"},
        ])
        inv = parse_inventory(df)
        assert [s.id for s in inv.spots] == [1, 3]
        assert inv.get(1).vehicle_type == "public"
        assert inv.get(1).license_plate == "AB12"
        assert not inv.get(3).is_occupied


class TestValidator:
    def test_valid_export(self):
        result = validate_inventory(inventory_to_df(generate_demo_inventory(seed=6)))
        assert result.is_valid
        assert result.errors == []

    def test_missing_columns(self):
        result = validate_inventory(pd.DataFrame([{"Spot ID": 1}]))
        assert not result.is_valid
        assert "Missing required columns" in result.errors[0]

    def test_duplicate_ids(self):
        df = pd.DataFrame([
            {"Spot ID": 1, "Floor": 0, "Occupied": False},
            {"Spot ID": 1, "Floor": 1, "Occupied": False},
        ])
        assert not validate_inventory(df).is_valid

    def test_occupied_without_plate(self):
        df = pd.DataFrame([
            {"Spot ID": 1, "Floor": 0, "Occupied": True, "Vehicle Type": "private",
             "License Plate": "", "Arrival Time": "08:00", "Expected Departure": "09:00"},
        ])
        result = validate_inventory(df)
        assert not result.is_valid
        assert "without a license plate" in result.errors[0]

    def test_unknown_vehicle_type(self):
        df = pd.DataFrame([
            {"Spot ID": 1, "Floor": 0, "Occupied": True, "Vehicle Type": "tank",
             "License Plate": "T1", "Arrival Time": "08:00", "Expected Departure": "09:00"},
        ])
        assert not validate_inventory(df).is_valid


class TestTimeUtils:
    def test_add_hours_wraps_midnight(self):
        assert add_hours("22:30", 3) == "01:30"

    def test_add_fractional_hours(self):
        assert add_hours("09:00", 1.5) == "10:30"

    def test_minutes_between(self):
        assert minutes_between("09:00", "11:15") == 135

    def test_minutes_between_overnight(self):
        assert minutes_between("23:00", "01:00") == 120

    def test_malformed_time(self):
        with pytest.raises(ValueError):
            add_hours("9am", 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
