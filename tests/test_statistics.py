"""Tests for occupancy statistics."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.statistics import (
    get_parking_statistics, get_floor_statistics, get_vehicle_type_counts, get_strategy_counts,
)
from data.sample_data import build_inventory


def make_inventory():
    inv = build_inventory(2, 4)
    inv.get(1).occupy("G1", "government", "08:00", "10:00", "algorithm")
    inv.get(2).occupy("P1", "private", "08:00", "10:00", "random")
    inv.get(6).occupy("U1", "public", "08:00", "10:00")
    return inv


class TestParkingStatistics:
    def test_totals(self):
        stats = get_parking_statistics(make_inventory())
        assert stats["total_spots"] == 8
        assert stats["occupied_spots"] == 3
        assert stats["available_spots"] == 5
        assert abs(stats["occupancy_rate"] - 37.5) < 0.01

    def test_floor_statistics(self):
        floors = get_floor_statistics(make_inventory())
        assert [f["floor"] for f in floors] == [0, 1]
        assert floors[0]["occupied"] == 2
        assert floors[1]["available"] == 3
        assert floors[0]["occupancy_rate"] == 50

    def test_vehicle_type_counts(self):
        assert get_vehicle_type_counts(make_inventory()) == {
            "government": 1, "private": 1, "public": 1,
        }

    def test_strategy_counts_mark_seeded_spots_unknown(self):
        counts = get_strategy_counts(make_inventory())
        assert counts["algorithm"] == 1
        assert counts["random"] == 1
        assert counts["sequential"] == 0
        assert counts["unknown"] == 1

    def test_empty_facility(self):
        stats = get_parking_statistics(build_inventory(1, 5))
        assert stats["occupancy_rate"] == 0
        assert sum(stats["vehicle_types"].values()) == 0
