"""Tests for alternative strategies and strategy dispatch."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random

import pytest

from models.vehicle import VehicleEntry
from models.allocation import AllocationSuccess, AllocationFailure
from engine.strategies import allocate_sequential, allocate_random, allocate_with_strategy
from engine.validation import ValidationError
from data.sample_data import build_inventory


def make_entry(vehicle_type="government", stay=1):
    return VehicleEntry("XYZ789", vehicle_type, "09:00", "10:00", stay)


def make_inventory(free_ids, floors=4, per_floor=10):
    inv = build_inventory(floors, per_floor)
    for s in inv.spots:
        if s.id not in free_ids:
            s.occupy(f"OCC{s.id}", "public", "08:00", "18:00")
    return inv


class TestSequential:
    def test_picks_lowest_free_id_regardless_of_type(self):
        inv = make_inventory(free_ids={8, 21, 40})
        for vt in ("government", "public", "private"):
            assert allocate_sequential(inv, make_entry(vt)) == AllocationSuccess(8, 0)

    def test_full(self):
        assert isinstance(allocate_sequential(make_inventory(set()), make_entry()), AllocationFailure)


class TestRandom:
    def test_only_free_spots_are_chosen(self):
        free = {3, 19, 27}
        inv = make_inventory(free_ids=free)
        rng = random.Random(7)
        for _ in range(30):
            assert allocate_random(inv, make_entry(), rng).spot_id in free

    def test_seeded_rng_is_reproducible(self):
        inv = make_inventory(free_ids=set(range(1, 41)))
        a = allocate_random(inv, make_entry(), random.Random(99))
        b = allocate_random(inv, make_entry(), random.Random(99))
        assert a == b

    def test_full(self):
        assert isinstance(allocate_random(make_inventory(set()), make_entry()), AllocationFailure)

    def test_validates_entry(self):
        with pytest.raises(ValidationError):
            allocate_random(build_inventory(), make_entry(stay=0))


class TestDispatch:
    def test_algorithm_routes_to_policy(self):
        inv = make_inventory(free_ids={8, 40})
        assert allocate_with_strategy(inv, make_entry("public"), "algorithm").spot_id == 40

    def test_sequential_route(self):
        inv = make_inventory(free_ids={8, 40})
        assert allocate_with_strategy(inv, make_entry("public"), "sequential").spot_id == 8

    def test_random_route(self):
        inv = make_inventory(free_ids={8, 40})
        result = allocate_with_strategy(inv, make_entry("public"), "random", random.Random(1))
        assert result.spot_id in {8, 40}

    @pytest.mark.parametrize("tag", ["ai", "", "smart"])
    def test_unknown_strategy(self, tag):
        with pytest.raises(ValidationError):
            allocate_with_strategy(build_inventory(), make_entry(), tag)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
