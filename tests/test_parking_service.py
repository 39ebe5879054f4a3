"""Tests for the single-writer parking service."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random
import threading

import pytest

from models.vehicle import VehicleEntry
from models.allocation import AllocationSuccess, AllocationFailure
from engine.parking_service import ParkingService
from engine.validation import ValidationError
from data.sample_data import build_inventory


def make_entry(plate="GOV001", vehicle_type="government", stay=2, arrival="09:00"):
    return VehicleEntry(plate, vehicle_type, arrival, "11:00", stay)


def make_service(floors=2, per_floor=3):
    return ParkingService(build_inventory(floors, per_floor), rng=random.Random(0))


class TestAllocate:
    def test_commits_occupancy(self):
        service = make_service()
        result = service.allocate(make_entry(), "algorithm")

        assert result == AllocationSuccess(spot_id=1, floor=0)
        spot = service.snapshot().get(1)
        assert spot.is_occupied
        assert spot.license_plate == "GOV001"
        assert spot.vehicle_type == "government"
        assert spot.arrival_time == "09:00"
        assert spot.expected_departure == "11:00"
        assert spot.allocated_by == "algorithm"

    def test_consecutive_requests_get_distinct_spots(self):
        service = make_service()
        ids = [service.allocate(make_entry(plate=f"P{i}")).spot_id for i in range(6)]
        assert sorted(ids) == [1, 2, 3, 4, 5, 6]

    def test_no_capacity_after_filling(self):
        service = make_service(floors=1, per_floor=2)
        service.allocate(make_entry(plate="A1"))
        service.allocate(make_entry(plate="A2"))
        assert isinstance(service.allocate(make_entry(plate="A3")), AllocationFailure)

    def test_plate_is_normalized(self):
        service = make_service()
        service.allocate(make_entry(plate=" abc123 "))
        assert service.active_allocations("ABC123")[0].license_plate == "ABC123"

    def test_duplicate_plate_rejected(self):
        service = make_service()
        service.allocate(make_entry(plate="DUP1"))
        with pytest.raises(ValidationError):
            service.allocate(make_entry(plate="dup1"))

    def test_invalid_entry_rejected(self):
        service = make_service()
        with pytest.raises(ValidationError):
            service.allocate(make_entry(vehicle_type="bus"))
        assert len(service.snapshot().occupied) == 0

    def test_snapshot_is_detached(self):
        service = make_service()
        snap = service.snapshot()
        snap.spots[0].is_occupied = True
        assert not service.snapshot().spots[0].is_occupied

    def test_concurrent_allocations_never_double_assign(self):
        service = make_service(floors=4, per_floor=10)
        results = []

        def worker(i):
            results.append(service.allocate(make_entry(plate=f"T{i}", vehicle_type="private")))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        won = [r.spot_id for r in results if isinstance(r, AllocationSuccess)]
        assert len(won) == 40
        assert len(set(won)) == 40
        assert sum(isinstance(r, AllocationFailure) for r in results) == 10


class TestRelease:
    def test_release_by_plate_frees_spot_and_records_history(self):
        service = make_service()
        service.allocate(make_entry(plate="EXIT1", arrival="09:00"))

        record = service.release("exit1", "11:30")
        assert record.spot_id == 1
        assert record.duration_minutes == 150
        assert record.duration_label == "2h 30m"
        assert record.allocated_by == "algorithm"
        assert not service.snapshot().get(1).is_occupied
        assert service.snapshot().get(1).license_plate == ""
        assert service.history() == [record]

    def test_release_over_midnight(self):
        service = make_service()
        service.allocate(make_entry(plate="LATE", arrival="23:00"))
        assert service.release("LATE", "01:15").duration_minutes == 135

    def test_release_unknown_plate(self):
        with pytest.raises(KeyError):
            make_service().release("NOPE", "10:00")

    def test_release_spot(self):
        service = make_service()
        service.allocate(make_entry(plate="S1"))
        record = service.release_spot(1, "10:00")
        assert record.license_plate == "S1"
        with pytest.raises(KeyError):
            service.release_spot(1, "10:00")

    def test_released_spot_is_reused(self):
        service = make_service()
        service.allocate(make_entry(plate="R1"))
        service.release("R1", "10:00")
        assert service.allocate(make_entry(plate="R2")).spot_id == 1

    def test_history_most_recent_first_and_filter(self):
        service = make_service()
        for plate in ("H1", "H2"):
            service.allocate(make_entry(plate=plate))
        service.release("H1", "10:00")
        service.release("H2", "10:00")
        assert [r.license_plate for r in service.history()] == ["H2", "H1"]
        assert [r.license_plate for r in service.history("h1")] == ["H1"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
