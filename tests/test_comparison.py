"""Tests for strategy comparison."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.vehicle import VehicleEntry
from engine.comparison import (
    compare_strategies, run_strategy, walking_distance, compute_overall_score,
    pick_winner, comparison_rows, StrategyPerformance,
)
from data.sample_data import build_inventory, generate_sample_vehicles


def make_entry(plate, vehicle_type="government", stay=1):
    return VehicleEntry(plate, vehicle_type, "09:00", "10:00", stay)


def make_perf(strategy, score):
    return StrategyPerformance(strategy, 1, 0, 0.0, 10.0, 0.01, 100.0, score)


class TestWalkingDistance:
    def test_exit_end_of_ground_floor_is_zero(self):
        inv = build_inventory(4, 10)
        assert walking_distance(inv.get(10), inv) == 0

    def test_floor_and_position_add_up(self):
        inv = build_inventory(4, 10)
        # Floor 2, first spot: 2 floors up and 9 spots from the exit
        assert walking_distance(inv.get(21), inv) == 2 * 25.0 + 9 * 2.5


class TestRunStrategy:
    def test_does_not_touch_source_inventory(self):
        inv = build_inventory(2, 5)
        run_strategy(inv, generate_sample_vehicles(5, seed=1), "algorithm")
        assert len(inv.occupied) == 0

    def test_counts_failures_when_batch_exceeds_capacity(self):
        inv = build_inventory(1, 3)
        vehicles = [make_entry(f"V{i}") for i in range(5)]
        perf = run_strategy(inv, vehicles, "sequential")
        assert perf.successful_allocations == 3
        assert perf.failed_allocations == 2
        assert perf.space_utilization == 100
        assert perf.total_requests == 5

    def test_algorithm_matches_its_own_preferences(self):
        inv = build_inventory(4, 10)
        perf = run_strategy(inv, generate_sample_vehicles(15, seed=3), "algorithm")
        assert perf.vehicle_type_optimization == 100

    def test_empty_batch(self):
        perf = run_strategy(build_inventory(1, 2), [], "random")
        assert perf.successful_allocations == 0
        assert perf.average_walking_distance == 0
        assert perf.allocation_time == 0


class TestCompareStrategies:
    def test_every_strategy_reported(self):
        results = compare_strategies(build_inventory(4, 10), generate_sample_vehicles(10, seed=5), seed=5)
        assert set(results) == {"algorithm", "random", "sequential"}
        assert all(r.successful_allocations == 10 for r in results.values())

    def test_seeded_runs_are_reproducible(self):
        inv = build_inventory(4, 10)
        vehicles = generate_sample_vehicles(10, seed=8)
        a = compare_strategies(inv, vehicles, seed=8)["random"]
        b = compare_strategies(inv, vehicles, seed=8)["random"]
        assert a.average_walking_distance == b.average_walking_distance
        assert a.vehicle_type_optimization == b.vehicle_type_optimization

    def test_public_batch_favours_algorithm(self):
        # Public vehicles: the policy picks the exit end, sequential the far end
        inv = build_inventory(1, 10)
        vehicles = [make_entry(f"P{i}", "public") for i in range(3)]
        results = compare_strategies(inv, vehicles, seed=0)
        assert results["algorithm"].average_walking_distance < results["sequential"].average_walking_distance
        assert pick_winner(results).strategy == "algorithm"


class TestScoring:
    def test_perfect_score(self):
        assert compute_overall_score(100, 0, 100) == pytest.approx(100)

    def test_long_walk_scores_zero_on_walk_component(self):
        assert compute_overall_score(0, 500, 0) == 0

    def test_winner_tie_goes_to_first_strategy(self):
        results = {"random": make_perf("random", 50), "algorithm": make_perf("algorithm", 50)}
        assert pick_winner(results).strategy == "algorithm"

    def test_pick_winner_empty(self):
        assert pick_winner({}) is None

    def test_rows_follow_strategy_order(self):
        rows = comparison_rows({"sequential": make_perf("sequential", 1), "algorithm": make_perf("algorithm", 2)})
        assert [r["Strategy"] for r in rows] == ["Smart Algorithm", "Sequential"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
