"""Strategy comparison: replay one vehicle batch under every strategy."""

import logging
import random
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from models.spot import ParkingSpot
from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.allocation import AllocationSuccess
from engine.allocator import preferred_spot_ids
from engine.strategies import allocate_with_strategy
from config.defaults import (
    STRATEGIES, STRATEGY_LABELS, FLOOR_CLIMB_METERS, SPOT_PITCH_METERS,
    MAX_WALK_FOR_SCORE, SCORE_WEIGHT_TYPE_OPTIMIZATION, SCORE_WEIGHT_WALKING,
    SCORE_WEIGHT_SUCCESS,
)

logger = logging.getLogger(__name__)


@dataclass
class StrategyPerformance:
    strategy: str
    successful_allocations: int
    failed_allocations: int
    average_walking_distance: float   # metres
    space_utilization: float          # % of spots occupied after the batch
    allocation_time: float            # ms per request
    vehicle_type_optimization: float  # % of placements inside the preferred zone
    overall_score: float              # 0-100

    @property
    def total_requests(self) -> int:
        return self.successful_allocations + self.failed_allocations


def walking_distance(spot: ParkingSpot, inventory: Inventory) -> float:
    """Model walk from a spot to the exit.

    Each floor above ground adds a fixed climb; within a floor the highest id
    sits at the exit end.
    """
    floor_ids = sorted(s.id for s in inventory.spots if s.floor == spot.floor)
    steps_from_exit = len(floor_ids) - 1 - floor_ids.index(spot.id)
    return spot.floor * FLOOR_CLIMB_METERS + steps_from_exit * SPOT_PITCH_METERS


def compute_overall_score(
    success_rate: float,
    avg_walk: float,
    type_optimization: float,
    rule_config: Optional[dict] = None,
) -> float:
    """Weighted 0-100 score. success_rate and type_optimization are percentages."""
    cfg = rule_config or {}
    w_type = cfg.get("score_weight_type_optimization", SCORE_WEIGHT_TYPE_OPTIMIZATION)
    w_walk = cfg.get("score_weight_walking", SCORE_WEIGHT_WALKING)
    w_success = cfg.get("score_weight_success", SCORE_WEIGHT_SUCCESS)

    walk_score = max(0.0, 100 - avg_walk / MAX_WALK_FOR_SCORE * 100)
    return w_type * type_optimization + w_walk * walk_score + w_success * success_rate


def run_strategy(
    inventory: Inventory,
    vehicles: List[VehicleEntry],
    strategy: str,
    rng: Optional[random.Random] = None,
    rule_config: Optional[dict] = None,
) -> StrategyPerformance:
    """Allocate the batch in order on a private copy of the inventory."""
    working = inventory.copy()
    successes = 0
    failures = 0
    preferred_hits = 0
    total_walk = 0.0
    elapsed = 0.0

    for entry in vehicles:
        preferred = preferred_spot_ids(working, entry, rule_config)

        started = time.perf_counter()
        result = allocate_with_strategy(working, entry, strategy, rng, rule_config)
        elapsed += time.perf_counter() - started

        if not isinstance(result, AllocationSuccess):
            failures += 1
            continue

        spot = working.get(result.spot_id)
        spot.occupy(entry.license_plate, entry.vehicle_type, entry.arrival_time,
                    entry.expected_departure, strategy)

        successes += 1
        total_walk += walking_distance(spot, working)
        if spot.id in preferred:
            preferred_hits += 1

    requests = successes + failures
    success_rate = successes / requests * 100 if requests else 0.0
    avg_walk = total_walk / successes if successes else 0.0
    type_opt = preferred_hits / successes * 100 if successes else 0.0
    utilization = len(working.occupied) / len(working) * 100 if len(working) else 0.0

    return StrategyPerformance(
        strategy=strategy,
        successful_allocations=successes,
        failed_allocations=failures,
        average_walking_distance=avg_walk,
        space_utilization=utilization,
        allocation_time=elapsed / requests * 1000 if requests else 0.0,
        vehicle_type_optimization=type_opt,
        overall_score=compute_overall_score(success_rate, avg_walk, type_opt, rule_config),
    )


def compare_strategies(
    inventory: Inventory,
    vehicles: List[VehicleEntry],
    seed: Optional[int] = None,
    rule_config: Optional[dict] = None,
) -> Dict[str, StrategyPerformance]:
    """Run every strategy over the same batch and starting inventory."""
    results = {}
    for strategy in STRATEGIES:
        rng = random.Random(seed)
        results[strategy] = run_strategy(inventory, vehicles, strategy, rng, rule_config)

    logger.info(
        "Compared %d strategies over %d vehicles: %s",
        len(results), len(vehicles),
        ", ".join(f"{k}={v.overall_score:.1f}" for k, v in results.items()),
    )
    return results


def pick_winner(results: Dict[str, StrategyPerformance]) -> Optional[StrategyPerformance]:
    """Highest overall score; ties go to the earlier strategy in STRATEGIES."""
    best = None
    for strategy in STRATEGIES:
        perf = results.get(strategy)
        if perf and (best is None or perf.overall_score > best.overall_score):
            best = perf
    return best


def comparison_rows(results: Dict[str, StrategyPerformance]) -> List[dict]:
    """Flatten comparison results for tables and charts."""
    rows = []
    for strategy in STRATEGIES:
        p = results.get(strategy)
        if not p:
            continue
        rows.append({
            "Strategy": STRATEGY_LABELS.get(strategy, strategy),
            "Allocated": p.successful_allocations,
            "Failed": p.failed_allocations,
            "Avg Walk (m)": round(p.average_walking_distance, 1),
            "Utilization %": round(p.space_utilization, 1),
            "Type Optimization %": round(p.vehicle_type_optimization, 1),
            "Time (ms)": round(p.allocation_time, 3),
            "Overall Score": round(p.overall_score, 1),
        })
    return rows
