"""Generates human-readable explanations for allocation decisions."""

from typing import List, Optional

from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.allocation import AllocationSuccess, AllocationResult
from engine.allocator import select_candidates
from config.defaults import LONG_STAY_THRESHOLD_HOURS, STRATEGY_LABELS


POLICY_DESCRIPTIONS = {
    "government_low_floor": "Government vehicle => lowest floor first, then lowest spot id",
    "public_near_exit": "Public vehicle => highest spot id first (closest to exit)",
    "private_long_stay": "Private long stay => upper floors",
    "private_short_stay": "Private short stay => lower floors",
}


def allocation_message(entry: VehicleEntry, result: AllocationResult) -> str:
    """User-facing outcome message; floors are shown 1-based."""
    if isinstance(result, AllocationSuccess):
        return (
            f"Vehicle {entry.license_plate} has been allocated to "
            f"Floor {result.floor + 1}, Spot {result.spot_id}."
        )
    return "No parking spots available. Please try again later."


def explain_decision(
    inventory: Inventory,
    entry: VehicleEntry,
    result: AllocationResult,
    strategy: str = "algorithm",
    rule_config: Optional[dict] = None,
) -> List[str]:
    """Produce step-by-step explanation for an allocation decision.

    The inventory must be the snapshot the decision was made against.
    """
    steps = []
    available = inventory.available

    steps.append(
        f"Step 1 - Availability: {len(available)} of {len(inventory)} spots are free"
    )

    if not available:
        steps.append("Result: no capacity, the vehicle cannot be placed right now")
        return steps

    if strategy != "algorithm":
        steps.append(f"Step 2 - Strategy: {STRATEGY_LABELS.get(strategy, strategy)} (vehicle type ignored)")
    else:
        candidates, policy, fell_back = select_candidates(available, entry, rule_config)
        detail = POLICY_DESCRIPTIONS[policy]
        if policy.startswith("private"):
            threshold = (rule_config or {}).get("long_stay_threshold_hours", LONG_STAY_THRESHOLD_HOURS)
            detail += f" ({entry.stay_duration:g}h vs {threshold}h threshold)"
        steps.append(f"Step 2 - Policy: {detail}")

        if fell_back:
            steps.append(
                "Step 3 - Fallback: preferred floors are full, considering every free spot"
            )
        else:
            steps.append(f"Step 3 - Candidates: {len(candidates)} spots match the policy")

    if isinstance(result, AllocationSuccess):
        steps.append(
            f"Result: Floor {result.floor + 1}, Spot {result.spot_id}"
        )
    return steps
