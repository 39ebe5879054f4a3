"""Alternative allocation strategies and strategy dispatch."""

import logging
import random
from typing import Optional

from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.allocation import AllocationSuccess, AllocationFailure, AllocationResult
from engine.allocator import allocate
from engine.validation import validate_entry, validate_strategy
from config.defaults import NO_CAPACITY

logger = logging.getLogger(__name__)


def allocate_sequential(inventory: Inventory, entry: VehicleEntry) -> AllocationResult:
    """First free spot by ascending id, ignoring vehicle type."""
    validate_entry(entry)
    available = inventory.available
    if not available:
        return AllocationFailure(reason=NO_CAPACITY)
    chosen = min(available, key=lambda s: s.id)
    return AllocationSuccess(spot_id=chosen.id, floor=chosen.floor)


def allocate_random(
    inventory: Inventory,
    entry: VehicleEntry,
    rng: Optional[random.Random] = None,
) -> AllocationResult:
    """Uniformly random free spot."""
    validate_entry(entry)
    available = inventory.available
    if not available:
        return AllocationFailure(reason=NO_CAPACITY)
    chooser = rng or random.Random()
    chosen = chooser.choice(available)
    return AllocationSuccess(spot_id=chosen.id, floor=chosen.floor)


def allocate_with_strategy(
    inventory: Inventory,
    entry: VehicleEntry,
    strategy: str,
    rng: Optional[random.Random] = None,
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Route an allocation request to the named strategy."""
    validate_strategy(strategy)

    if strategy == "algorithm":
        return allocate(inventory, entry, rule_config)
    if strategy == "sequential":
        return allocate_sequential(inventory, entry)
    return allocate_random(inventory, entry, rng)
