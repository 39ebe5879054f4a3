from dataclasses import dataclass
from typing import Union

from config.defaults import NO_CAPACITY


@dataclass(frozen=True)
class AllocationSuccess:
    spot_id: int
    floor: int


@dataclass(frozen=True)
class AllocationFailure:
    reason: str = NO_CAPACITY


AllocationResult = Union[AllocationSuccess, AllocationFailure]
