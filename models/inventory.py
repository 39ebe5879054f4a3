import copy
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.spot import ParkingSpot


@dataclass
class Inventory:
    """Ordered spot collection, floor-major (floor 0 spots first)."""
    spots: List[ParkingSpot] = field(default_factory=list)

    def __post_init__(self):
        seen = set()
        for s in self.spots:
            if s.id in seen:
                raise ValueError(f"Duplicate spot id in inventory: {s.id}")
            seen.add(s.id)

    def __len__(self) -> int:
        return len(self.spots)

    def __iter__(self):
        return iter(self.spots)

    @property
    def available(self) -> List[ParkingSpot]:
        return [s for s in self.spots if not s.is_occupied]

    @property
    def occupied(self) -> List[ParkingSpot]:
        return [s for s in self.spots if s.is_occupied]

    @property
    def floors(self) -> List[int]:
        return sorted(set(s.floor for s in self.spots))

    def get(self, spot_id: int) -> Optional[ParkingSpot]:
        return next((s for s in self.spots if s.id == spot_id), None)

    def find_by_plate(self, license_plate: str) -> Optional[ParkingSpot]:
        plate = license_plate.strip().upper()
        return next(
            (s for s in self.spots if s.is_occupied and s.license_plate.upper() == plate),
            None,
        )

    def spots_by_floor(self) -> Dict[int, List[ParkingSpot]]:
        by_floor: Dict[int, List[ParkingSpot]] = {}
        for s in self.spots:
            by_floor.setdefault(s.floor, []).append(s)
        return by_floor

    def copy(self) -> "Inventory":
        return Inventory(spots=copy.deepcopy(self.spots))
