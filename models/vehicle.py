from dataclasses import dataclass
from typing import Optional


@dataclass
class VehicleEntry:
    license_plate: str
    vehicle_type: str            # "government", "private", "public"
    arrival_time: str            # HH:MM
    expected_departure: str      # HH:MM
    stay_duration: float         # Hours, used to bucket private vehicles
    priority_level: Optional[int] = None  # 0-3, overrides the type default

