from dataclasses import dataclass


@dataclass
class ParkingSpot:
    id: int
    floor: int                   # Zero-based floor index
    is_occupied: bool = False
    vehicle_type: str = ""       # "government", "private", "public" when occupied
    license_plate: str = ""
    arrival_time: str = ""       # HH:MM
    expected_departure: str = ""  # HH:MM
    allocated_by: str = ""       # Strategy tag that placed the current occupant

    def occupy(self, license_plate: str, vehicle_type: str, arrival_time: str,
               expected_departure: str, allocated_by: str = ""):
        self.is_occupied = True
        self.vehicle_type = vehicle_type
        self.license_plate = license_plate
        self.arrival_time = arrival_time
        self.expected_departure = expected_departure
        self.allocated_by = allocated_by

    def clear(self):
        self.is_occupied = False
        self.vehicle_type = ""
        self.license_plate = ""
        self.arrival_time = ""
        self.expected_departure = ""
        self.allocated_by = ""
