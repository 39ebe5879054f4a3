from dataclasses import dataclass


@dataclass
class ExitRecord:
    license_plate: str
    vehicle_type: str
    spot_id: int
    floor: int
    arrival_time: str     # HH:MM
    exit_time: str        # HH:MM
    duration_minutes: int
    allocated_by: str = ""

    @property
    def duration_label(self) -> str:
        hours, minutes = divmod(self.duration_minutes, 60)
        return f"{hours}h {minutes:02d}m"
