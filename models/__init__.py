from models.spot import ParkingSpot
from models.vehicle import VehicleEntry
from models.inventory import Inventory
from models.allocation import AllocationSuccess, AllocationFailure, AllocationResult
from models.history import ExitRecord
