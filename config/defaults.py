"""Default configuration constants for the Smart Parking Platform."""

# Facility layout
FLOOR_COUNT = 4
SPOTS_PER_FLOOR = 10

# Demo inventory
DEMO_OCCUPANCY_RATE = 0.30  # Fraction of spots randomly occupied at startup
DEMO_SEED = 42

# Vehicle types (plate categories)
VEHICLE_TYPES = ["government", "private", "public"]

# Private vehicles are bucketed by stay duration (hours)
LONG_STAY_THRESHOLD_HOURS = 4
LONG_STAY_MIN_FLOOR = 2   # Long stays pushed to floor >= this
SHORT_STAY_MAX_FLOOR = 1  # Short stays kept on floor <= this

# Allocation strategies; "algorithm" is the smart rule-based heuristic
STRATEGIES = ["algorithm", "random", "sequential"]
DEFAULT_STRATEGY = "algorithm"
STRATEGY_LABELS = {
    "algorithm": "Smart Algorithm",
    "random": "Random",
    "sequential": "Sequential",
}

# Failure reasons
NO_CAPACITY = "NoCapacity"

# Wire encodings
PLATE_TYPE_CODES = {"private": 0, "public": 1, "government": 2}
BODY_TYPE_CODES = {"private": 0, "public": 1, "government": 0}  # 0=Car, 1=Truck
DEFAULT_PRIORITY = {"government": 3, "public": 2, "private": 1}
MIN_PRIORITY = 0
MAX_PRIORITY = 3

# Walking distance model (metres)
FLOOR_CLIMB_METERS = 25.0   # Per floor above ground
SPOT_PITCH_METERS = 2.5     # Per spot away from the exit end of a floor
MAX_WALK_FOR_SCORE = 100.0  # Walk at or above this scores 0

# Comparison score weights (sum to 1)
SCORE_WEIGHT_TYPE_OPTIMIZATION = 0.4
SCORE_WEIGHT_WALKING = 0.3
SCORE_WEIGHT_SUCCESS = 0.3

# Floor saturation alert threshold
FLOOR_SATURATION_THRESHOLD = 0.90

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
