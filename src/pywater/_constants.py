"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Durable entry names
# ------------------------------------------------------------------

RECORDS_KEY = "waterRecords"
GOAL_KEY = "dailyGoalOz"
INCREMENT_KEY = "addAmountOz"

# ------------------------------------------------------------------
# Daily goal  (volume units, 8-200)
# ------------------------------------------------------------------

DEFAULT_GOAL = 64
GOAL_MIN = 8
GOAL_MAX = 200

# ------------------------------------------------------------------
# Amount added per log action  (volume units, 1-32)
# ------------------------------------------------------------------

DEFAULT_INCREMENT = 8
INCREMENT_MIN = 1
INCREMENT_MAX = 32

UNIT_LABEL = "oz"


def clamp_goal(value: int) -> int:
    """Clamp *value* into the supported goal range (8-200)."""
    return max(GOAL_MIN, min(GOAL_MAX, int(value)))


def clamp_increment(value: int) -> int:
    """Clamp *value* into the supported increment range (1-32)."""
    return max(INCREMENT_MIN, min(INCREMENT_MAX, int(value)))
