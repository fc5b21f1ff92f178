"""Food configuration constants.

Food reaches the tank two ways: the player drags a charge from the panel and
drops it on a fish, or the panel overflows and the surplus falls into the
tank where fish chase it on their own.
"""

# Falling food pellet
FOOD_SIZE = 20.0
FOOD_FALL_SPEED = 2.0

# Panel charges
FOOD_PANEL_CAPACITY = 15
FOOD_CHARGE_INTERVAL_MS = 2000
FOOD_CHARGE_INTERVAL_MIN_MS = 2000
FOOD_CHARGE_INTERVAL_MAX_MS = 5000

# A dropped charge reaches fish whose center is within radius + this value
DROP_FOOD_RADIUS = 10.0

# Overflow food falls from under the last panel slot
OVERFLOW_SLOT_INDEX = 14
