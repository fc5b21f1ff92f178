"""Fish-specific configuration constants."""

# Diameter of a newly seeded fish
FISH_INITIAL_SIZE = 30.0

# Initial speed is uniform(MIN, MAX) scaled by the level speed multiplier
FISH_MIN_START_SPEED = 1.0
FISH_MAX_START_SPEED = 3.0

# Chasing a lure or food moves at base speed times this multiplier
CHASE_SPEED_MULTIPLIER = 3.0
# Fish closer than this to their target stop moving (no jitter on arrival)
CHASE_DEADBAND = 1.0

# Growth per meal: size *= 1 + FISH_GROWTH_RATE * growth_multiplier
FISH_GROWTH_RATE = 0.1
# Base speed gained per meal
FISH_SPEED_INCREMENT = 0.5

# A fish spawns a clone on every Nth meal
MEALS_PER_OFFSPRING = 3

# A fish eats an overlapping fish only when strictly bigger than this ratio
PREDATION_SIZE_RATIO = 1.3
