"""Level progression configuration constants."""

# Fish seeded at the start of each level
FOUNDER_COUNT = 5

# Target population = BASE + STEP * (level - 1)
BASE_TARGET_POPULATION = 10
TARGET_POPULATION_STEP = 2

# Speed and growth multipliers = 1 + STEP * (level - 1)
SPEED_MULTIPLIER_STEP = 0.2
GROWTH_MULTIPLIER_STEP = 0.2

# Deaths allowed per level before defeat
CASUALTY_LIMIT = 5

# Single-level variant: defeat once the population shrinks to this size
LOW_POPULATION_LIMIT = 1

# Founder colors; each level drops the last available entry (minimum one)
PALETTE = (
    ("red", (255, 0, 0)),
    ("orange_red", (255, 69, 0)),
    ("dark_orange", (255, 140, 0)),
    ("orange", (255, 165, 0)),
    ("gold", (255, 215, 0)),
    ("yellow", (255, 255, 0)),
    ("yellow_green", (154, 205, 50)),
    ("lime_green", (50, 205, 50)),
    ("teal", (0, 128, 128)),
    ("dodger_blue", (30, 144, 255)),
    ("blue", (0, 0, 255)),
    ("indigo", (75, 0, 130)),
    ("dark_violet", (148, 0, 211)),
)
