"""Display and layout configuration constants."""

# Window dimensions in pixels; the food panel sits on top of the tank
WINDOW_WIDTH = 500
WINDOW_HEIGHT = 500
FOOD_PANEL_HEIGHT = 100

# Simulation step interval in milliseconds (~60 steps per second)
FRAME_INTERVAL_MS = 16
FRAME_RATE = 60

# Food panel icon layout: slot i is drawn at x = START_X + i * (SIZE + GAP)
FOOD_ICON_SIZE = 20
FOOD_ICON_GAP = 10
FOOD_ICON_START_X = 20
FOOD_ICON_Y = 60

# HUD
HUD_FONT_SIZE = 22
HUD_MARGIN = 20
NOTIFICATION_DURATION_MS = 2000

# Colors (R, G, B)
PANEL_COLOR = (240, 240, 240)
WATER_COLOR = (240, 248, 255)
OUTLINE_COLOR = (0, 0, 0)
FOOD_ICON_COLOR = (255, 165, 0)
FOOD_ICON_OUTLINE_COLOR = (139, 0, 0)
FALLING_FOOD_COLOR = (255, 69, 0)
LEVEL_TEXT_COLOR = (0, 0, 255)
ALIVE_TEXT_COLOR = (0, 0, 0)
DEATH_TEXT_COLOR = (255, 0, 0)
VICTORY_COLOR = (34, 139, 34)
DEFEAT_COLOR = (178, 34, 34)
