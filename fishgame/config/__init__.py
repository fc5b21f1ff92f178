"""Configuration package for the fish tank game.

Constants live in topic modules (display, fish, food, level). The dataclasses
in ``game_config`` bundle them into a validated ``GameConfig`` that the game
and its front-ends are built from.
"""

from fishgame.config.game_config import (
    FishConfig,
    FoodChargeMode,
    FoodConfig,
    GameConfig,
    LevelConfig,
    TankConfig,
)

__all__ = [
    "FishConfig",
    "FoodChargeMode",
    "FoodConfig",
    "GameConfig",
    "LevelConfig",
    "TankConfig",
]
