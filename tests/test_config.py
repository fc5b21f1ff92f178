"""Tests for configuration defaults and validation."""

import pytest

from fishgame.config import (
    FishConfig,
    FoodChargeMode,
    FoodConfig,
    GameConfig,
    LevelConfig,
    TankConfig,
)
from fishgame.exceptions import ConfigurationError
from fishgame.math_utils import Bounds


class TestDefaults:
    def test_tank_layout(self):
        tank = TankConfig()
        assert tank.panel_bounds == Bounds(0, 0, 500, 100)
        assert tank.tank_bounds == Bounds(0, 100, 500, 400)

    def test_food(self):
        food = FoodConfig()
        assert food.charge_mode is FoodChargeMode.CAPPED
        assert food.panel_capacity == 15
        assert food.overflow_drop_x == 440

    def test_game_config(self):
        config = GameConfig()
        assert config.seed is None
        assert config.level.casualty_limit == 5
        assert config.fish.meals_per_offspring == 3


class TestValidation:
    def test_panel_taller_than_window(self):
        with pytest.raises(ConfigurationError):
            TankConfig(height=100, panel_height=100)

    def test_speed_range(self):
        with pytest.raises(ConfigurationError):
            FishConfig(min_start_speed=3, max_start_speed=1)

    def test_predation_ratio(self):
        with pytest.raises(ConfigurationError):
            FishConfig(predation_size_ratio=0.9)

    def test_unknown_charge_mode(self):
        with pytest.raises(ConfigurationError, match="charge_mode"):
            FoodConfig(charge_mode="bottomless")

    def test_charge_mode_from_string(self):
        assert FoodConfig(charge_mode="unbounded").charge_mode is FoodChargeMode.UNBOUNDED

    def test_empty_palette(self):
        with pytest.raises(ConfigurationError):
            LevelConfig(palette=())

    def test_tank_too_small_for_fish(self):
        with pytest.raises(ConfigurationError):
            GameConfig(tank=TankConfig(width=20, height=200, panel_height=50))
