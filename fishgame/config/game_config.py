"""Dataclass configuration for the fish tank game.

Every field defaults to the matching constant, so ``GameConfig()`` is the
standard game. Values are validated on construction and a bad value raises
``ConfigurationError`` straight away instead of surfacing mid-game.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from fishgame.config.display import (
    FOOD_ICON_GAP,
    FOOD_ICON_SIZE,
    FOOD_ICON_START_X,
    FOOD_PANEL_HEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from fishgame.config.fish import (
    CHASE_DEADBAND,
    CHASE_SPEED_MULTIPLIER,
    FISH_GROWTH_RATE,
    FISH_INITIAL_SIZE,
    FISH_MAX_START_SPEED,
    FISH_MIN_START_SPEED,
    FISH_SPEED_INCREMENT,
    MEALS_PER_OFFSPRING,
    PREDATION_SIZE_RATIO,
)
from fishgame.config.food import (
    DROP_FOOD_RADIUS,
    FOOD_CHARGE_INTERVAL_MS,
    FOOD_FALL_SPEED,
    FOOD_PANEL_CAPACITY,
    FOOD_SIZE,
    OVERFLOW_SLOT_INDEX,
)
from fishgame.config.level import (
    BASE_TARGET_POPULATION,
    CASUALTY_LIMIT,
    FOUNDER_COUNT,
    GROWTH_MULTIPLIER_STEP,
    LOW_POPULATION_LIMIT,
    PALETTE,
    SPEED_MULTIPLIER_STEP,
    TARGET_POPULATION_STEP,
)
from fishgame.exceptions import ConfigurationError
from fishgame.math_utils import Bounds

Color = Tuple[int, int, int]


class FoodChargeMode(Enum):
    """How the panel counter reacts to a food timer tick."""

    CAPPED = "capped"  # Counter stops at capacity, surplus falls into the tank
    UNBOUNDED = "unbounded"  # Counter always increments, nothing falls


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")


@dataclass
class TankConfig:
    """Window geometry: a food panel strip on top of the tank."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    panel_height: int = FOOD_PANEL_HEIGHT

    def __post_init__(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)
        _require_non_negative("panel_height", self.panel_height)
        if self.panel_height >= self.height:
            raise ConfigurationError(
                f"panel_height ({self.panel_height}) leaves no room for the tank "
                f"(height {self.height})"
            )

    @property
    def panel_bounds(self) -> Bounds:
        return Bounds(0, 0, self.width, self.panel_height)

    @property
    def tank_bounds(self) -> Bounds:
        return Bounds(0, self.panel_height, self.width, self.height - self.panel_height)


@dataclass
class FishConfig:
    """Fish movement, growth and predation tuning."""

    initial_size: float = FISH_INITIAL_SIZE
    min_start_speed: float = FISH_MIN_START_SPEED
    max_start_speed: float = FISH_MAX_START_SPEED
    chase_speed_multiplier: float = CHASE_SPEED_MULTIPLIER
    chase_deadband: float = CHASE_DEADBAND
    growth_rate: float = FISH_GROWTH_RATE
    speed_increment: float = FISH_SPEED_INCREMENT
    meals_per_offspring: int = MEALS_PER_OFFSPRING
    predation_size_ratio: float = PREDATION_SIZE_RATIO

    def __post_init__(self) -> None:
        _require_positive("initial_size", self.initial_size)
        _require_non_negative("min_start_speed", self.min_start_speed)
        if self.max_start_speed < self.min_start_speed:
            raise ConfigurationError(
                f"max_start_speed ({self.max_start_speed}) is below "
                f"min_start_speed ({self.min_start_speed})"
            )
        _require_positive("chase_speed_multiplier", self.chase_speed_multiplier)
        _require_non_negative("chase_deadband", self.chase_deadband)
        _require_positive("growth_rate", self.growth_rate)
        _require_non_negative("speed_increment", self.speed_increment)
        _require_positive("meals_per_offspring", self.meals_per_offspring)
        if self.predation_size_ratio < 1.0:
            raise ConfigurationError(
                f"predation_size_ratio must be at least 1.0, got {self.predation_size_ratio}"
            )


@dataclass
class FoodConfig:
    """Food panel and falling food tuning."""

    size: float = FOOD_SIZE
    fall_speed: float = FOOD_FALL_SPEED
    panel_capacity: int = FOOD_PANEL_CAPACITY
    drop_radius: float = DROP_FOOD_RADIUS
    charge_interval_ms: int = FOOD_CHARGE_INTERVAL_MS
    charge_mode: FoodChargeMode = FoodChargeMode.CAPPED
    falling_food_enabled: bool = True
    overflow_slot_index: int = OVERFLOW_SLOT_INDEX

    def __post_init__(self) -> None:
        _require_positive("size", self.size)
        _require_positive("fall_speed", self.fall_speed)
        _require_positive("panel_capacity", self.panel_capacity)
        _require_non_negative("drop_radius", self.drop_radius)
        _require_positive("charge_interval_ms", self.charge_interval_ms)
        _require_non_negative("overflow_slot_index", self.overflow_slot_index)
        if not isinstance(self.charge_mode, FoodChargeMode):
            try:
                self.charge_mode = FoodChargeMode(self.charge_mode)
            except ValueError as e:
                raise ConfigurationError(f"Unknown charge_mode: {self.charge_mode!r}") from e

    @property
    def overflow_drop_x(self) -> float:
        """X coordinate where overflow food enters the tank."""
        return FOOD_ICON_START_X + self.overflow_slot_index * (FOOD_ICON_SIZE + FOOD_ICON_GAP)


@dataclass
class LevelConfig:
    """Level progression tuning."""

    founder_count: int = FOUNDER_COUNT
    base_target_population: int = BASE_TARGET_POPULATION
    target_population_step: int = TARGET_POPULATION_STEP
    speed_multiplier_step: float = SPEED_MULTIPLIER_STEP
    growth_multiplier_step: float = GROWTH_MULTIPLIER_STEP
    casualty_limit: int = CASUALTY_LIMIT
    defeat_on_low_population: bool = False
    low_population_limit: int = LOW_POPULATION_LIMIT
    palette: Tuple[Tuple[str, Color], ...] = PALETTE

    def __post_init__(self) -> None:
        _require_positive("founder_count", self.founder_count)
        _require_positive("base_target_population", self.base_target_population)
        _require_non_negative("target_population_step", self.target_population_step)
        _require_non_negative("speed_multiplier_step", self.speed_multiplier_step)
        _require_non_negative("growth_multiplier_step", self.growth_multiplier_step)
        _require_positive("casualty_limit", self.casualty_limit)
        _require_non_negative("low_population_limit", self.low_population_limit)
        if not self.palette:
            raise ConfigurationError("palette must contain at least one color")
        self.palette = tuple(self.palette)


@dataclass
class GameConfig:
    """Top-level configuration for one game.

    Attributes:
        seed: Seed for the game RNG; None draws a fresh random seed.
    """

    tank: TankConfig = field(default_factory=TankConfig)
    fish: FishConfig = field(default_factory=FishConfig)
    food: FoodConfig = field(default_factory=FoodConfig)
    level: LevelConfig = field(default_factory=LevelConfig)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        tank = self.tank.tank_bounds
        if tank.width <= self.fish.initial_size or tank.height <= self.fish.initial_size:
            raise ConfigurationError(
                f"Tank {tank.width}x{tank.height} is too small for fish of size "
                f"{self.fish.initial_size}"
            )
