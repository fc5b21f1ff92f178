"""Level progression controller.

The controller owns everything that lives for exactly one level: the fish
population, the falling food, the death counter and the panel food charges.
It also owns the game state machine:

    RUNNING --(population >= target)--> LEVEL_COMPLETE --(reseed)--> RUNNING
    RUNNING --(deaths >= casualty limit)--> DEFEATED   (terminal)

Defeat is always checked before level completion, so a tick that crosses
both thresholds ends the game.
"""

import logging
import random
from typing import List, Optional, Tuple

from fishgame.config import FoodChargeMode, GameConfig
from fishgame.entities import FallingFood, Fish
from fishgame.events import EventBus, GameOverEvent, LevelCompletedEvent, LevelStartedEvent
from fishgame.math_utils import Bounds
from fishgame.state_machine import GameState, StateMachine, create_game_state_machine

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class LevelController:
    """Tracks population targets and casualty limits across levels.

    Attributes:
        fishes: Live fish, in spawn order
        foods: Falling food currently in the tank
        level: Current level, starting at 1
        death_count: Fish eaten during the current level
        food_charges: Charges available on the food panel
    """

    def __init__(self, config: GameConfig, rng: random.Random, events: EventBus) -> None:
        self.config = config
        self._rng = rng
        self._events = events
        self._state: StateMachine[GameState] = create_game_state_machine()

        self.fishes: List[Fish] = []
        self.foods: List[FallingFood] = []
        self.level: int = 1
        self.death_count: int = 0
        self.food_charges: int = 0

    # ------------------------------------------------------------------
    # Derived level parameters
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state.state

    @property
    def state_machine(self) -> StateMachine[GameState]:
        return self._state

    @property
    def alive(self) -> int:
        return len(self.fishes)

    @property
    def target_population(self) -> int:
        cfg = self.config.level
        return cfg.base_target_population + cfg.target_population_step * (self.level - 1)

    @property
    def speed_multiplier(self) -> float:
        return 1.0 + self.config.level.speed_multiplier_step * (self.level - 1)

    @property
    def growth_multiplier(self) -> float:
        return 1.0 + self.config.level.growth_multiplier_step * (self.level - 1)

    @property
    def available_colors(self) -> List[Color]:
        """Palette colors open to founders; one fewer per level, never empty."""
        palette = self.config.level.palette
        count = max(1, len(palette) - (self.level - 1))
        return [rgb for _, rgb in palette[:count]]

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def start_level(self, level: int, frame: int = 0) -> None:
        """Reset the tank and seed the founders for ``level``."""
        self.level = level
        self.fishes.clear()
        self.foods.clear()
        self.death_count = 0
        self.food_charges = 0

        colors = self.available_colors
        for _ in range(self.config.level.founder_count):
            self.fishes.append(self._spawn_founder(colors))

        logger.info(
            "Level %d started: %d founders, target %d, speed x%.1f, %d colors",
            level,
            len(self.fishes),
            self.target_population,
            self.speed_multiplier,
            len(colors),
        )
        self._events.emit(
            LevelStartedEvent(
                level=level,
                target_population=self.target_population,
                founders=len(self.fishes),
                frame=frame,
            )
        )

    def _spawn_founder(self, colors: List[Color]) -> Fish:
        tank = self.config.tank.tank_bounds
        fish_cfg = self.config.fish
        size = fish_cfg.initial_size
        multiplier = self.speed_multiplier

        x = self._rng.uniform(tank.left, tank.right - size)
        y = self._rng.uniform(tank.top, tank.bottom - size)
        color = colors[self._rng.randrange(len(colors))]
        speed = self._rng.uniform(fish_cfg.min_start_speed, fish_cfg.max_start_speed) * multiplier
        return Fish(x, y, multiplier, color, self._rng, size=size, speed=speed)

    def restart(self, frame: int = 0) -> None:
        """Start over at level 1, from any state."""
        logger.info("Restarting game from level %d (%s)", self.level, self.state.name)
        self._state.force_state(GameState.RUNNING, frame=frame, reason="restart")
        self.start_level(1, frame=frame)

    # ------------------------------------------------------------------
    # Population bookkeeping
    # ------------------------------------------------------------------

    def add_fish(self, fish: Fish) -> None:
        self.fishes.append(fish)

    def remove_fish(self, fish: Fish) -> bool:
        """Remove a fish from the population.

        Returns:
            False if the fish was not live
        """
        try:
            self.fishes.remove(fish)
        except ValueError:
            return False
        return True

    def record_deaths(self, count: int) -> None:
        self.death_count += count

    # ------------------------------------------------------------------
    # Food panel
    # ------------------------------------------------------------------

    def add_food_charge(self, bounds: Optional[Bounds] = None) -> Optional[FallingFood]:
        """Handle one food timer tick.

        Args:
            bounds: Tank rectangle overflow food enters (defaults to the configured tank)

        Returns:
            The falling food spawned when a capped panel overflows, else None
        """
        if self.state is not GameState.RUNNING:
            return None

        food_cfg = self.config.food
        if food_cfg.charge_mode is FoodChargeMode.UNBOUNDED:
            self.food_charges += 1
            return None

        if self.food_charges < food_cfg.panel_capacity:
            self.food_charges += 1
            return None

        if not food_cfg.falling_food_enabled:
            return None

        tank = bounds if bounds is not None else self.config.tank.tank_bounds
        food = FallingFood(
            food_cfg.overflow_drop_x,
            tank.top,
            size=food_cfg.size,
            speed=food_cfg.fall_speed,
        )
        self.foods.append(food)
        logger.debug("Food panel full, dropping food at x=%.0f", food.pos.x)
        return food

    def consume_food_charge(self) -> bool:
        if self.food_charges <= 0:
            return False
        self.food_charges -= 1
        return True

    # ------------------------------------------------------------------
    # Progression checks
    # ------------------------------------------------------------------

    def is_defeated(self) -> bool:
        level_cfg = self.config.level
        if self.death_count >= level_cfg.casualty_limit:
            return True
        return level_cfg.defeat_on_low_population and self.alive <= level_cfg.low_population_limit

    def is_level_complete(self) -> bool:
        return self.alive >= self.target_population

    def check_defeat(self, frame: int = 0) -> bool:
        """Move to DEFEATED if the casualty limit was reached."""
        if self.state is not GameState.RUNNING or not self.is_defeated():
            return False

        self._state.transition(GameState.DEFEATED, frame=frame, reason="casualty limit")
        logger.info(
            "Game over on level %d: %d deaths, %d fish alive",
            self.level,
            self.death_count,
            self.alive,
        )
        self._events.emit(
            GameOverEvent(level=self.level, deaths=self.death_count, alive=self.alive, frame=frame)
        )
        return True

    def check_level_complete(self, frame: int = 0) -> bool:
        """Advance to the next level if the population target was reached."""
        if self.state is not GameState.RUNNING or not self.is_level_complete():
            return False

        completed = self.level
        self._state.transition(GameState.LEVEL_COMPLETE, frame=frame, reason="target reached")
        logger.info(
            "Level %d complete: %d/%d fish, %d deaths",
            completed,
            self.alive,
            self.target_population,
            self.death_count,
        )
        self._events.emit(
            LevelCompletedEvent(
                level=completed, alive=self.alive, deaths=self.death_count, frame=frame
            )
        )

        self._state.transition(GameState.RUNNING, frame=frame, reason=f"level {completed + 1}")
        self.start_level(completed + 1, frame=frame)
        return True

    def check_progress(self, frame: int = 0) -> GameState:
        """Run the defeat check, then the level-complete check."""
        if not self.check_defeat(frame):
            self.check_level_complete(frame)
        return self.state
