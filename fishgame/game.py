"""Fish tank game - the tick orchestrator.

``FishTankGame`` owns the level controller, the systems and the pointer
state, and sequences one tick:

    STEERING -> FEEDING -> PREDATION -> births -> PROGRESSION

It contains no rules of its own. Movement, feeding, predation and level
progression live in their systems and in ``LevelController``; the game
feeds them the pointer input and the tick's bounds.

Drivers own the time source. They call ``tick(dt)`` at a fixed rate and
``add_food_charge()`` on the food timer (see ``fishgame.clock``), and
subscribe to ``game.events`` for victory and defeat notifications.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from fishgame.clock import FoodChargeTimer, SimulationClock
from fishgame.config import GameConfig
from fishgame.config.display import FRAME_INTERVAL_MS, FRAME_RATE
from fishgame.entities import FallingFood, Fish
from fishgame.events import EventBus, LevelStartedEvent
from fishgame.level import LevelController
from fishgame.math_utils import Bounds, Vector2
from fishgame.mutation_queue import FishMutationQueue
from fishgame.snapshot import GameSnapshot, build_snapshot
from fishgame.state_machine import GameState
from fishgame.systems import BaseSystem, FeedingSystem, PredationSystem, SteeringSystem, SystemResult

logger = logging.getLogger(__name__)

PointLike = Union[Vector2, Sequence[float]]


def as_point(point: PointLike) -> Vector2:
    if isinstance(point, Vector2):
        return point.copy()
    x, y = point
    return Vector2(float(x), float(y))


@dataclass
class PointerState:
    """Drag-and-drop state of the food pointer."""

    dragging: bool = False
    position: Optional[Vector2] = None

    def reset(self) -> None:
        self.dragging = False
        self.position = None


class FishTankGame:
    """One game of fish tank.

    Attributes:
        config: Validated game configuration
        rng: Random source shared by every system
        clock: Frame counter and simulated time
        pointer: Current drag state
        level: The level controller (fish, food, counters, state)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Create a game and seed level 1.

        Args:
            config: Game configuration (defaults to the standard game)
            rng: Shared random number generator for deterministic runs
            seed: Seed used when no rng is given; falls back to ``config.seed``
        """
        self.config = config or GameConfig()

        if rng is not None:
            self.rng = rng
        else:
            self.rng = random.Random(seed if seed is not None else self.config.seed)

        self._events = EventBus()
        self._mutations = FishMutationQueue()
        self.clock = SimulationClock()
        self.pointer = PointerState()
        self._bounds = self.config.tank.tank_bounds

        self.level = LevelController(self.config, self.rng, self._events)

        self.steering_system = SteeringSystem(self)
        self.feeding_system = FeedingSystem(self, self._mutations)
        self.predation_system = PredationSystem(self, self._mutations)
        self._systems: List[BaseSystem] = [
            self.steering_system,
            self.feeding_system,
            self.predation_system,
        ]

        self.level.start_level(1, frame=0)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def events(self) -> EventBus:
        return self._events

    @property
    def state(self) -> GameState:
        return self.level.state

    @property
    def frame(self) -> int:
        return self.clock.frame

    @property
    def bounds(self) -> Bounds:
        """Tank bounds used by the current (or last) tick."""
        return self._bounds

    @property
    def fishes(self) -> List[Fish]:
        return self.level.fishes

    @property
    def foods(self) -> List[FallingFood]:
        return self.level.foods

    def get_systems(self) -> List[BaseSystem]:
        return list(self._systems)

    def get_systems_debug_info(self) -> Dict[str, Any]:
        return {system.name: system.get_debug_info() for system in self._systems}

    # =========================================================================
    # Core Update Loop
    # =========================================================================

    def tick(self, dt: float = FRAME_INTERVAL_MS, bounds: Optional[Bounds] = None) -> SystemResult:
        """Advance the game one step.

        Args:
            dt: Simulated milliseconds since the previous tick
            bounds: Tank rectangle for this tick (defaults to the configured tank)

        Returns:
            Combined result of every system; skipped once the game is lost
        """
        if self.state is GameState.DEFEATED:
            return SystemResult.skipped_result()

        self._bounds = bounds if bounds is not None else self.config.tank.tank_bounds
        frame = self.clock.advance(dt)

        result = SystemResult.empty()
        for system in self._systems:
            result = result + system.update(frame)

        # Clones join after predation so they are safe until the next tick
        births = self.feeding_system.apply_spawns(frame)
        result = result + SystemResult(entities_spawned=births, details={"births": births})

        self.level.check_progress(frame)
        return result

    # =========================================================================
    # Input
    # =========================================================================

    def on_drag_start(self, point: PointLike) -> bool:
        """Pick up food from the panel.

        Returns:
            True if a drag started (pointer on the panel and a charge available)
        """
        if self.state is not GameState.RUNNING:
            return False
        point = as_point(point)
        if not self.config.tank.panel_bounds.contains(point):
            return False
        if self.level.food_charges <= 0:
            return False

        self.pointer.dragging = True
        self.pointer.position = point
        return True

    def on_drag_move(self, point: PointLike) -> None:
        if self.pointer.dragging:
            self.pointer.position = as_point(point)

    def on_drag_release(self, point: PointLike) -> Optional[Fish]:
        """Drop the carried food.

        A drop inside the tank feeds the nearest fish in reach and uses one
        charge; a drop that reaches nobody is free. Every fish goes back to
        free roaming afterwards.

        Returns:
            The fish that was fed, or None
        """
        if not self.pointer.dragging:
            return None
        self.pointer.reset()
        if self.state is not GameState.RUNNING:
            return None

        point = as_point(point)
        fed = None
        if self._bounds.contains(point) and self.level.food_charges > 0:
            fed = self.feeding_system.feed_from_drop(point, self.frame)
            if fed is not None:
                self.level.consume_food_charge()

        for fish in self.level.fishes:
            fish.roam()

        if fed is not None:
            self.level.check_level_complete(self.frame)
        return fed

    def add_food_charge(self) -> Optional[FallingFood]:
        """Food timer tick. Ignored once the game is lost."""
        return self.level.add_food_charge(self._bounds)

    def restart(self) -> None:
        """Start a new game at level 1."""
        self.pointer.reset()
        self._mutations.clear()
        self.level.restart(self.frame)

    # =========================================================================
    # Output
    # =========================================================================

    def snapshot(self) -> GameSnapshot:
        return build_snapshot(self)

    def get_stats(self) -> Dict[str, Any]:
        level = self.level
        return {
            "frame": self.frame,
            "level": level.level,
            "state": level.state.name,
            "alive": level.alive,
            "target_population": level.target_population,
            "deaths": level.death_count,
            "food_charges": level.food_charges,
            "falling_food": len(level.foods),
        }

    # =========================================================================
    # Run Methods
    # =========================================================================

    def run_headless(self, max_frames: int = 3600, stats_interval: int = 600) -> Dict[str, Any]:
        """Run without a window: food charges arrive on the timer, nobody feeds.

        Returns:
            Final stats
        """
        timer = FoodChargeTimer(self.add_food_charge, self.config.food.charge_interval_ms)

        def reset_timer(_event: LevelStartedEvent) -> None:
            timer.reset()

        self._events.subscribe(LevelStartedEvent, reset_timer)

        logger.info(
            "Running headless for %d frames (%.1f seconds of game time)",
            max_frames,
            max_frames / FRAME_RATE,
        )
        try:
            for frame in range(1, max_frames + 1):
                if self.state is GameState.DEFEATED:
                    logger.info("Game over at frame %d", self.frame)
                    break
                self.tick(FRAME_INTERVAL_MS)
                timer.advance(FRAME_INTERVAL_MS)
                if stats_interval > 0 and frame % stats_interval == 0:
                    logger.info("Stats: %s", self.get_stats())
        finally:
            self._events.unsubscribe(LevelStartedEvent, reset_timer)

        stats = self.get_stats()
        logger.info("Final stats: %s", stats)
        return stats
