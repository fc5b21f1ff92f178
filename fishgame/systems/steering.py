"""Steering system: choose targets, then move every fish one step.

Target priority each tick:

1. A drag in progress with the pointer inside the tank lures every fish.
   A drag outside the tank leaves the current targets alone.
2. Otherwise, with falling food enabled, each fish chases the nearest
   falling pellet, or roams freely when the tank has none.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from fishgame.entities import FallingFood, Fish
from fishgame.movement import steer
from fishgame.systems.base import BaseSystem, SystemResult
from fishgame.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from fishgame.game import FishTankGame

logger = logging.getLogger(__name__)


def nearest_food(fish: Fish, foods: List[FallingFood]) -> Optional[FallingFood]:
    """Closest pellet to the fish's center; the first of equally close pellets wins."""
    closest = None
    min_dist_sq = float("inf")
    center = fish.center
    for food in foods:
        dist_sq = (food.center - center).length_squared()
        if dist_sq < min_dist_sq:
            min_dist_sq = dist_sq
            closest = food
    return closest


@runs_in_phase(UpdatePhase.STEERING)
class SteeringSystem(BaseSystem):
    """Assigns lure/food targets and advances fish positions."""

    def __init__(self, game: "FishTankGame") -> None:
        super().__init__(game, "Steering")

    def _do_update(self, frame: int) -> SystemResult:
        fishes = self.game.level.fishes
        if not fishes:
            return SystemResult.empty()

        self.assign_targets()

        bounds = self.game.bounds
        fish_cfg = self.game.config.fish
        chasing = 0
        for fish in fishes:
            if fish.is_chasing:
                chasing += 1
            steer(fish, bounds, fish_cfg.chase_speed_multiplier, fish_cfg.chase_deadband)

        return SystemResult(entities_affected=len(fishes), details={"chasing": chasing})

    def assign_targets(self) -> None:
        fishes = self.game.level.fishes
        pointer = self.game.pointer

        if pointer.dragging:
            position = pointer.position
            if position is not None and self.game.bounds.contains(position):
                for fish in fishes:
                    fish.chase(position)
            return

        if not self.game.config.food.falling_food_enabled:
            return

        foods = self.game.level.foods
        for fish in fishes:
            food = nearest_food(fish, foods)
            if food is None:
                fish.roam()
            else:
                fish.chase(food.center)
