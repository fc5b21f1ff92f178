"""Feeding, growth and reproduction.

``feed`` applies one meal to a fish and returns the clone it produces on
every third meal. ``FeedingSystem`` decides who gets to eat:

- Pointer drop: the fish nearest the drop point among those whose center is
  within ``radius + drop_radius`` eats; nobody else does.
- Falling food: every tick each pellet sinks, then the nearest fish whose
  center is within ``radius + pellet radius`` eats it. Pellets that sink
  past the tank bottom uneaten are discarded.

Clones from falling food stay queued until the tick has run predation
(``FishTankGame.tick`` calls ``apply_spawns``), so they cannot eat or be
eaten before the next tick.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from fishgame.config.fish import FISH_GROWTH_RATE, FISH_SPEED_INCREMENT, MEALS_PER_OFFSPRING
from fishgame.entities import Fish
from fishgame.events import FishBornEvent, FoodEatenEvent
from fishgame.math_utils import Vector2, distance
from fishgame.mutation_queue import FishMutationQueue
from fishgame.systems.base import BaseSystem, SystemResult
from fishgame.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from fishgame.game import FishTankGame

logger = logging.getLogger(__name__)


def feed(
    fish: Fish,
    growth_multiplier: float,
    growth_rate: float = FISH_GROWTH_RATE,
    speed_increment: float = FISH_SPEED_INCREMENT,
    meals_per_offspring: int = MEALS_PER_OFFSPRING,
) -> Optional[Fish]:
    """Feed a fish one meal.

    Args:
        fish: The fish that ate
        growth_multiplier: Level-scaled growth factor
        growth_rate: Size gain per meal before scaling
        speed_increment: Base speed gained per meal
        meals_per_offspring: Meals needed to produce a clone

    Returns:
        The new clone if this meal completed a reproduction cycle, else None
    """
    fish.eat(growth_multiplier, growth_rate, speed_increment)
    if fish.eat_count < meals_per_offspring:
        return None

    child = fish.clone()
    fish.eat_count = 0
    return child


def nearest_fish_within(fishes: List[Fish], point: Vector2, reach: float) -> Optional[Fish]:
    """The fish closest to ``point`` among those whose center is within ``radius + reach``."""
    closest = None
    min_dist = float("inf")
    for fish in fishes:
        dist = distance(fish.center, point)
        if dist < fish.radius + reach and dist < min_dist:
            min_dist = dist
            closest = fish
    return closest


@runs_in_phase(UpdatePhase.FEEDING)
class FeedingSystem(BaseSystem):
    """Resolves who eats dropped and falling food."""

    def __init__(self, game: "FishTankGame", mutations: FishMutationQueue) -> None:
        super().__init__(game, "Feeding")
        self._mutations = mutations
        self._total_meals = 0
        self._total_births = 0

    def _do_update(self, frame: int) -> SystemResult:
        level = self.game.level
        if not level.foods:
            return SystemResult.empty()

        bounds = self.game.bounds
        remaining = []
        eaten = 0
        discarded = 0

        # Newest pellets first
        for food in reversed(level.foods):
            food.fall()
            eater = nearest_fish_within(level.fishes, food.center, food.radius)
            if eater is not None:
                self.feed_fish(eater, source="falling", frame=frame)
                eaten += 1
            elif food.is_below(bounds):
                discarded += 1
            else:
                remaining.append(food)

        remaining.reverse()
        level.foods[:] = remaining

        return SystemResult(
            entities_affected=eaten,
            entities_removed=eaten + discarded,
            details={"food_eaten": eaten, "food_discarded": discarded},
        )

    def find_drop_target(self, point: Vector2) -> Optional[Fish]:
        return nearest_fish_within(
            self.game.level.fishes, point, self.game.config.food.drop_radius
        )

    def feed_from_drop(self, point: Vector2, frame: int = 0) -> Optional[Fish]:
        """Feed the fish nearest a pointer drop.

        Returns:
            The fish that ate, or None if the drop reached nobody
        """
        fish = self.find_drop_target(point)
        if fish is None:
            return None
        self.feed_fish(fish, source="drop", frame=frame)
        self.apply_spawns(frame)
        return fish

    def feed_fish(self, fish: Fish, source: str, frame: int = 0) -> Optional[Fish]:
        """Apply one meal and queue the clone it may produce."""
        fish_cfg = self.game.config.fish
        child = feed(
            fish,
            self.game.level.growth_multiplier,
            fish_cfg.growth_rate,
            fish_cfg.speed_increment,
            fish_cfg.meals_per_offspring,
        )
        self._total_meals += 1

        self.game.events.emit(
            FoodEatenEvent(
                fish_id=fish.fish_id,
                source=source,
                new_size=fish.size,
                eat_count=fish.eat_count,
                frame=frame,
            )
        )
        if child is not None:
            self._mutations.request_spawn(child, reason="reproduction", related_id=fish.fish_id)
        return child

    def apply_spawns(self, frame: int = 0) -> int:
        """Add queued clones to the population."""
        spawns = self._mutations.drain_spawns()
        for mutation in spawns:
            child = mutation.fish
            self.game.level.add_fish(child)
            self._total_births += 1
            logger.debug("Fish %s born from %s", child.fish_id, mutation.related_id)
            self.game.events.emit(
                FishBornEvent(
                    fish_id=child.fish_id,
                    parent_id=mutation.related_id if mutation.related_id is not None else 0,
                    size=child.size,
                    frame=frame,
                )
            )
        return len(spawns)

    def get_debug_info(self):
        info = super().get_debug_info()
        info.update({"total_meals": self._total_meals, "total_births": self._total_births})
        return info
