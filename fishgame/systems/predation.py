"""Predation: bigger fish eat overlapping smaller fish.

Each unordered pair of live fish is examined once per tick. A pair overlaps
when the distance between centers is less than the sum of the radii; the
bigger fish eats the smaller only when it is strictly more than
``predation_size_ratio`` times its size. Fish within that band of each other
never eat one another.

A fish eaten earlier in the scan takes no further part in it, and nothing is
removed until the scan is over.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Set, Tuple

from fishgame.config.fish import PREDATION_SIZE_RATIO
from fishgame.entities import Fish
from fishgame.events import FishEatenEvent
from fishgame.math_utils import distance
from fishgame.mutation_queue import FishMutationQueue
from fishgame.systems.base import BaseSystem, SystemResult
from fishgame.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from fishgame.game import FishTankGame

logger = logging.getLogger(__name__)


def collides(a: Fish, b: Fish) -> bool:
    return distance(a.center, b.center) < a.radius + b.radius


def find_prey(
    fishes: List[Fish], size_ratio: float = PREDATION_SIZE_RATIO
) -> List[Tuple[Fish, Fish]]:
    """Scan every pair once.

    Returns:
        (prey, predator) pairs in scan order; each prey appears once
    """
    eaten: Set[int] = set()
    meals: List[Tuple[Fish, Fish]] = []

    for i, a in enumerate(fishes):
        for b in fishes[i + 1 :]:
            if a.fish_id in eaten:
                break
            if b.fish_id in eaten or not collides(a, b):
                continue

            if a.size > b.size * size_ratio:
                prey, predator = b, a
            elif b.size > a.size * size_ratio:
                prey, predator = a, b
            else:
                continue

            eaten.add(prey.fish_id)
            meals.append((prey, predator))

    return meals


@runs_in_phase(UpdatePhase.PREDATION)
class PredationSystem(BaseSystem):
    """Removes eaten fish and counts them against the casualty limit."""

    def __init__(self, game: "FishTankGame", mutations: FishMutationQueue) -> None:
        super().__init__(game, "Predation")
        self._mutations = mutations
        self._total_eaten = 0

    def _do_update(self, frame: int) -> SystemResult:
        level = self.game.level
        if len(level.fishes) < 2:
            return SystemResult.empty()

        meals = find_prey(level.fishes, self.game.config.fish.predation_size_ratio)
        if not meals:
            return SystemResult(details={"fish_eaten": 0})

        predators: Dict[int, Fish] = {}
        for prey, predator in meals:
            self._mutations.request_remove(prey, reason="eaten", related_id=predator.fish_id)
            predators[prey.fish_id] = predator

        removed = 0
        for mutation in self._mutations.drain_removals():
            prey = mutation.fish
            if not level.remove_fish(prey):
                continue
            removed += 1
            predator = predators[prey.fish_id]
            logger.debug(
                "Fish %s (%.1f) ate fish %s (%.1f)",
                predator.fish_id,
                predator.size,
                prey.fish_id,
                prey.size,
            )
            self.game.events.emit(
                FishEatenEvent(
                    prey_id=prey.fish_id,
                    predator_id=predator.fish_id,
                    prey_size=prey.size,
                    predator_size=predator.size,
                    frame=frame,
                )
            )

        level.record_deaths(removed)
        self._total_eaten += removed
        return SystemResult(
            entities_affected=removed,
            entities_removed=removed,
            details={"fish_eaten": removed},
        )

    def get_debug_info(self):
        info = super().get_debug_info()
        info["total_eaten"] = self._total_eaten
        return info
