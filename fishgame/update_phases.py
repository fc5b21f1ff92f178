"""Update phase definitions for explicit execution ordering.

One tick of the game runs these phases in order:

1. STEERING: pick each fish's target, then move every fish one step
2. FEEDING: sink falling food and let the nearest fish eat it
3. PREDATION: larger fish eat overlapping smaller ones
4. PROGRESSION: defeat check first, then the level-complete check

Steering comes before feeding so a fish eats where it ends the step, and
predation comes after feeding so a clone born this tick is safe until the
next one. The progression checks run last on the settled population.
"""

from enum import Enum, auto
from typing import Callable, Type, TypeVar

__all__ = ["UpdatePhase", "runs_in_phase"]

T = TypeVar("T")


class UpdatePhase(Enum):
    """Phases of a game tick, in execution order."""

    STEERING = auto()
    FEEDING = auto()
    PREDATION = auto()
    PROGRESSION = auto()


def runs_in_phase(phase: UpdatePhase) -> Callable[[Type[T]], Type[T]]:
    """Class decorator recording which phase a system belongs to.

    Example:
        @runs_in_phase(UpdatePhase.PREDATION)
        class PredationSystem(BaseSystem):
            ...
    """

    def decorator(cls: Type[T]) -> Type[T]:
        cls._phase = phase  # type: ignore[attr-defined]
        return cls

    return decorator
