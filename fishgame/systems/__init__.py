"""Game systems, one per tick phase.

- SteeringSystem: target assignment and movement
- FeedingSystem: falling food, pointer drops, growth and reproduction
- PredationSystem: bigger fish eating smaller ones
"""

from fishgame.systems.base import BaseSystem, SystemResult
from fishgame.systems.feeding import FeedingSystem, feed
from fishgame.systems.predation import PredationSystem, find_prey
from fishgame.systems.steering import SteeringSystem

__all__ = [
    "BaseSystem",
    "FeedingSystem",
    "PredationSystem",
    "SteeringSystem",
    "SystemResult",
    "feed",
    "find_prey",
]
