"""Fish entity (pure logic, no rendering)."""

import itertools
import math
import random
from typing import Optional, Tuple

from fishgame.config.fish import (
    FISH_GROWTH_RATE,
    FISH_INITIAL_SIZE,
    FISH_MAX_START_SPEED,
    FISH_MIN_START_SPEED,
    FISH_SPEED_INCREMENT,
)
from fishgame.math_utils import Vector2
from fishgame.movement import FREE_ROAM, Chasing, SteeringMode

Color = Tuple[int, int, int]

_fish_ids = itertools.count(1)


class Fish:
    """A fish in the tank.

    Position is the top-left corner of the fish's bounding square; ``center``
    and ``radius`` derive from it and ``size`` (the diameter).

    Attributes:
        fish_id: Unique identifier used by events and snapshots
        pos: Top-left corner of the bounding square
        vel: Free-roam velocity per tick
        size: Diameter; only grows during a level
        color: Cosmetic RGB color, inherited by clones
        eat_count: Meals since the last clone
        base_speed: Speed magnitude at the last velocity assignment
        steering: Current steering mode (``FreeRoam`` or ``Chasing``)
    """

    def __init__(
        self,
        x: float,
        y: float,
        speed_multiplier: float,
        color: Color,
        rng: random.Random,
        *,
        size: float = FISH_INITIAL_SIZE,
        speed: Optional[float] = None,
    ) -> None:
        """Initialize a fish heading in a random direction.

        Args:
            x: Left edge
            y: Top edge
            speed_multiplier: Level speed factor, fixed for the fish's life
            color: RGB color
            rng: Random source for headings (shared with the game)
            size: Initial diameter
            speed: Initial speed; defaults to uniform(1, 3) * speed_multiplier
        """
        self.fish_id: int = next(_fish_ids)
        self.pos: Vector2 = Vector2(x, y)
        self.vel: Vector2 = Vector2(0, 0)
        self.size: float = float(size)
        self.color: Color = color
        self.eat_count: int = 0
        self.base_speed: float = 0.0
        self.steering: SteeringMode = FREE_ROAM
        self._speed_multiplier = float(speed_multiplier)
        self._rng = rng

        if speed is None:
            speed = rng.uniform(FISH_MIN_START_SPEED, FISH_MAX_START_SPEED) * speed_multiplier
        self.set_velocity(speed)

    @property
    def speed_multiplier(self) -> float:
        return self._speed_multiplier

    @property
    def center(self) -> Vector2:
        half = self.size / 2
        return Vector2(self.pos.x + half, self.pos.y + half)

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def is_chasing(self) -> bool:
        return isinstance(self.steering, Chasing)

    def set_velocity(self, speed: float) -> None:
        """Point the fish in a fresh random direction at ``speed``."""
        angle = self._rng.random() * math.pi * 2
        self.vel = Vector2.from_angle(angle, speed)
        self.base_speed = speed

    def chase(self, point: Vector2) -> None:
        self.steering = Chasing.at(point)

    def roam(self) -> None:
        self.steering = FREE_ROAM

    def eat(
        self,
        growth_multiplier: float,
        growth_rate: float = FISH_GROWTH_RATE,
        speed_increment: float = FISH_SPEED_INCREMENT,
    ) -> None:
        """Grow, speed up and count the meal.

        Velocity keeps its direction and is rescaled to the new speed; a
        motionless fish only has its base speed raised.
        """
        self.size *= 1.0 + growth_rate * growth_multiplier

        new_speed = self.base_speed + speed_increment
        if self.base_speed > 0:
            ratio = new_speed / self.base_speed
            self.vel.x *= ratio
            self.vel.y *= ratio
        self.base_speed = new_speed

        self.eat_count += 1

    def clone(self) -> "Fish":
        """Offspring at the parent's position, size, speed and color."""
        return Fish(
            self.pos.x,
            self.pos.y,
            self._speed_multiplier,
            self.color,
            self._rng,
            size=self.size,
            speed=self.base_speed,
        )

    def __repr__(self) -> str:
        return (
            f"Fish(id={self.fish_id}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}), "
            f"size={self.size:.1f}, eat_count={self.eat_count})"
        )
