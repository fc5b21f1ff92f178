"""Steering engine: one step of movement for a single fish.

A fish is always in exactly one steering mode:

- ``FreeRoam``: drift along the stored velocity and bounce off the walls.
- ``Chasing(x, y)``: swim straight at a point at boosted speed and stop
  inside a small deadband. Walls clamp but never bounce, so a fish held
  against the glass by a lure stays there.

The stored velocity is untouched while chasing, so dropping back to
``FreeRoam`` resumes the previous heading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from fishgame.config.fish import CHASE_DEADBAND, CHASE_SPEED_MULTIPLIER
from fishgame.math_utils import Bounds, Vector2

if TYPE_CHECKING:
    from fishgame.entities import Fish


@dataclass(frozen=True)
class FreeRoam:
    """Bounce around on the stored velocity."""


@dataclass(frozen=True)
class Chasing:
    """Swim towards a fixed point (a lure or a food pellet)."""

    x: float
    y: float

    @property
    def target(self) -> Vector2:
        return Vector2(self.x, self.y)

    @classmethod
    def at(cls, point: Vector2) -> "Chasing":
        return cls(point.x, point.y)


SteeringMode = Union[FreeRoam, Chasing]

FREE_ROAM = FreeRoam()


def steer(
    fish: "Fish",
    bounds: Bounds,
    chase_speed_multiplier: float = CHASE_SPEED_MULTIPLIER,
    deadband: float = CHASE_DEADBAND,
) -> None:
    """Advance ``fish`` by one tick inside ``bounds``."""
    mode = fish.steering
    if isinstance(mode, Chasing):
        _follow_target(fish, mode, bounds, chase_speed_multiplier, deadband)
    elif isinstance(mode, FreeRoam):
        _roam(fish, bounds)
    else:
        raise TypeError(f"Unknown steering mode: {mode!r}")


def _roam(fish: "Fish", bounds: Bounds) -> None:
    fish.pos.x += fish.vel.x
    fish.pos.y += fish.vel.y

    clamped_x, clamped_y = bounds.clamp_box(fish.pos, fish.size)
    if clamped_x:
        fish.vel.x = -fish.vel.x
    if clamped_y:
        fish.vel.y = -fish.vel.y


def _follow_target(
    fish: "Fish",
    mode: Chasing,
    bounds: Bounds,
    chase_speed_multiplier: float,
    deadband: float,
) -> None:
    to_target = mode.target - fish.center
    dist = to_target.length()

    if dist > deadband:
        speed = fish.base_speed * chase_speed_multiplier
        fish.pos.x += to_target.x / dist * speed
        fish.pos.y += to_target.y / dist * speed

    bounds.clamp_box(fish.pos, fish.size)
