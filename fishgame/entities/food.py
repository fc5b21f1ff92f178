"""Falling food pellets."""

from fishgame.config.food import FOOD_FALL_SPEED, FOOD_SIZE
from fishgame.math_utils import Bounds, Vector2


class FallingFood:
    """Overflow food sinking through the tank at a constant speed."""

    def __init__(
        self, x: float, y: float, size: float = FOOD_SIZE, speed: float = FOOD_FALL_SPEED
    ) -> None:
        self.pos: Vector2 = Vector2(x, y)
        self.size: float = float(size)
        self.speed: float = float(speed)

    @property
    def center(self) -> Vector2:
        half = self.size / 2
        return Vector2(self.pos.x + half, self.pos.y + half)

    @property
    def radius(self) -> float:
        return self.size / 2

    def fall(self) -> None:
        self.pos.y += self.speed

    def is_below(self, bounds: Bounds) -> bool:
        """True once the pellet's top edge has sunk past the bottom of ``bounds``."""
        return self.pos.y > bounds.bottom

    def __repr__(self) -> str:
        return f"FallingFood(pos=({self.pos.x:.1f}, {self.pos.y:.1f}))"
