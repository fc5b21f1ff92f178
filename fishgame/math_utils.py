"""Vector and geometry helpers for the simulation.

Pure Python 2D math: a small ``Vector2``, an axis-aligned ``Bounds``
rectangle and a ``distance`` helper. Nothing here knows about fish.
"""

from __future__ import annotations

import math
from typing import Tuple


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        length = math.sqrt(self.x * self.x + self.y * self.y)
        if length == 0:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector2":
        """Build a vector pointing along ``angle`` (radians) with the given length."""
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


class Bounds:
    """Axis-aligned rectangle given by its left/top corner and size.

    ``contains`` follows the half-open convention: the left and top edges
    are inside, the right and bottom edges are not.
    """

    __slots__ = ("left", "top", "width", "height")

    def __init__(self, left: float, top: float, width: float, height: float) -> None:
        self.left = float(left)
        self.top = float(top)
        self.width = float(width)
        self.height = float(height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.left + self.width / 2, self.top + self.height / 2)

    def contains(self, point: Vector2) -> bool:
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def clamp_box(self, pos: Vector2, size: float) -> Tuple[bool, bool]:
        """Clamp a ``size`` x ``size`` box at ``pos`` into this rectangle in place.

        Returns:
            Whether the x and y coordinates had to be clamped.
        """
        clamped_x = clamped_y = False
        if pos.x < self.left:
            pos.x = self.left
            clamped_x = True
        elif pos.x + size > self.right:
            pos.x = self.right - size
            clamped_x = True
        if pos.y < self.top:
            pos.y = self.top
            clamped_y = True
        elif pos.y + size > self.bottom:
            pos.y = self.bottom - size
            clamped_y = True
        return clamped_x, clamped_y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return False
        return (self.left, self.top, self.width, self.height) == (
            other.left,
            other.top,
            other.width,
            other.height,
        )

    def __repr__(self) -> str:
        return f"Bounds({self.left}, {self.top}, {self.width}, {self.height})"


__all__ = ["Bounds", "Vector2", "distance"]
