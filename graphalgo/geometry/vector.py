"""
Immutable 2D vector for geometric computations on node positions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """
    A point or direction in the plane.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: float
    y: float

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vector2D:
        return Vector2D(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def direction(self) -> float:
        """Angle in radians, measured as atan2(x, y) (clockwise from +y)."""
        return math.atan2(self.x, self.y)

    def unit(self) -> Vector2D:
        """
        Vector of length 1 pointing the same way.

        Raises:
            ValueError: If this is the zero vector
        """
        length = self.magnitude()
        if length == 0:
            raise ValueError("Cannot normalize the zero vector")
        return self * (1 / length)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def projected_onto(self, other: Vector2D) -> Vector2D:
        length_sq = other.dot(other)
        if length_sq == 0:
            raise ValueError("Cannot project onto the zero vector")
        return other * (self.dot(other) / length_sq)

    def rotated(self, radians: float) -> Vector2D:
        """Rotate counter-clockwise about the origin."""
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector2D(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotated_around(self, pivot: Vector2D, radians: float) -> Vector2D:
        return (self - pivot).rotated(radians) + pivot

    def distance_to(self, other: Vector2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
