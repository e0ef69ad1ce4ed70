"""Immutable two-dimensional vector of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """A 2D vector supporting the usual arithmetic with scalars and vectors."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(scalar * self.x, scalar * self.y)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("cannot divide a vector by a zero scalar")
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector raises ValueError."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize the zero vector")
        return Vec2(self.x / length, self.y / length)

    def rotated(self, angle: float) -> Vec2:
        """Vector rotated by ``angle`` radians (clockwise in screen coordinates)."""
        sin = math.sin(angle)
        cos = math.cos(angle)
        return Vec2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)