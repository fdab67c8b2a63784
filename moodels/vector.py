"""A small immutable two-dimensional vector."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: float | Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other: float) -> Vec2:
        return self * other

    def __truediv__(self, other: float | Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to ``other``."""
        return (self - other).length()

    def try_normalize(self) -> Vec2 | None:
        """The unit vector in this direction, or None if there is none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return None
        return self / length

    def normalize_or_zero(self) -> Vec2:
        """The unit vector in this direction, or the zero vector."""
        normalized = self.try_normalize()
        return ZERO if normalized is None else normalized

    def rem_euclid(self, other: Vec2) -> Vec2:
        """Component-wise Euclidean remainder; results are never negative."""
        return Vec2(self.x % abs(other.x), self.y % abs(other.y))


ZERO = Vec2(0.0, 0.0)