"""Small 2D math types: vectors and integer rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> Vector2:
        """Return a new zero vector."""
        return Vector2(0.0, 0.0)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vector2.zero()
        return Vector2(self.x / size, self.y / size)

    def clamped(self, low: float, high: float) -> Vector2:
        """Clamp each component into the range [low, high]."""
        return Vector2(min(max(self.x, low), high), min(max(self.y, low), high))


@dataclass
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles are non-empty and overlap by a positive area."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )


def check_collision(a: Rect, b: Rect) -> bool:
    """Whether two rectangles overlap."""
    return a.intersects(b)