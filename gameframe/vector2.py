"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(eq=False)
class Vector2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        """Scale by a number; a vector operand scales both components by its x."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.x)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Vector2 | float) -> Vector2:
        """Divide component-wise by a vector, or by a number."""
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __rtruediv__(self, other: float) -> Vector2:
        """Dividing a number by a vector divides the vector's components by the number."""
        if isinstance(other, Real):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2(0.0, 0.0)
        return self / length

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.square_length())

    def distance(self, other: Vector2) -> float:
        return (self - other).length()

    def square_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def square_distance(self, other: Vector2) -> float:
        return (self - other).square_length()

    def angle(self, other: Vector2) -> float:
        """Angle between the two vectors in radians; 0 if either is zero."""
        sq1 = self.square_length()
        sq2 = other.square_length()
        if sq1 > 0.0 and sq2 > 0.0:
            cos = self.dot(other) / (math.sqrt(sq1) * math.sqrt(sq2))
            return math.acos(max(-1.0, min(1.0, cos)))
        return 0.0