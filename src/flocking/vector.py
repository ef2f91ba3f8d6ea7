from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .errors import DegenerateVectorError, EmptyNeighborSetError


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance(self, other: "Vec2") -> float:
        return (self - other).length()

    def normalized(self) -> "Vec2":
        mag = self.length()
        if mag == 0.0:
            raise DegenerateVectorError("cannot normalize a zero-length vector")
        return Vec2(self.x / mag, self.y / mag)

    def heading(self) -> float:
        return math.atan2(self.y, self.x)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vec2":
        # ZeroDivisionError propagates for scalar == 0
        return Vec2(self.x / scalar, self.y / scalar)

    @staticmethod
    def mean(vectors: Iterable["Vec2"]) -> "Vec2":
        total_x = 0.0
        total_y = 0.0
        count = 0
        for vector in vectors:
            total_x += vector.x
            total_y += vector.y
            count += 1
        if count == 0:
            raise EmptyNeighborSetError("mean of an empty vector set")
        return Vec2(total_x / count, total_y / count)


ZERO = Vec2(0.0, 0.0)
