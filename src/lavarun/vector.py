# vector.py
# Immutable 2D position / size / displacement in grid cells.

from __future__ import annotations
from dataclasses import dataclass

from .errors import TypeArgumentError


@dataclass(frozen=True)
class Vector:
    x: float = 0
    y: float = 0

    def plus(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            raise TypeArgumentError("Vector", other)
        return Vector(self.x + other.x, self.y + other.y)

    def times(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)
