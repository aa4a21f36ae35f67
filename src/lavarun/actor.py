# actor.py
# Base class for everything that moves on the field (player, coins, fireballs).
# Subclasses override `type` and `act()`.

from __future__ import annotations

from .errors import TypeArgumentError
from .vector import Vector


class Actor:
    """Position, size and speed on the grid, plus bounding-box edges."""
    def __init__(self, pos: Vector | None = None, size: Vector | None = None, speed: Vector | None = None):
        if pos is None:
            pos = Vector(0, 0)
        if size is None:
            size = Vector(1, 1)
        if speed is None:
            speed = Vector(0, 0)

        for value in (pos, size, speed):
            if not isinstance(value, Vector):
                raise TypeArgumentError("Vector", value)
        if size.x <= 0 or size.y <= 0:
            raise ValueError(f"Actor size must be positive, got {size}.")

        self.pos = pos
        self.size = size
        self.speed = speed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self.pos}, size={self.size}, speed={self.speed})"

    @property
    def type(self) -> str:
        return "actor"

    @property
    def left(self) -> float:
        return self.pos.x

    @property
    def top(self) -> float:
        return self.pos.y

    @property
    def right(self) -> float:
        return self.pos.x + self.size.x

    @property
    def bottom(self) -> float:
        return self.pos.y + self.size.y

    def act(self, time: float = 1, level=None) -> None:
        """Advance one tick. Does nothing for a plain actor."""

    def is_intersect(self, other: Actor) -> bool:
        if not isinstance(other, Actor):
            raise TypeArgumentError("Actor", other)

        # An actor never intersects itself
        if other is self:
            return False

        # Strict comparisons: touching edges or corners is not an overlap
        return (
            self.right > other.left
            and self.left < other.right
            and self.top < other.bottom
            and self.bottom > other.top
        )
