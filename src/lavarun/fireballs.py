# fireballs.py
# Fireballs: 1x1 hazards that move at constant speed and react when their
# next position would hit terrain.
#
# - Fireball bounces back (speed is reversed).
# - HorizontalFireball / VerticalFireball are Fireballs with a fixed speed.
# - FireRain falls and jumps back to where it spawned instead of bouncing.

from __future__ import annotations

from . import settings
from .actor import Actor
from .vector import Vector


class Fireball(Actor):
    """Shared movement for all fireballs. Touching one loses the level."""
    def __init__(self, pos: Vector | None = None, speed: Vector | None = None):
        super().__init__(pos, Vector(1, 1), speed)

    @property
    def type(self) -> str:
        return "fireball"

    def get_next_position(self, time: float = 1) -> Vector:
        return self.pos.plus(self.speed.times(time))

    def handle_obstacle(self) -> None:
        self.speed = self.speed.times(-1)

    def act(self, time: float, level) -> None:
        next_pos = self.get_next_position(time)
        if level.obstacle_at(next_pos, self.size):
            self.handle_obstacle()
        else:
            self.pos = next_pos


class HorizontalFireball(Fireball):
    # Speed is fixed; a passed-in speed is ignored
    def __init__(self, pos: Vector | None = None, speed: Vector | None = None):
        super().__init__(pos, Vector(settings.HORIZONTAL_FIREBALL_SPEED, 0))


class VerticalFireball(Fireball):
    def __init__(self, pos: Vector | None = None, speed: Vector | None = None):
        super().__init__(pos, Vector(0, settings.VERTICAL_FIREBALL_SPEED))


class FireRain(Fireball):
    """Falls straight down; on impact it restarts from its spawn cell."""
    def __init__(self, pos: Vector | None = None, speed: Vector | None = None):
        super().__init__(pos, Vector(0, settings.FIRE_RAIN_SPEED))
        self.start_pos = self.pos

    def handle_obstacle(self) -> None:
        self.pos = self.start_pos
