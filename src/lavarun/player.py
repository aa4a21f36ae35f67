# player.py
# The player actor. It has no behaviour of its own: the controller
# (controls.py) moves it from keyboard input, and the level checks what it
# touches after every tick.

from __future__ import annotations

from .actor import Actor
from .vector import Vector


class Player(Actor):
    def __init__(self, pos: Vector | None = None):
        if pos is None:
            pos = Vector(0, 0)
        # The plan symbol marks the feet; the body is 1.5 cells tall
        super().__init__(pos.plus(Vector(0, -0.5)), Vector(0.8, 1.5))

    @property
    def type(self) -> str:
        return "player"
