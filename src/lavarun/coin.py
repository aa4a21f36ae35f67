# coin.py
# Coins. Collect all of them to win the level.
# A coin bobs up and down around its spawn point; the bob is visual only,
# the coin never moves sideways.

from __future__ import annotations
import math
import random

from . import settings
from .actor import Actor
from .vector import Vector


class Coin(Actor):
    def __init__(self, pos: Vector | None = None, rng: random.Random | None = None):
        if pos is None:
            pos = Vector(0, 0)
        # Sit roughly in the middle of the cell
        super().__init__(pos.plus(Vector(0.2, 0.1)), Vector(0.6, 0.6))

        rng = rng or random
        self.start_pos = self.pos
        self.spring = rng.random() * 2 * math.pi
        self.spring_speed = settings.COIN_SPRING_SPEED
        self.spring_dist = settings.COIN_SPRING_DIST

    @property
    def type(self) -> str:
        return "coin"

    def update_spring(self, time: float = 1) -> None:
        self.spring += self.spring_speed * time

    def get_spring_vector(self) -> Vector:
        return Vector(0, math.sin(self.spring) * self.spring_dist)

    def get_next_position(self, time: float = 1) -> Vector:
        self.update_spring(time)
        return self.start_pos.plus(self.get_spring_vector())

    def act(self, time: float = 1, level=None) -> None:
        self.pos = self.get_next_position(time)
