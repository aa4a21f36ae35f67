# parser.py
# Turns a level plan (a list of text rows) into a Level.
#
#   x  wall            @  player
#   !  lava            o  coin
#                      =  horizontal fireball
#                      |  vertical fireball
#                      v  fire rain
#
# Terrain symbols are fixed. Actor symbols come from the dictionary given to
# the parser, so new actor types can be added without touching this file.

from __future__ import annotations
from collections.abc import Callable, Mapping, Sequence

from .actor import Actor
from .coin import Coin
from .fireballs import FireRain, HorizontalFireball, VerticalFireball
from .level import Level
from .player import Player
from .vector import Vector

OBSTACLES = {
    "x": Level.WALL,
    "!": Level.LAVA,
}

ACTOR_DICT: dict[str, Callable[[Vector], Actor]] = {
    "@": Player,
    "o": Coin,
    "=": HorizontalFireball,
    "|": VerticalFireball,
    "v": FireRain,
}


class LevelParser:
    def __init__(self, dictionary: Mapping[str, Callable[[Vector], Actor]] | None = None):
        # Own copy, so later edits to the caller's dict don't leak in
        self.dictionary = dict(dictionary or {})

    def actor_from_symbol(self, symbol: str | None) -> Callable[[Vector], Actor] | None:
        if not symbol:
            return None
        return self.dictionary.get(symbol)

    @staticmethod
    def obstacle_from_symbol(symbol: str | None) -> str | None:
        if not symbol:
            return None
        return OBSTACLES.get(symbol)

    def create_grid(self, plan: Sequence[str]) -> list[list[str | None]]:
        return [[self.obstacle_from_symbol(ch) for ch in row] for row in plan]

    def create_actors(self, plan: Sequence[str]) -> list[Actor]:
        actors: list[Actor] = []
        for y, row in enumerate(plan):
            for x, ch in enumerate(row):
                constructor = self.actor_from_symbol(ch)
                if not callable(constructor):
                    continue
                actor = constructor(Vector(x, y))
                if isinstance(actor, Actor):
                    actors.append(actor)
        return actors

    def parse(self, plan: Sequence[str]) -> Level:
        return Level(self.create_grid(plan), self.create_actors(plan))
