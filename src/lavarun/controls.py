# controls.py
# Keyboard-driven movement for the player actor.
#
# The simulation core does not move the player; this controller does, once
# per tick and before the level's own tick:
# - A/D or Left/Right set horizontal speed
# - gravity always pulls down
# - W/Up/Space jumps, but only while standing on something
#
# Moves are done one axis at a time. A move that would end inside terrain is
# cancelled and reported to the level as a contact (so walking into lava
# still loses the level).

from __future__ import annotations
from collections.abc import Sequence

import pygame

from . import settings
from .level import Level
from .vector import Vector

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
JUMP_KEYS = (pygame.K_w, pygame.K_UP, pygame.K_SPACE)


def any_pressed(keys: Sequence[bool], group: tuple[int, ...]) -> bool:
    return any(keys[k] for k in group)


class PlayerController:
    def __init__(self, level: Level):
        self.level = level
        self.on_ground = False

    def update(self, dt: float, keys: Sequence[bool]) -> None:
        player = self.level.player
        if player is None or self.level.status is not None:
            return

        self.move_x(dt, keys)
        self.move_y(dt, keys)

    def move_x(self, dt: float, keys: Sequence[bool]) -> None:
        player = self.level.player

        speed_x = 0.0
        if any_pressed(keys, LEFT_KEYS):
            speed_x -= settings.PLAYER_X_SPEED
        if any_pressed(keys, RIGHT_KEYS):
            speed_x += settings.PLAYER_X_SPEED
        player.speed = Vector(speed_x, player.speed.y)

        new_pos = player.pos.plus(Vector(speed_x * dt, 0))
        obstacle = self.level.obstacle_at(new_pos, player.size)
        if obstacle:
            self.level.player_touched(obstacle)
        else:
            player.pos = new_pos

    def move_y(self, dt: float, keys: Sequence[bool]) -> None:
        player = self.level.player

        speed_y = player.speed.y + settings.GRAVITY * dt
        new_pos = player.pos.plus(Vector(0, speed_y * dt))
        obstacle = self.level.obstacle_at(new_pos, player.size)

        self.on_ground = False
        if obstacle:
            self.level.player_touched(obstacle)
            if speed_y > 0:
                self.on_ground = True
            if self.on_ground and any_pressed(keys, JUMP_KEYS):
                speed_y = -settings.JUMP_SPEED
            else:
                speed_y = 0.0
        else:
            player.pos = new_pos

        player.speed = Vector(player.speed.x, speed_y)
