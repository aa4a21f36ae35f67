# game.py
# The Game class owns the main loop and high-level states:
# START -> PLAYING -> (LEVEL_LOST or LEVEL_COMPLETE) -> PLAYING ... -> GAME_WON
#
# It is the only place that drives the simulation: every frame it moves the
# player from the keyboard, then steps the level, and stops stepping once
# the level reports it is finished.

from __future__ import annotations
from collections.abc import Sequence

import pygame

from . import settings
from .controls import PlayerController
from .level import Level
from .parser import ACTOR_DICT, LevelParser
from .utils import clamp


class Game:
    def __init__(self, plans: list[list[str]], parser: LevelParser | None = None):
        if not plans:
            raise ValueError("Game requires at least one level plan.")

        pygame.init()

        self.window = pygame.display.set_mode((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT))
        pygame.display.set_caption(settings.TITLE)

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 22)
        self.big_font = pygame.font.SysFont("consolas", 44, bold=True)

        self.plans = plans
        self.parser = parser or LevelParser(ACTOR_DICT)

        # Game state
        self.state = "START"  # START, PLAYING, LEVEL_LOST, LEVEL_COMPLETE, GAME_WON
        self.running = True

        # Camera (in pixels)
        self.camera_x = 0.0
        self.camera_y = 0.0

        # World content
        self.level_index = 0
        self.level: Level | None = None
        self.controller: PlayerController | None = None

        self.load_level(self.level_index)

    def load_level(self, index: int) -> None:
        self.level_index = index
        self.level = self.parser.parse(self.plans[index])
        self.controller = PlayerController(self.level)

        if self.level.player is None:
            print(f"[WARN] Level {index + 1} has no player symbol.")

        # Reset camera so the start feels consistent
        self.camera_x = 0.0
        self.camera_y = 0.0

    # ------------------ Main loop ------------------
    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(settings.FPS) / 1000.0
            dt = min(dt, settings.MAX_FRAME)

            self.handle_events()
            self.update(dt)
            self.draw()

        pygame.quit()

    # ------------------ Events ------------------
    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False

        if self.state == "START":
            if key == pygame.K_RETURN:
                self.state = "PLAYING"

        elif self.state == "LEVEL_LOST":
            if key in (pygame.K_r, pygame.K_RETURN):
                self.load_level(self.level_index)
                self.state = "PLAYING"

        elif self.state == "LEVEL_COMPLETE":
            if key == pygame.K_RETURN:
                self.load_level(self.level_index + 1)
                self.state = "PLAYING"

        elif self.state == "GAME_WON":
            if key == pygame.K_RETURN:
                self.load_level(0)
                self.state = "PLAYING"

    # ------------------ Update ------------------
    def update(self, dt: float, keys: Sequence[bool] | None = None) -> None:
        if self.state != "PLAYING":
            return

        # Safety: these exist when PLAYING
        assert self.level is not None
        assert self.controller is not None

        if keys is None:
            keys = pygame.key.get_pressed()

        self.controller.update(dt, keys)
        self.level.step(dt)

        if self.level.is_finished():
            self.finish_level()
            return

        self.follow_player()

    def finish_level(self) -> None:
        if self.level.status == Level.LOST:
            print(f"[INFO] Level {self.level_index + 1} lost.")
            self.state = "LEVEL_LOST"
        elif self.level_index + 1 < len(self.plans):
            print(f"[INFO] Level {self.level_index + 1} complete.")
            self.state = "LEVEL_COMPLETE"
        else:
            print("[INFO] All levels complete.")
            self.state = "GAME_WON"

    def follow_player(self) -> None:
        player = self.level.player
        if player is None:
            return

        # Keep the player roughly centred, but never show past the level edge
        scale = settings.SCALE
        target_x = (player.pos.x + player.size.x / 2) * scale - settings.WINDOW_WIDTH * 0.5
        target_y = (player.pos.y + player.size.y / 2) * scale - settings.WINDOW_HEIGHT * 0.5
        self.camera_x = clamp(target_x, 0, max(0, self.level.width * scale - settings.WINDOW_WIDTH))
        self.camera_y = clamp(target_y, 0, max(0, self.level.height * scale - settings.WINDOW_HEIGHT))

    # ------------------ Draw ------------------
    def draw(self) -> None:
        self.window.fill(settings.COLORS["background"])

        if self.state == "START":
            self.draw_center_text("LAVA RUN", y=170, big=True)
            self.draw_center_text("Press ENTER to start", y=260)
            self.draw_center_text("A/D move, W jump, collect every coin", y=310)
            pygame.display.flip()
            return

        assert self.level is not None

        self.draw_grid()
        self.draw_actors()
        self.draw_ui()

        if self.state == "LEVEL_LOST":
            self.draw_overlay()
            self.draw_center_text("YOU LOST", y=220, big=True)
            self.draw_center_text("Press R to retry", y=290)

        elif self.state == "LEVEL_COMPLETE":
            self.draw_overlay()
            self.draw_center_text("LEVEL COMPLETE!", y=220, big=True)
            self.draw_center_text("Press ENTER for the next level", y=290)

        elif self.state == "GAME_WON":
            self.draw_overlay()
            self.draw_center_text("YOU WON!", y=220, big=True)
            self.draw_center_text("Press ENTER to play again", y=290)

        pygame.display.flip()

    def cell_rect(self, x: float, y: float, w: float, h: float) -> pygame.Rect:
        scale = settings.SCALE
        return pygame.Rect(
            round(x * scale - self.camera_x),
            round(y * scale - self.camera_y),
            round(w * scale),
            round(h * scale),
        )

    def draw_grid(self) -> None:
        for y, row in enumerate(self.level.grid):
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                pygame.draw.rect(self.window, settings.COLORS[cell], self.cell_rect(x, y, 1, 1))

    def draw_actors(self) -> None:
        for actor in self.level.actors:
            color = settings.COLORS.get(actor.type, settings.COLORS["actor"])
            if actor is self.level.player and self.level.status == Level.LOST:
                color = settings.COLORS["player_lost"]
            rect = self.cell_rect(actor.pos.x, actor.pos.y, actor.size.x, actor.size.y)
            pygame.draw.rect(self.window, color, rect)

    # ------------------ UI helpers ------------------
    def draw_ui(self) -> None:
        coins = sum(1 for a in self.level.actors if a.type == "coin")
        txt = self.font.render(
            f"Level {self.level_index + 1}/{len(self.plans)}   Coins left: {coins}",
            True,
            settings.COLORS["text"],
        )
        self.window.blit(txt, (20, 20))

    def draw_center_text(self, text: str, y: int, big: bool = False) -> None:
        f = self.big_font if big else self.font
        surf = f.render(text, True, settings.COLORS["text"])
        rect = surf.get_rect(center=(settings.WINDOW_WIDTH // 2, y))
        self.window.blit(surf, rect)

    def draw_overlay(self) -> None:
        overlay = pygame.Surface((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.window.blit(overlay, (0, 0))
