"""Tests for the Game driver: state flow and level progression (headless)."""

import pygame
import pytest

from lavarun.game import Game
from lavarun.level import Level

# Player stands left of a coin; walking right collects it
WIN_PLAN = [
    "  ",
    "@o",
    "xx",
]

# Player stands on lava
LOSE_PLAN = [
    "  ",
    "@ ",
    "!!",
]


@pytest.fixture
def make_game():
    yield Game
    pygame.quit()


def play_until(game, keys, states, dt=0.05, limit=200):
    for _ in range(limit):
        game.update(dt, keys)
        if game.state in states:
            return
    raise AssertionError(f"state stayed {game.state}")


class TestGame:
    def test_requires_plans(self):
        with pytest.raises(ValueError):
            Game([])

    def test_starts_on_title_screen(self, make_game, keys):
        game = make_game([LOSE_PLAN])
        assert game.state == "START"
        game.update(1.0, keys)
        assert game.level.status is None

    def test_enter_starts_playing(self, make_game):
        game = make_game([WIN_PLAN])
        game.handle_key(pygame.K_RETURN)
        assert game.state == "PLAYING"

    def test_losing_and_retrying(self, make_game, keys):
        game = make_game([LOSE_PLAN])
        game.handle_key(pygame.K_RETURN)

        game.update(0.05, keys)
        assert game.level.status == Level.LOST
        assert game.state == "PLAYING"

        play_until(game, keys, {"LEVEL_LOST"})
        assert game.level.is_finished()

        game.handle_key(pygame.K_r)
        assert game.state == "PLAYING"
        assert game.level.status is None
        assert game.level_index == 0

    def test_winning_advances_to_next_level(self, make_game, keys):
        game = make_game([WIN_PLAN, LOSE_PLAN])
        game.handle_key(pygame.K_RETURN)
        keys[pygame.K_d] = True

        play_until(game, keys, {"LEVEL_COMPLETE"})
        assert game.level.status == Level.WON

        game.handle_key(pygame.K_RETURN)
        assert game.state == "PLAYING"
        assert game.level_index == 1
        assert game.level.grid[2] == ["lava", "lava"]

    def test_winning_last_level_wins_game(self, make_game, keys):
        game = make_game([WIN_PLAN])
        game.handle_key(pygame.K_RETURN)
        keys[pygame.K_d] = True

        play_until(game, keys, {"GAME_WON"})

        game.handle_key(pygame.K_RETURN)
        assert game.state == "PLAYING"
        assert game.level_index == 0

    def test_escape_stops_running(self, make_game):
        game = make_game([WIN_PLAN])
        game.handle_key(pygame.K_ESCAPE)
        assert not game.running

    @pytest.mark.parametrize("state", ["START", "PLAYING", "LEVEL_LOST", "LEVEL_COMPLETE", "GAME_WON"])
    def test_draws_every_state(self, make_game, state):
        game = make_game([WIN_PLAN, LOSE_PLAN])
        game.state = state
        game.draw()
