"""Shared fixtures. pygame runs headless for the controller and game tests."""

import os
import random
from collections import defaultdict

# Must be set before pygame creates a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from lavarun.parser import ACTOR_DICT, LevelParser


@pytest.fixture
def parser():
    return LevelParser(ACTOR_DICT)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def keys():
    """Pressed-keys table: every key is up unless a test sets it."""
    return defaultdict(bool)
