# levels.py
# Loads level plans. A levels file is a JSON array of plans, and each plan
# is an array of row strings, e.g.
#
#   [
#     ["     v  ", "  @  o  ", "xxxxx!xx"],
#     ...
#   ]

from __future__ import annotations
import json
import os

from .utils import asset_path

DEFAULT_LEVELS: list[list[str]] = [
    [
        "                      ",
        "                      ",
        "  |                   ",
        "  o                 o ",
        "  x               = x ",
        "  x          o o    x ",
        "  x  @    xxxxx     x ",
        "  xxxxx             x ",
        "      x!!!!!!!!!!!!!x ",
        "      xxxxxxxxxxxxxxx ",
        "                      ",
    ],
    [
        "        |           |  ",
        "                       ",
        "                       ",
        "                       ",
        "                       ",
        "                       ",
        "                       ",
        "                       ",
        "                       ",
        "     |                 ",
        "                       ",
        "         =      |      ",
        " @ |  o            o   ",
        "xxxxxxxxx!!!!!!!xxxxxxx",
        "                       ",
    ],
    [
        "   v         v",
        "              ",
        "  !o!         ",
        "              ",
        "              ",
        "              ",
        "              ",
        "              ",
        "         xxx  ",
        "          o   ",
        "        =     ",
        "  @           ",
        "xxxx          ",
        "              ",
        "     xxx      ",
    ],
]


def validate_plans(data: object) -> list[list[str]]:
    """Check that `data` is a list of plans, each a list of row strings."""
    if not isinstance(data, list):
        raise ValueError(f"Levels must be a list of plans, got {type(data).__name__}.")

    for i, plan in enumerate(data):
        if not isinstance(plan, list) or not all(isinstance(row, str) for row in plan):
            raise ValueError(f"Level {i} must be a list of row strings.")
    return data


def load_levels(name: str = "levels.json") -> list[list[str]]:
    """Load plans from `name`: an existing file path, else a bundled asset."""
    path = name if os.path.isfile(name) else asset_path("levels", name)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Missing levels file: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return validate_plans(data)


def load_levels_or_default(name: str = "levels.json") -> list[list[str]]:
    try:
        return load_levels(name)
    except FileNotFoundError as e:
        print(f"[WARN] {e}. Using built-in levels.")
        return DEFAULT_LEVELS
