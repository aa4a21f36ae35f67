# __main__.py
# Entry point: python -m lavarun [levels.json]
# The argument is a path to a levels file, or the name of a bundled one.

from __future__ import annotations
import sys

from .game import Game
from .levels import load_levels_or_default


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    name = argv[0] if argv else "levels.json"

    plans = load_levels_or_default(name)
    print(f"[INFO] Loaded {len(plans)} levels.")
    Game(plans).run()


if __name__ == "__main__":
    main()
