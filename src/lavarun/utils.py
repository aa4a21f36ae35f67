# utils.py
# Small helpers so core classes stay readable.

from __future__ import annotations
import os


def asset_path(*parts: str) -> str:
    """Build a path inside the package's assets folder."""
    here = os.path.dirname(__file__)
    return os.path.join(here, "assets", *parts)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
