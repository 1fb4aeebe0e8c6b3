"""Distance estimates for 4-connected unit-cost grids."""

from __future__ import annotations


def heuristic(x1: int, y1: int, x2: int, y2: int) -> int:
    return abs(x2 - x1) + abs(y2 - y1)
