# core/board.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Snapshot

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3
GLYPHS = {EMPTY: ".", BODY: "o", HEAD: "H", FOOD: "F"}

def encode(s: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) uint8 board: 0 empty, 1 body, 2 head, 3 food.

    Off-grid cells (a head that just hit the wall) are left out.
    """
    grid = np.zeros((s.grid_h, s.grid_w), dtype=np.uint8)
    if s.food is not None:
        fx, fy = s.food
        grid[fy, fx] = FOOD
    for (x, y) in s.snake[1:]:
        if 0 <= x < s.grid_w and 0 <= y < s.grid_h:
            grid[y, x] = BODY
    hx, hy = s.head
    if 0 <= hx < s.grid_w and 0 <= hy < s.grid_h:
        grid[hy, hx] = HEAD
    return grid

def to_text(s: Snapshot) -> List[str]:
    grid = encode(s)
    return ["".join(GLYPHS[int(v)] for v in row) for row in grid]
