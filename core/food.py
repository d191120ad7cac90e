# core/food.py
from __future__ import annotations
import random
from typing import Optional
from .grid import Grid
from .interfaces import Cell
from .snake_body import SnakeBody

class FoodSpawner:
    """Picks a uniformly random free cell using an injected RNG.

    Rejection sampling first; after ``max_attempts`` misses it chooses among the
    enumerated free cells so a crowded board never blocks. Returns None when the
    snake covers the whole grid.
    """
    def __init__(self, rng: Optional[random.Random] = None, max_attempts: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def spawn(self, grid: Grid, snake: SnakeBody) -> Optional[Cell]:
        if len(snake) >= grid.area:
            return None
        attempts = grid.area if self.max_attempts is None else self.max_attempts
        for _ in range(attempts):
            cell = (self.rng.randrange(grid.width), self.rng.randrange(grid.height))
            if not snake.occupies(cell):
                return cell
        free = [c for c in grid.cells() if not snake.occupies(c)]
        if not free:
            return None
        return self.rng.choice(free)
