# core/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
from .interfaces import Cell

@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        """Every cell, row-major."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)
