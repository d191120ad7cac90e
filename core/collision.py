# core/collision.py
from __future__ import annotations
from typing import Iterable
from itertools import islice
from .grid import Grid
from .interfaces import Cell, Collision

def check(head: Cell, grid: Grid, body: Iterable[Cell]) -> Collision:
    """Classify a freshly advanced head.

    ``body`` is the post-advance body with the head at index 0; the head is
    skipped, so stepping into the cell the tail just left is not a collision.
    """
    if not grid.contains(head):
        return Collision.WALL
    if any(seg == head for seg in islice(body, 1, None)):
        return Collision.SELF
    return Collision.NONE
