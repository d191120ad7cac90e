# core/snake_body.py  (segments + heading, no rules)
from __future__ import annotations
from collections import deque
from typing import Deque, Iterator, Optional, Tuple
from .interfaces import Cell, Heading

class SnakeBody:
    """Ordered segments, head at index 0.

    The body trusts whatever heading it is given; reversal filtering is the
    InputRouter's job.
    """
    def __init__(self, start: Cell = (0, 0), length: int = 1):
        self._segments: Deque[Cell] = deque()
        self._heading = Heading.RIGHT
        self._dropped_tail: Optional[Cell] = None
        self._pending_growth = 0
        self.initialize(start, length)

    def initialize(self, start: Cell, length: int) -> None:
        if length < 1:
            raise ValueError(f"snake length must be >= 1, got {length}")
        self._heading = Heading.RIGHT
        back = self._heading.opposite
        self._segments = deque()
        cell = start
        for _ in range(length):
            self._segments.append(cell)
            cell = back.step(cell)
        self._dropped_tail = None
        self._pending_growth = 0

    def advance(self, heading: Heading) -> Cell:
        self._heading = heading
        new_head = heading.step(self._segments[0])
        self._segments.appendleft(new_head)
        if self._pending_growth:
            self._pending_growth -= 1
            self._dropped_tail = None
        else:
            self._dropped_tail = self._segments.pop()
        return new_head

    def grow(self) -> None:
        # restore the tail the last advance dropped, else keep the next one
        if self._dropped_tail is not None:
            self._segments.append(self._dropped_tail)
            self._dropped_tail = None
        else:
            self._pending_growth += 1

    def occupies(self, cell: Cell) -> bool:
        return cell in self._segments

    # ---- read access ----
    @property
    def head(self) -> Cell:
        return self._segments[0]

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def segments(self) -> Tuple[Cell, ...]:
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._segments)
