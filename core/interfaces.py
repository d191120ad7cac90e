# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Callable, Protocol

Cell = Tuple[int, int]

class Heading(Enum):
    """Direction of motion; the value is the unit (dx, dy), y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Heading":
        return Heading((-self.dx, -self.dy))

    def step(self, cell: Cell) -> Cell:
        x, y = cell
        return (x + self.dx, y + self.dy)

class SessionStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def terminal(self) -> bool:
        return self in (SessionStatus.GAME_OVER, SessionStatus.WON)

class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]     # head first
    heading: Heading
    food: Optional[Cell]        # None once the board is full
    score: int
    high_score: int
    status: SessionStatus
    collision: Collision
    tick_count: int
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

SnapshotSink = Callable[[Snapshot], None]

class TickScheduler(Protocol):
    """Fixed-period timer driving GameSession.tick()."""
    @property
    def armed(self) -> bool: ...
    def arm(self, period_ms: int, callback: Callable[[], None]) -> None: ...
    def cancel(self) -> None: ...

class HighScoreStore(Protocol):
    """A single persisted best-score value."""
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...
