# core/session.py  (state machine + tick, no pygame)
from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple
from config import AppConfig
from . import collision
from .food import FoodSpawner
from .grid import Grid
from .highscore import MemoryHighScoreStore
from .input_router import InputRouter
from .interfaces import (
    Cell, Collision, Heading, HighScoreStore, SessionStatus, Snapshot,
    SnapshotSink, TickScheduler,
)
from .scheduling import ManualScheduler
from .snake_body import SnakeBody

logger = logging.getLogger(__name__)

class GameSession:
    """Single owner of all mutable game state.

    Outside code reads snapshots and calls start / toggle_pause / reset /
    on_direction; tick() is normally invoked by the scheduler only.
    """
    def __init__(
        self,
        cfg: AppConfig,
        scheduler: Optional[TickScheduler] = None,
        store: Optional[HighScoreStore] = None,
        spawner: Optional[FoodSpawner] = None,
    ):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        if cfg.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {cfg.tick_ms}")
        self.cfg = cfg
        self.grid = Grid(cfg.grid_w, cfg.grid_h)
        if cfg.start_len > self.grid.center[0] + 1:
            raise ValueError(
                f"start_len={cfg.start_len} does not fit left of the center of a {cfg.grid_w}-wide grid"
            )
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.spawner = spawner if spawner is not None else FoodSpawner(random.Random(cfg.seed))
        self.router = InputRouter()
        self._sinks: List[SnapshotSink] = []

        self._snake = SnakeBody(self.grid.center, cfg.start_len)
        self._food: Optional[Cell] = None
        self._score = 0
        self._high_score = self.store.load()
        self._status = SessionStatus.IDLE
        self._collision = Collision.NONE
        self._tick_count = 0
        self._init_board()

    # ---- read access ----
    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def food(self) -> Optional[Cell]:
        return self._food

    @property
    def snake(self) -> Tuple[Cell, ...]:
        return self._snake.segments

    @property
    def heading(self) -> Heading:
        return self._snake.heading

    @property
    def pending_heading(self) -> Heading:
        return self.router.pending

    @property
    def collision(self) -> Collision:
        return self._collision

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self._snake.segments,
            heading=self._snake.heading,
            food=self._food,
            score=self._score,
            high_score=self._high_score,
            status=self._status,
            collision=self._collision,
            tick_count=self._tick_count,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
        )

    def subscribe(self, sink: SnapshotSink) -> None:
        """Register a renderer hook; called at every (re)initialisation and tick."""
        self._sinks.append(sink)

    # ---- control surface ----
    def start(self) -> None:
        if not (self._status is SessionStatus.IDLE or self._status.terminal):
            logger.debug("start ignored while %s", self._status.value)
            return
        self._init_board()
        if self._food is None:
            # snake already fills the grid
            self._finish(SessionStatus.WON)
            logger.info("board full at start: won with score=%d", self._score)
            self._publish()
            return
        self._status = SessionStatus.RUNNING
        self.scheduler.arm(self.cfg.tick_ms, self.tick)
        logger.info("session started (%dx%d, tick=%dms)", self.grid.width, self.grid.height, self.cfg.tick_ms)
        self._publish()

    def toggle_pause(self) -> None:
        if self._status is SessionStatus.RUNNING:
            self.scheduler.cancel()
            self._status = SessionStatus.PAUSED
            logger.info("paused at tick %d", self._tick_count)
        elif self._status is SessionStatus.PAUSED:
            self._status = SessionStatus.RUNNING
            self.scheduler.arm(self.cfg.tick_ms, self.tick)
            logger.info("resumed at tick %d", self._tick_count)
        else:
            logger.debug("toggle_pause ignored while %s", self._status.value)
            return
        self._publish()

    def start_or_pause(self) -> None:
        """The single Start/Pause button."""
        if self._status in (SessionStatus.RUNNING, SessionStatus.PAUSED):
            self.toggle_pause()
        else:
            self.start()

    def reset(self) -> None:
        self.scheduler.cancel()
        self._status = SessionStatus.IDLE
        self._init_board()
        logger.info("session reset")
        self._publish()

    def on_direction(self, requested) -> bool:
        return self.router.on_direction(requested, self._snake.heading)

    # ---- simulation ----
    def tick(self) -> Snapshot:
        if self._status is not SessionStatus.RUNNING:
            logger.debug("tick ignored while %s", self._status.value)
            return self.snapshot()

        heading = self.router.pending
        new_head = self._snake.advance(heading)
        self._tick_count += 1

        hit = collision.check(new_head, self.grid, self._snake)
        if hit is not Collision.NONE:
            self._collision = hit
            self._finish(SessionStatus.GAME_OVER)
            logger.info("game over: %s collision at %s, score=%d", hit.value, new_head, self._score)
        elif new_head == self._food:
            self._eat()
        else:
            logger.debug("tick %d head=%s", self._tick_count, new_head)

        snap = self.snapshot()
        self._notify(snap)
        return snap

    # ---- internals ----
    def _init_board(self) -> None:
        self._snake.initialize(self.grid.center, self.cfg.start_len)
        self.router.reset(self._snake.heading)
        self._score = 0
        self._tick_count = 0
        self._collision = Collision.NONE
        self._food = self.spawner.spawn(self.grid, self._snake)

    def _eat(self) -> None:
        self._score += self.cfg.food_reward
        if self._score > self._high_score:
            self._high_score = self._score
            self.store.save(self._high_score)
        self._snake.grow()
        self._food = self.spawner.spawn(self.grid, self._snake)
        logger.debug("ate food, score=%d len=%d", self._score, len(self._snake))
        if self._food is None:
            self._finish(SessionStatus.WON)
            logger.info("board full: won with score=%d", self._score)

    def _finish(self, status: SessionStatus) -> None:
        self.scheduler.cancel()
        self._status = status

    def _publish(self) -> None:
        self._notify(self.snapshot())

    def _notify(self, snap: Snapshot) -> None:
        for sink in self._sinks:
            sink(snap)
