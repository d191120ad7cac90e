# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig
from core.food import FoodSpawner
from core.highscore import MemoryHighScoreStore
from core.scheduling import ManualScheduler
from core.session import GameSession

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((400, 400))

class ScriptedSpawner(FoodSpawner):
    """Hands out queued cells first, then falls back to random free cells."""
    def __init__(self, cells=(), seed=0):
        super().__init__(random.Random(seed))
        self.queue = list(cells)

    def spawn(self, grid, snake):
        while self.queue:
            cell = self.queue.pop(0)
            if grid.contains(cell) and not snake.occupies(cell):
                return cell
        return super().spawn(grid, snake)

@pytest.fixture
def cfg():
    return AppConfig(grid_w=20, grid_h=20, start_len=3, seed=7, highscore_path=None)

@pytest.fixture
def session_factory(cfg):
    def make(food=(), store=None, **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        sched = ManualScheduler()
        store = store if store is not None else MemoryHighScoreStore()
        spawner = ScriptedSpawner()
        session = GameSession(c, scheduler=sched, store=store, spawner=spawner)
        # queued cells apply from the next board (re)initialisation on
        spawner.queue = list(food)
        return session, sched
    return make
