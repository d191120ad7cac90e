# runners/run_snake.py
from __future__ import annotations
import logging
import pygame as pg
from config import AppConfig
from core.highscore import JsonHighScoreStore, MemoryHighScoreStore
from core.interfaces import Heading, Snapshot
from core.session import GameSession
from viz.keyboard import Keyboard, QUIT, RESET, START_PAUSE
from viz.pygame_scheduler import PygameTimerScheduler
from viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)

def main(cfg: AppConfig | None = None) -> Snapshot:
    """Interactive game: one window, one session, Space = start/pause, R = reset."""
    cfg = cfg or AppConfig()

    rend = PygameRenderer()
    rend.open(cfg)

    store = JsonHighScoreStore(cfg.highscore_path) if cfg.highscore_path else MemoryHighScoreStore()
    sched = PygameTimerScheduler()
    session = GameSession(cfg, scheduler=sched, store=store)
    session.subscribe(rend.draw)
    kbd = Keyboard()
    logger.info("high score store: %s", cfg.highscore_path or "memory")

    print(f"[snake] grid: {cfg.grid_w}x{cfg.grid_h}  tick: {cfg.tick_ms}ms  best: {session.high_score}")
    rend.draw(session.snapshot())

    running = True
    try:
        while running:
            for event in pg.event.get():
                if sched.handle(event):
                    continue
                cmd = kbd.translate(event)
                if cmd is None:
                    continue
                if cmd == QUIT:
                    running = False
                    break
                if cmd == START_PAUSE:
                    session.start_or_pause()
                elif cmd == RESET:
                    session.reset()
                elif isinstance(cmd, Heading):
                    session.on_direction(cmd)
            rend.tick(cfg.fps)
        final = session.snapshot()
        sched.cancel()
    finally:
        rend.close()

    print(f"[snake] final score={final.score}  best={final.high_score}  status={final.status.value}")
    return final
