# runners/run_headless.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional
from config import AppConfig
from core.highscore import JsonHighScoreStore, MemoryHighScoreStore
from core.interfaces import Heading, SessionStatus
from core.scheduling import ManualScheduler
from core.session import GameSession
from viz.renderer_headless import HeadlessRenderer

@dataclass(frozen=True)
class SessionSummary:
    score: int
    ticks: int
    length: int
    status: SessionStatus
    reason: str

def _steer(session: GameSession, rng: random.Random, turn_prob: float) -> None:
    """Random policy: mostly keep going, sometimes request a new heading."""
    if rng.random() < turn_prob:
        session.on_direction(rng.choice(list(Heading)))

def play_session(session: GameSession, sched: ManualScheduler, rng: random.Random,
                 turn_prob: float = 0.2, max_ticks: Optional[int] = None) -> SessionSummary:
    session.start()
    while session.status is SessionStatus.RUNNING:
        if max_ticks is not None and session.tick_count >= max_ticks:
            session.toggle_pause()
            break
        _steer(session, rng, turn_prob)
        sched.fire()
    snap = session.snapshot()
    if snap.status is SessionStatus.PAUSED:
        reason = "max_ticks"
    elif snap.status is SessionStatus.WON:
        reason = "board_full"
    else:
        reason = snap.collision.value
    return SessionSummary(snap.score, snap.tick_count, len(snap.snake), snap.status, reason)

def main(cfg: AppConfig | None = None, sessions: int = 5, turn_prob: float = 0.2,
         max_ticks: Optional[int] = 10_000, show_board: bool = False) -> List[SessionSummary]:
    cfg = cfg or AppConfig()
    store = JsonHighScoreStore(cfg.highscore_path) if cfg.highscore_path else MemoryHighScoreStore()
    sched = ManualScheduler()
    session = GameSession(cfg, scheduler=sched, store=store)

    rend = HeadlessRenderer()
    rend.open(cfg)
    session.subscribe(rend.draw)

    rng = random.Random(cfg.seed)
    print(f"[headless] grid: {cfg.grid_w}x{cfg.grid_h}  sessions: {sessions}  turn_prob: {turn_prob}")
    results = []
    for ep in range(sessions):
        summary = play_session(session, sched, rng, turn_prob=turn_prob, max_ticks=max_ticks)
        results.append(summary)
        print(f"[headless] ep {ep:03d}  score={summary.score}  ticks={summary.ticks}  "
              f"len={summary.length}  reason={summary.reason}  best={session.high_score}")
        if show_board:
            for row in rend.text():
                print("    " + row)
        session.reset()
    rend.close()

    if results:
        best = max(r.score for r in results)
        mean = sum(r.score for r in results) / len(results)
        print(f"[headless] best={best}  mean={mean:.1f}  frames drawn={rend.drawn}")
    return results
