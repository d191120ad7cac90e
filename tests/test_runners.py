# tests/test_runners.py
import json
import random
from config import AppConfig
from core.highscore import JsonHighScoreStore
from core.interfaces import SessionStatus
from core.scheduling import ManualScheduler
from core.session import GameSession
from runners.run_headless import main as headless, play_session

def test_headless_sessions(capsys):
    cfg = AppConfig(grid_w=10, grid_h=10, seed=3, highscore_path=None)
    results = headless(cfg, sessions=3, turn_prob=0.3, max_ticks=400)
    assert len(results) == 3
    for r in results:
        assert r.reason in ("wall", "self", "max_ticks", "board_full")
        assert r.score % 10 == 0
    out = capsys.readouterr().out
    assert "[headless] ep 000" in out

def test_tick_cap_pauses_session():
    sched = ManualScheduler()
    s = GameSession(AppConfig(grid_w=20, grid_h=20, seed=1, highscore_path=None), scheduler=sched)
    summary = play_session(s, sched, random.Random(0), turn_prob=0.0, max_ticks=3)
    assert summary.reason == "max_ticks"
    assert summary.ticks == 3
    assert s.status is SessionStatus.PAUSED

def test_high_score_written_to_file(session_factory, tmp_path):
    path = tmp_path / "best.json"
    # two foods straight ahead, then one out of reach
    s, sched = session_factory(food=[(11, 10), (12, 10), (0, 0), (0, 0)],
                               store=JsonHighScoreStore(str(path)))
    rng = random.Random(0)
    first = play_session(s, sched, rng, turn_prob=0.0)
    assert first.score == 20
    assert first.reason == "wall"
    s.reset()
    second = play_session(s, sched, rng, turn_prob=0.0)
    assert second.score == 0

    with open(path) as f:
        assert json.load(f)["high_score"] == max(first.score, second.score)
    assert JsonHighScoreStore(str(path)).load() == 20
    assert s.high_score == 20
