# tests/test_highscore.py
import json
from core.highscore import JsonHighScoreStore, MemoryHighScoreStore

def test_missing_file_defaults_to_zero(tmp_path):
    assert JsonHighScoreStore(str(tmp_path / "nope.json")).load() == 0

def test_save_then_load(tmp_path):
    path = tmp_path / "sub" / "best.json"
    store = JsonHighScoreStore(str(path))
    store.save(120)
    assert json.loads(path.read_text()) == {"high_score": 120}
    assert JsonHighScoreStore(str(path)).load() == 120

def test_corrupt_file_defaults_to_zero(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("{not json")
    assert JsonHighScoreStore(str(path)).load() == 0

def test_wrong_shape_defaults_to_zero(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("[1, 2]")
    assert JsonHighScoreStore(str(path)).load() == 0

def test_memory_store():
    store = MemoryHighScoreStore(30)
    assert store.load() == 30
    store.save(40)
    assert store.load() == 40
    assert store.saves == 1
