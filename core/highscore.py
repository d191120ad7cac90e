from __future__ import annotations
import json, os
import logging
from .interfaces import HighScoreStore

logger = logging.getLogger(__name__)

class MemoryHighScoreStore(HighScoreStore):
    """Process-local store; nothing survives the process."""
    def __init__(self, value: int = 0):
        self.value = max(0, int(value))
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves += 1

class JsonHighScoreStore(HighScoreStore):
    """Keeps {"high_score": n} in a small JSON file."""
    KEY = "high_score"

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r") as f:
                value = int(json.load(f).get(self.KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("could not read high score from %s: %s", self.path, e)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        folder = os.path.dirname(self.path)
        try:
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({self.KEY: int(value)}, f)
        except OSError as e:
            logger.warning("could not write high score to %s: %s", self.path, e)
