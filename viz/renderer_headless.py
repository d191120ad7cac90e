# viz/renderer_headless.py
from __future__ import annotations
from collections import deque
from typing import Deque, List, Optional
import numpy as np
from config import AppConfig
from core import board
from core.interfaces import Snapshot
from viz.render_iface import Renderer

class HeadlessRenderer(Renderer):
    """Keeps the last few frames as encoded boards instead of drawing them."""
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frames: Deque[np.ndarray] = deque(maxlen=1)
        self.last: Optional[Snapshot] = None
        self.drawn = 0

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = deque(maxlen=max(1, cfg.headless_frames))
        self.drawn = 0

    def draw(self, snap: Snapshot) -> None:
        self.frames.append(board.encode(snap))
        self.last = snap
        self.drawn += 1

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass

    def text(self) -> List[str]:
        return board.to_text(self.last) if self.last is not None else []
