# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 20
    grid_h: int = 20
    start_len: int = 3
    seed: Optional[int] = None

    # gameplay
    tick_ms: int = 150                   # period of the tick schedule
    food_reward: int = 10
    highscore_path: Optional[str] = "snake_highscore.json"   # None = keep in memory

    # render
    fps: int = 60                        # render loop cap, independent of tick_ms
    render_cell: int = 20
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # headless
    headless_frames: int = 32            # frames kept by the headless renderer

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
