# viz/renderer_pygame.py
from __future__ import annotations
import os
from typing import Optional, Union
import pygame as pg
from config import AppConfig
from core.interfaces import Heading, SessionStatus, Snapshot
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._font: Optional[pg.font.Font] = None
        self._font_big: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into an existing surface; the owner controls flipping and timing."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            self._draw_grid(s)

        if s.food is not None:
            self._draw_food(*s.food)

        n = len(s.snake)
        # tail first so the head is always on top
        for i in range(n - 1, -1, -1):
            x, y = s.snake[i]
            if i == 0:
                col = theme.HEAD
            else:
                t = i / n
                col = tuple(int(a + (b - a) * t) for a, b in zip(theme.BODY_NEAR, theme.BODY_FAR))
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))
        self._draw_eyes(s.head, s.heading)

        if self.cfg.render_show_hud:
            txt = self._small().render(f"Score: {s.score}   Best: {s.high_score}", True, theme.TEXT)
            surf.blit(txt, (6, 4))

        self._draw_status_overlay(s)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None
            self._font_big = None

    # internals
    def _small(self) -> pg.font.Font:
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        return self._font

    def _big(self) -> pg.font.Font:
        if self._font_big is None:
            self._font_big = pg.font.SysFont(None, 40)
        return self._font_big

    def _draw_grid(self, s: Snapshot) -> None:
        c = self.cell
        w, h = s.grid_w * c, s.grid_h * c
        for x in range(0, w + 1, c):
            pg.draw.line(self.surf, theme.GRID, (x, 0), (x, h))
        for y in range(0, h + 1, c):
            pg.draw.line(self.surf, theme.GRID, (0, y), (w, y))

    def _draw_food(self, fx: int, fy: int) -> None:
        c = self.cell
        r = c // 2
        center = (fx * c + r, fy * c + r)
        pg.draw.circle(self.surf, theme.FOOD, center, r)
        pg.draw.circle(self.surf, theme.FOOD_SHINE, (center[0] - r // 3, center[1] - r // 3), max(1, r // 4))

    def _draw_eyes(self, head, heading: Heading) -> None:
        c = self.cell
        size = max(1, c // 5)
        off = c // 3
        x0, y0 = head[0] * c, head[1] * c
        near, far = off, c - off - size
        # eyes sit on the side of the head facing the heading
        if heading is Heading.UP:
            eyes = ((near, near), (far, near))
        elif heading is Heading.DOWN:
            eyes = ((near, far), (far, far))
        elif heading is Heading.LEFT:
            eyes = ((near, near), (near, far))
        else:
            eyes = ((far, near), (far, far))
        for ex, ey in eyes:
            pg.draw.rect(self.surf, theme.EYE, pg.Rect(x0 + ex, y0 + ey, size, size))

    def _draw_status_overlay(self, s: Snapshot) -> None:
        if s.status is SessionStatus.RUNNING:
            return
        surf = self.surf
        w, h = surf.get_size()
        if s.status is SessionStatus.GAME_OVER:
            title, color, sub = "Game Over!", theme.GAME_OVER, f"Score: {s.score}"
        elif s.status is SessionStatus.WON:
            title, color, sub = "Board cleared!", theme.WON, f"Score: {s.score}"
        elif s.status is SessionStatus.PAUSED:
            title, color, sub = "Paused", theme.TEXT, "Space to resume"
        else:
            title, color, sub = "Snake", theme.TEXT, "Space to start"

        shade = pg.Surface((w, h), pg.SRCALPHA)
        shade.fill(theme.OVERLAY)
        surf.blit(shade, (0, 0))

        t1 = self._big().render(title, True, color)
        surf.blit(t1, t1.get_rect(center=(w // 2, h // 2 - 15)))
        t2 = self._small().render(sub, True, theme.TEXT_MUTED if s.status is SessionStatus.IDLE else theme.TEXT)
        surf.blit(t2, t2.get_rect(center=(w // 2, h // 2 + 20)))

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
