# viz/keyboard.py
from __future__ import annotations
from typing import Optional, Union
import pygame as pg
from core.interfaces import Heading

START_PAUSE = "start_pause"
RESET = "reset"
QUIT = "quit"

Command = Union[Heading, str]

KEYMAP = {
    pg.K_UP: Heading.UP,    pg.K_w: Heading.UP,
    pg.K_DOWN: Heading.DOWN,  pg.K_s: Heading.DOWN,
    pg.K_LEFT: Heading.LEFT,  pg.K_a: Heading.LEFT,
    pg.K_RIGHT: Heading.RIGHT, pg.K_d: Heading.RIGHT,
    pg.K_SPACE: START_PAUSE, pg.K_p: START_PAUSE,
    pg.K_r: RESET,
    pg.K_ESCAPE: QUIT,
}

class Keyboard:
    """Maps pygame events to headings and control commands; everything else is dropped."""
    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return QUIT
        if e.type == pg.KEYDOWN:
            return KEYMAP.get(e.key)
        return None

