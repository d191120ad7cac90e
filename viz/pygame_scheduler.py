# viz/pygame_scheduler.py
from __future__ import annotations
from typing import Callable, Optional
import pygame as pg
from core.interfaces import TickScheduler

TICK_EVENT = pg.USEREVENT + 1

class PygameTimerScheduler(TickScheduler):
    """Periodic TICK_EVENT on the pygame event queue.

    Ticks and key presses share that queue, so a tick never runs in the middle
    of input handling. The event loop must pass events to handle().
    """
    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self._callback: Optional[Callable[[], None]] = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, period_ms: int, callback: Callable[[], None]) -> None:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self._callback = callback
        pg.time.set_timer(self.event_type, period_ms)

    def cancel(self) -> None:
        self._callback = None
        pg.time.set_timer(self.event_type, 0)
        # drop ticks already queued so a paused board stays frozen
        pg.event.clear(self.event_type)

    def handle(self, event: pg.event.Event) -> bool:
        """Run the callback for a tick event; returns True if the event was ours."""
        if event.type != self.event_type:
            return False
        if self._callback is not None:
            self._callback()
        return True
