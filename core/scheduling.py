# core/scheduling.py
from __future__ import annotations
from typing import Callable, Optional
from .interfaces import TickScheduler

class ManualScheduler(TickScheduler):
    """Deterministic periodic timer driven by advance(ms).

    Used by tests and the headless runner in place of a wall clock. Callbacks
    fire once per elapsed period; cancelling from inside a callback stops the
    remaining periods of that advance() call.
    """
    def __init__(self):
        self._period: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None
        self._elapsed = 0
        self.now = 0

    @property
    def armed(self) -> bool:
        return self._callback is not None

    @property
    def period_ms(self) -> Optional[int]:
        return self._period

    def arm(self, period_ms: int, callback: Callable[[], None]) -> None:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self._period = period_ms
        self._callback = callback
        self._elapsed = 0

    def cancel(self) -> None:
        self._period = None
        self._callback = None
        self._elapsed = 0

    def advance(self, ms: int) -> int:
        """Move the clock forward; returns how many callbacks fired."""
        fired = 0
        while ms > 0:
            if self._callback is None:
                self.now += ms
                break
            step = min(ms, self._period - self._elapsed)
            self.now += step
            self._elapsed += step
            ms -= step
            if self._elapsed >= self._period:
                self._elapsed = 0
                fired += 1
                self._callback()
        return fired

    def fire(self) -> int:
        """Advance exactly to the next due tick."""
        if self._callback is None:
            return 0
        return self.advance(self._period - self._elapsed)
