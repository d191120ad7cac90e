# core/input_router.py
from __future__ import annotations
import logging
from .interfaces import Heading

logger = logging.getLogger(__name__)

class InputRouter:
    """Holds the pending heading latched at the next tick.

    A single value, not a queue: the last accepted request between two ticks
    wins. Requests opposite to the *applied* heading are dropped.
    """
    def __init__(self, heading: Heading = Heading.RIGHT):
        self._pending = heading

    @property
    def pending(self) -> Heading:
        return self._pending

    def reset(self, heading: Heading = Heading.RIGHT) -> None:
        self._pending = heading

    def on_direction(self, requested, current: Heading) -> bool:
        if not isinstance(requested, Heading):
            logger.debug("ignoring non-direction input %r", requested)
            return False
        if requested is current.opposite:
            logger.debug("ignoring reversal %s while heading %s", requested.name, current.name)
            return False
        self._pending = requested
        return True
