"""Cooperative one-shot timers for a single-threaded event loop.

Timers never run on their own thread: the owner pumps :meth:`Scheduler.run_due`
from its event loop (the Streamlit page does this on every rerun).
"""

from __future__ import annotations

import functools
import heapq
import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(order=True)
class _Timer:
    due: float
    seq: int
    callback: Callable[[], Any] = field(compare=False)


class Scheduler:
    """Fire-and-forget delayed callbacks. There is no cancellation."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._timers: list[_Timer] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback(*args)`` once, ``delay`` seconds from now.

        ``args`` are bound now, so later changes to the caller's state do not
        leak into the callback.
        """
        due = self._clock() + max(delay, 0.0)
        heapq.heappush(
            self._timers,
            _Timer(due, next(self._counter), functools.partial(callback, *args)),
        )

    def run_due(self) -> int:
        """Run every timer whose due time has passed. Returns how many ran."""
        now = self._clock()
        ran = 0
        while self._timers and self._timers[0].due <= now:
            timer = heapq.heappop(self._timers)
            timer.callback()
            ran += 1
        if ran:
            logger.debug("Ran %d due timer(s), %d pending", ran, len(self._timers))
        return ran

    def next_due_in(self) -> float | None:
        """Seconds until the next timer is due, or None when idle."""
        if not self._timers:
            return None
        return max(self._timers[0].due - self._clock(), 0.0)

    @property
    def pending(self) -> int:
        """Number of timers that have not run yet."""
        return len(self._timers)
