"""Fixed-rate ticker for asyncio.

Fires every `interval` seconds on a schedule anchored at construction time.
When the consumer falls behind, one overdue tick is delivered immediately and
the remaining missed slots are dropped, so ticks never queue up.
"""

from __future__ import annotations

import asyncio
import math


class Ticker:
    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._loop = asyncio.get_running_loop()
        self._next = self._loop.time() + interval

    @property
    def interval(self) -> float:
        return self._interval

    async def wait(self) -> None:
        """Sleep until the next scheduled tick."""

        now = self._loop.time()
        if now < self._next:
            await asyncio.sleep(self._next - now)
            self._next += self._interval
            return

        overdue = math.floor((now - self._next) / self._interval) + 1
        self._next += overdue * self._interval
        await asyncio.sleep(0)
