"""Deferred-task schedulers the engine posts delayed resolutions to.

Times are integer milliseconds.  Callbacks always run on the thread that
advances or polls the scheduler, so the engine never needs locking.
"""

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol


class Scheduler(Protocol):
    def call_later(self, delay: int, callback: Callable[[], None]) -> None: ...


@dataclass(order=True)
class _Task:
    due: int
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler:
    """Virtual clock that only moves when ``advance`` is called.

    Tasks fire in due order; tasks due at the same time fire in the order
    they were scheduled.
    """

    def __init__(self) -> None:
        self._now: int = 0
        self._tasks: list[_Task] = []
        self._seq = itertools.count()

    @property
    def now(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def call_later(self, delay: int, callback: Callable[[], None]) -> None:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        heapq.heappush(self._tasks, _Task(self.now + delay, next(self._seq), callback))

    def advance(self, delay: int) -> int:
        """Move the clock forward by *delay* ms, firing due tasks.

        Returns the number of callbacks run.
        """
        target = self._now + delay
        fired = 0
        while self._tasks and self._tasks[0].due <= target:
            task = heapq.heappop(self._tasks)
            self._now = max(self._now, task.due)
            task.callback()
            fired += 1
        self._now = target
        return fired

    def flush(self) -> int:
        """Fire every queued task, including ones scheduled while flushing."""
        fired = 0
        while self._tasks:
            fired += self.advance(self._tasks[0].due - self._now)
        return fired


class ClockScheduler(ManualScheduler):
    """Scheduler driven by a monotonic clock.

    Frame and terminal loops call ``poll`` regularly to run due tasks.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__()
        self._clock = clock
        self._origin = clock()

    @property
    def now(self) -> int:
        return round((self._clock() - self._origin) * 1000)

    def poll(self) -> int:
        return self.advance(max(0, self.now - self._now))
