"""Cancellable delayed callbacks driven by an explicit tick, not threads."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class ScheduledTask:
    """Handle for a pending callback."""
    due: float
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """Holds delayed callbacks and runs the due ones when ticked."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._tasks: list[ScheduledTask] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(self.clock() + delay, callback)
        self._tasks.append(task)
        return task

    def run_due(self, now: float | None = None) -> int:
        """Fire every pending task whose time has come, earliest first."""
        now = self.clock() if now is None else now
        due = sorted((t for t in self._tasks if t.pending and t.due <= now),
                     key=lambda t: t.due)
        fired = 0
        for task in due:
            # An earlier callback may have cancelled this one
            if not task.pending:
                continue
            task.fired = True
            task.callback()
            fired += 1
        self._tasks = [t for t in self._tasks if t.pending]
        return fired

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks = []

    def pending(self) -> list[ScheduledTask]:
        return [t for t in self._tasks if t.pending]
