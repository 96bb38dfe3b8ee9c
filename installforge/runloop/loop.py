from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from installforge.messages import Task

from .types import RunLoopError, TaskStalledError, UnknownQueueError

logger = logging.getLogger(__name__)

DEFAULT_QUEUES = ("install", "end")


class RunLoop:
    """
    Named task queues drained in declaration order.

    Tasks receive a ``done`` callback and must call it exactly once.
    A ``once`` key is remembered for the lifetime of the loop, later
    tasks added under the same key are dropped.
    """

    def __init__(self, queues: Iterable[str] = DEFAULT_QUEUES):
        self._queues: dict[str, deque[Task]] = {q: deque() for q in queues}
        self._once: set[str] = set()
        self._running = False

    def add(
        self, queue: str, task: Task, *, once: str | None = None, run: bool = True
    ) -> None:
        if queue not in self._queues:
            raise UnknownQueueError(queue)

        if once is not None:
            if once in self._once:
                logger.debug("Dropping duplicate task '%s' on %s", once, queue)
                return
            self._once.add(once)

        self._queues[queue].append(task)

        if run:
            self.run()

    def pending(self) -> int:
        return sum(len(q) for q in self._queues.values())

    def run(self) -> int:
        # Tasks may enqueue more work; re-entrant drains fold into this one
        if self._running:
            return 0

        self._running = True
        executed = 0
        try:
            while (nxt := self._next()) is not None:
                name, task = nxt
                self._call(name, task)
                executed += 1
        finally:
            self._running = False

        return executed

    def _next(self) -> tuple[str, Task] | None:
        for name, queue in self._queues.items():
            if queue:
                return name, queue.popleft()
        return None

    def _call(self, queue: str, task: Task) -> None:
        calls = 0

        def done() -> None:
            nonlocal calls
            calls += 1
            if calls > 1:
                raise RunLoopError(f"done called twice by a task in '{queue}'")

        task(done)

        if calls == 0:
            raise TaskStalledError(queue)
