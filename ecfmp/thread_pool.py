"""A small fixed-size pool of worker threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable


class ThreadPool:
    """Runs scheduled callables on two background threads.

    Tasks still queued when the pool shuts down are discarded.
    """

    _WORKERS = 2

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._tasks: deque[Callable[[], None]] = deque()
        self._running = True
        self._threads = [
            threading.Thread(target=self._work, daemon=True) for _ in range(self._WORKERS)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: not self._running or self._tasks)
                if not self._running:
                    return
                task = self._tasks.popleft()
            task()

    def schedule(self, function: Callable[[], None]) -> None:
        """Queue a callable to be run on a worker thread."""
        with self._condition:
            self._tasks.append(function)
            self._condition.notify()

    def shutdown(self) -> None:
        """Stop the workers and wait for them to finish their current task."""
        with self._condition:
            self._running = False
            self._condition.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()