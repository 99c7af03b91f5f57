"""Dispatchers that run fetch jobs and deliver results on the UI event queue.

View state is only ever mutated from the thread that owns the event queue.
A dispatcher runs the blocking ``job`` somewhere and later calls
``on_done(result)`` on that queue.
"""

from __future__ import annotations

import logging
import queue
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Tuple

from ..domain.ports import Dispatcher

LOGGER = logging.getLogger(__name__)

Job = Callable[[], Any]
Done = Callable[[Any], None]


class ImmediateDispatcher:
    """Run each job inline; completions happen before ``submit`` returns."""

    def submit(self, job: Job, on_done: Done) -> None:
        on_done(job())


class ThreadedDispatcher:
    """Run jobs on worker threads and queue completions for the UI thread.

    The owner calls :meth:`pump` from its event loop (for example a Tk
    ``after`` tick) to apply finished results in arrival order.
    """

    def __init__(self, max_workers: int = 4) -> None:
        """Create the worker pool.

        Args:
            max_workers: Worker threads used for concurrent fetches.
        """
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="showcase-fetch"
        )
        self._completed: "queue.Queue[Tuple[Done, Any]]" = queue.Queue()

    def submit(self, job: Job, on_done: Done) -> None:
        future = self._executor.submit(job)
        future.add_done_callback(lambda fut: self._enqueue(fut, on_done))

    def _enqueue(self, future: Future, on_done: Done) -> None:
        # Jobs are expected to return results rather than raise.
        exc = future.exception()
        if exc is not None:
            LOGGER.error("Fetch job raised unexpectedly: %s", exc)
            return
        self._completed.put((on_done, future.result()))

    def pump(self, limit: Optional[int] = None) -> int:
        """Apply queued completions on the calling thread.

        Args:
            limit: Maximum number of completions to apply, ``None`` for all.

        Returns:
            Number of completions applied.
        """
        applied = 0
        while limit is None or applied < limit:
            try:
                on_done, result = self._completed.get_nowait()
            except queue.Empty:
                break
            on_done(result)
            applied += 1
        return applied

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


__all__ = ["Dispatcher", "ImmediateDispatcher", "ThreadedDispatcher"]
