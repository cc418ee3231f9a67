"""Fire-and-forget execution of request side effects.

Side effects such as hit accounting and cache repopulation must never block
the request path and must never propagate their failures into it. They run
on a shared thread pool; their outcome is only logged.

Classes:
    BackgroundTasks:
        Thin wrapper around ThreadPoolExecutor with failure logging.

Example:
    >>> tasks = BackgroundTasks(max_workers=2)
    >>> tasks.submit(dao.hit, 'Gh71WPTx9', description='hit accounting')
    >>> tasks.drain(timeout=5)
    True
"""

import logging
import threading
from concurrent import futures
from collections.abc import Callable
from typing import Any

from dynashort.constants import Defaults, BACKGROUND_TASK_FAILED


logger = logging.getLogger(__name__)


class BackgroundTasks:
    """Run callables in the background without letting the caller wait on them.

    The caller receives no handle to the scheduled work. In-flight tasks are
    tracked only so that `drain()` can wait for them (process shutdown, tests).
    Abandoning a request never cancels its already scheduled tasks.
    """

    def __init__(self, max_workers: int = Defaults.BACKGROUND_WORKERS, executor: futures.Executor | None = None):
        self._executor = executor or futures.ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='dynashort-bg')
        self._pending: set[futures.Future] = set()
        self._lock = threading.Lock()

    def submit(self, fn: Callable[..., Any], *args: Any, description: str = 'background task', **kwargs: Any) -> None:
        """Schedule `fn(*args, **kwargs)` and return immediately.

        Scheduling failures (e.g. after shutdown) are logged like task failures.
        """
        try:
            future = self._executor.submit(fn, *args, **kwargs)
        except RuntimeError:
            logger.exception(
                'Failed to schedule %s.',
                description,
                extra={'event': BACKGROUND_TASK_FAILED, 'task': description},
            )
            return

        with self._lock:
            self._pending.add(future)
        future.add_done_callback(lambda f: self._on_done(f, description))

    def _on_done(self, future: futures.Future, description: str) -> None:
        with self._lock:
            self._pending.discard(future)

        if future.cancelled():
            logger.warning('%s was cancelled.', description, extra={'event': BACKGROUND_TASK_FAILED, 'task': description})
            return

        error = future.exception()
        if error is not None:
            logger.warning(
                '%s failed: %s',
                description,
                error,
                exc_info=error,
                extra={'event': BACKGROUND_TASK_FAILED, 'task': description, 'errorCode': getattr(error, 'error_code', None)},
            )

    def drain(self, timeout: float | None = None) -> bool:
        """Wait until every task scheduled so far has finished.

        Returns:
            bool: True if all tasks finished within `timeout`, False otherwise.
        """
        with self._lock:
            pending = set(self._pending)
        if not pending:
            return True
        _, not_done = futures.wait(pending, timeout=timeout)
        return not not_done

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
