"""Thread pool backed AsyncRunner."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)


class ThreadPoolAsyncRunner:
    """Runs callbacks fire-and-forget on a thread pool.

    Failures cannot reach the caller, so they are logged.
    """

    def __init__(self, max_workers: Optional[int] = None, thread_name_prefix: str = "ddd-async"):
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=thread_name_prefix,
        )

    def run(self, callback: Callable[..., Any], params: Sequence[Any] = ()) -> None:
        future = self._executor.submit(callback, *params)
        future.add_done_callback(self._log_failure)

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error("Background task failed", exc_info=error)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; optionally wait for scheduled callbacks."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "ThreadPoolAsyncRunner":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown(wait=True)
