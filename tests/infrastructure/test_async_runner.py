"""Tests for the thread pool async runner."""

import logging
import threading

from ddd_commons.infrastructure import ThreadPoolAsyncRunner


class TestThreadPoolAsyncRunner:
    """Test cases for ThreadPoolAsyncRunner."""

    def test_runs_callback_with_params(self):
        done = threading.Event()
        received = []

        def callback(a, b):
            received.append((a, b))
            done.set()

        with ThreadPoolAsyncRunner(max_workers=1) as runner:
            runner.run(callback, ["x", 2])

        assert done.wait(timeout=5)
        assert received == [("x", 2)]

    def test_runs_in_background_thread(self):
        threads = []

        with ThreadPoolAsyncRunner(max_workers=1, thread_name_prefix="test-async") as runner:
            runner.run(lambda: threads.append(threading.current_thread().name))

        assert threads[0].startswith("test-async")

    def test_failure_is_logged(self, caplog):
        def failing():
            raise RuntimeError("background boom")

        with caplog.at_level(logging.ERROR, logger="ddd_commons.infrastructure.async_runner"):
            with ThreadPoolAsyncRunner(max_workers=1) as runner:
                runner.run(failing)

        assert "Background task failed" in caplog.text
        assert "background boom" in caplog.text
