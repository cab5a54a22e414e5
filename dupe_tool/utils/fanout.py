#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Fan-out/fan-in helper for fixed-size worker groups.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from threading import Thread
from typing import Callable

logger = logging.getLogger(__name__)


def fan_out(count: int, work: Callable[[], None], done: Callable[[], None]) -> Thread:
    """Run ``work`` on ``count`` threads and call ``done`` once all have returned.

    Returns the (already started) thread that waits on the barrier; join it to
    wait for ``done`` to complete.
    """
    if count < 1:
        raise ValueError(f"worker count must be at least 1, got {count}")

    ex = ThreadPoolExecutor(max_workers=count, thread_name_prefix="dupe-worker")
    futures = [ex.submit(work) for _ in range(count)]

    def _barrier():
        try:
            wait(futures)
            for fut in futures:
                exc = fut.exception()
                if exc is not None:
                    logger.error("Worker exited with unexpected error: %s", exc, exc_info=exc)
        finally:
            ex.shutdown(wait=True)
            done()

    th = Thread(target=_barrier, name="dupe-fan-in", daemon=True)
    th.start()
    return th
