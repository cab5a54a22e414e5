#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main scanner integration for the Duplicate Scan Tool.
Runs traversal, hashing and aggregation concurrently, then reports.
"""

import logging
import time
from threading import Event, Thread
from typing import List, Optional

from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_WORKERS, PROGRESS_INTERVAL_SECONDS
from ..models.file_record import FileRecord
from ..models.summary import ScanSummary
from ..utils.channel import Channel
from .aggregator import Aggregator
from .pool import DigestFn, WorkerPool
from .reporter import Reporter
from .walker import produce_jobs

logger = logging.getLogger(__name__)


class DuplicateScanner:
    """
    Coordinates one walker thread, a pool of hashing workers and the
    aggregator running on the calling thread.
    """

    def __init__(self, sink, workers: int = DEFAULT_WORKERS,
                 chunk_size: int = DEFAULT_CHUNK_SIZE,
                 progress_interval: float = PROGRESS_INTERVAL_SECONDS,
                 digest_fn: Optional[DigestFn] = None):
        self.sink = sink
        self.pool = WorkerPool(workers=workers, chunk_size=chunk_size, digest_fn=digest_fn)
        self.progress_interval = progress_interval

    def scan(self, root: str) -> List[FileRecord]:
        """
        Hash every visible regular file under ``root``.

        Returns the buffered records in arrival order. On the first error the
        scan is cancelled, the walker and workers are joined, and the error is
        re-raised.
        """
        jobs: Channel = Channel()
        results: Channel = Channel()
        cancel = Event()

        logger.debug("Starting scan of %s with %d workers", root, self.pool.workers)
        start = time.perf_counter()

        self.pool.start(jobs, results, cancel)
        walker = Thread(target=produce_jobs, args=(root, jobs, results, cancel),
                        name="dupe-walker", daemon=True)
        walker.start()

        try:
            records = Aggregator(self.sink, interval=self.progress_interval).consume(results)
        finally:
            # Stops in-flight work after an early exit; a no-op after a full drain
            cancel.set()
            walker.join()
            self.pool.join()

        logger.debug("Hashed %d files in %.2fs", len(records), time.perf_counter() - start)
        return records

    def run(self, root: str) -> ScanSummary:
        """Scan ``root`` and report duplicates through the sink."""
        records = self.scan(root)
        return Reporter(self.sink).report(root, records)
