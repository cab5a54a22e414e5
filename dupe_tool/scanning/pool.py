#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Fixed-size hashing worker pool for the Duplicate Scan Tool.
"""

import logging
from threading import Event, Thread, current_thread
from typing import Callable, Optional, Tuple

from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_WORKERS
from ..errors import ReadError, ScanCancelled
from ..models.file_record import FileRecord
from ..utils.channel import Channel
from ..utils.fanout import fan_out
from .digest import compute_digest

logger = logging.getLogger(__name__)

DigestFn = Callable[..., Tuple[bytes, int]]


class WorkerPool:
    """Hashes paths from the job stream and emits one FileRecord per job.

    The result stream is closed only after every worker has left its loop.
    """

    def __init__(self, workers: int = DEFAULT_WORKERS,
                 chunk_size: int = DEFAULT_CHUNK_SIZE,
                 digest_fn: Optional[DigestFn] = None):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self.chunk_size = chunk_size
        self.digest_fn = digest_fn or compute_digest
        self._barrier: Optional[Thread] = None

    def start(self, jobs: Channel, results: Channel, cancel: Optional[Event] = None) -> None:
        """Spawn the workers; ``results`` is closed once they have all exited."""
        cancel = cancel or Event()

        def work():
            name = current_thread().name
            logger.debug("Worker %s started", name)
            handled = 0
            for path in jobs:
                if cancel.is_set():
                    break
                record = self._hash_one(path, cancel)
                if record is None:
                    break
                results.put(record)
                handled += 1
            logger.debug("Worker %s exiting after %d files", name, handled)

        self._barrier = fan_out(self.workers, work, results.close)

    def _hash_one(self, path: str, cancel: Event) -> Optional[FileRecord]:
        try:
            digest, size = self.digest_fn(path, self.chunk_size, cancel)
        except ScanCancelled:
            return None
        except ReadError as e:
            return FileRecord.failed(path, e)
        return FileRecord(path=path, digest=digest, size=size)

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for all workers and the result-stream close; True when finished."""
        if self._barrier is None:
            return True
        self._barrier.join(timeout)
        return not self._barrier.is_alive()
