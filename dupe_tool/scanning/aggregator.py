#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Result aggregation for the Duplicate Scan Tool.
Tracks throughput, emits progress ticks and buffers results for reporting.
"""

import logging
import time
from typing import Callable, Iterable, List

from ..config import BYTES_PER_MB, PROGRESS_INTERVAL_SECONDS
from ..models.file_record import FileRecord
from ..models.summary import ProgressSample

logger = logging.getLogger(__name__)


class Aggregator:
    """Consumes the result stream; stops at the first failed record."""

    def __init__(self, sink, interval: float = PROGRESS_INTERVAL_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.sink = sink
        self.interval = interval
        self.clock = clock
        self.ticks = 0
        self.mbps_total = 0.0

    def consume(self, results: Iterable[FileRecord]) -> List[FileRecord]:
        """
        Buffer every record until the stream closes.

        Raises:
            ScanError: the error carried by the first failed record. Remaining
                results are not drained.
        """
        buffered: List[FileRecord] = []
        window_bytes = 0
        window_files = 0
        last_tick = self.clock()

        for record in results:
            window_bytes += record.size
            window_files += 1
            if record.error is not None:
                logger.debug("Aborting aggregation on %s: %s",
                             record.path or "<traversal>", record.error)
                raise record.error

            now = self.clock()
            elapsed = now - last_tick
            if elapsed > self.interval:
                self._tick(window_bytes, window_files, elapsed)
                last_tick = now
                window_bytes = 0
                window_files = 0

            buffered.append(record)

        logger.debug("Result stream closed after %d files", len(buffered))
        return buffered

    def _tick(self, window_bytes: int, window_files: int, elapsed: float) -> None:
        self.ticks += 1
        mbps = window_bytes / elapsed / BYTES_PER_MB
        # Incremental mean over ticks, not over bytes
        self.mbps_total += (mbps - self.mbps_total) / self.ticks
        self.sink.progress(ProgressSample(mbps=mbps, files=window_files,
                                          mbps_total=self.mbps_total))
