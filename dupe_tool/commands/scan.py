#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Scan command (thin wrapper).
All pipeline logic lives in `scanning.scanner`; this module only picks the
output sink and runs the engine.
"""

import logging
from typing import Optional

from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_WORKERS
from ..errors import UsageError
from ..models.summary import ScanSummary
from ..scanning.scanner import DuplicateScanner
from ..sinks import JsonSink, ProgressBarSink, ReportSink, StreamSink

logger = logging.getLogger(__name__)


class ScanCommand:
    def __init__(self, workers: int = DEFAULT_WORKERS,
                 chunk_size: int = DEFAULT_CHUNK_SIZE,
                 sink: Optional[ReportSink] = None):
        self.workers = workers
        self.chunk_size = chunk_size
        self.sink = sink

    @staticmethod
    def make_sink(root: str, as_json: bool = False, progress_bar: bool = False) -> ReportSink:
        """Pick the sink matching the CLI output flags."""
        if as_json:
            return JsonSink(command="scan", root=root)
        if progress_bar:
            return ProgressBarSink()
        return StreamSink()

    def execute(self, root: Optional[str], as_json: bool = False,
                progress_bar: bool = False) -> ScanSummary:
        """Scan ``root`` and report duplicates; errors propagate to the caller."""
        if not root:
            raise UsageError("Arg 0 (dirpath) missing.")

        sink = self.sink or self.make_sink(root, as_json, progress_bar)
        engine = DuplicateScanner(sink, workers=self.workers, chunk_size=self.chunk_size)
        try:
            summary = engine.run(root)
        finally:
            sink.close()

        logger.info("Scan of %s complete: %d files, %d duplicates",
                    root, summary.files, summary.duplicates)
        return summary
