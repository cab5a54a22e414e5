#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Duplicate reporting for the Duplicate Scan Tool.
"""

import logging
from typing import List

from ..models.file_record import FileRecord, order_records
from ..models.summary import ScanSummary
from ..utils.path import relative_path

logger = logging.getLogger(__name__)


class Reporter:
    """Orders buffered results and writes per-file lines plus a summary."""

    def __init__(self, sink):
        self.sink = sink

    def report(self, root: str, records: List[FileRecord]) -> ScanSummary:
        """
        Emit one entry per record in (digest, path) order and the summary.

        A record counts as a duplicate when its digest is non-empty and equal
        to the previous record's digest.

        Raises:
            PathError: a record path cannot be made relative to ``root``.
        """
        ordered = order_records(records)
        logger.debug("Reporting %d files under %s", len(ordered), root)

        summary = ScanSummary(files=len(ordered))
        previous = b""
        for record in ordered:
            rel = relative_path(root, record.path)
            self.sink.entry(record.hex_digest, rel)
            summary.total_bytes += record.size
            if record.digest and record.digest == previous:
                summary.duplicates += 1
                summary.duplicate_bytes += record.size
            previous = record.digest

        self.sink.summary(summary)
        return summary
