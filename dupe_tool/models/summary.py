#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Progress and summary data structures for the Duplicate Scan Tool.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from ..config import BYTES_PER_MB


@dataclass(frozen=True)
class ProgressSample:
    """Throughput observed during one progress tick."""
    mbps: float
    files: int
    mbps_total: float  # running average across ticks

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ScanSummary:
    """Aggregate duplication statistics for a finished scan."""
    files: int = 0
    duplicates: int = 0
    duplicate_bytes: int = 0
    total_bytes: int = 0

    @property
    def duplicate_mb(self) -> float:
        return self.duplicate_bytes / BYTES_PER_MB

    @property
    def total_mb(self) -> float:
        return self.total_bytes / BYTES_PER_MB

    def to_dict(self) -> Dict[str, Any]:
        """Convert summary to dictionary for serialization."""
        data = asdict(self)
        data["duplicate_mb"] = self.duplicate_mb
        data["total_mb"] = self.total_mb
        return data
