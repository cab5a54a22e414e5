"""Scanning pipeline modules for the Duplicate Scan Tool."""

from .digest import compute_digest
from .walker import walk_tree, produce_jobs
from .pool import WorkerPool
from .aggregator import Aggregator
from .reporter import Reporter
from .scanner import DuplicateScanner

__all__ = [
    'compute_digest',
    'walk_tree',
    'produce_jobs',
    'WorkerPool',
    'Aggregator',
    'Reporter',
    'DuplicateScanner',
]
