"""Duplicate Scan Tool - concurrent content-digest duplicate finder."""

__version__ = "1.0.0"
__author__ = "Dupe Tool Team"

# Import key classes for convenient top-level access
from .commands import ScanCommand
from .scanning import DuplicateScanner, WorkerPool, Aggregator, Reporter, compute_digest, walk_tree
from .models import FileRecord, ProgressSample, ScanSummary
from .errors import ScanError, TraversalError, ReadError, PathError, UsageError
from .sinks import ReportSink, StreamSink, ProgressBarSink, CollectingSink, JsonSink

__all__ = [
    # Core classes
    'ScanCommand',
    'DuplicateScanner',

    # Pipeline components
    'WorkerPool',
    'Aggregator',
    'Reporter',
    'compute_digest',
    'walk_tree',

    # Data models
    'FileRecord',
    'ProgressSample',
    'ScanSummary',

    # Errors
    'ScanError',
    'TraversalError',
    'ReadError',
    'PathError',
    'UsageError',

    # Output
    'ReportSink',
    'StreamSink',
    'ProgressBarSink',
    'CollectingSink',
    'JsonSink',

    # Package metadata
    '__version__',
    '__author__'
]
