"""Data models for the Duplicate Scan Tool."""

from .file_record import FileRecord, order_records
from .summary import ProgressSample, ScanSummary

__all__ = ['FileRecord', 'order_records', 'ProgressSample', 'ScanSummary']
