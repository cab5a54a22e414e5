"""Command implementations for the Duplicate Scan Tool."""

from .scan import ScanCommand

__all__ = ['ScanCommand']
