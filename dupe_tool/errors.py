#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception hierarchy for the Duplicate Scan Tool.

Every error raised by the scan pipeline is fatal at the point it is first
observed: the scan stops and no report is produced.
"""

from typing import Optional


class ScanError(Exception):
    """Base class for all scan failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class TraversalError(ScanError):
    """A directory could not be opened or listed."""


class ReadError(ScanError):
    """A file could not be opened or fully read while hashing."""


class PathError(ScanError):
    """A result path could not be made relative to the scan root."""


class UsageError(ScanError):
    """The command line is missing required input."""


class ScanCancelled(Exception):
    """Raised inside workers when the scan has been abandoned."""
