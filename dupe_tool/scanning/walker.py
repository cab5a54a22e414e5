#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Directory traversal for the Duplicate Scan Tool.
Feeds regular file paths into the job stream, depth-first.
"""

import logging
import os
from threading import Event
from typing import Callable, Optional

from ..errors import ScanError, TraversalError
from ..models.file_record import FileRecord
from ..utils.channel import Channel, ChannelClosed
from ..utils.path import is_hidden

logger = logging.getLogger(__name__)


def walk_tree(root: str, submit: Callable[[str], None],
              cancel: Optional[Event] = None) -> int:
    """
    Recursively submit every visible regular file under ``root``.

    Hidden entries (name starting with ".") are skipped with their subtrees.
    Symlinks, devices, sockets and fifos are ignored. Files are submitted in
    directory-listing order; no sorting happens here.

    Args:
        root: Directory to walk. The root itself is never filtered.
        submit: Called once per regular file path.
        cancel: Optional event; the walk stops early once it is set.

    Returns:
        Number of paths submitted.

    Raises:
        TraversalError: A directory could not be opened or listed.
    """
    return _walk_dir(root, submit, cancel)


def _walk_dir(path: str, submit: Callable[[str], None], cancel: Optional[Event]) -> int:
    logger.debug("Entering %s", path)
    submitted = 0
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise TraversalError(f"cannot list directory {path}: {e.strerror or e}", path) from e

    for entry in entries:
        if cancel is not None and cancel.is_set():
            logger.debug("Traversal cancelled in %s", path)
            break
        if is_hidden(entry.name):
            continue
        try:
            if entry.is_dir(follow_symlinks=False):
                submitted += _walk_dir(os.path.join(path, entry.name), submit, cancel)
            elif entry.is_file(follow_symlinks=False):
                submit(os.path.join(path, entry.name))
                submitted += 1
        except OSError as e:
            raise TraversalError(f"cannot stat {entry.path}: {e.strerror or e}", entry.path) from e
    return submitted


def produce_jobs(root: str, jobs: Channel, results: Channel,
                 cancel: Optional[Event] = None) -> None:
    """Walk ``root`` into ``jobs``; report a traversal failure as a sentinel result.

    The job stream is always closed on return so the workers can drain.
    """
    try:
        count = walk_tree(root, jobs.put, cancel)
        logger.debug("Traversal of %s submitted %d files", root, count)
    except ScanError as e:
        logger.debug("Traversal of %s failed: %s", root, e)
        try:
            results.put(FileRecord.failed("", e))
        except ChannelClosed:
            # Consumers already gone after cancellation
            logger.debug("Dropped traversal error for abandoned scan: %s", e)
    finally:
        jobs.close()
