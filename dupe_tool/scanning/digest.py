#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Content digest computation for the Duplicate Scan Tool.
"""

import hashlib
from threading import Event
from typing import Optional, Tuple

from ..config import DIGEST_ALGORITHM, DEFAULT_CHUNK_SIZE
from ..errors import ReadError, ScanCancelled


def compute_digest(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
                   cancel: Optional[Event] = None) -> Tuple[bytes, int]:
    """Stream a file through SHA-1 and return (digest, bytes_read).

    Raises ReadError if the file cannot be opened or a read fails; no partial
    digest is ever returned. Raises ScanCancelled if ``cancel`` is set while
    reading.
    """
    h = hashlib.new(DIGEST_ALGORITHM)
    written = 0
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                if cancel is not None and cancel.is_set():
                    raise ScanCancelled(path)
                h.update(chunk)
                written += len(chunk)
    except OSError as e:
        raise ReadError(f"cannot read {path}: {e.strerror or e}", path) from e
    return h.digest(), written
