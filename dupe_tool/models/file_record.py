#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for file records in the Duplicate Scan Tool.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import ScanError


@dataclass(frozen=True)
class FileRecord:
    """Immutable per-file result flowing from the workers to the reporter."""
    path: str
    digest: bytes = b""
    size: int = 0
    error: Optional[ScanError] = None

    @classmethod
    def failed(cls, path: str, error: ScanError) -> 'FileRecord':
        """Build a terminal record; an empty path marks a traversal sentinel."""
        return cls(path=path, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_sentinel(self) -> bool:
        return not self.path and self.error is not None

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    @property
    def sort_key(self) -> Tuple[bytes, str]:
        return (self.digest, self.path)


def order_records(records: List[FileRecord]) -> List[FileRecord]:
    """Return records sorted by (digest, path) so equal digests are adjacent."""
    return sorted(records, key=lambda r: r.sort_key)
