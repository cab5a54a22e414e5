#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
JSON report and error payloads for the Duplicate Scan Tool.

In JSON mode stdout carries exactly one document; logs and progress lines
stay on stderr.
"""

import json
import logging
import os
import sys
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .errors import ScanError
from .models.summary import ProgressSample, ScanSummary


def enable_json_logging():
    """Send logs to stderr and suppress info noise when emitting JSON to stdout."""
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    logging.basicConfig(stream=sys.stderr, level=logging.ERROR)


def display_path(path: str) -> str:
    """Render a filesystem path as valid text; undecodable bytes become \\xNN."""
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def scan_report(root: str, entries: Iterable[Tuple[str, str]], summary: ScanSummary,
                samples: Iterable[ProgressSample] = ()) -> Dict[str, Any]:
    """Build the report document for a finished scan."""
    return {
        "root": display_path(root),
        "files": [{"digest": digest, "path": display_path(rel)} for digest, rel in entries],
        "summary": summary.to_dict(),
        "progress": [s.to_dict() for s in samples],
    }


def _emit(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False), file=sys.stdout)
    sys.stdout.flush()


def success(command: str, report: Dict[str, Any]) -> int:
    _emit({"result": "success", "command": command, "report": report})
    return 0


def error(command: str, failure: Union[ScanError, str],
          verbose: bool = False, code: int = 1) -> int:
    """Emit an error document; ScanErrors also carry their kind and path."""
    payload: Dict[str, Any] = {"result": "error", "command": command, "error": display_path(str(failure))}
    if isinstance(failure, ScanError):
        payload["error_type"] = type(failure).__name__
        path: Optional[str] = failure.path
        payload["path"] = display_path(path) if path else None
        if verbose and failure.__cause__ is not None:
            payload["cause"] = repr(failure.__cause__)
    _emit(payload)
    return code
