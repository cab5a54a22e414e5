#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for the Duplicate Scan Tool.
"""

import os

from ..config import HIDDEN_PREFIX
from ..errors import PathError


def is_hidden(name: str) -> bool:
    """Return True for dot-entries other than "." and ".."."""
    return name != ".." and len(name) > 1 and name.startswith(HIDDEN_PREFIX)


def relative_path(root: str, path: str) -> str:
    """Express ``path`` relative to ``root``.

    Raises PathError when no relative form exists (e.g. different drives) or
    when the path lies outside the root.
    """
    try:
        rel = os.path.relpath(path, root)
    except ValueError as e:
        raise PathError(f"cannot make {path!r} relative to {root!r}: {e}", path) from e
    if rel == os.pardir or rel.startswith(os.pardir + os.sep):
        raise PathError(f"{path!r} is outside scan root {root!r}", path)
    return rel
