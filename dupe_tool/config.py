#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for the Duplicate Scan Tool.
"""

import os

# Digest settings
DIGEST_ALGORITHM = "sha1"
DIGEST_SIZE = 20  # bytes

# Size units
BYTES_PER_MB = 1024 * 1024

# Processing defaults (can be overridden by CLI)
DEFAULT_CHUNK_SIZE = 1 * 1024 * 1024  # 1MB read buffer per worker
DEFAULT_WORKERS = os.cpu_count() or 1

# Progress reporting
PROGRESS_INTERVAL_SECONDS = 1.0

# Traversal
HIDDEN_PREFIX = "."
