#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the Duplicate Scan Tool.
"""

import argparse
import sys
import logging
from typing import List, Optional

from .config import DEFAULT_CHUNK_SIZE, DEFAULT_WORKERS
from .commands.scan import ScanCommand
from .errors import ScanError, UsageError
from .jsonio import enable_json_logging, error


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool (stdout is reserved for the report)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dupe-tool",
        description="Find duplicate files under a directory by SHA-1 content digest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Report every file with its digest, duplicates adjacent
  %(prog)s /mnt/photos > digests.txt

  # Limit hashing to 2 threads and show a progress bar
  %(prog)s --workers 2 --progress-bar /mnt/photos

  # Machine-readable report
  %(prog)s --json /mnt/photos
        """
    )
    # Optional so a missing root can be reported as a usage error by ScanCommand
    parser.add_argument("root", nargs="?",
                        help="Root directory to scan")
    parser.add_argument("--workers", "-j", type=int, default=DEFAULT_WORKERS,
                        help=f"Number of hashing threads (default: {DEFAULT_WORKERS})")
    parser.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE,
                        help=f"Read buffer size in bytes (default: {DEFAULT_CHUNK_SIZE})")
    parser.add_argument("--progress-bar", action="store_true",
                        help="Show a progress bar on stderr")
    parser.add_argument("--json", action="store_true",
                        help="Output results as JSON instead of tab-separated lines")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.json:
        enable_json_logging()
    else:
        setup_logging(args.verbose)

    logging.debug("Parsed arguments: %s", args)

    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.chunk_size < 1:
        parser.error("--chunk-size must be at least 1")

    try:
        ScanCommand(workers=args.workers, chunk_size=args.chunk_size).execute(
            args.root, as_json=args.json, progress_bar=args.progress_bar
        )
    except KeyboardInterrupt:
        if args.json:
            return error("scan", "Operation interrupted by user", code=130)
        logging.warning("Operation interrupted by user.")
        return 130
    except ScanError as e:
        if args.json:
            return error("scan", e, verbose=args.verbose, code=1)
        if args.verbose and not isinstance(e, UsageError):
            logging.error("Scan failed: %s", e, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
