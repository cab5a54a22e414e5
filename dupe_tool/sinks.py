#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Output sinks for the Duplicate Scan Tool.

The aggregator and reporter write structured events to a sink instead of
printing directly, so the output format can be swapped or captured.
"""

import os
import sys
from decimal import Decimal
from typing import BinaryIO, List, Optional, TextIO, Tuple

from tqdm import tqdm

from .jsonio import scan_report, success
from .models.summary import ProgressSample, ScanSummary

PROGRESS_FORMAT = "MB/s: %.2f\tfiles: %d\tMB/s (total): %.2f"


def format_mb(value: float) -> str:
    """Render a float like Go's %v: shortest digits, exponent form outside [1e-4, 1e6)."""
    if value == 0:
        return "0"
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(d) for d in digits)
    point = len(text) + exponent  # position of the decimal point within text
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        body = f"{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    elif point <= 0:
        body = "0." + "0" * -point + text
    elif point >= len(text):
        body = text + "0" * (point - len(text))
    else:
        body = text[:point] + "." + text[point:]
    return ("-" if sign else "") + body


class ReportSink:
    """Receives progress ticks, per-file entries and the final summary."""

    def progress(self, sample: ProgressSample) -> None:
        raise NotImplementedError

    def entry(self, hex_digest: str, rel_path: str) -> None:
        raise NotImplementedError

    def summary(self, summary: ScanSummary) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class StreamSink(ReportSink):
    """Line-oriented text output: entries to ``out``, everything else to ``err``.

    Entry lines are written as raw filesystem bytes when ``out`` exposes a
    binary buffer, so undecodable file names come through unchanged.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self._out_bytes: Optional[BinaryIO] = getattr(self.out, "buffer", None)
        self._text_flushed = False

    def format_progress(self, sample: ProgressSample) -> str:
        return PROGRESS_FORMAT % (sample.mbps, sample.files, sample.mbps_total)

    def progress(self, sample: ProgressSample) -> None:
        print(self.format_progress(sample), file=self.err, flush=True)

    def entry(self, hex_digest: str, rel_path: str) -> None:
        line = f"{hex_digest}\t{rel_path}\n"
        if self._out_bytes is None:
            self.out.write(line)
            return
        if not self._text_flushed:
            # Anything already written through the text layer goes first
            self.out.flush()
            self._text_flushed = True
        self._out_bytes.write(os.fsencode(line))

    def summary(self, summary: ScanSummary) -> None:
        self.out.flush()
        print("Duplicates   :", summary.duplicates, file=self.err)
        print("Duplicate MB :", format_mb(summary.duplicate_mb), file=self.err)
        print("Total MB     :", format_mb(summary.total_mb), file=self.err)
        self.err.flush()


class ProgressBarSink(StreamSink):
    """StreamSink with a tqdm bar counting files as they are reported."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        super().__init__(out, err)
        self._bar = tqdm(unit=" files", desc="Hashing", file=self.err,
                         dynamic_ncols=True, leave=False)

    @property
    def counted(self) -> int:
        return self._bar.n

    def progress(self, sample: ProgressSample) -> None:
        self._bar.update(sample.files)
        self._bar.set_postfix(mbps=f"{sample.mbps_total:.2f}")
        tqdm.write(self.format_progress(sample), file=self.err)

    def summary(self, summary: ScanSummary) -> None:
        # Files after the last tick never reached the bar
        self._bar.update(summary.files - self._bar.n)
        self._bar.close()
        super().summary(summary)

    def close(self) -> None:
        self._bar.close()


class CollectingSink(ReportSink):
    """Keeps every event in memory."""

    def __init__(self):
        self.samples: List[ProgressSample] = []
        self.entries: List[Tuple[str, str]] = []
        self.result: Optional[ScanSummary] = None

    def progress(self, sample: ProgressSample) -> None:
        self.samples.append(sample)

    def entry(self, hex_digest: str, rel_path: str) -> None:
        self.entries.append((hex_digest, rel_path))

    def summary(self, summary: ScanSummary) -> None:
        self.result = summary


class JsonSink(CollectingSink):
    """Collects the report and prints it as one JSON document on close."""

    def __init__(self, command: str = "scan", root: str = ""):
        super().__init__()
        self.command = command
        self.root = root

    def progress(self, sample: ProgressSample) -> None:
        super().progress(sample)
        print(PROGRESS_FORMAT % (sample.mbps, sample.files, sample.mbps_total),
              file=sys.stderr, flush=True)

    def close(self) -> None:
        if self.result is None:
            return
        success(self.command, scan_report(self.root, self.entries, self.result, self.samples))
