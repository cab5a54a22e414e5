#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for result aggregation and progress ticks.
"""

import pytest

from dupe_tool.config import BYTES_PER_MB
from dupe_tool.errors import ReadError, TraversalError
from dupe_tool.models.file_record import FileRecord
from dupe_tool.scanning.aggregator import Aggregator
from dupe_tool.sinks import CollectingSink


class FakeClock:
    """Returns queued timestamps, repeating the last one when exhausted."""

    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        if len(self.times) > 1:
            return self.times.pop(0)
        return self.times[0]


def _record(name, size=BYTES_PER_MB):
    return FileRecord(path=f"/root/{name}", digest=name.encode().ljust(20, b"\0"), size=size)


class TestAggregator:

    def test_buffers_all_records(self):
        sink = CollectingSink()
        records = [_record("a"), _record("b"), _record("c")]
        out = Aggregator(sink, clock=FakeClock(0.0)).consume(iter(records))
        assert out == records
        assert sink.samples == []

    def test_progress_tick_after_interval(self):
        sink = CollectingSink()
        # start=0, then one timestamp per record
        clock = FakeClock(0.0, 0.5, 2.0, 2.5)
        out = Aggregator(sink, clock=clock).consume(
            [_record("a"), _record("b"), _record("c")])
        assert len(out) == 3
        assert len(sink.samples) == 1
        sample = sink.samples[0]
        assert sample.files == 2
        assert sample.mbps == pytest.approx(2 / 2.0)
        assert sample.mbps_total == pytest.approx(sample.mbps)

    def test_running_average_is_incremental_mean(self):
        sink = CollectingSink()
        # Ticks of 4 MB/s then 1 MB/s (per-second windows of 2 s and 2 s)
        clock = FakeClock(0.0, 2.0, 4.0)
        Aggregator(sink, clock=clock).consume(
            [_record("a", 8 * BYTES_PER_MB), _record("b", 2 * BYTES_PER_MB)])
        assert [s.mbps for s in sink.samples] == pytest.approx([4.0, 1.0])
        # avg += (instant - avg) / ticks
        assert sink.samples[0].mbps_total == pytest.approx(4.0)
        assert sink.samples[1].mbps_total == pytest.approx(4.0 + (1.0 - 4.0) / 2)

    def test_window_resets_after_tick(self):
        sink = CollectingSink()
        clock = FakeClock(0.0, 1.5, 1.6, 3.2)
        Aggregator(sink, clock=clock).consume(
            [_record("a"), _record("b"), _record("c")])
        assert [s.files for s in sink.samples] == [1, 2]

    def test_no_tick_at_exact_interval(self):
        sink = CollectingSink()
        Aggregator(sink, clock=FakeClock(0.0, 1.0)).consume([_record("a")])
        assert sink.samples == []

    def test_read_error_short_circuits(self):
        sink = CollectingSink()
        err = ReadError("cannot read /root/bad", "/root/bad")
        consumed = []

        def stream():
            for r in [_record("a"), FileRecord.failed("/root/bad", err), _record("c")]:
                consumed.append(r)
                yield r

        with pytest.raises(ReadError) as exc_info:
            Aggregator(sink, clock=FakeClock(0.0)).consume(stream())
        assert exc_info.value is err
        # Nothing after the failed record is pulled from the stream
        assert len(consumed) == 2

    def test_traversal_sentinel_propagates(self):
        err = TraversalError("cannot list directory /root", "/root")
        with pytest.raises(TraversalError):
            Aggregator(CollectingSink(), clock=FakeClock(0.0)).consume(
                [FileRecord.failed("", err)])
