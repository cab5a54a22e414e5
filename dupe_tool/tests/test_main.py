#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the command line entry point and the scan command wrapper.
"""

import io
import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Make the shared fixtures importable
sys.path.insert(0, str(Path(__file__).parent))

from dupe_tool.commands.scan import ScanCommand
from dupe_tool.errors import ReadError, UsageError
from dupe_tool.main import create_parser, main
from dupe_tool.sinks import CollectingSink, JsonSink, ProgressBarSink, StreamSink
from fixtures.tree_setup import (
    UNDECODABLE_NAME, create_scenario_tree, create_undecodable_file, sha1_hex,
)


class TestScanCommand:

    def test_missing_root_is_usage_error(self):
        with pytest.raises(UsageError):
            ScanCommand(sink=CollectingSink()).execute(None)

    def test_execute_with_injected_sink(self, tmp_path):
        create_scenario_tree(tmp_path)
        sink = CollectingSink()
        summary = ScanCommand(workers=2, sink=sink).execute(str(tmp_path))
        assert summary.files == 3
        assert len(sink.entries) == 3

    def test_make_sink(self, tmp_path):
        assert isinstance(ScanCommand.make_sink(str(tmp_path)), StreamSink)
        assert isinstance(ScanCommand.make_sink(str(tmp_path), as_json=True), JsonSink)
        bar = ScanCommand.make_sink(str(tmp_path), progress_bar=True)
        assert isinstance(bar, ProgressBarSink)
        bar.close()


class TestMain:

    def test_parser_defaults(self):
        args = create_parser().parse_args(["/data"])
        assert args.root == "/data"
        assert args.workers >= 1
        assert not args.json

    def test_missing_argument(self, capsys):
        assert main([]) == 1
        captured = capsys.readouterr()
        assert "ERROR: Arg 0 (dirpath) missing." in captured.err
        assert captured.out == ""

    def test_report_output(self, tmp_path, capsys):
        create_scenario_tree(tmp_path)
        assert main(["--workers", "2", str(tmp_path)]) == 0
        captured = capsys.readouterr()

        lines = captured.out.splitlines()
        assert len(lines) == 3
        digests = [line.split("\t")[0] for line in lines]
        assert digests == sorted(digests)
        assert all(len(d) == 40 for d in digests)
        assert f"{sha1_hex(b'world')}\td.txt" in lines
        assert "Duplicates   : 1" in captured.err
        assert "Duplicate MB :" in captured.err
        assert "Total MB     :" in captured.err

    def test_scan_error_exits_nonzero(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing")]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("ERROR: ")
        assert captured.out == ""

    def test_read_error_produces_no_report(self, tmp_path, capsys):
        create_scenario_tree(tmp_path)
        with patch("dupe_tool.scanning.pool.compute_digest",
                   side_effect=ReadError("cannot read x", "x")):
            assert main([str(tmp_path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Duplicates" not in captured.err

    def test_json_output(self, tmp_path, capsys):
        create_scenario_tree(tmp_path)
        assert main(["--json", str(tmp_path)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["result"] == "success"
        assert payload["command"] == "scan"
        report = payload["report"]
        assert len(report["files"]) == 3
        assert report["summary"]["duplicates"] == 1
        assert report["summary"]["total_bytes"] == 15
        assert isinstance(report["progress"], list)

    def test_json_error(self, tmp_path, capsys):
        assert main(["--json", str(tmp_path / "missing")]) == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["result"] == "error"
        assert payload["error_type"] == "TraversalError"
        assert payload["path"] == str(tmp_path / "missing")

    def test_invalid_worker_count(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--workers", "0", str(tmp_path)])


def _strict_utf8_stdout(monkeypatch):
    """Replace stdout with a strict UTF-8 text stream; return its byte store."""
    raw = io.BytesIO()
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw, encoding="utf-8", errors="strict"))
    return raw


@pytest.mark.skipif(sys.platform != "linux", reason="needs byte-transparent file names")
class TestUndecodableNames:
    """File names that are not valid UTF-8 are reported without crashing."""

    @pytest.fixture
    def tree(self, tmp_path):
        if not create_undecodable_file(tmp_path, b"raw"):
            pytest.skip("filesystem rejects non UTF-8 names")
        (tmp_path / "a.bin").write_bytes(b"raw")
        return tmp_path

    def test_text_report_keeps_original_bytes(self, tree, monkeypatch, capsys):
        raw = _strict_utf8_stdout(monkeypatch)
        assert main(["--workers", "2", str(tree)]) == 0
        sys.stdout.flush()

        lines = raw.getvalue().splitlines()
        digest = sha1_hex(b"raw").encode()
        assert sorted(lines) == sorted([digest + b"\t" + UNDECODABLE_NAME, digest + b"\ta.bin"])
        assert "Duplicates   : 1" in capsys.readouterr().err

    def test_json_report_escapes_bytes(self, tree, monkeypatch):
        raw = _strict_utf8_stdout(monkeypatch)
        assert main(["--json", str(tree)]) == 0
        sys.stdout.flush()

        payload = json.loads(raw.getvalue().decode("utf-8"))
        paths = sorted(f["path"] for f in payload["report"]["files"])
        assert paths == sorted(["\\xff.bin", "a.bin"])
