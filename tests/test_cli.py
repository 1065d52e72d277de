"""Tests for the maxo command line."""

from __future__ import annotations

import logging

import pytest

from maxo.cli import USAGE_HINT, VERSION_STRING, main


class TestVersionAndUsage:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == "MAXOv0.0.1"
        assert VERSION_STRING == "MAXOv0.0.1"

    def test_version_wins_over_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version", "go"]) == 0
        assert capsys.readouterr().out.strip() == VERSION_STRING

    def test_no_arguments_prints_usage_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
        captured = capsys.readouterr()
        assert USAGE_HINT in captured.err
        assert captured.out == ""

    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--version" in capsys.readouterr().out


class TestTransformCommand:
    def test_transform_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["go", "rocks"]) == 0
        assert capsys.readouterr().out == "og skcor\n"

    def test_single_argument_keeps_inner_whitespace(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["  hi  "]) == 0
        assert capsys.readouterr().out == "  ih  \n"

    def test_scan_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["bad\udc80"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("error: error processing the following")

    def test_buffer_size_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--buffer-size", "4", "a", "bc"]) == 0
        assert capsys.readouterr().out == "a cb\n"

    def test_invalid_buffer_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--buffer-size", "0", "a"])
        assert exc_info.value.code == 2
        assert "buffer_size" in capsys.readouterr().err


class TestItemsCommand:
    def test_items_listing(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--items", "go", "rocks"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "TEXT\t0\t'go'",
            "WHITESPACE\t2\t' '",
            "TEXT\t3\t'rocks'",
            "EOF\t8\t''",
        ]

    def test_items_listing_with_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--items", "\udc80"]) == 1
        assert capsys.readouterr().out.startswith("ERROR\t0\t")


class TestVerbose:
    def test_verbose_emits_debug_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="maxo"):
            assert main(["-v", "go"]) == 0
        assert any("scan" in record.getMessage() for record in caplog.records)
