"""Unit tests for Rich console helpers."""

import pytest
from walkctl.utils.formatting import print_error, print_info, print_success, print_warning


class TestPrintHelpers:
    """Tests for the print_* helpers."""

    def test_info_and_success_go_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info and success messages are written to stdout."""
        print_info("walking")
        print_success("done")

        captured = capsys.readouterr()
        assert "walking" in captured.out
        assert "done" in captured.out
        assert captured.err == ""

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Warnings are prefixed and written to stderr."""
        print_warning("careful")

        captured = capsys.readouterr()
        assert "Warning: careful" in captured.err
        assert captured.out == ""

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Errors are prefixed and written to stderr."""
        print_error("boom")

        captured = capsys.readouterr()
        assert "Error: boom" in captured.err
