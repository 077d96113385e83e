"""Unit tests for the list and delete actions."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from walkctl.walk.actions import delete_file, list_file
from walkctl.walk.audit import AUDIT_PREFIX, AuditLog


class TestListFile:
    """Tests for list_file."""

    def test_writes_path_and_newline(self) -> None:
        """The path is written followed by a newline."""
        sink = io.StringIO()

        list_file("root/dir.log", sink)

        assert sink.getvalue() == "root/dir.log\n"

    def test_sink_error_propagates(self) -> None:
        """A broken sink raises unchanged."""
        sink = MagicMock()
        sink.write.side_effect = BrokenPipeError("Broken pipe")

        with pytest.raises(BrokenPipeError):
            list_file("root/dir.log", sink)


class TestDeleteFile:
    """Tests for delete_file."""

    def test_removes_file_and_records(self, tmp_path: Path) -> None:
        """A deleted file is recorded in the audit log."""
        target = tmp_path / "old.log"
        target.write_text("content")
        sink = io.StringIO()

        delete_file(str(target), AuditLog(sink))

        assert not target.exists()
        assert sink.getvalue().startswith(AUDIT_PREFIX)
        assert sink.getvalue().endswith(f" {target}\n")

    def test_missing_file_raises_without_record(self, tmp_path: Path) -> None:
        """Removing a missing file raises and writes no audit line."""
        sink = io.StringIO()

        with pytest.raises(FileNotFoundError):
            delete_file(str(tmp_path / "missing.log"), AuditLog(sink))

        assert sink.getvalue() == ""

    def test_permission_error_raises_without_record(self, tmp_path: Path) -> None:
        """A removal failure leaves the file and the audit sink untouched."""
        target = tmp_path / "locked.log"
        target.write_text("content")
        sink = io.StringIO()

        with (
            patch("walkctl.walk.actions.os.remove", side_effect=PermissionError("denied")),
            pytest.raises(PermissionError, match="denied"),
        ):
            delete_file(str(target), AuditLog(sink))

        assert target.exists()
        assert sink.getvalue() == ""
