"""Tests for the deletion audit log."""

import io
import re
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from walkctl.walk.audit import AUDIT_PREFIX, AuditLog


def _fixed_clock() -> datetime:
    return datetime(2024, 1, 15, 10, 0, 0)


class TestAuditLog:
    """Tests for AuditLog."""

    def test_record_line_format(self) -> None:
        """Lines carry the prefix, a date/time stamp and the path."""
        sink = io.StringIO()
        audit = AuditLog(sink, clock=_fixed_clock)

        audit.record("/tmp/walk/file1.log")

        assert sink.getvalue() == "DELETED FILE:2024/01/15 10:00:00 /tmp/walk/file1.log\n"

    def test_default_clock_timestamp(self) -> None:
        """Without a clock override the current time is used."""
        sink = io.StringIO()
        AuditLog(sink).record("a.log")

        line = sink.getvalue()
        assert line.startswith(AUDIT_PREFIX)
        assert re.fullmatch(r"DELETED FILE:\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} a\.log\n", line)

    def test_one_line_per_record(self) -> None:
        """Each record appends exactly one line."""
        sink = io.StringIO()
        audit = AuditLog(sink, clock=_fixed_clock)

        for i in range(3):
            audit.record(f"file{i}.log")

        assert len(sink.getvalue().split("\n")) == 4

    def test_record_flushes_sink(self) -> None:
        """The sink is flushed after every record."""
        sink = MagicMock()
        AuditLog(sink, clock=_fixed_clock).record("a.log")

        sink.flush.assert_called_once()

    def test_write_error_propagates(self) -> None:
        """A failing sink raises from record."""
        sink = MagicMock()
        sink.write.side_effect = OSError("No space left on device")

        with pytest.raises(OSError, match="No space left"):
            AuditLog(sink, clock=_fixed_clock).record("a.log")
