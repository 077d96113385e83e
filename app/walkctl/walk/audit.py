"""Audit trail of deleted files.

Each successful deletion is recorded as one line on a caller-supplied
text stream::

    DELETED FILE:2024/01/15 10:00:00 /path/to/file.log
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

logger = logging.getLogger(__name__)

AUDIT_PREFIX = "DELETED FILE:"
AUDIT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


class AuditLog:
    """Writes deletion records to an audit sink.

    Attributes:
        _sink: Text stream receiving one line per deletion.
        _clock: Callable returning the current local time.
    """

    def __init__(self, sink: TextIO, clock: Callable[[], datetime] = datetime.now) -> None:
        """Initialize the AuditLog.

        Args:
            sink: Text stream receiving audit lines.
            clock: Source of timestamps, overridable for tests.
        """
        self._sink = sink
        self._clock = clock

    def format_line(self, path: str) -> str:
        """Build the audit line for a deleted path, without the newline."""
        timestamp = self._clock().strftime(AUDIT_TIME_FORMAT)
        return f"{AUDIT_PREFIX}{timestamp} {path}"

    def record(self, path: str) -> None:
        """Append one deletion record and flush the sink.

        Args:
            path: Path of the file that was deleted.

        Raises:
            OSError: If the sink cannot be written.
        """
        self._sink.write(self.format_line(path) + "\n")
        self._sink.flush()
        logger.debug("Recorded deletion of %s", path)
