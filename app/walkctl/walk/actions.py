"""List and delete actions.

Each action operates on a single file path and lets any I/O error
propagate so that the run stops at the first failure. The archive
action lives in ``walkctl.walk.archiver``.
"""

import logging
import os
from typing import TextIO

from walkctl.walk.audit import AuditLog

logger = logging.getLogger(__name__)


def list_file(path: str, sink: TextIO) -> None:
    """Write a path followed by a newline to the sink.

    Raises:
        OSError: If the sink cannot be written (e.g. broken pipe).
    """
    sink.write(path + "\n")


def delete_file(path: str, audit: AuditLog) -> None:
    """Remove a file and record the deletion.

    The audit record is written only after the removal succeeded; a
    failed removal writes nothing.

    Args:
        path: File to remove.
        audit: Audit log receiving the deletion record.

    Raises:
        OSError: If the file cannot be removed or the audit sink
            cannot be written.
    """
    os.remove(path)
    logger.info("Deleted %s", path)
    audit.record(path)
