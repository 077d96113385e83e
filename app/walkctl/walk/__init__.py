"""Tree walking, filtering and per-file actions.

This module provides the traversal-filter-action pipeline: the walker,
the exclusion predicate, the list/delete/archive actions, the deletion
audit log and the run entry point that ties them together.
"""

from walkctl.walk.actions import delete_file, list_file
from walkctl.walk.archiver import (
    archive_file,
    compute_archive_target,
    validate_archive_root,
    validate_archive_source,
)
from walkctl.walk.audit import AUDIT_PREFIX, AuditLog
from walkctl.walk.dispatcher import run, select_mode
from walkctl.walk.models import ActionMode, ArchiveTarget, RunConfig, RunSummary, TraversalEntry
from walkctl.walk.predicate import file_extension, should_exclude
from walkctl.walk.walker import iter_entries

__all__ = [
    "AUDIT_PREFIX",
    "ActionMode",
    "ArchiveTarget",
    "AuditLog",
    "RunConfig",
    "RunSummary",
    "TraversalEntry",
    "archive_file",
    "compute_archive_target",
    "delete_file",
    "file_extension",
    "iter_entries",
    "list_file",
    "run",
    "select_mode",
    "should_exclude",
    "validate_archive_root",
    "validate_archive_source",
]
