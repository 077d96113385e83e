"""Data model for tree walking runs.

This module defines the entries produced by the walker, the action
modes a run can dispatch to, the per-run configuration, and the
derived archive target of a single file.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO


class ActionMode(str, Enum):
    """Action applied to every file that survives the filter.

    Attributes:
        LIST: Write the file path to the list sink.
        DELETE: Remove the file and record it in the audit log.
        ARCHIVE: Write a gzip copy into a mirrored destination tree.
    """

    LIST = "list"
    DELETE = "delete"
    ARCHIVE = "archive"


@dataclass(frozen=True, slots=True)
class TraversalEntry:
    """A single node visited by the walker.

    Attributes:
        path: Path of the node, joined onto the traversal root.
        is_directory: Whether the node is a directory (symlinks are not).
        size: Size in bytes as reported by lstat.
    """

    path: str
    is_directory: bool
    size: int

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ArchiveTarget:
    """Mirrored destination of one archived file.

    Attributes:
        relative_dir: Directory of the source file relative to the traversal root.
        file_name: Source base name with the ``.gz`` suffix.
        full_path: ``archive_root / relative_dir / file_name``.
    """

    relative_dir: Path
    file_name: str
    full_path: Path


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable configuration of a single run.

    Attributes:
        list_sink: Stream receiving listed (and archived) paths.
        ext_filter: Extension a file must have, including the leading dot.
            Empty means no extension filter.
        min_size: Inclusive lower bound on file size in bytes.
        mode: Action applied to every non-excluded file.
        archive_root: Destination root, required for ARCHIVE mode.
        audit_sink: Stream receiving deletion records, required for DELETE mode.
    """

    list_sink: TextIO
    ext_filter: str = ""
    min_size: int = 0
    mode: ActionMode = ActionMode.LIST
    archive_root: Path | None = None
    audit_sink: TextIO | None = None

    def __post_init__(self) -> None:
        """Validate configuration data after initialization."""
        if self.min_size < 0:
            msg = f"Minimum size cannot be negative, got {self.min_size}"
            raise ValueError(msg)
        if self.mode == ActionMode.ARCHIVE and self.archive_root is None:
            msg = "Archive mode requires an archive root"
            raise ValueError(msg)
        if self.mode == ActionMode.DELETE and self.audit_sink is None:
            msg = "Delete mode requires an audit sink"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Counters describing a completed run.

    Attributes:
        mode: Action mode the run dispatched to.
        visited: Number of nodes yielded by the walker.
        excluded: Number of nodes the filter rejected.
        processed: Number of files the action was applied to.
    """

    mode: ActionMode
    visited: int
    excluded: int
    processed: int
