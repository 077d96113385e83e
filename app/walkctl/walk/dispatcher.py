"""Run entry point: walk, filter and dispatch one action per file.

The run stops at the first error, whether raised by the traversal or
by an action, and re-raises it unchanged. Files processed before the
failure are left as they are.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from walkctl.walk.actions import delete_file, list_file
from walkctl.walk.archiver import archive_file, validate_archive_root, validate_archive_source
from walkctl.walk.audit import AuditLog
from walkctl.walk.models import ActionMode, RunConfig, RunSummary
from walkctl.walk.predicate import should_exclude
from walkctl.walk.walker import iter_entries

logger = logging.getLogger(__name__)


def select_mode(
    list_only: bool = False,
    delete: bool = False,
    archive_root: Path | None = None,
) -> ActionMode:
    """Choose the action mode from the user's selections.

    Precedence: an explicit list request wins, then archiving (which
    needs a destination), then deletion. Without any selection the
    mode is LIST.

    Args:
        list_only: Force listing regardless of other selections.
        delete: Delete matching files.
        archive_root: Archive destination, enables archiving when set.

    Returns:
        The single ActionMode for the run.
    """
    if list_only:
        return ActionMode.LIST
    if archive_root is not None:
        return ActionMode.ARCHIVE
    if delete:
        return ActionMode.DELETE
    return ActionMode.LIST


def _build_action(root: str, config: RunConfig) -> Callable[[str], None]:
    """Bind the configured action to its sinks and destination.

    Archive mode validates the destination and the source root here,
    once, before the walk starts.
    """
    if config.mode == ActionMode.ARCHIVE and config.archive_root is not None:
        dest_root = config.archive_root
        validate_archive_root(dest_root)
        validate_archive_source(root)

        def _archive(path: str) -> None:
            archive_file(path, root, dest_root)
            list_file(path, config.list_sink)

        return _archive

    if config.mode == ActionMode.DELETE and config.audit_sink is not None:
        audit = AuditLog(config.audit_sink)
        return lambda path: delete_file(path, audit)

    return lambda path: list_file(path, config.list_sink)


def run(root: str, config: RunConfig) -> RunSummary:
    """Walk ``root`` and apply the configured action to every matching file.

    Args:
        root: Directory to walk.
        config: Filter and action configuration for this run.

    Returns:
        RunSummary with visit, exclusion and processing counts.

    Raises:
        OSError: On the first traversal or action failure. Nothing
            after the failing entry is visited.
    """
    action = _build_action(root, config)

    logger.info("Walking %s in %s mode", root, config.mode.value)

    visited = 0
    excluded = 0
    processed = 0

    for entry in iter_entries(root):
        visited += 1

        if should_exclude(entry, config.ext_filter, config.min_size):
            excluded += 1
            continue

        logger.debug("Processing %s (%d bytes)", entry.path, entry.size)
        action(entry.path)
        processed += 1

    logger.info("Processed %d of %d visited entries", processed, visited)

    return RunSummary(
        mode=config.mode,
        visited=visited,
        excluded=excluded,
        processed=processed,
    )
