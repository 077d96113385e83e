"""Depth-first traversal of a directory tree.

Yields one TraversalEntry per visited node, starting with the root
itself. Children are visited in lexical name order. Symbolic links are
reported as files and never followed.
"""

import logging
import os
import stat
from collections.abc import Iterator

from walkctl.walk.models import TraversalEntry

logger = logging.getLogger(__name__)


def iter_entries(root: str) -> Iterator[TraversalEntry]:
    """Walk ``root`` depth-first and yield every node.

    Paths are built by joining names onto the normalized ``root``, so a
    relative root produces relative paths (``root/dir/name``) and a
    root of ``.`` produces bare names. Open directories are kept on an
    explicit stack, so nesting depth is bounded only by the filesystem.

    Args:
        root: Directory (or file) to start from.

    Yields:
        TraversalEntry for the root and every node beneath it.

    Raises:
        OSError: If the root or any entry cannot be stat'd, or a
            directory cannot be listed. The traversal ends there.
    """
    top = _stat_entry(os.path.normpath(root))
    yield top
    if not top.is_directory:
        return

    # (directory path, remaining child names)
    stack: list[tuple[str, Iterator[str]]] = [(top.path, _list_names(top.path))]
    while stack:
        parent, names = stack[-1]
        name = next(names, None)
        if name is None:
            stack.pop()
            continue

        entry = _stat_entry(os.path.normpath(os.path.join(parent, name)))
        yield entry
        if entry.is_directory:
            stack.append((entry.path, _list_names(entry.path)))


def _stat_entry(path: str) -> TraversalEntry:
    """Build the entry for ``path`` without following symlinks."""
    info = os.lstat(path)
    return TraversalEntry(path=path, is_directory=stat.S_ISDIR(info.st_mode), size=info.st_size)


def _list_names(path: str) -> Iterator[str]:
    """Return the sorted child names of a directory."""
    names = sorted(os.listdir(path))
    logger.debug("Descending into %s (%d entries)", path, len(names))
    return iter(names)
