"""Filter deciding which visited entries are processed."""

import os

from walkctl.walk.models import TraversalEntry


def file_extension(path: str) -> str:
    """Return the extension of a path's base name, including the dot.

    The extension starts at the last dot of the base name, so a dotfile
    such as ``.bashrc`` is all extension. Returns an empty string when the
    base name has no dot.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:]


def should_exclude(entry: TraversalEntry, ext_filter: str, min_size: int) -> bool:
    """Check whether an entry must be skipped.

    Directories are always excluded. Files are excluded when smaller
    than ``min_size`` or, if ``ext_filter`` is set, when their extension
    is not exactly ``ext_filter`` (case-sensitive). A filter without a
    leading dot is compared literally and never matches.

    Args:
        entry: Visited node.
        ext_filter: Required extension, or empty for no extension filter.
        min_size: Inclusive minimum size in bytes.

    Returns:
        True if the entry is excluded from processing.
    """
    if entry.is_directory or entry.size < min_size:
        return True

    return bool(ext_filter) and file_extension(entry.path) != ext_filter
