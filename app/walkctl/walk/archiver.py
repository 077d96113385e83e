"""Gzip archiving into a mirrored directory tree.

A file found at ``<root>/a/b/report.log`` is archived to
``<dest_root>/a/b/report.log.gz``: the directory of the source,
expressed relative to the traversal root, is recreated under the
destination root so the archive keeps the shape of the source tree.
"""

import gzip
import logging
import os
import shutil
import stat
from pathlib import Path

from walkctl.walk.models import ArchiveTarget

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".gz"


def validate_archive_root(dest_root: Path) -> None:
    """Check that the archive destination is an existing directory.

    Args:
        dest_root: Destination root directory.

    Raises:
        FileNotFoundError: If the destination does not exist.
        NotADirectoryError: If the destination is not a directory.
        OSError: If the destination cannot be stat'd.
    """
    info = os.stat(dest_root)
    if not stat.S_ISDIR(info.st_mode):
        msg = f"Archive destination is not a directory: {dest_root}"
        raise NotADirectoryError(msg)


def validate_archive_source(root: str) -> None:
    """Check that the traversal root is a directory.

    Archive paths are mirrored relative to the root. A single file as
    root would mirror to ``..`` and land outside the destination. The
    root is checked without following symlinks, as the walker does.

    Raises:
        FileNotFoundError: If the root does not exist.
        NotADirectoryError: If the root is not a directory.
    """
    info = os.lstat(root)
    if not stat.S_ISDIR(info.st_mode):
        msg = f"Archive source root is not a directory: {root}"
        raise NotADirectoryError(msg)


def compute_archive_target(path: str, root: str, dest_root: Path) -> ArchiveTarget:
    """Compute where a source file is archived.

    Args:
        path: Source file path as produced by the walker.
        root: Traversal root the walk started from.
        dest_root: Destination root directory.

    Returns:
        ArchiveTarget with the mirrored relative directory and full path.
    """
    source_dir = os.path.dirname(path) or os.curdir
    relative_dir = Path(os.path.relpath(source_dir, root))
    file_name = os.path.basename(path) + ARCHIVE_SUFFIX

    return ArchiveTarget(
        relative_dir=relative_dir,
        file_name=file_name,
        full_path=Path(dest_root) / relative_dir / file_name,
    )


def archive_file(path: str, root: str, dest_root: Path) -> ArchiveTarget:
    """Write a gzip-compressed copy of a file under the destination root.

    The destination is validated before any byte is written. Missing
    intermediate directories are created. The gzip header carries the
    source base name, in its filesystem bytes, as the original file
    name; ``gzip`` drops a trailing ``.gz`` from that field, so
    ``old.gz`` is recorded as ``old``. An existing archive is
    truncated and rewritten.

    Args:
        path: Source file path.
        root: Traversal root, used to mirror the source directory.
        dest_root: Destination root directory.

    Returns:
        The ArchiveTarget that was written.

    Raises:
        OSError: If the destination is invalid, a directory cannot be
            created, either file cannot be opened, the copy fails, or a
            handle fails to close.
    """
    validate_archive_root(dest_root)

    target = compute_archive_target(path, root, dest_root)
    target.full_path.parent.mkdir(parents=True, exist_ok=True)
    header_name = os.fsencode(os.path.basename(path))

    with (
        open(path, "rb") as src,
        open(target.full_path, "wb") as out,
        gzip.GzipFile(filename=header_name, mode="wb", fileobj=out) as zipped,
    ):
        shutil.copyfileobj(src, zipped)

    logger.info("Archived %s -> %s", path, target.full_path)
    return target
