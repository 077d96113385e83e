"""Walk command.

Walks a directory tree and lists, deletes or archives every file that
passes the extension and size filter.
"""

import io
import sys
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Annotated, TextIO

import typer
from rich.markup import escape

from walkctl.core.settings import SettingsError, WalkSettings, load_settings
from walkctl.utils.formatting import print_error, print_warning
from walkctl.walk.dispatcher import run, select_mode
from walkctl.walk.models import ActionMode, RunConfig


def run_cmd(
    root: Annotated[
        str | None,
        typer.Option("--root", help="Root directory to walk (default: current directory)."),
    ] = None,
    list_only: Annotated[
        bool,
        typer.Option("--list", help="List files only."),
    ] = False,
    ext: Annotated[
        str | None,
        typer.Option("--ext", help="File extension to filter on, e.g. .log."),
    ] = None,
    size: Annotated[
        int | None,
        typer.Option("--size", min=0, help="Minimum file size in bytes."),
    ] = None,
    delete: Annotated[
        bool,
        typer.Option("--del", help="Delete matching files."),
    ] = False,
    archive: Annotated[
        Path | None,
        typer.Option("--archive", help="Archive matching files into this directory."),
    ] = None,
    log: Annotated[
        Path | None,
        typer.Option("--log", help="Append the deletion audit trail to this file."),
    ] = None,
) -> None:
    """Walk a directory tree and act on every matching file."""
    settings = _load_settings_or_exit()

    walk_root = root if root is not None else settings.root
    ext_filter = ext if ext is not None else settings.ext
    min_size = size if size is not None else settings.size
    log_path = log if log is not None else _settings_log_path(settings)

    if ext_filter and not ext_filter.startswith("."):
        print_warning(
            f"Extension filter '{escape(ext_filter)}' has no leading dot; no file will match."
        )

    mode = select_mode(list_only=list_only, delete=delete, archive_root=archive)

    try:
        with _open_audit_sink(log_path if mode == ActionMode.DELETE else None) as audit_sink:
            config = RunConfig(
                list_sink=_path_safe_stdout(),
                ext_filter=ext_filter,
                min_size=min_size,
                mode=mode,
                archive_root=archive,
                audit_sink=audit_sink,
            )
            run(walk_root, config)
    except (OSError, ValueError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


# === Private helper functions ===


def _load_settings_or_exit() -> WalkSettings:
    """Load run defaults, exiting with an error on a broken settings file."""
    try:
        return load_settings()
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _settings_log_path(settings: WalkSettings) -> Path | None:
    """Return the audit log file from settings, if any."""
    return Path(settings.log) if settings.log else None


def _open_audit_sink(path: Path | None) -> AbstractContextManager[TextIO]:
    """Open the audit log for appending, or fall back to stdout.

    Both sinks write undecodable file names back as their original bytes.

    Args:
        path: Audit log file, or None for standard output.

    Returns:
        Context manager yielding the audit text stream.
    """
    if path is None:
        return nullcontext(_path_safe_stdout())
    return open(path, "a", encoding="utf-8", errors="surrogateescape")


def _path_safe_stdout() -> TextIO:
    """Return stdout set up to write undecodable file names as raw bytes.

    ``os.listdir`` returns names that are not valid in the filesystem
    encoding with surrogate escapes; writing them back with
    ``surrogateescape`` reproduces the original bytes.
    """
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")
    return sys.stdout
