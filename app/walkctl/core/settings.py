"""Persistent run defaults.

Defaults for the ``walkctl run`` options can be stored in
~/.config/walkctl/settings.toml. Command-line flags always override
them::

    root = "/var/log/myapp"
    ext = ".log"
    size = 1024
    log = "/var/log/walkctl-deletions.log"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from walkctl.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class WalkSettings(BaseModel):
    """Default values for run options.

    Attributes:
        root: Directory to walk when --root is not given.
        ext: Extension filter when --ext is not given (empty = no filter).
        size: Minimum file size in bytes when --size is not given.
        log: Audit log file when --log is not given (None = stdout).
    """

    model_config = ConfigDict(extra="forbid")

    root: Annotated[str, Field(min_length=1, description="Directory to walk")] = "."
    ext: Annotated[str, Field(description="Extension filter, including the dot")] = ""
    size: Annotated[int, Field(ge=0, description="Minimum file size in bytes")] = 0
    log: Annotated[str | None, Field(description="Deletion audit log file")] = None


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> WalkSettings:
    """Load run defaults from a TOML file.

    A missing file is not an error: the built-in defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated WalkSettings.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or violates the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return WalkSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return WalkSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: WalkSettings, path: Path | None = None) -> Path:
    """Save run defaults to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        settings: Settings to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    # TOML has no null, so unset values are left out
    data = settings.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, settings_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
