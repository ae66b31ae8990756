"""User settings for fskit.

Settings hold the defaults applied by the command-line front end:
how directory listings are sorted and filtered, and how JSON output
is indented. They are stored in ~/.config/fskit/config.toml.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fskit.core.paths import get_settings_path
from fskit.filesystem.models import SortKey, SortOrder
from fskit.filesystem.options import DirectoryElementsOptions

logger = logging.getLogger(__name__)


class ListingSettings(BaseModel):
    """Default options for directory listings.

    Attributes:
        sort_by_key: Attribute used to order listed elements.
        sort_order: Ascending or descending order.
        include_exts: File extensions to keep (empty = all).
    """

    model_config = ConfigDict(extra="forbid")

    sort_by_key: Annotated[SortKey, Field(description="Default sort key")] = SortKey.BASE_NAME
    sort_order: Annotated[SortOrder, Field(description="Default sort order")] = SortOrder.ASC
    include_exts: Annotated[
        list[str],
        Field(default_factory=list, description="Extensions to include"),
    ]

    @field_validator("include_exts", mode="after")
    @classmethod
    def validate_exts(cls, value: list[str]) -> list[str]:
        """Ensure every extension starts with a dot."""
        for ext in value:
            if not ext.startswith("."):
                msg = f"Extension must start with '.', got {ext!r}"
                raise ValueError(msg)
        return value

    def to_options(self) -> DirectoryElementsOptions:
        """Convert to the options understood by the listing engine."""
        return DirectoryElementsOptions(
            sort_by_key=self.sort_by_key,
            sort_order=self.sort_order,
            include_exts=tuple(self.include_exts),
        )


class Settings(BaseModel):
    """Top-level fskit settings.

    Attributes:
        listing: Defaults for directory listings.
        json_indent: Indentation used when printing JSON (0-8).
    """

    model_config = ConfigDict(extra="forbid")

    listing: Annotated[
        ListingSettings,
        Field(default_factory=ListingSettings, description="Listing defaults"),
    ]
    json_indent: Annotated[
        int,
        Field(ge=0, le=8, description="JSON indentation (0-8)"),
    ] = 2


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def load_settings_or_default(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Loaded Settings, or a default Settings if the file is missing.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No settings file found, using defaults")
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        settings: The Settings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    logger.debug("Saved settings to %s", settings_path)
    return settings_path
