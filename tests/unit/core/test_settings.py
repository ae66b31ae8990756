"""Unit tests for user settings.

Tests for loading, validating and saving the TOML settings file.
"""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from fskit.core.settings import (
    ListingSettings,
    Settings,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
    load_settings,
    load_settings_or_default,
    save_settings,
)
from fskit.filesystem.models import SortKey, SortOrder
from pydantic import ValidationError


class TestSettingsModel:
    """Tests for the Settings and ListingSettings models."""

    def test_defaults(self) -> None:
        """Defaults match the listing engine defaults."""
        settings = Settings()

        assert settings.listing.sort_by_key == SortKey.BASE_NAME
        assert settings.listing.sort_order == SortOrder.ASC
        assert settings.listing.include_exts == []
        assert settings.json_indent == 2

    def test_extension_must_start_with_dot(self) -> None:
        """Extensions without a leading dot are rejected."""
        with pytest.raises(ValidationError, match="must start with"):
            ListingSettings(include_exts=["json"])

    @pytest.mark.parametrize("indent", [-1, 9])
    def test_json_indent_bounds(self, indent: int) -> None:
        """JSON indentation is limited to 0-8."""
        with pytest.raises(ValidationError):
            Settings(json_indent=indent)

    def test_extra_keys_rejected(self) -> None:
        """Unknown keys are errors, not silently dropped."""
        with pytest.raises(ValidationError):
            Settings.model_validate({"colour": "red"})

    def test_to_options(self) -> None:
        """Listing settings convert to engine options."""
        listing = ListingSettings(
            sort_by_key=SortKey.SIZE,
            sort_order=SortOrder.DESC,
            include_exts=[".JSON"],
        )

        opts = listing.to_options()

        assert opts.sort_by_key == SortKey.SIZE
        assert opts.sort_order == SortOrder.DESC
        assert opts.include_exts == (".json",)


class TestLoadSettings:
    """Tests for load_settings and load_settings_or_default."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises SettingsNotFoundError."""
        with pytest.raises(SettingsNotFoundError):
            load_settings(tmp_path / "config.toml")

    def test_valid_file(self, tmp_path: Path) -> None:
        """A valid TOML file is parsed and validated."""
        path = tmp_path / "config.toml"
        path.write_text(
            'json_indent = 4\n\n[listing]\nsort_by_key = "size"\ninclude_exts = [".md"]\n'
        )

        settings = load_settings(path)

        assert settings.json_indent == 4
        assert settings.listing.sort_by_key == SortKey.SIZE
        assert settings.listing.sort_order == SortOrder.ASC
        assert settings.listing.include_exts == [".md"]

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises SettingsParseError."""
        path = tmp_path / "config.toml"
        path.write_text("[listing\n")

        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text('[listing]\nsort_order = "sideways"\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_default_path(self, isolated_config_home: Path) -> None:
        """Without a path, the XDG location is used."""
        config_dir = isolated_config_home / "fskit"
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("json_indent = 0\n")

        assert load_settings().json_indent == 0

    def test_or_default_without_file(self, isolated_config_home: Path) -> None:
        """A missing file yields the defaults."""
        assert load_settings_or_default() == Settings()

    def test_or_default_propagates_parse_errors(self, tmp_path: Path) -> None:
        """Only a missing file falls back, broken files still fail."""
        path = tmp_path / "config.toml"
        path.write_text("not = [valid")

        with pytest.raises(SettingsParseError):
            load_settings_or_default(path)


class TestSaveSettings:
    """Tests for save_settings."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back equal."""
        path = tmp_path / "nested" / "config.toml"
        settings = Settings(
            listing=ListingSettings(sort_order=SortOrder.DESC, include_exts=[".py"]),
            json_indent=4,
        )

        saved = save_settings(settings, path)

        assert saved == path
        assert load_settings(path) == settings

    def test_writes_plain_values(self, tmp_path: Path) -> None:
        """Enums are stored by value."""
        path = tmp_path / "config.toml"

        save_settings(Settings(), path)

        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["listing"]["sort_by_key"] == "base_name"
        assert data["listing"]["sort_order"] == "asc"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """Only the settings file remains after an atomic write."""
        path = tmp_path / "config.toml"

        save_settings(Settings(), path)

        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_write_failure_cleans_up(self, tmp_path: Path) -> None:
        """A failed rename raises SettingsError and removes the temp file."""
        path = tmp_path / "config.toml"

        with (
            patch("fskit.core.settings.os.replace", side_effect=OSError("disk full")),
            pytest.raises(SettingsError, match="Failed to write settings"),
        ):
            save_settings(Settings(), path)

        assert list(tmp_path.iterdir()) == []
