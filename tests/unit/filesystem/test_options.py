"""Unit tests for directory listing options."""

import pytest
from fskit.filesystem.models import SortKey, SortOrder
from fskit.filesystem.options import (
    DIRECTORY_ELEMENTS_DEFAULT_OPTIONS,
    DirectoryElementsOptions,
    build_directory_elements_options,
)
from pydantic import ValidationError


class TestDirectoryElementsOptions:
    """Tests for DirectoryElementsOptions."""

    def test_defaults(self) -> None:
        """Defaults sort by name, ascending, with no filter."""
        opts = DirectoryElementsOptions()

        assert opts.sort_by_key == SortKey.BASE_NAME
        assert opts.sort_order == SortOrder.ASC
        assert opts.include_exts == ()

    def test_default_constant_matches_model_defaults(self) -> None:
        """The shared default instance equals a fresh default model."""
        assert DIRECTORY_ELEMENTS_DEFAULT_OPTIONS == DirectoryElementsOptions()

    def test_extensions_are_lowercased(self) -> None:
        """Extensions are normalized for case-insensitive matching."""
        opts = DirectoryElementsOptions(include_exts=(".JSON", ".Txt"))

        assert opts.include_exts == (".json", ".txt")

    def test_string_values_are_coerced(self) -> None:
        """Enum members can be given by value."""
        opts = DirectoryElementsOptions.model_validate({"sort_by_key": "size", "sort_order": "desc"})

        assert opts.sort_by_key is SortKey.SIZE
        assert opts.sort_order is SortOrder.DESC

    def test_unknown_field_is_rejected(self) -> None:
        """Typos in option names are not silently ignored."""
        with pytest.raises(ValidationError):
            DirectoryElementsOptions.model_validate({"sort_key": "size"})

    def test_invalid_sort_order(self) -> None:
        """Only asc and desc are accepted."""
        with pytest.raises(ValidationError):
            DirectoryElementsOptions.model_validate({"sort_order": "random"})

    def test_is_frozen(self) -> None:
        """Options cannot be mutated once built."""
        opts = DirectoryElementsOptions()
        with pytest.raises(ValidationError):
            opts.sort_order = SortOrder.DESC  # type: ignore[misc]


class TestBuildDirectoryElementsOptions:
    """Tests for build_directory_elements_options."""

    def test_none_returns_defaults(self) -> None:
        """No options at all yields the defaults."""
        assert build_directory_elements_options() is DIRECTORY_ELEMENTS_DEFAULT_OPTIONS
        assert build_directory_elements_options(None) is DIRECTORY_ELEMENTS_DEFAULT_OPTIONS

    def test_model_is_returned_unchanged(self) -> None:
        """A complete model needs no further work."""
        opts = DirectoryElementsOptions(sort_by_key=SortKey.CREATION)

        assert build_directory_elements_options(opts) is opts

    def test_partial_mapping_is_filled(self) -> None:
        """Missing keys take their default value."""
        opts = build_directory_elements_options({"sort_order": "desc"})

        assert opts.sort_by_key == SortKey.BASE_NAME
        assert opts.sort_order == SortOrder.DESC
        assert opts.include_exts == ()

    def test_none_values_are_filled(self) -> None:
        """Keys explicitly set to None also take their default."""
        opts = build_directory_elements_options(
            {"sort_by_key": None, "sort_order": None, "include_exts": None}
        )

        assert opts == DIRECTORY_ELEMENTS_DEFAULT_OPTIONS

    def test_empty_mapping(self) -> None:
        """An empty mapping is equivalent to no options."""
        assert build_directory_elements_options({}) == DIRECTORY_ELEMENTS_DEFAULT_OPTIONS

    def test_list_of_extensions(self) -> None:
        """Extensions may be given as a list."""
        opts = build_directory_elements_options({"include_exts": [".MD", ".rst"]})

        assert opts.include_exts == (".md", ".rst")

    def test_invalid_value(self) -> None:
        """Invalid values raise a validation error."""
        with pytest.raises(ValidationError):
            build_directory_elements_options({"sort_by_key": "owner"})
