"""Options for querying the elements of a directory.

Provides the validated options model used by the listing engine and a
builder that fills any missing value with its default.
"""

from collections.abc import Mapping
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fskit.filesystem.models import SortKey, SortOrder


class DirectoryElementsOptions(BaseModel):
    """Sorting and filtering applied when listing a directory.

    Attributes:
        sort_by_key: Attribute used to order each list.
        sort_order: Ascending or descending order.
        include_exts: File extensions to keep, each with its leading dot.
            Matching is case-insensitive. Empty means every file is kept.
            Directories and symbolic links are never filtered.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sort_by_key: Annotated[
        SortKey,
        Field(description="Key used to sort the elements"),
    ] = SortKey.BASE_NAME
    sort_order: Annotated[
        SortOrder,
        Field(description="Sort direction"),
    ] = SortOrder.ASC
    include_exts: Annotated[
        tuple[str, ...],
        Field(description="File extensions to include (empty = all)"),
    ] = ()

    @field_validator("include_exts", mode="after")
    @classmethod
    def normalize_exts(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase every extension so the filter ignores case."""
        return tuple(ext.lower() for ext in value)


DIRECTORY_ELEMENTS_DEFAULT_OPTIONS = DirectoryElementsOptions()


def build_directory_elements_options(
    options: DirectoryElementsOptions | Mapping[str, object] | None = None,
) -> DirectoryElementsOptions:
    """Build the options used to query the elements of a directory.

    Values that are missing or None are filled with the defaults.

    Args:
        options: A ready options model, a mapping of partial values, or None.

    Returns:
        A complete DirectoryElementsOptions.

    Raises:
        pydantic.ValidationError: If a provided value is invalid.
    """
    if options is None:
        return DIRECTORY_ELEMENTS_DEFAULT_OPTIONS
    if isinstance(options, DirectoryElementsOptions):
        return options

    provided = {key: value for key, value in options.items() if value is not None}
    return DirectoryElementsOptions.model_validate(provided)
