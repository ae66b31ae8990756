"""Filesystem domain models for path resolution and directory listing.

This module defines the snapshot of a single filesystem entry, the
sort keys and orders understood by the listing engine, and the
classified result of listing a directory.
"""

from dataclasses import dataclass, field
from enum import Enum


class SortKey(str, Enum):
    """Attribute used to order listed path elements.

    Attributes:
        BASE_NAME: Last path segment, compared case-insensitively.
        SIZE: Size in bytes.
        CREATION: Creation timestamp in milliseconds.
    """

    BASE_NAME = "base_name"
    SIZE = "size"
    CREATION = "creation"


class SortOrder(str, Enum):
    """Direction in which listed path elements are ordered."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class PathElement:
    """Snapshot of one filesystem entry, taken with ``lstat``.

    Symbolic links are never followed: a link is reported with
    ``is_symbolic_link`` set and both ``is_file`` and ``is_directory``
    cleared, regardless of what it points to.

    Attributes:
        path: The path exactly as given by the caller.
        base_name: Last segment of the path.
        ext_name: Extension including the leading dot (e.g. ".json"),
            or an empty string if the entry has none.
        is_file: True if the entry is a regular file.
        is_directory: True if the entry is a directory.
        is_symbolic_link: True if the entry is a symbolic link.
        size: Size in bytes as reported by the OS.
        creation: Creation time in whole milliseconds since the epoch.
    """

    path: str
    base_name: str
    ext_name: str
    is_file: bool
    is_directory: bool
    is_symbolic_link: bool
    size: int
    creation: int

    def to_dict(self) -> dict[str, object]:
        """Serialize the element to a JSON-compatible dictionary."""
        return {
            "path": self.path,
            "base_name": self.base_name,
            "ext_name": self.ext_name,
            "is_file": self.is_file,
            "is_directory": self.is_directory,
            "is_symbolic_link": self.is_symbolic_link,
            "size": self.size,
            "creation": self.creation,
        }


@dataclass(frozen=True, slots=True)
class DirectoryPathElements:
    """Classified contents of a directory.

    Each list is sorted independently by the same key and order, and an
    element appears in at most one of them.

    Attributes:
        directories: Directory entries.
        files: Regular file entries that passed the extension filter.
        symbolic_links: Symbolic link entries.
    """

    directories: list[PathElement] = field(default_factory=list)
    files: list[PathElement] = field(default_factory=list)
    symbolic_links: list[PathElement] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of elements across all three lists."""
        return len(self.directories) + len(self.files) + len(self.symbolic_links)

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        """Serialize the listing to a JSON-compatible dictionary."""
        return {
            "directories": [el.to_dict() for el in self.directories],
            "files": [el.to_dict() for el in self.files],
            "symbolic_links": [el.to_dict() for el in self.symbolic_links],
        }
