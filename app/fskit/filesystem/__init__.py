"""Filesystem access layer.

This module provides path resolution, directory and file operations
with a uniform error taxonomy, and the directory listing engine that
classifies, filters and sorts the contents of a directory.
"""

from fskit.filesystem.directories import (
    copy_directory,
    create_directory,
    create_directory_symlink,
    delete_directory,
    get_directory_elements,
    is_directory,
    read_directory,
)
from fskit.filesystem.errors import ErrorCode, FilesystemError
from fskit.filesystem.files import (
    copy_file,
    create_file_symlink,
    delete_file,
    is_file,
    read_buffer_file,
    read_file,
    read_json_file,
    read_text_file,
    write_buffer_file,
    write_file,
    write_json_file,
    write_text_file,
)
from fskit.filesystem.general import get_path_element, path_exists
from fskit.filesystem.models import DirectoryPathElements, PathElement, SortKey, SortOrder
from fskit.filesystem.options import (
    DIRECTORY_ELEMENTS_DEFAULT_OPTIONS,
    DirectoryElementsOptions,
    build_directory_elements_options,
)

__all__ = [
    "DIRECTORY_ELEMENTS_DEFAULT_OPTIONS",
    "DirectoryElementsOptions",
    "DirectoryPathElements",
    "ErrorCode",
    "FilesystemError",
    "PathElement",
    "SortKey",
    "SortOrder",
    "build_directory_elements_options",
    "copy_directory",
    "copy_file",
    "create_directory",
    "create_directory_symlink",
    "create_file_symlink",
    "delete_directory",
    "delete_file",
    "get_directory_elements",
    "get_path_element",
    "is_directory",
    "is_file",
    "path_exists",
    "read_buffer_file",
    "read_directory",
    "read_file",
    "read_json_file",
    "read_text_file",
    "write_buffer_file",
    "write_file",
    "write_json_file",
    "write_text_file",
]
