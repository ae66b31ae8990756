"""fskit - validated filesystem operations and directory listing."""

from fskit.filesystem import (
    DIRECTORY_ELEMENTS_DEFAULT_OPTIONS,
    DirectoryElementsOptions,
    DirectoryPathElements,
    ErrorCode,
    FilesystemError,
    PathElement,
    SortKey,
    SortOrder,
    build_directory_elements_options,
    copy_directory,
    copy_file,
    create_directory,
    create_directory_symlink,
    create_file_symlink,
    delete_directory,
    delete_file,
    get_directory_elements,
    get_path_element,
    is_directory,
    is_file,
    path_exists,
    read_buffer_file,
    read_directory,
    read_file,
    read_json_file,
    read_text_file,
    write_buffer_file,
    write_file,
    write_json_file,
    write_text_file,
)

__version__ = "0.1.0"

__all__ = [
    "DIRECTORY_ELEMENTS_DEFAULT_OPTIONS",
    "DirectoryElementsOptions",
    "DirectoryPathElements",
    "ErrorCode",
    "FilesystemError",
    "PathElement",
    "SortKey",
    "SortOrder",
    "__version__",
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
