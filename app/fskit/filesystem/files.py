"""File operations.

Validated wrappers around file primitives: text, JSON and binary
reads and writes, copy, delete and symbolic link creation. Writes
create the parent directory chain when it is missing.
"""

import json
import logging
import os
import shutil
from typing import Any, overload

from fskit.filesystem.directories import create_directory
from fskit.filesystem.errors import ErrorCode, FilesystemError
from fskit.filesystem.general import StrPath, get_path_element, path_exists

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

BufferLike = bytes | bytearray | memoryview


def is_file(path: StrPath) -> bool:
    """Check if a path exists and is a regular file.

    A symbolic link pointing to a file is not a file.

    Args:
        path: Path to check.

    Returns:
        True if the path is a file, False otherwise (including absence).
    """
    el = get_path_element(path)
    return el is not None and el.is_file


def write_file(path: StrPath, data: str | BufferLike, encoding: str | None = None) -> None:
    """Write data to a file, creating its parent directories if needed.

    An existing file is overwritten.

    Args:
        path: File to write.
        data: Text or binary content.
        encoding: Encoding used for text content. Defaults to UTF-8.
    """
    dir_name = os.path.dirname(os.fspath(path))
    if dir_name and not path_exists(dir_name):
        create_directory(dir_name)

    logger.debug("Writing file %s", os.fspath(path))
    if isinstance(data, str):
        with open(path, "w", encoding=encoding or DEFAULT_ENCODING, newline="") as f:
            f.write(data)
    else:
        with open(path, "wb") as f:
            f.write(data)


def write_text_file(path: StrPath, data: str) -> None:
    """Write a UTF-8 text file.

    Args:
        path: File to write.
        data: Non-empty text content.

    Raises:
        FilesystemError: FILE_CONTENT_IS_EMPTY_OR_INVALID if data is not a
            non-empty string.
    """
    if not isinstance(data, str) or not data:
        msg = f"The data for the file '{os.fspath(path)}' is empty or invalid. Received: {data!r}"
        raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID)
    write_file(path, data, encoding=DEFAULT_ENCODING)


def write_json_file(path: StrPath, data: Any, indent: int = 2) -> None:
    """Write a JSON file. Strings are written as-is, anything else is serialized.

    Nothing is written if serialization fails.

    Args:
        path: File to write.
        data: JSON text or a JSON-serializable value.
        indent: Indentation used when serializing.

    Raises:
        FilesystemError: FILE_CONTENT_IS_EMPTY_OR_INVALID if data cannot be
            serialized or serializes to an empty string.
    """
    if isinstance(data, str):
        content = data
    else:
        try:
            content = json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            msg = f"The JSON data for the file '{os.fspath(path)}' could not be serialized: {e}"
            raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID) from e
    write_text_file(path, content)


def write_buffer_file(path: StrPath, data: BufferLike) -> None:
    """Write a binary file.

    Args:
        path: File to write.
        data: Binary content.

    Raises:
        FilesystemError: FILE_CONTENT_IS_EMPTY_OR_INVALID if data is not a
            bytes-like buffer.
    """
    if not isinstance(data, bytes | bytearray | memoryview):
        msg = f"The data for the file '{os.fspath(path)}' is not a valid buffer. Received: {data!r}"
        raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID)
    write_file(path, data)


@overload
def read_file(path: StrPath, encoding: None = None) -> bytes: ...


@overload
def read_file(path: StrPath, encoding: str) -> str: ...


def read_file(path: StrPath, encoding: str | None = None) -> str | bytes:
    """Read the contents of a file.

    Args:
        path: File to read.
        encoding: If given, decode the content to text with it.

    Returns:
        Text when an encoding is given, raw bytes otherwise.

    Raises:
        FilesystemError: NOT_A_FILE if path is absent or not a file.
    """
    if not is_file(path):
        msg = f"The path '{os.fspath(path)}' is not a file."
        raise FilesystemError(msg, ErrorCode.NOT_A_FILE)

    if encoding is None:
        with open(path, "rb") as f:
            return f.read()
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def read_text_file(path: StrPath) -> str:
    """Read a UTF-8 text file.

    Raises:
        FilesystemError: NOT_A_FILE if path is absent or not a file,
            FILE_CONTENT_IS_EMPTY_OR_INVALID if the file is empty or is not
            valid UTF-8.
    """
    try:
        content = read_file(path, encoding=DEFAULT_ENCODING)
    except UnicodeDecodeError as e:
        msg = f"The file '{os.fspath(path)}' is not valid text: {e}"
        raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID) from e

    if not content:
        msg = f"The file '{os.fspath(path)}' is empty or invalid."
        raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID)
    return content


def read_json_file(path: StrPath) -> Any:
    """Read and parse a JSON file.

    Raises:
        FilesystemError: NOT_A_FILE if path is absent or not a file,
            FILE_CONTENT_IS_EMPTY_OR_INVALID if the file is empty or cannot
            be parsed.
    """
    content = read_text_file(path)
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        msg = f"The JSON file '{os.fspath(path)}' could not be parsed: {e}"
        raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID) from e


def read_buffer_file(path: StrPath) -> bytes:
    """Read a binary file.

    Raises:
        FilesystemError: NOT_A_FILE if path is absent or not a file,
            FILE_CONTENT_IS_EMPTY_OR_INVALID if the file is empty.
    """
    content = read_file(path)
    if not content:
        msg = f"The file '{os.fspath(path)}' is empty."
        raise FilesystemError(msg, ErrorCode.FILE_CONTENT_IS_EMPTY_OR_INVALID)
    return content


def copy_file(src_path: StrPath, dest_path: StrPath) -> None:
    """Copy a file, replacing the destination if it exists.

    Args:
        src_path: File to copy.
        dest_path: Destination file path.

    Raises:
        FilesystemError: NOT_A_FILE if src_path is absent or not a file.
    """
    if not is_file(src_path):
        msg = f"The path '{os.fspath(src_path)}' is not a file."
        raise FilesystemError(msg, ErrorCode.NOT_A_FILE)

    logger.debug("Copying file %s to %s", os.fspath(src_path), os.fspath(dest_path))
    shutil.copyfile(src_path, dest_path)


def delete_file(path: StrPath) -> None:
    """Delete a regular file.

    Directories, symbolic links and absent paths are rejected.

    Raises:
        FilesystemError: NOT_A_FILE if path is absent or not a file.
    """
    if not is_file(path):
        msg = f"The path '{os.fspath(path)}' is not a file."
        raise FilesystemError(msg, ErrorCode.NOT_A_FILE)

    logger.debug("Deleting file %s", os.fspath(path))
    os.unlink(path)


def create_file_symlink(target: StrPath, path: StrPath) -> None:
    """Create a file symbolic link at path pointing to target.

    Args:
        target: Existing file the link points to.
        path: Location of the new link.

    Raises:
        FilesystemError: NON_EXISTENT_FILE if target does not exist,
            NOT_A_FILE if target is not a regular file.
    """
    el = get_path_element(target)
    if el is None:
        msg = f"The target file '{os.fspath(target)}' does not exist."
        raise FilesystemError(msg, ErrorCode.NON_EXISTENT_FILE)
    if not el.is_file:
        msg = f"The target file '{el.path}' is not a file."
        raise FilesystemError(msg, ErrorCode.NOT_A_FILE)

    logger.debug("Linking %s -> %s", os.fspath(path), el.path)
    os.symlink(target, path)
