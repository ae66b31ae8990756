"""Directory operations and the directory listing engine.

Provides validated wrappers around directory primitives (create,
delete, copy, symlink) and the engine that enumerates a directory,
classifies every entry and returns sorted, filtered lists.
"""

import logging
import os
import shutil
from collections.abc import Callable, Mapping

from fskit.filesystem.errors import ErrorCode, FilesystemError
from fskit.filesystem.general import StrPath, get_path_element
from fskit.filesystem.models import DirectoryPathElements, PathElement, SortKey, SortOrder
from fskit.filesystem.options import DirectoryElementsOptions, build_directory_elements_options

logger = logging.getLogger(__name__)


def is_directory(path: StrPath) -> bool:
    """Check if a path exists and is a directory.

    A symbolic link pointing to a directory is not a directory.

    Args:
        path: Path to check.

    Returns:
        True if the path is a directory, False otherwise (including absence).
    """
    el = get_path_element(path)
    return el is not None and el.is_directory


def delete_directory(path: StrPath) -> None:
    """Recursively delete the directory located at path.

    Deleting an absent path is a no-op. Any other entry found at path
    (file or symbolic link) is unlinked.

    Args:
        path: Directory to delete.
    """
    el = get_path_element(path)
    if el is None:
        return

    logger.debug("Deleting directory %s", el.path)
    try:
        if el.is_directory:
            shutil.rmtree(el.path)
        else:
            os.unlink(el.path)
    except FileNotFoundError:
        # Removed by someone else in the meantime
        logger.debug("Directory %s vanished before deletion", el.path)


def create_directory(path: StrPath, delete_if_exists: bool = False) -> None:
    """Create a directory, including any missing parent directories.

    Args:
        path: Directory to create.
        delete_if_exists: If True, an existing directory is deleted first.

    Raises:
        FilesystemError: DIRECTORY_ALREADY_EXISTS if the directory exists
            and delete_if_exists is falsy.
    """
    if is_directory(path):
        if not delete_if_exists:
            msg = f"The directory '{os.fspath(path)}' already exists."
            raise FilesystemError(msg, ErrorCode.DIRECTORY_ALREADY_EXISTS)
        delete_directory(path)

    logger.debug("Creating directory %s", os.fspath(path))
    os.makedirs(path)


def copy_directory(src_path: StrPath, dest_path: StrPath) -> None:
    """Copy a directory and its whole subtree to dest_path.

    The destination is replaced, not merged: anything present at
    dest_path beforehand is deleted. Symbolic links are copied as links.

    Args:
        src_path: Directory to copy.
        dest_path: Destination path.

    Raises:
        FilesystemError: NOT_A_DIRECTORY if src_path is not a directory.
    """
    if not is_directory(src_path):
        msg = f"The src path '{os.fspath(src_path)}' is not a directory."
        raise FilesystemError(msg, ErrorCode.NOT_A_DIRECTORY)

    delete_directory(dest_path)
    logger.debug("Copying directory %s to %s", os.fspath(src_path), os.fspath(dest_path))
    shutil.copytree(src_path, dest_path, symlinks=True)


def create_directory_symlink(target: StrPath, path: StrPath) -> None:
    """Create a directory symbolic link at path pointing to target.

    Args:
        target: Existing directory the link points to.
        path: Location of the new link.

    Raises:
        FilesystemError: NON_EXISTENT_DIRECTORY if target does not exist,
            NOT_A_DIRECTORY if target is not a directory.
    """
    el = get_path_element(target)
    if el is None:
        msg = f"The target directory '{os.fspath(target)}' does not exist."
        raise FilesystemError(msg, ErrorCode.NON_EXISTENT_DIRECTORY)
    if not el.is_directory:
        msg = f"The target directory '{el.path}' is not a directory."
        raise FilesystemError(msg, ErrorCode.NOT_A_DIRECTORY)

    logger.debug("Linking %s -> %s", os.fspath(path), el.path)
    os.symlink(target, path, target_is_directory=True)


def read_directory(path: StrPath, recursive: bool = False) -> list[str]:
    """List the paths contained in a directory.

    Each child name is joined with path. The order is whatever the OS
    returns and must not be relied upon.

    Args:
        path: Directory to read.
        recursive: If True, descend into subdirectories (symbolic links
            to directories are not followed).

    Returns:
        List of child paths.

    Raises:
        FilesystemError: NOT_A_DIRECTORY if path is not a directory.
    """
    if not is_directory(path):
        msg = f"The path '{os.fspath(path)}' is not a directory."
        raise FilesystemError(msg, ErrorCode.NOT_A_DIRECTORY)

    root = os.fspath(path)
    if not recursive:
        return [os.path.join(root, name) for name in os.listdir(root)]

    paths: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        paths.extend(os.path.join(dirpath, name) for name in dirnames)
        paths.extend(os.path.join(dirpath, name) for name in filenames)
    return paths


def get_directory_elements(
    path: StrPath,
    options: DirectoryElementsOptions | Mapping[str, object] | None = None,
    recursive: bool = True,
) -> DirectoryPathElements:
    """Retrieve the classified, filtered and sorted elements of a directory.

    Every entry is routed to exactly one list, by priority:

    1. Directories.
    2. Regular files whose lowercased extension passes include_exts.
    3. Symbolic links.

    Files rejected by the extension filter are dropped entirely. Entries
    that disappear between enumeration and resolution are skipped.

    Args:
        path: Directory to list.
        options: Sorting and filtering options. Missing values use defaults.
        recursive: If True, include the entries of every subdirectory.

    Returns:
        DirectoryPathElements with each list sorted by the same key and order.

    Raises:
        FilesystemError: NOT_A_DIRECTORY if path is not a directory.
        pydantic.ValidationError: If options contains invalid values.
    """
    child_paths = read_directory(path, recursive=recursive)
    opts = build_directory_elements_options(options)

    directories: list[PathElement] = []
    files: list[PathElement] = []
    symbolic_links: list[PathElement] = []

    for child_path in child_paths:
        el = get_path_element(child_path)
        if el is None:
            logger.debug("Skipping %s: vanished before it could be read", child_path)
            continue

        if el.is_directory:
            directories.append(el)
        elif el.is_file and _passes_ext_filter(el, opts.include_exts):
            files.append(el)
        elif el.is_symbolic_link:
            symbolic_links.append(el)

    sort_key = _sort_key_func(opts.sort_by_key)
    reverse = opts.sort_order == SortOrder.DESC
    for elements in (directories, files, symbolic_links):
        elements.sort(key=sort_key, reverse=reverse)

    logger.debug(
        "Listed %s: %d directories, %d files, %d symbolic links",
        os.fspath(path),
        len(directories),
        len(files),
        len(symbolic_links),
    )
    return DirectoryPathElements(
        directories=directories,
        files=files,
        symbolic_links=symbolic_links,
    )


def _raise_walk_error(error: OSError) -> None:
    """Propagate enumeration failures that os.walk would otherwise ignore."""
    raise error


def _passes_ext_filter(el: PathElement, include_exts: tuple[str, ...]) -> bool:
    """Check a file's extension against the include list (empty = all)."""
    return not include_exts or el.ext_name.lower() in include_exts


def _sort_key_func(sort_by_key: SortKey) -> Callable[[PathElement], str | int]:
    """Return the key function that orders elements by sort_by_key."""
    if sort_by_key == SortKey.SIZE:
        return lambda el: el.size
    if sort_by_key == SortKey.CREATION:
        return lambda el: el.creation
    return lambda el: el.base_name.lower()
