"""Path resolution shared by every filesystem operation.

The resolver never raises: a path that cannot be stat'ed is reported
as None so that each caller decides whether absence is an error.
"""

import os
import stat

from fskit.filesystem.models import PathElement

StrPath = str | os.PathLike[str]


def path_exists(path: StrPath) -> bool:
    """Check if a path exists (file or directory).

    Symbolic links are followed, so a dangling link does not exist.

    Args:
        path: Path to check.

    Returns:
        True if the path exists, False otherwise.
    """
    return os.path.exists(path)


def get_path_element(path: StrPath) -> PathElement | None:
    """Read the metadata of a path without following symbolic links.

    Args:
        path: Path to resolve.

    Returns:
        A fresh PathElement, or None if the path cannot be stat'ed.
    """
    path_str = os.fspath(path)
    try:
        st = os.lstat(path_str)
    except (OSError, ValueError):
        return None

    base_name = _base_name(path_str)
    return PathElement(
        path=path_str,
        base_name=base_name,
        ext_name=os.path.splitext(base_name)[1],
        is_file=stat.S_ISREG(st.st_mode),
        is_directory=stat.S_ISDIR(st.st_mode),
        is_symbolic_link=stat.S_ISLNK(st.st_mode),
        size=st.st_size,
        creation=round(_creation_time(st) * 1000),
    )


def _base_name(path: str) -> str:
    """Return the last segment of a path, ignoring trailing separators."""
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    return os.path.basename(stripped or path)


def _creation_time(st: os.stat_result) -> float:
    """Return the creation time in seconds.

    Falls back to st_ctime on platforms that do not record a birth time.
    """
    birthtime: float | None = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    return st.st_ctime
