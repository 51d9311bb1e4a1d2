"""Platform filesystem operations.

Thin wrappers over ``os`` calls that report failure through their
return value: probes and mutating operations return False, queries
return the empty string. The underlying error is logged at DEBUG.
"""

import errno
import fnmatch
import os
import stat
from collections.abc import Callable

from loguru import logger

from pathutil.errors import FilesystemError
from pathutil.services.components import basename, dirname
from pathutil.utils.retry import retry_filesystem

# errno values worth another attempt when retries are enabled
_TRANSIENT_ERRNOS = frozenset({errno.EAGAIN, errno.EBUSY, errno.EINTR, errno.ETXTBSY})

DEFAULT_DIRECTORY_MODE = 0o755


def _access(path: str, mode: int) -> bool:
    try:
        return os.access(path, mode)
    except ValueError:
        # Embedded NUL
        return False


def exists(path: str) -> bool:
    """Check that a path exists."""
    return _access(path, os.F_OK)


def is_readable(path: str) -> bool:
    """Check that a path is readable."""
    return _access(path, os.R_OK)


def is_writable(path: str) -> bool:
    """Check that a path is writable."""
    return _access(path, os.W_OK)


def is_executable(path: str) -> bool:
    """Check that a path is executable (searchable for directories)."""
    return _access(path, os.X_OK)


def is_directory(path: str) -> bool:
    """Check that a path is a directory, following symlinks."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def is_symlink(path: str) -> bool:
    """Check that a path is itself a symlink."""
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def current_directory() -> str:
    """Return the process working directory, or ``""`` if it is gone."""
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug("Working directory unavailable: {}", e)
        return ""


def touch(path: str) -> bool:
    """
    Make sure a writable file exists at path.

    An already writable path is left untouched; otherwise an empty
    file is created.

    Returns:
        True if the path is writable afterwards.
    """
    if is_writable(path):
        return True

    try:
        with open(path, "a"):
            pass
    except (OSError, ValueError) as e:
        logger.debug("Touch failed for {}: {}", path, e)
        return False
    return True


def remove(path: str, retries: int = 0) -> bool:
    """
    Remove a file.

    Args:
        path: File to unlink.
        retries: Extra attempts for transient failures, spaced with
            exponential backoff. Zero means a single attempt.

    Returns:
        True if the file was removed.
    """

    def unlink() -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise FilesystemError(
                f"Cannot remove: {e.strerror}",
                path,
                retryable=e.errno in _TRANSIENT_ERRNOS,
            ) from e

    operation = retry_filesystem(max_tries=retries + 1)(unlink) if retries > 0 else unlink

    try:
        operation()
    except FilesystemError as e:
        logger.debug("Remove failed for {}: {}", e.path, e)
        return False
    return True


def create_directory(path: str, mode: int = DEFAULT_DIRECTORY_MODE) -> bool:
    """
    Create a directory and every missing ancestor.

    Components that already exist as directories are not an error.

    Args:
        path: Directory to create.
        mode: Permission bits for new directories.

    Returns:
        True if path is a directory afterwards.
    """
    if not path:
        return False

    components: list[str] = []
    current = path
    while current != dirname(current):
        components.append(basename(current))
        current = dirname(current)

    for component in reversed(components):
        current = f"{current.rstrip('/')}/{component}"
        try:
            os.mkdir(current, mode)
        except FileExistsError:
            if not is_directory(current):
                logger.debug("Cannot create directory {}: a file is in the way", current)
                return False
        except OSError as e:
            logger.debug("Cannot create directory {}: {}", current, e)
            return False

    return True


def _matches(name: str, pattern: str, insensitive: bool) -> bool:
    # No escape character: a backslash matches itself
    if insensitive:
        return fnmatch.fnmatchcase(name.lower(), pattern.lower())
    return fnmatch.fnmatchcase(name, pattern)


def enumerate_directory(
    path: str,
    pattern: str,
    callback: Callable[[str], bool],
    insensitive: bool = False,
) -> bool:
    """
    Report the names of entries in a directory matching a glob pattern.

    Patterns support ``*``, ``?`` and ``[...]`` (``[!...]`` negates); any
    other character, backslash included, matches itself. An empty pattern
    matches everything. Entries starting with a dot are only reported
    when the pattern starts with one too; ``.`` and ``..`` never are.

    Args:
        path: Directory to list.
        pattern: Glob pattern applied to entry names.
        callback: Called with each matching name, in sorted order.
            Returning False stops the enumeration.
        insensitive: Match names case-insensitively.

    Returns:
        False if the directory could not be read.
    """
    pattern = pattern or "*"
    show_hidden = pattern.startswith(".")

    try:
        with os.scandir(path) as entries:
            names = sorted(entry.name for entry in entries)
    except (OSError, ValueError) as e:
        logger.debug("Cannot enumerate {}: {}", path, e)
        return False

    for name in names:
        if name.startswith(".") and not show_hidden:
            continue
        if not _matches(name, pattern, insensitive):
            continue
        if not callback(name):
            break

    return True


def enumerate_recursive(
    path: str,
    pattern: str,
    callback: Callable[[str], object],
    insensitive: bool = False,
) -> bool:
    """
    Report full paths of matching entries below a directory.

    Matches in ``path`` are reported first, then each subdirectory is
    searched in turn. Symlinked directories are not followed.

    Returns:
        False if ``path`` itself could not be read.
    """

    def report(name: str) -> bool:
        callback(f"{path}/{name}")
        return True

    if not enumerate_directory(path, pattern, report, insensitive):
        return False

    def descend(name: str) -> bool:
        full = f"{path}/{name}"
        if is_directory(full) and not is_symlink(full):
            enumerate_recursive(full, pattern, callback, insensitive)
        return True

    enumerate_directory(path, "*", descend)
    return True
