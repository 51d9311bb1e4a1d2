"""Path component helpers.

``dirname`` and ``basename`` follow POSIX ``dirname(3)`` and
``basename(3)``: trailing separators are ignored and the empty path
stands for the current directory.
"""

from collections.abc import Iterable

SEPARATOR = "/"
EXTENSION_MARK = "."


def is_absolute(path: str) -> bool:
    """Check whether a path starts at the root."""
    return path.startswith(SEPARATOR)


def dirname(path: str) -> str:
    """
    Return the parent directory of a path.

    Args:
        path: Path string.

    Returns:
        Parent directory; ``.`` when the path has no separator and
        ``/`` for paths directly under the root.
    """
    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR if path else "."

    index = stripped.rfind(SEPARATOR)
    if index < 0:
        return "."
    return stripped[:index].rstrip(SEPARATOR) or SEPARATOR


def basename(path: str) -> str:
    """
    Return the final component of a path.

    Args:
        path: Path string.

    Returns:
        Last component; ``/`` for the root and ``.`` for the empty path.
    """
    if not path:
        return "."
    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR
    return stripped.rsplit(SEPARATOR, 1)[-1]


def extension(path: str) -> str:
    """Return the text after the last dot of the basename, or ``""``."""
    base = basename(path)
    index = base.rfind(EXTENSION_MARK)
    if index < 0:
        return ""
    return base[index + 1 :]


def base_without_extension(path: str) -> str:
    """
    Return the basename up to its last dot.

    A basename without any dot yields the empty string, mirroring
    ``extension``: there is no extension to strip.
    """
    base = basename(path)
    index = base.rfind(EXTENSION_MARK)
    if index < 0:
        return ""
    return base[:index]


def is_file_extension(
    path: str,
    extensions: str | Iterable[str],
    insensitive: bool = False,
) -> bool:
    """
    Check a path's extension.

    Args:
        path: Path string.
        extensions: One extension (without dot) or several.
        insensitive: Compare case-insensitively.

    Returns:
        True if the extension matches. A path without extension matches
        a single ``""`` but never any member of a collection.
    """
    actual = extension(path)

    if isinstance(extensions, str):
        if not actual:
            return not extensions
        candidates: Iterable[str] = (extensions,)
    else:
        if not actual:
            return False
        candidates = extensions

    if insensitive:
        actual = actual.casefold()
        return any(actual == candidate.casefold() for candidate in candidates)
    return any(actual == candidate for candidate in candidates)
