"""File search service.

Looks a name up in an ordered list of directories the way a POSIX
shell searches ``PATH``: directories are tried in order, repeated
directories are tried once, and the first hit wins.
"""

import os
from collections.abc import Callable, Iterable, Mapping, Sequence

from loguru import logger

from pathutil.config.models import SearchConfig
from pathutil.services import filesystem
from pathutil.services.resolver import NOT_FOUND, PathResolver

Probe = Callable[[str], bool]


def _unique(directories: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for directory in directories:
        if directory in seen:
            continue
        seen.add(directory)
        ordered.append(directory)
    return ordered


def parse_search_path(value: str, delimiter: str = ":") -> list[str]:
    """
    Split a ``PATH``-style string into an ordered directory list.

    Later occurrences of a directory are dropped. An empty entry
    stands for the current directory.

    Args:
        value: Delimited directory list.
        delimiter: Entry delimiter.

    Returns:
        Directories in first-seen order.
    """
    if not value:
        return []
    return _unique(entry or "." for entry in value.split(delimiter))


class FileSearcher:
    """Finds files and executables in ordered directory lists."""

    def __init__(
        self,
        config: SearchConfig | None = None,
        resolver: PathResolver | None = None,
        environ: Mapping[str, str] | None = None,
        exists: Probe = filesystem.exists,
        is_executable: Probe = filesystem.is_executable,
    ) -> None:
        """Initialize searcher.

        Args:
            config: Search variable and delimiter settings.
            resolver: Turns matches into normalized absolute paths.
            environ: Environment to read the search variable from.
                Defaults to the live process environment.
            exists: Existence probe.
            is_executable: Execute-permission probe.
        """
        self.config = config or SearchConfig()
        self.resolver = resolver or PathResolver()
        self._environ = environ
        self._exists = exists
        self._is_executable = is_executable

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def directories(self, search_paths: str | Sequence[str]) -> list[str]:
        """Turn a delimited string or a sequence into a deduplicated list."""
        if isinstance(search_paths, str):
            return parse_search_path(search_paths, self.config.delimiter)
        return _unique(search_paths)

    def find_file(self, name: str, search_paths: str | Sequence[str]) -> str:
        """
        Find the first directory containing name.

        Args:
            name: Entry name, possibly with subdirectories.
            search_paths: Directories to try, in order.

        Returns:
            Normalized absolute path of the match, or NOT_FOUND.
        """
        return self._search(name, search_paths, self._exists)

    def find_executable(self, name: str, search_paths: str | Sequence[str] | None = None) -> str:
        """
        Find name in the search list and check that it is executable.

        Only the first existing match is considered: if it lacks
        execute permission the lookup fails rather than moving on to
        later directories.

        Args:
            name: Executable name.
            search_paths: Directories to try. Defaults to the search
                variable of the environment (``PATH``).

        Returns:
            For a delimited string (or the environment), the canonical
            path of the executable with symlinks resolved. For a
            sequence, its normalized absolute path. NOT_FOUND if
            nothing matches, the match is not executable, name is
            empty, or no search list exists.
        """
        if not name:
            return NOT_FOUND

        if search_paths is None:
            search_paths = self.environ.get(self.config.path_variable)
            if search_paths is None:
                logger.debug("{} is not set; cannot look up {}", self.config.path_variable, name)
                return NOT_FOUND

        found = self._search(name, search_paths, self._exists)
        if not found:
            return NOT_FOUND
        if not self._is_executable(found):
            logger.trace("{} is not executable", found)
            return NOT_FOUND

        if isinstance(search_paths, str):
            return self.resolver.resolve_canonical(found)
        return found

    def _search(self, name: str, search_paths: str | Sequence[str], probe: Probe) -> str:
        if not name:
            return NOT_FOUND

        for directory in self.directories(search_paths):
            candidate = f"{directory}/{name}"
            if probe(candidate):
                found = self.resolver.resolve_relative(self.resolver.normalizer.normalize(candidate))
                logger.trace("Found {} at {}", name, found)
                return found

        logger.trace("{} not found in search path", name)
        return NOT_FOUND


def find_file(name: str, search_paths: str | Sequence[str]) -> str:
    """Find the first directory in search_paths containing name."""
    return FileSearcher().find_file(name, search_paths)


def find_executable(name: str, search_paths: str | Sequence[str] | None = None) -> str:
    """Find an executable in search_paths, or in ``PATH`` by default."""
    return FileSearcher().find_executable(name, search_paths)
