"""POSIX path normalization, resolution and search utilities."""

__version__ = "0.1.0"

from pathutil.services.components import (
    base_without_extension,
    basename,
    dirname,
    extension,
    is_absolute,
    is_file_extension,
)
from pathutil.services.normalizer import PathNormalizer, normalize
from pathutil.services.relative import relative_to
from pathutil.services.resolver import (
    NOT_FOUND,
    PathResolver,
    WorkingDirectory,
    resolve_canonical,
    resolve_relative,
)
from pathutil.services.searcher import (
    FileSearcher,
    find_executable,
    find_file,
    parse_search_path,
)

__all__ = [
    "NOT_FOUND",
    "FileSearcher",
    "PathNormalizer",
    "PathResolver",
    "WorkingDirectory",
    "__version__",
    "base_without_extension",
    "basename",
    "dirname",
    "extension",
    "find_executable",
    "find_file",
    "is_absolute",
    "is_file_extension",
    "normalize",
    "parse_search_path",
    "relative_to",
    "resolve_canonical",
    "resolve_relative",
]
