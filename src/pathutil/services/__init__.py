"""pathutil services layer.

The normalizer is the leaf every other service funnels its results
through; the resolver and searcher add working-directory and
search-path handling on top of it.
"""

from pathutil.services.normalizer import PathNormalizer, normalize
from pathutil.services.relative import relative_to
from pathutil.services.resolver import NOT_FOUND, PathResolver, WorkingDirectory
from pathutil.services.searcher import FileSearcher, parse_search_path

__all__ = [
    "NOT_FOUND",
    "FileSearcher",
    "PathNormalizer",
    "PathResolver",
    "WorkingDirectory",
    "normalize",
    "parse_search_path",
    "relative_to",
]
