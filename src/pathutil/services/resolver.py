"""Path resolution service.

Builds absolute and canonical forms of paths. Relative paths are
anchored at an explicit working directory instead of hidden process
state; callers that pass none get a snapshot taken once per call.
"""

from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict

from pathutil.services.components import is_absolute
from pathutil.services.filesystem import current_directory
from pathutil.services.normalizer import PathNormalizer

NOT_FOUND = ""


class WorkingDirectory(BaseModel):
    """Directory that relative paths are resolved against.

    Attributes:
        path: Absolute directory path.
    """

    model_config = ConfigDict(frozen=True)

    path: str

    @classmethod
    def snapshot(cls) -> "WorkingDirectory":
        """Capture the process working directory."""
        return cls(path=current_directory())

    def __str__(self) -> str:
        return self.path


class PathResolver:
    """Resolves paths to absolute and canonical forms."""

    def __init__(
        self,
        working_directory: WorkingDirectory | str | None = None,
        normalizer: PathNormalizer | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            working_directory: Directory pinned for every call. When
                omitted, each call snapshots the process directory.
            normalizer: Normalizer for resolved paths.
        """
        if isinstance(working_directory, str):
            working_directory = WorkingDirectory(path=working_directory)
        self.working_directory = working_directory
        self.normalizer = normalizer or PathNormalizer()

    def resolve_relative(
        self,
        path: str,
        working_directory: WorkingDirectory | str | None = None,
    ) -> str:
        """Anchor a relative path at a working directory.

        Args:
            path: Path to resolve. Absolute paths are returned unchanged.
            working_directory: Overrides the resolver's directory.

        Returns:
            Normalized absolute path.
        """
        if is_absolute(path):
            return path

        directory = working_directory or self.working_directory or WorkingDirectory.snapshot()
        sep = self.normalizer.separator
        combined = f"{directory}{sep}{path}" if path else str(directory)
        return self.normalizer.normalize(combined)

    def resolve_canonical(self, path: str) -> str:
        """Resolve symlinks and make a path absolute.

        Returns:
            Canonical path, or NOT_FOUND if the path does not exist,
            cannot be accessed or loops.
        """
        if not path:
            return NOT_FOUND
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug("Cannot canonicalize {}: {}", path, e)
            return NOT_FOUND


_DEFAULT = PathResolver()


def resolve_relative(path: str, working_directory: WorkingDirectory | str | None = None) -> str:
    """Anchor a relative path at a working directory, the process one by default."""
    return _DEFAULT.resolve_relative(path, working_directory)


def resolve_canonical(path: str) -> str:
    """Resolve symlinks and make a path absolute; NOT_FOUND on failure."""
    return _DEFAULT.resolve_canonical(path)
