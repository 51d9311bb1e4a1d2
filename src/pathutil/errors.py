"""pathutil error types.

Path lookups report failure through sentinel return values. The
exceptions here cover invalid configuration and faults that are
raised internally before being converted at the public boundary.
All of them inherit from PathUtilError.
"""


class PathUtilError(Exception):
    """Base exception for all pathutil errors."""


class ConfigurationError(PathUtilError):
    """Invalid configuration or normalizer arguments."""


class FilesystemError(PathUtilError):
    """A platform filesystem call failed."""

    def __init__(self, message: str, path: str, retryable: bool = True) -> None:
        super().__init__(message)
        self.path = path
        self.retryable = retryable
