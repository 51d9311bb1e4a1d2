"""Path normalization service.

Turns a POSIX-style path string into its canonical form in a single
left-to-right pass:

- Runs of separators collapse into one; a leading separator marks
  the path as absolute and is kept.
- In an absolute path ``.`` segments disappear and ``..`` removes the
  preceding segment. A ``..`` at the root is absorbed, so the result
  never climbs above ``/``.
- In a relative path ``.`` and ``..`` are copied through unresolved,
  since there is no anchor to climb from.
- Characters from a forbidden set are replaced, not dropped, so the
  segment structure is preserved.
"""

from pathutil.config.models import NormalizationConfig
from pathutil.errors import ConfigurationError

CURRENT_DIR = "."
PARENT_DIR = ".."


class PathNormalizer:
    """Normalizes path strings.

    Instances hold only the separator, forbidden characters and the
    replacement character, so one normalizer can be shared freely.
    """

    def __init__(
        self,
        separator: str = "/",
        forbidden_characters: str = "",
        replacement: str = "-",
    ) -> None:
        """Initialize normalizer.

        Args:
            separator: Single segment separator character.
            forbidden_characters: Characters to substitute in segments.
            replacement: Single character substituted for forbidden ones.

        Raises:
            ConfigurationError: If the characters conflict with each other.
        """
        if len(separator) != 1:
            raise ConfigurationError(f"separator must be one character, got {separator!r}")
        if len(replacement) != 1:
            raise ConfigurationError(f"replacement must be one character, got {replacement!r}")
        if replacement == separator:
            raise ConfigurationError("replacement must differ from separator")
        if separator in forbidden_characters:
            raise ConfigurationError("separator cannot be a forbidden character")
        if replacement in forbidden_characters:
            raise ConfigurationError("replacement cannot be a forbidden character")

        self.separator = separator
        self.forbidden_characters = frozenset(forbidden_characters)
        self.replacement = replacement

    @classmethod
    def from_config(cls, config: NormalizationConfig) -> "PathNormalizer":
        """Create a normalizer from configuration."""
        return cls(
            separator=config.separator,
            forbidden_characters=config.forbidden_characters,
            replacement=config.replacement,
        )

    def normalize(self, path: str) -> str:
        """Normalize a path string.

        Args:
            path: Path to normalize.

        Returns:
            Normalized path. The empty string stays empty.
        """
        if not path:
            return ""

        sep = self.separator
        absolute = path[0] == sep
        segments: list[str] = []
        # True when the last thing consumed marks a directory boundary
        trailing = False

        i = 0
        length = len(path)
        while i < length:
            if path[i] == sep:
                trailing = True
                i += 1
                continue

            end = path.find(sep, i)
            if end < 0:
                end = length
            segment = path[i:end]
            i = end

            if absolute and segment == CURRENT_DIR:
                trailing = True
                continue
            if absolute and segment == PARENT_DIR:
                if segments:
                    segments.pop()
                trailing = True
                continue

            segments.append(self._substitute(segment))
            trailing = False

        body = sep.join(segments)
        if trailing and segments:
            body += sep
        return sep + body if absolute else body

    def _substitute(self, segment: str) -> str:
        if not self.forbidden_characters:
            return segment
        return "".join(
            self.replacement if char in self.forbidden_characters else char for char in segment
        )


_DEFAULT = PathNormalizer()


def normalize(
    path: str,
    separator: str = "/",
    forbidden_characters: str = "",
    replacement: str = "-",
) -> str:
    """
    Normalize a path string.

    Args:
        path: Path to normalize.
        separator: Single segment separator character.
        forbidden_characters: Characters to replace.
        replacement: Character substituted for forbidden ones.

    Returns:
        Normalized path.
    """
    if separator == "/" and not forbidden_characters and replacement == "-":
        return _DEFAULT.normalize(path)
    return PathNormalizer(separator, forbidden_characters, replacement).normalize(path)
