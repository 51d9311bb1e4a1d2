"""Relative path computation."""

from pathutil.services.normalizer import PARENT_DIR


def relative_to(path: str, base: str, separator: str = "/") -> str:
    """
    Compute the path that leads from directory ``base`` to ``path``.

    Segments are compared by exact string equality, so both inputs
    should already be normalized: ``a`` and ``./a`` do not match.

    Args:
        path: Destination path.
        base: Directory to navigate from.
        separator: Segment separator.

    Returns:
        One ``..`` per remaining ``base`` segment followed by the rest
        of ``path``, or the empty string when the inputs are equal.
    """
    path_parts = path.split(separator)
    base_parts = base.split(separator)

    common = 0
    for path_part, base_part in zip(path_parts, base_parts):
        if path_part != base_part:
            break
        common += 1

    climbs = [PARENT_DIR for part in base_parts[common:] if part]
    remainder = separator.join(path_parts[common:])

    if remainder:
        return separator.join([*climbs, remainder])
    return separator.join(climbs)
